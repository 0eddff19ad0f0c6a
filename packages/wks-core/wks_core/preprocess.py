"""
Document preprocessing around the key-value store.

On save, the three collections of a workspace document are written out
as artifacts and emptied on the document, so the base document never
carries them. On load, the artifacts are read back and appended to the
document's collections.
"""
from __future__ import annotations

import logging
from typing import List

from .artifacts.codec import load_collection, save_collection
from .artifacts.layout import ensure_artifacts_layout
from .errors import EntityFileError
from .models import Collection, Document, LoadIssue
from .persistence.interfaces import PathLike, StorageRoot

logger = logging.getLogger(__name__)

# Order in which collections are written and merged
COLLECTION_ORDER = (Collection.ROUTES, Collection.ROOT_CHILDREN, Collection.FOLDERS)

# Fields required before artifacts are merged on load. folders is not
# required here; a document without it merges routes and rootChildren only.
LOAD_SCHEMA_FIELDS = (Collection.ROUTES, Collection.ROOT_CHILDREN)


def detect_split_schema(document: Document) -> bool:
    """True iff the document has routes, rootChildren and folders."""
    return all(document.has_collection(c) for c in COLLECTION_ORDER)


def detect_load_schema(document: Document) -> bool:
    """True iff the document has routes and rootChildren."""
    return all(document.has_collection(c) for c in LOAD_SCHEMA_FIELDS)


class DocumentPreprocessor:
    """Splits collections out on save and merges them back on load."""

    def __init__(self, storage: StorageRoot):
        self.storage = storage

    def on_save(self, document_dir: PathLike, base_name: str, document: Document) -> bool:
        """
        Write the document's collections as artifacts, then empty them.

        Mutates ``document``. Storage errors propagate.

        Returns:
            True if the document was split, False if it was left untouched
        """
        if not detect_split_schema(document):
            return False

        ensure_artifacts_layout(self.storage, document_dir, base_name)

        for collection in COLLECTION_ORDER:
            save_collection(
                self.storage,
                document_dir,
                base_name,
                collection,
                document.get_collection(collection),
            )

        for collection in COLLECTION_ORDER:
            document.set_collection(collection, [])

        logger.debug(f"Split collections of '{base_name}' into artifacts under {document_dir}")
        return True

    def on_load(self, document_dir: PathLike, base_name: str, document: Document) -> List[LoadIssue]:
        """
        Append artifacts to the document's collections.

        Mutates ``document``. All collections are read before any is
        merged, so a failed read leaves the document unmerged. A missing
        field stops the merge; collections merged before it are kept.

        Returns:
            Issues met while merging (empty on success)
        """
        if not detect_load_schema(document):
            return []

        loaded = {}
        for collection in COLLECTION_ORDER:
            try:
                loaded[collection] = load_collection(self.storage, document_dir, base_name, collection)
            except EntityFileError as e:
                logger.warning(f"Failed to load '{collection.value}' artifacts of '{base_name}': {e}")
                return [LoadIssue(message=str(e), collection=collection, path=e.path)]
            except OSError as e:
                logger.warning(f"Failed to read '{collection.value}' artifacts of '{base_name}': {e}")
                path = str(e.filename) if e.filename is not None else None
                return [LoadIssue(message=str(e), collection=collection, path=path)]

        for collection in COLLECTION_ORDER:
            if not document.has_collection(collection):
                issue = LoadIssue(
                    message=f"Document '{base_name}' has no '{collection.value}' field to merge into",
                    collection=collection,
                )
                logger.warning(issue.message)
                return [issue]

            current = document.get_collection(collection) or []
            document.set_collection(collection, current + loaded[collection])

        return []

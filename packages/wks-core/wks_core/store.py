"""
WKS Document Store - read/write workspace documents.

A document is addressed by a path that is either a bare key ("workspace")
or a path with directory components ("projects/workspace.json"). The
directory becomes the root for both the base document and its artifacts:

    projects/workspace.json
    projects/workspace.artifacts/routes/<uuid>.json
    projects/workspace.artifacts/rootchildren/<uuid>.json
    projects/workspace.artifacts/folders/<uuid>.json

Bare keys are rooted at the configured data path.
"""
from __future__ import annotations

import asyncio
import logging
import os
from pathlib import PurePath
from typing import Any, Mapping, Optional, Tuple, Union

from pydantic import ValidationError

from .config import get_storage_settings
from .errors import InvalidKeyError
from .models import Document, LoadIssue, LoadResult
from .persistence.fs_store import FileStorageRoot, JsonKVStore
from .persistence.interfaces import KVStore, PathLike, StorageRoot
from .preprocess import DocumentPreprocessor

logger = logging.getLogger(__name__)

DocumentLike = Union[Document, Mapping[str, Any]]


class DocumentStore:
    """
    Persists workspace documents, splitting their collections into artifacts.

    Usage:
        store = DocumentStore()
        store.write_document(doc, "projects/workspace.json")
        doc = store.read_document("projects/workspace.json")
    """

    def __init__(
        self,
        storage: Optional[StorageRoot] = None,
        kv: Optional[KVStore] = None,
        data_path: Optional[PathLike] = None,
        pretty_print: Optional[bool] = None,
    ):
        """
        Initialize the store.

        Args:
            storage: Storage root for artifacts (default: local filesystem)
            kv: Key-value store for base documents (default: JSON files on storage)
            data_path: Root for bare keys (default: configured storage.data_path)
            pretty_print: Default base document formatting (default: configured)
        """
        if data_path is None or pretty_print is None:
            settings = get_storage_settings()
            if data_path is None:
                data_path = settings["data_path"]
            if pretty_print is None:
                pretty_print = settings["pretty_print"]
        self.storage = storage if storage is not None else FileStorageRoot()
        self.kv = kv if kv is not None else JsonKVStore(self.storage)
        self.data_path = PurePath(data_path)
        self.pretty_print = pretty_print
        self.preprocessor = DocumentPreprocessor(self.storage)

    def split_path(self, path: PathLike) -> Tuple[PurePath, str]:
        """
        Split a document path into (directory, base_name).

        base_name is the file name without its extension. Bare keys are
        placed under the data path.
        """
        dir_part, file_part = os.path.split(str(path))
        base_name = PurePath(file_part).stem if file_part else ""
        if not base_name:
            raise InvalidKeyError(f"Cannot derive a document key from path '{path}'")
        directory = PurePath(dir_part) if dir_part else PurePath(self.data_path)
        return directory, base_name

    def load(self, path: PathLike) -> LoadResult:
        """
        Load a document and merge its artifacts back in.

        Returns:
            LoadResult whose document is None when the base document is
            absent, empty or unreadable, or the path names no document
        """
        try:
            directory, base_name = self.split_path(path)
        except InvalidKeyError as e:
            logger.warning(f"Could not read document '{path}': {e}")
            return LoadResult(issues=[LoadIssue(message=str(e), path=str(path))])

        try:
            raw = self.kv.get(base_name, directory)
        except (ValueError, OSError) as e:
            logger.warning(f"Could not read document '{path}': {e}")
            return LoadResult(issues=[LoadIssue(message=str(e), path=str(path))])

        if not raw:
            return LoadResult()
        if not isinstance(raw, dict):
            message = f"Document '{path}' is not a JSON object"
            logger.warning(message)
            return LoadResult(issues=[LoadIssue(message=message, path=str(path))])

        try:
            document = Document.model_validate(raw)
        except ValidationError as e:
            logger.warning(f"Could not parse document '{path}': {e}")
            return LoadResult(issues=[LoadIssue(message=str(e), path=str(path))])

        issues = self.preprocessor.on_load(directory, base_name, document)
        logger.debug(f"Loaded document '{base_name}' from {directory} ({len(issues)} issues)")
        return LoadResult(document=document, issues=issues)

    def read_document(self, path: PathLike) -> Optional[Document]:
        """Read a document, or None if it does not exist or does not parse."""
        return self.load(path).document

    def write_document(
        self,
        document: DocumentLike,
        path: PathLike,
        pretty_print: Optional[bool] = None,
    ) -> Document:
        """
        Write a document, splitting its collections into artifacts.

        A Document instance is mutated in place (its collections are
        emptied once written out). A plain mapping is validated into a new
        Document first. pretty_print only affects the base document.

        Returns:
            The document as written to the base file
        """
        if not isinstance(document, Document):
            document = Document.model_validate(document)
        if pretty_print is None:
            pretty_print = self.pretty_print

        directory, base_name = self.split_path(path)
        self.preprocessor.on_save(directory, base_name, document)
        self.kv.set(base_name, directory, document.to_dict(), pretty_print=pretty_print)
        logger.info(f"Saved document '{base_name}' to {directory}")
        return document

    async def load_async(self, path: PathLike) -> LoadResult:
        return await asyncio.to_thread(self.load, path)

    async def read_document_async(self, path: PathLike) -> Optional[Document]:
        return await asyncio.to_thread(self.read_document, path)

    async def write_document_async(
        self,
        document: DocumentLike,
        path: PathLike,
        pretty_print: Optional[bool] = None,
    ) -> Document:
        return await asyncio.to_thread(self.write_document, document, path, pretty_print)


# Default store (created on first use)
_DEFAULT_STORE: Optional[DocumentStore] = None


def get_default_store() -> DocumentStore:
    """Return the process-wide store backed by the local filesystem."""
    global _DEFAULT_STORE
    if _DEFAULT_STORE is None:
        _DEFAULT_STORE = DocumentStore()
    return _DEFAULT_STORE


def reset_default_store() -> None:
    """Forget the default store (picks up config changes; used by tests)."""
    global _DEFAULT_STORE
    _DEFAULT_STORE = None


def read_document(path: PathLike) -> Optional[Document]:
    """Read a document with the default store."""
    return get_default_store().read_document(path)


def write_document(
    document: DocumentLike,
    path: PathLike,
    pretty_print: Optional[bool] = None,
) -> Document:
    """Write a document with the default store."""
    return get_default_store().write_document(document, path, pretty_print)

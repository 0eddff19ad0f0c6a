"""
Artifacts directory layout.

    {document_dir}/
        {base_name}.json
        {base_name}.artifacts/
            routes/
            rootchildren/
            folders/
"""
from __future__ import annotations

from pathlib import PurePath
from typing import Union

from ..models import Collection
from ..persistence.interfaces import PathLike, StorageRoot

ARTIFACTS_SUFFIX = ".artifacts"


def artifacts_root(document_dir: PathLike, base_name: str) -> PurePath:
    """Path of the {base_name}.artifacts directory. No I/O."""
    return PurePath(document_dir) / f"{base_name}{ARTIFACTS_SUFFIX}"


def collection_directory(
    document_dir: PathLike,
    base_name: str,
    collection: Union[Collection, str],
) -> PurePath:
    """Path of one collection's directory. No I/O."""
    collection = Collection.from_name(collection)
    return artifacts_root(document_dir, base_name) / collection.directory_name


def ensure_artifacts_layout(storage: StorageRoot, document_dir: PathLike, base_name: str) -> PurePath:
    """
    Create the artifacts root and its collection directories if missing.

    Idempotent. Returns the artifacts root.
    """
    if not storage.is_dir(document_dir):
        storage.make_dirs(document_dir)

    root = artifacts_root(document_dir, base_name)
    if not storage.exists(root):
        storage.make_dir(root)

    for collection in Collection:
        path = root / collection.directory_name
        if not storage.exists(path):
            storage.make_dir(path)
    return root

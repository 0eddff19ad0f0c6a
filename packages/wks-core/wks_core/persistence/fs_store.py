"""
WKS Filesystem Storage Implementations.

Pure Python, no external dependencies.
"""
from __future__ import annotations

import json
import os
from pathlib import Path, PurePath
from typing import Any, List, Optional

from ..errors import InvalidKeyError
from .interfaces import KVStore, PathLike, StorageRoot


def get_wks_home() -> Path:
    """
    Get WKS home directory.

    Uses WKS_HOME env var or defaults to ~/.wks
    """
    home = os.environ.get("WKS_HOME")
    if home:
        return Path(home)
    return Path.home() / ".wks"


class FileStorageRoot(StorageRoot):
    """
    Local filesystem storage.

    Relative paths are resolved against ``base_dir`` when one is given,
    otherwise against the process working directory.
    """

    def __init__(self, base_dir: Optional[Path] = None):
        self.base_dir = Path(base_dir) if base_dir is not None else None

    def _resolve(self, path: PathLike) -> Path:
        p = Path(path)
        if self.base_dir is not None and not p.is_absolute():
            return self.base_dir / p
        return p

    def exists(self, path: PathLike) -> bool:
        return self._resolve(path).exists()

    def is_dir(self, path: PathLike) -> bool:
        return self._resolve(path).is_dir()

    def make_dir(self, path: PathLike) -> None:
        self._resolve(path).mkdir()

    def make_dirs(self, path: PathLike) -> None:
        self._resolve(path).mkdir(parents=True, exist_ok=True)

    def list_files(self, path: PathLike) -> List[str]:
        names = []
        for entry in self._resolve(path).iterdir():
            if entry.is_file():
                names.append(entry.name)
        return sorted(names)

    def read_text(self, path: PathLike) -> str:
        with open(self._resolve(path), "r", encoding="utf-8") as f:
            return f.read()

    def write_text(self, path: PathLike, text: str) -> None:
        with open(self._resolve(path), "w", encoding="utf-8") as f:
            f.write(text)


class JsonKVStore(KVStore):
    """
    Key-value storage of JSON documents.

    Stores each value as {directory}/{key}.json on the given storage root.
    """

    def __init__(self, storage: Optional[StorageRoot] = None):
        """
        Initialize the store.

        Args:
            storage: Storage root to write through (default: local filesystem)
        """
        self.storage = storage if storage is not None else FileStorageRoot()

    def _get_path(self, key: str, directory: PathLike) -> PurePath:
        """Get the path for a key."""
        if not key or not key.strip():
            raise InvalidKeyError("Document key must be a non-empty string")
        file_name = key if key.endswith(".json") else f"{key}.json"
        return PurePath(directory) / file_name

    def get(self, key: str, directory: PathLike) -> Optional[Any]:
        """Get a value. Raises json.JSONDecodeError on malformed content."""
        path = self._get_path(key, directory)
        if not self.storage.exists(path):
            return None
        return json.loads(self.storage.read_text(path))

    def set(self, key: str, directory: PathLike, value: Any, pretty_print: bool = False) -> None:
        """Set a value, creating the directory if needed."""
        path = self._get_path(key, directory)
        self.storage.make_dirs(directory)
        if pretty_print:
            text = json.dumps(value, indent=2, ensure_ascii=False)
        else:
            text = json.dumps(value, separators=(",", ":"), ensure_ascii=False)
        self.storage.write_text(path, text)

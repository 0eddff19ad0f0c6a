"""
In-memory storage root (no persistence). Useful for tests and sandboxes.
"""
from __future__ import annotations

from pathlib import PurePosixPath
from typing import Dict, List, Set

from .interfaces import PathLike, StorageRoot


class InMemoryStorageRoot(StorageRoot):
    """Trivial in-process file tree keyed by normalized POSIX paths."""

    def __init__(self):
        self._files: Dict[PurePosixPath, str] = {}
        self._dirs: Set[PurePosixPath] = {PurePosixPath("."), PurePosixPath("/")}

    @staticmethod
    def _norm(path: PathLike) -> PurePosixPath:
        return PurePosixPath(str(path).replace("\\", "/"))

    def exists(self, path: PathLike) -> bool:
        p = self._norm(path)
        return p in self._files or p in self._dirs

    def is_dir(self, path: PathLike) -> bool:
        return self._norm(path) in self._dirs

    def make_dir(self, path: PathLike) -> None:
        p = self._norm(path)
        if self.exists(p):
            raise FileExistsError(str(p))
        if p.parent not in self._dirs:
            raise FileNotFoundError(str(p.parent))
        self._dirs.add(p)

    def make_dirs(self, path: PathLike) -> None:
        p = self._norm(path)
        if p in self._files:
            raise FileExistsError(str(p))
        for parent in reversed(p.parents):
            if parent in self._files:
                raise NotADirectoryError(str(parent))
            self._dirs.add(parent)
        self._dirs.add(p)

    def list_files(self, path: PathLike) -> List[str]:
        p = self._norm(path)
        if p not in self._dirs:
            raise FileNotFoundError(str(p))
        return sorted(f.name for f in self._files if f.parent == p)

    def read_text(self, path: PathLike) -> str:
        p = self._norm(path)
        if p not in self._files:
            raise FileNotFoundError(str(p))
        return self._files[p]

    def write_text(self, path: PathLike, text: str) -> None:
        p = self._norm(path)
        if p in self._dirs:
            raise IsADirectoryError(str(p))
        if p.parent not in self._dirs:
            raise FileNotFoundError(str(p.parent))
        self._files[p] = text

"""
WKS Persistence Interfaces.

Abstract base classes for storage backends.
"""
from abc import ABC, abstractmethod
from pathlib import PurePath
from typing import Any, List, Optional, Union

PathLike = Union[str, PurePath]


class StorageRoot(ABC):
    """
    Interface for the file operations the document store performs.

    Every read and write goes through an instance of this class, so a
    store can be pointed at the local disk or at an in-memory tree.
    """

    @abstractmethod
    def exists(self, path: PathLike) -> bool:
        """Check if a file or directory exists."""
        pass

    @abstractmethod
    def is_dir(self, path: PathLike) -> bool:
        """Check if a path is an existing directory."""
        pass

    @abstractmethod
    def make_dir(self, path: PathLike) -> None:
        """Create a single directory. The parent must already exist."""
        pass

    @abstractmethod
    def make_dirs(self, path: PathLike) -> None:
        """Create a directory and any missing parents."""
        pass

    @abstractmethod
    def list_files(self, path: PathLike) -> List[str]:
        """
        List names of regular files directly inside a directory.

        Raises:
            FileNotFoundError: If the directory does not exist.
        """
        pass

    @abstractmethod
    def read_text(self, path: PathLike) -> str:
        """Read a whole file as text."""
        pass

    @abstractmethod
    def write_text(self, path: PathLike, text: str) -> None:
        """Create or overwrite a file. The parent directory must exist."""
        pass


class KVStore(ABC):
    """Interface for key-value storage of raw documents."""

    @abstractmethod
    def get(self, key: str, directory: PathLike) -> Optional[Any]:
        """Get a value, or None if the key is not stored."""
        pass

    @abstractmethod
    def set(self, key: str, directory: PathLike, value: Any, pretty_print: bool = False) -> None:
        """Set a value."""
        pass

"""Exception types raised by the workspace store."""
from __future__ import annotations

from pathlib import PurePath
from typing import Optional, Union


class WksError(Exception):
    """Base class for workspace store errors."""


class InvalidKeyError(WksError, ValueError):
    """Raised when a document key cannot be mapped to a file name."""


class EntityFileError(WksError):
    """Raised when an entity file cannot be parsed."""

    def __init__(self, message: str, path: Optional[Union[str, PurePath]] = None):
        super().__init__(message)
        self.path = str(path) if path is not None else None

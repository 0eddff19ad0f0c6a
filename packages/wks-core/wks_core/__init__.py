"""
WKS Core Library.

Persists workspace documents to disk:
- Base document stored as a JSON file through a key-value store
- routes / rootChildren / folders collections split into one file per entity
  under a sibling ``<name>.artifacts`` directory, merged back on load
- Injected storage roots (filesystem or in-memory)
"""

__version__ = "0.1.0"

from .errors import WksError, InvalidKeyError, EntityFileError
from .models import Collection, Document, Entity, LoadIssue, LoadResult
from .persistence import FileStorageRoot, InMemoryStorageRoot, JsonKVStore, StorageRoot
from .store import DocumentStore, read_document, write_document

__all__ = [
    "__version__",
    # Models
    "Collection",
    "Document",
    "Entity",
    "LoadIssue",
    "LoadResult",
    # Storage
    "StorageRoot",
    "FileStorageRoot",
    "InMemoryStorageRoot",
    "JsonKVStore",
    # Store
    "DocumentStore",
    "read_document",
    "write_document",
    # Errors
    "WksError",
    "InvalidKeyError",
    "EntityFileError",
]

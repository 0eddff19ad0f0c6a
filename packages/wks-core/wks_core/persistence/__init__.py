"""
WKS Persistence - Storage interfaces and implementations.

Pure Python, no external dependencies.
"""
from .interfaces import StorageRoot, KVStore
from .fs_store import FileStorageRoot, JsonKVStore, get_wks_home
from .memory_store import InMemoryStorageRoot

__all__ = [
    # Interfaces
    "StorageRoot",
    "KVStore",
    # Implementations
    "FileStorageRoot",
    "JsonKVStore",
    "InMemoryStorageRoot",
    # Utils
    "get_wks_home",
]

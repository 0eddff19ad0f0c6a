"""
WKS Document Models - Pydantic Models

Workspace documents are opaque records. Only three top-level collections
(routes, rootChildren, folders) are understood by the store, and of each
collection element only the ``uuid`` identifier is inspected.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# COLLECTIONS
# =============================================================================

class Collection(str, Enum):
    """Collections that are split out of a document into artifacts."""
    ROUTES = "routes"
    ROOT_CHILDREN = "rootChildren"
    FOLDERS = "folders"

    @property
    def attr(self) -> str:
        """Attribute name on the Document model."""
        return _COLLECTION_ATTRS[self]

    @property
    def directory_name(self) -> str:
        """Subdirectory name under the artifacts root."""
        return self.value.lower()

    @classmethod
    def from_name(cls, name: "str | Collection") -> "Collection":
        """Resolve a collection from its field, attribute or directory name."""
        if isinstance(name, cls):
            return name
        for collection in cls:
            if name in (collection.value, collection.attr, collection.directory_name):
                return collection
        raise ValueError(f"Unknown collection '{name}'. Valid: {[c.value for c in cls]}")


_COLLECTION_ATTRS = {
    Collection.ROUTES: "routes",
    Collection.ROOT_CHILDREN: "root_children",
    Collection.FOLDERS: "folders",
}


# =============================================================================
# DOCUMENT MODELS
# =============================================================================

class Entity(BaseModel):
    """One element of a split collection, persisted as its own file."""
    model_config = ConfigDict(extra="allow")

    uuid: str

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")

    def to_json(self) -> str:
        """Compact JSON form used for entity files."""
        return self.model_dump_json()


class Document(BaseModel):
    """
    Top-level workspace document.

    A collection counts as present when its key was supplied, whatever its
    value (``[]`` and ``null`` included). Unknown keys are carried through
    untouched.
    """
    model_config = ConfigDict(extra="allow")

    routes: Optional[List[Entity]] = None
    root_children: Optional[List[Entity]] = Field(default=None, alias="rootChildren")
    folders: Optional[List[Entity]] = None

    def has_collection(self, collection: Collection) -> bool:
        return collection.attr in self.model_fields_set

    def get_collection(self, collection: Collection) -> Optional[List[Entity]]:
        return getattr(self, collection.attr)

    def set_collection(self, collection: Collection, entities: List[Entity]) -> None:
        setattr(self, collection.attr, entities)

    def to_dict(self) -> Dict[str, Any]:
        """Wire form: present collections plus every extra key."""
        data: Dict[str, Any] = {}
        for collection in Collection:
            if not self.has_collection(collection):
                continue
            entities = self.get_collection(collection)
            data[collection.value] = None if entities is None else [e.to_dict() for e in entities]
        data.update(self.model_extra or {})
        return data


# =============================================================================
# LOAD RESULTS
# =============================================================================

@dataclass
class LoadIssue:
    """A non-fatal problem met while loading a document."""
    message: str
    collection: Optional[Collection] = None
    path: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "message": self.message,
            "collection": self.collection.value if self.collection else None,
            "path": self.path,
        }


@dataclass
class LoadResult:
    """A loaded document (None when not found) and the issues met on the way."""
    document: Optional[Document] = None
    issues: List[LoadIssue] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return self.document is not None

    @property
    def ok(self) -> bool:
        return not self.issues

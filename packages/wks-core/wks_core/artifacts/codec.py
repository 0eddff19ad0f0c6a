"""Collection codec: a list of entities <-> a directory of entity files."""
from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Union

from ..models import Collection, Entity
from ..persistence.interfaces import PathLike, StorageRoot
from .entity_files import read_all_entities, write_entity
from .layout import collection_directory

logger = logging.getLogger(__name__)


def save_collection(
    storage: StorageRoot,
    document_dir: PathLike,
    base_name: str,
    collection: Union[Collection, str],
    entities: Optional[Iterable[Entity]],
) -> int:
    """
    Write each entity of a collection to its own file.

    The collection directory must exist (see ensure_artifacts_layout).

    Returns:
        Number of entities written
    """
    directory = collection_directory(document_dir, base_name, collection)
    count = 0
    for entity in entities or []:
        write_entity(storage, directory, entity)
        count += 1
    logger.debug(f"Wrote {count} entities to {directory}")
    return count


def load_collection(
    storage: StorageRoot,
    document_dir: PathLike,
    base_name: str,
    collection: Union[Collection, str],
) -> List[Entity]:
    """Read a collection back from its directory (empty if never written)."""
    directory = collection_directory(document_dir, base_name, collection)
    return read_all_entities(storage, directory)

"""
Entity files - one JSON file per entity, named by its uuid.
"""
from __future__ import annotations

import logging
from pathlib import PurePath
from typing import List

from pydantic import ValidationError

from ..errors import EntityFileError
from ..models import Entity
from ..persistence.interfaces import PathLike, StorageRoot

logger = logging.getLogger(__name__)


def entity_file_name(uuid: str) -> str:
    """File name for an entity."""
    # Keep the file inside its collection directory
    safe_id = uuid.replace("/", "_").replace("\\", "_")
    return f"{safe_id}.json"


def write_entity(storage: StorageRoot, directory: PathLike, entity: Entity) -> PurePath:
    """
    Write an entity to {directory}/{uuid}.json, replacing any existing file.

    The directory must already exist; storage errors propagate.

    Returns:
        Path of the written file
    """
    path = PurePath(directory) / entity_file_name(entity.uuid)
    storage.write_text(path, entity.to_json())
    return path


def read_all_entities(storage: StorageRoot, directory: PathLike) -> List[Entity]:
    """
    Read every file in a directory as an entity.

    A missing directory reads as an empty list. A file that does not parse
    fails the whole read.

    Raises:
        EntityFileError: If any file is not a valid entity
    """
    try:
        names = storage.list_files(directory)
    except FileNotFoundError:
        return []

    entities = []
    for name in names:
        path = PurePath(directory) / name
        try:
            entities.append(Entity.model_validate_json(storage.read_text(path)))
        except (ValidationError, UnicodeDecodeError) as e:
            raise EntityFileError(f"Invalid entity file {path}: {e}", path) from e

    logger.debug(f"Read {len(entities)} entities from {directory}")
    return entities

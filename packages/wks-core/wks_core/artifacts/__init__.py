"""
WKS Artifacts - Split collections stored as one file per entity.

Layout: {document_dir}/{base_name}.artifacts/{routes,rootchildren,folders}/{uuid}.json
"""
from .entity_files import write_entity, read_all_entities, entity_file_name
from .layout import (
    ARTIFACTS_SUFFIX,
    artifacts_root,
    collection_directory,
    ensure_artifacts_layout,
)
from .codec import save_collection, load_collection

__all__ = [
    # Entity files
    "write_entity",
    "read_all_entities",
    "entity_file_name",
    # Layout
    "ARTIFACTS_SUFFIX",
    "artifacts_root",
    "collection_directory",
    "ensure_artifacts_layout",
    # Codec
    "save_collection",
    "load_collection",
]

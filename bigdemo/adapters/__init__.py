"""Adapter layer package for container orchestrator integration boundaries."""

from .ecs_metadata import METADATA_URI_VARIABLE, EcsTaskMetadataAdapter
from .interfaces import MetadataAdapterPort

__all__ = ["EcsTaskMetadataAdapter", "METADATA_URI_VARIABLE", "MetadataAdapterPort"]

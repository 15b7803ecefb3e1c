"""Artifact registry for wardist.

This module exports the registry, its value types and the file steps:
- ArtifactRegistry: Declare channels, publish artifacts, add edges, resolve
- Attribute, ChannelHandle, ChannelRole, ChannelState, Artifact, DependencyEdge
- materialize: Copy resolved artifacts into a directory
- package_war / WarProducer / FileProducer: Artifact-producing steps
"""

from __future__ import annotations

from wardist_core.registry.materialize import DEFAULT_DIST_DIR_NAME, materialize
from wardist_core.registry.models import (
    ROOT_MODULE,
    Artifact,
    Attribute,
    ChannelHandle,
    ChannelRole,
    ChannelState,
    DependencyEdge,
    normalize_module_path,
    to_attribute_set,
)
from wardist_core.registry.packaging import (
    DEFAULT_WEBAPP_DIR,
    FileProducer,
    WarProducer,
    package_war,
    war_archive_name,
)
from wardist_core.registry.registry import ArtifactProducer, ArtifactRegistry

__all__: list[str] = [
    # Registry
    "ArtifactRegistry",
    "ArtifactProducer",
    # Models
    "Artifact",
    "Attribute",
    "ChannelHandle",
    "ChannelRole",
    "ChannelState",
    "DependencyEdge",
    "ROOT_MODULE",
    "normalize_module_path",
    "to_attribute_set",
    # Materialization
    "materialize",
    "DEFAULT_DIST_DIR_NAME",
    # Packaging
    "package_war",
    "war_archive_name",
    "WarProducer",
    "FileProducer",
    "DEFAULT_WEBAPP_DIR",
]

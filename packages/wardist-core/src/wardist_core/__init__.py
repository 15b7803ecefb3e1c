"""wardist-core: Artifact channels and web distribution assembly.

This package provides:
- ArtifactRegistry: Attribute-matched producer/consumer artifact channels
- materialize: Copy resolved artifacts into a distribution directory
- BuildSpec: Pydantic schema for wardist.yaml
- BuildConfigurator: Configure wardist.yaml into a registry
- JSON Schema export utilities
"""

from __future__ import annotations

__version__ = "0.1.0"

from wardist_core.configurator import BuildConfigurator, ConfiguredBuild

# Error types
from wardist_core.errors import (
    ChannelStateError,
    ConfigurationError,
    DuplicateChannelError,
    DuplicateModuleError,
    InvalidRoleError,
    MaterializeError,
    PackagingError,
    UnknownChannelError,
    UnknownDistributionError,
    UnknownModuleError,
    WardistError,
)
from wardist_core.export import export_build_spec_schema
from wardist_core.registry import (
    ROOT_MODULE,
    Artifact,
    ArtifactRegistry,
    Attribute,
    ChannelHandle,
    ChannelRole,
    ChannelState,
    DependencyEdge,
    materialize,
    package_war,
)
from wardist_core.schemas import (
    ArtifactSpec,
    BuildSpec,
    ChannelSpec,
    ConventionSpec,
    DistributionSpec,
    ModuleSpec,
)

__all__ = [
    "__version__",
    # Configuration pass
    "BuildConfigurator",
    "ConfiguredBuild",
    # Registry
    "ArtifactRegistry",
    "Artifact",
    "Attribute",
    "ChannelHandle",
    "ChannelRole",
    "ChannelState",
    "DependencyEdge",
    "ROOT_MODULE",
    "materialize",
    "package_war",
    # Errors
    "WardistError",
    "ConfigurationError",
    "DuplicateChannelError",
    "DuplicateModuleError",
    "InvalidRoleError",
    "UnknownModuleError",
    "UnknownChannelError",
    "UnknownDistributionError",
    "ChannelStateError",
    "PackagingError",
    "MaterializeError",
    # JSON Schema export
    "export_build_spec_schema",
    # Schema models
    "BuildSpec",
    "ModuleSpec",
    "ChannelSpec",
    "ArtifactSpec",
    "ConventionSpec",
    "DistributionSpec",
]

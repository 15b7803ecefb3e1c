"""Build file models for wardist.

This module exports the wardist.yaml models:
- BuildSpec: Root project configuration
- ModuleSpec: Sibling module configuration
- ChannelSpec / ArtifactSpec: Channel declarations
- ConventionSpec: Reusable channel declarations
- DistributionSpec: Resolve-and-copy steps
"""

from __future__ import annotations

from wardist_core.schemas.build_spec import BuildSpec, DistributionSpec, ModuleSpec
from wardist_core.schemas.channel import (
    NAME_PATTERN,
    ArtifactSpec,
    ChannelSpec,
    ConventionSpec,
)

__all__: list[str] = [
    "BuildSpec",
    "ModuleSpec",
    "DistributionSpec",
    "ChannelSpec",
    "ArtifactSpec",
    "ConventionSpec",
    "NAME_PATTERN",
]

"""Channel declaration models for wardist.yaml.

This module defines:
- ArtifactSpec: what a producer channel publishes
- ChannelSpec: one channel declaration (name, attributes, role, edges)
- ConventionSpec: reusable channel declarations applied to modules
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from wardist_core.registry.models import ChannelRole
from wardist_core.registry.packaging import DEFAULT_WEBAPP_DIR

# Valid names for channels, modules, conventions and distributions
NAME_PATTERN = r"^[A-Za-z][A-Za-z0-9_.-]*$"


class ArtifactSpec(BaseModel):
    """Artifact published on a producer channel.

    Attributes:
        type: 'war' packages a webapp directory; 'file' publishes an existing file.
        path: Webapp directory (war, default src/main/webapp) or file path (file),
            relative to the module directory.

    Example:
        >>> ArtifactSpec(type="war")
        >>> ArtifactSpec(type="file", path="dist/legacy.war")
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    type: Literal["war", "file"] = Field(
        default="war",
        description="Artifact type",
    )
    path: str | None = Field(
        default=None,
        description="Webapp directory (war) or file path (file), relative to the module",
    )

    @model_validator(mode="after")
    def _require_file_path(self) -> ArtifactSpec:
        if self.type == "file" and not self.path:
            raise ValueError("artifact of type 'file' requires 'path'")
        return self

    @property
    def source(self) -> str:
        """Path relative to the module, with the war default applied."""
        if self.path:
            return self.path
        return DEFAULT_WEBAPP_DIR


class ChannelSpec(BaseModel):
    """A channel declaration.

    Role rules (consumers issue edges, producers publish artifacts) are
    enforced by the registry when the build is configured.

    Attributes:
        name: Channel name, unique per module.
        attributes: Attribute map matched exactly during resolution.
        role: producer (consumable) or consumer (resolvable).
        dependencies: Modules a consumer channel draws from.
        artifact: Artifact a producer channel publishes.

    Example:
        >>> ChannelSpec(
        ...     name="wars",
        ...     attributes={"type": "war"},
        ...     role="consumer",
        ...     dependencies=["date", "hello"],
        ... )
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(..., pattern=NAME_PATTERN, description="Channel name")
    attributes: dict[str, str] = Field(
        default_factory=dict,
        description="Attributes matched exactly against producer channels",
    )
    role: ChannelRole = Field(..., description="producer or consumer")
    dependencies: list[str] = Field(
        default_factory=list,
        description="Module references (consumer channels only)",
    )
    artifact: ArtifactSpec | None = Field(
        default=None,
        description="Published artifact (producer channels only)",
    )


class ConventionSpec(BaseModel):
    """Reusable channel declarations applied to modules by name.

    Example:
        >>> ConventionSpec(channels=[ChannelSpec(name="wars", role="producer",
        ...     attributes={"type": "war"}, artifact=ArtifactSpec())])
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    channels: list[ChannelSpec] = Field(default_factory=list)

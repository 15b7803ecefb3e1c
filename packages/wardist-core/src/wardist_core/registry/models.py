"""Registry models for wardist.

This module defines the value types exchanged with ArtifactRegistry:
- Attribute: (name, value) matching key
- ChannelRole: producer/consumer role replacing the two role flags
- ChannelState: lifecycle of a declared channel
- ChannelHandle: immutable reference to a declared channel
- Artifact: a file published on exactly one producer channel
- DependencyEdge: consumer channel -> target module
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from wardist_core.errors import InvalidRoleError

# Path of the root module
ROOT_MODULE = ":"

# Separator between module path segments
MODULE_SEPARATOR = ":"


def normalize_module_path(path: str) -> str:
    """Normalize a module reference to its absolute path form.

    Args:
        path: Module reference, e.g. "date", ":date" or ":".

    Returns:
        Absolute module path (":date", ":web:date", ":").

    Raises:
        ValueError: If the reference is empty.

    Example:
        >>> normalize_module_path("date")
        ':date'
    """
    stripped = path.strip()
    if not stripped:
        raise ValueError("Module path must not be empty")
    if stripped == ROOT_MODULE:
        return ROOT_MODULE
    segments = [s for s in stripped.split(MODULE_SEPARATOR) if s]
    return MODULE_SEPARATOR + MODULE_SEPARATOR.join(segments)


class Attribute(BaseModel):
    """A (name, value) tag used to select compatible channels.

    Matching is exact on both name and value.

    Example:
        >>> Attribute(name="type", value="war")
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(..., min_length=1, description="Attribute name")
    value: str = Field(..., description="Attribute value")

    def __str__(self) -> str:
        return f"{self.name}={self.value}"


def to_attribute_set(
    attributes: Mapping[str, str] | Iterable[Attribute] | None,
) -> frozenset[Attribute]:
    """Build an attribute set from a mapping or an iterable of Attribute.

    Args:
        attributes: {"type": "war"}, [Attribute(...)] or None.

    Returns:
        Frozen set of attributes.

    Raises:
        ValueError: If one attribute name carries two different values.
    """
    if attributes is None:
        return frozenset()
    if isinstance(attributes, Mapping):
        items = [Attribute(name=k, value=v) for k, v in attributes.items()]
    else:
        items = list(attributes)

    seen: dict[str, str] = {}
    for attr in items:
        if attr.name in seen and seen[attr.name] != attr.value:
            raise ValueError(
                f"Attribute '{attr.name}' given conflicting values "
                f"'{seen[attr.name]}' and '{attr.value}'"
            )
        seen[attr.name] = attr.value
    return frozenset(items)


class ChannelRole(str, Enum):
    """Role of a channel.

    Only two flag combinations are legal, so the role is an enum rather
    than two independent booleans.
    """

    PRODUCER = "producer"
    CONSUMER = "consumer"

    @property
    def can_be_resolved(self) -> bool:
        return self is ChannelRole.CONSUMER

    @property
    def can_be_consumed(self) -> bool:
        return self is ChannelRole.PRODUCER

    @classmethod
    def from_flags(cls, can_be_resolved: bool, can_be_consumed: bool) -> ChannelRole:
        """Map (can_be_resolved, can_be_consumed) to a role.

        Raises:
            InvalidRoleError: For (True, True) and (False, False).
        """
        if can_be_consumed and not can_be_resolved:
            return cls.PRODUCER
        if can_be_resolved and not can_be_consumed:
            return cls.CONSUMER
        raise InvalidRoleError(
            "A channel must be either resolvable or consumable, not "
            f"{'both' if can_be_resolved else 'neither'}",
            operation="declare",
        )


class ChannelState(str, Enum):
    """Lifecycle state of a declared channel."""

    DECLARED = "declared"
    PUBLISHED = "published"


class ChannelHandle(BaseModel):
    """Immutable reference to a declared channel.

    Attributes:
        module: Absolute path of the owning module.
        name: Channel name, unique within the module.
        role: Producer or consumer role.
        attributes: Attribute set fixed at declaration time.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    module: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    role: ChannelRole
    attributes: frozenset[Attribute] = Field(default_factory=frozenset)

    @field_validator("module")
    @classmethod
    def _normalize_module(cls, v: str) -> str:
        return normalize_module_path(v)

    @property
    def can_be_resolved(self) -> bool:
        return self.role.can_be_resolved

    @property
    def can_be_consumed(self) -> bool:
        return self.role.can_be_consumed

    @property
    def key(self) -> str:
        """Channel path, e.g. ":date:wars" or ":wars" for the root module."""
        if self.module == ROOT_MODULE:
            return f"{ROOT_MODULE}{self.name}"
        return f"{self.module}{MODULE_SEPARATOR}{self.name}"

    def attribute_map(self) -> dict[str, str]:
        return {a.name: a.value for a in sorted(self.attributes, key=lambda a: a.name)}

    def matches(self, other: ChannelHandle) -> bool:
        """Return True if both channels carry exactly the same attributes."""
        return self.attributes == other.attributes


class Artifact(BaseModel):
    """A file published on a producer channel.

    Two artifacts are the same artifact when module, channel and path
    are equal.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    module: str
    channel: str
    path: Path

    @property
    def name(self) -> str:
        return self.path.name


class DependencyEdge(BaseModel):
    """Consumer channel -> target module."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    channel: ChannelHandle
    target_module: str

    @field_validator("target_module")
    @classmethod
    def _normalize_target(cls, v: str) -> str:
        return normalize_module_path(v)

"""Artifact configuration registry for wardist.

ArtifactRegistry holds the channels declared on each module of a build,
the artifact producers attached to producer channels, and the dependency
edges issued by consumer channels. A registry is created per configuration
pass and passed explicitly; there is no process-wide instance.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path

from wardist_core.errors import (
    ChannelStateError,
    DuplicateChannelError,
    DuplicateModuleError,
    InvalidRoleError,
    UnknownChannelError,
    UnknownModuleError,
)
from wardist_core.observability import registry_operation
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

logger = logging.getLogger(__name__)

# Zero-argument callable returning the artifact file
ArtifactProducer = Callable[[], Path]


@dataclass
class _ChannelEntry:
    handle: ChannelHandle
    producer: ArtifactProducer | None = None
    edges: list[DependencyEdge] = field(default_factory=list)

    @property
    def state(self) -> ChannelState:
        return ChannelState.PUBLISHED if self.producer is not None else ChannelState.DECLARED


@dataclass
class _ModuleScope:
    path: str
    project_dir: Path | None = None
    channels: dict[str, _ChannelEntry] = field(default_factory=dict)


class ArtifactRegistry:
    """Registry of modules, channels, published artifacts and dependency edges.

    The root module ":" exists from construction. Channel names are unique
    per module scope. Attribute sets are fixed when a channel is declared.

    Example:
        >>> registry = ArtifactRegistry()
        >>> registry.register_module("date")
        ':date'
        >>> wars = registry.declare_channel(
        ...     "wars", {"type": "war"},
        ...     can_be_resolved=False, can_be_consumed=True, module=":date",
        ... )
        >>> registry.publish(wars, lambda: Path("date/build/libs/date-1.0.war"))
        >>> dist = registry.declare_channel(
        ...     "wars", {"type": "war"}, can_be_resolved=True, can_be_consumed=False,
        ... )
        >>> edge = registry.add_dependency(dist, "date")
        >>> [a.name for a in registry.resolve(dist)]
        ['date-1.0.war']
    """

    def __init__(self, root_dir: Path | None = None) -> None:
        """Initialize the registry with the root module.

        Args:
            root_dir: Optional project directory of the root module.
        """
        self._modules: dict[str, _ModuleScope] = {
            ROOT_MODULE: _ModuleScope(path=ROOT_MODULE, project_dir=root_dir),
        }

    def register_module(self, path: str, project_dir: Path | None = None) -> str:
        """Register a module scope.

        Args:
            path: Module reference ("date" or ":date").
            project_dir: Optional directory holding the module sources.

        Returns:
            Normalized module path.

        Raises:
            DuplicateModuleError: If the module is already registered.
        """
        module = normalize_module_path(path)
        if module in self._modules:
            raise DuplicateModuleError(module)
        self._modules[module] = _ModuleScope(path=module, project_dir=project_dir)
        logger.debug("Registered module %s", module)
        return module

    def modules(self) -> list[str]:
        return list(self._modules)

    def project_dir(self, module: str) -> Path | None:
        return self._scope(module).project_dir

    def _scope(self, module: str) -> _ModuleScope:
        try:
            path = normalize_module_path(module)
        except ValueError as e:
            raise UnknownModuleError(module=module, available_modules=self.modules()) from e
        try:
            return self._modules[path]
        except KeyError as e:
            raise UnknownModuleError(module=path, available_modules=self.modules()) from e

    def declare_channel(
        self,
        name: str,
        attributes: Mapping[str, str] | Iterable[Attribute] | None,
        *,
        can_be_resolved: bool,
        can_be_consumed: bool,
        module: str = ROOT_MODULE,
    ) -> ChannelHandle:
        """Declare a named channel in a module scope.

        Args:
            name: Channel name, unique within the module.
            attributes: Attribute mapping or iterable of Attribute.
            can_be_resolved: Whether the channel may issue dependency edges.
            can_be_consumed: Whether the channel may be a resolution target.
            module: Owning module path. Defaults to the root module.

        Returns:
            Immutable handle for the declared channel.

        Raises:
            InvalidRoleError: If both flags or neither flag are set.
            DuplicateChannelError: If the name is taken in this module.
            UnknownModuleError: If the module is not registered.
        """
        role = ChannelRole.from_flags(can_be_resolved, can_be_consumed)
        return self.declare_channel_for_role(name, attributes, role, module=module)

    def declare_channel_for_role(
        self,
        name: str,
        attributes: Mapping[str, str] | Iterable[Attribute] | None,
        role: ChannelRole,
        *,
        module: str = ROOT_MODULE,
    ) -> ChannelHandle:
        """Declare a channel with an explicit role. See declare_channel()."""
        scope = self._scope(module)
        if name in scope.channels:
            raise DuplicateChannelError(module=scope.path, channel_name=name)

        handle = ChannelHandle(
            module=scope.path,
            name=name,
            role=role,
            attributes=to_attribute_set(attributes),
        )
        scope.channels[name] = _ChannelEntry(handle=handle)
        logger.debug(
            "Declared %s channel %s with attributes %s",
            role.value,
            handle.key,
            handle.attribute_map(),
        )
        return handle

    def channels(self, module: str = ROOT_MODULE) -> list[ChannelHandle]:
        return [entry.handle for entry in self._scope(module).channels.values()]

    def get_channel(self, module: str, name: str) -> ChannelHandle:
        """Look up a declared channel by module and name.

        Raises:
            UnknownModuleError: If the module is not registered.
            UnknownChannelError: If no channel of that name exists.
        """
        scope = self._scope(module)
        try:
            return scope.channels[name].handle
        except KeyError as e:
            raise UnknownChannelError(module=scope.path, channel_name=name) from e

    def state(self, channel: ChannelHandle) -> ChannelState:
        return self._entry(channel).state

    def _entry(self, channel: ChannelHandle) -> _ChannelEntry:
        scope = self._scope(channel.module)
        entry = scope.channels.get(channel.name)
        if entry is None or entry.handle != channel:
            raise UnknownChannelError(module=channel.module, channel_name=channel.name)
        return entry

    def publish(self, channel: ChannelHandle, artifact_producer: ArtifactProducer) -> None:
        """Attach an artifact-producing step to a producer channel.

        Args:
            channel: Handle returned by declare_channel().
            artifact_producer: Callable returning the artifact file path.
                It runs each time a consumer resolves the channel.

        Raises:
            InvalidRoleError: If the channel cannot be consumed.
            ChannelStateError: If the channel is already published.
            UnknownChannelError: If the channel was not declared here.
        """
        entry = self._entry(channel)
        if not channel.can_be_consumed:
            raise InvalidRoleError(
                f"Cannot publish on channel '{channel.key}': it is not consumable",
                channel=channel.key,
                operation="publish",
            )
        if entry.state is ChannelState.PUBLISHED:
            raise ChannelStateError(f"Channel '{channel.key}' is already published")

        entry.producer = artifact_producer
        logger.debug("Published artifact producer on %s", channel.key)

    def add_dependency(self, channel: ChannelHandle, target_module: str) -> DependencyEdge:
        """Add a dependency edge from a consumer channel to a module.

        Args:
            channel: Resolvable channel issuing the edge.
            target_module: Module whose matching channels are resolved.

        Returns:
            The dependency edge. Adding an existing edge returns it unchanged.

        Raises:
            InvalidRoleError: If the channel cannot be resolved.
            UnknownModuleError: If the target module is not registered.
        """
        entry = self._entry(channel)
        if not channel.can_be_resolved:
            raise InvalidRoleError(
                f"Cannot add dependency to channel '{channel.key}': it is not resolvable",
                channel=channel.key,
                operation="add_dependency",
            )
        target = self._scope(target_module).path

        edge = DependencyEdge(channel=channel, target_module=target)
        if edge in entry.edges:
            logger.debug("Dependency %s -> %s already present", channel.key, target)
            return edge

        entry.edges.append(edge)
        logger.debug("Added dependency %s -> %s", channel.key, target)
        return edge

    def dependencies(self, channel: ChannelHandle) -> list[DependencyEdge]:
        return list(self._entry(channel).edges)

    def resolve(self, channel: ChannelHandle) -> frozenset[Artifact]:
        """Resolve a consumer channel to the artifacts of its dependencies.

        For each edge, every consumable channel of the target module whose
        attribute set equals this channel's attribute set contributes its
        published artifact. Channels that do not match, or are declared but
        not published, contribute nothing.

        Args:
            channel: Resolvable channel.

        Returns:
            Union of matching artifacts. Empty if nothing matches.

        Raises:
            InvalidRoleError: If the channel cannot be resolved.
        """
        entry = self._entry(channel)
        if not channel.can_be_resolved:
            raise InvalidRoleError(
                f"Cannot resolve channel '{channel.key}': it is not resolvable",
                channel=channel.key,
                operation="resolve",
            )

        with registry_operation("resolve", channel=channel.key):
            artifacts: set[Artifact] = set()
            for edge in entry.edges:
                for candidate in self._scope(edge.target_module).channels.values():
                    handle = candidate.handle
                    if not handle.can_be_consumed or not handle.matches(channel):
                        continue
                    if candidate.producer is None:
                        logger.debug("Channel %s matches but has no artifact", handle.key)
                        continue
                    artifacts.add(
                        Artifact(
                            module=handle.module,
                            channel=handle.name,
                            path=Path(candidate.producer()),
                        )
                    )

            if not artifacts:
                logger.info("Channel %s resolved to no artifacts", channel.key)
            else:
                logger.info("Channel %s resolved to %d artifact(s)", channel.key, len(artifacts))
            return frozenset(artifacts)

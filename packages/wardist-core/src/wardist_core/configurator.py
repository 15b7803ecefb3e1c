"""Configuration pass for wardist.

This module turns a BuildSpec (wardist.yaml) into a populated
ArtifactRegistry:
1. Register every module
2. Declare convention channels, then the module's own channels
3. Publish producer artifacts (war packaging or prebuilt files)
4. Declare root channels
5. Add dependency edges from every consumer channel
6. Check that every distribution names a resolvable root channel

Any declaration error aborts the pass; the partially built registry is
never returned.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from wardist_core.config import get_build_dir_override
from wardist_core.errors import InvalidRoleError, UnknownDistributionError
from wardist_core.registry import (
    ROOT_MODULE,
    Artifact,
    ArtifactRegistry,
    ChannelHandle,
    FileProducer,
    WarProducer,
    materialize,
    war_archive_name,
)
from wardist_core.schemas import BuildSpec, ChannelSpec, ModuleSpec

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConfiguredBuild:
    """Result of a configuration pass.

    Attributes:
        spec: The validated build file.
        registry: Registry holding all declared channels and edges.
        project_dir: Project root directory.
        build_dir: Absolute build output directory.
    """

    spec: BuildSpec
    registry: ArtifactRegistry
    project_dir: Path
    build_dir: Path

    def resolve(self, channel_name: str, module: str = ROOT_MODULE) -> frozenset[Artifact]:
        """Resolve a declared consumer channel by name.

        Raises:
            UnknownChannelError: If the channel is not declared.
            InvalidRoleError: If the channel is not resolvable.
        """
        channel = self.registry.get_channel(module, channel_name)
        return self.registry.resolve(channel)

    def distribution_dir(self, name: str) -> Path:
        """Return the destination directory of a distribution."""
        return self.build_dir / self.spec.get_distribution(name).into

    def distribute(
        self,
        name: str | None = None,
        destination: Path | str | None = None,
    ) -> list[Path]:
        """Resolve a distribution's channel and copy the artifacts.

        Args:
            name: Distribution name. Defaults to the first distribution.
            destination: Override for the destination directory.

        Returns:
            Paths of the written files.

        Raises:
            UnknownDistributionError: If the distribution is not defined.
            MaterializeError: If copying fails.
        """
        available = [d.name for d in self.spec.distributions]
        if name is None:
            if not available:
                raise UnknownDistributionError("<default>", available)
            name = available[0]

        try:
            dist = self.spec.get_distribution(name)
        except KeyError as e:
            raise UnknownDistributionError(name, available) from e

        target = Path(destination) if destination is not None else self.build_dir / dist.into
        artifacts = self.resolve(dist.channel)
        logger.info("Distribution %s: %d artifact(s) -> %s", name, len(artifacts), target)
        return materialize(artifacts, target)


class BuildConfigurator:
    """Configure wardist.yaml into a registry.

    Example:
        >>> configurator = BuildConfigurator()
        >>> build = configurator.configure(Path("wardist.yaml"))
        >>> build.distribute("explodedDist")
    """

    def __init__(self, build_dir: str | None = None) -> None:
        """Initialize the configurator.

        Args:
            build_dir: Build directory override. If not specified, uses
                WARDIST_BUILD_DIR, then build_dir from the build file.
        """
        self.build_dir = build_dir

    def configure(
        self,
        spec: BuildSpec | Path | str,
        project_dir: Path | str | None = None,
    ) -> ConfiguredBuild:
        """Run the configuration pass.

        Args:
            spec: BuildSpec instance or path to wardist.yaml.
            project_dir: Project root. Defaults to the build file's directory,
                or the working directory for an in-memory BuildSpec.

        Returns:
            ConfiguredBuild holding the populated registry.

        Raises:
            FileNotFoundError: If the build file is not found.
            pydantic.ValidationError: If the build file is invalid.
            DuplicateChannelError, InvalidRoleError, UnknownModuleError,
            UnknownChannelError:
                If declarations conflict.
        """
        if isinstance(spec, BuildSpec):
            build_spec = spec
            root = Path(project_dir) if project_dir is not None else Path.cwd()
        else:
            spec_path = Path(spec)
            build_spec = BuildSpec.from_yaml(spec_path)
            root = Path(project_dir) if project_dir is not None else spec_path.parent

        root = root.resolve()
        build_dir_name = self.build_dir or get_build_dir_override() or build_spec.build_dir
        build_dir = root / build_dir_name

        logger.info(
            "Configuring %s (%d module(s), build dir %s)",
            build_spec.name,
            len(build_spec.modules),
            build_dir,
        )

        registry = ArtifactRegistry(root_dir=root)

        for module in build_spec.modules:
            registry.register_module(module.name, project_dir=root / module.directory)

        for module in build_spec.modules:
            module_path = f":{module.name}"
            for convention in module.conventions:
                for channel_spec in build_spec.conventions[convention].channels:
                    self._declare(registry, build_spec, module, module_path, channel_spec, root)
            for channel_spec in module.channels:
                self._declare(registry, build_spec, module, module_path, channel_spec, root)

        for channel_spec in build_spec.channels:
            self._declare(registry, build_spec, None, ROOT_MODULE, channel_spec, root)

        for dist in build_spec.distributions:
            channel = registry.get_channel(ROOT_MODULE, dist.channel)
            if not channel.can_be_resolved:
                raise InvalidRoleError(
                    f"Distribution '{dist.name}' uses channel '{channel.key}', "
                    "which is not resolvable",
                    channel=channel.key,
                    operation="distribute",
                )

        return ConfiguredBuild(
            spec=build_spec,
            registry=registry,
            project_dir=root,
            build_dir=build_dir,
        )

    def _declare(
        self,
        registry: ArtifactRegistry,
        build_spec: BuildSpec,
        module: ModuleSpec | None,
        module_path: str,
        channel_spec: ChannelSpec,
        root: Path,
    ) -> ChannelHandle:
        handle = registry.declare_channel(
            channel_spec.name,
            channel_spec.attributes,
            can_be_resolved=channel_spec.role.can_be_resolved,
            can_be_consumed=channel_spec.role.can_be_consumed,
            module=module_path,
        )

        if channel_spec.artifact is not None:
            module_dir = registry.project_dir(module_path) or root
            if channel_spec.artifact.type == "war":
                base_name = module.name if module is not None else build_spec.name
                version = (
                    build_spec.module_version(module) if module is not None else build_spec.version
                )
                producer: WarProducer | FileProducer = WarProducer(
                    module_dir=module_dir,
                    archive_name=war_archive_name(base_name, version),
                    webapp_dir=channel_spec.artifact.source,
                )
            else:
                producer = FileProducer(path=module_dir / channel_spec.artifact.source)
            registry.publish(handle, producer)

        for target in channel_spec.dependencies:
            registry.add_dependency(handle, target)

        return handle

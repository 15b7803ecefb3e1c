"""Copy resolved artifacts into a distribution directory.

materialize() is the "explodedDist" step: every resolved artifact file is
copied into one destination directory under its own file name.
"""

from __future__ import annotations

import logging
import shutil
from collections.abc import Iterable
from pathlib import Path

from wardist_core.errors import MaterializeError
from wardist_core.observability import registry_operation
from wardist_core.registry.models import Artifact

logger = logging.getLogger(__name__)

# Default distribution directory name, relative to the build directory
DEFAULT_DIST_DIR_NAME = "explodedDist"


def materialize(artifacts: Iterable[Artifact], destination_dir: Path | str) -> list[Path]:
    """Copy each artifact's file into destination_dir.

    The destination is created (with parents) if absent. Existing files of
    the same name are overwritten. Artifacts are copied in file name order,
    so when two artifacts share a file name the result is the same on every
    run. Files copied before a failure are left in place.

    Args:
        artifacts: Resolved artifacts, typically from ArtifactRegistry.resolve().
        destination_dir: Directory to copy into.

    Returns:
        Paths of the written files, in copy order.

    Raises:
        MaterializeError: If an artifact file is missing or a copy fails.

    Example:
        >>> written = materialize(registry.resolve(wars), Path("build/explodedDist"))
        >>> [p.name for p in written]
        ['date-1.0.war', 'hello-1.0.war']
    """
    destination = Path(destination_dir)
    ordered = sorted(artifacts, key=lambda a: (a.name, a.module, a.channel, str(a.path)))

    with registry_operation("materialize", destination=str(destination)):
        try:
            destination.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise MaterializeError(
                f"Cannot create distribution directory {destination}",
                destination=str(destination),
                internal_details=str(e),
            ) from e

        written: list[Path] = []
        claimed: dict[str, Artifact] = {}
        for artifact in ordered:
            source = artifact.path
            if not source.is_file():
                raise MaterializeError(
                    f"Artifact file not found: {source.name}",
                    source=str(source),
                    destination=str(destination),
                    internal_details=f"{source} published by {artifact.module} does not exist",
                )

            previous = claimed.get(artifact.name)
            if previous is not None:
                logger.warning(
                    "Artifact %s from %s overwrites the copy from %s",
                    artifact.name,
                    artifact.module,
                    previous.module,
                )
            claimed[artifact.name] = artifact

            target = destination / artifact.name
            if source.resolve() == target.resolve():
                logger.debug("Artifact %s already in %s", artifact.name, destination)
                if target not in written:
                    written.append(target)
                continue
            try:
                shutil.copyfile(source, target)
            except OSError as e:
                raise MaterializeError(
                    f"Failed to copy {source.name} to {destination}",
                    source=str(source),
                    destination=str(destination),
                    internal_details=str(e),
                ) from e

            logger.debug("Copied %s -> %s", source, target)
            if target not in written:
                written.append(target)

        logger.info("Materialized %d file(s) into %s", len(written), destination)
        return written

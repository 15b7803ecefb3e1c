"""Web archive packaging for wardist modules.

This module builds the artifact a producer channel publishes:
- package_war(): zip a module's web application directory into a .war
- war_archive_name(): <base>-<version>.war naming
- WarProducer: callable attached to a producer channel via publish()

Archives are reproducible: entries are sorted and carry a fixed timestamp,
so packaging unchanged sources twice yields identical bytes.
"""

from __future__ import annotations

import logging
import zipfile
from dataclasses import dataclass
from pathlib import Path

from wardist_core.errors import PackagingError
from wardist_core.observability import registry_operation

logger = logging.getLogger(__name__)

# Default web application source directory, relative to the module
DEFAULT_WEBAPP_DIR = "src/main/webapp"

# Archive output directory, relative to the module
LIBS_DIR = Path("build") / "libs"

# Fixed zip entry timestamp (earliest date zip supports)
_ZIP_EPOCH = (1980, 1, 1, 0, 0, 0)

_MANIFEST_ENTRY = "META-INF/MANIFEST.MF"
_MANIFEST_CONTENT = "Manifest-Version: 1.0\r\nCreated-By: wardist\r\n\r\n"


def war_archive_name(base_name: str, version: str | None = None) -> str:
    """Return the archive file name for a module.

    Example:
        >>> war_archive_name("date", "1.0")
        'date-1.0.war'
    """
    if version:
        return f"{base_name}-{version}.war"
    return f"{base_name}.war"


def _write_entry(archive: zipfile.ZipFile, arcname: str, data: bytes) -> None:
    info = zipfile.ZipInfo(arcname, date_time=_ZIP_EPOCH)
    info.compress_type = zipfile.ZIP_DEFLATED
    info.external_attr = 0o644 << 16
    archive.writestr(info, data)


def package_war(
    module_dir: Path | str,
    archive_name: str,
    *,
    webapp_dir: str = DEFAULT_WEBAPP_DIR,
    output_dir: Path | str | None = None,
) -> Path:
    """Package a module's web application directory as a .war file.

    Args:
        module_dir: Module root directory.
        archive_name: File name of the archive (see war_archive_name()).
        webapp_dir: Web application directory relative to module_dir.
        output_dir: Output directory. Defaults to <module_dir>/build/libs.

    Returns:
        Path to the written archive.

    Raises:
        PackagingError: If the webapp directory is missing or writing fails.
    """
    module_path = Path(module_dir)
    source = module_path / webapp_dir
    out_dir = Path(output_dir) if output_dir is not None else module_path / LIBS_DIR
    archive_path = out_dir / archive_name

    if not source.is_dir():
        raise PackagingError(
            f"Web application directory missing for {module_path.name}",
            internal_details=f"{source} does not exist or is not a directory",
        )

    with registry_operation("package", module=module_path.name, destination=str(out_dir)):
        # Earlier archives stay out when the output directory lies inside the source
        out_resolved = out_dir.resolve()
        files = sorted(
            p
            for p in source.rglob("*")
            if p.is_file() and out_resolved not in p.resolve().parents
        )
        try:
            out_dir.mkdir(parents=True, exist_ok=True)
            with zipfile.ZipFile(archive_path, "w") as archive:
                # Manifest first; a manifest shipped in the webapp wins
                manifest = source / _MANIFEST_ENTRY
                if manifest.is_file():
                    _write_entry(archive, _MANIFEST_ENTRY, manifest.read_bytes())
                else:
                    _write_entry(archive, _MANIFEST_ENTRY, _MANIFEST_CONTENT.encode("utf-8"))
                for path in files:
                    arcname = path.relative_to(source).as_posix()
                    if arcname == _MANIFEST_ENTRY:
                        continue
                    _write_entry(archive, arcname, path.read_bytes())
        except OSError as e:
            raise PackagingError(
                f"Failed to write archive {archive_name}",
                internal_details=str(e),
            ) from e

    logger.info("Packaged %d file(s) into %s", len(files), archive_path)
    return archive_path


@dataclass(frozen=True)
class WarProducer:
    """Artifact producer that packages a module when called.

    Attributes:
        module_dir: Module root directory.
        archive_name: Archive file name.
        webapp_dir: Web application directory relative to module_dir.
    """

    module_dir: Path
    archive_name: str
    webapp_dir: str = DEFAULT_WEBAPP_DIR

    def __call__(self) -> Path:
        return package_war(self.module_dir, self.archive_name, webapp_dir=self.webapp_dir)


@dataclass(frozen=True)
class FileProducer:
    """Artifact producer for a prebuilt file."""

    path: Path

    def __call__(self) -> Path:
        return self.path

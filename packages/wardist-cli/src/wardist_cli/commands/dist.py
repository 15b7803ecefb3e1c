"""wardist dist command - Copy resolved artifacts into a distribution directory."""

from __future__ import annotations

import click

from wardist_cli.errors import EXIT_SYSTEM_ERROR, CLIError, load_build
from wardist_cli.output import print_written, success, warning


@click.command()
@click.argument("name", required=False)
@click.option(
    "-f",
    "--file",
    "file_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to wardist.yaml [default: $WARDIST_BUILD_FILE or ./wardist.yaml]",
)
@click.option(
    "-o",
    "--output",
    "output_path",
    type=click.Path(),
    default=None,
    help="Destination directory [default: <build_dir>/<into> of the distribution]",
)
@click.option(
    "--build-dir",
    "build_dir",
    type=str,
    default=None,
    help="Build directory [default: $WARDIST_BUILD_DIR or build_dir in wardist.yaml]",
)
def dist(
    name: str | None,
    file_path: str | None,
    output_path: str | None,
    build_dir: str | None,
) -> None:
    """Resolve a distribution's channel and copy its artifacts.

    NAME defaults to the first distribution in wardist.yaml. Existing files
    with the same names are overwritten; running it twice gives the same
    directory contents.

    Examples:

        wardist dist

        wardist dist explodedDist --output /tmp/webapps
    """
    from wardist_core import MaterializeError, PackagingError, WardistError
    from wardist_core.config import get_build_file

    path = file_path or str(get_build_file())
    build = load_build(path, build_dir=build_dir)

    try:
        written = build.distribute(name, destination=output_path)
    except (MaterializeError, PackagingError) as e:
        raise CLIError(f"Distribution failed: {e.user_message}", exit_code=EXIT_SYSTEM_ERROR) from None
    except WardistError as e:
        raise CLIError(e.user_message) from None

    if not written:
        warning("No artifacts resolved; distribution directory is empty")
        return

    success(f"Copied {len(written)} artifact(s) to {written[0].parent}")
    print_written(written)

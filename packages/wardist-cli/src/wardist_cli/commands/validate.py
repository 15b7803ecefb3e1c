"""wardist validate command - Check wardist.yaml and its declarations."""

from __future__ import annotations

import click

from wardist_cli.errors import load_build
from wardist_cli.output import info, success


@click.command()
@click.option(
    "-f",
    "--file",
    "file_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to wardist.yaml [default: $WARDIST_BUILD_FILE or ./wardist.yaml]",
)
def validate(file_path: str | None) -> None:
    """Validate wardist.yaml.

    Validates the file against the BuildSpec schema, then runs the
    configuration pass without packaging anything, so duplicate channels,
    role violations and unknown modules are reported too.

    Examples:

        wardist validate

        wardist validate --file path/to/wardist.yaml
    """
    from wardist_core.config import get_build_file

    path = file_path or str(get_build_file())
    build = load_build(path)

    registry = build.registry
    channel_count = sum(len(registry.channels(m)) for m in registry.modules())
    success("Configuration valid")
    info(
        f"  {len(build.spec.modules)} module(s), {channel_count} channel(s), "
        f"{len(build.spec.distributions)} distribution(s)",
        highlight=False,
    )

"""wardist resolve command - List the artifacts a channel resolves to."""

from __future__ import annotations

import click

from wardist_cli.errors import EXIT_SYSTEM_ERROR, CLIError, load_build
from wardist_cli.output import print_artifacts, warning


@click.command()
@click.argument("channel")
@click.option(
    "-f",
    "--file",
    "file_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to wardist.yaml [default: $WARDIST_BUILD_FILE or ./wardist.yaml]",
)
@click.option(
    "-m",
    "--module",
    "module",
    type=str,
    default=":",
    help="Module declaring the channel [default: root module ':']",
)
def resolve(channel: str, file_path: str | None, module: str) -> None:
    """Resolve CHANNEL and list its artifacts.

    Producer modules are packaged as part of resolution. A channel that
    matches nothing resolves to an empty list; that is not an error.

    Examples:

        wardist resolve wars

        wardist resolve wars --module :web
    """
    from wardist_core import PackagingError, WardistError
    from wardist_core.config import get_build_file

    path = file_path or str(get_build_file())
    build = load_build(path)

    try:
        handle = build.registry.get_channel(module, channel)
        artifacts = build.registry.resolve(handle)
    except PackagingError as e:
        raise CLIError(f"Resolution failed: {e.user_message}", exit_code=EXIT_SYSTEM_ERROR) from None
    except WardistError as e:
        raise CLIError(e.user_message) from None

    if not artifacts:
        warning(f"Channel '{handle.key}' resolved to no artifacts")
        return

    print_artifacts(artifacts, title=handle.key)

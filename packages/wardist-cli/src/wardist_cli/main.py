"""CLI entry point for wardist.

The main group loads subcommands lazily so `wardist --help` does not
import pydantic, yaml or the registry.
"""

from __future__ import annotations

import importlib
from typing import Any

import click
import rich_click as rclick

from wardist_cli import __version__
from wardist_cli.output import set_no_color

# Configure rich-click for better help formatting
rclick.rich_click.TEXT_MARKUP = "markdown"
rclick.rich_click.SHOW_ARGUMENTS = True
rclick.rich_click.GROUP_ARGUMENTS_OPTIONS = True


class LazyGroup(rclick.RichGroup):
    """Click group that imports a command's module only when it is looked up.

    Attributes:
        lazy_subcommands: Mapping of command names to "module.attribute" paths.
    """

    def __init__(
        self,
        *args: Any,
        lazy_subcommands: dict[str, str] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.lazy_subcommands: dict[str, str] = lazy_subcommands or {}

    def list_commands(self, ctx: click.Context) -> list[str]:
        commands = set(super().list_commands(ctx))
        commands.update(self.lazy_subcommands.keys())
        return sorted(commands)

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        """Return a registered command, importing it lazily if needed."""
        cmd = super().get_command(ctx, cmd_name)  # type: ignore[arg-type]
        if cmd is not None:
            return cmd

        if cmd_name not in self.lazy_subcommands:
            return None

        module_name, attr_name = self.lazy_subcommands[cmd_name].rsplit(".", 1)
        mod = importlib.import_module(module_name)
        return getattr(mod, attr_name)  # type: ignore[no-any-return]


LAZY_COMMANDS = {
    "init": "wardist_cli.commands.init.init",
    "validate": "wardist_cli.commands.validate.validate",
    "resolve": "wardist_cli.commands.resolve.resolve",
    "dist": "wardist_cli.commands.dist.dist",
    "schema": "wardist_cli.commands.schema.schema",
}


def _enable_verbose(ctx: click.Context, param: click.Parameter, value: bool) -> None:
    if not value:
        return
    from wardist_core.observability import configure_logging

    configure_logging(log_level="DEBUG", json_format=False)


@click.command(cls=LazyGroup, lazy_subcommands=LAZY_COMMANDS)
@click.version_option(version=__version__, prog_name="wardist")
@click.option(
    "--no-color",
    is_flag=True,
    default=False,
    help="Disable colored output.",
    is_eager=True,
    expose_value=False,
    callback=lambda ctx, param, value: set_no_color(value) if value else None,
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    default=False,
    help="Log registry activity to stderr.",
    expose_value=False,
    callback=_enable_verbose,
)
def cli() -> None:
    """wardist - Assemble web distributions from sibling modules.

    Modules publish web archives on attributed channels; the root project
    resolves matching channels and copies the archives into one directory.

    **Getting Started:**

    - `wardist init` - Create a two-module web distribution project
    - `wardist validate` - Check wardist.yaml and its declarations
    - `wardist resolve wars` - List the artifacts a channel resolves to
    - `wardist dist` - Copy resolved artifacts into build/explodedDist
    - `wardist schema export` - Export JSON Schema for IDE support
    """
    pass


if __name__ == "__main__":
    cli()

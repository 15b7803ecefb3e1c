"""wardist schema command - Export JSON Schema for wardist.yaml."""

from __future__ import annotations

from pathlib import Path

import click

from wardist_cli.errors import EXIT_SYSTEM_ERROR, CLIError
from wardist_cli.output import success


@click.group()
def schema() -> None:
    """Manage JSON Schema for IDE support.

    **Commands:**

    - `wardist schema export` - Export BuildSpec (wardist.yaml) JSON Schema
    """
    pass


@schema.command("export")
@click.option(
    "-o",
    "--output",
    "output_path",
    type=click.Path(),
    default="./schemas/wardist.schema.json",
    help="Output path [default: ./schemas/wardist.schema.json]",
)
def export_schema(output_path: str) -> None:
    """Export BuildSpec JSON Schema.

    Examples:

        wardist schema export

        wardist schema export --output custom/path/schema.json
    """
    from wardist_core import export_build_spec_schema

    output = Path(output_path)
    try:
        export_build_spec_schema(output)
    except PermissionError:
        raise CLIError(f"Cannot write to: {output_path}", exit_code=EXIT_SYSTEM_ERROR) from None
    except OSError as e:
        raise CLIError(f"Schema export failed: {e}", exit_code=EXIT_SYSTEM_ERROR) from None

    success(f"Schema exported to {output}")

"""CLI error handling for wardist-cli.

Maps wardist-core, pydantic and YAML failures to user-friendly
messages and exit codes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

import click
from pydantic import ValidationError as PydanticValidationError

from wardist_cli.output import error

if TYPE_CHECKING:
    from pydantic_core import ErrorDetails

    from wardist_core import ConfiguredBuild


# Exit codes following sysexits.h convention
EXIT_SUCCESS = 0
EXIT_USER_ERROR = 1  # Invalid build file, role or reference errors
EXIT_SYSTEM_ERROR = 2  # Missing file, permissions, copy failure


class CLIError(click.ClickException):
    """CLI exception carrying an exit code.

    Attributes:
        message: User-facing error message.
        exit_code: Exit code for the CLI (default: 1).
    """

    def __init__(self, message: str, exit_code: int = EXIT_USER_ERROR) -> None:
        super().__init__(message)
        self.exit_code = exit_code

    def show(self, file: object = None) -> None:
        """Display the error message using Rich formatting.

        Args:
            file: Output file (unused, for Click compatibility).
        """
        error(self.format_message())


def format_pydantic_error(err: PydanticValidationError) -> str:
    """Format a pydantic ValidationError as one line per failing field.

    Example:
        >>> format_pydantic_error(err)
        "Validation failed:\\n  - modules.0.name: String should match pattern..."
    """
    details: list[ErrorDetails] = err.errors()
    lines = ["Validation failed:"]

    for e in details:
        loc = ".".join(str(x) for x in e["loc"]) or "<root>"
        lines.append(f"  - {loc}: {e['msg']}")

    return "\n".join(lines)


def handle_yaml_error(err: Exception, file_path: str) -> NoReturn:
    """Raise CLIError for a YAML parse failure, with line and column when known.

    Raises:
        CLIError: Always.
    """
    error_msg = str(err)
    mark = getattr(err, "problem_mark", None)
    if mark is not None:
        problem = getattr(err, "problem", None) or "invalid syntax"
        error_msg = f"YAML syntax error at line {mark.line + 1}, column {mark.column + 1}: {problem}"

    raise CLIError(f"Invalid YAML in {file_path}: {error_msg}")


def handle_validation_error(err: PydanticValidationError, file_path: str) -> NoReturn:
    """Raise CLIError listing the invalid fields of a build file.

    Raises:
        CLIError: Always.
    """
    formatted = format_pydantic_error(err)
    raise CLIError(f"Invalid build file {file_path}:\n{formatted}")


def handle_file_not_found(file_path: str) -> NoReturn:
    """Raise CLIError for a missing build file.

    Raises:
        CLIError: Always, with EXIT_SYSTEM_ERROR.
    """
    raise CLIError(
        f"File not found: {file_path}\n\n"
        "Run 'wardist init' to create a project, or use --file to specify a path.",
        exit_code=EXIT_SYSTEM_ERROR,
    )


def load_build(file_path: str, build_dir: str | None = None) -> ConfiguredBuild:
    """Load and configure a build file, mapping failures to CLIError.

    Args:
        file_path: Path to wardist.yaml.
        build_dir: Optional build directory override.

    Returns:
        ConfiguredBuild holding the populated registry.

    Raises:
        CLIError: On a missing file, invalid YAML, schema or declaration errors.
    """
    from pathlib import Path

    import yaml

    from wardist_core import BuildConfigurator, WardistError

    path = Path(file_path)
    if not path.exists():
        handle_file_not_found(file_path)

    try:
        return BuildConfigurator(build_dir=build_dir).configure(path)
    except yaml.YAMLError as e:
        handle_yaml_error(e, file_path)
    except PydanticValidationError as e:
        handle_validation_error(e, file_path)
    except WardistError as e:
        raise CLIError(f"Configuration failed: {e.user_message}") from None

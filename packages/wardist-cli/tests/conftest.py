"""Shared test fixtures for wardist-cli tests.

Provides CliRunner fixtures and a two-module project written into the
isolated filesystem.
"""

from __future__ import annotations

import sys
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
import structlog
from click.testing import CliRunner

BUILD_FILE_NAME = "wardist.yaml"

WEB_DIST_YAML = """\
name: webDist
version: "1.0"
conventions:
  webapp:
    channels:
      - name: wars
        role: producer
        attributes: {type: war}
        artifact: {type: war}
modules:
  - name: date
    conventions: [webapp]
  - name: hello
    conventions: [webapp]
channels:
  - name: wars
    role: consumer
    attributes: {type: war}
    dependencies: [date, hello]
distributions:
  - name: explodedDist
    channel: wars
"""


@pytest.fixture(autouse=True)
def configure_structlog_for_tests() -> None:
    """Send structlog output to the pytest stream, not the CliRunner one."""
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.UnicodeDecoder(),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=False,
    )


@pytest.fixture(autouse=True)
def clear_wardist_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("WARDIST_BUILD_FILE", raising=False)
    monkeypatch.delenv("WARDIST_BUILD_DIR", raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click test runner.

    Returns:
        CliRunner instance for testing CLI commands.
    """
    return CliRunner()


@pytest.fixture
def isolated_runner(cli_runner: CliRunner) -> Generator[CliRunner, None, None]:
    """Create a Click test runner with an isolated filesystem.

    Yields:
        CliRunner instance with isolated filesystem.
    """
    with cli_runner.isolated_filesystem():
        yield cli_runner


@pytest.fixture
def create_build_yaml(isolated_runner: CliRunner) -> Callable[..., Path]:
    """Factory fixture writing wardist.yaml with custom content.

    Returns:
        Function that creates the file and returns its path.
    """

    def _create(content: str, filename: str = BUILD_FILE_NAME) -> Path:
        path = Path(filename)
        path.write_text(content)
        return path

    return _create


@pytest.fixture
def web_project(create_build_yaml: Callable[..., Path]) -> Path:
    """Write the date/hello project into the isolated filesystem.

    Returns:
        Path to wardist.yaml (relative to the working directory).
    """
    for module in ("date", "hello"):
        webapp = Path(module) / "src" / "main" / "webapp"
        (webapp / "WEB-INF").mkdir(parents=True)
        (webapp / "index.html").write_text(f"<h1>{module}</h1>\n")
        (webapp / "WEB-INF" / "web.xml").write_text("<web-app/>\n")
    return create_build_yaml(WEB_DIST_YAML)

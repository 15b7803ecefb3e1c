"""Shared pytest fixtures for wardist-core tests.

This module provides common fixtures used across unit and
integration tests.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import pytest
import structlog


@pytest.fixture(autouse=True)
def configure_structlog_for_tests() -> None:
    """Configure structlog to output to stdout for test capture."""
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=False,  # Important for test isolation
    )


@pytest.fixture(autouse=True)
def clear_wardist_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep WARDIST_* variables from the developer shell out of tests."""
    monkeypatch.delenv("WARDIST_BUILD_FILE", raising=False)
    monkeypatch.delenv("WARDIST_BUILD_DIR", raising=False)


@pytest.fixture
def sample_build_yaml() -> dict[str, Any]:
    """Return the two-module web distribution build as a dictionary.

    Modules "date" and "hello" apply the webapp convention, publishing a war
    on a `wars` channel tagged type=war. The root `wars` channel depends on
    both, and `explodedDist` copies the result into build/explodedDist.
    """
    return {
        "name": "webDist",
        "version": "1.0",
        "group": "org.example.sample",
        "conventions": {
            "webapp": {
                "channels": [
                    {
                        "name": "wars",
                        "role": "producer",
                        "attributes": {"type": "war"},
                        "artifact": {"type": "war"},
                    }
                ]
            }
        },
        "modules": [
            {"name": "date", "conventions": ["webapp"]},
            {"name": "hello", "conventions": ["webapp"]},
        ],
        "channels": [
            {
                "name": "wars",
                "role": "consumer",
                "attributes": {"type": "war"},
                "dependencies": ["date", "hello"],
            }
        ],
        "distributions": [
            {"name": "explodedDist", "channel": "wars"},
        ],
    }


def _write_webapp(module_dir: Path, title: str | None = None) -> Path:
    """Create src/main/webapp with an index page and web.xml."""
    webapp = module_dir / "src" / "main" / "webapp"
    (webapp / "WEB-INF").mkdir(parents=True, exist_ok=True)
    (webapp / "index.html").write_text(f"<h1>{title or module_dir.name}</h1>\n")
    (webapp / "WEB-INF" / "web.xml").write_text("<web-app/>\n")
    return webapp


@pytest.fixture
def make_webapp() -> Any:
    """Return the helper creating a module's web application directory."""
    return _write_webapp


@pytest.fixture
def web_project(tmp_path: Path, sample_build_yaml: dict[str, Any]) -> Path:
    """Create the two-module project on disk and return its wardist.yaml."""
    import yaml

    project = tmp_path / "webDist"
    project.mkdir()
    for module in ("date", "hello"):
        _write_webapp(project / module)

    build_file = project / "wardist.yaml"
    build_file.write_text(yaml.safe_dump(sample_build_yaml, sort_keys=False))
    return build_file


@pytest.fixture
def artifact_file(tmp_path: Path) -> Any:
    """Factory creating small files standing in for packaged archives."""

    def _make(relative: str, content: str = "archive") -> Path:
        path = tmp_path / "artifacts" / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        return path

    return _make

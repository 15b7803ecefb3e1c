"""Tests for wardist validate command."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from wardist_cli.commands.validate import validate


class TestValidateCommand:
    """Tests for validate command."""

    def test_valid_project(self, isolated_runner: CliRunner, web_project: Path) -> None:
        result = isolated_runner.invoke(validate)

        assert result.exit_code == 0
        assert "Configuration valid" in result.output
        assert "2 module(s), 3 channel(s), 1 distribution(s)" in result.output

    def test_does_not_package(self, isolated_runner: CliRunner, web_project: Path) -> None:
        isolated_runner.invoke(validate)
        assert not Path("date/build").exists()

    def test_file_option(self, isolated_runner: CliRunner, web_project: Path) -> None:
        web_project.rename("custom.yaml")
        result = isolated_runner.invoke(validate, ["--file", "custom.yaml"])
        assert result.exit_code == 0

    def test_build_file_env(
        self,
        isolated_runner: CliRunner,
        web_project: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        web_project.rename("other.yaml")
        monkeypatch.setenv("WARDIST_BUILD_FILE", "other.yaml")
        result = isolated_runner.invoke(validate)
        assert result.exit_code == 0

    def test_missing_file(self, isolated_runner: CliRunner) -> None:
        result = isolated_runner.invoke(validate)

        assert result.exit_code == 2
        assert "File not found" in result.output

    def test_invalid_role(self, isolated_runner: CliRunner, create_build_yaml: object) -> None:
        create_build_yaml(  # type: ignore[operator]
            "name: webDist\n"
            "modules: [{name: date}]\n"
            "channels:\n"
            "  - {name: wars, role: producer, dependencies: [date]}\n"
        )
        result = isolated_runner.invoke(validate)

        assert result.exit_code == 1
        assert "Configuration failed" in result.output

    def test_invalid_schema(self, isolated_runner: CliRunner, create_build_yaml: object) -> None:
        create_build_yaml("name: webDist\nchannels: [{name: wars}]\n")  # type: ignore[operator]
        result = isolated_runner.invoke(validate)

        assert result.exit_code == 1
        assert "Validation failed" in result.output

    def test_blank_dependency_reported(
        self, isolated_runner: CliRunner, create_build_yaml: object
    ) -> None:
        create_build_yaml(  # type: ignore[operator]
            "name: webDist\n"
            "channels:\n"
            "  - {name: wars, role: consumer, dependencies: ['']}\n"
        )
        result = isolated_runner.invoke(validate)

        assert isinstance(result.exception, SystemExit)
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_distribution_unknown_channel(
        self, isolated_runner: CliRunner, web_project: Path
    ) -> None:
        content = web_project.read_text().replace("channel: wars", "channel: nope")
        web_project.write_text(content)
        result = isolated_runner.invoke(validate)

        assert result.exit_code == 1
        assert "Channel 'nope' not declared" in result.output

    def test_distribution_producer_channel(
        self, isolated_runner: CliRunner, create_build_yaml: object
    ) -> None:
        create_build_yaml(  # type: ignore[operator]
            "name: webDist\n"
            "channels: [{name: shared, role: producer}]\n"
            "distributions: [{name: explodedDist, channel: shared}]\n"
        )
        result = isolated_runner.invoke(validate)

        assert result.exit_code == 1
        assert "resolvable" in result.output

"""Integration tests running the full CLI from init to dist."""

from __future__ import annotations

import zipfile
from pathlib import Path

import pytest
from click.testing import CliRunner

from wardist_cli.main import cli

pytestmark = pytest.mark.integration


class TestInitToDist:
    """Tests chaining commands through the main group."""

    def test_scaffolded_project_distributes(self, isolated_runner: CliRunner) -> None:
        result = isolated_runner.invoke(cli, ["init", "--name", "webDist"])
        assert result.exit_code == 0, result.output

        result = isolated_runner.invoke(cli, ["validate"])
        assert result.exit_code == 0, result.output

        result = isolated_runner.invoke(cli, ["resolve", "wars"])
        assert result.exit_code == 0, result.output
        assert "date-1.0.war" in result.output

        result = isolated_runner.invoke(cli, ["dist"])
        assert result.exit_code == 0, result.output

        dist_dir = Path("build/explodedDist")
        assert sorted(p.name for p in dist_dir.iterdir()) == ["date-1.0.war", "hello-1.0.war"]
        with zipfile.ZipFile(dist_dir / "hello-1.0.war") as archive:
            assert "WEB-INF/web.xml" in archive.namelist()
            assert b"<h1>hello</h1>" in archive.read("index.html")

    def test_added_module_joins_distribution(self, isolated_runner: CliRunner) -> None:
        isolated_runner.invoke(
            cli, ["init", "--name", "shop", "-m", "catalog", "-m", "checkout", "-m", "admin"]
        )
        result = isolated_runner.invoke(cli, ["dist", "explodedDist"])

        assert result.exit_code == 0, result.output
        assert sorted(p.name for p in Path("build/explodedDist").iterdir()) == [
            "admin-1.0.war",
            "catalog-1.0.war",
            "checkout-1.0.war",
        ]

    def test_schema_export_beside_build_file(self, isolated_runner: CliRunner) -> None:
        isolated_runner.invoke(cli, ["init", "--name", "webDist"])
        result = isolated_runner.invoke(cli, ["schema", "export"])

        assert result.exit_code == 0
        assert Path("schemas/wardist.schema.json").exists()
        assert "$schema=./schemas/wardist.schema.json" in Path("wardist.yaml").read_text()

"""Unit tests for wardist.yaml models.

This module tests:
- ArtifactSpec defaults and file path requirement
- ChannelSpec roles and name validation
- BuildSpec reference checks
- BuildSpec.from_yaml()
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import yaml
from pydantic import ValidationError

from wardist_core.errors import ConfigurationError
from wardist_core.registry import ChannelRole
from wardist_core.schemas import (
    ArtifactSpec,
    BuildSpec,
    ChannelSpec,
    DistributionSpec,
    ModuleSpec,
)


class TestArtifactSpec:
    """Tests for ArtifactSpec."""

    def test_war_defaults_to_webapp_dir(self) -> None:
        spec = ArtifactSpec()
        assert spec.type == "war"
        assert spec.source == "src/main/webapp"

    def test_war_custom_dir(self) -> None:
        assert ArtifactSpec(type="war", path="web").source == "web"

    def test_file_requires_path(self) -> None:
        with pytest.raises(ValidationError, match="requires 'path'"):
            ArtifactSpec(type="file")

    def test_unknown_type_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ArtifactSpec(type="ear")  # type: ignore[arg-type]


class TestChannelSpec:
    """Tests for ChannelSpec."""

    def test_consumer(self) -> None:
        spec = ChannelSpec(
            name="wars",
            role="consumer",  # type: ignore[arg-type]
            attributes={"type": "war"},
            dependencies=["date", "hello"],
        )
        assert spec.role is ChannelRole.CONSUMER
        assert spec.dependencies == ["date", "hello"]
        assert spec.artifact is None

    def test_role_required(self) -> None:
        with pytest.raises(ValidationError):
            ChannelSpec(name="wars")  # type: ignore[call-arg]

    @pytest.mark.parametrize("name", ["", "1wars", "wars!", "my wars"])
    def test_invalid_names(self, name: str) -> None:
        with pytest.raises(ValidationError):
            ChannelSpec(name=name, role=ChannelRole.PRODUCER)

    def test_extra_fields_forbidden(self) -> None:
        with pytest.raises(ValidationError):
            ChannelSpec(name="wars", role=ChannelRole.PRODUCER, canBeResolved=True)  # type: ignore[call-arg]


class TestModuleSpec:
    """Tests for ModuleSpec."""

    def test_directory_defaults_to_name(self) -> None:
        assert ModuleSpec(name="date").directory == "date"
        assert ModuleSpec(name="date", path="apps/date").directory == "apps/date"

    def test_numeric_version_coerced(self) -> None:
        assert ModuleSpec(name="date", version=2).version == "2"  # type: ignore[arg-type]


class TestBuildSpec:
    """Tests for BuildSpec."""

    def test_sample_build_is_valid(self, sample_build_yaml: dict[str, Any]) -> None:
        spec = BuildSpec.model_validate(sample_build_yaml)
        assert spec.name == "webDist"
        assert [m.name for m in spec.modules] == ["date", "hello"]
        assert spec.build_dir == "build"
        assert spec.get_distribution("explodedDist").into == "explodedDist"

    def test_module_inherits_version(self, sample_build_yaml: dict[str, Any]) -> None:
        sample_build_yaml["modules"][1]["version"] = "2.0"
        spec = BuildSpec.model_validate(sample_build_yaml)
        assert spec.module_version(spec.modules[0]) == "1.0"
        assert spec.module_version(spec.modules[1]) == "2.0"

    def test_float_version_coerced(self, sample_build_yaml: dict[str, Any]) -> None:
        sample_build_yaml["version"] = 1.0
        assert BuildSpec.model_validate(sample_build_yaml).version == "1.0"

    def test_duplicate_modules_rejected(self, sample_build_yaml: dict[str, Any]) -> None:
        sample_build_yaml["modules"].append({"name": "date"})
        with pytest.raises(ValidationError, match="duplicate module names: date"):
            BuildSpec.model_validate(sample_build_yaml)

    def test_duplicate_distributions_rejected(self, sample_build_yaml: dict[str, Any]) -> None:
        sample_build_yaml["distributions"].append({"name": "explodedDist", "channel": "wars"})
        with pytest.raises(ValidationError, match="duplicate distribution names"):
            BuildSpec.model_validate(sample_build_yaml)

    def test_unknown_convention_rejected(self, sample_build_yaml: dict[str, Any]) -> None:
        sample_build_yaml["modules"][0]["conventions"] = ["java-library"]
        with pytest.raises(ValidationError, match="unknown convention 'java-library'"):
            BuildSpec.model_validate(sample_build_yaml)

    def test_get_distribution_missing(self, sample_build_yaml: dict[str, Any]) -> None:
        spec = BuildSpec.model_validate(sample_build_yaml)
        with pytest.raises(KeyError):
            spec.get_distribution("zipDist")

    def test_distribution_defaults(self) -> None:
        assert DistributionSpec(name="dist", channel="wars").into == "explodedDist"


class TestBuildSpecFromYaml:
    """Tests for BuildSpec.from_yaml()."""

    def test_load(self, tmp_path: Path, sample_build_yaml: dict[str, Any]) -> None:
        path = tmp_path / "wardist.yaml"
        path.write_text(yaml.safe_dump(sample_build_yaml))
        assert BuildSpec.from_yaml(path).name == "webDist"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            BuildSpec.from_yaml(tmp_path / "wardist.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "wardist.yaml"
        path.write_text("name: [unclosed\n")
        with pytest.raises(yaml.YAMLError):
            BuildSpec.from_yaml(path)

    def test_non_mapping_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "wardist.yaml"
        path.write_text("- just\n- a list\n")
        with pytest.raises(ConfigurationError, match="mapping"):
            BuildSpec.from_yaml(path)

    def test_empty_file_fails_validation(self, tmp_path: Path) -> None:
        path = tmp_path / "wardist.yaml"
        path.write_text("")
        with pytest.raises(ValidationError):
            BuildSpec.from_yaml(path)

"""Tests for config/loader.py module.

Covers:
- config_files() layer order
- YAML reading and layer merging
- load_config() precedence: defaults < global < project < env < kwargs
"""

from __future__ import annotations

from pathlib import Path

import pytest

from commentgate.config import loader
from commentgate.config.loader import (
    PROJECT_CONFIG_NAME,
    _merge_layers,
    _read_yaml_mapping,
    config_files,
    load_config,
)
from commentgate.config.models import CommentGateConfig
from commentgate.core.errors import ConfigError


class TestConfigFiles:
    def test_global_then_project(self, tmp_path: Path) -> None:
        files = config_files(project_root=tmp_path)

        assert files == [loader.GLOBAL_CONFIG_PATH, tmp_path / PROJECT_CONFIG_NAME]

    def test_explicit_path_replaces_project_file(self, tmp_path: Path) -> None:
        explicit = tmp_path / "gate.yaml"

        assert config_files(config_path=explicit)[-1] == explicit

    def test_defaults_to_working_directory(self, tmp_path: Path) -> None:
        # The autouse fixture chdirs into tmp_path.
        assert config_files()[-1] == tmp_path / PROJECT_CONFIG_NAME


class TestReadYamlMapping:
    def test_returns_empty_dict_for_missing_file(self, tmp_path: Path) -> None:
        assert _read_yaml_mapping(tmp_path / "nonexistent.yaml") == {}

    def test_loads_valid_yaml(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "config.yaml"
        yaml_file.write_text("logging:\n  level: DEBUG\n")

        assert _read_yaml_mapping(yaml_file) == {"logging": {"level": "DEBUG"}}

    def test_returns_empty_for_empty_file(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "empty.yaml"
        yaml_file.write_text("")

        assert _read_yaml_mapping(yaml_file) == {}

    def test_raises_config_error_for_invalid_yaml(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "bad.yaml"
        yaml_file.write_text("logging: [unclosed\n")

        with pytest.raises(ConfigError) as exc_info:
            _read_yaml_mapping(yaml_file)
        assert exc_info.value.details["path"] == str(yaml_file)

    def test_raises_config_error_for_non_mapping(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "list.yaml"
        yaml_file.write_text("- a\n- b\n")

        with pytest.raises(ConfigError):
            _read_yaml_mapping(yaml_file)


class TestMergeLayers:
    def test_nested_values_merge(self) -> None:
        base = {"filters": {"bdd": True, "shebang": True}, "logging": {"level": "INFO"}}
        override = {"filters": {"bdd": False}}

        result = _merge_layers([base, override])

        assert result == {
            "filters": {"bdd": False, "shebang": True},
            "logging": {"level": "INFO"},
        }

    def test_later_scalar_wins(self) -> None:
        assert _merge_layers([{"a": 1}, {"a": 2}, {}]) == {"a": 2}

    def test_does_not_mutate_inputs(self) -> None:
        base = {"a": {"b": 1}}

        _merge_layers([base, {"a": {"b": 2}}])

        assert base == {"a": {"b": 1}}


class TestLoadConfig:
    """Tests for load_config precedence."""

    def test_defaults_without_files(self) -> None:
        config = load_config()

        assert isinstance(config, CommentGateConfig)
        assert config.logging.level == "WARNING"
        assert config.detection.include_docstrings is True
        assert config.detection.custom_prompt is None
        assert config.filters.bdd is True

    def test_project_config_from_working_directory(self, tmp_path: Path) -> None:
        project_dir = tmp_path / ".commentgate"
        project_dir.mkdir()
        (project_dir / "config.yaml").write_text(
            "detection:\n  include_docstrings: false\nfilters:\n  bdd: false\n"
        )

        config = load_config(project_root=tmp_path)

        assert config.detection.include_docstrings is False
        assert config.filters.bdd is False
        assert config.filters.directive is True

    def test_explicit_path_overrides_project_lookup(self, tmp_path: Path) -> None:
        explicit = tmp_path / "custom.yaml"
        explicit.write_text("detection:\n  custom_prompt: 'Fix: {{comments}}'\n")

        config = load_config(config_path=explicit)

        assert config.detection.custom_prompt == "Fix: {{comments}}"

    def test_project_overrides_global(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        global_file = tmp_path / "global.yaml"
        global_file.write_text("logging:\n  level: ERROR\nfilters:\n  shebang: false\n")
        monkeypatch.setattr(loader, "GLOBAL_CONFIG_PATH", global_file)
        project = tmp_path / "project.yaml"
        project.write_text("logging:\n  level: INFO\n")

        config = load_config(config_path=project)

        assert config.logging.level == "INFO"
        assert config.filters.shebang is False

    def test_env_overrides_yaml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        project = tmp_path / "project.yaml"
        project.write_text("filters:\n  directive: true\n")
        monkeypatch.setenv("COMMENTGATE__FILTERS__DIRECTIVE", "false")

        config = load_config(config_path=project)

        assert config.filters.directive is False

    def test_invalid_value_raises_config_error(self, tmp_path: Path) -> None:
        project = tmp_path / "project.yaml"
        project.write_text("logging:\n  level: LOUD\n")

        with pytest.raises(ConfigError) as exc_info:
            load_config(config_path=project)
        assert exc_info.value.details["field"].startswith("logging")

    def test_kwargs_override_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("COMMENTGATE__FILTERS__BDD", "false")

        config = load_config(filters={"bdd": True})

        assert config.filters.bdd is True

"""Configuration loading with pydantic-settings.

Layers, lowest precedence first:

1. Built-in defaults
2. Global config (``~/.config/commentgate/config.yaml``)
3. Project config (``.commentgate/config.yaml`` under the working directory,
   or the file given with ``--config``)
4. Environment variables (``COMMENTGATE__SECTION__KEY``)
5. Keyword overrides passed to ``load_config``

YAML layers are deep-merged, so a project file that only sets
``filters.bdd`` keeps every other filter setting from the global file.
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError
from pydantic_settings import (
    BaseSettings,
    InitSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from commentgate.config.models import (
    CommentGateConfig,
    DetectionConfig,
    FiltersConfig,
    LoggingConfig,
)
from commentgate.core.errors import ConfigError

GLOBAL_CONFIG_PATH = Path("~/.config/commentgate/config.yaml").expanduser()
PROJECT_CONFIG_NAME = Path(".commentgate") / "config.yaml"


def config_files(config_path: Path | None = None, project_root: Path | None = None) -> list[Path]:
    """YAML files consulted, lowest precedence first. Missing files are skipped later."""
    project_file = config_path or (project_root or Path.cwd()) / PROJECT_CONFIG_NAME
    return [GLOBAL_CONFIG_PATH, project_file]


def _read_yaml_mapping(path: Path) -> dict[str, Any]:
    if not path.is_file():
        return {}
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigError.parse_error(str(path), str(e)) from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError.parse_error(str(path), "top-level value must be a mapping")
    return data


def _merge_layers(layers: list[dict[str, Any]]) -> dict[str, Any]:
    merged: dict[str, Any] = {}
    for layer in layers:
        merged = _merge_into(merged, layer)
    return merged


def _merge_into(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    out = dict(base)
    for key, value in override.items():
        current = out.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            out[key] = _merge_into(current, value)
        else:
            out[key] = value
    return out


def _settings_for(file_values: dict[str, Any]) -> type[BaseSettings]:
    """Settings class whose lowest source is the merged YAML of this load."""

    class CommentGateSettings(BaseSettings):
        model_config = SettingsConfigDict(
            env_prefix="COMMENTGATE__",
            env_nested_delimiter="__",
            case_sensitive=False,
        )

        logging: LoggingConfig = LoggingConfig()
        detection: DetectionConfig = DetectionConfig()
        filters: FiltersConfig = FiltersConfig()

        @classmethod
        def settings_customise_sources(
            cls,
            settings_cls: type[BaseSettings],
            init_settings: PydanticBaseSettingsSource,
            env_settings: PydanticBaseSettingsSource,
            dotenv_settings: PydanticBaseSettingsSource,  # noqa: ARG003
            file_secret_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        ) -> tuple[PydanticBaseSettingsSource, ...]:
            # First wins.
            files = InitSettingsSource(settings_cls, init_kwargs=file_values)
            return (init_settings, env_settings, files)

    return CommentGateSettings


def load_config(
    config_path: Path | None = None,
    project_root: Path | None = None,
    **kwargs: Any,
) -> CommentGateConfig:
    """Resolve the effective configuration.

    Args:
        config_path: Explicit project config file, replacing the
            ``.commentgate/config.yaml`` lookup.
        project_root: Directory holding ``.commentgate/``. Defaults to the
            current working directory.
        **kwargs: Section overrides, e.g. ``filters={"bdd": False}``.

    Raises:
        ConfigError: A YAML file is malformed or a value fails validation.
    """
    files = config_files(config_path, project_root)
    file_values = _merge_layers([_read_yaml_mapping(path) for path in files])

    try:
        settings = _settings_for(file_values)(**kwargs)
    except ValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        raise ConfigError.invalid_value(location, first.get("input"), first["msg"]) from e
    return CommentGateConfig.model_validate(settings.model_dump())

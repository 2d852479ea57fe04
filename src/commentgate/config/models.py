"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (COMMENTGATE__SECTION__KEY)
3. Project YAML (.commentgate/config.yaml, or --config PATH)
4. Global YAML (~/.config/commentgate/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    COMMENTGATE__<SECTION>__<KEY>=<VALUE>

Examples:
    COMMENTGATE__LOGGING__LEVEL=DEBUG
    COMMENTGATE__DETECTION__INCLUDE_DOCSTRINGS=false
    COMMENTGATE__FILTERS__BDD=false
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration.

    Env vars: Not directly configurable via env (use YAML for multi-output).
    """

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        COMMENTGATE__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="WARNING",
        description="Root log level. Logs share stderr with the hook message.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class DetectionConfig(BaseModel):
    """Comment detection configuration.

    Env vars:
        COMMENTGATE__DETECTION__INCLUDE_DOCSTRINGS: Report docstrings too
        COMMENTGATE__DETECTION__CUSTOM_PROMPT: Replacement warning template
    """

    include_docstrings: bool = Field(
        default=True,
        description="Report docstrings and doc-comments alongside plain comments.",
    )
    custom_prompt: str | None = Field(
        default=None,
        description="Replaces the default warning. {{comments}} expands to the "
        "per-file comment listing.",
    )


class FiltersConfig(BaseModel):
    """Which suppression filters run. Order is fixed regardless.

    Env vars:
        COMMENTGATE__FILTERS__SHEBANG / __BDD / __DIRECTIVE
    """

    shebang: bool = True
    bdd: bool = True
    directive: bool = True


class CommentGateConfig(BaseModel):
    """Root configuration model."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    detection: DetectionConfig = Field(default_factory=DetectionConfig)
    filters: FiltersConfig = Field(default_factory=FiltersConfig)

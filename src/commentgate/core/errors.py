"""commentgate error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Hook input
- 4xxx: Grammar
- 9xxx: Internal

None of these ever reach the hook's caller. The extraction core absorbs
grammar failures into a skip reason, and the CLI turns every error into a
passing exit code.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002

    # Hook input (3xxx)
    HOOK_INPUT_EMPTY = 3001
    HOOK_INPUT_INVALID = 3002

    # Grammar (4xxx)
    GRAMMAR_NOT_INSTALLED = 4001

    # Internal (9xxx)
    INTERNAL_ERROR = 9001


@dataclass(frozen=True, slots=True)
class CommentGateError(Exception):
    """Base error with structured context."""

    code: ErrorCode
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'CONFIG_PARSE_ERROR')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(CommentGateError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )


class HookInputError(CommentGateError):
    """The hook envelope on stdin could not be used."""

    @classmethod
    def empty_input(cls) -> "HookInputError":
        return cls(
            code=ErrorCode.HOOK_INPUT_EMPTY,
            message="No input provided",
        )

    @classmethod
    def invalid_format(cls, reason: str) -> "HookInputError":
        return cls(
            code=ErrorCode.HOOK_INPUT_INVALID,
            message=f"Invalid input format: {reason}",
            details={"reason": reason},
        )


class GrammarUnavailableError(CommentGateError):
    """A tree-sitter grammar package is missing or unloadable."""

    @classmethod
    def not_installed(cls, language: str, module: str) -> "GrammarUnavailableError":
        return cls(
            code=ErrorCode.GRAMMAR_NOT_INSTALLED,
            message=f"Grammar for {language} not available (import {module})",
            details={"language": language, "module": module},
        )


class InternalError(CommentGateError):
    """Internal/unexpected errors."""

    @classmethod
    def unexpected(cls, reason: str, **details: Any) -> "InternalError":
        return cls(
            code=ErrorCode.INTERNAL_ERROR,
            message=f"Internal error: {reason}",
            details=details,
        )

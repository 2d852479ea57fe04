"""Core module exports."""

from commentgate.core.errors import (
    CommentGateError,
    ConfigError,
    ErrorCode,
    GrammarUnavailableError,
    HookInputError,
    InternalError,
)
from commentgate.core.logging import (
    bind_hook_context,
    clear_hook_context,
    configure_logging,
)
from commentgate.core.models import CommentKind, CommentRecord

__all__ = [
    # Errors
    "CommentGateError",
    "ConfigError",
    "ErrorCode",
    "GrammarUnavailableError",
    "HookInputError",
    "InternalError",
    # Logging
    "bind_hook_context",
    "clear_hook_context",
    "configure_logging",
    # Models
    "CommentKind",
    "CommentRecord",
]

"""Instructions to type checkers, linters and formatters.

Matched by prefix because directives carry arguments
(``type: ignore[arg-type]``, ``eslint-disable-next-line no-console``).
Prefixes like ``allow`` also match ordinary prose that happens to start with
that word; that imprecision is accepted.
"""

from __future__ import annotations

from commentgate.core.models import CommentRecord
from commentgate.filters.base import normalize_comment_text

DIRECTIVE_PREFIXES: tuple[str, ...] = (
    # Python
    "type:",
    "noqa",
    "pyright:",
    "ruff:",
    "mypy:",
    "pylint:",
    "flake8:",
    "pyre:",
    "pytype:",
    "nosec",
    "pragma:",
    "fmt:",
    "isort:",
    # JavaScript / TypeScript
    "eslint-disable",
    "eslint-ignore",
    "prettier-ignore",
    "ts-ignore",
    "ts-expect-error",
    "ts-nocheck",
    "istanbul ignore",
    "c8 ignore",
    # Rust attributes and clippy
    "clippy:",
    "allow",
    "deny",
    "warn",
    "forbid",
    # Others
    "nolint",
    "rubocop:",
    "coverage:",
    "shellcheck",
)


class DirectiveFilter:
    name = "directive"

    def should_suppress(self, comment: CommentRecord) -> bool:
        normalized = normalize_comment_text(comment.text).casefold()
        if normalized.startswith("@"):
            normalized = normalized[1:].strip()
        return normalized.startswith(DIRECTIVE_PREFIXES)

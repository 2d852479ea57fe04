"""Shared pieces of the suppression filters."""

from __future__ import annotations

from typing import Protocol

from commentgate.core.models import CommentRecord

# Tried in order, first match wins, at most one is stripped.
COMMENT_DELIMITERS: tuple[str, ...] = ("#", "//", "/*", "--", "*")


def normalize_comment_text(text: str) -> str:
    """Trim, drop one leading comment delimiter, trim again."""
    normalized = text.strip()
    for delimiter in COMMENT_DELIMITERS:
        if normalized.startswith(delimiter):
            normalized = normalized[len(delimiter) :].strip()
            break
    return normalized


class CommentFilter(Protocol):
    """A predicate deciding whether a comment is not worth reporting."""

    name: str

    def should_suppress(self, comment: CommentRecord) -> bool: ...

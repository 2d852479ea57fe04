"""Interpreter lines are not prose."""

from __future__ import annotations

from commentgate.core.models import CommentRecord


class ShebangFilter:
    name = "shebang"

    def should_suppress(self, comment: CommentRecord) -> bool:
        # Checked before delimiter stripping, which would eat the '#'.
        return comment.text.strip().startswith("#!")

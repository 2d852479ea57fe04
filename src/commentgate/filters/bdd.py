"""Test-structure markers such as ``# given`` / ``# when`` / ``# then``.

Only a comment consisting of exactly one keyword is suppressed;
``# when the cache is cold`` is prose and still reported.
"""

from __future__ import annotations

from commentgate.core.models import CommentRecord
from commentgate.filters.base import normalize_comment_text

BDD_KEYWORDS: frozenset[str] = frozenset(
    {
        "given",
        "when",
        "then",
        "arrange",
        "act",
        "assert",
        "when & then",
        "when&then",
    }
)


class BddFilter:
    name = "bdd"

    def should_suppress(self, comment: CommentRecord) -> bool:
        return normalize_comment_text(comment.text).casefold() in BDD_KEYWORDS

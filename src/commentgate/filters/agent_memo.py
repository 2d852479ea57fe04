"""Detects comments that narrate the edit instead of explaining the code.

"Changed from X to Y", "Refactored ...", "This implements ..." and their
Korean counterparts are notes an agent leaves for itself. They are not
suppressed; the report puts them first.
"""

from __future__ import annotations

import re

from commentgate.core.models import CommentRecord
from commentgate.filters.base import normalize_comment_text

_LEAD = r"^[\s#/*-]*"

_ENGLISH_PATTERNS = (
    _LEAD + r"changed?\s+(from|to)\b",
    _LEAD + r"modified?\s+(from|to)?\b",
    _LEAD + r"updated?\s+(from|to)?\b",
    _LEAD + r"refactor(ed|ing)?\b",
    _LEAD + r"moved?\s+(from|to)\b",
    _LEAD + r"renamed?\s+(from|to)?\b",
    _LEAD + r"replaced?\b",
    _LEAD + r"removed?\b",
    _LEAD + r"deleted?\b",
    _LEAD + r"added?\b",
    _LEAD + r"implemented?\b",
    _LEAD + r"this\s+(implements?|adds?|removes?|changes?|fixes?)\b",
    _LEAD + r"here\s+we\b",
    _LEAD + r"now\s+(we|this|it)\b",
    _LEAD + r"previously\b",
    _LEAD + r"before\s+this\b",
    _LEAD + r"after\s+this\b",
    _LEAD + r"was\s+changed\b",
    _LEAD + r"implementation\s+(of|note)\b",
    _LEAD + r"note:\s*\w",
    _LEAD + r"[a-z]+\s*->\s*[a-z]+",
    _LEAD + r"converted?\s+(from|to)\b",
    _LEAD + r"migrated?\s+(from|to)?\b",
    _LEAD + r"switched?\s+(from|to)\b",
)

_KOREAN_PATTERNS = (
    r"여기(서|에서)\s*",
    r"(으로|로)\s*(바뀜|변경|변환)",
    r"구현(임|함|했|된|됨)",
    r"추가(함|했|된|됨)",
    r"삭제(함|했|된|됨)",
    r"수정(함|했|된|됨)",
    r"변경(함|했|된|됨)",
    r"리팩(터|토)링",
    r"이전(에는|엔)",
    r"기존(에는|엔|의)",
    r"에서\s+\S+\s*(으로|로)\b",
)

AGENT_MEMO_PATTERNS: tuple[re.Pattern[str], ...] = tuple(
    re.compile(pattern, re.IGNORECASE) for pattern in _ENGLISH_PATTERNS + _KOREAN_PATTERNS
)


class AgentMemoClassifier:
    """Flags change-narration comments. Never used to suppress."""

    def is_agent_memo(self, comment: CommentRecord) -> bool:
        text = normalize_comment_text(comment.text)
        return any(pattern.search(text) for pattern in AGENT_MEMO_PATTERNS)


def is_agent_memo(comment: CommentRecord) -> bool:
    return AgentMemoClassifier().is_agent_memo(comment)

"""Novelty diff: which comments did an edit introduce?

A comment is new when its normalized text (trimmed, case-folded) does not
occur among the comments of the "before" snapshot. There is no positional or
tree alignment, so a moved comment is not new, and a reworded one is.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from commentgate.core.models import CommentRecord
from commentgate.detection.extractor import CommentExtractor


def comment_text_set(comments: Iterable[CommentRecord]) -> set[str]:
    return {comment.normalized_text for comment in comments}


def filter_new_comments(
    before: Sequence[CommentRecord],
    after: Sequence[CommentRecord],
) -> list[CommentRecord]:
    """Keep the ``after`` comments whose text is absent from ``before``."""
    if not before:
        return list(after)
    seen = comment_text_set(before)
    return [comment for comment in after if comment.normalized_text not in seen]


def new_comments(
    before_text: str,
    after_text: str,
    file_identity: str,
    include_docstrings: bool = True,
    extractor: CommentExtractor | None = None,
) -> list[CommentRecord]:
    """Comments present in ``after_text`` that were not in ``before_text``.

    An empty ``before_text`` (whole-file creation) makes every comment new.
    """
    extractor = extractor or CommentExtractor()
    after = extractor.extract(after_text, file_identity, include_docstrings)
    if not before_text:
        return after
    before = extractor.extract(before_text, file_identity, include_docstrings)
    return filter_new_comments(before, after)

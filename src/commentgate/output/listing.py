"""Per-file ``<comments>`` listing embedded in the hook message."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from commentgate.core.models import CommentRecord


def build_comments_xml(comments: Sequence[CommentRecord], file_path: str) -> str:
    """Render one file's comments. Comment text is emitted verbatim."""
    if not comments:
        return ""
    lines = [f'<comments file="{file_path}">']
    lines.extend(
        f'\t<comment line-number="{comment.line}">{comment.text}</comment>' for comment in comments
    )
    lines.append("</comments>")
    return "\n".join(lines)


def group_by_file(comments: Iterable[CommentRecord]) -> dict[str, list[CommentRecord]]:
    """Group comments by file, files in first-seen order."""
    grouped: dict[str, list[CommentRecord]] = {}
    for comment in comments:
        grouped.setdefault(comment.file_path, []).append(comment)
    return grouped


def build_listing(comments: Iterable[CommentRecord]) -> str:
    """All files' listings, each followed by a newline."""
    return "".join(
        build_comments_xml(file_comments, file_path) + "\n"
        for file_path, file_comments in group_by_file(comments).items()
    )

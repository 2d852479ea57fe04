"""Ordered, independent suppression filters."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from commentgate.core.models import CommentRecord
from commentgate.filters.base import CommentFilter
from commentgate.filters.bdd import BddFilter
from commentgate.filters.directive import DirectiveFilter
from commentgate.filters.shebang import ShebangFilter


class FilterPipeline:
    """Drops a comment when any filter suppresses it.

    Filters are independent: each sees the original record, none sees the
    output of another.
    """

    def __init__(self, filters: Sequence[CommentFilter] | None = None) -> None:
        if filters is None:
            filters = (ShebangFilter(), BddFilter(), DirectiveFilter())
        self._filters: tuple[CommentFilter, ...] = tuple(filters)

    @property
    def filters(self) -> tuple[CommentFilter, ...]:
        return self._filters

    def suppressed_by(self, comment: CommentRecord) -> list[str]:
        """Names of the filters that suppress ``comment``."""
        return [f.name for f in self._filters if f.should_suppress(comment)]

    def should_suppress(self, comment: CommentRecord) -> bool:
        return any(f.should_suppress(comment) for f in self._filters)

    def apply(self, comments: Iterable[CommentRecord]) -> list[CommentRecord]:
        return [comment for comment in comments if not self.should_suppress(comment)]


def build_pipeline(
    shebang: bool = True,
    bdd: bool = True,
    directive: bool = True,
) -> FilterPipeline:
    """Pipeline with the enabled filters, always in shebang, bdd, directive order."""
    filters: list[CommentFilter] = []
    if shebang:
        filters.append(ShebangFilter())
    if bdd:
        filters.append(BddFilter())
    if directive:
        filters.append(DirectiveFilter())
    return FilterPipeline(filters)

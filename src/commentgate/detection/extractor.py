"""Comment extraction from source snapshots via tree-sitter queries.

The extractor is best-effort. An unsupported file, a missing grammar, a
query that does not compile for the installed grammar, or a parser failure
all produce an empty result carrying a ``SkipReason``, never an exception.
Snapshots are often edit fragments that are not valid programs on their
own. Tree-sitter recovers from those with ERROR nodes, and comments outside
the broken region are still reported.

Two passes run over one parse:

1. The generic pass captures every comment node and classifies it. When
   docstrings are requested, comments matching the language's doc-marker
   (``/**``) are left for the second pass so one physical comment is never
   reported twice.
2. The docstring pass (only when requested and the language has a docstring
   query) reports docstrings and doc-comments as ``CommentKind.DOCSTRING``.

Results are ordered generic pass first, then docstring pass, each in source
order.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any

import structlog
import tree_sitter
from tree_sitter import Query as _TSQuery
from tree_sitter import QueryCursor as _TSQueryCursor

from commentgate.core.errors import GrammarUnavailableError
from commentgate.core.models import CommentKind, CommentRecord
from commentgate.parsing.grammars import load_language
from commentgate.parsing.packs import LanguageId, resolve
from commentgate.parsing.queries import doc_marker, docstring_query, generic_query

logger = structlog.get_logger()

# Grammars that distinguish comment flavours by node type (rust, java).
_LINE_COMMENT_NODE = "line_comment"
_BLOCK_COMMENT_NODE = "block_comment"


class SkipReason(str, Enum):
    """Why an extraction produced nothing without looking at comments."""

    EMPTY_SOURCE = "empty_source"
    UNSUPPORTED_LANGUAGE = "unsupported_language"
    GRAMMAR_UNAVAILABLE = "grammar_unavailable"
    QUERY_COMPILATION_FAILED = "query_compilation_failed"
    PARSE_FAILED = "parse_failed"


@dataclass(frozen=True)
class ExtractionResult:
    """Comments found in one snapshot, or the reason none were looked for."""

    language: LanguageId | None
    comments: tuple[CommentRecord, ...] = ()
    skip_reason: SkipReason | None = None

    @property
    def skipped(self) -> bool:
        return self.skip_reason is not None


def classify_by_node_type(node_type: str) -> CommentKind | None:
    """Structural tier: grammars with dedicated line/block comment nodes."""
    if node_type == _LINE_COMMENT_NODE:
        return CommentKind.LINE
    if node_type == _BLOCK_COMMENT_NODE:
        return CommentKind.BLOCK
    return None


def classify_by_prefix(text: str) -> CommentKind:
    """Textual tier: classify by the comment's opening delimiter."""
    stripped = text.strip()
    if stripped.startswith(('"""', "'''")):
        return CommentKind.DOCSTRING
    if stripped.startswith(("//", "#")):
        return CommentKind.LINE
    if stripped.startswith(("/*", "<!--", "--")):
        return CommentKind.BLOCK
    return CommentKind.LINE


def classify(text: str, node_type: str) -> CommentKind:
    """Node type first; text prefix only when the grammar has one comment node."""
    kind = classify_by_node_type(node_type)
    if kind is not None:
        return kind
    return classify_by_prefix(text)


class CommentExtractor:
    """Extracts ``CommentRecord`` values from source text.

    Stateless apart from a reusable tree-sitter parser; grammar and query
    tables are read-only module data, so one instance per thread (or one call
    per file) is all the coordination needed.

    Usage::

        extractor = CommentExtractor()
        comments = extractor.extract(source, "src/app.py", include_docstrings=True)
    """

    def __init__(self) -> None:
        self._parser = tree_sitter.Parser()

    def extract(
        self,
        source_text: str,
        file_identity: str,
        include_docstrings: bool = True,
    ) -> list[CommentRecord]:
        """Return every comment (and optionally docstring) in ``source_text``."""
        return list(self.run(source_text, file_identity, include_docstrings).comments)

    def run(
        self,
        source_text: str,
        file_identity: str,
        include_docstrings: bool = True,
    ) -> ExtractionResult:
        """Extract comments, reporting why nothing was extracted when skipped."""
        language = resolve(file_identity)
        if language is None:
            return self._skip(None, SkipReason.UNSUPPORTED_LANGUAGE, file_identity)
        if not source_text:
            return ExtractionResult(language=language, skip_reason=SkipReason.EMPTY_SOURCE)

        try:
            ts_lang = load_language(language)
        except GrammarUnavailableError as err:
            return self._skip(language, SkipReason.GRAMMAR_UNAVAILABLE, file_identity, str(err))

        query = self._compile(ts_lang, generic_query(language), language)
        if query is None:
            return self._skip(language, SkipReason.QUERY_COMPILATION_FAILED, file_identity)

        source_bytes = source_text.encode("utf-8")
        try:
            self._parser.language = ts_lang
            tree = self._parser.parse(source_bytes)
        except Exception as err:  # noqa: BLE001
            return self._skip(language, SkipReason.PARSE_FAILED, file_identity, str(err))
        if tree is None:
            return self._skip(language, SkipReason.PARSE_FAILED, file_identity)

        root = tree.root_node
        comments = list(
            self._generic_pass(
                query, root, source_bytes, file_identity, language, include_docstrings
            )
        )
        if include_docstrings:
            comments.extend(
                self._docstring_pass(ts_lang, root, source_bytes, file_identity, language)
            )

        return ExtractionResult(language=language, comments=tuple(comments))

    def _generic_pass(
        self,
        query: _TSQuery,
        root: Any,
        source_bytes: bytes,
        file_identity: str,
        language: LanguageId,
        include_docstrings: bool,
    ) -> Iterator[CommentRecord]:
        marker = doc_marker(language)
        for node in self._captured_nodes(query, root):
            text = _node_text(node, source_bytes)
            if not text:
                continue
            # Doc-comments are reported by the docstring pass instead.
            if include_docstrings and marker is not None and marker.search(text):
                continue
            kind = classify(text, node.type)
            if kind is CommentKind.DOCSTRING and not include_docstrings:
                continue
            yield CommentRecord(
                text=text,
                line=node.start_point[0] + 1,
                file_path=file_identity,
                kind=kind,
                is_docstring=kind is CommentKind.DOCSTRING,
            )

    def _docstring_pass(
        self,
        ts_lang: tree_sitter.Language,
        root: Any,
        source_bytes: bytes,
        file_identity: str,
        language: LanguageId,
    ) -> Iterator[CommentRecord]:
        query_text = docstring_query(language)
        if query_text is None:
            return
        query = self._compile(ts_lang, query_text, language)
        if query is None:
            return
        marker = doc_marker(language)
        for node in self._captured_nodes(query, root):
            text = _node_text(node, source_bytes)
            if not text:
                continue
            if marker is not None and not marker.search(text):
                continue
            yield CommentRecord(
                text=text,
                line=node.start_point[0] + 1,
                file_path=file_identity,
                kind=CommentKind.DOCSTRING,
                is_docstring=True,
            )

    @staticmethod
    def _compile(
        ts_lang: tree_sitter.Language, query_text: str, language: LanguageId
    ) -> _TSQuery | None:
        try:
            return _TSQuery(ts_lang, query_text)
        except Exception as err:  # noqa: BLE001
            logger.debug("query_compile_failed", language=language.value, error=str(err))
            return None

    @staticmethod
    def _captured_nodes(query: _TSQuery, root: Any) -> list[Any]:
        """Captured nodes in source order, each node once."""
        cursor = _TSQueryCursor(query)
        matches: list[tuple[int, dict[str, list[Any]]]] = cursor.matches(root)
        by_span: dict[tuple[int, int], Any] = {}
        for _pattern_idx, captures in matches:
            for nodes in captures.values():
                for node in nodes:
                    by_span.setdefault((node.start_byte, node.end_byte), node)
        return [by_span[span] for span in sorted(by_span)]

    @staticmethod
    def _skip(
        language: LanguageId | None,
        reason: SkipReason,
        file_identity: str,
        detail: str | None = None,
    ) -> ExtractionResult:
        logger.debug(
            "extraction_skipped",
            reason=reason.value,
            language=language.value if language is not None else None,
            file_path=file_identity,
            detail=detail,
        )
        return ExtractionResult(language=language, skip_reason=reason)


def _node_text(node: Any, source_bytes: bytes) -> str:
    return source_bytes[node.start_byte : node.end_byte].decode("utf-8", errors="replace")


_default_extractor: CommentExtractor | None = None


def extract(
    source_text: str, file_identity: str, include_docstrings: bool = True
) -> list[CommentRecord]:
    """Module-level convenience over a shared ``CommentExtractor``."""
    global _default_extractor
    if _default_extractor is None:
        _default_extractor = CommentExtractor()
    return _default_extractor.extract(source_text, file_identity, include_docstrings)

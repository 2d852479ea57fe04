"""Tree-sitter query catalog for comment and docstring capture.

Two tiers per language:

- a generic query capturing every comment node. Most grammars name it
  ``comment``; Rust and Java split it into ``line_comment``/``block_comment``,
  Scala and Swift add a separate node for block comments.
- an optional docstring query. Python docstrings are structural (a bare
  string as the first statement of a module, class or function body; a
  module docstring may follow leading comments such as a shebang).
  JavaScript, TypeScript and Java doc-comments are ordinary block comments
  whose text starts with ``/**``, so their query is the generic comment
  pattern refined by ``DOC_MARKERS``.

Marker-based detection is textual: any block comment opening with ``/**`` is
a doc-comment, whatever it documents.
"""

from __future__ import annotations

import re

from commentgate.parsing.packs import LanguageId

DEFAULT_COMMENT_QUERY = "(comment) @comment"

_LINE_BLOCK_QUERY = """
    (line_comment) @comment
    (block_comment) @comment
"""

_SCALA_QUERY = """
    (comment) @comment
    (block_comment) @comment
"""

_SWIFT_QUERY = """
    (comment) @comment
    (multiline_comment) @comment
"""

GENERIC_QUERIES: dict[LanguageId, str] = {
    LanguageId.PYTHON: DEFAULT_COMMENT_QUERY,
    LanguageId.JAVASCRIPT: DEFAULT_COMMENT_QUERY,
    LanguageId.TYPESCRIPT: DEFAULT_COMMENT_QUERY,
    LanguageId.TSX: DEFAULT_COMMENT_QUERY,
    LanguageId.GOLANG: DEFAULT_COMMENT_QUERY,
    LanguageId.RUST: _LINE_BLOCK_QUERY,
    LanguageId.SWIFT: _SWIFT_QUERY,
    LanguageId.JAVA: _LINE_BLOCK_QUERY,
    LanguageId.SCALA: _SCALA_QUERY,
    LanguageId.ELIXIR: DEFAULT_COMMENT_QUERY,
    LanguageId.C: DEFAULT_COMMENT_QUERY,
    LanguageId.CPP: DEFAULT_COMMENT_QUERY,
    LanguageId.CSHARP: DEFAULT_COMMENT_QUERY,
    LanguageId.RUBY: DEFAULT_COMMENT_QUERY,
    LanguageId.PHP: DEFAULT_COMMENT_QUERY,
    LanguageId.BASH: DEFAULT_COMMENT_QUERY,
    LanguageId.LUA: DEFAULT_COMMENT_QUERY,
    LanguageId.OCAML: DEFAULT_COMMENT_QUERY,
    LanguageId.HTML: DEFAULT_COMMENT_QUERY,
    LanguageId.CSS: DEFAULT_COMMENT_QUERY,
    LanguageId.YAML: DEFAULT_COMMENT_QUERY,
}

_PYTHON_DOCSTRINGS = """
    (module . (comment)* . (expression_statement (string) @docstring))
    (class_definition body: (block . (expression_statement (string) @docstring)))
    (function_definition body: (block . (expression_statement (string) @docstring)))
"""

_JSDOC = r"""
    ((comment) @docstring
     (#match? @docstring "^/\\*\\*"))
"""

_JAVADOC = r"""
    ((block_comment) @docstring
     (#match? @docstring "^/\\*\\*"))
"""

DOCSTRING_QUERIES: dict[LanguageId, str] = {
    LanguageId.PYTHON: _PYTHON_DOCSTRINGS,
    LanguageId.JAVASCRIPT: _JSDOC,
    LanguageId.TYPESCRIPT: _JSDOC,
    LanguageId.TSX: _JSDOC,
    LanguageId.JAVA: _JAVADOC,
}

_DOC_COMMENT = re.compile(r"^/\*\*")

DOC_MARKERS: dict[LanguageId, re.Pattern[str]] = {
    LanguageId.JAVASCRIPT: _DOC_COMMENT,
    LanguageId.TYPESCRIPT: _DOC_COMMENT,
    LanguageId.TSX: _DOC_COMMENT,
    LanguageId.JAVA: _DOC_COMMENT,
}


def generic_query(language: LanguageId) -> str:
    """Comment-capturing query, falling back to the ``comment`` node type."""
    return GENERIC_QUERIES.get(language, DEFAULT_COMMENT_QUERY)


def docstring_query(language: LanguageId) -> str | None:
    """Docstring query, or None when the language has no docstring concept."""
    return DOCSTRING_QUERIES.get(language)


def doc_marker(language: LanguageId) -> re.Pattern[str] | None:
    """Text pattern identifying doc-comments among generic comments."""
    return DOC_MARKERS.get(language)

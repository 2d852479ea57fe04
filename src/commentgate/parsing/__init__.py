"""Language resolution, grammar loading and the comment query catalog."""

from commentgate.parsing.grammars import (
    get_missing_grammars,
    grammar_status,
    is_grammar_installed,
    load_language,
)
from commentgate.parsing.packs import (
    PACKS,
    LanguageId,
    LanguagePack,
    get_pack,
    is_supported,
    resolve,
)
from commentgate.parsing.queries import doc_marker, docstring_query, generic_query

__all__ = [
    "PACKS",
    "LanguageId",
    "LanguagePack",
    "doc_marker",
    "docstring_query",
    "generic_query",
    "get_missing_grammars",
    "get_pack",
    "grammar_status",
    "is_grammar_installed",
    "is_supported",
    "load_language",
    "resolve",
]

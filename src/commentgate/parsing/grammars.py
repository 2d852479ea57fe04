"""Tree-sitter grammar loading and availability checks.

Grammar packages are ordinary dependencies. The mainstream ones are always
installed; the rest come with the ``all-grammars`` extra. A language whose
grammar module cannot be imported is reported as unavailable and skipped by
the extractor.
"""

from __future__ import annotations

import importlib
from functools import lru_cache
from importlib.util import find_spec

import tree_sitter

from commentgate.core.errors import GrammarUnavailableError
from commentgate.parsing.packs import PACKS, LanguageId, get_pack


def is_grammar_installed(import_name: str) -> bool:
    """Check if a grammar package is installed."""
    try:
        return find_spec(import_name) is not None
    except (ImportError, ValueError):
        return False


@lru_cache(maxsize=None)
def load_language(language: LanguageId) -> tree_sitter.Language:
    """Load (once per process) the tree-sitter Language for ``language``.

    Uses LanguagePack metadata for module/function resolution: most grammar
    modules expose ``language()``, a few (typescript, tsx, php, ocaml) expose a
    differently named function.

    Raises:
        GrammarUnavailableError: The grammar module is missing or broken.
    """
    pack = get_pack(language)
    func_name = pack.language_func or "language"
    try:
        module = importlib.import_module(pack.grammar_module)
        lang_fn = getattr(module, func_name)
        return tree_sitter.Language(lang_fn())
    except (ImportError, AttributeError, TypeError, ValueError) as err:
        raise GrammarUnavailableError.not_installed(language.value, pack.grammar_module) from err


def grammar_status() -> dict[LanguageId, bool]:
    """Map every supported language to whether its grammar is importable."""
    return {lang: is_grammar_installed(pack.grammar_module) for lang, pack in PACKS.items()}


def get_missing_grammars(languages: set[LanguageId] | None = None) -> list[tuple[str, str]]:
    """Get (package, min_version) tuples that are needed but not installed."""
    needed: list[tuple[str, str]] = []
    wanted = languages if languages is not None else set(PACKS)
    for lang in sorted(wanted, key=lambda item: item.value):
        pack = get_pack(lang)
        entry = (pack.grammar_package, pack.min_version)
        if not is_grammar_installed(pack.grammar_module) and entry not in needed:
            needed.append(entry)
    return needed

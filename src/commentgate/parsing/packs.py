"""LanguagePack registry: the closed set of languages commentgate can parse.

Every supported language has exactly ONE LanguagePack holding:
- Grammar install metadata (PyPI package, import module, loader function)
- File detection (extensions and extensionless filenames)

The tables are built once at import time and never mutated. ``resolve`` is
the only entry point the extractor needs: it maps a file identity to a
``LanguageId`` or returns None, which callers treat as "skip this file".
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import PurePath


class LanguageId(str, Enum):
    """Canonical identifiers for the supported grammars."""

    PYTHON = "python"
    JAVASCRIPT = "javascript"
    TYPESCRIPT = "typescript"
    TSX = "tsx"
    GOLANG = "golang"
    JAVA = "java"
    SCALA = "scala"
    C = "c"
    CPP = "cpp"
    RUST = "rust"
    RUBY = "ruby"
    BASH = "bash"
    CSHARP = "csharp"
    SWIFT = "swift"
    ELIXIR = "elixir"
    LUA = "lua"
    PHP = "php"
    OCAML = "ocaml"
    HTML = "html"
    CSS = "css"
    YAML = "yaml"


@dataclass(frozen=True)
class LanguagePack:
    """Grammar and detection metadata for a single language."""

    # -- Identity --
    language: LanguageId

    # -- Grammar install --
    grammar_package: str  # PyPI package ("tree-sitter-python")
    grammar_module: str  # Python import ("tree_sitter_python")
    min_version: str
    # Non-standard function name (e.g. "language_typescript", "language_tsx")
    language_func: str | None = None

    # -- File detection --
    extensions: frozenset[str] = field(default_factory=frozenset)
    filenames: frozenset[str] = field(default_factory=frozenset)

    @property
    def name(self) -> str:
        return self.language.value


_ALL_PACKS: tuple[LanguagePack, ...] = (
    LanguagePack(
        language=LanguageId.PYTHON,
        grammar_package="tree-sitter-python",
        grammar_module="tree_sitter_python",
        min_version="0.23.0",
        extensions=frozenset({"py", "pyi", "pyw"}),
    ),
    LanguagePack(
        language=LanguageId.JAVASCRIPT,
        grammar_package="tree-sitter-javascript",
        grammar_module="tree_sitter_javascript",
        min_version="0.23.0",
        extensions=frozenset({"js", "jsx", "mjs", "cjs"}),
    ),
    LanguagePack(
        language=LanguageId.TYPESCRIPT,
        grammar_package="tree-sitter-typescript",
        grammar_module="tree_sitter_typescript",
        min_version="0.23.0",
        language_func="language_typescript",
        extensions=frozenset({"ts", "mts", "cts"}),
    ),
    LanguagePack(
        language=LanguageId.TSX,
        grammar_package="tree-sitter-typescript",
        grammar_module="tree_sitter_typescript",
        min_version="0.23.0",
        language_func="language_tsx",
        extensions=frozenset({"tsx"}),
    ),
    LanguagePack(
        language=LanguageId.GOLANG,
        grammar_package="tree-sitter-go",
        grammar_module="tree_sitter_go",
        min_version="0.23.0",
        extensions=frozenset({"go"}),
    ),
    LanguagePack(
        language=LanguageId.JAVA,
        grammar_package="tree-sitter-java",
        grammar_module="tree_sitter_java",
        min_version="0.23.0",
        extensions=frozenset({"java"}),
    ),
    LanguagePack(
        language=LanguageId.SCALA,
        grammar_package="tree-sitter-scala",
        grammar_module="tree_sitter_scala",
        min_version="0.23.0",
        extensions=frozenset({"scala", "sc"}),
    ),
    LanguagePack(
        language=LanguageId.C,
        grammar_package="tree-sitter-c",
        grammar_module="tree_sitter_c",
        min_version="0.23.0",
        extensions=frozenset({"c", "h"}),
    ),
    LanguagePack(
        language=LanguageId.CPP,
        grammar_package="tree-sitter-cpp",
        grammar_module="tree_sitter_cpp",
        min_version="0.23.0",
        extensions=frozenset({"cpp", "cc", "cxx", "hpp", "hh", "hxx"}),
    ),
    LanguagePack(
        language=LanguageId.RUST,
        grammar_package="tree-sitter-rust",
        grammar_module="tree_sitter_rust",
        min_version="0.23.0",
        extensions=frozenset({"rs"}),
    ),
    LanguagePack(
        language=LanguageId.RUBY,
        grammar_package="tree-sitter-ruby",
        grammar_module="tree_sitter_ruby",
        min_version="0.23.0",
        extensions=frozenset({"rb", "rake", "gemspec"}),
        filenames=frozenset({"rakefile", "gemfile"}),
    ),
    LanguagePack(
        language=LanguageId.BASH,
        grammar_package="tree-sitter-bash",
        grammar_module="tree_sitter_bash",
        min_version="0.23.0",
        extensions=frozenset({"sh", "bash", "zsh"}),
        filenames=frozenset({"bashrc", "bash_profile", "bash_logout", "profile", "zshrc"}),
    ),
    LanguagePack(
        language=LanguageId.CSHARP,
        grammar_package="tree-sitter-c-sharp",
        grammar_module="tree_sitter_c_sharp",
        min_version="0.23.0",
        extensions=frozenset({"cs"}),
    ),
    LanguagePack(
        language=LanguageId.SWIFT,
        grammar_package="tree-sitter-swift",
        grammar_module="tree_sitter_swift",
        min_version="0.0.1",
        extensions=frozenset({"swift"}),
    ),
    LanguagePack(
        language=LanguageId.ELIXIR,
        grammar_package="tree-sitter-elixir",
        grammar_module="tree_sitter_elixir",
        min_version="0.3.0",
        extensions=frozenset({"ex", "exs"}),
    ),
    LanguagePack(
        language=LanguageId.LUA,
        grammar_package="tree-sitter-lua",
        grammar_module="tree_sitter_lua",
        min_version="0.2.0",
        extensions=frozenset({"lua"}),
    ),
    LanguagePack(
        language=LanguageId.PHP,
        grammar_package="tree-sitter-php",
        grammar_module="tree_sitter_php",
        min_version="0.23.0",
        language_func="language_php",
        extensions=frozenset({"php"}),
    ),
    LanguagePack(
        language=LanguageId.OCAML,
        grammar_package="tree-sitter-ocaml",
        grammar_module="tree_sitter_ocaml",
        min_version="0.23.0",
        language_func="language_ocaml",
        extensions=frozenset({"ml", "mli"}),
    ),
    LanguagePack(
        language=LanguageId.HTML,
        grammar_package="tree-sitter-html",
        grammar_module="tree_sitter_html",
        min_version="0.23.0",
        extensions=frozenset({"html", "htm"}),
    ),
    LanguagePack(
        language=LanguageId.CSS,
        grammar_package="tree-sitter-css",
        grammar_module="tree_sitter_css",
        min_version="0.23.0",
        extensions=frozenset({"css"}),
    ),
    LanguagePack(
        language=LanguageId.YAML,
        grammar_package="tree-sitter-yaml",
        grammar_module="tree_sitter_yaml",
        min_version="0.6.0",
        extensions=frozenset({"yaml", "yml"}),
    ),
)


# =========================================================================
# Registry
# =========================================================================

PACKS: dict[LanguageId, LanguagePack] = {pack.language: pack for pack in _ALL_PACKS}

# Extension -> Pack
_EXT_TO_PACK: dict[str, LanguagePack] = {}
for _pack in _ALL_PACKS:
    for _ext in _pack.extensions:
        _EXT_TO_PACK[_ext] = _pack

# Filename -> Pack
_FILENAME_TO_PACK: dict[str, LanguagePack] = {}
for _pack in _ALL_PACKS:
    for _fn in _pack.filenames:
        _FILENAME_TO_PACK[_fn] = _pack


# =========================================================================
# Public API
# =========================================================================


def _normalize_key(key: str) -> str:
    key = key.strip().lower()
    if key.startswith("."):
        key = key[1:]
    return key


def get_pack(language: LanguageId) -> LanguagePack:
    """Get the LanguagePack for a language id."""
    return PACKS[language]


def get_pack_for_ext(ext: str) -> LanguagePack | None:
    """Get a LanguagePack for a file extension (leading dot optional)."""
    return _EXT_TO_PACK.get(_normalize_key(ext))


def get_pack_for_filename(filename: str) -> LanguagePack | None:
    """Get a LanguagePack for an extensionless filename (case-insensitive)."""
    return _FILENAME_TO_PACK.get(_normalize_key(filename))


def resolve(file_identity: str) -> LanguageId | None:
    """Resolve a path, filename or bare extension to a LanguageId.

    The suffix of the last path component is tried first. When there is no
    suffix (``Makefile``, ``.bashrc``) the whole component is used as the
    key, checked against extensions and then extensionless filenames, so a
    bare ``"py"`` or ``".py"`` also resolves. Returns None for anything
    unrecognized.
    """
    if not file_identity:
        return None
    name = PurePath(file_identity).name or file_identity
    suffix = PurePath(name).suffix
    if suffix:
        pack = get_pack_for_ext(suffix)
    else:
        pack = get_pack_for_ext(name) or get_pack_for_filename(name)
    return pack.language if pack is not None else None


def is_supported(file_identity: str) -> bool:
    return resolve(file_identity) is not None

"""Tests for language resolution."""

import pytest

from commentgate.parsing.packs import (
    PACKS,
    LanguageId,
    get_pack,
    get_pack_for_ext,
    get_pack_for_filename,
    is_supported,
    resolve,
)


class TestPackRegistry:
    def test_every_language_has_a_pack(self) -> None:
        assert set(PACKS) == set(LanguageId)

    def test_pack_metadata_shape(self) -> None:
        for language, pack in PACKS.items():
            assert pack.language is language
            assert pack.grammar_package.startswith("tree-sitter-")
            assert pack.grammar_module.startswith("tree_sitter_")
            assert pack.extensions or pack.filenames

    def test_typescript_and_tsx_share_a_package(self) -> None:
        ts = get_pack(LanguageId.TYPESCRIPT)
        tsx = get_pack(LanguageId.TSX)

        assert ts.grammar_module == tsx.grammar_module == "tree_sitter_typescript"
        assert (ts.language_func, tsx.language_func) == ("language_typescript", "language_tsx")

    def test_extensions_are_unique_across_packs(self) -> None:
        seen: dict[str, LanguageId] = {}
        for language, pack in PACKS.items():
            for ext in pack.extensions:
                assert ext not in seen, f"{ext} claimed by {seen.get(ext)} and {language}"
                seen[ext] = language


class TestResolve:
    @pytest.mark.parametrize(
        ("identity", "expected"),
        [
            ("src/app.py", LanguageId.PYTHON),
            ("component.jsx", LanguageId.JAVASCRIPT),
            ("index.ts", LanguageId.TYPESCRIPT),
            ("View.tsx", LanguageId.TSX),
            ("main.go", LanguageId.GOLANG),
            ("Main.java", LanguageId.JAVA),
            ("lib.rs", LanguageId.RUST),
            ("header.h", LanguageId.C),
            ("impl.cc", LanguageId.CPP),
            ("Program.cs", LanguageId.CSHARP),
            ("mix.exs", LanguageId.ELIXIR),
            ("parser.mli", LanguageId.OCAML),
            ("ci.yml", LanguageId.YAML),
            ("page.htm", LanguageId.HTML),
        ],
    )
    def test_by_extension(self, identity: str, expected: LanguageId) -> None:
        assert resolve(identity) is expected

    @pytest.mark.parametrize("identity", ["APP.PY", "Script.Py", "/abs/path/MODULE.RS"])
    def test_extension_is_case_insensitive(self, identity: str) -> None:
        assert resolve(identity) is not None

    @pytest.mark.parametrize(
        ("identity", "expected"),
        [("py", LanguageId.PYTHON), (".go", LanguageId.GOLANG)],
    )
    def test_bare_extension(self, identity: str, expected: LanguageId) -> None:
        assert resolve(identity) is expected

    @pytest.mark.parametrize(
        ("identity", "expected"),
        [
            ("/home/user/.bashrc", LanguageId.BASH),
            (".zshrc", LanguageId.BASH),
            ("Rakefile", LanguageId.RUBY),
            ("project/Gemfile", LanguageId.RUBY),
        ],
    )
    def test_extensionless_filenames(self, identity: str, expected: LanguageId) -> None:
        assert resolve(identity) is expected

    @pytest.mark.parametrize("identity", ["notes.xyz", "README", "archive.tar.gz", "", "Makefile"])
    def test_unknown_is_none_not_error(self, identity: str) -> None:
        assert resolve(identity) is None
        assert is_supported(identity) is False

    def test_lookup_helpers_strip_one_dot(self) -> None:
        assert get_pack_for_ext(".PY") is get_pack(LanguageId.PYTHON)
        assert get_pack_for_filename(".BASHRC") is get_pack(LanguageId.BASH)
        assert get_pack_for_ext("..py") is None

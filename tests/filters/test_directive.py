"""Tests for DirectiveFilter."""

import pytest

from commentgate.core.models import CommentKind, CommentRecord
from commentgate.filters.directive import DirectiveFilter


def _record(text: str) -> CommentRecord:
    return CommentRecord(text=text, line=1, file_path="app.ts", kind=CommentKind.LINE)


class TestDirectiveFilter:
    @pytest.mark.parametrize(
        "text",
        [
            "# type: ignore[arg-type]",
            "# noqa: E501",
            "# NOQA",
            "# pyright: ignore",
            "# pragma: no cover",
            "# fmt: off",
            "// eslint-disable-next-line no-console",
            "/* eslint-disable */",
            "// @ts-ignore",
            "// @ts-expect-error wrong overload",
            "// prettier-ignore",
            "/* istanbul ignore next */",
            "// nolint:errcheck",
            "# rubocop:disable Metrics/AbcSize",
            "# shellcheck disable=SC2086",
            "// allow(dead_code)",
        ],
    )
    def test_directives_suppressed(self, text: str) -> None:
        assert DirectiveFilter().should_suppress(_record(text)) is True

    @pytest.mark.parametrize(
        "text",
        [
            "# the type of the token",
            "// ignore empty rows",
            "# skip when offline",
            "// @param value the input",
        ],
    )
    def test_prose_kept(self, text: str) -> None:
        assert DirectiveFilter().should_suppress(_record(text)) is False

    def test_prefix_matches_prose_starting_with_keyword(self) -> None:
        """Prefix matching: prose that starts with a directive word is suppressed."""
        assert DirectiveFilter().should_suppress(_record("# allowed values are 1-3")) is True

"""Tests for hook dispatch and gating."""

from __future__ import annotations

from typing import Any

from commentgate.config.models import CommentGateConfig, DetectionConfig, FiltersConfig
from commentgate.hook.envelope import HookInput
from commentgate.hook.runner import check_hook_input, collect_comments


def _hook(tool_name: str, **tool_input: Any) -> HookInput:
    return HookInput.model_validate({"tool_name": tool_name, "tool_input": tool_input})


class TestCollectComments:
    def test_missing_file_path(self) -> None:
        comments, reason = collect_comments(_hook("Write", content="# hi\n"))

        assert comments == []
        assert reason == "no file path provided"

    def test_non_code_file(self) -> None:
        _, reason = collect_comments(_hook("Write", file_path="README.md", content="# Title\n"))

        assert reason == "non-code file"

    def test_write_reports_every_comment(self) -> None:
        hook = _hook("Write", file_path="app.py", content="# one\nx = 1  # two\n")

        comments, reason = collect_comments(hook)

        assert reason is None
        assert [(c.line, c.text) for c in comments] == [(1, "# one"), (2, "# two")]

    def test_write_without_content(self) -> None:
        _, reason = collect_comments(_hook("Write", file_path="app.py", content=""))

        assert reason == "no content to check"

    def test_edit_reports_only_new_comments(self) -> None:
        hook = _hook(
            "Edit",
            file_path="app.py",
            old_string="# keep\nx = 1\n",
            new_string="# keep\n# added\nx = 2\n",
        )

        comments, reason = collect_comments(hook)

        assert reason is None
        assert [(c.line, c.text) for c in comments] == [(2, "# added")]

    def test_edit_with_empty_new_string(self) -> None:
        hook = _hook("Edit", file_path="app.py", old_string="# gone\n", new_string="")

        assert collect_comments(hook) == ([], "no content to check")

    def test_multi_edit_diffs_each_span(self) -> None:
        # Given
        hook = _hook(
            "MultiEdit",
            file_path="app.ts",
            edits=[
                {"old_string": "// same\nlet a = 1;", "new_string": "// same\nlet a = 2;"},
                {"old_string": "", "new_string": "// fresh\nlet b = 1;"},
                {"old_string": "let c = 1;", "new_string": ""},
            ],
        )

        # When
        comments, reason = collect_comments(hook)

        # Then
        assert reason is None
        assert [c.text for c in comments] == ["// fresh"]

    def test_multi_edit_without_edits(self) -> None:
        _, reason = collect_comments(_hook("MultiEdit", file_path="app.py", edits=[]))

        assert reason == "no content to check"

    def test_unknown_tool_uses_new_string(self) -> None:
        hook = _hook("NotebookEdit", file_path="app.py", new_string="# cell note\n")

        comments, _ = collect_comments(hook)

        assert [c.text for c in comments] == ["# cell note"]


class TestCheckHookInput:
    def test_blocks_on_new_comment(self) -> None:
        hook = _hook("Write", file_path="app.py", content="x = 1  # explain x\n")

        outcome = check_hook_input(hook)

        assert outcome.blocking is True
        assert [c.text for c in outcome.comments] == ["# explain x"]
        assert '<comment line-number="1"># explain x</comment>' in outcome.message

    def test_filtered_comments_pass(self) -> None:
        content = "#!/usr/bin/env python\n# given\nx = 1  # type: ignore\n"
        hook = _hook("Write", file_path="app.py", content=content)

        outcome = check_hook_input(hook)

        assert outcome.blocking is False
        assert outcome.comments == []
        assert outcome.skip_reason is None

    def test_skip_is_not_blocking(self) -> None:
        outcome = check_hook_input(_hook("Write", file_path="notes.txt", content="# hi\n"))

        assert outcome.blocking is False
        assert outcome.skip_reason == "non-code file"

    def test_disabled_filter_lets_comment_through(self) -> None:
        config = CommentGateConfig(filters=FiltersConfig(bdd=False))
        hook = _hook("Write", file_path="app.py", content="# given\nx = 1\n")

        outcome = check_hook_input(hook, config)

        assert [c.text for c in outcome.comments] == ["# given"]

    def test_docstrings_excluded_by_config(self) -> None:
        config = CommentGateConfig(detection=DetectionConfig(include_docstrings=False))
        content = 'def f():\n    """Doc."""\n    return 1\n'
        hook = _hook("Write", file_path="app.py", content=content)

        assert check_hook_input(hook, config).blocking is False
        assert check_hook_input(hook).blocking is True

    def test_custom_prompt_from_config_and_argument(self) -> None:
        config = CommentGateConfig(detection=DetectionConfig(custom_prompt="cfg {{comments}}"))
        hook = _hook("Write", file_path="app.py", content="# note\n")

        from_config = check_hook_input(hook, config)
        from_argument = check_hook_input(hook, config, custom_prompt="arg {{comments}}")

        assert from_config.message.startswith('cfg <comments file="app.py">')
        assert from_argument.message.startswith('arg <comments file="app.py">')

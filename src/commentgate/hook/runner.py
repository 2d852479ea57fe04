"""Decides which snapshots to check for a hook envelope and runs the gate.

Per tool:

- ``Edit``: one novelty diff of ``old_string`` -> ``new_string``.
- ``MultiEdit``: one novelty diff per span, results concatenated in order.
- anything else (``Write`` included): every comment in ``content`` (or in
  ``new_string`` when there is no content) counts as new.

Every "nothing to check" case is a skip with a reason, not an error.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import structlog

from commentgate.config.models import CommentGateConfig
from commentgate.core.models import CommentRecord
from commentgate.detection.extractor import CommentExtractor
from commentgate.detection.novelty import new_comments
from commentgate.filters.pipeline import build_pipeline
from commentgate.hook.envelope import HookInput
from commentgate.output.message import format_hook_message
from commentgate.parsing.packs import is_supported

logger = structlog.get_logger()

EDIT_TOOL = "Edit"
MULTI_EDIT_TOOL = "MultiEdit"


@dataclass(frozen=True)
class HookOutcome:
    """Result of gating one tool call."""

    comments: list[CommentRecord] = field(default_factory=list)
    message: str = ""
    skip_reason: str | None = None

    @property
    def blocking(self) -> bool:
        return bool(self.message)


def collect_comments(
    hook: HookInput,
    include_docstrings: bool = True,
    extractor: CommentExtractor | None = None,
) -> tuple[list[CommentRecord], str | None]:
    """Candidate comments for ``hook`` before filtering, plus a skip reason."""
    tool_input = hook.tool_input
    file_path = tool_input.file_path
    if not file_path:
        return [], "no file path provided"
    if not is_supported(file_path):
        return [], "non-code file"

    extractor = extractor or CommentExtractor()

    if hook.tool_name == EDIT_TOOL:
        if not tool_input.new_string:
            return [], "no content to check"
        return (
            new_comments(
                tool_input.old_string or "",
                tool_input.new_string,
                file_path,
                include_docstrings,
                extractor,
            ),
            None,
        )

    if hook.tool_name == MULTI_EDIT_TOOL:
        if not tool_input.edits:
            return [], "no content to check"
        found: list[CommentRecord] = []
        for edit in tool_input.edits:
            if not edit.new_string:
                continue
            found.extend(
                new_comments(
                    edit.old_string or "",
                    edit.new_string,
                    file_path,
                    include_docstrings,
                    extractor,
                )
            )
        return found, None

    content = tool_input.content or tool_input.new_string or ""
    if not content:
        return [], "no content to check"
    return extractor.extract(content, file_path, include_docstrings), None


def check_hook_input(
    hook: HookInput,
    config: CommentGateConfig | None = None,
    custom_prompt: str | None = None,
) -> HookOutcome:
    """Gate one tool call: extract, diff, filter and render."""
    config = config or CommentGateConfig()
    candidates, skip_reason = collect_comments(hook, config.detection.include_docstrings)
    if skip_reason is not None:
        logger.info("skipping", reason=skip_reason, tool=hook.tool_name)
        return HookOutcome(skip_reason=skip_reason)

    pipeline = build_pipeline(
        shebang=config.filters.shebang,
        bdd=config.filters.bdd,
        directive=config.filters.directive,
    )
    surviving = pipeline.apply(candidates)
    logger.debug(
        "comments_filtered",
        candidates=len(candidates),
        surviving=len(surviving),
        tool=hook.tool_name,
    )
    if not surviving:
        logger.info("no_findings", candidates=len(candidates), tool=hook.tool_name)
        return HookOutcome()

    prompt = custom_prompt or config.detection.custom_prompt
    return HookOutcome(comments=surviving, message=format_hook_message(surviving, prompt))

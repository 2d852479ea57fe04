"""Pydantic models for the post-tool-use hook envelope read from stdin.

Only the fields the gate needs are modelled; unknown keys are ignored.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, ValidationError

from commentgate.core.errors import HookInputError


class EditSpan(BaseModel):
    """One replacement of a multi-span edit."""

    model_config = ConfigDict(extra="ignore")

    old_string: str | None = None
    new_string: str | None = None


class ToolInput(BaseModel):
    """Arguments of the tool call that produced the edit."""

    model_config = ConfigDict(extra="ignore")

    file_path: str | None = None
    content: str | None = None
    new_string: str | None = None
    old_string: str | None = None
    edits: list[EditSpan] | None = None


class HookInput(BaseModel):
    """The envelope: which tool ran, with what input."""

    model_config = ConfigDict(extra="ignore")

    session_id: str | None = None
    tool_name: str | None = None
    tool_input: ToolInput


def parse_hook_input(raw: str | bytes) -> HookInput:
    """Validate the raw stdin payload.

    Bytes are decoded as UTF-8 (a leading BOM is dropped).

    Raises:
        HookInputError: Empty or undecodable payload, invalid JSON, or wrong shape.
    """
    if isinstance(raw, bytes):
        try:
            raw = raw.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise HookInputError.invalid_format(f"payload is not UTF-8 ({e.reason})") from e
    if not raw.strip():
        raise HookInputError.empty_input()
    try:
        return HookInput.model_validate_json(raw)
    except ValidationError as e:
        raise HookInputError.invalid_format(str(e.errors()[0]["msg"])) from e

"""Hook envelope handling: from stdin payload to gate outcome."""

from commentgate.hook.envelope import EditSpan, HookInput, ToolInput, parse_hook_input
from commentgate.hook.runner import HookOutcome, check_hook_input, collect_comments

__all__ = [
    "EditSpan",
    "HookInput",
    "HookOutcome",
    "ToolInput",
    "check_hook_input",
    "collect_comments",
    "parse_hook_input",
]

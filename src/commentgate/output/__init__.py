"""Rendering of surviving comments for the agent."""

from commentgate.output.listing import build_comments_xml, build_listing, group_by_file
from commentgate.output.message import COMMENTS_PLACEHOLDER, format_hook_message

__all__ = [
    "COMMENTS_PLACEHOLDER",
    "build_comments_xml",
    "build_listing",
    "format_hook_message",
    "group_by_file",
]

"""Hook message shown to the agent when new comments survive filtering."""

from __future__ import annotations

from collections.abc import Sequence

from commentgate.core.models import CommentRecord
from commentgate.filters.agent_memo import AgentMemoClassifier
from commentgate.output.listing import build_listing

COMMENTS_PLACEHOLDER = "{{comments}}"

_MEMO_HEADER = "AGENT MEMO COMMENT DETECTED - CODE SMELL ALERT\n\n"
_DEFAULT_HEADER = "COMMENT/DOCSTRING DETECTED - IMMEDIATE ACTION REQUIRED\n\n"

_MEMO_SECTION = """\
AGENT MEMO COMMENTS DETECTED - THIS IS A CODE SMELL

You left "memo-style" comments that describe WHAT you changed or HOW you implemented something.
These are typically signs of an AI agent leaving notes for itself or the user.

Examples of agent memo patterns detected:
  - "Changed from X to Y", "Modified to...", "Updated from..."
  - "Added new...", "Removed...", "Refactored..."
  - "This implements...", "Here we...", "Now this..."
  - "Note:", "Implementation of..."
WHY THIS IS BAD:
  1. Code should be self-documenting - if you need to explain what changed, the code isn't clear enough
  2. These comments become outdated instantly and mislead future readers
  3. Git history already tracks what changed - comments duplicate this poorly
  4. It's a sign of rushing without proper refactoring

ACTION REQUIRED:
  -> REMOVE these memo comments immediately
  -> If the code needs explanation, refactor it to be clearer instead
  -> Use meaningful variable/function names that explain intent
  -> Let git commit messages document the "what" and "why"

Detected agent memo comments:
"""

_GUIDELINES = """\
Your recent changes contain comments or docstrings, which triggered this hook.
You need to take immediate action. You must follow the conditions below.
(Listed in priority order - you must always act according to this priority order)

CRITICAL WARNING: This hook message MUST NEVER be ignored, even if you receive it multiple times.
You MUST provide corresponding explanation or action for EACH occurrence of this message.
Ignoring this message or failing to respond appropriately is strictly prohibited.

PRIORITY-BASED ACTION GUIDELINES:

1. This is a comment/docstring that already existed before
\t-> Explain to the user that this is an existing comment/docstring and proceed (justify it)

2. This is a newly written comment: but it's in given, when, then format
\t-> Tell the user it's a BDD comment and proceed (justify it)
\t-> Note: This applies to comments only, not docstrings

3. This is a newly written comment/docstring: but it's necessary
\t-> Tell the user why this comment/docstring is absolutely necessary and proceed (justify it)
\t-> Examples of necessary comments: complex algorithms, security-related, performance optimization, regex, mathematical formulas
\t-> Examples of necessary docstrings: public API documentation, complex module/class interfaces
\t-> IMPORTANT: Most docstrings are unnecessary if the code is self-explanatory. Only keep truly essential ones.

4. This is a newly written comment/docstring: but it's an unnecessary comment/docstring
\t-> Apologize to the user and remove the comment/docstring.
\t-> Make the code itself clearer so it can be understood without comments/docstrings.
\t-> For verbose docstrings: refactor code to be self-documenting instead of adding lengthy explanations.

MANDATORY REQUIREMENT: You must acknowledge this hook message and take one of the above actions.
Review in the above priority order and take the corresponding action EVERY TIME this appears.

REMINDER: These rules apply to ALL your future code, not just this specific edit. Always be deliberate and cautious when writing comments - only add them when absolutely necessary.

Detected comments/docstrings:
"""


def format_hook_message(
    comments: Sequence[CommentRecord],
    custom_prompt: str | None = None,
) -> str:
    """Render the warning for ``comments``; empty input renders nothing.

    A non-empty ``custom_prompt`` replaces the default text, with
    ``{{comments}}`` expanded to the per-file listing.
    """
    if not comments:
        return ""
    listing = build_listing(comments)
    if custom_prompt:
        return custom_prompt.replace(COMMENTS_PLACEHOLDER, listing)

    classifier = AgentMemoClassifier()
    memos = [comment for comment in comments if classifier.is_agent_memo(comment)]

    parts = [_MEMO_HEADER if memos else _DEFAULT_HEADER]
    if memos:
        parts.append(_MEMO_SECTION)
        parts.extend(f"  - Line {memo.line}: {memo.text.strip()}\n" for memo in memos)
        parts.append("\n---\n\n")
    parts.append(_GUIDELINES)
    parts.append(listing)
    return "".join(parts)

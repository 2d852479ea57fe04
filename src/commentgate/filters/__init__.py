"""Suppression filters and the agent-memo classifier."""

from commentgate.filters.agent_memo import AgentMemoClassifier, is_agent_memo
from commentgate.filters.base import COMMENT_DELIMITERS, CommentFilter, normalize_comment_text
from commentgate.filters.bdd import BddFilter
from commentgate.filters.directive import DirectiveFilter
from commentgate.filters.pipeline import FilterPipeline, build_pipeline
from commentgate.filters.shebang import ShebangFilter

__all__ = [
    "COMMENT_DELIMITERS",
    "AgentMemoClassifier",
    "BddFilter",
    "CommentFilter",
    "DirectiveFilter",
    "FilterPipeline",
    "ShebangFilter",
    "build_pipeline",
    "is_agent_memo",
    "normalize_comment_text",
]

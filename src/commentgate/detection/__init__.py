"""Comment extraction and novelty diffing."""

from commentgate.detection.extractor import (
    CommentExtractor,
    ExtractionResult,
    SkipReason,
    classify,
    classify_by_node_type,
    classify_by_prefix,
    extract,
)
from commentgate.detection.novelty import filter_new_comments, new_comments

__all__ = [
    "CommentExtractor",
    "ExtractionResult",
    "SkipReason",
    "classify",
    "classify_by_node_type",
    "classify_by_prefix",
    "extract",
    "filter_new_comments",
    "new_comments",
]

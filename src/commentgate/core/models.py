"""Comment records produced by the extractor.

A ``CommentRecord`` is created only by ``CommentExtractor`` and is never
mutated afterwards. Novelty diffing and filtering always build new lists.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any


class CommentKind(str, Enum):
    """Syntactic classification of a captured comment."""

    LINE = "line"
    BLOCK = "block"
    DOCSTRING = "docstring"


@dataclass(frozen=True, slots=True)
class CommentRecord:
    """A comment or docstring found in a source snapshot."""

    text: str  # Exact source slice, delimiters included
    line: int  # 1-based start line
    file_path: str  # Logical path, never resolved against a filesystem
    kind: CommentKind
    is_docstring: bool | None = None  # Derived from kind when omitted
    metadata: Mapping[str, str] | None = None

    def __post_init__(self) -> None:
        if not self.text:
            raise ValueError("comment text must not be empty")
        if self.line < 1:
            raise ValueError(f"comment line must be >= 1, got {self.line}")
        derived = self.kind is CommentKind.DOCSTRING
        if self.is_docstring is None:
            object.__setattr__(self, "is_docstring", derived)
        elif self.is_docstring is not derived:
            raise ValueError(
                f"is_docstring={self.is_docstring} contradicts kind={self.kind.value}"
            )

    @property
    def normalized_text(self) -> str:
        """Text used for novelty comparison: trimmed and case-folded."""
        return self.text.strip().casefold()

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "text": self.text,
            "line": self.line,
            "file_path": self.file_path,
            "kind": self.kind.value,
            "is_docstring": self.is_docstring,
        }
        if self.metadata is not None:
            data["metadata"] = dict(self.metadata)
        return data

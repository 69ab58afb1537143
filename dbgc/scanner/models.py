"""Value types shared by the line classifier, reconstructor and classifier.

Every value here lives for the scan of a single file and is never mutated
after creation.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


@dataclass(frozen=True)
class SourceLine:
    """One physical line of source text, newline stripped."""

    index: int
    text: str


@dataclass(frozen=True)
class CommentState:
    """Comment state of one line, plus the state carried into the next line.

    `open_literal` is the delimiter of a multi-line string literal still open
    at the end of the line; comment markers inside it are plain text.
    """

    is_fully_commented: bool = False
    in_block_comment: bool = False
    continues_line_comment: bool = False
    code_start: int = 0
    open_literal: str | None = None


@dataclass(frozen=True)
class Statement:
    """A logical call reconstructed from one or more physical lines."""

    start_line: int
    end_line: int
    call_target: str
    raw_argument_text: str
    literals: tuple[str, ...] = ()
    start_column: int = 0
    end_column: int = 0

    @property
    def line_span(self) -> int:
        return self.end_line - self.start_line + 1


class ClassificationReason(Enum):
    """Why a statement was (or was not) classified as debug output."""

    CALL_TARGET_MATCH = "call_target_match"
    CONTENT_KEYWORD_MATCH = "content_keyword_match"
    NONE = "none"


@dataclass(frozen=True)
class Classification:
    """Classifier verdict for exactly one Statement."""

    statement: Statement
    is_debug: bool
    reason: ClassificationReason = ClassificationReason.NONE

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        stmt = self.statement
        return {
            "start_line": stmt.start_line,
            "end_line": stmt.end_line,
            "call_target": stmt.call_target,
            "is_debug": self.is_debug,
            "reason": self.reason.value,
        }


@dataclass
class FileScanResult:
    """Outcome of scanning one file.

    `error` is set when the file could not be scanned; in that case
    `classifications` is always empty.
    """

    path: str
    language: str
    classifications: list[Classification] = field(default_factory=list)
    lines: list[SourceLine] = field(default_factory=list, repr=False)
    error: Exception | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None

    @property
    def debug_statements(self) -> list[Classification]:
        return [c for c in self.classifications if c.is_debug]

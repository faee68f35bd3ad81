"""Diff-related data models"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict

from .review import Segment


class LineKind(str, Enum):
    """Classification of a single line in a line diff"""

    UNCHANGED = "unchanged"
    ADDED = "added"
    REMOVED = "removed"


class DocumentPair(BaseModel):
    """The two full-text versions being compared"""

    model_config = ConfigDict(frozen=True)

    original: str
    proposed: str


class LineRecord(BaseModel):
    """A single classified line produced by the line differ"""

    model_config = ConfigDict(frozen=True)

    kind: LineKind
    text: str
    original_index: int | None = None  # 0-indexed, unchanged/removed only
    proposed_index: int | None = None  # 0-indexed, unchanged/added only


class DiffStats(BaseModel):
    """Line counts of a diff"""

    added: int = 0
    removed: int = 0


class DiffResult(BaseModel):
    """Complete diff result for a file"""

    file_path: str
    records: list[LineRecord]
    segments: list[Segment]
    stats: DiffStats
    preview_content: str  # Full file with every hunk applied

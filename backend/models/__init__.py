"""Models module - Pydantic data models"""

from .review import HunkSegment, HunkStatus, PendingChange, Segment, UnchangedSegment
from .diff import DiffResult, DiffStats, DocumentPair, LineKind, LineRecord
from .session import (
    CommitResponse,
    EditHunkRequest,
    EditLineRequest,
    NavigationDirection,
    PreviewResponse,
    ProposeChangeRequest,
    ProposeChangeResponse,
    SessionSnapshot,
)

__all__ = [
    # Review models
    "HunkSegment",
    "HunkStatus",
    "PendingChange",
    "Segment",
    "UnchangedSegment",
    # Diff models
    "DiffResult",
    "DiffStats",
    "DocumentPair",
    "LineKind",
    "LineRecord",
    # Session API models
    "CommitResponse",
    "EditHunkRequest",
    "EditLineRequest",
    "NavigationDirection",
    "PreviewResponse",
    "ProposeChangeRequest",
    "ProposeChangeResponse",
    "SessionSnapshot",
]

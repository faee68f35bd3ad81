"""Review API request/response models"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel

from .diff import DiffStats
from .review import PendingChange, Segment


class NavigationDirection(str, Enum):
    """Direction for cycling through pending hunks"""

    NEXT = "next"
    PREV = "prev"


class ProposeChangeRequest(BaseModel):
    """Request to propose a new version of a file"""

    file_path: str
    original_content: str
    new_content: str


class EditHunkRequest(BaseModel):
    """Replace the whole content of a hunk"""

    lines: list[str]


class EditLineRequest(BaseModel):
    """Replace a single line of a hunk or unchanged segment"""

    value: str


class SessionSnapshot(BaseModel):
    """Everything the editor needs to render a review"""

    change: PendingChange
    segments: list[Segment]
    stats: DiffStats
    preview: str
    pending_hunks: int
    current_hunk_id: str | None = None


class PreviewResponse(BaseModel):
    """Reconstructed document without committing"""

    content: str
    inline: str


class CommitResponse(BaseModel):
    """Final document written for a committed change"""

    change_id: str
    file_path: str
    content: str


class ProposeChangeResponse(BaseModel):
    """Result of proposing a change"""

    status: str  # "pending" or "applied"
    snapshot: SessionSnapshot | None = None

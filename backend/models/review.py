"""Review data models - segments and pending changes"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


class HunkStatus(str, Enum):
    """Decision state of a hunk"""

    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class UnchangedSegment(BaseModel):
    """A run of unchanged lines, editable by the user"""

    type: Literal["unchanged"] = "unchanged"
    id: str
    lines: list[str] = []


class HunkSegment(BaseModel):
    """A maximal run of removed and/or added lines with its review decision"""

    type: Literal["hunk"] = "hunk"
    id: str
    removed_lines: list[str] = []
    added_lines: list[str] = []
    status: HunkStatus = HunkStatus.PENDING
    edit_override: list[str] | None = None  # Manual edit, wins over status

    @property
    def is_pending(self) -> bool:
        return self.status == HunkStatus.PENDING


Segment = Annotated[Union[UnchangedSegment, HunkSegment], Field(discriminator="type")]


class PendingChange(BaseModel):
    """An AI-proposed replacement for one file, awaiting review"""

    id: str
    file_path: str
    file_name: str
    original_content: str
    new_content: str
    timestamp: datetime

"""
Change Session - Review lifecycle of one proposed document change

A session is created from the original and proposed text, exposes the
accept/reject/edit operations used by the editor, and ends with exactly
one of commit() or discard(). It is single-threaded and does no I/O:
writing the committed text is the caller's job.
"""

from __future__ import annotations

import logging
from enum import Enum

from models.diff import DiffStats, DocumentPair, LineRecord
from models.review import HunkSegment, HunkStatus, Segment
from models.session import NavigationDirection

from .diff_generator import DiffGenerator, compute_stats
from .errors import SessionClosedError
from .hunk_segmenter import segment_records
from .reconstructor import build_content, render_inline
from .review_state import ReviewState

logger = logging.getLogger(__name__)


class SessionStatus(str, Enum):
    """Lifecycle of a change session"""

    OPEN = "open"
    COMMITTED = "committed"
    DISCARDED = "discarded"


class ChangeSession:
    """Review of one original/proposed document pair"""

    def __init__(
        self,
        original_content: str,
        new_content: str,
        diff_generator: DiffGenerator | None = None,
    ):
        self.documents = DocumentPair(original=original_content, proposed=new_content)
        generator = diff_generator or DiffGenerator()
        self._records = generator.diff(original_content, new_content)
        self._stats = compute_stats(self._records)
        self._state = ReviewState(segment_records(self._records))
        self._cursor = 0
        self.status = SessionStatus.OPEN

    # Read-only views

    @property
    def is_open(self) -> bool:
        return self.status == SessionStatus.OPEN

    @property
    def records(self) -> list[LineRecord]:
        return list(self._records)

    @property
    def stats(self) -> DiffStats:
        return self._stats.model_copy()

    def get_segments(self) -> list[Segment]:
        """Snapshot of the current segments for rendering"""
        return self._state.snapshot()

    def hunks(self) -> list[HunkSegment]:
        return [s for s in self.get_segments() if isinstance(s, HunkSegment)]

    def pending_hunks(self) -> list[HunkSegment]:
        return [h for h in self.hunks() if h.is_pending]

    def preview(self) -> str:
        """Document that commit() would produce right now"""
        return build_content(self._state.segments)

    def render_inline(self, context_lines: int = 3) -> str:
        return render_inline(self._state.segments, context_lines)

    # Hunk decisions

    def accept_hunk(self, hunk_id: str) -> bool:
        self._ensure_open()
        applied = self._state.set_status(hunk_id, HunkStatus.ACCEPTED)
        if applied:
            logger.debug("Accepted %s", hunk_id)
        return applied

    def reject_hunk(self, hunk_id: str) -> bool:
        self._ensure_open()
        applied = self._state.set_status(hunk_id, HunkStatus.REJECTED)
        if applied:
            logger.debug("Rejected %s", hunk_id)
        return applied

    def revert_hunk(self, hunk_id: str) -> bool:
        """Back to pending, dropping any manual edit"""
        self._ensure_open()
        applied = self._state.set_status(hunk_id, HunkStatus.PENDING)
        if applied:
            logger.debug("Reverted %s", hunk_id)
        return applied

    def edit_hunk(self, hunk_id: str, new_lines: list[str]) -> bool:
        """Replace a hunk's content; the hunk must be confirmed again"""
        self._ensure_open()
        applied = self._state.set_override(hunk_id, new_lines)
        if applied:
            logger.debug("Edited %s (%d lines)", hunk_id, len(new_lines))
        return applied

    def edit_hunk_line(self, hunk_id: str, line_index: int, value: str) -> bool:
        self._ensure_open()
        return self._state.set_override_line(hunk_id, line_index, value)

    def edit_unchanged_line(self, segment_id: str, line_index: int, value: str) -> bool:
        self._ensure_open()
        return self._state.set_unchanged_line(segment_id, line_index, value)

    def accept_all_pending(self) -> int:
        """
        Mark all pending hunks accepted.

        This only changes what the review shows: pending hunks already
        resolve to the proposed text, so preview() is unaffected.
        """
        self._ensure_open()
        count = self._state.accept_all_pending()
        logger.debug("Accepted %d pending hunks", count)
        return count

    # Navigation between pending hunks

    def current_hunk(self) -> HunkSegment | None:
        pending = self._state.pending_hunks()
        if not pending:
            return None
        return pending[min(self._cursor, len(pending) - 1)].model_copy(deep=True)

    def navigate(self, direction: NavigationDirection | str) -> HunkSegment | None:
        """Move the cursor to the next/previous pending hunk, wrapping around"""
        pending = self._state.pending_hunks()
        if not pending:
            return None

        direction = NavigationDirection(direction)
        count = len(pending)
        if direction == NavigationDirection.NEXT:
            self._cursor = (self._cursor + 1) % count
        else:
            self._cursor = (self._cursor - 1 + count) % count
        return pending[self._cursor].model_copy(deep=True)

    # Terminal transitions

    def commit(self) -> str:
        """Reconstruct the final document and end the session"""
        self._ensure_open()
        content = build_content(self._state.segments)
        self.status = SessionStatus.COMMITTED
        logger.info(
            "Committed session with %d hunks (%d still pending)",
            len(self._state.hunks()),
            len(self._state.pending_hunks()),
        )
        return content

    def discard(self) -> None:
        """End the session; the original content stays as it is"""
        self._ensure_open()
        self.status = SessionStatus.DISCARDED
        logger.info("Discarded session")

    def _ensure_open(self) -> None:
        if self.status != SessionStatus.OPEN:
            raise SessionClosedError(f"Session already {self.status.value}")


def create_session(
    original_content: str,
    new_content: str,
    diff_generator: DiffGenerator | None = None,
) -> ChangeSession:
    """Start reviewing a proposed replacement of original_content"""
    return ChangeSession(original_content, new_content, diff_generator)

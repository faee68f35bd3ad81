"""
Review State - Per-hunk decisions and manual edits for one proposed change
"""

from __future__ import annotations

import logging

from models.review import HunkSegment, HunkStatus, Segment, UnchangedSegment

from .hunk_segmenter import hunks_of

logger = logging.getLogger(__name__)


class ReviewState:
    """
    Mutable decision store over a segmentation.

    Segment order is fixed at construction and is the only source of
    document order. Every mutation is keyed by segment id; an id that does
    not name a segment of the right kind is ignored and reported as False.
    """

    def __init__(self, segments: list[Segment]):
        self._segments: list[Segment] = list(segments)
        self._by_id: dict[str, Segment] = {s.id: s for s in self._segments}

    @property
    def segments(self) -> list[Segment]:
        return self._segments

    def hunks(self) -> list[HunkSegment]:
        return hunks_of(self._segments)

    def pending_hunks(self) -> list[HunkSegment]:
        return [h for h in self.hunks() if h.is_pending]

    def find_hunk(self, hunk_id: str) -> HunkSegment | None:
        segment = self._by_id.get(hunk_id)
        if isinstance(segment, HunkSegment):
            return segment
        return None

    def find_unchanged(self, segment_id: str) -> UnchangedSegment | None:
        segment = self._by_id.get(segment_id)
        if isinstance(segment, UnchangedSegment):
            return segment
        return None

    def set_status(self, hunk_id: str, status: HunkStatus) -> bool:
        """Record a decision; any manual edit of the hunk is dropped"""
        hunk = self.find_hunk(hunk_id)
        if hunk is None:
            logger.debug("Ignoring status change for unknown hunk %s", hunk_id)
            return False
        hunk.status = status
        hunk.edit_override = None
        return True

    def set_override(self, hunk_id: str, lines: list[str]) -> bool:
        """Replace the hunk content; the hunk goes back to pending"""
        hunk = self.find_hunk(hunk_id)
        if hunk is None:
            logger.debug("Ignoring edit for unknown hunk %s", hunk_id)
            return False
        hunk.edit_override = list(lines)
        hunk.status = HunkStatus.PENDING
        return True

    def set_override_line(self, hunk_id: str, line_index: int, value: str) -> bool:
        """Replace one line of the hunk's current content"""
        hunk = self.find_hunk(hunk_id)
        if hunk is None:
            logger.debug("Ignoring line edit for unknown hunk %s", hunk_id)
            return False
        current = hunk.edit_override if hunk.edit_override is not None else hunk.added_lines
        if not 0 <= line_index < len(current):
            logger.debug("Ignoring line edit %d outside hunk %s", line_index, hunk_id)
            return False
        lines = list(current)
        lines[line_index] = value
        return self.set_override(hunk_id, lines)

    def set_unchanged_line(self, segment_id: str, line_index: int, value: str) -> bool:
        segment = self.find_unchanged(segment_id)
        if segment is None:
            logger.debug("Ignoring edit for unknown segment %s", segment_id)
            return False
        if not 0 <= line_index < len(segment.lines):
            logger.debug("Ignoring line edit %d outside segment %s", line_index, segment_id)
            return False
        segment.lines[line_index] = value
        return True

    def accept_all_pending(self) -> int:
        """Mark every pending hunk accepted, keeping manual edits"""
        pending = self.pending_hunks()
        for hunk in pending:
            hunk.status = HunkStatus.ACCEPTED
        return len(pending)

    def snapshot(self) -> list[Segment]:
        """Deep copies of the segments, safe to hand to a renderer"""
        return [s.model_copy(deep=True) for s in self._segments]

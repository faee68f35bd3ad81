"""
Hunk Segmenter - Group classified lines into unchanged runs and hunks
"""

from __future__ import annotations

from models.diff import LineKind, LineRecord
from models.review import HunkSegment, Segment, UnchangedSegment


def segment_records(records: list[LineRecord]) -> list[Segment]:
    """
    Partition a line diff into alternating unchanged segments and hunks.

    Every maximal run of unchanged records becomes an UnchangedSegment and
    every maximal run of added/removed records becomes a pending
    HunkSegment. Ids come from one counter shared by both kinds, in
    document order ("unchanged-0", "hunk-1", ...).
    """
    segments: list[Segment] = []
    next_id = 0
    unchanged: list[str] = []
    removed: list[str] = []
    added: list[str] = []
    in_hunk = False

    def flush_unchanged() -> None:
        nonlocal next_id, unchanged
        if unchanged:
            segments.append(UnchangedSegment(id=f"unchanged-{next_id}", lines=unchanged))
            next_id += 1
            unchanged = []

    def flush_hunk() -> None:
        nonlocal next_id, removed, added, in_hunk
        if in_hunk:
            segments.append(
                HunkSegment(id=f"hunk-{next_id}", removed_lines=removed, added_lines=added)
            )
            next_id += 1
            removed = []
            added = []
            in_hunk = False

    for record in records:
        if record.kind == LineKind.UNCHANGED:
            flush_hunk()
            unchanged.append(record.text)
            continue

        flush_unchanged()
        in_hunk = True
        if record.kind == LineKind.REMOVED:
            removed.append(record.text)
        else:
            added.append(record.text)

    flush_hunk()
    flush_unchanged()

    return segments


def hunks_of(segments: list[Segment]) -> list[HunkSegment]:
    """Only the hunk segments, in document order"""
    return [s for s in segments if isinstance(s, HunkSegment)]

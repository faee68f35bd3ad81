"""
Reconstructor - Fold reviewed segments back into a single document
"""

from __future__ import annotations

from models.review import HunkSegment, HunkStatus, Segment, UnchangedSegment


def resolve_segment(segment: Segment) -> list[str]:
    """
    Lines a segment contributes to the final document.

    An edit override always wins. Otherwise only an explicit rejection
    restores the original lines; pending and accepted hunks both resolve
    to the proposed lines.
    """
    if isinstance(segment, UnchangedSegment):
        return segment.lines
    if segment.edit_override is not None:
        return segment.edit_override
    if segment.status == HunkStatus.REJECTED:
        return segment.removed_lines
    return segment.added_lines


def build_content(segments: list[Segment]) -> str:
    """Build final content from segments"""
    lines: list[str] = []
    for segment in segments:
        lines.extend(resolve_segment(segment))
    return "\n".join(lines)


def original_text(segments: list[Segment]) -> str:
    """The original side of the segmentation, ignoring any decisions"""
    lines: list[str] = []
    for segment in segments:
        if isinstance(segment, UnchangedSegment):
            lines.extend(segment.lines)
        else:
            lines.extend(segment.removed_lines)
    return "\n".join(lines)


def proposed_text(segments: list[Segment]) -> str:
    """The proposed side of the segmentation, ignoring any decisions"""
    lines: list[str] = []
    for segment in segments:
        if isinstance(segment, UnchangedSegment):
            lines.extend(segment.lines)
        else:
            lines.extend(segment.added_lines)
    return "\n".join(lines)


def render_inline(segments: list[Segment], context_lines: int = 3) -> str:
    """
    Render the review as plain text.

    Unchanged lines are prefixed with two spaces, removed lines with "- "
    and added (or manually edited) lines with "+ ". Unchanged lines further
    than `context_lines` from a change collapse into a single "...".
    A rejected hunk without an edit is shown as the original text it
    restores.
    """
    result_lines: list[str] = []

    for index, segment in enumerate(segments):
        if isinstance(segment, UnchangedSegment):
            has_prev_change = index > 0
            has_next_change = index < len(segments) - 1
            count = len(segment.lines)
            for i, line in enumerate(segment.lines):
                near_prev = has_prev_change and i < context_lines
                near_next = has_next_change and i >= count - context_lines
                if near_prev or near_next:
                    result_lines.append(f"  {line}")
                elif not result_lines or result_lines[-1] != "...":
                    result_lines.append("...")
            continue

        if _is_plain_rejection(segment):
            for line in segment.removed_lines:
                result_lines.append(f"  {line}")
            continue

        for line in segment.removed_lines:
            result_lines.append(f"- {line}")
        for line in resolve_segment(segment):
            result_lines.append(f"+ {line}")

    return "\n".join(result_lines)


def _is_plain_rejection(segment: HunkSegment) -> bool:
    return segment.status == HunkStatus.REJECTED and segment.edit_override is None

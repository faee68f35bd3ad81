"""
Diff Generator Service - Line-level diffs between an original document and
a proposed replacement
"""

from __future__ import annotations

import logging

from models.diff import DiffResult, DiffStats, LineKind, LineRecord

from .errors import DiffTooLargeError
from .hunk_segmenter import segment_records
from .reconstructor import build_content, render_inline

logger = logging.getLogger(__name__)


def split_lines(content: str) -> list[str]:
    """Split on "\\n" only; a trailing newline yields a trailing empty line"""
    return content.split("\n")


def compute_line_diff(
    original: str,
    proposed: str,
    max_cells: int | None = None,
) -> list[LineRecord]:
    """
    Align two documents line by line with a longest common subsequence.

    Lines compare by exact string equality. When backtracking, an equal
    line is always kept as unchanged; otherwise an addition is preferred
    over a removal whenever both paths keep the same LCS length. This tie
    break is part of the output contract and keeps diffs byte-stable.
    """
    original_lines = split_lines(original)
    proposed_lines = split_lines(proposed)
    m = len(original_lines)
    n = len(proposed_lines)

    if max_cells is not None and m * n > max_cells:
        raise DiffTooLargeError(
            f"Diff of {m}x{n} lines exceeds the limit of {max_cells} cells"
        )

    # dp[i][j] = LCS length of original_lines[:i] and proposed_lines[:j]
    dp = [[0] * (n + 1) for _ in range(m + 1)]
    for i in range(1, m + 1):
        row = dp[i]
        prev_row = dp[i - 1]
        original_line = original_lines[i - 1]
        for j in range(1, n + 1):
            if original_line == proposed_lines[j - 1]:
                row[j] = prev_row[j - 1] + 1
            else:
                row[j] = max(prev_row[j], row[j - 1])

    records: list[LineRecord] = []
    i, j = m, n
    while i > 0 or j > 0:
        if i > 0 and j > 0 and original_lines[i - 1] == proposed_lines[j - 1]:
            records.append(
                LineRecord(
                    kind=LineKind.UNCHANGED,
                    text=original_lines[i - 1],
                    original_index=i - 1,
                    proposed_index=j - 1,
                )
            )
            i -= 1
            j -= 1
        elif j > 0 and (i == 0 or dp[i][j - 1] >= dp[i - 1][j]):
            records.append(
                LineRecord(
                    kind=LineKind.ADDED,
                    text=proposed_lines[j - 1],
                    proposed_index=j - 1,
                )
            )
            j -= 1
        else:
            records.append(
                LineRecord(
                    kind=LineKind.REMOVED,
                    text=original_lines[i - 1],
                    original_index=i - 1,
                )
            )
            i -= 1

    records.reverse()
    return records


def compute_stats(records: list[LineRecord]) -> DiffStats:
    """Count added and removed lines"""
    added = sum(1 for r in records if r.kind == LineKind.ADDED)
    removed = sum(1 for r in records if r.kind == LineKind.REMOVED)
    return DiffStats(added=added, removed=removed)


class DiffGenerator:
    """Generate line diffs for proposed document changes"""

    def __init__(self, max_cells: int | None = None):
        self.max_cells = max_cells

    def diff(self, original_content: str, new_content: str) -> list[LineRecord]:
        """Classify every line of both documents as unchanged, added or removed"""
        return compute_line_diff(original_content, new_content, self.max_cells)

    def generate_diff(
        self,
        original_content: str,
        new_content: str,
        file_path: str,
    ) -> DiffResult:
        """Generate structured diff from original and new content"""
        records = self.diff(original_content, new_content)
        segments = segment_records(records)
        stats = compute_stats(records)

        logger.debug(
            "Diff for %s: +%d/-%d in %d segments",
            file_path,
            stats.added,
            stats.removed,
            len(segments),
        )

        return DiffResult(
            file_path=file_path,
            records=records,
            segments=segments,
            stats=stats,
            preview_content=build_content(segments),
        )

    def generate_inline_preview(
        self,
        original_content: str,
        new_content: str,
        context_lines: int = 3,
    ) -> str:
        """Generate inline preview with context lines around changes"""
        records = self.diff(original_content, new_content)
        return render_inline(segment_records(records), context_lines)

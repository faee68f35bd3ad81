import pytest

from models.diff import LineKind
from services.diff_generator import DiffGenerator, compute_line_diff, compute_stats
from services.errors import DiffTooLargeError


def _kinds(records):
    return [(r.kind, r.text) for r in records]


def test_identical_documents_are_all_unchanged():
    for text in ["a", "a\nb\nc", "line\n\nline\n", "  spaced  \n\ttab"]:
        records = compute_line_diff(text, text)
        assert all(r.kind == LineKind.UNCHANGED for r in records)
        assert [r.text for r in records] == text.split("\n")


def test_single_replacement_lists_removed_before_added():
    records = compute_line_diff("A\nB\nC", "A\nX\nC")
    assert _kinds(records) == [
        (LineKind.UNCHANGED, "A"),
        (LineKind.REMOVED, "B"),
        (LineKind.ADDED, "X"),
        (LineKind.UNCHANGED, "C"),
    ]


def test_line_indices_point_into_each_side():
    records = compute_line_diff("A\nB\nC", "A\nX\nC")
    a, b, x, c = records
    assert (a.original_index, a.proposed_index) == (0, 0)
    assert (b.original_index, b.proposed_index) == (1, None)
    assert (x.original_index, x.proposed_index) == (None, 1)
    assert (c.original_index, c.proposed_index) == (2, 2)


def test_ties_prefer_addition_over_removal():
    # Both "keep A" and "keep B" are LCS alignments; backtracking from the
    # end prefers adding, which keeps B as the unchanged anchor.
    records = compute_line_diff("A\nB", "B\nA")
    assert _kinds(records) == [
        (LineKind.REMOVED, "A"),
        (LineKind.UNCHANGED, "B"),
        (LineKind.ADDED, "A"),
    ]


def test_comparison_is_case_and_whitespace_sensitive():
    records = compute_line_diff("Note\nitem", "note\nitem ")
    assert [r.kind for r in records].count(LineKind.UNCHANGED) == 0


def test_trailing_newline_is_a_real_empty_line():
    records = compute_line_diff("a\n", "a\nb\n")
    assert _kinds(records) == [
        (LineKind.UNCHANGED, "a"),
        (LineKind.ADDED, "b"),
        (LineKind.UNCHANGED, ""),
    ]


def test_empty_original():
    records = compute_line_diff("", "x\ny")
    assert _kinds(records) == [
        (LineKind.REMOVED, ""),
        (LineKind.ADDED, "x"),
        (LineKind.ADDED, "y"),
    ]


def test_empty_proposed():
    records = compute_line_diff("x\ny", "")
    assert [r.kind for r in records].count(LineKind.REMOVED) == 2
    assert [r.text for r in records if r.kind == LineKind.ADDED] == [""]


def test_both_empty():
    assert _kinds(compute_line_diff("", "")) == [(LineKind.UNCHANGED, "")]


def test_record_count_is_bounded_by_both_sides():
    original = "a\nb\nc\nd"
    proposed = "x\nb\ny\nd\ne"
    records = compute_line_diff(original, proposed)
    assert len(records) <= len(original.split("\n")) + len(proposed.split("\n"))


def test_stats_count_added_and_removed_lines():
    stats = compute_stats(compute_line_diff("1\n2\n3\n4\n5", "1\nX\n3\nY\n5\n6"))
    assert stats.added == 3
    assert stats.removed == 2


def test_size_limit_is_checked_before_diffing():
    with pytest.raises(DiffTooLargeError):
        compute_line_diff("a\nb", "c\nd", max_cells=3)
    assert len(compute_line_diff("a\nb", "c\nd", max_cells=4)) == 4


def test_generate_diff_bundles_segments_and_preview():
    result = DiffGenerator().generate_diff("A\nB\nC", "A\nX\nC", "notes/todo.md")
    assert result.file_path == "notes/todo.md"
    assert len(result.records) == 4
    assert [s.type for s in result.segments] == ["unchanged", "hunk", "unchanged"]
    assert result.stats.added == 1
    assert result.stats.removed == 1
    assert result.preview_content == "A\nX\nC"


def test_generator_applies_its_size_limit():
    with pytest.raises(DiffTooLargeError):
        DiffGenerator(max_cells=1).diff("a\nb", "a")


def test_inline_preview_marks_changes():
    preview = DiffGenerator().generate_inline_preview("A\nB\nC", "A\nX\nC")
    assert preview == "  A\n- B\n+ X\n  C"

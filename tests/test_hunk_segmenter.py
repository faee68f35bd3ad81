from models.review import HunkSegment, HunkStatus, UnchangedSegment
from services.diff_generator import compute_line_diff
from services.hunk_segmenter import hunks_of, segment_records
from services.reconstructor import original_text, proposed_text

PAIRS = [
    ("A\nB\nC", "A\nX\nC"),
    ("A\nB", "A\nB\nC"),
    ("1\n2\n3\n4\n5", "1\nX\n3\nY\n5"),
    ("A\nB", "B\nA"),
    ("", "new note"),
    ("old note", ""),
    ("", ""),
    ("# Title\n\nbody\n", "# Title\n\nbody\nmore\n"),
    ("a\nb\nc\nd\ne\nf", "f\ne\nd\nc\nb\na"),
    ("x\nx\nx", "x\ny\nx\nx\ny"),
]


def _segments(original, proposed):
    return segment_records(compute_line_diff(original, proposed))


def test_single_hunk_between_unchanged_lines():
    segments = _segments("A\nB\nC", "A\nX\nC")
    assert len(segments) == 3
    first, hunk, last = segments
    assert isinstance(first, UnchangedSegment) and first.lines == ["A"]
    assert isinstance(hunk, HunkSegment)
    assert hunk.removed_lines == ["B"]
    assert hunk.added_lines == ["X"]
    assert isinstance(last, UnchangedSegment) and last.lines == ["C"]


def test_trailing_hunk_with_only_added_lines():
    segments = _segments("A\nB", "A\nB\nC")
    assert len(segments) == 2
    assert segments[0].lines == ["A", "B"]
    assert segments[1].removed_lines == []
    assert segments[1].added_lines == ["C"]


def test_non_adjacent_edits_make_separate_hunks():
    hunks = hunks_of(_segments("1\n2\n3\n4\n5", "1\nX\n3\nY\n5"))
    assert [(h.removed_lines, h.added_lines) for h in hunks] == [(["2"], ["X"]), (["4"], ["Y"])]


def test_ids_share_one_counter_in_document_order():
    segments = _segments("1\n2\n3\n4\n5", "1\nX\n3\nY\n5")
    assert [s.id for s in segments] == [
        "unchanged-0",
        "hunk-1",
        "unchanged-2",
        "hunk-3",
        "unchanged-4",
    ]


def test_hunks_start_pending_without_edits():
    for original, proposed in PAIRS:
        for hunk in hunks_of(_segments(original, proposed)):
            assert hunk.status == HunkStatus.PENDING
            assert hunk.edit_override is None


def test_identical_documents_give_one_unchanged_segment():
    segments = _segments("same\ntext", "same\ntext")
    assert len(segments) == 1
    assert segments[0].lines == ["same", "text"]


def test_empty_original_gives_a_single_hunk():
    segments = _segments("", "new note")
    assert len(segments) == 1
    assert segments[0].removed_lines == [""]
    assert segments[0].added_lines == ["new note"]


def test_segments_alternate_between_kinds():
    for original, proposed in PAIRS:
        types = [s.type for s in _segments(original, proposed)]
        assert all(a != b for a, b in zip(types, types[1:]))


def test_segmentation_is_lossless_in_both_directions():
    for original, proposed in PAIRS:
        segments = _segments(original, proposed)
        assert original_text(segments) == original
        assert proposed_text(segments) == proposed

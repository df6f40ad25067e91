import pytest

from softwrap.wrap import WrapSegment, segment_line, wrap_line

SCENARIO = ["hello world", "a", "supercalifragilisticexpialidocious"]


def test_wrap_scenario_lines_at_width_five() -> None:
    assert wrap_line(SCENARIO[0], 5) == ["hello", "world"]
    assert wrap_line(SCENARIO[1], 5) == ["a"]
    assert wrap_line(SCENARIO[2], 5) == [
        "super",
        "calif",
        "ragil",
        "istic",
        "expia",
        "lidoc",
        "ious",
    ]


@pytest.mark.parametrize("line", ["", " ", "a", "word " * 30, "x" * 101, "\t\t"])
def test_wrap_never_returns_zero_segments(line: str) -> None:
    assert len(wrap_line(line, 20)) >= 1


def test_empty_line_is_single_empty_segment() -> None:
    assert wrap_line("", 20) == [""]


def test_short_line_is_returned_unchanged() -> None:
    assert wrap_line("  indented text", 20) == ["  indented text"]


def test_whitespace_only_line_is_exempt_from_width() -> None:
    blank = " " * 45
    assert wrap_line(blank, 20) == [blank]


def test_words_are_packed_greedily() -> None:
    line = "the quick brown fox jumps over the lazy dog"

    rows = wrap_line(line, 20)

    assert rows == ["the quick brown fox", "jumps over the lazy", "dog"]
    assert all(len(row) <= 20 for row in rows)


def test_long_word_flushes_pending_row_and_keeps_remainder_open() -> None:
    rows = wrap_line("ab " + "x" * 12 + " cd", 5)

    assert rows == ["ab", "xxxxx", "xxxxx", "xx cd"]


def test_rows_respect_width_for_prose() -> None:
    line = " ".join(["lorem", "ipsum", "dolor", "sit", "amet"] * 20)

    for width in (20, 33, 78):
        assert all(len(row) <= width for row in wrap_line(line, width))


def test_wrap_rejects_non_positive_width() -> None:
    with pytest.raises(ValueError):
        wrap_line("text", 0)


def test_segment_line_marks_only_the_last_segment() -> None:
    segments = segment_line("hello world", 5, source_line=7)

    assert segments == (
        WrapSegment(text="hello", source_line=7, is_last=False),
        WrapSegment(text="world", source_line=7, is_last=True),
    )

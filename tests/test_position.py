import pytest
from hypothesis import given, strategies as st

from pestle.position import Position


def test_new_rejects_non_boundary():
    heart = "💖"
    with pytest.raises(ValueError):
        Position(heart, 1)
    assert Position(heart, len(heart.encode("utf-8"))).pos == 4


def test_new_rejects_out_of_range():
    with pytest.raises(ValueError):
        Position("ab", 3)


def test_from_start():
    assert Position.from_start("").pos == 0


def test_empty():
    assert Position("", 0).match_string("")
    assert not Position("", 0).match_string("a")


def test_parts():
    text = "asdasdf"
    assert Position(text, 0).match_string("asd")
    assert Position(text, 3).match_string("asdf")


def test_match_string_advances_only_on_success():
    p = Position.from_start("abc")
    assert not p.match_string("b")
    assert p.pos == 0
    assert p.match_string("ab")
    assert p.pos == 2


@pytest.mark.parametrize(
    "pos, expected",
    [
        (0, (1, 1)),
        (1, (1, 2)),
        (2, (1, 3)),
        (3, (1, 4)),
        (4, (2, 1)),
        (5, (2, 2)),
        (6, (2, 3)),
        (7, (3, 1)),
        (8, (3, 2)),
        (11, (3, 3)),
    ],
)
def test_line_col(pos, expected):
    assert Position("a\rb\nc\r\nd嗨", pos).line_col() == expected


def test_line_col_multibyte():
    assert Position("abcd嗨", 7).line_col() == (1, 6)


@pytest.mark.parametrize(
    "pos, expected",
    [
        (0, "a\rb\n"),
        (1, "a\rb\n"),
        (2, "a\rb\n"),
        (3, "a\rb\n"),
        (4, "c\r\n"),
        (5, "c\r\n"),
        (6, "c\r\n"),
        (7, "d嗨"),
        (8, "d嗨"),
        (11, "d嗨"),
    ],
)
def test_line_of(pos, expected):
    assert Position("a\rb\nc\r\nd嗨", pos).line_of() == expected


def test_line_of_empty():
    assert Position("", 0).line_of() == ""


def test_line_of_new_line():
    assert Position("\n", 0).line_of() == "\n"


def test_line_of_between_new_line():
    assert Position("\n\n", 1).line_of() == "\n"


def _measure_skip(text, pos, n):
    p = Position(text, pos)
    if p.skip(n):
        return p.pos - pos
    return None


def test_skip_empty():
    assert _measure_skip("", 0, 0) == 0
    assert _measure_skip("", 0, 1) is None


def test_skip():
    assert _measure_skip("d嗨", 0, 0) == 0
    assert _measure_skip("d嗨", 0, 1) == 1
    assert _measure_skip("d嗨", 1, 1) == 3


def test_skip_failure_keeps_position():
    p = Position("d嗨", 1)
    assert not p.skip(2)
    assert p.pos == 1


def test_skip_back():
    p = Position("d嗨", 4)
    assert p.skip_back(1)
    assert p.pos == 1
    assert not p.skip_back(2)
    assert p.pos == 1


@pytest.mark.parametrize(
    "strings, expected_pos, found",
    [
        (["a", "b"], 0, True),
        (["b"], 1, True),
        (["ab"], 0, True),
        (["ac", "z"], 3, True),
        (["z"], 5, False),
    ],
)
def test_skip_until(strings, expected_pos, found):
    start = Position.from_start("ab ac")
    p = start.copy()
    assert p.skip_until(strings) is found
    assert p.pos == expected_pos
    assert start.pos == 0


def test_match_range():
    text = "b"
    assert Position(text, 0).match_range("a", "c")
    assert Position(text, 0).match_range("b", "b")
    assert not Position(text, 0).match_range("a", "a")
    assert not Position(text, 0).match_range("c", "c")
    assert Position(text, 0).match_range("a", "嗨")


def test_match_insensitive():
    text = "AsdASdF"
    assert Position(text, 0).match_insensitive("asd")
    assert Position(text, 3).match_insensitive("asdf")


def test_match_insensitive_failure_keeps_position():
    p = Position("AsdASdF", 0)
    assert not p.match_insensitive("asx")
    assert p.pos == 0


def test_match_char_does_not_move():
    p = Position.from_start("嗨a")
    assert p.match_char("嗨")
    assert not p.match_char("a")
    assert p.pos == 0


def test_match_char_by():
    p = Position.from_start("嗨a")
    assert not p.match_char_by(str.isascii)
    assert p.pos == 0
    assert p.match_char_by(lambda c: c == "嗨")
    assert p.pos == 3
    assert not Position("", 0).match_char_by(lambda c: True)


def test_at_start_and_end():
    p = Position.from_start("a")
    assert p.at_start() and not p.at_end()
    assert p.skip(1)
    assert p.at_end() and not p.at_start()


def test_cmp():
    start = Position.from_start("a")
    end = start.copy()
    assert end.skip(1)
    assert start < end
    assert sorted([end, start]) == [start, end]


def test_cmp_different_inputs_raises():
    pos1 = Position.from_start("a")
    pos2 = Position.from_start("b")
    with pytest.raises(TypeError):
        _ = pos1 < pos2
    assert not pos1 == pos2


def test_hash():
    start = Position.from_start("a")
    positions = {start}
    assert start.copy() in positions


def test_span_from_different_inputs_raises():
    with pytest.raises(ValueError):
        Position.from_start("a").span(Position.from_start("b"))


def test_span_text():
    text = "abc"
    start = Position(text, 1)
    end = start.copy()
    assert end.match_string("b")
    assert start.span(end).as_str() == "b"


@given(st.text(), st.integers(min_value=0, max_value=20))
def test_skip_then_skip_back_round_trip(text, n):
    p = Position.from_start(text)
    moved = p.skip(n)
    assert moved == (n <= len(text))
    if moved:
        assert p.skip_back(n)
    assert p.pos == 0


@given(st.text())
def test_line_col_at_end_counts_newlines(text):
    p = Position.from_start(text)
    assert p.skip(len(text))
    line, column = p.line_col()
    assert line == text.count("\n") + 1
    assert column >= 1
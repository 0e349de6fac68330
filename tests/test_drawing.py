import pytest

from crane.drawing import is_drawing, parse_crate_row, parse_drawing, render_drawing
from crane.errors import InvalidChar, InvalidId
from crane.stacks import parse_stacks

DRAWING = ["    [D]    ", "[N] [C]    ", "[Z] [M] [P]", " 1   2   3 "]


@pytest.mark.parametrize(
    "line, expected",
    [
        ("[Z] [M] [P]", ["Z", "M", "P"]),
        ("    [D]", [None, "D"]),
        ("        [P]", [None, None, "P"]),
        ("", []),
    ],
)
def test_parse_crate_row(line, expected):
    actual = parse_crate_row(line)
    assert expected == actual, (expected, actual)


def test_parse_drawing_matches_labeled_layout():
    drawing = parse_drawing(DRAWING)
    labeled = parse_stacks(["1 Z N", "2 M C D", "3 P"])
    assert drawing == labeled, (drawing, labeled)


def test_parse_drawing_keeps_empty_stacks():
    stacks = parse_drawing(["[A]     [B]", " 1   2   3   4"])
    assert stacks == [["A"], [], ["B"], []], stacks
    stacks = parse_drawing([" 1   2"])
    assert stacks == [[], []], stacks


@pytest.mark.parametrize(
    "lines, error",
    [
        (["[Z] [M] [P]"], InvalidId),
        (["[Z] [M]", " 1   x"], InvalidId),
        (["[Z] [M] [P]", " 1   2"], InvalidId),
        ([], InvalidId),
        (["[Z] [MN]", " 1   2"], InvalidChar),
        (["[Z] (M)", " 1   2"], InvalidChar),
        (["[A]", "    [B]", " 1   2"], InvalidChar),
        (["[A] [B]", "    [C]", "[D]", " 1   2"], InvalidChar),
    ],
)
def test_parse_drawing_rejects(lines, error):
    with pytest.raises(error):
        parse_drawing(lines)


def test_is_drawing():
    assert is_drawing(DRAWING)
    assert is_drawing(["[Z] (M)", " 1   2"])
    assert not is_drawing(["1 Z N", "2 M C D"])
    assert not is_drawing(["1 [ A", "2 ]"])
    assert not is_drawing(["1 [ A ]", "2 [ ]"])


def test_parse_drawing_check_labels():
    assert parse_drawing(DRAWING, check_labels=True) == parse_drawing(DRAWING)
    stacks = parse_drawing(["[A]     [B]", " 1   3   4"])
    assert stacks == [["A"], [], ["B"]], stacks
    with pytest.raises(InvalidId, match="1 to 3"):
        parse_drawing(["[A]     [B]", " 1   3   4"], check_labels=True)


def test_render_drawing():
    rendered = render_drawing(parse_drawing(DRAWING))
    expected = "\n".join(line.rstrip() for line in DRAWING)
    assert expected == rendered, (expected, rendered)
    assert parse_drawing(rendered.splitlines()) == parse_drawing(DRAWING)

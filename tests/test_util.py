import io

import pytest

from crane import util
from crane.errors import ParseError


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1 A\n2 B\n\nmove 1 from 1 to 2\n", (["1 A", "2 B"], ["move 1 from 1 to 2"])),
        ("\n\n1 A\n\nmove 1 from 1 to 1", (["1 A"], ["move 1 from 1 to 1"])),
        ("    [D]\n[N] [C]\n 1   2\n  \n", (["    [D]", "[N] [C]", " 1   2"], [])),
        (
            "1 A\n\nmove 1 from 1 to 1\n\nmove 1 from 1 to 1",
            (["1 A"], ["move 1 from 1 to 1", "", "move 1 from 1 to 1"]),
        ),
    ],
)
def test_split_sections(text, expected):
    actual = util.split_sections(io.StringIO(text))
    assert expected == actual, (expected, actual)


def test_split_sections_requires_blank_line():
    with pytest.raises(ParseError):
        util.split_sections(io.StringIO("1 A\nmove 1 from 1 to 1\n"))


def test_numbered_lines_skips_blanks():
    actual = list(util.numbered_lines(["a\n", "\n", "  \n", "b"]))
    expected = [(1, "a"), (4, "b")]
    assert expected == actual, (expected, actual)


def test_print_respects_verbose(capsys):
    util.set_verbose(False)
    util.print_("quiet")
    util.set_verbose(True)
    util.print_("loud")
    util.set_verbose(False)
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "loud\n"

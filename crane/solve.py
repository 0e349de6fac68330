"""Stacks of crates are rearranged by a crane following instructions like `move 3 from 1 to 2`.

The input holds the starting stacks, a blank line, then one instruction per line. Stacks are
given either one per line as a label followed by crates from the bottom up (`1 Z N`), or as a
drawing of bracketed crates over a footer of labels. The answer is the top crate of each stack,
in label order.

A sequential crane lifts one crate at a time, so each moved block lands reversed; pass
`sequential=False` for a crane that lifts the whole block at once.
"""
from typing import IO, Iterable

from .drawing import is_drawing, parse_drawing, render_drawing
from .instruction import parse_instructions
from .stacks import Stacks, apply_instructions, parse_stacks, tops
from .util import print_, set_verbose, split_sections

LABELED, DRAWING, AUTO = "labeled", "drawing", "auto"
LAYOUTS = (LABELED, DRAWING, AUTO)


def parse_layout(lines: Iterable[str], layout: str = AUTO, check_labels: bool = False) -> Stacks:
    assert layout in LAYOUTS, f"layout must be one of {LAYOUTS}"
    lines = list(lines)
    if layout == DRAWING or (layout == AUTO and is_drawing(lines)):
        return parse_drawing(lines, check_labels=check_labels)
    return parse_stacks(lines, check_labels=check_labels)


def run(
    input_: IO[str],
    sequential: bool = True,
    check_labels: bool = False,
    layout: str = AUTO,
    verbose: bool = False,
) -> str:
    set_verbose(verbose)
    layout_lines, instruction_lines = split_sections(input_)
    stacks = parse_layout(layout_lines, layout, check_labels)
    instructions = parse_instructions(instruction_lines)
    print_(f"Parsed {len(instructions)} instructions")
    print_(render_drawing(stacks), end="\n\n")
    final_state = apply_instructions(stacks, instructions, sequential)
    print_(render_drawing(final_state), end="\n\n")
    return tops(final_state)


test_input = """1 Z N
2 M C D
3 P

move 1 from 2 to 1
move 3 from 1 to 3
move 2 from 2 to 1
move 1 from 1 to 2
"""

test_drawing = """    [D]
[N] [C]
[Z] [M] [P]
 1   2   3

move 1 from 2 to 1
move 3 from 1 to 3
move 2 from 2 to 1
move 1 from 1 to 2
"""


def test():
    import io

    for input_ in test_input, test_drawing:
        result = run(io.StringIO(input_), sequential=True)
        expected = "CMZ"
        assert result == expected, (result, expected)
        result = run(io.StringIO(input_), sequential=False)
        expected = "MCD"
        assert result == expected, (result, expected)

    layout, _ = split_sections(io.StringIO(test_drawing))
    stacks = parse_layout(layout)
    assert stacks == [list("ZN"), list("MCD"), list("P")], stacks

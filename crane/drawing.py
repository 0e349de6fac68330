from itertools import zip_longest
from typing import List, Optional, Sequence

from .errors import InvalidChar, InvalidId
from .stack import Crate, Stack, parse_label
from .stacks import Stacks
from .util import nonnull_head, print_

CELL_WIDTH = 4
OPEN, CLOSE = "[", "]"


def is_crate_row(line: str) -> bool:
    """A row with a bracketed cell on the cell grid whose first token isn't a stack label"""
    tokens = line.split()
    if not tokens or (tokens[0].isascii() and tokens[0].isdigit()):
        return False
    return any(
        line[i : i + 1] == OPEN and line[i + 2 : i + 3] == CLOSE  # noqa: E203
        for i in range(0, len(line), CELL_WIDTH)
    )


def is_drawing(lines: Sequence[str]) -> bool:
    return any(map(is_crate_row, lines))


def parse_crate_row(line: str) -> List[Optional[Crate]]:
    chunks = (line[i : i + CELL_WIDTH] for i in range(0, len(line), CELL_WIDTH))  # noqa: E203
    return list(map(parse_cell, chunks))


def parse_cell(cell: str) -> Optional[Crate]:
    if not cell.strip():
        return None
    body = cell.rstrip()
    if len(body) != 3 or body[0] != OPEN or body[2] != CLOSE:
        raise InvalidChar(f"Invalid crate {body!r}, expected a single character like '[X]'")
    return body[1]


def parse_footer(line: str) -> List[int]:
    return list(map(parse_label, line.split()))


def stack_column(label: int, cells: Sequence[Optional[Crate]]) -> Stack:
    crates = list(nonnull_head(cells))
    floating = [c for c in cells[len(crates) :] if c is not None]  # noqa: E203
    if floating:
        raise InvalidChar(f"Crate {floating[0]!r} in stack {label} sits above an empty cell")
    return Stack(crates)


def parse_drawing(lines: Sequence[str], check_labels: bool = False) -> Stacks:
    """Parse rows of bracketed crates sitting above a footer of stack labels, e.g.

            [D]
        [N] [C]
        [Z] [M] [P]
         1   2   3
    """
    nonblank = [line.rstrip() for line in lines if line.strip()]
    if not nonblank:
        raise InvalidId("Drawing is empty; expected a footer of stack labels")
    *rows, footer = nonblank
    labels = parse_footer(footer)
    if not labels:
        raise InvalidId(f"Drawing footer {footer!r} has no stack labels")
    expected = list(range(1, len(labels) + 1))
    if check_labels and labels != expected:
        raise InvalidId(f"Drawing footer labels {labels} should run from 1 to {len(labels)}")
    crate_rows = list(map(parse_crate_row, rows))
    if any(len(row) > len(labels) for row in crate_rows):
        raise InvalidId(f"Drawing has crates beyond the {len(labels)} labeled stacks")
    # pad every row out to the full width so the transpose keeps empty stacks
    padded = (row + [None] * (len(labels) - len(row)) for row in crate_rows)
    from_the_bottom = reversed(list(padded))
    transposed = zip_longest(*from_the_bottom, fillvalue=None)
    columns = [stack_column(label, cells) for label, cells in zip(expected, transposed)]
    if not columns:
        columns = [Stack() for _ in labels]
    print_(f"Parsed drawing of {len(labels)} stacks")
    return Stacks(columns)


def render_drawing(stacks: Stacks) -> str:
    height = max(map(len, stacks), default=0)

    def cell(stack: Stack, level: int) -> str:
        return f"{OPEN}{stack.items[level]}{CLOSE}" if level < len(stack) else "   "

    rows = (" ".join(cell(s, level) for s in stacks).rstrip() for level in reversed(range(height)))
    footer = " ".join(f" {label} " for label in range(1, len(stacks) + 1)).rstrip()
    return "\n".join([*rows, footer])

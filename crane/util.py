import sys
from itertools import dropwhile
from typing import Iterable, Iterator, List, Optional, Tuple, TypeVar

from .errors import ParseError

VERBOSE = False

T = TypeVar("T")


# Functional


def is_blank(line: str) -> bool:
    return not line.strip()


# Iterators


def nonnull_head(it: Iterable[Optional[T]]) -> Iterator[T]:
    for i in it:
        if i is None:
            break
        yield i


def numbered_lines(lines: Iterable[str]) -> Iterator[Tuple[int, str]]:
    """Enumerate lines from 1, dropping blank ones"""
    return ((n, line) for n, line in enumerate(map(str.rstrip, lines), 1) if line.strip())


# I/O


def set_verbose(value: bool):
    global VERBOSE
    VERBOSE = value


def print_(*args, **kwargs):
    if VERBOSE:
        print(*args, **kwargs, file=sys.stderr)


def split_sections(lines: Iterable[str]) -> Tuple[List[str], List[str]]:
    """Split a document on its first blank line. Leading blank lines are not a separator."""
    it = dropwhile(is_blank, map(str.rstrip, lines))
    head = []
    for line in it:
        if not line.strip():
            return head, list(it)
        head.append(line)
    raise ParseError("There was no blank line separating the stacks from the instructions")

from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from .errors import InvalidChar, InvalidId

Crate = str

# returned in place of a crate when a stack is empty
EMPTY: Crate = " "


@dataclass
class Stack:
    """A single stack of crates; the last item is the top.

    Reading or removing the top of an empty stack is lenient and yields `EMPTY`. Callers that
    care about emptiness check `is_empty` first.
    """

    items: List[Crate] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.items)

    def __eq__(self, other):
        if isinstance(other, Stack):
            return self.items == other.items
        elif isinstance(other, (list, str)):
            return self.items == list(other)
        return NotImplemented

    def __repr__(self):
        return f"Stack({''.join(self.items)!r})"

    def length(self) -> int:
        return len(self.items)

    def is_empty(self) -> bool:
        return not self.items

    def peek_top(self) -> Crate:
        return self.items[-1] if self.items else EMPTY

    def remove_top(self) -> Crate:
        return self.items.pop() if self.items else EMPTY

    def add_top(self, crate: Crate):
        self.items.append(crate)


def parse_label(token: str) -> int:
    if not (token.isascii() and token.isdigit()):
        raise InvalidId(f"Invalid stack id: {token!r}, expected an unsigned integer")
    return int(token)


def parse_crate(token: str) -> Crate:
    if len(token) != 1:
        raise InvalidChar(f"Invalid stack element: {token!r}, expected a single character")
    return token


def parse_stack(tokens: Sequence[str]) -> Tuple[int, Stack]:
    """Parse a leading label token followed by crate tokens listed bottom to top"""
    label, *crates = tokens
    return parse_label(label), Stack(list(map(parse_crate, crates)))

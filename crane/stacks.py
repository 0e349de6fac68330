from functools import partial, reduce
from typing import Iterable, Iterator, List

from .errors import EmptyStack, InvalidId, StackIndexError
from .instruction import Instruction, Instructions
from .stack import Stack, parse_stack
from .util import numbered_lines, print_


class Stacks:
    """An ordered collection of stacks addressed by 1-based labels.

    Stack `k` lives at position `k - 1`; the collection is the sole owner of its stacks, and the
    transition functions below mutate it in place and hand it back as the next state.
    """

    def __init__(self, stacks: Iterable[Stack] = ()):
        self.stacks: List[Stack] = list(stacks)

    def __len__(self) -> int:
        return len(self.stacks)

    def __iter__(self) -> Iterator[Stack]:
        return iter(self.stacks)

    def __getitem__(self, label: int) -> Stack:
        return self.stacks[self.position(label)]

    def __eq__(self, other):
        if isinstance(other, Stacks):
            return self.stacks == other.stacks
        elif isinstance(other, list):
            return self.stacks == other
        return NotImplemented

    def __repr__(self):
        return f"Stacks({self.stacks!r})"

    def position(self, label: int) -> int:
        ix = label - 1
        if not 0 <= ix < len(self.stacks):
            raise StackIndexError(
                f"Could not find stack {label}; labels run from 1 to {len(self.stacks)}"
            )
        return ix


# Parsing


def parse_stacks(lines: Iterable[str], check_labels: bool = False) -> Stacks:
    """Parse one stack per line: a label, then crates bottom to top, separated by whitespace.

    Stacks are assigned positions in line order; the written label is ignored unless
    `check_labels` is set, in which case it must match the line's position.
    """
    stacks = Stacks()
    for lineno, line in numbered_lines(lines):
        label, stack = parse_stack(line.split())
        expected = len(stacks) + 1
        if check_labels and label != expected:
            raise InvalidId(f"line {lineno}: stack labeled {label} is in position {expected}")
        stacks.stacks.append(stack)
    print_(f"Parsed {len(stacks)} stacks with {sum(map(len, stacks))} crates")
    return stacks


# Crane operation


def move(stacks: Stacks, inst: Instruction, sequential: bool = True) -> Stacks:
    """Move `inst.qty` crates from one stack to another.

    A sequential crane lifts crates one at a time, so the moved block lands reversed; otherwise
    the block keeps its order.
    """
    from_stack = stacks.stacks[stacks.position(inst.from_)]
    to_stack = stacks.stacks[stacks.position(inst.to)]
    if inst.qty > len(from_stack):
        raise EmptyStack(
            f"Cannot take {inst.qty} crates from stack {inst.from_}, "
            f"since it only has {len(from_stack)}: {from_stack!r}"
        )
    from_items = [from_stack.remove_top() for _ in range(inst.qty)]
    for crate in from_items if sequential else reversed(from_items):
        to_stack.add_top(crate)
    return stacks


def _step(sequential: bool, stacks: Stacks, inst: Instruction) -> Stacks:
    print_(inst)
    return move(stacks, inst, sequential)


def apply_instructions(
    stacks: Stacks, instructions: Instructions, sequential: bool = True
) -> Stacks:
    """Apply instructions in order. The first failure propagates; earlier moves stay applied."""
    return reduce(partial(_step, sequential), instructions, stacks)


def tops(stacks: Stacks) -> str:
    for label, stack in enumerate(stacks, 1):
        if stack.is_empty():
            raise EmptyStack(f"Stack {label} is empty and has no top")
    return "".join(stack.peek_top() for stack in stacks)


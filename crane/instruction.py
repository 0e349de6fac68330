from typing import Iterable, List, NamedTuple

from .errors import InvalidInstruction
from .util import numbered_lines

INSTRUCTION_FORMAT = "move <count> from <source> to <destination>"


class Instruction(NamedTuple):
    qty: int
    from_: int
    to: int

    def __str__(self):
        return f"move {self.qty} from {self.from_} to {self.to}"


Instructions = List[Instruction]


def parse_int(token: str) -> int:
    if not (token.isascii() and token.isdigit()):
        raise InvalidInstruction(f"Error parsing symbol {token!r}, expected a non-negative integer")
    return int(token)


def parse_instruction(line: str) -> Instruction:
    parts = line.split()
    if len(parts) != 6:
        raise InvalidInstruction(
            f"Invalid crane instruction {line.strip()!r}; expected the form {INSTRUCTION_FORMAT!r}"
        )
    # keywords sit at the even positions and aren't checked
    return Instruction(*map(parse_int, parts[1::2]))


def parse_instructions(lines: Iterable[str]) -> Instructions:
    instructions = []
    for lineno, line in numbered_lines(lines):
        try:
            instructions.append(parse_instruction(line))
        except InvalidInstruction as e:
            raise InvalidInstruction(f"line {lineno}: {e}") from e
    return instructions

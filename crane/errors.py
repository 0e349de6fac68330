class ParseError(ValueError):
    """Raised while converting text to stacks or instructions"""

    kind = "ParseError"


class InvalidId(ParseError):
    kind = "InvalidId"


class InvalidChar(ParseError):
    kind = "InvalidChar"


class InvalidInstruction(ParseError):
    kind = "InvalidInstruction"


class CraneError(Exception):
    """Raised while applying instructions to already-parsed stacks"""

    kind = "CraneError"


class EmptyStack(CraneError):
    kind = "EmptyStack"


class StackIndexError(CraneError, IndexError):
    kind = "IndexError"

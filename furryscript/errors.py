"""
FurryScript Errors
==================
One exception type per pipeline stage, all sharing a common base so a
caller can catch every FurryScript failure with a single clause.
"""
from enum import Enum


class FurryScriptError(Exception):
    """Base class for every error raised by the lexer, parser, or interpreter."""

    def __init__(self, message: str, line: int = 0, col: int = 0):
        super().__init__(message)
        self.message = message
        self.line = line
        self.col = col


class LexError(FurryScriptError):
    """An unexpected character in the source text."""

    def __init__(self, char: str, line: int, col: int):
        super().__init__(
            f"Unexpected character {char!r} at line {line}, column {col}",
            line, col,
        )
        self.char = char


class ParseError(FurryScriptError):
    """A token that does not fit the grammar at the current position."""

    def __init__(self, expected: str, actual: str, line: int, col: int = 0):
        super().__init__(f"Expected {expected}, got {actual} at line {line}", line, col)
        self.expected = expected
        self.actual = actual


class RuntimeErrorKind(Enum):
    """Why evaluation stopped."""
    UNDEFINED_VARIABLE   = "Undefined variable"
    UNSUPPORTED_OPERATOR = "Unsupported operator"
    UNSUPPORTED_OPERAND  = "Unsupported operand"
    DIVISION_BY_ZERO     = "Division by zero"
    NUMERIC_OVERFLOW     = "Numeric overflow"
    NESTING_TOO_DEEP     = "Expression nested too deeply"
    UNDEFINED_FUNCTION   = "Undefined function"
    UNSUPPORTED_CALL     = "Function calls are not supported"


class ScriptRuntimeError(FurryScriptError):
    """Evaluation failure.

    ``subject`` is the offending variable name, operator, or function name.
    """

    def __init__(self, kind: RuntimeErrorKind, subject: str, line: int = 0, col: int = 0):
        location = f" at L{line}:{col}" if line else ""
        super().__init__(f"{kind.value}: {subject}{location}", line, col)
        self.kind = kind
        self.subject = subject

"""Structured error types for the expression engine."""

from __future__ import annotations

from typing import ClassVar


class MathParserError(Exception):
    """Base class for engine failures.

    Every kind carries a fixed, human-readable message and no further context:
    the whole expression is rejected as a unit.
    """

    message: ClassVar[str] = "Math parser error"
    kind: ClassVar[str] = "math_parser_error"

    def __init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class MismatchedParenthesis(MathParserError):
    """An open parenthesis is never closed, or a close finds no open one."""

    message = "Mismatched parenthesis"
    kind = "mismatched_parenthesis"


class InvalidNotation(MathParserError):
    """Malformed operator adjacency, operand underflow or a non-numeric operand."""

    message = "Invalid notation"
    kind = "invalid_notation"


class InvalidFunction(MathParserError):
    """Unknown function name, wrong argument count or an undecodable call."""

    message = "Invalid function"
    kind = "invalid_function"


ERROR_KINDS: dict[str, type[MathParserError]] = {
    cls.kind: cls for cls in (MismatchedParenthesis, InvalidNotation, InvalidFunction)
}

"""Infix to postfix conversion (shunting-yard) over lexer tokens."""

from __future__ import annotations

import logging
from typing import Final

from .errors import InvalidNotation, MismatchedParenthesis
from .lexer import Token, tokenize
from .operators import Operator, operator_for

logger = logging.getLogger(__name__)

SEPARATOR: Final = " "

_OPERAND_KINDS: Final = frozenset({"NUMBER", "FUNCTION"})
_OPERATOR_KINDS: Final = frozenset({"OPERATOR", "UNARY"})


def _should_pop(top: Operator, incoming: Operator) -> bool:
    if top.is_sentinel:
        return False
    if top.precedence > incoming.precedence:
        return True
    return top.precedence == incoming.precedence and incoming.associativity == "left"


def _emit_operator(output: list[str], op: Operator) -> None:
    output.append(SEPARATOR)
    output.append(op.symbol)


def _handle_token(stack: list[Operator], output: list[str], token: Token) -> None:
    if token.kind in _OPERAND_KINDS:
        if output and output[-1] != SEPARATOR:
            # two operands (or an operand right after a popped operator) with
            # nothing separating them, e.g. "2(3)" or "(1+2)3"
            logger.debug("operand %r at index %d is not separated from %r", token.text, token.pos, output[-1])
            raise InvalidNotation()
        output.append(token.text)
        return

    if token.kind in _OPERATOR_KINDS:
        op = operator_for(token.text)
        assert op is not None
        if op.is_real:
            while stack and _should_pop(stack[-1], op):
                _emit_operator(output, stack.pop())
        stack.append(op)
        if op.is_real:
            output.append(SEPARATOR)
        return

    if token.kind == "LPAREN":
        stack.append(operator_for(token.text))
        return

    if token.kind == "RPAREN":
        while stack:
            top = stack.pop()
            if top.is_sentinel:
                return
            _emit_operator(output, top)
        logger.debug("unmatched ')' at index %d", token.pos)
        raise MismatchedParenthesis()

    raise InvalidNotation()


def _flush_stack(stack: list[Operator], output: list[str]) -> None:
    while stack:
        top = stack.pop()
        if top.is_sentinel:
            logger.debug("unmatched '(' left on the operator stack")
            raise MismatchedParenthesis()
        _emit_operator(output, top)


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression to a space-delimited postfix string.

    ``((8*21)+89/14)^4`` becomes ``8 21 * 89 14 / + 4 ^`` and ``50 * -45``
    becomes ``50 45 m *`` (``m``/``p`` are unary minus/plus). Function calls
    such as ``log!100,10`` are single operand tokens.

    Raises ``MismatchedParenthesis`` for unbalanced parentheses and
    ``InvalidNotation`` for malformed operator adjacency, which shows up as two
    consecutive separators in the output.
    """
    stack: list[Operator] = []
    output: list[str] = []

    for token in tokenize(expression):
        _handle_token(stack, output, token)
    _flush_stack(stack, output)

    postfix = "".join(output)
    if SEPARATOR * 2 in postfix:
        logger.debug("double separator in postfix %r", postfix)
        raise InvalidNotation()
    logger.debug("postfix for %r: %r", expression, postfix)
    return postfix


def postfix_tokens(expression: str) -> list[str]:
    return infix_to_postfix(expression).split()

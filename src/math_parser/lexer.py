"""Tokenization for infix arithmetic, including unary sign resolution."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Final

from .errors import InvalidFunction, InvalidNotation
from .operators import LPAREN, RPAREN, UNARY_MINUS, UNARY_PLUS, operator_for

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Token:
    kind: str
    text: str
    pos: int
    end: int


FUNCTION_MARK: Final = "!"
ARGUMENT_SEPARATOR: Final = ","

_NUMBER_CHARS: Final = frozenset("0123456789.,")
_BINARY_SYMBOLS: Final = frozenset("+-*/^")
_UNARY_SYMBOLS: Final = frozenset({UNARY_MINUS, UNARY_PLUS})
_UNARY_REWRITES: Final[dict[str, str]] = {"-": UNARY_MINUS, "+": UNARY_PLUS}


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _scan_while(source: str, start: int, predicate: Callable[[str], bool]) -> tuple[str, int]:
    i = start
    while i < len(source) and predicate(source[i]):
        i += 1
    return source[start:i], i


def strip_whitespace(source: str) -> str:
    return "".join(source.split())


def resolve_unary(chars: str) -> str:
    """Rewrite unary ``+``/``-`` into the ``p``/``m`` markers.

    A sign is unary when a decimal digit follows it and the character before
    it (if any) is neither a digit nor ``)``. Only one neighbor on each side is
    inspected: ``-(2)`` keeps a binary minus.
    """
    out = list(chars)
    for i, ch in enumerate(chars):
        op = operator_for(ch)
        if op is None or not op.is_real:
            continue
        if i + 1 >= len(chars) or not _is_digit(chars[i + 1]):
            continue
        if i > 0 and (chars[i - 1] == RPAREN or _is_digit(chars[i - 1])):
            continue
        rewrite = _UNARY_REWRITES.get(ch)
        if rewrite is None:
            # e.g. the "*" in "2+*4": a binary operator in operand position
            logger.debug("operator %r at index %d cannot be unary", ch, i)
            raise InvalidNotation()
        out[i] = rewrite
    return "".join(out)


def _scan_function(chars: str, start: int) -> int:
    name, i = _scan_while(chars, start, str.isalpha)
    if not name or i >= len(chars) or chars[i] != FUNCTION_MARK:
        logger.debug("malformed function call at index %d in %r", start, chars)
        raise InvalidFunction()
    _, end = _scan_while(chars, i + 1, lambda ch: ch in _NUMBER_CHARS)
    return end


def tokenize(source: str) -> list[Token]:
    """Split ``source`` into tokens.

    Whitespace is removed before anything else, so token positions index the
    whitespace-free, unary-resolved text.
    """
    chars = resolve_unary(strip_whitespace(source))
    tokens: list[Token] = []
    i = 0

    while i < len(chars):
        ch = chars[i]

        if ch in _NUMBER_CHARS:
            text, end = _scan_while(chars, i, lambda c: c in _NUMBER_CHARS)
            tokens.append(Token("NUMBER", text, i, end))
            i = end
            continue

        if ch in _BINARY_SYMBOLS:
            tokens.append(Token("OPERATOR", ch, i, i + 1))
            i += 1
            continue

        if ch in _UNARY_SYMBOLS:
            tokens.append(Token("UNARY", ch, i, i + 1))
            i += 1
            continue

        if ch == LPAREN:
            tokens.append(Token("LPAREN", ch, i, i + 1))
            i += 1
            continue

        if ch == RPAREN:
            tokens.append(Token("RPAREN", ch, i, i + 1))
            i += 1
            continue

        if ch.isalpha() or ch == FUNCTION_MARK:
            end = _scan_function(chars, i)
            tokens.append(Token("FUNCTION", chars[i:end], i, end))
            i = end
            continue

        logger.debug("unexpected character %r at index %d", ch, i)
        raise InvalidNotation()

    return tokens

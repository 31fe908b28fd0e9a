"""Postfix evaluation and the text-in, value-out engine facade."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Final, Iterator

from .errors import InvalidFunction, InvalidNotation, MathParserError
from .lexer import ARGUMENT_SEPARATOR, FUNCTION_MARK
from .operators import function_for, operator_for
from .parser import infix_to_postfix
from .values import NAN, Value, format_value, parse_value

logger = logging.getLogger(__name__)

_POSTFIX_CACHE_MAX: Final[int] = max(1, int(os.environ.get("MATH_PARSER_POSTFIX_CACHE_MAX", "256")))


@lru_cache(maxsize=_POSTFIX_CACHE_MAX)
def _infix_to_postfix_cached(expression: str) -> str:
    return infix_to_postfix(expression)


def postfix_cache_stats() -> dict[str, int]:
    info = _infix_to_postfix_cached.cache_info()
    return {
        "hits": info.hits,
        "misses": info.misses,
        "size": info.currsize,
        "max_size": info.maxsize or 0,
    }


@dataclass(frozen=True)
class FunctionCall:
    """A ``name!arg[,arg]`` postfix token split into its name and argument texts."""

    name: str
    args: tuple[str, ...]

    @classmethod
    def from_token(cls, token: str) -> "FunctionCall":
        name, mark, args = token.partition(FUNCTION_MARK)
        if not mark or not name.isalpha() or not args:
            raise InvalidFunction()
        return cls(name=name, args=tuple(args.split(ARGUMENT_SEPARATOR)))


@dataclass(frozen=True)
class Evaluation:
    """Result of evaluating one expression.

    ``trace`` lists every reduction step in execution order (function calls
    first) and is empty unless tracing was requested. Unpacks as
    ``value, trace``.
    """

    value: Value
    trace: tuple[str, ...] = ()

    @property
    def text(self) -> str:
        return format_value(self.value)

    def __iter__(self) -> Iterator[object]:
        return iter((self.value, self.trace))


def _parse_operand(text: str) -> Value:
    value = parse_value(text)
    if value is None:
        raise InvalidNotation()
    return value


def _pop(stack: list[Value]) -> Value:
    if not stack:
        raise InvalidNotation()
    return stack.pop()


def _resolve_functions(tokens: list[str], trace: list[str] | None) -> list[str | Value]:
    items: list[str | Value] = []
    for token in tokens:
        if FUNCTION_MARK not in token:
            items.append(token)
            continue

        call = FunctionCall.from_token(token)
        function = function_for(call.name)
        if function is None or len(call.args) != function.arity:
            logger.debug("rejected function call %r", token)
            raise InvalidFunction()

        args = [_parse_operand(arg) for arg in call.args]
        result = function.apply(*args)
        if trace is not None:
            second = args[1] if len(args) > 1 else NAN
            trace.append(f"{call.name} {format_value(args[0])} {format_value(second)} = {format_value(result)}")
        items.append(result)
    return items


def _reduce(items: list[str | Value], trace: list[str] | None) -> Value:
    stack: list[Value] = []
    for item in items:
        if not isinstance(item, str):
            stack.append(item)
            continue

        value = parse_value(item)
        if value is not None:
            stack.append(value)
            continue

        op = operator_for(item)
        if op is None or op.is_sentinel:
            logger.debug("unexpected postfix token %r", item)
            raise InvalidNotation()

        right = _pop(stack)
        if op.is_real:
            left = _pop(stack)
            result = op.apply(left, right)
        else:
            left = NAN
            result = op.apply(right)

        if trace is not None:
            trace.append(f"{format_value(left)} {op.symbol} {format_value(right)} = {format_value(result)}")
        stack.append(result)

    if len(stack) != 1:
        logger.debug("postfix left %d values on the stack", len(stack))
        raise InvalidNotation()
    return stack[0]


def _evaluate_tokens(tokens: list[str], trace: list[str] | None) -> Value:
    return _reduce(_resolve_functions(tokens, trace), trace)


def evaluate_postfix(postfix: str, trace: list[str] | None = None) -> str:
    """Evaluate a space-delimited postfix string and format the result.

    Function-call tokens are resolved first, then operators are reduced left
    to right. When ``trace`` is a list, one line per reduction is appended.
    """
    return format_value(_evaluate_tokens(postfix.split(), trace))


def evaluate(expression: str, *, trace: bool = False) -> Evaluation:
    """Parse and evaluate an infix expression.

    Raises a ``MathParserError`` subclass for malformed input.
    """
    postfix = _infix_to_postfix_cached(expression)
    steps: list[str] | None = [] if trace else None
    value = _evaluate_tokens(postfix.split(), steps)
    return Evaluation(value=value, trace=tuple(steps) if steps else ())


def try_evaluate(expression: str, *, trace: bool = False) -> Evaluation | MathParserError:
    """Like :func:`evaluate`, but returns the error instead of raising it."""
    try:
        return evaluate(expression, trace=trace)
    except MathParserError as err:
        logger.debug("rejected %r: %s", expression, err)
        return err

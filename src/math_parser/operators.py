"""Operator and function tables shared by the converter and the evaluator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Final, Literal

import numpy as np

from .values import Value

Associativity = Literal["left", "right"]

LPAREN: Final = "("
RPAREN: Final = ")"
UNARY_MINUS: Final = "m"
UNARY_PLUS: Final = "p"


def _single(values: tuple[Value, ...]) -> tuple[Value, ...]:
    return tuple(np.float32(v) for v in values)


def _log(value: Value, base: Value) -> Value:
    # each natural log is a float32 before the divide
    return np.log(value) / np.log(base)


_BINARY_OPS: Final[dict[str, Callable[[Value, Value], Value]]] = {
    "+": np.add,
    "-": np.subtract,
    "*": np.multiply,
    "/": np.divide,
    "^": np.power,
}

_UNARY_OPS: Final[dict[str, Callable[[Value], Value]]] = {
    UNARY_MINUS: np.negative,
    UNARY_PLUS: np.positive,
}

_FUNCTION_OPS: Final[dict[str, Callable[..., Value]]] = {
    "sin": np.sin,
    "cos": np.cos,
    "tan": np.tan,
    "log": _log,
}


@dataclass(frozen=True)
class Operator:
    symbol: str
    precedence: int
    associativity: Associativity

    @property
    def is_real(self) -> bool:
        """True for the binary arithmetic operators."""
        return self.symbol in _BINARY_OPS

    @property
    def is_unary(self) -> bool:
        return self.symbol in _UNARY_OPS

    @property
    def is_sentinel(self) -> bool:
        return self.symbol == LPAREN

    @property
    def arity(self) -> int:
        if self.is_real:
            return 2
        if self.is_unary:
            return 1
        return 0

    def apply(self, *operands: Value) -> Value:
        if self.is_sentinel:
            raise TypeError("the parenthesis sentinel cannot be applied")
        if len(operands) != self.arity:
            raise TypeError(f"operator {self.symbol!r} takes {self.arity} operand(s), got {len(operands)}")
        impl = _BINARY_OPS.get(self.symbol) or _UNARY_OPS[self.symbol]
        with np.errstate(all="ignore"):
            return impl(*_single(operands))


@dataclass(frozen=True)
class Function:
    name: str
    arity: int

    def apply(self, *args: Value) -> Value:
        if len(args) != self.arity:
            raise TypeError(f"function {self.name!r} takes {self.arity} argument(s), got {len(args)}")
        with np.errstate(all="ignore"):
            return _FUNCTION_OPS[self.name](*_single(args))


_OPERATORS: Final[dict[str, Operator]] = {
    "+": Operator("+", 2, "left"),
    "-": Operator("-", 2, "left"),
    "*": Operator("*", 3, "left"),
    "/": Operator("/", 3, "left"),
    "^": Operator("^", 4, "right"),
    UNARY_MINUS: Operator(UNARY_MINUS, 5, "left"),
    UNARY_PLUS: Operator(UNARY_PLUS, 5, "left"),
    LPAREN: Operator(LPAREN, -1, "left"),
}

_FUNCTIONS: Final[dict[str, Function]] = {
    "sin": Function("sin", 1),
    "cos": Function("cos", 1),
    "tan": Function("tan", 1),
    "log": Function("log", 2),
}


def operator_for(symbol: str) -> Operator | None:
    """Look up an operator by symbol; ``None`` means "not an operator"."""
    return _OPERATORS.get(symbol)


def function_for(name: str) -> Function | None:
    return _FUNCTIONS.get(name)


def function_names() -> tuple[str, ...]:
    return tuple(_FUNCTIONS)

"""Catalog of reference expressions and their expected outcomes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Literal


Outcome = Literal["value", "mismatched_parenthesis", "invalid_notation", "invalid_function"]


@dataclass(frozen=True)
class ReferenceCase:
    id: str
    group: str
    expr: str
    postfix: str | None
    expected: str | None
    outcome: Outcome
    note: str


CATALOG: Final[tuple[ReferenceCase, ...]] = (
    ReferenceCase(
        id="conversion_nested_groups",
        group="conversion",
        expr="((8*21)+89/14)^4",
        postfix="8 21 * 89 14 / + 4 ^",
        expected=None,
        outcome="value",
        note="fully parenthesized binary operators",
    ),
    ReferenceCase(
        id="conversion_right_assoc_power",
        group="conversion",
        expr="2^3^2",
        postfix="2 3 2 ^ ^",
        expected="512",
        outcome="value",
        note="^ is right-associative",
    ),
    ReferenceCase(
        id="conversion_left_assoc_minus",
        group="conversion",
        expr="2-3-4",
        postfix="2 3 - 4 -",
        expected="-5",
        outcome="value",
        note="- is left-associative",
    ),
    ReferenceCase(
        id="conversion_precedence",
        group="conversion",
        expr="1+2*3",
        postfix="1 2 3 * +",
        expected="7",
        outcome="value",
        note="* binds tighter than +",
    ),
    ReferenceCase(
        id="unary_after_operator",
        group="unary",
        expr="50 * -45",
        postfix="50 45 m *",
        expected="-2250",
        outcome="value",
        note="minus preceded by an operator is unary",
    ),
    ReferenceCase(
        id="unary_after_close_paren",
        group="unary",
        expr="(2+1)-4",
        postfix="2 1 + 4 -",
        expected="-1",
        outcome="value",
        note="minus preceded by ')' stays binary",
    ),
    ReferenceCase(
        id="unary_leading",
        group="unary",
        expr="-2*3",
        postfix="2 m 3 *",
        expected="-6",
        outcome="value",
        note="leading minus before a digit is unary",
    ),
    ReferenceCase(
        id="unary_plus",
        group="unary",
        expr="+5",
        postfix="5 p",
        expected="5",
        outcome="value",
        note="unary plus is the identity",
    ),
    ReferenceCase(
        id="unary_before_paren_is_binary",
        group="unary",
        expr="-(2)",
        postfix=None,
        expected=None,
        outcome="invalid_notation",
        note="one-character lookahead: a sign before '(' is binary and underflows",
    ),
    ReferenceCase(
        id="evaluation_single_precision_sum",
        group="evaluation",
        expr="0.1 + 0.2",
        postfix="0.1 0.2 +",
        expected="0.3",
        outcome="value",
        note="float32 rounding of the sum",
    ),
    ReferenceCase(
        id="evaluation_division_by_zero",
        group="evaluation",
        expr="1/0",
        postfix="1 0 /",
        expected="inf",
        outcome="value",
        note="IEEE division by zero is a value, not an error",
    ),
    ReferenceCase(
        id="functions_log_times_group",
        group="functions",
        expr="((2048 / 4) - 12) * log!100,10",
        postfix="2048 4 / 12 - log!100,10 *",
        expected="1000",
        outcome="value",
        note="log of 100 on base 10",
    ),
    ReferenceCase(
        id="functions_log_plus_sin",
        group="functions",
        expr="log!10,10 + sin!1",
        postfix="log!10,10 sin!1 +",
        expected="1.841471",
        outcome="value",
        note="two function calls reduced before the operator",
    ),
    ReferenceCase(
        id="functions_log_single_argument",
        group="functions",
        expr="log!100",
        postfix="log!100",
        expected=None,
        outcome="invalid_function",
        note="log takes a value and a base",
    ),
    ReferenceCase(
        id="functions_unknown_name",
        group="functions",
        expr="sqrt!4",
        postfix="sqrt!4",
        expected=None,
        outcome="invalid_function",
        note="only sin, cos, tan and log exist",
    ),
    ReferenceCase(
        id="functions_missing_call_mark",
        group="functions",
        expr="sin(1)",
        postfix=None,
        expected=None,
        outcome="invalid_function",
        note="functions are called as name!arg",
    ),
    ReferenceCase(
        id="functions_negative_argument",
        group="functions",
        expr="log!-10,10 / 1",
        postfix=None,
        expected=None,
        outcome="invalid_notation",
        note="arguments are literal unsigned numbers",
    ),
    ReferenceCase(
        id="functions_nested_argument",
        group="functions",
        expr="log!(2+3),10",
        postfix=None,
        expected=None,
        outcome="invalid_notation",
        note="sub-expressions are not accepted as arguments",
    ),
    ReferenceCase(
        id="errors_unclosed_paren",
        group="errors",
        expr="(5 + 5",
        postfix=None,
        expected=None,
        outcome="mismatched_parenthesis",
        note="open parenthesis never closed",
    ),
    ReferenceCase(
        id="errors_unopened_paren",
        group="errors",
        expr="5 + 5)",
        postfix=None,
        expected=None,
        outcome="mismatched_parenthesis",
        note="close parenthesis with no open one",
    ),
    ReferenceCase(
        id="errors_operator_run",
        group="errors",
        expr="50 **/ (-45)",
        postfix=None,
        expected=None,
        outcome="invalid_notation",
        note="consecutive binary operators",
    ),
    ReferenceCase(
        id="errors_operator_before_digit",
        group="errors",
        expr="928 / 2 +* 4",
        postfix=None,
        expected=None,
        outcome="invalid_notation",
        note="'*' in operand position cannot be unary",
    ),
    ReferenceCase(
        id="errors_trailing_operator",
        group="errors",
        expr="2 +",
        postfix=None,
        expected=None,
        outcome="invalid_notation",
        note="binary operator without a right operand",
    ),
    ReferenceCase(
        id="errors_empty",
        group="errors",
        expr="   ",
        postfix="",
        expected=None,
        outcome="invalid_notation",
        note="no value to return",
    ),
    ReferenceCase(
        id="errors_unknown_character",
        group="errors",
        expr="2 $ 3",
        postfix=None,
        expected=None,
        outcome="invalid_notation",
        note="characters outside the notation are rejected",
    ),
)

"""math-parser public API."""

__version__ = "0.2.0"

from .errors import InvalidFunction, InvalidNotation, MathParserError, MismatchedParenthesis
from .evaluator import Evaluation, evaluate, evaluate_postfix, postfix_cache_stats, try_evaluate
from .lexer import Token, resolve_unary, tokenize
from .operators import Function, Operator, function_for, operator_for
from .parser import infix_to_postfix, postfix_tokens
from .values import format_value, parse_value

__all__ = [
    "__version__",
    "evaluate",
    "try_evaluate",
    "evaluate_postfix",
    "infix_to_postfix",
    "postfix_tokens",
    "postfix_cache_stats",
    "resolve_unary",
    "tokenize",
    "Token",
    "Evaluation",
    "Operator",
    "Function",
    "operator_for",
    "function_for",
    "parse_value",
    "format_value",
    "MathParserError",
    "MismatchedParenthesis",
    "InvalidNotation",
    "InvalidFunction",
]

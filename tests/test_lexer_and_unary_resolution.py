from __future__ import annotations

import unittest

from math_parser.errors import InvalidFunction, InvalidNotation
from math_parser.lexer import resolve_unary, strip_whitespace, tokenize


class UnaryResolutionTests(unittest.TestCase):
    def test_sign_after_operator_before_digit_becomes_unary(self) -> None:
        self.assertEqual(resolve_unary("50*-45"), "50*m45")
        self.assertEqual(resolve_unary("2^+3"), "2^p3")
        self.assertEqual(resolve_unary("2--3"), "2-m3")

    def test_leading_sign_before_digit_becomes_unary(self) -> None:
        self.assertEqual(resolve_unary("-5"), "m5")
        self.assertEqual(resolve_unary("+5"), "p5")

    def test_sign_after_open_paren_becomes_unary(self) -> None:
        self.assertEqual(resolve_unary("(-45)"), "(m45)")

    def test_sign_after_digit_or_close_paren_stays_binary(self) -> None:
        for chars in ("2-3", "2+1-4", "(2+1)-4", "(2+1)-(2+1)"):
            with self.subTest(chars=chars):
                self.assertEqual(resolve_unary(chars), chars)

    def test_sign_not_followed_by_digit_stays_binary(self) -> None:
        # one character of lookahead only: these stay binary
        for chars in ("-(2)", "2*-(3)", "2--", "5-"):
            with self.subTest(chars=chars):
                self.assertEqual(resolve_unary(chars), chars)

    def test_triple_minus_only_rewrites_the_last_sign(self) -> None:
        self.assertEqual(resolve_unary("2---3"), "2--m3")

    def test_non_sign_operator_in_operand_position_is_invalid(self) -> None:
        for chars in ("2+*4", "*5", "(/5)", "2^^3"):
            with self.subTest(chars=chars):
                with self.assertRaises(InvalidNotation):
                    resolve_unary(chars)

    def test_empty_input(self) -> None:
        self.assertEqual(resolve_unary(""), "")


class TokenizerTests(unittest.TestCase):
    def _tokens(self, source: str, *, with_spans: bool = False):
        if with_spans:
            return [(tok.kind, tok.text, tok.pos, tok.end) for tok in tokenize(source)]
        return [(tok.kind, tok.text) for tok in tokenize(source)]

    def test_strip_whitespace_removes_all_whitespace(self) -> None:
        self.assertEqual(strip_whitespace(" 1 +\t2\n* 3 "), "1+2*3")

    def test_token_golden_with_spans(self) -> None:
        self.assertEqual(
            self._tokens("(12.5 + 3) * -4", with_spans=True),
            [
                ("LPAREN", "(", 0, 1),
                ("NUMBER", "12.5", 1, 5),
                ("OPERATOR", "+", 5, 6),
                ("NUMBER", "3", 6, 7),
                ("RPAREN", ")", 7, 8),
                ("OPERATOR", "*", 8, 9),
                ("UNARY", "m", 9, 10),
                ("NUMBER", "4", 10, 11),
            ],
        )

    def test_function_call_is_a_single_token(self) -> None:
        self.assertEqual(
            self._tokens("log!100,10 + sin!1"),
            [
                ("FUNCTION", "log!100,10"),
                ("OPERATOR", "+"),
                ("FUNCTION", "sin!1"),
            ],
        )

    def test_function_call_without_arguments_keeps_empty_argument_list(self) -> None:
        self.assertEqual(self._tokens("cos!"), [("FUNCTION", "cos!")])

    def test_whitespace_inside_number_joins_digits(self) -> None:
        self.assertEqual(self._tokens("1 2 + 3"), [("NUMBER", "12"), ("OPERATOR", "+"), ("NUMBER", "3")])

    def test_comma_and_point_are_number_characters(self) -> None:
        self.assertEqual(self._tokens("1,5"), [("NUMBER", "1,5")])
        self.assertEqual(self._tokens(".5"), [("NUMBER", ".5")])

    def test_all_binary_operators(self) -> None:
        for symbol in "+-*/^":
            with self.subTest(symbol=symbol):
                self.assertEqual(self._tokens(f"1{symbol}2")[1], ("OPERATOR", symbol))

    def test_name_without_call_mark_is_invalid_function(self) -> None:
        for source in ("sin(1)", "sin", "!5", "log 100"):
            with self.subTest(source=source):
                with self.assertRaises(InvalidFunction):
                    tokenize(source)

    def test_unexpected_character_is_invalid_notation(self) -> None:
        for source in ("2 $ 3", "1 % 2", "[1]"):
            with self.subTest(source=source):
                with self.assertRaises(InvalidNotation):
                    tokenize(source)

    def test_empty_source_has_no_tokens(self) -> None:
        self.assertEqual(tokenize("  \t "), [])


if __name__ == "__main__":
    unittest.main()

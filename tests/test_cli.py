from __future__ import annotations

import contextlib
import io
from pathlib import Path
import tempfile
import unittest
from unittest import mock

from math_parser import __version__
from math_parser.cli import build_parser, main, run_lines


def _run(argv: list[str]) -> tuple[int, str, str]:
    out = io.StringIO()
    err = io.StringIO()
    with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
        code = main(argv)
    return code, out.getvalue(), err.getvalue()


class InputStringTests(unittest.TestCase):
    def test_prints_result(self) -> None:
        code, out, _ = _run(["-s", "((2048/4)-12)*log!100,10"])
        self.assertEqual(code, 0)
        self.assertEqual(out, "1000\n")

    def test_debug_prints_trace_before_result(self) -> None:
        code, out, _ = _run(["-d", "-s", "50 * -45"])
        self.assertEqual(code, 0)
        self.assertEqual(out.splitlines(), ["NaN m 45 = -45", "50 * -45 = -2250", "-2250"])

    def test_error_message_and_exit_status(self) -> None:
        cases = {
            "(5 + 5": "Mismatched parenthesis",
            "928 / 2 +* 4": "Invalid notation",
            "log!100": "Invalid function",
        }
        for expr, message in cases.items():
            with self.subTest(expr=expr):
                code, out, _ = _run(["--input-string", expr])
                self.assertEqual(code, 1)
                self.assertEqual(out, message + "\n")


class InputFileTests(unittest.TestCase):
    def test_evaluates_file_content(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "expr.txt"
            path.write_text("log!10,10 + sin!1\n", encoding="utf-8")
            code, out, _ = _run(["-f", str(path)])
        self.assertEqual(code, 0)
        self.assertEqual(out, "1.841471\n")

    def test_missing_file_is_reported(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            missing = Path(tmpdir) / "nope.txt"
            code, out, err = _run(["--input-file", str(missing)])
        self.assertEqual(code, 1)
        self.assertEqual(out, "")
        self.assertTrue(err.startswith(f"Invalid file: {missing}"))


class InteractiveTests(unittest.TestCase):
    def test_stdin_lines_are_evaluated_in_order(self) -> None:
        stdin = io.StringIO("1+2\n\n(5 + 5\n2^3^2\n")
        with mock.patch("sys.stdin", stdin):
            code, out, _ = _run([])
        self.assertEqual(code, 0)
        self.assertEqual(out.splitlines(), ["3", "Mismatched parenthesis", "512"])

    def test_run_lines_counts_failures_and_skips_blanks(self) -> None:
        out = io.StringIO()
        failures = run_lines(["1+1", "   ", "2 $ 3", "\n", "sqrt!4"], debug=False, out=out)
        self.assertEqual(failures, 2)
        self.assertEqual(out.getvalue().splitlines(), ["2", "Invalid notation", "Invalid function"])

    def test_run_lines_with_debug_traces_each_line(self) -> None:
        out = io.StringIO()
        run_lines(["1+2", "cos!0"], debug=True, out=out)
        self.assertEqual(out.getvalue().splitlines(), ["1 + 2 = 3", "3", "cos 0 NaN = 1", "1"])


class ArgumentParserTests(unittest.TestCase):
    def test_string_and_file_are_mutually_exclusive(self) -> None:
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                build_parser().parse_args(["-s", "1", "-f", "x.txt"])
        self.assertEqual(ctx.exception.code, 2)

    def test_version_flag(self) -> None:
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            with self.assertRaises(SystemExit) as ctx:
                build_parser().parse_args(["--version"])
        self.assertEqual(ctx.exception.code, 0)
        self.assertIn(__version__, out.getvalue())

    def test_help_lists_functions(self) -> None:
        text = build_parser().format_help()
        for name in ("sin", "cos", "tan", "log"):
            with self.subTest(name=name):
                self.assertIn(name, text)


if __name__ == "__main__":
    unittest.main()

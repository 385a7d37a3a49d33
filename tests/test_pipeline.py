"""
FurryScript Pipeline Tests
==========================
End-to-end behavior of source → tokens → AST → output, plus the
example programs under examples/.

Usage:
    python -m pytest tests/test_pipeline.py -v
"""
import sys
import os
import unittest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from furryscript import (
    FurryScriptError, LexError, ParseError, RuntimeErrorKind, ScriptRuntimeError, run_source,
)


def _output(source: str) -> list[str]:
    out = []
    run_source(source, output_fn=out.append)
    return out


class TestLanguageProperties(unittest.TestCase):

    def test_integer_round_trip(self):
        for digits in ("0", "7", "42", "123456789012345678901234567890"):
            with self.subTest(digits=digits):
                self.assertEqual(_output(f"meow x = {digits}\npurr(x)"), [digits])

    def test_arithmetic_matches_host(self):
        cases = {
            "9 + 4": "13",
            "9 - 4": "5",
            "9 * 4": "36",
            "8 / 4": "2",
            "9 / 4": "2.25",
            "2 + 3 * 4": "14",
            "10 - 6 / 2": "7",
        }
        for expr, expected in cases.items():
            with self.subTest(expr=expr):
                self.assertEqual(_output(f"purr({expr})"), [expected])

    def test_unary_binds_to_primary(self):
        self.assertEqual(_output("purr(-2 + 3)\npurr(-(2 + 3))"), ["1", "-5"])

    def test_undeclared_identifier_halts(self):
        out = []
        with self.assertRaises(ScriptRuntimeError) as ctx:
            run_source('purr("one")\nmeow y = nope * 2\npurr("two")', output_fn=out.append)
        self.assertEqual(ctx.exception.kind, RuntimeErrorKind.UNDEFINED_VARIABLE)
        self.assertEqual(out, ["one"])

    def test_greeting_round_trip(self):
        source = 'meow greeting = "Hello, FurryScript!"\npurr(greeting)'
        self.assertEqual(_output(source), ["Hello, FurryScript!"])

    def test_escapes_decoded_once(self):
        self.assertEqual(_output(r'purr("back\\nslash")'), ["back\\nslash"])

    def test_redeclaration(self):
        self.assertEqual(_output("meow x = 1\nmeow x = 2\npurr(x)"), ["2"])

    def test_unterminated_string_is_tolerated(self):
        self.assertEqual(_output('meow s = "open ended'), [])
        with self.assertRaises(ParseError):
            # The string swallows the closing paren, so the print never closes.
            run_source('purr("open ended)', output_fn=lambda s: None)

    def test_statements_on_one_line(self):
        self.assertEqual(_output('meow a = 1 meow b = 2 purr(a + b)'), ["3"])

    def test_lex_error_prevents_execution(self):
        out = []
        with self.assertRaises(LexError):
            run_source('purr("hi")\npurr(1 ^ 2)', output_fn=out.append)
        self.assertEqual(out, [])

    def test_parse_error_prevents_execution(self):
        out = []
        with self.assertRaises(ParseError):
            run_source('purr("hi")\nmeow = 3', output_fn=out.append)
        self.assertEqual(out, [])

    def test_all_errors_share_a_base(self):
        for source in ("@", "meow", "purr(x)"):
            with self.subTest(source=source):
                with self.assertRaises(FurryScriptError):
                    run_source(source, output_fn=lambda s: None)


class TestExampleFiles(unittest.TestCase):
    """All example .fur files must lex, parse, and execute."""

    EXAMPLES_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "examples")

    def _run_example(self, filename: str) -> list[str]:
        filepath = os.path.join(self.EXAMPLES_DIR, filename)
        with open(filepath, "r", encoding="utf-8") as f:
            return _output(f.read())

    def test_hello(self):
        self.assertEqual(
            self._run_example("hello.fur"),
            ["Hello, FurryScript!", "This is pawsome!"],
        )

    def test_arithmetic(self):
        self.assertEqual(
            self._run_example("arithmetic.fur"),
            ["14", "1", "-5", "4.5", "3.0", "8"],
        )

    def test_tricks(self):
        self.assertEqual(
            self._run_example("tricks.fur"),
            ["Tricks are declared, not performed"],
        )


if __name__ == "__main__":
    unittest.main(verbosity=2)

"""
FurryScript REPL
================
Interactive Read-Eval-Print Loop. Bindings persist across lines.
"""
from .errors import FurryScriptError, LexError, ParseError
from .interpreter import Interpreter
from .lexer import tokenize
from .parser import parse
from .values import format_value

BANNER = r"""
  /\_/\   FurryScript REPL
 ( o.o )  Type :help for the language reference
  > ^ <   Type :exit or Ctrl+C to quit
"""

HELP_TEXT = """
  purr(expr)            print a value
  meow name = expr      declare or rebind a variable
  woof name             check that a variable exists
  trick f(a, b) { ... } declare a function (calls are not supported)
  + - * /  ( )          arithmetic, unary minus, grouping

Commands start with a colon so they never hide a variable:
  :help, :env, :clear, :exit (or :quit)
"""


def run_line(interp: Interpreter, line: str):
    """Lex, parse, and execute one line against a long-lived interpreter."""
    program = parse(tokenize(line))
    interp.execute(program)


def run_repl(input_fn=input, output_fn=print):
    """Run the interactive FurryScript REPL."""
    output_fn(BANNER)

    interp = Interpreter(output_fn=output_fn)

    while True:
        try:
            line = input_fn("  =^.^= ")
        except (EOFError, KeyboardInterrupt):
            output_fn("\n  Goodbye, nya.")
            break

        line = line.strip()
        if not line:
            continue

        command = line.lower()
        if command in (":exit", ":quit"):
            output_fn("  Goodbye, nya.")
            break

        if command == ":help":
            output_fn(HELP_TEXT)
            continue

        if command == ":env":
            if len(interp.env):
                output_fn("  ─── Bindings ───")
                for name, value in interp.env.items():
                    output_fn(f"    {name} = {format_value(value)}")
            else:
                output_fn("  (no bindings)")
            continue

        if command == ":clear":
            interp.env.clear()
            interp.functions.clear()
            output_fn("  State cleared.")
            continue

        try:
            run_line(interp, line)
        except LexError as e:
            output_fn(f"  Lex Error: {e.message}")
        except ParseError as e:
            output_fn(f"  Syntax Error: {e.message}")
        except FurryScriptError as e:
            output_fn(f"  Runtime Error: {e.message}")

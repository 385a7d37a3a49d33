"""
FurryScript Runner
==================
Runs FurryScript source strings and .fur files through the full
lex → parse → interpret pipeline.
"""
import logging
import os
from typing import Callable

from .config import RunConfig
from .errors import FurryScriptError
from .interpreter import Interpreter, interpret
from .lexer import tokenize
from .parser import parse

logger = logging.getLogger(__name__)

SAMPLE_CODE = """
meow greeting = "Hello, FurryScript!"
purr(greeting)
purr("This is pawsome!")
"""


def run_source(source: str, output_fn: Callable[[str], None] | None = None) -> Interpreter:
    """Lex, parse, and execute ``source``. Errors propagate to the caller."""
    tokens = tokenize(source)
    program = parse(tokens)
    return interpret(program, output_fn=output_fn)


def run_file(filepath: str, config: RunConfig | None = None,
             output_fn: Callable[[str], None] | None = None) -> int:
    """
    Execute a .fur source file.

    Args:
        filepath: Path to the .fur file
        config: Runner settings (extension check)
        output_fn: Receives each printed line; defaults to print

    Returns:
        0 on success, 1 on error
    """
    config = config or RunConfig()

    if config.require_extension and not filepath.endswith(config.extension):
        print(f"Error: FurryScript files must have a {config.extension} extension")
        return 1

    if not os.path.isfile(filepath):
        print(f"File not found: {filepath}")
        return 1

    try:
        with open(filepath, "r", encoding="utf-8") as f:
            source = f.read()
    except OSError as e:
        print(f"Error reading file: {e}")
        return 1

    logger.debug("Running %s", filepath)
    return run_guarded(source, output_fn=output_fn)


def run_guarded(source: str, output_fn: Callable[[str], None] | None = None) -> int:
    """Run ``source``, printing any FurryScript error. Returns an exit code."""
    try:
        run_source(source, output_fn=output_fn)
    except FurryScriptError as e:
        print(f"FurryScript Error: {e.message}")
        return 1
    return 0

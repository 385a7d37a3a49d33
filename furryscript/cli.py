"""
FurryScript CLI
===============
Command-line entry point.

Usage:
    furryscript                      # print usage and run the sample program
    furryscript hello.fur            # run a file
    furryscript --repl               # interactive session
    python -m furryscript hello.fur --verbose
"""
from __future__ import annotations

import argparse
import logging
import sys

from .config import RunConfig
from .repl import run_repl
from .runner import SAMPLE_CODE, run_file, run_guarded


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="furryscript",
        description="FurryScript interpreter",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  furryscript examples/hello.fur\n"
            "  furryscript --repl\n"
        ),
    )
    parser.add_argument("file", nargs="?", help="Path to a .fur source file")
    parser.add_argument("--repl", action="store_true", help="Start an interactive session")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument("--allow-any-extension", action="store_true",
                        help="Run files that do not end in .fur")
    parser.add_argument("--no-banner", action="store_true",
                        help="Skip the usage banner when running the sample program")
    return parser


def configure(args: argparse.Namespace) -> RunConfig:
    """Merge command-line flags over the environment configuration."""
    config = RunConfig.from_env()
    if args.verbose:
        config.log_level = "DEBUG"
    if args.allow_any_extension:
        config.require_extension = False
    if args.no_banner:
        config.show_banner = False
    return config


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    config = configure(args)

    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.repl:
        run_repl()
        return 0

    if args.file:
        return run_file(args.file, config)

    if config.show_banner:
        print("FurryScript Interpreter")
        print(f"Usage: furryscript <file{config.extension}>")
        print("\nRunning example code:")
    return run_guarded(SAMPLE_CODE)


if __name__ == "__main__":
    sys.exit(main())

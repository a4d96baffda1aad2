"""CLI application entry point and command routing for cli-call.

This module is the **sole error boundary** of the ``cli-call`` tool.
It catches :class:`~cli_call.exceptions.CliCallError`,
``KeyboardInterrupt`` and any unexpected ``Exception``, renders a
message on stderr and returns a well-defined exit code.

The library itself (:mod:`cli_call.core`) never prints and never exits.
"""

from __future__ import annotations

import argparse
import sys

from cli_call.cli import exit_codes
from cli_call.cli.console import console, escape
from cli_call.exceptions import CliCallError
from cli_call.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    * ``cli-call inspect [-s SHORT] [-l LONG]... [-e NAME]... [--stdin] -- ARGS...``
    * ``cli-call --version``
    """
    parser = argparse.ArgumentParser(
        prog="cli-call",
        description="Show how a command line is seen by cli_call.Invocation.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    commands = parser.add_subparsers(dest="command")

    inspect = commands.add_parser(
        "inspect",
        help="Parse ARGS as if they followed the script name and show the result.",
    )
    inspect.add_argument(
        "-s",
        "--short",
        dest="short_pattern",
        default=None,
        metavar="PATTERN",
        help="Short-option grammar, e.g. 'ah:v::'. Omit for raw mode.",
    )
    inspect.add_argument(
        "-l",
        "--long",
        dest="long_patterns",
        action="append",
        default=None,
        metavar="PATTERN",
        help="Long-option pattern, e.g. 'all::'. May be repeated.",
    )
    inspect.add_argument(
        "-e",
        "--env",
        dest="env_names",
        action="append",
        default=[],
        metavar="NAME",
        help="Environment variable to look up. May be repeated.",
    )
    inspect.add_argument(
        "--stdin",
        dest="include_stdin",
        action="store_true",
        help="Also read standard input (blocks until end-of-stream).",
    )
    inspect.add_argument(
        "call_args",
        nargs="*",
        metavar="ARGS",
        help="Arguments of the inspected call; put them after '--'.",
    )
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_inspect(args: argparse.Namespace) -> int:
    from cli_call.cli.report import run_inspect

    return run_inspect(
        args.call_args,
        short_pattern=args.short_pattern,
        long_patterns=args.long_patterns,
        env_names=args.env_names,
        include_stdin=args.include_stdin,
    )


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the cli-call tool.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    return _handle_inspect(args)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point."""
    try:
        code = main()
        sys.exit(code)
    except CliCallError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)

"""``cli-call inspect`` — show how a grammar reads a given call.

Builds an :class:`~cli_call.core.invocation.Invocation` over explicit
arguments and renders a Rich table with the script name, the mode,
every option value, selected environment variables, and optionally the
size of standard input.

Row collection is pure; only :func:`render_report` does output.
"""

from __future__ import annotations

from collections.abc import Sequence

from cli_call.cli import exit_codes
from cli_call.cli.console import console, escape, load_rich_table_class
from cli_call.core.invocation import Invocation
from cli_call.core.models import FLAG_PRESENT
from cli_call.infra.process import ProcessEnvironment, StandardInput

SCRIPT_NAME = "cli-call"
"""Argument zero of the synthetic call being inspected."""

Row = tuple[str, str, str]


class _ExplicitArguments:
    """Argument source over a fixed list."""

    def __init__(self, argv: Sequence[str]) -> None:
        self._argv = list(argv)

    def arguments(self) -> list[str]:
        return list(self._argv)


# ---------------------------------------------------------------------------
# Row collection
# ---------------------------------------------------------------------------

def format_value(value: object) -> str:
    """Render an option or environment value as Rich markup.

    Strings are quoted and escaped so brackets in them print verbatim.
    """
    if value is None:
        return "[dim]absent[/dim]"
    if value is FLAG_PRESENT:
        return "[green]present[/green]"
    if isinstance(value, tuple):
        return ", ".join(format_value(item) for item in value)
    return escape(repr(value))


def collect_rows(
    call: Invocation,
    env_names: Sequence[str] = (),
    *,
    include_stdin: bool = False,
) -> list[Row]:
    """Return (section, key, value) rows describing *call*."""
    rows: list[Row] = [
        ("call", "name", escape(repr(call.name()))),
        ("call", "mode", "parsed" if call.is_parsed() else "raw"),
    ]

    options = call.opt()
    if call.is_parsed():
        for key, value in options.items():  # type: ignore[union-attr]
            rows.append(("option", escape(key), format_value(value)))
        for index, operand in enumerate(call.rest()):
            rows.append(("operand", str(index), escape(repr(operand))))
    else:
        for index, arg in enumerate(options):  # type: ignore[arg-type]
            rows.append(("option", str(index), escape(repr(arg))))

    for name in env_names:
        rows.append(("env", escape(name), format_value(call.env(name))))

    if include_stdin:
        data = call.input()
        rows.append(("stdin", "length", str(len(data))))

    return rows


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def render_report(rows: Sequence[Row]) -> None:
    table_class = load_rich_table_class()
    table = table_class(
        title="cli-call inspect",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Section", style="bold", min_width=8)
    table.add_column("Key", min_width=8)
    table.add_column("Value", min_width=20)

    for section, key, value in rows:
        table.add_row(section, key, value)

    console.print()
    console.print(table)
    console.print()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_inspect(
    call_args: Sequence[str],
    *,
    short_pattern: str | None = None,
    long_patterns: Sequence[str] | None = None,
    env_names: Sequence[str] = (),
    include_stdin: bool = False,
) -> int:
    """Inspect a call made with *call_args* and render the report.

    Raises
    ------
    OptionGrammarError
        When a pattern is malformed.
    InputReadError
        When *include_stdin* is set and stdin cannot be read.
    """
    call = Invocation(
        short_pattern,
        long_patterns,
        arguments=_ExplicitArguments([SCRIPT_NAME, *call_args]),
        environment=ProcessEnvironment(),
        stdin=StandardInput(),
    )
    render_report(collect_rows(call, env_names, include_stdin=include_stdin))
    return exit_codes.SUCCESS

"""Permissive POSIX ``getopt``-style scanner.

Scanning rules
--------------
1. Stop at the first operand (a token not starting with ``-``, or a
   lone ``-``).  A lone ``--`` also stops scanning and is dropped.
2. Short flags may be bundled (``-ah``).  A value-taking short flag
   ends the bundle: the rest of the token is its value (a leading
   ``=`` is stripped).
3. A value-required flag with no attached value consumes the next
   token, whatever it looks like.  With nothing left it is skipped.
4. A value-optional flag only takes an attached value (``-hvalue``,
   ``--name=value``); otherwise it is recorded as :data:`FLAG_PRESENT`.
5. Unknown flags are skipped silently.
6. A repeated flag accumulates its values into a tuple.

Pure — no I/O, never raises for user input.
"""

from __future__ import annotations

from collections.abc import Sequence

from cli_call.core.models import (
    FLAG_PRESENT,
    Arity,
    OptionGrammar,
    OptionValue,
    ParsedOptions,
)


def _record(values: dict[str, OptionValue], name: str, value: str | bool) -> None:
    """Store *value* under *name*, turning repeats into a tuple."""
    if name not in values:
        values[name] = value
        return
    previous = values[name]
    if isinstance(previous, tuple):
        values[name] = (*previous, value)
    else:
        values[name] = (previous, value)


# ---------------------------------------------------------------------------
# Token handlers — each consumes from the front of ``rargs``
# ---------------------------------------------------------------------------

def _scan_long(
    rargs: list[str],
    grammar: OptionGrammar,
    values: dict[str, OptionValue],
) -> None:
    arg = rargs.pop(0)
    name, sep, attached = arg[2:].partition("=")
    rule = grammar.long.get(name)
    if rule is None:
        return

    if rule.arity is Arity.NONE:
        _record(values, name, FLAG_PRESENT)
    elif sep:
        _record(values, name, attached)
    elif rule.arity is Arity.REQUIRED:
        if rargs:
            _record(values, name, rargs.pop(0))
    else:
        _record(values, name, FLAG_PRESENT)


def _scan_short_cluster(
    rargs: list[str],
    grammar: OptionGrammar,
    values: dict[str, OptionValue],
) -> None:
    arg = rargs.pop(0)
    i = 1
    while i < len(arg):
        name = arg[i]
        i += 1
        rule = grammar.short.get(name)
        if rule is None:
            continue
        if not rule.takes_value:
            _record(values, name, FLAG_PRESENT)
            continue

        remainder = arg[i:]
        if remainder.startswith("="):
            remainder = remainder[1:]
        if i < len(arg):
            _record(values, name, remainder)
        elif rule.arity is Arity.REQUIRED:
            if rargs:
                _record(values, name, rargs.pop(0))
        else:
            _record(values, name, FLAG_PRESENT)
        # A value-taking flag always ends the cluster.
        return


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def scan(args: Sequence[str], grammar: OptionGrammar) -> ParsedOptions:
    """Scan *args* (without the script name) against *grammar*."""
    rargs = list(args)
    values: dict[str, OptionValue] = {}

    while rargs:
        arg = rargs[0]
        if arg == "--":
            del rargs[0]
            break
        if arg.startswith("--"):
            _scan_long(rargs, grammar, values)
        elif arg.startswith("-") and len(arg) > 1:
            _scan_short_cluster(rargs, grammar, values)
        else:
            break

    return ParsedOptions(values=values, rest=tuple(rargs))

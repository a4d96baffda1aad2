"""Compile getopt-style option patterns into an :class:`OptionGrammar`.

Pattern syntax
--------------
* Short: a string of flag characters, each optionally followed by
  ``:`` (value required) or ``::`` (value optional), e.g. ``"ah:v::"``.
* Long: a sequence of names using the same suffixes, e.g.
  ``["all", "hight:", "verbose::"]``.

Pure functions only — no I/O.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from cli_call.core.models import Arity, OptionGrammar, OptionRule
from cli_call.exceptions import OptionGrammarError

_ARITY_BY_COLONS: dict[int, Arity] = {
    0: Arity.NONE,
    1: Arity.REQUIRED,
    2: Arity.OPTIONAL,
}

_FORBIDDEN_SHORT: frozenset[str] = frozenset("-=")


def parse_short_pattern(pattern: str) -> dict[str, OptionRule]:
    """Return short-flag rules keyed by flag character."""
    rules: dict[str, OptionRule] = {}
    i = 0
    while i < len(pattern):
        name = pattern[i]
        if name == ":":
            raise OptionGrammarError(
                f"Short option pattern {pattern!r} has ':' without a flag "
                f"at position {i}.",
                hint="Write the flag character first, e.g. 'h:' or 'h::'.",
            )
        if name in _FORBIDDEN_SHORT or name.isspace():
            raise OptionGrammarError(
                f"Short option pattern {pattern!r} declares invalid flag {name!r}.",
            )
        i += 1
        colons = 0
        while i < len(pattern) and pattern[i] == ":" and colons < 2:
            colons += 1
            i += 1
        rules[name] = OptionRule(name, _ARITY_BY_COLONS[colons])
    return rules


def parse_long_pattern(pattern: str) -> OptionRule:
    """Return the rule declared by a single long pattern such as ``"all::"``."""
    name = pattern.rstrip(":")
    colons = len(pattern) - len(name)
    if not name:
        raise OptionGrammarError(
            f"Long option pattern {pattern!r} has no name.",
        )
    if colons > 2:
        raise OptionGrammarError(
            f"Long option pattern {pattern!r} has {colons} trailing colons.",
            hint="Use 'name:' for a required value or 'name::' for an optional one.",
        )
    if (
        name.startswith("-")
        or "=" in name
        or ":" in name
        or any(ch.isspace() for ch in name)
    ):
        raise OptionGrammarError(
            f"Long option pattern {pattern!r} declares invalid name {name!r}.",
            hint="Declare the bare name without leading dashes, e.g. 'all'.",
        )
    return OptionRule(name, _ARITY_BY_COLONS[colons])


def parse_long_patterns(patterns: Iterable[str] | None) -> dict[str, OptionRule]:
    """Return long-flag rules keyed by name; ``None`` declares none."""
    rules: dict[str, OptionRule] = {}
    if patterns is None:
        return rules
    if isinstance(patterns, str):
        raise OptionGrammarError(
            f"Long option patterns must be a sequence of names, got {patterns!r}.",
            hint=f"Wrap a single pattern in a list: [{patterns!r}].",
        )
    for pattern in patterns:
        rule = parse_long_pattern(pattern)
        rules[rule.name] = rule
    return rules


def compile_grammar(
    short_pattern: str,
    long_patterns: Sequence[str] | None = None,
) -> OptionGrammar:
    """Compile both pattern forms into one :class:`OptionGrammar`.

    Raises
    ------
    OptionGrammarError
        When either pattern is malformed.
    """
    return OptionGrammar(
        short=parse_short_pattern(short_pattern),
        long=parse_long_patterns(long_patterns),
    )

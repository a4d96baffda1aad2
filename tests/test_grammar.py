"""Tests for option pattern compilation (core/grammar.py)."""

from __future__ import annotations

import pytest

from cli_call.core.grammar import compile_grammar, parse_long_pattern, parse_short_pattern
from cli_call.core.models import Arity
from cli_call.exceptions import CliCallError, OptionGrammarError


class TestShortPattern:
    def test_arity_suffixes(self) -> None:
        rules = parse_short_pattern("ah:v::")
        assert rules["a"].arity is Arity.NONE
        assert rules["h"].arity is Arity.REQUIRED
        assert rules["v"].arity is Arity.OPTIONAL

    def test_empty_pattern_declares_nothing(self) -> None:
        assert parse_short_pattern("") == {}

    def test_takes_value(self) -> None:
        rules = parse_short_pattern("ah:")
        assert rules["a"].takes_value is False
        assert rules["h"].takes_value is True

    def test_redeclaration_last_wins(self) -> None:
        assert parse_short_pattern("h:h")["h"].arity is Arity.NONE

    @pytest.mark.parametrize("pattern", [":a", "a:::", "a-b", "a b", "a="])
    def test_malformed(self, pattern: str) -> None:
        with pytest.raises(OptionGrammarError):
            parse_short_pattern(pattern)

    def test_leading_colon_has_hint(self) -> None:
        with pytest.raises(OptionGrammarError) as exc_info:
            parse_short_pattern(":a")
        assert exc_info.value.hint is not None


class TestLongPattern:
    @pytest.mark.parametrize(
        ("pattern", "name", "arity"),
        [
            ("action", "action", Arity.NONE),
            ("action:", "action", Arity.REQUIRED),
            ("action::", "action", Arity.OPTIONAL),
        ],
    )
    def test_arity_suffixes(self, pattern: str, name: str, arity: Arity) -> None:
        rule = parse_long_pattern(pattern)
        assert rule.name == name
        assert rule.arity is arity

    @pytest.mark.parametrize("pattern", ["", ":", "all:::", "--all", "a=b", "a:b", "a b"])
    def test_malformed(self, pattern: str) -> None:
        with pytest.raises(OptionGrammarError):
            parse_long_pattern(pattern)


class TestCompileGrammar:
    def test_missing_long_patterns_is_empty_set(self) -> None:
        grammar = compile_grammar("a")
        assert dict(grammar.long) == {}
        assert set(grammar.short) == {"a"}

    def test_long_patterns_compiled(self) -> None:
        grammar = compile_grammar("", ["all::", "hight"])
        assert grammar.long["all"].arity is Arity.OPTIONAL
        assert grammar.long["hight"].arity is Arity.NONE

    def test_bare_string_long_patterns_rejected(self) -> None:
        with pytest.raises(OptionGrammarError, match="sequence"):
            compile_grammar("a", "all")  # type: ignore[arg-type]

    def test_error_is_a_cli_call_error_and_value_error(self) -> None:
        with pytest.raises(CliCallError):
            compile_grammar(":")
        with pytest.raises(ValueError):
            compile_grammar(":")

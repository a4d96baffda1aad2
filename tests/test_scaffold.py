"""Smoke tests — package wiring, exception hierarchy, exit codes."""

from __future__ import annotations

import pytest

import cli_call
from cli_call import __version__
from cli_call.cli import exit_codes
from cli_call.exceptions import (
    CliCallError,
    EnvironmentError,
    InputError,
    InputReadError,
    InputTimeoutError,
    OptionGrammarError,
)


class TestVersion:
    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


class TestPublicApi:
    def test_exports(self) -> None:
        assert cli_call.FLAG_PRESENT is True
        assert callable(cli_call.from_process)
        assert cli_call.Invocation.__name__ == "Invocation"


class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [OptionGrammarError, InputError, InputReadError, InputTimeoutError, EnvironmentError],
    )
    def test_all_exceptions_inherit_from_base(self, exc_class: type[CliCallError]) -> None:
        assert issubclass(exc_class, CliCallError)

    def test_input_errors_share_a_base(self) -> None:
        assert issubclass(InputReadError, InputError)
        assert issubclass(InputTimeoutError, InputError)

    def test_hint_is_stored(self) -> None:
        err = CliCallError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        assert CliCallError("boom").hint is None


class TestExitCodes:
    def test_values(self) -> None:
        assert exit_codes.SUCCESS == 0
        assert exit_codes.GENERAL_ERROR == 1
        assert exit_codes.UNEXPECTED_ERROR == 2
        assert exit_codes.KEYBOARD_INTERRUPT == 130

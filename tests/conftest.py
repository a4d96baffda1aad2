"""Shared pytest fixtures for the cli-call test suite.

Guidelines
----------
* No test reads the real stdin, argv or environment through the core;
  in-memory sources are injected instead.
* ``infra`` tests monkeypatch ``sys`` / ``os`` directly.
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Mapping, Sequence

import pytest

from cli_call.core.invocation import Invocation


class FakeArguments:
    def __init__(self, argv: Sequence[str]) -> None:
        self._argv = list(argv)

    def arguments(self) -> list[str]:
        return list(self._argv)


class FakeEnvironment:
    def __init__(self, values: Mapping[str, str] | None = None) -> None:
        self._values = dict(values or {})

    def lookup(self, name: str) -> str | None:
        return self._values.get(name)


class OnceStream:
    """Input source that fails loudly if it is read a second time."""

    def __init__(self, data: str = "") -> None:
        self.data = data
        self.reads = 0

    def read(self) -> str:
        self.reads += 1
        if self.reads > 1:
            raise AssertionError("stream drained twice")
        return self.data


class GatedStream:
    """Input source that blocks until :meth:`release` is called."""

    def __init__(self, data: str = "") -> None:
        self.data = data
        self.reads = 0
        self.started = threading.Event()
        self._gate = threading.Event()

    def release(self) -> None:
        self._gate.set()

    def read(self) -> str:
        self.reads += 1
        self.started.set()
        self._gate.wait(5)
        return self.data


MakeCall = Callable[..., Invocation]


@pytest.fixture()
def make_call() -> MakeCall:
    """Factory building an :class:`Invocation` over in-memory sources."""

    def _make(
        argv: Sequence[str],
        short_pattern: str | None = None,
        long_patterns: Sequence[str] | None = None,
        *,
        env: Mapping[str, str] | None = None,
        stdin: object | None = None,
    ) -> Invocation:
        return Invocation(
            short_pattern,
            long_patterns,
            arguments=FakeArguments(argv),
            environment=FakeEnvironment(env),
            stdin=stdin if stdin is not None else OnceStream(),  # type: ignore[arg-type]
        )

    return _make

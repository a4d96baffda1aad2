"""Process-backed implementations of the core protocols.

Each adapter is a one-line pass-through to the platform primitive; the
values are looked up at call time so tests can monkeypatch ``sys`` and
``os`` freely.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence

from cli_call.core.invocation import Invocation


class ProcessArguments:
    """:class:`~cli_call.core.protocols.ArgumentSource` over ``sys.argv``."""

    def arguments(self) -> list[str]:
        return list(sys.argv)


class ProcessEnvironment:
    """:class:`~cli_call.core.protocols.EnvironmentSource` over ``os.environ``."""

    def lookup(self, name: str) -> str | None:
        return os.environ.get(name)


class StandardInput:
    """:class:`~cli_call.core.protocols.InputSource` over ``sys.stdin``.

    ``sys.stdin`` is ``None`` under ``pythonw`` and some service
    managers; that reads as an empty stream.
    """

    def read(self) -> str:
        stream = sys.stdin
        if stream is None:
            return ""
        return stream.read()


def from_process(
    short_pattern: str | None = None,
    long_patterns: Sequence[str] | None = None,
) -> Invocation:
    """Build the :class:`Invocation` of the running process.

    Usage::

        call = from_process("a:h", ["all::"])
        call.opt("a")
    """
    return Invocation(
        short_pattern,
        long_patterns,
        arguments=ProcessArguments(),
        environment=ProcessEnvironment(),
        stdin=StandardInput(),
    )

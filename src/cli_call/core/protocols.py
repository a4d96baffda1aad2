"""Protocols (interfaces) consumed by the core layer.

:class:`~cli_call.core.invocation.Invocation` reads the process
arguments, the environment, and standard input only through these
contracts.  The real adapters live in :mod:`cli_call.infra.process`;
tests pass in-memory fakes.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol


class ArgumentSource(Protocol):
    """Supplies the full argument vector of the process."""

    def arguments(self) -> Sequence[str]:
        """Return every invocation string, the script path first."""
        ...  # pragma: no cover


class EnvironmentSource(Protocol):
    """By-name lookup into the environment store."""

    def lookup(self, name: str) -> str | None:
        """Return the value of *name*, or ``None`` when it is unset.

        A variable set to the empty string must come back as ``""``.
        """
        ...  # pragma: no cover


class InputSource(Protocol):
    """A text stream that can be drained once."""

    def read(self) -> str:
        """Block until end-of-stream and return everything read.

        Implementations may raise ``OSError`` (or any other exception);
        the caller wraps it as :class:`~cli_call.exceptions.InputReadError`.
        """
        ...  # pragma: no cover

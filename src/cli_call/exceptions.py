"""Custom exception hierarchy for cli-call.

All exceptions raised by this package inherit from
:class:`CliCallError`.  Absence of an option or an environment variable
is **not** an error and never raises; it is reported as ``None``.

Hierarchy
---------
CliCallError
├── OptionGrammarError
├── InputError
│   ├── InputReadError
│   └── InputTimeoutError
└── EnvironmentError
"""

from __future__ import annotations


class CliCallError(Exception):
    """Base exception for all cli-call errors.

    The CLI error boundary renders the message and, when present, the
    hint without a stack trace.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Option grammar --------------------------------------------------------

class OptionGrammarError(CliCallError, ValueError):
    """Raised when a short or long option pattern cannot be compiled."""


# --- Standard input --------------------------------------------------------

class InputError(CliCallError):
    """Base class for standard-input failures."""


class InputReadError(InputError):
    """Raised when draining standard input fails."""


class InputTimeoutError(InputError, TimeoutError):
    """Raised when standard input did not reach end-of-stream in time."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(CliCallError):
    """Raised when an optional runtime dependency is not available."""

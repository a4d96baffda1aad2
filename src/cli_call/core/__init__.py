"""Core layer — option grammar, getopt scanning, and the invocation object.

Rules
-----
* No ``print()`` calls.
* No direct access to ``sys.argv``, ``os.environ`` or ``sys.stdin``.
* No imports from ``cli`` or ``infra``.
"""

from cli_call.core.grammar import compile_grammar
from cli_call.core.getopt import scan
from cli_call.core.invocation import Invocation
from cli_call.core.models import (
    FLAG_PRESENT,
    Arity,
    OptionGrammar,
    OptionRule,
    ParsedOptions,
    RawOptions,
)
from cli_call.core.protocols import ArgumentSource, EnvironmentSource, InputSource

__all__: list[str] = [
    "FLAG_PRESENT",
    "ArgumentSource",
    "Arity",
    "EnvironmentSource",
    "InputSource",
    "Invocation",
    "OptionGrammar",
    "OptionRule",
    "ParsedOptions",
    "RawOptions",
    "compile_grammar",
    "scan",
]

"""The :class:`Invocation` object — one per program run.

An invocation captures how the current program was called:

* the script name (argument zero),
* its options, either raw (no grammar declared) or getopt-parsed,
* environment lookup,
* standard input, read lazily and cached.

Platform access goes through the protocols in
:mod:`cli_call.core.protocols`; nothing here touches ``sys`` or ``os``.
"""

from __future__ import annotations

import threading
from collections.abc import Mapping, Sequence

from cli_call.core.getopt import scan
from cli_call.core.grammar import compile_grammar
from cli_call.core.models import OptionStore, OptionValue, ParsedOptions, RawOptions
from cli_call.core.protocols import ArgumentSource, EnvironmentSource, InputSource
from cli_call.exceptions import InputReadError, InputTimeoutError


class Invocation:
    """Script name, options, environment and stdin of a single call.

    Parameters
    ----------
    short_pattern:
        Short-option grammar such as ``"ah:v::"``.  When ``None`` the
        options are kept raw: every argument after the script name, in
        order, addressed by index.  When given (even ``""``) they are
        parsed and addressed by flag name.
    long_patterns:
        Long-option grammar such as ``["all::", "hight:"]``.  Ignored in
        raw mode; ``None`` declares no long options.
    arguments, environment, stdin:
        Platform services, see :mod:`cli_call.core.protocols`.

    Raises
    ------
    OptionGrammarError
        When a pattern is malformed.

    Example::

        call = Invocation("a::h", ["all::", "hight"], arguments=..., ...)
        if call.opt("h") is FLAG_PRESENT:
            ...
    """

    def __init__(
        self,
        short_pattern: str | None = None,
        long_patterns: Sequence[str] | None = None,
        *,
        arguments: ArgumentSource,
        environment: EnvironmentSource,
        stdin: InputSource,
    ) -> None:
        argv = list(arguments.arguments())
        self._script_name: str = argv[0] if argv else ""

        self._options: OptionStore
        if short_pattern is None:
            self._options = RawOptions(tuple(argv[1:]))
        else:
            grammar = compile_grammar(short_pattern, long_patterns)
            self._options = scan(argv[1:], grammar)

        self._environment: EnvironmentSource = environment
        self._stdin: InputSource = stdin

        # Uninitialized -> Reading -> Cached | Failed, once.
        self._input_lock = threading.Lock()
        self._input_done = threading.Event()
        self._input_reader: threading.Thread | None = None
        self._input: str | None = None
        self._input_error: InputReadError | None = None

    def __repr__(self) -> str:
        mode = "parsed" if self.is_parsed() else "raw"
        return f"Invocation(name={self._script_name!r}, mode={mode}, options={self.opt()!r})"

    # ------------------------------------------------------------------
    # Script name and options
    # ------------------------------------------------------------------

    def name(self) -> str:
        """Return the script path exactly as the program was called."""
        return self._script_name

    def is_parsed(self) -> bool:
        """``True`` when a grammar was declared at construction."""
        return isinstance(self._options, ParsedOptions)

    def opt(
        self, key: int | str | None = None,
    ) -> OptionValue | tuple[str, ...] | Mapping[str, OptionValue] | None:
        """Return one option, or all of them when *key* is ``None``.

        In raw mode *key* is an index into the arguments after the
        script name; in parsed mode it is a short or long flag name.
        A flag given without a value comes back as
        :data:`~cli_call.core.models.FLAG_PRESENT`, a repeated flag as a
        tuple.  Anything not given is ``None`` — never an exception.

        Without a key, a read-only view is returned: a ``tuple`` in raw
        mode, a ``MappingProxyType`` in parsed mode.
        """
        if key is None:
            return self._options.view()
        return self._options.get(key)

    def rest(self) -> tuple[str, ...]:
        """Return the operands that follow the options.

        In parsed mode these are the arguments left once scanning
        stopped (first operand or ``--``).  In raw mode nothing is
        scanned, so every argument is an operand.
        """
        if isinstance(self._options, ParsedOptions):
            return self._options.rest
        return self._options.args

    # ------------------------------------------------------------------
    # Environment
    # ------------------------------------------------------------------

    def env(self, name: str) -> str | None:
        """Return environment variable *name*, ``None`` when unset.

        A variable set to ``""`` is returned as ``""``.
        """
        return self._environment.lookup(name)

    # ------------------------------------------------------------------
    # Standard input
    # ------------------------------------------------------------------

    def input(self, timeout: float | None = None) -> str:
        """Return the whole of standard input as one string.

        The first call drains the stream and caches the result; later
        calls return the cached string and never touch the stream.
        Concurrent first calls share a single read.

        .. warning::
           The read blocks until end-of-stream.  On an interactive
           terminal with no data pending this never returns unless the
           user sends EOF.  Redirect or close stdin where that is not
           acceptable, or pass *timeout*.

        Parameters
        ----------
        timeout:
            Seconds to wait for end-of-stream.  ``None`` waits forever.
            On expiry the read keeps going in the background, so a later
            call can still pick up the result.

        Raises
        ------
        InputTimeoutError
            When *timeout* expired before end-of-stream.
        InputReadError
            When the stream failed, or the reader ended without a
            result; the same error is raised on every later call.
        """
        if not self._input_done.is_set():
            with self._input_lock:
                if self._input_reader is None:
                    self._input_reader = threading.Thread(
                        target=self._drain_input,
                        name="cli-call-stdin",
                        daemon=True,
                    )
                    self._input_reader.start()
            if not self._input_done.wait(timeout):
                raise InputTimeoutError(
                    f"Standard input did not reach end-of-stream within {timeout}s.",
                    hint="Redirect stdin from a file or pipe, or close it.",
                )

        if self._input_error is not None:
            raise self._input_error
        if self._input is None:
            raise InputReadError(
                "Standard input reader stopped without producing a result.",
            )
        return self._input

    def _drain_input(self) -> None:
        try:
            self._input = self._stdin.read()
        except Exception as exc:
            error = InputReadError(f"Failed to read standard input: {exc}")
            error.__cause__ = exc
            self._input_error = error
        finally:
            self._input_done.set()

"""Domain models for cli-call.

Everything here is an immutable value object with no I/O.  The option
store is a tagged variant: :class:`RawOptions` when no grammar was
declared, :class:`ParsedOptions` when one was.  Both answer the same
read interface (``get`` / ``view``) so :class:`~cli_call.core.invocation.Invocation`
never has to branch on the mode.
"""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

FLAG_PRESENT: bool = True
"""Value stored for a flag that was given without a value."""

OptionValue = str | bool | tuple[str | bool, ...]
"""A parsed option value: a string, :data:`FLAG_PRESENT`, or a tuple of
those when the flag was repeated."""


# ---------------------------------------------------------------------------
# Grammar
# ---------------------------------------------------------------------------

class Arity(enum.Enum):
    """How many values a declared flag accepts."""

    NONE = ""
    REQUIRED = ":"
    OPTIONAL = "::"


@dataclass(frozen=True, slots=True)
class OptionRule:
    """One declared flag (short or long)."""

    name: str
    arity: Arity = Arity.NONE

    @property
    def takes_value(self) -> bool:
        return self.arity is not Arity.NONE


@dataclass(frozen=True, slots=True)
class OptionGrammar:
    """Compiled short and long option declarations, keyed by name."""

    short: Mapping[str, OptionRule] = field(default_factory=dict)
    long: Mapping[str, OptionRule] = field(default_factory=dict)


# ---------------------------------------------------------------------------
# Option store — raw mode
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class RawOptions:
    """Arguments after the script name, unparsed and index-addressable."""

    args: tuple[str, ...] = ()

    def get(self, key: object) -> str | None:
        """Return the argument at index *key*, or ``None``.

        Anything that is not a non-negative in-range ``int`` is absent;
        ``bool`` is rejected even though it subclasses ``int``.
        """
        if not isinstance(key, int) or isinstance(key, bool):
            return None
        if 0 <= key < len(self.args):
            return self.args[key]
        return None

    def view(self) -> tuple[str, ...]:
        return self.args

    def __len__(self) -> int:
        return len(self.args)


# ---------------------------------------------------------------------------
# Option store — parsed mode
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ParsedOptions:
    """Flags recognised by the grammar, keyed by short or long name.

    Attributes
    ----------
    values : Mapping[str, OptionValue]
        Read-only mapping; a flag that was not given has no key.
    rest : tuple[str, ...]
        Operands left over once scanning stopped.
    """

    values: Mapping[str, OptionValue] = field(default_factory=dict)
    rest: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.values, MappingProxyType):
            object.__setattr__(self, "values", MappingProxyType(dict(self.values)))

    def get(self, key: object) -> OptionValue | None:
        if not isinstance(key, str):
            return None
        return self.values.get(key)

    def view(self) -> Mapping[str, OptionValue]:
        return self.values

    def __len__(self) -> int:
        return len(self.values)


OptionStore = RawOptions | ParsedOptions

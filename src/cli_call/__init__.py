"""cli-call — one object describing how the current program was called.

Exposes the script name, command-line options (raw or getopt-parsed),
environment lookup, and lazily read standard input.
"""

from cli_call.core.invocation import Invocation
from cli_call.core.models import FLAG_PRESENT
from cli_call.infra.process import from_process
from cli_call.version import __version__

__all__: list[str] = [
    "FLAG_PRESENT",
    "Invocation",
    "__version__",
    "from_process",
]

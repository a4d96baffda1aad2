"""Infrastructure layer — adapters over the running process.

This is the only layer that reads ``sys.argv``, ``os.environ`` and
``sys.stdin``.

Rules
-----
* No imports from ``cli``.
* No user-facing output.
"""

from cli_call.infra.process import (
    ProcessArguments,
    ProcessEnvironment,
    StandardInput,
    from_process,
)

__all__: list[str] = [
    "ProcessArguments",
    "ProcessEnvironment",
    "StandardInput",
    "from_process",
]

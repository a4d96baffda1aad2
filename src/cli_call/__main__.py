"""Allow ``python -m cli_call`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m cli_call`` behaves identically to the ``cli-call``
console script.
"""

from __future__ import annotations

from cli_call.cli.app import cli

if __name__ == "__main__":
    cli()

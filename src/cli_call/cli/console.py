"""CLI console helpers with optional Rich support.

Rich is imported lazily so bootstrap paths (``--help``, ``--version``)
never pay for it and keep working when it is missing.
"""

from __future__ import annotations

import sys
from typing import Any

from cli_call.exceptions import EnvironmentError

_RICH_HINT = "Install with: pip install rich"


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError("rich is not installed.", hint=_RICH_HINT) from exc
	return Console


def load_rich_table_class() -> type[Any]:
	"""Return ``rich.table.Table`` class or raise ``EnvironmentError``."""
	try:
		from rich.table import Table
	except ModuleNotFoundError as exc:
		raise EnvironmentError("rich is not installed.", hint=_RICH_HINT) from exc
	return Table


def get_rich_console() -> Any:
	"""Create a Rich console instance targeting stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=True)


def escape(text: str) -> str:
	"""Escape *text* so Rich prints it verbatim instead of as markup.

	Without Rich nothing interprets markup, so the text is returned as is.
	"""
	try:
		from rich.markup import escape as rich_escape
	except ModuleNotFoundError:
		return text
	return rich_escape(text)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(*objects, file=sys.stderr)
			return
		rich_console.print(*objects)


console = _ConsoleProxy()

"""CLI console helpers with optional Rich support.

This module avoids module-level imports of optional UI dependencies so
that ``--help``, ``--version`` and plain encoding keep working when
Rich is not installed.
"""

from __future__ import annotations

import re
import sys
from typing import Any

from password_encoder.exceptions import EnvironmentError

_MARKUP_TAG = re.compile(r"(?<!\\)\[/?[a-z ]+\]")


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console() -> Any:
	"""Create a Rich console instance targeting stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=True, highlight=False)


def escape(text: str) -> str:
	"""Escape *text* so that square brackets are printed literally."""
	return text.replace("[", "\\[")


def strip_markup(text: str) -> str:
	"""Remove simple Rich style tags such as ``[bold red]`` from *text*.

	Escaped brackets produced by :func:`escape` are restored.
	"""
	return _MARKUP_TAG.sub("", text).replace("\\[", "[")


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(
				*(strip_markup(o) if isinstance(o, str) else o for o in objects),
				file=sys.stderr,
			)
			return
		rich_console.print(*objects)


console = _ConsoleProxy()

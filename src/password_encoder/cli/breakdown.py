"""Per-letter rotation breakdown for ``--explain``.

Renders how each letter of the message was shifted, e.g.::

    #  Letter  Shift  Encoded
    1    h       3       k
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import Any

from password_encoder.cli.console import console
from password_encoder.core.models import RotationStep
from password_encoder.exceptions import EnvironmentError


def _import_rich_table() -> type[Any]:
    """Import rich table lazily for breakdown rendering."""
    try:
        from rich.table import Table
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Table


def format_step(step: RotationStep) -> str:
    """Single-line description: ``"h" (shift 3) = "k"``."""
    return f'"{step.letter}" (shift {step.rotation}) = "{step.encoded}"'


def _print_plain_breakdown(steps: Sequence[RotationStep]) -> None:
    """Render the breakdown without Rich."""
    for step in steps:
        print(f"{step.position + 1:>3}. {format_step(step)}", file=sys.stderr)


def display_breakdown(steps: Sequence[RotationStep]) -> None:
    """Print a table of every encoded position to stderr."""
    try:
        table_class = _import_rich_table()
    except EnvironmentError:
        _print_plain_breakdown(steps)
        return

    table = table_class(
        title="Rotation breakdown",
        show_header=True,
        header_style="bold magenta",
        border_style="dim",
    )
    table.add_column("#", justify="right", style="dim", width=4)
    table.add_column("Letter", justify="center")
    table.add_column("Shift", justify="right")
    table.add_column("Encoded", justify="center", style="bold green")

    for step in steps:
        table.add_row(
            str(step.position + 1),
            step.letter,
            str(step.rotation),
            step.encoded,
        )

    console.print()
    console.print(table)
    console.print()

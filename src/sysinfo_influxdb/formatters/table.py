"""Table formatter for human-readable output."""

from __future__ import annotations

from collections.abc import Sequence

from ..series import Series, Value
from .base import BaseFormatter


def _cell(value: Value) -> str:
    if isinstance(value, float):
        return f"{value:.2f}"
    return str(value)


def _table_row(cells: Sequence[str], widths: Sequence[int]) -> str:
    padded = (f"{c:>{w}}" for c, w in zip(cells, widths))
    return "| " + " | ".join(padded) + " |"


class TableFormatter(BaseFormatter):
    """Format each series as a numbered, pipe-separated table.

    Example::

        #1: host01.load
        |  one | five | fifteen |
        | 0.42 | 0.37 |    0.30 |
    """

    def format(self, series: Sequence[Series]) -> str:
        lines: list[str] = []

        for index, s in enumerate(series):
            cells = [[_cell(v) for v in row] for row in s.rows]
            widths = [
                max([len(col)] + [len(r[i]) for r in cells])
                for i, col in enumerate(s.columns)
            ]

            lines.append("")
            lines.append(f"#{index}: {s.name}")
            lines.append(_table_row(s.columns, widths))
            for row in cells:
                lines.append(_table_row(row, widths))

        return "\n".join(lines)

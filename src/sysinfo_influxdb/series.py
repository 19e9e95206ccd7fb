"""Series data model shared by collectors, formatters and the sink."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

Value = int | float | str


def series_name(prefix: str, base: str) -> str:
    """Join *prefix* and *base* with a dot, or return *base* when prefix is empty."""
    if prefix:
        return f"{prefix}.{base}"
    return base


@dataclass(frozen=True, slots=True)
class Series:
    """A named table of columns and rows for one metric category.

    Lists given for ``columns`` or ``rows`` are frozen into tuples, so a
    constructed series cannot change under the reporter.
    """

    name: str
    columns: tuple[str, ...]
    rows: tuple[tuple[Value, ...], ...] = ()

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("series name must not be empty")

        columns = tuple(self.columns)
        rows = tuple(tuple(row) for row in self.rows)
        for i, row in enumerate(rows):
            if len(row) != len(columns):
                raise ValueError(
                    f"series {self.name!r}: row {i} has {len(row)} values, "
                    f"expected {len(columns)}"
                )

        object.__setattr__(self, "columns", columns)
        object.__setattr__(self, "rows", rows)

    def as_dicts(self) -> list[dict[str, Any]]:
        """Return each row as a column -> value mapping."""
        return [dict(zip(self.columns, row)) for row in self.rows]

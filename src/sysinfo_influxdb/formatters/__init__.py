"""Output formatters."""

from __future__ import annotations

from .base import BaseFormatter
from .json_fmt import JsonFormatter
from .table import TableFormatter

__all__ = [
    "FORMATS",
    "BaseFormatter",
    "JsonFormatter",
    "TableFormatter",
    "get_formatter",
]

FORMATS: dict[str, type[BaseFormatter]] = {
    "table": TableFormatter,
    "json": JsonFormatter,
}


def get_formatter(fmt: str) -> BaseFormatter:
    """Get formatter by name."""
    if fmt not in FORMATS:
        raise ValueError(f"Unknown format: {fmt}. Available: {', '.join(FORMATS.keys())}")

    return FORMATS[fmt]()

"""JSON formatter."""

from __future__ import annotations

import json
from collections.abc import Sequence

from ..series import Series
from .base import BaseFormatter


class JsonFormatter(BaseFormatter):
    """Format series as a JSON list of ``{name, columns, points}`` objects."""

    def format(self, series: Sequence[Series]) -> str:
        payload = [
            {
                "name": s.name,
                "columns": list(s.columns),
                "points": [list(row) for row in s.rows],
            }
            for s in series
        ]
        return json.dumps(payload, ensure_ascii=False, indent=2)

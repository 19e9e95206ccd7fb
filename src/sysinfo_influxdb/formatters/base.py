"""Base formatter interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from ..series import Series


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    @abstractmethod
    def format(self, series: Sequence[Series]) -> str:
        """Format collected series to string."""
        ...

"""Base collector interface."""

from __future__ import annotations

from abc import ABC, abstractmethod

import psutil

from ..errors import CollectionError
from ..series import Series

# Failures the OS provider can raise for an unavailable subsystem.
_PROVIDER_ERRORS = (OSError, psutil.Error, RuntimeError, ValueError)


class BaseCollector(ABC):
    """Abstract base class for all metric collectors."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Metric category, also the base of the series name."""
        ...

    def collect(self, prefix: str = "") -> Series | list[Series]:
        """Query the OS and return the shaped series.

        Raises:
            CollectionError: the provider failed; nothing partial is returned.
        """
        try:
            return self._query(prefix)
        except CollectionError:
            raise
        except _PROVIDER_ERRORS as e:
            raise CollectionError(self.name, e) from e

    @abstractmethod
    def _query(self, prefix: str) -> Series | list[Series]:
        ...

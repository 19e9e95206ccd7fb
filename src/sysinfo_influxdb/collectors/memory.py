"""Memory and swap metrics collectors."""

from __future__ import annotations

import psutil

from ..series import Series, series_name
from .base import BaseCollector

MEM_COLUMNS = ("free", "used", "actualfree", "actualused", "total")
SWAP_COLUMNS = ("free", "used", "total")


class MemoryCollector(BaseCollector):
    """Collect physical memory usage in bytes.

    ``used`` counts page cache as used memory; ``actualused`` does not,
    and ``actualfree`` is what the kernel considers available.
    """

    @property
    def name(self) -> str:
        return "mem"

    def _query(self, prefix: str) -> Series:
        vm = psutil.virtual_memory()
        total = int(vm.total)
        free = int(vm.free)
        available = int(vm.available)

        row = (free, total - free, available, total - available, total)
        return Series(series_name(prefix, self.name), MEM_COLUMNS, [row])


class SwapCollector(BaseCollector):
    """Collect swap usage in bytes."""

    @property
    def name(self) -> str:
        return "swap"

    def _query(self, prefix: str) -> Series:
        sm = psutil.swap_memory()
        row = (int(sm.free), int(sm.used), int(sm.total))
        return Series(series_name(prefix, self.name), SWAP_COLUMNS, [row])

"""CPU metrics collector."""

from __future__ import annotations

from typing import Any

import psutil

from ..series import Series, Value, series_name
from .base import BaseCollector

CPU_COLUMNS = ("id", "user", "nice", "sys", "idle", "wait", "total")


def _cpu_row(cpu_id: str, times: Any) -> tuple[Value, ...]:
    """Shape one psutil ``scputimes`` into a cpu row.

    Fields a platform does not report (nice, iowait, irq, ...) count as 0.
    """
    user = float(times.user)
    nice = float(getattr(times, "nice", 0.0))
    sys = float(times.system)
    idle = float(times.idle)
    wait = float(getattr(times, "iowait", 0.0))

    # Total CPU time also includes interrupt and stolen time.
    extra = sum(float(getattr(times, f, 0.0)) for f in ("irq", "softirq", "steal"))
    total = user + nice + sys + idle + wait + extra

    return (cpu_id, user, nice, sys, idle, wait, total)


class CPUCollector(BaseCollector):
    """Collect cumulative CPU times, aggregate first and then per logical CPU."""

    @property
    def name(self) -> str:
        return "cpu"

    def _query(self, prefix: str) -> Series:
        rows = [_cpu_row("cpu", psutil.cpu_times())]
        for i, times in enumerate(psutil.cpu_times(percpu=True)):
            rows.append(_cpu_row(f"cpu{i}", times))

        return Series(series_name(prefix, self.name), CPU_COLUMNS, rows)

"""
sysinfo_influxdb

One-shot host metrics collector: samples CPU, memory, swap, uptime, load
and network counters, and prints them or writes them to InfluxDB.
"""

from __future__ import annotations

from .core import collect_series
from .reporter import report
from .series import Series

__all__ = ["Series", "__version__", "collect_series", "report"]

__version__ = "0.1.0"

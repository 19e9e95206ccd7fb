"""Uptime and load average collectors."""

from __future__ import annotations

import time

import psutil

from ..series import Series, series_name
from .base import BaseCollector

UPTIME_COLUMNS = ("length",)
LOAD_COLUMNS = ("one", "five", "fifteen")


class UptimeCollector(BaseCollector):
    """Collect seconds elapsed since boot."""

    @property
    def name(self) -> str:
        return "uptime"

    def _query(self, prefix: str) -> Series:
        uptime_seconds = max(0.0, time.time() - float(psutil.boot_time()))
        return Series(series_name(prefix, self.name), UPTIME_COLUMNS, [(uptime_seconds,)])


class LoadCollector(BaseCollector):
    """Collect the 1, 5 and 15 minute load averages."""

    @property
    def name(self) -> str:
        return "load"

    def _query(self, prefix: str) -> Series:
        one, five, fifteen = psutil.getloadavg()
        row = (float(one), float(five), float(fifteen))
        return Series(series_name(prefix, self.name), LOAD_COLUMNS, [row])

"""System metrics collectors."""

from __future__ import annotations

from .base import BaseCollector
from .cpu import CPUCollector
from .memory import MemoryCollector, SwapCollector
from .network import NetworkCollector
from .system import LoadCollector, UptimeCollector

__all__ = [
    "BaseCollector",
    "CPUCollector",
    "LoadCollector",
    "MemoryCollector",
    "NetworkCollector",
    "SwapCollector",
    "UptimeCollector",
]

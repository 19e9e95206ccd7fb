"""Core series collection logic."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .collectors import (
    CPUCollector,
    LoadCollector,
    MemoryCollector,
    NetworkCollector,
    SwapCollector,
    UptimeCollector,
)
from .collectors.base import BaseCollector
from .errors import CollectionError
from .series import Series

log = logging.getLogger(__name__)


def default_collectors() -> list[BaseCollector]:
    """Return one instance of every collector, in reporting order."""
    return [
        CPUCollector(),
        MemoryCollector(),
        SwapCollector(),
        UptimeCollector(),
        LoadCollector(),
        NetworkCollector(),
    ]


def collect_series(
    prefix: str = "",
    collectors: Sequence[BaseCollector] | None = None,
) -> list[Series]:
    """Run every collector once and accumulate their series.

    A failing collector is logged and skipped; the others still run.

    Args:
        prefix: Label prepended to every series name (usually the host name)
        collectors: Collectors to run (default: ``default_collectors()``)

    Returns:
        Series in collector order, network interfaces in discovery order
    """
    if collectors is None:
        collectors = default_collectors()

    data: list[Series] = []

    for collector in collectors:
        try:
            result = collector.collect(prefix)
        except CollectionError as e:
            log.warning("collection_failed: %s", e, extra={"category": e.category})
            continue

        if isinstance(result, Series):
            data.append(result)
        else:
            data.extend(result)

    log.debug("collected %d series", len(data))
    return data

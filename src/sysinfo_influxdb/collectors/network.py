"""Network interface counters collector.

Reads the kernel's per-interface table (``/proc/net/dev`` on Linux)::

    Inter-|   Receive                            |  Transmit
     face |bytes    packets errs drop fifo frame compressed multicast|bytes ...
      eth0: 1234567    8901    0    0    0     0          0         0  7654321 ...

Every line with a ``label:`` part becomes one single-row series named after
the interface. Header lines have no colon and are skipped.
"""

from __future__ import annotations

import logging

from ..errors import ParseError, SourceUnavailableError
from ..series import Series, series_name
from .base import BaseCollector

log = logging.getLogger(__name__)

PROC_NET_DEV = "/proc/net/dev"

NETWORK_COLUMNS = (
    "recv_bytes",
    "recv_packets",
    "recv_errs",
    "recv_drop",
    "recv_fifo",
    "recv_frame",
    "recv_compressed",
    "recv_multicast",
    "trans_bytes",
    "trans_packets",
    "trans_errs",
    "trans_drop",
    "trans_fifo",
    "trans_colls",
    "trans_carrier",
    "trans_compressed",
)


def parse_counter(token: str) -> int:
    """Parse one counter token: ASCII digits with an optional sign.

    Raises:
        ParseError: the token is not an integer.
    """
    digits = token[1:] if token[:1] in ("+", "-") else token
    if not (digits.isascii() and digits.isdigit()):
        raise ParseError(token)
    return int(token)


def parse_iface_line(prefix: str, line: str) -> Series | None:
    """Parse one line of the interface table into a series, or None.

    Unparseable counters and missing trailing counters are reported as 0.
    """
    label, sep, data = line.partition(":")
    if not sep:
        return None

    iface = label.strip()
    if not iface:
        return None

    tokens = data.split()
    row = [0] * len(NETWORK_COLUMNS)
    for i in range(min(len(NETWORK_COLUMNS), len(tokens))):
        try:
            row[i] = parse_counter(tokens[i])
        except ParseError as e:
            log.debug(
                "counter_zero_filled: %s %s: %s",
                iface,
                NETWORK_COLUMNS[i],
                e,
                extra={"series": iface},
            )

    if len(tokens) < len(NETWORK_COLUMNS):
        log.debug(
            "short_counter_line: %s has %d of %d fields",
            iface,
            len(tokens),
            len(NETWORK_COLUMNS),
            extra={"series": iface},
        )

    return Series(series_name(prefix, iface), NETWORK_COLUMNS, [row])


class NetworkCollector(BaseCollector):
    """Collect per-interface network counters, one series per interface."""

    def __init__(self, path: str = PROC_NET_DEV) -> None:
        self.path = path

    @property
    def name(self) -> str:
        return "network"

    def _query(self, prefix: str) -> list[Series]:
        try:
            fh = open(self.path, encoding="utf-8")
        except OSError as e:
            raise SourceUnavailableError(self.name, e, path=self.path) from e

        series: list[Series] = []
        with fh:
            for line in fh:
                s = parse_iface_line(prefix, line)
                if s is not None:
                    series.append(s)

        return series

"""Fan collected series out to the text view and/or the sink."""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Sequence

from .formatters import get_formatter
from .series import Series
from .sink import InfluxSink, SinkConfig

log = logging.getLogger(__name__)


def _write_text(text: str, output_file: str | None) -> None:
    if output_file:
        with open(output_file, "a", encoding="utf-8") as f:
            f.write(text + "\n")
    else:
        sys.stdout.write(text + "\n")
        sys.stdout.flush()


def report(
    series: Sequence[Series],
    sink: SinkConfig | None = None,
    verbose: bool = False,
    *,
    fmt: str = "table",
    output: str | None = None,
    connect: Callable[[SinkConfig], InfluxSink] = InfluxSink.connect,
) -> None:
    """Render and/or write the collected series.

    Text is rendered when no sink is configured or when *verbose* is set.
    A failure to render is logged and does not prevent the sink write.
    The sink gets the whole list in one write; when there is nothing to
    write (every collector failed) the sink is not contacted at all.

    Raises:
        SinkError: connecting to or writing to the sink failed. Any text
            view has already been written by then.
    """
    if sink is None or verbose:
        try:
            _write_text(get_formatter(fmt).format(series), output)
        except OSError as e:
            log.error("render_failed: %s", e, extra={"code": type(e).__name__})

    if sink is None:
        log.debug("no database configured, sink skipped")
        return

    if not series:
        log.warning("no series collected, sink skipped", extra={"sink": sink.host})
        return

    with connect(sink) as client:
        client.write(series)

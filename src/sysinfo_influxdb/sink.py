"""InfluxDB sink.

Writes through the InfluxDB 1.8+ compatibility API: the token is
``username:password`` and the bucket is the database name.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import UTC, datetime
from types import TracebackType

from influxdb_client import InfluxDBClient, Point
from influxdb_client.client.write_api import SYNCHRONOUS
from influxdb_client.rest import ApiException
from urllib3.exceptions import HTTPError

from .errors import SinkConnectError, SinkWriteError
from .series import Series

log = logging.getLogger(__name__)

_TRANSPORT_ERRORS = (ApiException, HTTPError, OSError)


@dataclass(frozen=True, slots=True)
class SinkConfig:
    host: str
    username: str
    password: str
    database: str

    @property
    def url(self) -> str:
        if "://" in self.host:
            return self.host
        return f"http://{self.host}"


def to_points(series: Sequence[Series], ts: datetime | None = None) -> list[Point]:
    """Convert series rows to points sharing one timestamp.

    String values become tags, numeric values become fields.
    """
    ts = ts or datetime.now(UTC)
    points: list[Point] = []

    for s in series:
        for row in s.as_dicts():
            point = Point(s.name).time(ts)
            for column, value in row.items():
                if isinstance(value, str):
                    point = point.tag(column, value)
                else:
                    point = point.field(column, value)
            points.append(point)

    return points


class InfluxSink:
    """Batch writer for series, one synchronous write per call."""

    def __init__(self, client: InfluxDBClient, config: SinkConfig) -> None:
        self.client = client
        self.config = config

    @classmethod
    def connect(cls, config: SinkConfig) -> InfluxSink:
        """Open a client and check the server answers.

        Raises:
            SinkConnectError: the server cannot be reached.
        """
        client = InfluxDBClient(
            url=config.url,
            token=f"{config.username}:{config.password}",
            org="-",
        )
        try:
            alive = client.ping()
        except _TRANSPORT_ERRORS as e:
            client.close()
            raise SinkConnectError(config.host, str(e)) from e

        if not alive:
            client.close()
            raise SinkConnectError(config.host, "server did not answer ping")

        log.debug("connected", extra={"sink": config.host})
        return cls(client, config)

    def write(self, series: Sequence[Series]) -> None:
        """Write every series in one batch.

        Raises:
            SinkWriteError: the server rejected the batch or the transport failed.
        """
        points = to_points(series)
        if not points:
            return

        write_api = self.client.write_api(write_options=SYNCHRONOUS)
        try:
            write_api.write(bucket=self.config.database, record=points)
        except _TRANSPORT_ERRORS as e:
            raise SinkWriteError(self.config.host, str(e)) from e
        finally:
            write_api.close()

        log.info(
            "written %d points from %d series",
            len(points),
            len(series),
            extra={"sink": self.config.host},
        )

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> InfluxSink:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

from __future__ import annotations

from dataclasses import dataclass


class SysinfoError(Exception):
    """Base class for every error raised by sysinfo_influxdb."""


@dataclass(eq=False)
class CollectionError(SysinfoError):
    """A collector could not query its OS subsystem.

    No partial series is produced when this is raised.
    """

    category: str
    cause: BaseException | None = None

    def __str__(self) -> str:
        if self.cause is None:
            return f"{self.category}: collection failed"
        return f"{self.category}: {self.cause}"


@dataclass(eq=False)
class SourceUnavailableError(CollectionError):
    """The network counter source could not be opened."""

    path: str = ""

    def __str__(self) -> str:
        return f"{self.category}: cannot open {self.path}: {self.cause}"


@dataclass(eq=False)
class ParseError(SysinfoError):
    """A single counter token is not an integer."""

    token: str

    def __str__(self) -> str:
        return f"invalid counter {self.token!r}"


@dataclass(eq=False)
class SinkError(SysinfoError):
    """The time-series store could not be reached or refused the batch."""

    host: str
    message: str

    def __str__(self) -> str:
        return f"{self.host}: {self.message}"


class SinkConnectError(SinkError):
    pass


class SinkWriteError(SinkError):
    pass

from __future__ import annotations

import argparse
import os
import socket
from dataclasses import dataclass, field

from .sink import SinkConfig


def _get_str(name: str, default: str) -> str:
    return os.getenv(name, default)


def _get_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw not in {"", "0", "false", "False"}


def _default_prefix() -> str:
    return _get_str("SYSINFO_PREFIX", socket.gethostname())


@dataclass(frozen=True, slots=True)
class Settings:
    prefix: str = field(default_factory=_default_prefix)
    verbose: bool = field(default_factory=lambda: _get_bool("SYSINFO_VERBOSE", False))

    # InfluxDB connection
    host: str = field(default_factory=lambda: _get_str("INFLUXDB_HOST", "localhost:8086"))
    username: str = field(default_factory=lambda: _get_str("INFLUXDB_USERNAME", "root"))
    password: str = field(default_factory=lambda: _get_str("INFLUXDB_PASSWORD", "root"))
    database: str = field(default_factory=lambda: _get_str("INFLUXDB_DATABASE", ""))

    # Text view
    format: str = "table"
    output: str | None = None

    @property
    def sink(self) -> SinkConfig | None:
        """Sink settings, or None when no database is configured."""
        if not self.database:
            return None
        return SinkConfig(
            host=self.host,
            username=self.username,
            password=self.password,
            database=self.database,
        )

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> Settings:
        """Build settings from parsed flags; unset flags keep env/defaults."""
        overrides = {
            name: getattr(args, name)
            for name in ("prefix", "host", "username", "password", "database", "format", "output")
            if getattr(args, name, None) is not None
        }
        if getattr(args, "verbose", False):
            overrides["verbose"] = True
        return cls(**overrides)

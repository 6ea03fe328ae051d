"""Configuration file of the audio daemon."""

from __future__ import annotations

import copy
import tomllib
from dataclasses import dataclass, field
from typing import Any

__all__ = [
    "DEFAULT_CONFIG_FILE",
    "BluetoothSourceConfig",
    "AirplaySourceConfig",
    "TcpSinkConfig",
    "PipelineConfig",
    "DaemonConfig",
]

DEFAULT_CONFIG_FILE = "/etc/cornrowd.conf"


@dataclass
class BluetoothSourceConfig:
    """Settings of the Bluetooth audio source."""


@dataclass
class AirplaySourceConfig:
    """Settings of the AirPlay audio source."""

    name: str = "myAirplay"
    port: int = 0
    buffer_time_ms: int = 2000


@dataclass
class TcpSinkConfig:
    """Settings of the TCP client audio sink."""

    host: str = "127.0.0.1"
    port: int = 4953


@dataclass
class PipelineConfig:
    """Which sources and sinks the audio pipeline is built with."""

    bluetooth_config: BluetoothSourceConfig | None = None
    airplay_config: AirplaySourceConfig | None = None
    tcp_config: TcpSinkConfig | None = None


def _section(document: dict[str, Any], name: str) -> dict[str, Any]:
    value = document.get(name)
    return value if isinstance(value, dict) else {}


def _str_or(section: dict[str, Any], key: str, default: str) -> str:
    value = section.get(key)
    return value if isinstance(value, str) else default


def _int_or(section: dict[str, Any], key: str, default: int) -> int:
    value = section.get(key)
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return default


class DaemonConfig:
    """Reads the pipeline layout from a TOML file.

    A section that is present enables its source or sink; keys that are
    missing or of the wrong type take their defaults.
    """

    def __init__(self, config_file: str | None = None) -> None:
        self.config_file = config_file or DEFAULT_CONFIG_FILE
        self._pipeline_config = PipelineConfig()

    def parse(self) -> None:
        """Read the file; a missing or malformed file leaves the configuration unchanged."""
        try:
            with open(self.config_file, "rb") as handle:
                document = tomllib.load(handle)
        except (OSError, ValueError):
            return

        config = self._pipeline_config

        if "bluetooth_source" in document:
            config.bluetooth_config = BluetoothSourceConfig()

        if "airplay_source" in document:
            section = _section(document, "airplay_source")
            config.airplay_config = AirplaySourceConfig(
                name=_str_or(section, "name", "myAirplay"),
                port=_int_or(section, "port", 0),
                buffer_time_ms=_int_or(section, "buffer_time", 2000),
            )

        if "tcp_sink" in document:
            section = _section(document, "tcp_sink")
            config.tcp_config = TcpSinkConfig(
                host=_str_or(section, "host", "127.0.0.1"),
                port=_int_or(section, "port", 4953),
            )

    def pipeline_config(self) -> PipelineConfig:
        """A copy of the parsed pipeline configuration."""
        return copy.deepcopy(self._pipeline_config)
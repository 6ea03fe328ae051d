"""Control-application limits for filter parameters."""

from __future__ import annotations

from enum import IntEnum

from .types import FREQUENCY_TABLE, Q_TABLE

__all__ = ["ConfigType", "AppConfig"]


class ConfigType(IntEnum):
    """Resolution level of the editable parameters."""

    LOW = 0
    MID = 1
    HIGH = 2


class AppConfig:
    """Ranges and step sizes the user interface offers for filters.

    Frequencies and qualities are indices into the frequency and q tables.
    """

    def __init__(self, config_type: ConfigType = ConfigType.LOW) -> None:
        self.config_type = ConfigType(config_type)

        self.peq_filter_count = 5
        self.freq_table: tuple[float, ...] = FREQUENCY_TABLE
        self.freq_default = 144
        self.freq_min = 8
        self.freq_max = 248
        self.freq_step = 8
        self.gain_min = -12.0
        self.gain_max = 3.0
        self.gain_step = 1.0
        self.q_default = 34
        self.q_min = 16
        self.q_max = 64
        self.q_step = 2

        self.io_available = False
        self.loudness_available = True
        self.xo_available = False
        self.sw_available = False
        self.sc_available = False

        if self.config_type == ConfigType.MID:
            self.freq_step = 4
            self.gain_min = -24.0
            self.gain_max = 6.0
            self.gain_step = 0.5
            self.q_min = 12
            self.q_max = 80
        elif self.config_type == ConfigType.HIGH:
            self.freq_step = 2
            self.gain_min = -48.0
            self.gain_max = 12.0
            self.gain_step = 0.5
            self.q_min = 0
            self.q_max = len(Q_TABLE) - 1
            self.q_step = 1

    def plot_frequencies(self) -> list[float]:
        """Frequencies from the minimum to the maximum index, one per step."""
        return list(self.freq_table[self.freq_min : self.freq_max + 1 : self.freq_step])
"""Collection of response plots, one per filter band."""

from __future__ import annotations

from .appconfig import AppConfig
from .plot import Plot
from .types import FREQUENCY_TABLE, Filter, FilterType

__all__ = ["BodePlotModel"]


class BodePlotModel:
    """Keeps a plot per filter band at the frequencies the config displays."""

    def __init__(self, config: AppConfig) -> None:
        self._freq_table = config.plot_frequencies()
        self._plots: list[Plot] = []
        self._f = 0

    def set_filter(
        self, index: int, filter_type: int, freq_index: int, gain: float, q: float
    ) -> None:
        """Set the filter of band ``index``, adding plots up to that band as needed.

        ``freq_index`` indexes the full frequency table.
        """
        if index < 0:
            raise IndexError(f"band index {index} is negative")
        if not 0 <= freq_index < len(FREQUENCY_TABLE):
            raise IndexError(f"frequency index {freq_index} out of range")

        self._f = freq_index
        while len(self._plots) <= index:
            self._plots.append(Plot(self._freq_table))

        plot = self._plots[index]
        plot.set_frequency_index(freq_index)
        plot.set_filter(Filter(FilterType(filter_type), FREQUENCY_TABLE[freq_index], gain, q))

    def plots(self) -> list[Plot]:
        """The plots, one per band that has been set."""
        return self._plots
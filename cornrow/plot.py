"""Magnitude and phase response curves of a single filter."""

from __future__ import annotations

import cmath
import math
from collections.abc import Sequence

from .biquad import compute_biquad
from .types import Filter, FilterType

__all__ = ["Plot"]

_RESPONSE_RATE = 44100

_LINEAR_TYPES = frozenset(
    {
        FilterType.PEAK,
        FilterType.LOW_PASS,
        FilterType.HIGH_PASS,
        FilterType.LOW_SHELF,
        FilterType.HIGH_SHELF,
        FilterType.ALL_PASS,
    }
)

_CROSSOVER_TYPES = frozenset(
    {FilterType.CROSSOVER_LR2, FilterType.CROSSOVER_LR4, FilterType.SUBWOOFER}
)


def _db(level: float) -> float:
    if level <= 0.0:
        return -math.inf
    return 20.0 * math.log10(level)


class Plot:
    """Response curves of one filter, sampled at the frequencies of a table.

    Each curve is a list of y values; the x value of a point is its index.
    """

    def __init__(self, freq_table: Sequence[float]) -> None:
        self._freq_table = tuple(freq_table)
        size = len(self._freq_table)
        self._f = 0
        self._mags: list[list[float]] = []
        self._phases: list[list[float]] = []
        self._mag_sum = [0.0] * size
        self._phase_sum = [0.0] * size

    def set_filter(self, filter: Filter) -> None:
        """Recompute the curves for ``filter``."""
        t = filter.type
        if t == FilterType.INVALID:
            self._mags = []
            self._phases = []
        elif t in _LINEAR_TYPES:
            mags, phases = self._response(filter)
            self._mags = [mags]
            self._phases = [phases]
        elif t == FilterType.LOUDNESS:
            self._set_loudness(filter.g)
        elif t in _CROSSOVER_TYPES:
            self._set_crossover(filter)
        else:
            raise ValueError(f"unknown filter type {t!r}")

    def set_frequency_index(self, index: int) -> None:
        """Set the index from which the summed phase follows the high branch."""
        self._f = index

    def mags(self) -> list[list[float]]:
        """Magnitude curves in dB."""
        return self._mags

    def mag_sum(self) -> list[float]:
        """Combined magnitude curve in dB; empty when there is no curve."""
        if not self._mags:
            return []
        if len(self._mags) == 1:
            return self._mags[0]
        return self._mag_sum

    def phases(self) -> list[list[float]]:
        """Phase curves in radians."""
        return self._phases

    def phase_sum(self) -> list[float]:
        """Combined phase curve in radians; empty when there is no curve."""
        if not self._phases:
            return []
        if len(self._phases) == 1:
            return self._phases[0]
        return self._phase_sum

    def _set_loudness(self, gain: float) -> None:
        parts = [
            self._response(Filter(FilterType.PEAK, 35.5, gain * 0.3, 0.56)),
            self._response(Filter(FilterType.PEAK, 100.0, gain * 0.225, 0.25)),
            self._response(Filter(FilterType.HIGH_SHELF, 10000.0, gain * 0.225, 0.80)),
        ]
        volume = gain * -0.425
        self._mag_sum = [sum(values) + volume for values in zip(*(m for m, _ in parts))]
        self._phase_sum = [sum(values) for values in zip(*(p for _, p in parts))]
        self._mags = [list(self._mag_sum)]
        self._phases = [list(self._phase_sum)]

    def _set_crossover(self, filter: Filter) -> None:
        cascade = filter.type == FilterType.CROSSOVER_LR4

        low_gain = -filter.g if filter.g > 0.0 else 0.0
        low = self._branch(FilterType.LOW_PASS, filter, low_gain, cascade)
        high_gain = filter.g if filter.g < 0.0 else 0.0
        high = self._branch(FilterType.HIGH_PASS, filter, high_gain, cascade)

        self._mags = [low[0], high[0]]
        self._phases = [low[1], high[1]]
        self._mag_sum = [
            _db(sum(10 ** (level / 20.0) for level in levels)) for levels in zip(*self._mags)
        ]
        low_phases, high_phases = self._phases
        self._phase_sum = [
            high_phases[i] if i >= self._f else low_phases[i] for i in range(len(low_phases))
        ]

    def _branch(
        self, kind: FilterType, filter: Filter, gain: float, cascade: bool
    ) -> tuple[list[float], list[float]]:
        mags, phases = self._response(Filter(kind, filter.f, gain, filter.q))
        if cascade:
            mags = [m * 2 for m in mags]
            phases = [p * 2 for p in phases]
        if gain < 0.0:
            mags = [m + gain for m in mags]
        return mags, phases

    def _response(self, filter: Filter) -> tuple[list[float], list[float]]:
        biquad = compute_biquad(_RESPONSE_RATE, filter)
        mags: list[float] = []
        phases: list[float] = []
        for freq in self._freq_table:
            z = cmath.exp(1j * 2.0 * math.pi * freq / _RESPONSE_RATE)
            numerator = biquad.b0 + (biquad.b1 + biquad.b2 * z) * z
            denominator = 1.0 + (biquad.a1 + biquad.a2 * z) * z
            res = numerator / denominator
            mags.append(_db(abs(res)))
            phases.append(math.atan2(res.imag, res.real))
        return mags, phases
"""Editing state of the filter bands shown by the control application."""

from __future__ import annotations

import logging
import struct
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

from .appconfig import AppConfig
from .ble import AUX_CHARACTERISTIC_UUID, PEQ_CHARACTERISTIC_UUID
from .types import Q_TABLE, FilterType

__all__ = ["FilterModel", "PropertyService", "snap"]

_log = logging.getLogger(__name__)

_RECORD = struct.Struct("<BBbB")

FilterListener = Callable[[int, int, int, float, float], None]


class PropertyService(Protocol):
    """Remote end that receives encoded filter groups."""

    def set_property(self, key: str, value: bytes) -> None: ...


@dataclass
class _BandFilter:
    """A filter with frequency and quality given as table indices."""

    t: FilterType
    f: int
    g: float
    q: int


def _q_round(value: float) -> int:
    return int(value + 0.5) if value >= 0 else int(value - 0.5)


def snap(value: float, minimum: int, maximum: int, step: int) -> int:
    """Map a slider position in [0, 1] to the nearest stepped index in [minimum, maximum]."""
    idx = _q_round(value * (maximum - minimum)) & 0xFF
    rest = idx % step
    idx -= rest
    if rest >= step // 2:
        idx += step
    return (idx + minimum) & 0xFF


def _encode(filters: list[_BandFilter]) -> bytes:
    return b"".join(
        bytes((int(f.t) & 0xFF, f.f & 0xFF, int(f.g * 2.0) & 0xFF, f.q & 0xFF))
        for f in filters
    )


class FilterModel:
    """Parametric, loudness, crossover and subwoofer bands and the selected band.

    Every local change is reported to the filter listeners and sent to the
    service as the encoded group (PEQ or auxiliary) of the current band.
    Property changes from the service are fed into ``on_property_changed``.
    """

    def __init__(self, config: AppConfig) -> None:
        self._config = config
        self._filters: list[_BandFilter] = []
        self._listeners: list[FilterListener] = []
        self._service: PropertyService | None = None

        peq = config.peq_filter_count
        self._loudness_band = peq
        self._xo_band = peq + 1
        self._sc_band = peq + 2

        count = peq
        if config.loudness_available:
            count += 1
        if config.xo_available:
            count += 1
        if config.sw_available:
            count += 1
        self.resize_filters(count)
        self._current_band = 0

    # -- wiring -----------------------------------------------------------

    def add_filter_listener(self, callback: FilterListener) -> None:
        """Call ``callback(band, type, freq_index, gain, q)`` whenever a band changes."""
        self._listeners.append(callback)

    def set_service(self, service: PropertyService | None) -> None:
        """Set the service that receives encoded filter groups."""
        self._service = service

    # -- bands ------------------------------------------------------------

    def resize_filters(self, diff: int) -> None:
        """Append ``diff`` default bands, or drop ``-diff`` bands from the end."""
        if diff > 0:
            self._filters.extend(
                _BandFilter(
                    FilterType.INVALID, self._config.freq_default, 0.0, self._config.q_default
                )
                for _ in range(diff)
            )
        elif diff < 0:
            del self._filters[diff:]

    def peq_filter_count(self) -> int:
        """Number of parametric bands."""
        return self._config.peq_filter_count

    def current_band(self) -> int:
        """Index of the selected band, negative when none is selected."""
        return self._current_band

    def set_current_band(self, index: int) -> None:
        """Select band ``index``; a negative index clears the selection."""
        if index >= len(self._filters):
            raise IndexError(f"band {index} out of range")
        self._current_band = index
        if index >= 0:
            self._notify()

    def active_filters(self) -> list[bool]:
        """Whether each band is switched on."""
        return [f.t != FilterType.INVALID for f in self._filters]

    def _current(self) -> _BandFilter:
        if self._current_band < 0:
            raise IndexError("no band selected")
        return self._filters[self._current_band]

    # -- type -------------------------------------------------------------

    def filter_type(self) -> int:
        """Type of the current band as an index into ``filter_type_names``."""
        band = self._current_band
        if band < 0:
            return 0
        current = self._current()
        if band < self._config.peq_filter_count:
            return int(current.t)
        if band == self._loudness_band:
            return 0 if current.t == FilterType.INVALID else 1
        if band == self._xo_band:
            if current.t == FilterType.CROSSOVER_LR2:
                return 1
            if current.t == FilterType.CROSSOVER_LR4:
                return 2
            return 0
        if band == self._sc_band:
            return 0 if current.t == FilterType.INVALID else 1
        return 0

    def set_filter_type(self, filter_type: int) -> None:
        """Set the type of the current band from an index into ``filter_type_names``."""
        current = self._current()
        band = self._current_band
        t = FilterType.INVALID
        if band < self._config.peq_filter_count:
            t = FilterType(filter_type)
        elif band == self._loudness_band:
            t = FilterType.INVALID if filter_type == 0 else FilterType.LOUDNESS
        elif band == self._xo_band:
            if filter_type == 1:
                t = FilterType.CROSSOVER_LR2
            elif filter_type == 2:
                t = FilterType.CROSSOVER_LR4
            current.q = 28 if filter_type == 1 else 34
        elif band == self._sc_band:
            t = FilterType.INVALID if filter_type == 0 else FilterType.SUBWOOFER
            current.q = 28 if filter_type == 1 else 34

        current.t = t
        self._notify()

    def filter_type_names(self) -> list[str]:
        """Names of the types the current band offers."""
        if self._current_band < self._config.peq_filter_count:
            return ["Off", "PK", "LP", "HP", "LS", "HS"]
        if self._current_band == self._loudness_band:
            return ["Off", "On"]
        return ["Off", "LR2", "LR4"]

    # -- frequency --------------------------------------------------------

    def freq_readout(self) -> str:
        """Frequency of the current band as display text."""
        value = self._config.freq_table[self._current().f]
        if value < 1.0:
            return f"{value:.2f}"
        if value < 100.0:
            return f"{value:.1f}"
        return f"{value:.0f}"

    def step_freq(self, steps: int) -> None:
        """Move the frequency by ``steps`` configured steps, staying within range."""
        current = self._current()
        idx = current.f + steps * self._config.freq_step
        if idx < self._config.freq_min or idx > self._config.freq_max or idx == current.f:
            return
        current.f = idx
        self._notify()

    def freq_slider(self) -> float:
        """Frequency of the current band as a position in [0, 1]."""
        cfg = self._config
        return (self._current().f - cfg.freq_min) / (cfg.freq_max - cfg.freq_min)

    def set_freq_slider(self, value: float) -> None:
        """Set the frequency from a slider position, snapped to the step grid."""
        cfg = self._config
        current = self._current()
        idx = snap(value, cfg.freq_min, cfg.freq_max, cfg.freq_step)
        if current.f == idx:
            return
        current.f = idx
        self._notify()

    # -- gain -------------------------------------------------------------

    def gain(self) -> float:
        """Gain of the current band in dB."""
        return self._current().g

    def step_gain(self, steps: int) -> None:
        """Move the gain by ``steps`` gain steps, staying within range."""
        current = self._current()
        g = current.g + steps * self.gain_step()
        if g > self.gain_max() or g < self.gain_min():
            return
        current.g = g
        self._notify()

    def gain_slider(self) -> float:
        """Gain of the current band as a position in [0, 1]."""
        return (self.gain() - self.gain_min()) / (self.gain_max() - self.gain_min())

    def set_gain_slider(self, value: float) -> None:
        """Set the gain from a slider position, truncated to the step grid."""
        step = self.gain_step()
        low = self.gain_min()
        gain = int((self.gain_max() - low) * value / step) * step + low
        current = self._current()
        if current.g == gain:
            return
        current.g = gain
        self._notify()

    def gain_min(self) -> float:
        """Lowest gain of the current band."""
        if self._current_band == self._loudness_band:
            return 0.0
        if self._current_band == self._xo_band:
            return -12.0
        return self._config.gain_min

    def gain_max(self) -> float:
        """Highest gain of the current band."""
        if self._current_band == self._loudness_band:
            return 40.0
        if self._current_band == self._xo_band:
            return 12.0
        return self._config.gain_max

    def gain_step(self) -> float:
        """Gain step of the current band."""
        if self._current_band == self._loudness_band:
            return 1.0
        return self._config.gain_step

    # -- quality ----------------------------------------------------------

    def q_readout(self) -> str:
        """Quality of the current band as display text."""
        value = Q_TABLE[self._current().q]
        if value < 1.0:
            return f"{value:.3f}"
        if value < 10.0:
            return f"{value:.2f}"
        return f"{value:.1f}"

    def step_q(self, steps: int) -> None:
        """Move the quality by ``steps`` configured steps, staying within range."""
        current = self._current()
        idx = current.q + steps * self._config.q_step
        if idx < self._config.q_min or idx > self._config.q_max or idx == current.q:
            return
        current.q = idx
        self._notify()

    def q_slider(self) -> float:
        """Quality of the current band as a position in [0, 1]."""
        cfg = self._config
        return (self._current().q - cfg.q_min) / (cfg.q_max - cfg.q_min)

    def set_q_slider(self, value: float) -> None:
        """Set the quality from a slider position."""
        cfg = self._config
        idx = _q_round(value * (cfg.q_max - cfg.q_min)) & 0xFF
        idx = (idx + idx % cfg.q_step) & 0xFF
        idx = (idx + cfg.q_min) & 0xFF
        current = self._current()
        if current.q == idx:
            return
        current.q = idx
        self._notify()

    # -- crossover and subwoofer ------------------------------------------

    def crossover_type_names(self) -> list[str]:
        """Names of the crossover types."""
        return ["Off", "LR2", "LR4"]

    def subwoofer_type(self) -> int:
        """Subwoofer type: 0 when off, else its cascading order."""
        sc = self._filters[self._sc_band]
        return 0 if sc.t == FilterType.INVALID else int(sc.g)

    def set_subwoofer_type(self, filter_type: int) -> None:
        """Switch the subwoofer band off (0) or to order 1 or 2."""
        sc = self._filters[self._sc_band]
        sc.t = FilterType.INVALID if filter_type == 0 else FilterType.SUBWOOFER
        sc.q = 28 if filter_type == 1 else 34
        sc.g = 1.0 if filter_type == 1 else 2.0

    # -- change propagation -----------------------------------------------

    def _emit(self, band: int, t: int, f: int, g: float, q: float) -> None:
        for listener in self._listeners:
            listener(band, t, f, g, q)

    def _notify(self) -> None:
        band = self._current_band
        if band >= 0:
            current = self._filters[band]
            self._emit(band, int(current.t), current.f, current.g, Q_TABLE[current.q])
        else:
            self._emit(band, 0, 0, 0.0, 0.0)

        peq = self._config.peq_filter_count
        if band < peq:
            key, payload = PEQ_CHARACTERISTIC_UUID, _encode(self._filters[:peq])
        else:
            key, payload = AUX_CHARACTERISTIC_UUID, _encode(self._filters[peq:])

        if self._service is not None:
            self._service.set_property(key, payload)

    def _apply_remote(self, index: int, record: tuple[int, int, int, int]) -> None:
        t, f, g, q = record
        band = self._filters[index]
        band.t = FilterType(t)
        band.f = f
        band.g = g * 0.5
        band.q = q
        self._emit(index, int(band.t), band.f, band.g, Q_TABLE[band.q])
        self.set_current_band(self._current_band)

    def on_property_changed(self, key: object, value: bytes) -> None:
        """Take over a filter group sent by the service; other data is ignored."""
        if len(value) % _RECORD.size != 0:
            _log.debug("Invalid size for filter group")
            return

        name = str(key).strip("{}").lower()
        records = list(_RECORD.iter_unpack(bytes(value)))
        peq = self._config.peq_filter_count

        if name == PEQ_CHARACTERISTIC_UUID:
            for index, record in enumerate(records):
                if index > peq or index >= len(self._filters):
                    break
                self._apply_remote(index, record)
            return

        if name == AUX_CHARACTERISTIC_UUID:
            for offset, record in enumerate(records):
                index = peq + offset
                if index >= len(self._filters):
                    break
                self._apply_remote(index, record)
            return

        _log.debug("Unknown property: %s", key)
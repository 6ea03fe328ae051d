"""Wire format of the cornrow control characteristics."""

from __future__ import annotations

import bisect
import math
import struct
from collections.abc import Iterable, Sequence
from enum import IntEnum

from .types import FREQUENCY_TABLE, Q_TABLE, Filter, FilterType, IoInterface

__all__ = [
    "CharacteristicType",
    "CORNROW_SERVICE_UUID",
    "PEQ_CHARACTERISTIC_UUID",
    "AUX_CHARACTERISTIC_UUID",
    "IO_CAPS_CHARACTERISTIC_UUID",
    "IO_CONF_CHARACTERISTIC_UUID",
    "PRESET_CHARACTERISTIC_UUID",
    "interfaces_to_ble",
    "interfaces_from_ble",
    "filters_to_ble",
    "filters_from_ble",
    "freq_to_index",
    "freq_from_index",
    "gain_to_ble",
    "gain_from_ble",
    "q_to_index",
    "q_from_index",
]


class CharacteristicType(IntEnum):
    """Group a characteristic belongs to."""

    INVALID = 0x00
    PEQ = 0x01
    AUX = 0x02
    IO_CAPS = 0x04
    IO_CONF = 0x08


CORNROW_SERVICE_UUID = "ad100000-d901-11e8-9f8b-f2801f1b9fd1"
PEQ_CHARACTERISTIC_UUID = "ad10e100-d901-11e8-9f8b-f2801f1b9fd1"
AUX_CHARACTERISTIC_UUID = "ad10a100-d901-11e8-9f8b-f2801f1b9fd1"
IO_CAPS_CHARACTERISTIC_UUID = "ad101a00-d901-11e8-9f8b-f2801f1b9fd1"
IO_CONF_CHARACTERISTIC_UUID = "ad101f00-d901-11e8-9f8b-f2801f1b9fd1"
PRESET_CHARACTERISTIC_UUID = "ad105100-d901-11e8-9f8b-f2801f1b9fd1"

_FILTER_RECORD = struct.Struct("<BBbB")


def interfaces_to_ble(interfaces: Iterable[IoInterface]) -> bytes:
    """Pack interfaces, one byte each."""
    return bytes(interface.to_byte() for interface in interfaces)


def interfaces_from_ble(data: bytes) -> list[IoInterface]:
    """Unpack interfaces, one per byte."""
    return [IoInterface.from_byte(b) for b in data]


def filters_to_ble(filters: Iterable[Filter]) -> bytes:
    """Pack filters as four bytes each: type, frequency index, gain, q index."""
    return b"".join(
        _FILTER_RECORD.pack(int(f.type), freq_to_index(f.f), gain_to_ble(f.g), q_to_index(f.q))
        for f in filters
    )


def filters_from_ble(data: bytes) -> list[Filter]:
    """Unpack four-byte filter records; data of a wrong length yields no filters.

    Raises ValueError for an unknown filter type byte.
    """
    if len(data) % _FILTER_RECORD.size != 0:
        return []
    return [
        Filter(FilterType(t), freq_from_index(f), gain_from_ble(g), q_from_index(q))
        for t, f, g, q in _FILTER_RECORD.iter_unpack(bytes(data))
    ]


def _nearest_index(table: Sequence[float], value: float) -> int:
    # First j >= 1 with table[j] >= value; the candidates are j-1 and j,
    # split at their geometric mean.
    j = bisect.bisect_left(table, value, 1)
    if j >= len(table):
        raise ValueError(f"value {value} exceeds table maximum {table[-1]}")
    i = j - 1
    centre = math.sqrt(table[i] * table[j])
    return i if value <= centre else j


def freq_to_index(f: float) -> int:
    """Index of the table frequency closest to ``f`` on a log scale."""
    return _nearest_index(FREQUENCY_TABLE, f)


def freq_from_index(index: int) -> float:
    """Frequency at ``index``, or 0.0 when out of range."""
    if not 0 <= index < len(FREQUENCY_TABLE):
        return 0.0
    return FREQUENCY_TABLE[index]


def gain_to_ble(g: float) -> int:
    """Gain in half-dB steps as a signed byte value, rounded half away from zero."""
    scaled = g * 2.0
    value = int(math.copysign(math.floor(abs(scaled) + 0.5), scaled))
    if not -128 <= value <= 127:
        raise ValueError(f"gain {g} does not fit into a signed byte")
    return value


def gain_from_ble(value: int) -> float:
    """Gain in dB from a signed byte value in half-dB steps."""
    return value * 0.5


def q_to_index(q: float) -> int:
    """Index of the table quality closest to ``q`` on a log scale."""
    return _nearest_index(Q_TABLE, q)


def q_from_index(index: int) -> float:
    """Quality at ``index``, or 0.0 when out of range."""
    if not 0 <= index < len(Q_TABLE):
        return 0.0
    return Q_TABLE[index]
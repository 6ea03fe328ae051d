"""Core value types and lookup tables shared by the cornrow components."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

__all__ = [
    "VALID_SAMPLE_RATES",
    "FREQUENCY_TABLE",
    "Q_TABLE",
    "IoInterfaceType",
    "CtrlInterfaceType",
    "SampleFormat",
    "FilterType",
    "Filter",
    "Preset",
    "BiQuad",
    "IoInterface",
    "Caps",
]

VALID_SAMPLE_RATES: frozenset[int] = frozenset({44100, 48000})

# One decade of the Renard R80 series, scaled to 100...975.
_R80_DECADE: tuple[int, ...] = (
    100, 103, 106, 109, 112, 115, 118, 122, 125, 128, 132, 136, 140, 145, 150, 155,
    160, 165, 170, 175, 180, 185, 190, 195, 200, 206, 212, 218, 224, 230, 236, 243,
    250, 258, 265, 272, 280, 290, 300, 307, 315, 325, 335, 345, 355, 365, 375, 387,
    400, 412, 425, 437, 450, 462, 475, 487, 500, 515, 530, 545, 560, 575, 600, 615,
    630, 650, 670, 690, 710, 730, 750, 775, 800, 825, 850, 875, 900, 925, 950, 975,
)

# One decade of the least rounded Renard R40 series, scaled to 100...950.
_R40_DECADE: tuple[int, ...] = (
    100, 106, 112, 118, 125, 132, 140, 150, 160, 170, 180, 190, 200, 212, 224, 236,
    250, 265, 280, 300, 315, 335, 355, 375, 400, 425, 450, 475, 500, 530, 560, 600,
    630, 670, 710, 750, 800, 850, 900, 950,
)

_FREQ_MIN_HZ = 16.0
_FREQ_MAX_HZ = 23600.0
_Q_MAX = 50.0


def _series(decade: tuple[int, ...], scale: int, decades: range, low: float, high: float) -> tuple[float, ...]:
    values = (m * 10**e / scale for e in decades for m in decade)
    return tuple(v for v in values if low <= v <= high)


# Renard R80 from 16 Hz to 23.6 kHz: 255 entries, indexable by one byte.
FREQUENCY_TABLE: tuple[float, ...] = _series(_R80_DECADE, 100, range(1, 5), _FREQ_MIN_HZ, _FREQ_MAX_HZ)

# Renard R40 from 0.1 to 50.
Q_TABLE: tuple[float, ...] = _series(_R40_DECADE, 1000, range(3), 0.0, _Q_MAX)


class IoInterfaceType(IntEnum):
    """Kind of an audio input or output."""

    INVALID = 0
    DEFAULT = 1  # platform specific (alsa on linux)
    ANALOG = 2
    SPDIF = 3
    HDMI = 4
    BLUETOOTH = 5
    AIRPLAY = 6
    SCREAM = 7
    MAX = 15


class CtrlInterfaceType(IntEnum):
    """Transport used to control a device."""

    INVALID = 0
    BLUETOOTH_LE = 0x1
    TCP_IP = 0x2


class SampleFormat(IntEnum):
    """Sample format of an audio stream."""

    INVALID = 0
    I16 = 0x1


class FilterType(IntEnum):
    """Kind of an equalizer, crossover or combined filter."""

    INVALID = 0

    PEAK = 1
    LOW_PASS = 2
    HIGH_PASS = 3
    LOW_SHELF = 4
    HIGH_SHELF = 5
    ALL_PASS = 6

    # Crossover filters: q gives the characteristic, gain the cascading.
    CROSSOVER_LR2 = 16
    CROSSOVER_LR4 = 17

    # LFE crossover
    SUBWOOFER = 24

    LOUDNESS = 32


@dataclass
class Filter:
    """A filter given by type, frequency in Hz, gain in dB and quality."""

    type: FilterType = FilterType.INVALID
    f: float = 0.0
    g: float = 0.0
    q: float = 0.0


@dataclass
class Preset:
    """A named set of filters."""

    name: str = ""
    meta: str = ""
    filters: list[Filter] = field(default_factory=list)


@dataclass
class BiQuad:
    """Normalised biquad coefficients (a0 == 1)."""

    b0: float = 0.0
    b1: float = 0.0
    b2: float = 0.0
    a1: float = 0.0
    a2: float = 0.0


def _io_type(bits: int) -> IoInterfaceType | int:
    try:
        return IoInterfaceType(bits)
    except ValueError:
        return bits


@dataclass(frozen=True)
class IoInterface:
    """An audio interface packed into one byte on the wire.

    Bits 0-3 hold the type, bit 4 the direction, bits 5-7 the number
    (1...n, not an index).
    """

    type: IoInterfaceType | int = IoInterfaceType.INVALID
    is_output: bool = False
    number: int = 0

    def to_byte(self) -> int:
        """Pack this interface into a single byte."""
        return (int(self.type) & 0x0F) | (int(bool(self.is_output)) << 4) | ((self.number & 0x07) << 5)

    @classmethod
    def from_byte(cls, value: int) -> IoInterface:
        """Unpack an interface from a single byte."""
        value &= 0xFF
        return cls(_io_type(value & 0x0F), bool(value & 0x10), value >> 5)

    def __lt__(self, other: IoInterface) -> bool:
        if not isinstance(other, IoInterface):
            return NotImplemented
        return self.to_byte() < other.to_byte()


@dataclass
class Caps:
    """Available inputs and outputs of a device."""

    inputs: list[IoInterface] = field(default_factory=list)
    outputs: list[IoInterface] = field(default_factory=list)
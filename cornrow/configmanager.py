"""Glue between stored filters, the audio engine and the remote service."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Protocol

from .ble import (
    AUX_CHARACTERISTIC_UUID,
    PEQ_CHARACTERISTIC_UUID,
    CharacteristicType,
    filters_from_ble,
    filters_to_ble,
)
from .persistence import Persistence
from .types import Filter, FilterType, IoInterface

__all__ = ["AudioConf", "ConfigManager", "PropertyService", "split_filters"]

_log = logging.getLogger(__name__)


class AudioConf(ABC):
    """Audio engine settings that can be read and changed remotely."""

    @abstractmethod
    def filters(self, group: CharacteristicType) -> list[Filter]:
        """Filters of ``group``."""

    @abstractmethod
    def set_filters(self, group: CharacteristicType, filters: list[Filter]) -> None:
        """Replace the filters of ``group``."""

    @abstractmethod
    def io_caps(self) -> list[IoInterface]:
        """Available inputs and outputs."""

    @abstractmethod
    def io_conf(self) -> list[IoInterface]:
        """Selected input and output."""

    @abstractmethod
    def set_input(self, interface: IoInterface) -> None:
        """Select the input."""

    @abstractmethod
    def set_output(self, interface: IoInterface) -> None:
        """Select the output."""


class PropertyService(Protocol):
    """Remote end that publishes encoded filter groups."""

    def set_property(self, key: str, value: bytes) -> None: ...


def split_filters(filters: Iterable[Filter]) -> tuple[list[Filter], list[Filter]]:
    """Split filters into linear (PEQ) and auxiliary ones; others are dropped."""
    peq: list[Filter] = []
    aux: list[Filter] = []
    for f in filters:
        if FilterType.PEAK <= f.type <= FilterType.ALL_PASS:
            peq.append(f)
        elif FilterType.CROSSOVER_LR2 <= f.type <= FilterType.LOUDNESS:
            aux.append(f)
    return peq, aux


def _normalise_key(key: object) -> str:
    return str(key).strip("{}").lower()


class ConfigManager:
    """Loads stored filters into the audio engine and publishes them.

    Filter groups written through the service are handed to
    ``on_property_changed``; ``write_config`` stores the current filters.
    """

    def __init__(
        self,
        audio: AudioConf,
        persistence: Persistence,
        service: PropertyService | None,
    ) -> None:
        self._audio = audio
        self._persistence = persistence
        self._service = service

        peq, aux = split_filters(persistence.read_config())
        audio.set_filters(CharacteristicType.PEQ, peq)
        audio.set_filters(CharacteristicType.AUX, aux)

        if service is not None:
            service.set_property(PEQ_CHARACTERISTIC_UUID, filters_to_ble(peq))
            service.set_property(AUX_CHARACTERISTIC_UUID, filters_to_ble(aux))

    def write_config(self) -> None:
        """Store the PEQ filters followed by the auxiliary ones."""
        filters = list(self._audio.filters(CharacteristicType.PEQ))
        filters.extend(self._audio.filters(CharacteristicType.AUX))
        self._persistence.write_config(filters)

    def on_property_changed(self, key: object, value: bytes) -> None:
        """Hand a filter group written remotely to the audio engine.

        Raises ValueError when a record names an unknown filter type.
        """
        name = _normalise_key(key)
        if name == PEQ_CHARACTERISTIC_UUID:
            self._audio.set_filters(CharacteristicType.PEQ, filters_from_ble(value))
        elif name == AUX_CHARACTERISTIC_UUID:
            self._audio.set_filters(CharacteristicType.AUX, filters_from_ble(value))
        else:
            _log.warning("Unknown uuid: %s", key)
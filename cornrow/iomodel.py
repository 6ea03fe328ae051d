"""Selection of the audio input and output of a remote device."""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterable
from typing import Protocol

from .ble import IO_CAPS_CHARACTERISTIC_UUID, IO_CONF_CHARACTERISTIC_UUID
from .types import IoInterface, IoInterfaceType

__all__ = ["IoModel", "interface_name"]

_log = logging.getLogger(__name__)

_TYPE_NAMES = {
    IoInterfaceType.INVALID: "<unknown>",
    IoInterfaceType.DEFAULT: "Default",
    IoInterfaceType.ANALOG: "Analog",
    IoInterfaceType.SPDIF: "SPDIF",
    IoInterfaceType.HDMI: "HDMI",
    IoInterfaceType.BLUETOOTH: "Bluetooth",
    IoInterfaceType.AIRPLAY: "Airplay",
    IoInterfaceType.SCREAM: "Scream",
}


class PropertyService(Protocol):
    """Remote end that receives the selected interfaces."""

    def set_property(self, key: str, value: bytes) -> None: ...


def interface_name(interface: IoInterface) -> str:
    """Display name of an interface, with its number when it has one."""
    if interface.type == IoInterfaceType.MAX:
        return ""
    name = _TYPE_NAMES.get(interface.type, "")
    if interface.number > 0:
        name += f" {interface.number}"
    return name


def _expand(interfaces: Iterable[IoInterface], is_output: bool) -> list[IoInterface]:
    expanded: list[IoInterface] = []
    for interface in interfaces:
        if interface.number > 1:
            expanded.extend(
                IoInterface(interface.type, is_output, n) for n in range(1, interface.number + 1)
            )
        else:
            expanded.append(IoInterface(interface.type, is_output, 0))
    return expanded


def _normalise_key(key: object) -> str:
    return str(key).strip("{}").lower()


class IoModel:
    """Available inputs and outputs of a device and the active ones.

    Interfaces announced with a number above one are listed once per
    instance, numbered from 1.
    """

    def __init__(self) -> None:
        self._service: PropertyService | None = None
        self._inputs: list[IoInterface] = []
        self._outputs: list[IoInterface] = []
        self._active_input = 0
        self._active_output = 0
        self.on_io_caps_received([], [])

    def set_service(self, service: PropertyService | None) -> None:
        """Set the service that receives the selected interfaces."""
        self._service = service

    def input_names(self) -> list[str]:
        """Display names of the inputs."""
        return [interface_name(i) for i in self._inputs]

    def output_names(self) -> list[str]:
        """Display names of the outputs."""
        return [interface_name(o) for o in self._outputs]

    def active_input(self) -> int:
        """Index of the active input."""
        return self._active_input

    def set_active_input(self, index: int) -> None:
        """Select the input at ``index`` and send the selection."""
        self._active_input = index
        self._send_io_conf()

    def active_output(self) -> int:
        """Index of the active output."""
        return self._active_output

    def set_active_output(self, index: int) -> None:
        """Select the output at ``index`` and send the selection."""
        self._active_output = index
        self._send_io_conf()

    def input(self) -> IoInterface:
        """The active input, or an invalid one when the index is past the end."""
        if self._active_input < 0:
            raise IndexError(f"input index {self._active_input} is negative")
        if self._active_input >= len(self._inputs):
            return IoInterface(IoInterfaceType.INVALID, False, 0)
        return self._inputs[self._active_input]

    def output(self) -> IoInterface:
        """The active output, or an invalid one when the index is past the end."""
        if self._active_output < 0:
            raise IndexError(f"output index {self._active_output} is negative")
        if self._active_output >= len(self._outputs):
            return IoInterface(IoInterfaceType.INVALID, True, 0)
        return self._outputs[self._active_output]

    def multi_channel_available(self) -> bool:
        """Whether the active output carries more than two channels."""
        if not 0 <= self._active_output < len(self._outputs):
            raise IndexError(f"output index {self._active_output} out of range")
        return self._outputs[self._active_output].type in (
            IoInterfaceType.SPDIF,
            IoInterfaceType.HDMI,
        )

    def start_demo(self) -> None:
        """Fill in a fixed set of interfaces for demonstration."""
        self.on_io_caps_received(
            [
                IoInterface(IoInterfaceType.BLUETOOTH, False, 1),
                IoInterface(IoInterfaceType.AIRPLAY, False, 1),
            ],
            [
                IoInterface(IoInterfaceType.HDMI, True, 2),
                IoInterface(IoInterfaceType.SPDIF, True, 3),
            ],
        )

    def on_property_changed(self, uuid: object, value: bytes) -> None:
        """Take over capabilities or configuration sent by the service."""
        key = _normalise_key(uuid)
        interfaces = [IoInterface.from_byte(b) for b in value]
        if key == IO_CAPS_CHARACTERISTIC_UUID:
            self.on_io_caps_received(
                [i for i in interfaces if not i.is_output],
                [i for i in interfaces if i.is_output],
            )
        elif key == IO_CONF_CHARACTERISTIC_UUID:
            selected_input: IoInterface | None = None
            selected_output: IoInterface | None = None
            for interface in interfaces:
                if interface.is_output:
                    selected_output = interface
                else:
                    selected_input = interface
            self.on_io_conf_received(selected_input, selected_output)

    def on_io_caps_received(
        self, inputs: Iterable[IoInterface], outputs: Iterable[IoInterface]
    ) -> None:
        """Replace the available interfaces; empty lists become one invalid entry."""
        self._inputs = _expand(inputs, False) or [IoInterface(IoInterfaceType.INVALID, False, 0)]
        self._outputs = _expand(outputs, True) or [IoInterface(IoInterfaceType.INVALID, True, 0)]

    def on_io_conf_received(
        self, input: IoInterface | None, output: IoInterface | None
    ) -> None:
        """Activate the listed interfaces that equal ``input`` and ``output``."""
        for index, candidate in enumerate(self._inputs):
            if candidate == input:
                self.set_active_input(index)
        for index, candidate in enumerate(self._outputs):
            if candidate == output:
                self.set_active_output(index)

    def _send_io_conf(self) -> None:
        selected_input = self.input()
        if selected_input.number > 0:
            selected_input = dataclasses.replace(selected_input, number=selected_input.number - 1)
        selected_output = self.output()
        if selected_output.number > 0:
            selected_output = dataclasses.replace(
                selected_output, number=selected_output.number - 1
            )
        value = bytes((selected_input.to_byte(), selected_output.to_byte()))

        if self._service is None:
            _log.warning("No remote service set")
            return
        self._service.set_property(IO_CONF_CHARACTERISTIC_UUID, value)
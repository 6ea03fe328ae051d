"""Preset names announced by a remote device."""

from __future__ import annotations

from typing import Any

__all__ = ["PresetModel"]

_PLACEHOLDER = "Loading..."


class PresetModel:
    """List of preset names and the index of the active one."""

    def __init__(self) -> None:
        self._service: Any = None
        self._names: list[str] = []
        self._active = 0

    def set_service(self, service: Any) -> None:
        """Set the remote service presets come from."""
        self._service = service

    def preset_names(self) -> list[str]:
        """Names of the presets."""
        return list(self._names)

    def active_preset(self) -> int:
        """Index of the active preset."""
        return self._active

    def set_active_preset(self, index: int) -> None:
        """Make the preset at ``index`` the active one."""
        self._active = index

    def on_preset_received(self, index: int, total: int, active: int, name: str) -> None:
        """Resize the list to ``total`` entries, then insert ``name`` at ``index``."""
        if total < 0:
            raise ValueError("total must not be negative")
        diff = total - len(self._names)
        if diff > 0:
            self._names.extend([_PLACEHOLDER] * diff)
        elif diff < 0:
            del self._names[diff:]

        if not 0 <= index <= len(self._names):
            raise IndexError(f"preset index {index} out of range")
        self._names.insert(index, name)
        self._active = active
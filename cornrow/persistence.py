"""Storage of the daemon's filter settings on disk."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from typing import Any

from .types import Filter, FilterType

__all__ = ["DEFAULT_AUDIO_PATH", "Persistence"]

_log = logging.getLogger(__name__)

DEFAULT_AUDIO_PATH = "/var/lib/cornrowd/audio.conf"


def _filter_from_node(node: Any) -> Filter:
    try:
        return Filter(
            type=FilterType(int(str(node["t"]))),
            f=float(node["f"]),
            g=float(node["g"]),
            q=float(node["q"]),
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise ValueError(f"malformed filter entry: {node!r}") from exc


class Persistence:
    """Reads and writes filters as a JSON document with a ``filters`` array.

    Values are stored as strings, one object per filter with keys
    ``t``, ``f``, ``g`` and ``q``.
    """

    def __init__(self, path: str = DEFAULT_AUDIO_PATH) -> None:
        self.path = path

    def read_config(self) -> list[Filter]:
        """Stored filters; an unreadable file yields none.

        Raises ValueError when an entry lacks a value or holds an invalid one.
        """
        try:
            with open(self.path, encoding="utf-8") as handle:
                document = json.load(handle)
        except (OSError, ValueError):
            return []

        nodes = document.get("filters", []) if isinstance(document, dict) else []
        if not isinstance(nodes, list):
            return []
        return [_filter_from_node(node) for node in nodes]

    def write_config(self, filters: Iterable[Filter]) -> None:
        """Store ``filters``; failures to write are ignored."""
        entries = [
            {"t": str(int(f.type)), "f": str(f.f), "g": str(f.g), "q": str(f.q)}
            for f in filters
        ]
        _log.info("filter count: %d", len(entries))
        try:
            with open(self.path, "w", encoding="utf-8") as handle:
                json.dump({"filters": entries}, handle, indent=4)
                handle.write("\n")
        except OSError:
            return
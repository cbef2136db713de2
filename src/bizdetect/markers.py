"""Summary: Marker source interfaces and implementations.

Importance: Encapsulates loading markers from files before categorization.
Alternatives: Accept markers only through the HTTP API.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from bizdetect.models import Marker


class MarkerSource(ABC):
    """Summary: Abstract interface for marker loading.

    Importance: Standardizes marker import across file formats.
    Alternatives: Parse each format inline in the CLI.
    """

    @abstractmethod
    def fetch(self, limit: int) -> list[Marker]:
        """Summary: Load up to limit markers from the source.

        Importance: Drives bulk marker import workflows.
        Alternatives: Stream markers lazily with a generator.
        """


class JsonMarkerSource(MarkerSource):
    """Summary: Loads markers from a local JSON array.

    Importance: Supports offline demos, tests, and scripted imports.
    Alternatives: Use SQLite fixtures or generate synthetic markers.
    """

    def __init__(self, fixture_path: Path) -> None:
        self._fixture_path = fixture_path

    def fetch(self, limit: int) -> list[Marker]:
        """Summary: Load markers from the JSON file in file order.

        Importance: Provides predictable data for imports and tests.
        Alternatives: Return an empty list when no fixture is present.
        """

        data = json.loads(self._fixture_path.read_text(encoding="utf-8"))
        if not isinstance(data, list):
            raise ValueError(f"Marker fixture must contain a JSON array: {self._fixture_path}")
        return [_parse_marker(item) for item in data[:limit]]


def _parse_marker(item: dict[str, Any]) -> Marker:
    return Marker(
        name=str(item["name"]),
        address=str(item.get("address") or ""),
        lat=float(item["lat"]),
        lng=float(item["lng"]),
        type=str(item.get("type") or "pin"),
        visible=bool(item.get("visible", True)),
    )

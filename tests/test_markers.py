"""Summary: Tests for JSON marker fixtures.

Importance: Ensures marker files load in order with sensible defaults.
Alternatives: Build markers in code for every test.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from bizdetect.markers import JsonMarkerSource


def test_json_source_loads_markers(tmp_path: Path) -> None:
    """Summary: Load markers and apply defaults for optional fields.

    Importance: Confirms fixtures without type or visibility still import.
    Alternatives: Require every field in the fixture.
    """

    fixture = tmp_path / "markers.json"
    fixture.write_text(
        """
        [
          {"name": "Starbucks", "address": "Peel", "lat": 45.5, "lng": -73.57},
          {"name": "Joe's Bistro", "lat": "45.51", "lng": "-73.56", "type": "star", "visible": false},
          {"name": "Third", "address": "", "lat": 45.52, "lng": -73.55}
        ]
        """.strip(),
        encoding="utf-8",
    )
    markers = JsonMarkerSource(fixture).fetch(2)
    assert [marker.name for marker in markers] == ["Starbucks", "Joe's Bistro"]
    assert markers[0].type == "pin"
    assert markers[0].visible is True
    assert markers[1].address == ""
    assert markers[1].lat == 45.51
    assert markers[1].visible is False


def test_json_source_rejects_non_list(tmp_path: Path) -> None:
    """Summary: Reject fixtures that are not JSON arrays."""

    fixture = tmp_path / "markers.json"
    fixture.write_text("{\"name\": \"Starbucks\"}", encoding="utf-8")
    with pytest.raises(ValueError):
        JsonMarkerSource(fixture).fetch(5)

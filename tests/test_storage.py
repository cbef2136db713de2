"""Summary: Tests for SQLite storage layer.

Importance: Ensures maps and categorized markers persist as expected.
Alternatives: Rely on manual testing for storage operations.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from bizdetect.classifier import detect_business_type
from bizdetect.models import MapRecord, Marker
from bizdetect.storage.sqlite_store import SqliteStore


def _store(tmp_path: Path) -> SqliteStore:
    store = SqliteStore(str(tmp_path / "test.db"))
    store.initialize()
    return store


def test_store_persists_maps(tmp_path: Path) -> None:
    """Summary: Verify maps are saved and listed.

    Importance: Maps are the parent of every marker.
    Alternatives: Use in-memory fixtures without database storage.
    """

    store = _store(tmp_path)
    map_id = store.create_map(MapRecord(name="Montréal", description="Downtown"))
    maps = store.list_maps()
    assert maps[0].id == map_id
    assert maps[0].name == "Montréal"
    assert store.get_map(map_id).description == "Downtown"
    assert store.get_map(999) is None


def test_store_markers_with_category(tmp_path: Path) -> None:
    """Summary: Verify markers keep their classification.

    Importance: Map rendering reads categories straight from storage.
    Alternatives: Classify markers on every read.
    """

    store = _store(tmp_path)
    map_id = store.create_map(MapRecord(name="Test"))
    marker = Marker(name="Starbucks", address="Peel", lat=45.5, lng=-73.57, visible=False)
    marker_id = store.add_marker(map_id, marker, detect_business_type(marker.name, marker.address))
    stored = store.get_marker(marker_id)
    assert stored is not None
    assert stored.category_id == "coffee"
    assert stored.confidence == 95
    assert stored.matched_term == "starbucks"
    assert stored.visible is False
    assert store.list_markers(map_id)[0].id == marker_id


def test_store_rejects_unknown_map(tmp_path: Path) -> None:
    """Summary: Refuse markers for maps that do not exist."""

    store = _store(tmp_path)
    marker = Marker(name="Starbucks", address="", lat=45.5, lng=-73.57)
    with pytest.raises(ValueError):
        store.add_marker(42, marker, detect_business_type(marker.name))


def test_store_updates_category_and_counts(tmp_path: Path) -> None:
    """Summary: Update a stored classification and count categories.

    Importance: Supports recategorization and map legends.
    Alternatives: Recompute counts client-side.
    """

    store = _store(tmp_path)
    map_id = store.create_map(MapRecord(name="Test"))
    first = Marker(name="Starbucks", address="", lat=45.5, lng=-73.57)
    second = Marker(name="Tim Hortons", address="", lat=45.5, lng=-73.56)
    first_id = store.add_marker(map_id, first, detect_business_type(first.name))
    store.add_marker(map_id, second, detect_business_type(second.name))
    assert store.category_counts(map_id) == {"coffee": 2}
    assert store.update_marker_category(first_id, detect_business_type("Pharmacie"))
    assert store.get_marker(first_id).category_id == "pharmacy"
    assert store.category_counts(map_id) == {"coffee": 1, "pharmacy": 1}
    assert not store.update_marker_category(999, detect_business_type("Pharmacie"))

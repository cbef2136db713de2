"""Summary: Tests for business code expansion.

Importance: Ensures only obvious business codes are rewritten.
Alternatives: Review renamed markers manually after import.
"""

from __future__ import annotations

from bizdetect.models import Marker
from bizdetect.rename import rename_business_marker, rename_business_markers


def test_rename_expands_code_prefix() -> None:
    """Summary: Expand a code followed by a store number.

    Importance: Confirms spreadsheet codes become readable names.
    Alternatives: Leave codes untouched.
    """

    result = rename_business_marker("upx 1234", "Laval")
    assert result.renamed_name == "Uniprix"
    assert result.confidence == 95
    assert result.method == "pattern"
    assert result.source == "Business code: UPX"


def test_rename_expands_exact_code() -> None:
    """Summary: Expand a name that is exactly a code."""

    assert rename_business_marker(" JC ").renamed_name == "Jean Coutu"


def test_rename_leaves_proper_names() -> None:
    """Summary: Keep names that only start with code letters.

    Importance: Proper business names must never be rewritten.
    Alternatives: Rename anything that starts with a code.
    """

    result = rename_business_marker("FMX Studio")
    assert result.renamed_name == "FMX Studio"
    assert result.confidence == 0
    assert result.method == "fallback"


def test_rename_markers_falls_back_on_error() -> None:
    """Summary: Return a fallback result when a marker cannot be processed.

    Importance: One malformed marker must not fail a whole batch.
    Alternatives: Abort the batch on the first failure.
    """

    markers = [
        Marker(name="BRU 12", address="", lat=45.0, lng=-73.0),
        Marker(name=None, address="", lat=45.0, lng=-73.0),  # type: ignore[arg-type]
    ]
    results = rename_business_markers(markers)
    assert results[0].renamed_name == "Brunet"
    assert results[1].method == "fallback"
    assert results[1].source == "Error during processing"

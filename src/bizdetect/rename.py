"""Summary: Business code expansion for marker names.

Importance: Turns store codes from imported spreadsheets into readable names.
Alternatives: Resolve every marker name through a geocoding provider.
"""

from __future__ import annotations

import logging
from typing import Iterable

from bizdetect.models import Marker, RenameResult


logger = logging.getLogger(__name__)

BUSINESS_CODES: dict[str, str] = {
    "UPX": "Uniprix",
    "FM": "Familiprix",
    "JC": "Jean Coutu",
    "PHX": "Pharmaprix",
    "BRU": "Brunet",
}


def rename_business_marker(
    original_name: str,
    address: str = "",
    lat: float | None = None,
    lng: float | None = None,
) -> RenameResult:
    """Summary: Expand a known business code at the start of a marker name.

    Importance: Only obvious codes are rewritten so proper names are never altered.
    Alternatives: Rename markers using fuzzy dictionary matches.
    """

    candidate = original_name.upper().strip()
    for code, business_name in BUSINESS_CODES.items():
        if candidate == code or candidate.startswith(f"{code} "):
            return RenameResult(
                original_name=original_name,
                renamed_name=business_name,
                confidence=95,
                method="pattern",
                source=f"Business code: {code}",
            )
    return RenameResult(
        original_name=original_name,
        renamed_name=original_name,
        confidence=0,
        method="fallback",
        source="Not a business code",
    )


def rename_business_markers(markers: Iterable[Marker]) -> list[RenameResult]:
    """Summary: Expand business codes for a batch of markers.

    Importance: Keeps one malformed marker from failing a whole import.
    Alternatives: Abort the batch on the first failure.
    """

    results: list[RenameResult] = []
    for marker in markers:
        try:
            results.append(
                rename_business_marker(marker.name, marker.address, marker.lat, marker.lng)
            )
        except Exception:
            logger.exception("Failed to rename marker %r.", marker.name)
            results.append(
                RenameResult(
                    original_name=str(marker.name),
                    renamed_name=str(marker.name),
                    confidence=0,
                    method="fallback",
                    source="Error during processing",
                )
            )
    return results

"""Summary: Domain model dataclasses for bizdetect.

Importance: Defines the core entities shared by the classifier, services, and storage.
Alternatives: Use Pydantic models or ORM classes directly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Category:
    """Summary: Represents a business category with display metadata.

    Importance: Categories drive marker icons and colors on rendered maps.
    Alternatives: Store only category identifiers and resolve display data in the UI.
    """

    id: str
    name: str
    icon: str
    color: str
    map_color: str | None = None


@dataclass(frozen=True)
class DictionaryEntry:
    """Summary: Known business name mapped to a category.

    Importance: Backs exact, fuzzy, and partial business name matching.
    Alternatives: Query a places API for every marker.
    """

    name: str
    category_id: str
    confidence: int


@dataclass(frozen=True)
class KeywordPattern:
    """Summary: Bilingual keyword set for one category.

    Importance: Catches independent businesses that are not in the dictionary.
    Alternatives: Train a text classifier on labelled marker names.
    """

    category_id: str
    keywords: tuple[str, ...]
    confidence: int


@dataclass(frozen=True)
class ObviousPattern:
    """Summary: Substring that settles a category outright.

    Importance: Resolves mixed-use venues before weaker rules run.
    Alternatives: Score every rule and pick the highest total.
    """

    pattern: str
    category_id: str
    confidence: int = 100


@dataclass(frozen=True)
class ClassificationResult:
    """Summary: Outcome of classifying a marker name and address.

    Importance: Carries the category, confidence, and triggering term back to callers.
    Alternatives: Return a bare category identifier.
    """

    category: Category
    confidence: int
    matched_term: str

    def to_marker_category(self) -> dict[str, Any]:
        """Summary: Build the category record attached to a marker.

        Importance: Keeps the stored marker shape identical across API, CLI, and storage.
        Alternatives: Store the full category object on every marker.
        """

        return {
            "id": self.category.id,
            "name": self.category.name,
            "icon": self.category.icon,
            "color": self.category.color,
            "confidence": self.confidence,
            "matchedTerm": self.matched_term,
        }


@dataclass(frozen=True)
class Marker:
    """Summary: Represents a map marker before it is persisted.

    Importance: Core unit for categorization, import, and map rendering.
    Alternatives: Pass raw dictionaries between layers.
    """

    name: str
    address: str
    lat: float
    lng: float
    type: str = "pin"
    visible: bool = True


@dataclass(frozen=True)
class MapRecord:
    """Summary: Represents a named map that owns markers."""

    name: str
    description: str | None = None


@dataclass(frozen=True)
class RenameResult:
    """Summary: Outcome of expanding a business code in a marker name.

    Importance: Lets callers show both the original and the expanded name.
    Alternatives: Overwrite marker names in place without provenance.
    """

    original_name: str
    renamed_name: str
    confidence: int
    method: str
    source: str

"""Summary: Core application services for bizdetect.

Importance: Orchestrates classification, marker persistence, and map statistics.
Alternatives: Call the classifier and store directly from each entrypoint.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
import logging
from typing import Iterable

from bizdetect.categories import BUSINESS_CATEGORIES
from bizdetect.classifier import BusinessClassifier
from bizdetect.models import ClassificationResult, MapRecord, Marker
from bizdetect.rename import rename_business_markers
from bizdetect.storage.sqlite_store import SqliteStore, StoredMap, StoredMarker


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClassificationService:
    """Summary: Classifies marker names without persisting anything.

    Importance: Backs the classify endpoints and CLI previews.
    Alternatives: Expose the classifier directly to every caller.
    """

    classifier: BusinessClassifier

    def classify(self, name: str, address: str | None = None) -> ClassificationResult:
        """Summary: Classify a single name and address pair."""

        return self.classifier.classify(name, address)

    def classify_many(
        self, items: Iterable[tuple[str, str | None]]
    ) -> list[ClassificationResult]:
        """Summary: Classify several name and address pairs in order.

        Importance: Lets clients preview a whole import before saving it.
        Alternatives: Issue one request per marker.
        """

        return [self.classifier.classify(name, address) for name, address in items]


@dataclass(frozen=True)
class MapService:
    """Summary: Manages map records.

    Importance: Maps own markers and scope stats and recategorization.
    Alternatives: Keep markers in a single flat collection.
    """

    store: SqliteStore

    def create_map(self, name: str, description: str | None = None) -> int:
        """Summary: Create a new map record."""

        map_id = self.store.create_map(MapRecord(name=name, description=description))
        logger.info("Created map %s (%s).", map_id, name)
        return map_id

    def list_maps(self) -> list[StoredMap]:
        """Summary: Return every stored map."""

        return self.store.list_maps()

    def require_map(self, map_id: int) -> StoredMap:
        """Summary: Fetch a map or fail when it does not exist.

        Importance: Gives API and CLI callers one error path for unknown maps.
        Alternatives: Return None and let every caller check.
        """

        stored = self.store.get_map(map_id)
        if stored is None:
            raise ValueError(f"Map {map_id} not found")
        return stored


@dataclass(frozen=True)
class MarkerService:
    """Summary: Classifies markers and persists them with their category.

    Importance: Every marker carries a category before it reaches storage.
    Alternatives: Categorize markers lazily when a map is rendered.
    """

    store: SqliteStore
    classifier: BusinessClassifier

    def add_marker(self, map_id: int, marker: Marker) -> tuple[int, ClassificationResult]:
        """Summary: Classify a marker and store it on a map.

        Importance: Mirrors the marker creation flow used by the map editor.
        Alternatives: Store the marker first and classify in a background job.
        """

        result = self.classifier.classify(marker.name, marker.address)
        marker_id = self.store.add_marker(map_id, marker, result)
        logger.info(
            "Added marker %s to map %s as %s (%s).",
            marker_id,
            map_id,
            result.category.id,
            result.confidence,
        )
        return marker_id, result

    def import_markers(
        self, map_id: int, markers: Iterable[Marker], expand_codes: bool = False
    ) -> list[int]:
        """Summary: Classify and store a batch of markers.

        Importance: Supports bulk imports from fixture files.
        Alternatives: Require markers to be added one at a time.

        With expand_codes, store codes such as "UPX 1234" are replaced by the
        business name before classification.
        """

        if self.store.get_map(map_id) is None:
            raise ValueError(f"Map {map_id} not found")
        if expand_codes:
            markers = list(markers)
            renamed = rename_business_markers(markers)
            markers = [
                replace(marker, name=result.renamed_name)
                for marker, result in zip(markers, renamed)
            ]
        ids: list[int] = []
        for marker in markers:
            result = self.classifier.classify(marker.name, marker.address)
            ids.append(self.store.add_marker(map_id, marker, result))
        logger.info("Imported %s markers into map %s.", len(ids), map_id)
        return ids

    def list_markers(self, map_id: int) -> list[StoredMarker]:
        """Summary: Return the markers stored on a map."""

        return self.store.list_markers(map_id)

    def recategorize_map(self, map_id: int) -> int:
        """Summary: Reclassify every marker on a map and store changes.

        Importance: Applies dictionary and keyword updates to existing maps.
        Alternatives: Only classify markers created after an update.
        """

        if self.store.get_map(map_id) is None:
            raise ValueError(f"Map {map_id} not found")
        changed = 0
        for stored in self.store.list_markers(map_id):
            result = self.classifier.classify(stored.name, stored.address)
            if (
                result.category.id == stored.category_id
                and result.confidence == stored.confidence
                and result.matched_term == stored.matched_term
            ):
                continue
            self.store.update_marker_category(stored.id, result)
            changed += 1
        logger.info("Recategorized %s markers on map %s.", changed, map_id)
        return changed


@dataclass(frozen=True)
class MapStatsService:
    """Summary: Summarizes marker categories per map.

    Importance: Feeds legends and category filters on published maps.
    Alternatives: Compute counts in the browser.
    """

    store: SqliteStore

    def category_breakdown(self, map_id: int) -> list[dict[str, object]]:
        """Summary: Return marker counts per category in registry order.

        Importance: Keeps legends stable regardless of insertion order.
        Alternatives: Sort categories by count.
        """

        if self.store.get_map(map_id) is None:
            raise ValueError(f"Map {map_id} not found")
        counts = self.store.category_counts(map_id)
        return [
            {
                "id": category.id,
                "name": category.name,
                "icon": category.icon,
                "color": category.color,
                "count": counts[category.id],
            }
            for category in BUSINESS_CATEGORIES
            if counts.get(category.id)
        ]

"""Summary: Application factory wiring core services.

Importance: Centralizes dependency creation for the CLI and API layers.
Alternatives: Instantiate services manually in each entrypoint.
"""

from __future__ import annotations

from dataclasses import dataclass

from bizdetect.classifier import BusinessClassifier, validate_tables
from bizdetect.config import AppConfig
from bizdetect.services import ClassificationService, MapService, MapStatsService, MarkerService
from bizdetect.storage.sqlite_store import SqliteStore


@dataclass(frozen=True)
class AppServices:
    """Summary: Bundle of core services for bizdetect.

    Importance: Simplifies passing dependencies to UI or API layers.
    Alternatives: Use a dependency injection container.
    """

    classification: ClassificationService
    maps: MapService
    markers: MarkerService
    stats: MapStatsService
    store: SqliteStore


def build_classifier(config: AppConfig) -> BusinessClassifier:
    """Summary: Build a classifier tuned by configuration.

    Importance: Keeps threshold overrides in one place.
    Alternatives: Read thresholds inside the classifier module.
    """

    return BusinessClassifier(
        fuzzy_threshold=config.fuzzy_threshold,
        partial_match_discount=config.partial_match_discount,
        partial_token_min_length=config.partial_token_min_length,
    )


def build_services(config: AppConfig) -> AppServices:
    """Summary: Build core services from configuration.

    Importance: Provides a single construction path for the application.
    Alternatives: Instantiate services directly within the CLI entrypoint.
    """

    validate_tables()
    store = SqliteStore(config.db_path)
    store.initialize()
    classifier = build_classifier(config)
    return AppServices(
        classification=ClassificationService(classifier=classifier),
        maps=MapService(store=store),
        markers=MarkerService(store=store, classifier=classifier),
        stats=MapStatsService(store=store),
        store=store,
    )

"""Summary: FastAPI application for bizdetect.

Importance: Exposes classification and marker endpoints for the map editor and integrations.
Alternatives: Use a CLI-only workflow or a different web framework.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from fastapi import Depends, FastAPI, Header, HTTPException
from pydantic import BaseModel, Field

from bizdetect.app import build_services
from bizdetect.categories import get_all_categories, get_category_by_id
from bizdetect.config import AppConfig
from bizdetect.markers import JsonMarkerSource
from bizdetect.models import Category, ClassificationResult, Marker
from bizdetect.rename import rename_business_marker
from bizdetect.storage.sqlite_store import StoredMarker


class ClassifyRequest(BaseModel):
    """Summary: Request payload for a single classification.

    Importance: Keeps classification inputs explicit for API clients.
    Alternatives: Use query parameters instead of JSON payloads.
    """

    name: str
    address: str | None = None


class BatchClassifyRequest(BaseModel):
    """Summary: Request payload for classifying several markers at once.

    Importance: Lets import previews run in a single round trip.
    Alternatives: Issue one request per marker.
    """

    items: list[ClassifyRequest] = Field(min_length=1, max_length=1000)


class RenameRequest(BaseModel):
    """Summary: Request payload for business code expansion."""

    name: str
    address: str = ""
    lat: float | None = None
    lng: float | None = None


class MapCreateRequest(BaseModel):
    """Summary: Request payload for map creation.

    Importance: Enables client-defined maps over HTTP.
    Alternatives: Create maps only through the CLI.
    """

    name: str = Field(min_length=1)
    description: str | None = None


class MarkerCreateRequest(BaseModel):
    """Summary: Request payload for adding a marker to a map.

    Importance: Mirrors the fields the map editor collects for a marker.
    Alternatives: Accept GeoJSON features.
    """

    name: str
    address: str = ""
    lat: float = Field(ge=-90, le=90)
    lng: float = Field(ge=-180, le=180)
    type: str = "pin"
    visible: bool = True


class MarkerImportRequest(BaseModel):
    """Summary: Request payload for importing markers from a JSON fixture."""

    fixture_path: str
    limit: int = Field(default=500, ge=1, le=5000)
    expand_codes: bool = False


def create_app(config: AppConfig) -> FastAPI:
    """Summary: Create a FastAPI app wired to bizdetect services.

    Importance: Ensures the API layer shares the same configuration and storage.
    Alternatives: Instantiate services globally outside the factory.
    """

    if not logging.getLogger().handlers:
        logging.basicConfig(
            level=config.log_level, format="%(levelname)s %(name)s: %(message)s"
        )
    app = FastAPI(title="bizdetect API", version="0.1.0")
    services = build_services(config)

    def require_api_key(x_api_key: str | None = Header(default=None)) -> None:
        """Summary: Enforce API key authentication when configured.

        Importance: Adds a minimal security layer for local and private deployments.
        Alternatives: Use OAuth or session-based authentication.
        """

        if not config.api_key:
            return
        if x_api_key != config.api_key:
            raise HTTPException(status_code=401, detail="Invalid API key")

    def require_map(map_id: int) -> None:
        try:
            services.maps.require_map(map_id)
        except ValueError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc

    @app.get("/health")
    def health() -> dict[str, str]:
        """Summary: Health check endpoint.

        Importance: Supports uptime checks in local and cloud deployments.
        Alternatives: Use a metrics endpoint only.
        """

        return {"status": "ok"}

    @app.get("/categories")
    def list_categories() -> list[dict[str, Any]]:
        """Summary: List every business category in display order."""

        return [_category_payload(category) for category in get_all_categories()]

    @app.get("/categories/{category_id}")
    def get_category(category_id: str) -> dict[str, Any]:
        """Summary: Fetch one business category.

        Importance: Lets clients resolve stored category ids to icons and colors.
        Alternatives: Ship the registry to every client at build time.
        """

        category = get_category_by_id(category_id)
        if category is None:
            raise HTTPException(status_code=404, detail="Category not found")
        return _category_payload(category)

    @app.post("/classify")
    def classify(payload: ClassifyRequest) -> dict[str, Any]:
        """Summary: Classify a marker name and address.

        Importance: Lets clients preview a category before saving a marker.
        Alternatives: Classify only when markers are persisted.
        """

        return _result_payload(services.classification.classify(payload.name, payload.address))

    @app.post("/classify/batch")
    def classify_batch(payload: BatchClassifyRequest) -> list[dict[str, Any]]:
        """Summary: Classify several markers in order."""

        results = services.classification.classify_many(
            (item.name, item.address) for item in payload.items
        )
        return [_result_payload(result) for result in results]

    @app.post("/rename")
    def rename(payload: RenameRequest) -> dict[str, Any]:
        """Summary: Expand a business code in a marker name."""

        result = rename_business_marker(payload.name, payload.address, payload.lat, payload.lng)
        return {
            "originalName": result.original_name,
            "renamedName": result.renamed_name,
            "confidence": result.confidence,
            "method": result.method,
            "source": result.source,
        }

    @app.post("/maps", dependencies=[Depends(require_api_key)])
    def create_map(payload: MapCreateRequest) -> dict[str, Any]:
        """Summary: Create a map."""

        return {"id": services.maps.create_map(payload.name, payload.description)}

    @app.get("/maps", dependencies=[Depends(require_api_key)])
    def list_maps() -> list[dict[str, Any]]:
        """Summary: List stored maps."""

        return [
            {
                "id": stored.id,
                "name": stored.name,
                "description": stored.description,
                "created_at": stored.created_at,
            }
            for stored in services.maps.list_maps()
        ]

    @app.post("/maps/{map_id}/markers", dependencies=[Depends(require_api_key)])
    def add_marker(map_id: int, payload: MarkerCreateRequest) -> dict[str, Any]:
        """Summary: Classify and store a marker on a map.

        Importance: Primary marker creation path for the map editor.
        Alternatives: Store raw markers and classify in a batch job.
        """

        require_map(map_id)
        marker = Marker(
            name=payload.name,
            address=payload.address,
            lat=payload.lat,
            lng=payload.lng,
            type=payload.type,
            visible=payload.visible,
        )
        marker_id, result = services.markers.add_marker(map_id, marker)
        return {"id": marker_id, "businessCategory": result.to_marker_category()}

    @app.get("/maps/{map_id}/markers", dependencies=[Depends(require_api_key)])
    def list_markers(map_id: int) -> list[dict[str, Any]]:
        """Summary: List markers on a map with their categories."""

        require_map(map_id)
        return [_marker_payload(stored) for stored in services.markers.list_markers(map_id)]

    @app.post("/maps/{map_id}/import", dependencies=[Depends(require_api_key)])
    def import_markers(map_id: int, payload: MarkerImportRequest) -> dict[str, Any]:
        """Summary: Import markers from a JSON fixture file.

        Importance: Enables scripted bulk loads without a spreadsheet pipeline.
        Alternatives: Accept marker arrays in the request body only.
        """

        require_map(map_id)
        fixture_path = Path(payload.fixture_path)
        if not fixture_path.exists():
            raise HTTPException(status_code=404, detail="Fixture not found")
        markers = JsonMarkerSource(fixture_path).fetch(payload.limit)
        ids = services.markers.import_markers(
            map_id, markers, expand_codes=payload.expand_codes
        )
        return {"imported": len(ids)}

    @app.post("/maps/{map_id}/recategorize", dependencies=[Depends(require_api_key)])
    def recategorize(map_id: int) -> dict[str, Any]:
        """Summary: Reclassify every marker on a map."""

        require_map(map_id)
        return {"updated": services.markers.recategorize_map(map_id)}

    @app.get("/maps/{map_id}/stats", dependencies=[Depends(require_api_key)])
    def map_stats(map_id: int) -> list[dict[str, Any]]:
        """Summary: Return marker counts per category for a map."""

        require_map(map_id)
        return services.stats.category_breakdown(map_id)

    return app


def build_default_app() -> FastAPI:
    """Summary: Build the app from environment configuration.

    Importance: Serves as the factory target for ASGI servers.
    Alternatives: Build the app at import time.
    """

    return create_app(AppConfig.from_env())


def _category_payload(category: Category) -> dict[str, Any]:
    return {
        "id": category.id,
        "name": category.name,
        "icon": category.icon,
        "color": category.color,
        "mapColor": category.map_color,
    }


def _result_payload(result: ClassificationResult) -> dict[str, Any]:
    return {
        "category": _category_payload(result.category),
        "confidence": result.confidence,
        "matchedTerm": result.matched_term,
    }


def _marker_payload(stored: StoredMarker) -> dict[str, Any]:
    category = get_category_by_id(stored.category_id)
    return {
        "id": stored.id,
        "map_id": stored.map_id,
        "name": stored.name,
        "address": stored.address,
        "lat": stored.lat,
        "lng": stored.lng,
        "type": stored.type,
        "visible": stored.visible,
        "businessCategory": {
            "id": stored.category_id,
            "name": category.name if category else stored.category_id,
            "icon": category.icon if category else "",
            "color": category.color if category else "",
            "confidence": stored.confidence,
            "matchedTerm": stored.matched_term,
        },
    }

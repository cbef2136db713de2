"""Summary: SQLite storage implementation for bizdetect.

Importance: Provides local-first persistence for maps and categorized markers.
Alternatives: Use a hosted document database immediately.
"""

from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Iterator

from bizdetect.models import ClassificationResult, MapRecord, Marker


@dataclass(frozen=True)
class StoredMap:
    """Summary: Map record with database identifier.

    Importance: Allows markers to reference the map that owns them.
    Alternatives: Use map names as natural keys.
    """

    id: int
    name: str
    description: str | None
    created_at: str


@dataclass(frozen=True)
class StoredMarker:
    """Summary: Marker record with its attached business category.

    Importance: Lets maps render icons and colors without reclassifying.
    Alternatives: Classify markers on every read.
    """

    id: int
    map_id: int
    name: str
    address: str
    lat: float
    lng: float
    type: str
    visible: bool
    category_id: str
    confidence: int
    matched_term: str
    created_at: str
    updated_at: str


_MARKER_COLUMNS = (
    "id, map_id, name, address, lat, lng, type, visible, "
    "category_id, confidence, matched_term, created_at, updated_at"
)


class SqliteStore:
    """Summary: SQLite-backed storage for maps and markers.

    Importance: Enables local-first persistence with no extra services.
    Alternatives: Use Postgres and SQLAlchemy from day one.
    """

    def __init__(self, db_path: str) -> None:
        self._db_path = Path(db_path)

    def initialize(self) -> None:
        """Summary: Create tables if they do not exist.

        Importance: Ensures the database is ready before the first marker is saved.
        Alternatives: Run migrations using a dedicated migration tool.
        """

        with self._connection() as connection:
            cursor = connection.cursor()
            cursor.execute(
                """
                CREATE TABLE IF NOT EXISTS maps (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    name TEXT NOT NULL,
                    description TEXT,
                    created_at TEXT NOT NULL
                )
                """
            )
            cursor.execute(
                """
                CREATE TABLE IF NOT EXISTS markers (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    map_id INTEGER NOT NULL,
                    name TEXT NOT NULL,
                    address TEXT NOT NULL,
                    lat REAL NOT NULL,
                    lng REAL NOT NULL,
                    type TEXT NOT NULL,
                    visible INTEGER NOT NULL,
                    category_id TEXT NOT NULL,
                    confidence INTEGER NOT NULL,
                    matched_term TEXT NOT NULL,
                    created_at TEXT NOT NULL,
                    updated_at TEXT NOT NULL
                )
                """
            )
            cursor.execute(
                "CREATE INDEX IF NOT EXISTS idx_markers_map_id ON markers (map_id)"
            )
            connection.commit()

    def create_map(self, map_record: MapRecord) -> int:
        """Summary: Persist a map and return its ID.

        Importance: Maps group markers for listing, stats, and recategorization.
        Alternatives: Store markers in a single global collection.
        """

        with self._connection() as connection:
            cursor = connection.cursor()
            cursor.execute(
                "INSERT INTO maps (name, description, created_at) VALUES (?, ?, ?)",
                (map_record.name, map_record.description, _now()),
            )
            connection.commit()
            return int(cursor.lastrowid)

    def list_maps(self) -> list[StoredMap]:
        """Summary: List all maps in creation order."""

        with self._connection() as connection:
            cursor = connection.cursor()
            cursor.execute("SELECT id, name, description, created_at FROM maps ORDER BY id")
            return [StoredMap(*row) for row in cursor.fetchall()]

    def get_map(self, map_id: int) -> StoredMap | None:
        """Summary: Fetch a map by ID.

        Importance: Lets services reject markers for unknown maps.
        Alternatives: Rely on foreign key constraints only.
        """

        with self._connection() as connection:
            cursor = connection.cursor()
            cursor.execute(
                "SELECT id, name, description, created_at FROM maps WHERE id = ?", (map_id,)
            )
            row = cursor.fetchone()
        return StoredMap(*row) if row else None

    def add_marker(self, map_id: int, marker: Marker, result: ClassificationResult) -> int:
        """Summary: Persist a marker together with its classification.

        Importance: Stores the category once so map rendering stays cheap.
        Alternatives: Store only the raw marker and classify on read.
        """

        if self.get_map(map_id) is None:
            raise ValueError(f"Map {map_id} not found")
        timestamp = _now()
        with self._connection() as connection:
            cursor = connection.cursor()
            cursor.execute(
                """
                INSERT INTO markers (
                    map_id, name, address, lat, lng, type, visible,
                    category_id, confidence, matched_term, created_at, updated_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    map_id,
                    marker.name,
                    marker.address,
                    marker.lat,
                    marker.lng,
                    marker.type,
                    int(marker.visible),
                    result.category.id,
                    result.confidence,
                    result.matched_term,
                    timestamp,
                    timestamp,
                ),
            )
            connection.commit()
            return int(cursor.lastrowid)

    def list_markers(self, map_id: int) -> list[StoredMarker]:
        """Summary: List markers for a map in insertion order."""

        with self._connection() as connection:
            cursor = connection.cursor()
            cursor.execute(
                f"SELECT {_MARKER_COLUMNS} FROM markers WHERE map_id = ? ORDER BY id",
                (map_id,),
            )
            return [_row_to_marker(row) for row in cursor.fetchall()]

    def get_marker(self, marker_id: int) -> StoredMarker | None:
        """Summary: Fetch a single marker by ID."""

        with self._connection() as connection:
            cursor = connection.cursor()
            cursor.execute(f"SELECT {_MARKER_COLUMNS} FROM markers WHERE id = ?", (marker_id,))
            row = cursor.fetchone()
        return _row_to_marker(row) if row else None

    def update_marker_category(self, marker_id: int, result: ClassificationResult) -> bool:
        """Summary: Replace the stored classification for a marker.

        Importance: Supports recategorization after dictionary updates.
        Alternatives: Delete and reinsert the marker.
        """

        with self._connection() as connection:
            cursor = connection.cursor()
            cursor.execute(
                """
                UPDATE markers
                SET category_id = ?, confidence = ?, matched_term = ?, updated_at = ?
                WHERE id = ?
                """,
                (result.category.id, result.confidence, result.matched_term, _now(), marker_id),
            )
            connection.commit()
            return cursor.rowcount > 0

    def category_counts(self, map_id: int) -> dict[str, int]:
        """Summary: Count markers per category for a map.

        Importance: Powers map legends and category stats.
        Alternatives: Count markers client-side after listing them.
        """

        with self._connection() as connection:
            cursor = connection.cursor()
            cursor.execute(
                "SELECT category_id, COUNT(*) FROM markers WHERE map_id = ? GROUP BY category_id",
                (map_id,),
            )
            return {str(row[0]): int(row[1]) for row in cursor.fetchall()}

    @contextmanager
    def _connection(self) -> Iterator[sqlite3.Connection]:
        """Summary: Context manager for SQLite connections.

        Importance: Ensures connections are closed cleanly after use.
        Alternatives: Keep a single long-lived connection.
        """

        connection = sqlite3.connect(self._db_path)
        try:
            yield connection
        finally:
            connection.close()


def _row_to_marker(row: tuple[Any, ...]) -> StoredMarker:
    return StoredMarker(
        id=int(row[0]),
        map_id=int(row[1]),
        name=row[2],
        address=row[3],
        lat=float(row[4]),
        lng=float(row[5]),
        type=row[6],
        visible=bool(row[7]),
        category_id=row[8],
        confidence=int(row[9]),
        matched_term=row[10],
        created_at=row[11],
        updated_at=row[12],
    )


def _now() -> str:
    return datetime.utcnow().isoformat()

"""Summary: Application configuration for bizdetect.

Importance: Centralizes environment, .env, and config defaults for consistent behavior.
Alternatives: Use a dedicated settings library like Pydantic Settings.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class AppConfig:
    """Summary: Holds configuration values for storage, API, and classifier tuning.

    Importance: Ensures all services derive settings from a single source of truth.
    Alternatives: Store settings in a shared config file and parse at startup.
    """

    db_path: str
    api_host: str
    api_port: int
    api_key: str
    log_level: str
    fuzzy_threshold: float
    partial_match_discount: float
    partial_token_min_length: int

    @staticmethod
    def from_env() -> "AppConfig":
        """Summary: Build configuration from defaults, .env, and environment.

        Importance: Keeps all variables defined in config defaults while allowing overrides.
        Alternatives: Parse only environment variables without a defaults file.
        """

        defaults = load_defaults(Path("config") / "defaults.json")
        load_dotenv(Path(".env"))
        return AppConfig(
            db_path=os.getenv("BIZDETECT_DB_PATH", defaults["db_path"]),
            api_host=os.getenv("BIZDETECT_API_HOST", defaults["api_host"]),
            api_port=int(os.getenv("BIZDETECT_API_PORT", defaults["api_port"])),
            api_key=os.getenv("BIZDETECT_API_KEY", defaults["api_key"]),
            log_level=os.getenv("BIZDETECT_LOG_LEVEL", defaults["log_level"]).upper(),
            fuzzy_threshold=_bounded_float(
                "fuzzy_threshold",
                os.getenv("BIZDETECT_FUZZY_THRESHOLD", defaults["fuzzy_threshold"]),
            ),
            partial_match_discount=_bounded_float(
                "partial_match_discount",
                os.getenv("BIZDETECT_PARTIAL_MATCH_DISCOUNT", defaults["partial_match_discount"]),
            ),
            partial_token_min_length=int(
                os.getenv(
                    "BIZDETECT_PARTIAL_TOKEN_MIN_LENGTH", defaults["partial_token_min_length"]
                )
            ),
        )


def load_defaults(path: Path) -> dict[str, Any]:
    """Summary: Load configuration defaults from JSON.

    Importance: Ensures all variables exist in a single config file.
    Alternatives: Inline defaults in the AppConfig initializer.
    """

    if not path.exists():
        raise FileNotFoundError(f"Defaults file not found: {path}")
    return json.loads(path.read_text(encoding="utf-8"))


def load_dotenv(path: Path) -> None:
    """Summary: Load key-value pairs from a .env file into the environment.

    Importance: Keeps secrets out of code while supporting local workflows.
    Alternatives: Use python-dotenv or OS-specific secret stores.
    """

    if not path.exists():
        return
    for raw_line in path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        os.environ.setdefault(key.strip(), value.strip())


def _bounded_float(name: str, raw: Any) -> float:
    value = float(raw)
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"{name} must be between 0 and 1, got {value}")
    return value

"""Summary: Tests for configuration loading.

Importance: Ensures defaults, .env, and environment overrides behave correctly.
Alternatives: Validate configuration manually during runtime.
"""

from __future__ import annotations

import json
import os
from pathlib import Path

import pytest

from bizdetect.config import AppConfig, load_defaults, load_dotenv


DEFAULTS = {
    "db_path": "test.db",
    "api_host": "127.0.0.1",
    "api_port": "8000",
    "api_key": "",
    "log_level": "info",
    "fuzzy_threshold": "0.7",
    "partial_match_discount": "0.8",
    "partial_token_min_length": "3",
}


def _write_defaults(root: Path) -> None:
    (root / "config").mkdir()
    (root / "config" / "defaults.json").write_text(json.dumps(DEFAULTS), encoding="utf-8")


def test_load_defaults_reads_json(tmp_path: Path) -> None:
    """Summary: Verify defaults are parsed from JSON.

    Importance: Confirms config file is the source of truth for variables.
    Alternatives: Hardcode defaults in the test.
    """

    defaults_path = tmp_path / "defaults.json"
    defaults_path.write_text("{\"db_path\": \"test.db\"}", encoding="utf-8")
    defaults = load_defaults(defaults_path)
    assert defaults["db_path"] == "test.db"


def test_load_defaults_requires_file(tmp_path: Path) -> None:
    """Summary: Fail when the defaults file is missing."""

    with pytest.raises(FileNotFoundError):
        load_defaults(tmp_path / "missing.json")


def test_load_dotenv_sets_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Summary: Ensure .env values populate environment variables.

    Importance: Validates local secret loading without external tools.
    Alternatives: Assume OS environment is always set.
    """

    env_path = tmp_path / ".env"
    env_path.write_text("# comment\nBIZDETECT_API_KEY=secret\n", encoding="utf-8")
    monkeypatch.delenv("BIZDETECT_API_KEY", raising=False)
    load_dotenv(env_path)
    assert os.getenv("BIZDETECT_API_KEY") == "secret"
    monkeypatch.delenv("BIZDETECT_API_KEY", raising=False)


def test_app_config_uses_defaults(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Summary: Verify AppConfig honors defaults when env is absent.

    Importance: Confirms config file remains the baseline for variables.
    Alternatives: Inline defaults directly in the AppConfig class.
    """

    _write_defaults(tmp_path)
    monkeypatch.chdir(tmp_path)
    for key in DEFAULTS:
        monkeypatch.delenv(f"BIZDETECT_{key.upper()}", raising=False)
    config = AppConfig.from_env()
    assert config.db_path == "test.db"
    assert config.api_port == 8000
    assert config.log_level == "INFO"
    assert config.fuzzy_threshold == 0.7
    assert config.partial_match_discount == 0.8
    assert config.partial_token_min_length == 3


def test_app_config_env_overrides(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Summary: Verify environment variables override defaults.

    Importance: Allows per-deployment tuning without editing files.
    Alternatives: Require editing defaults.json for every change.
    """

    _write_defaults(tmp_path)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("BIZDETECT_DB_PATH", "other.db")
    monkeypatch.setenv("BIZDETECT_FUZZY_THRESHOLD", "0.85")
    config = AppConfig.from_env()
    assert config.db_path == "other.db"
    assert config.fuzzy_threshold == 0.85


def test_app_config_rejects_out_of_range_threshold(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Summary: Reject thresholds outside 0 and 1."""

    _write_defaults(tmp_path)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("BIZDETECT_PARTIAL_MATCH_DISCOUNT", "1.5")
    with pytest.raises(ValueError):
        AppConfig.from_env()

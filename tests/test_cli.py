"""Summary: Tests for the command-line interface.

Importance: Ensures CLI commands wire into the same services as the API.
Alternatives: Exercise the CLI manually.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from bizdetect.cli import build_parser, run_cli


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    (tmp_path / "config").mkdir()
    (tmp_path / "config" / "defaults.json").write_text(
        json.dumps(
            {
                "db_path": str(tmp_path / "cli.db"),
                "api_host": "127.0.0.1",
                "api_port": "8000",
                "api_key": "",
                "log_level": "WARNING",
                "fuzzy_threshold": "0.7",
                "partial_match_discount": "0.8",
                "partial_token_min_length": "3",
            }
        ),
        encoding="utf-8",
    )
    monkeypatch.chdir(tmp_path)
    for key in ("DB_PATH", "API_KEY", "LOG_LEVEL", "FUZZY_THRESHOLD"):
        monkeypatch.delenv(f"BIZDETECT_{key}", raising=False)
    return tmp_path


def test_parser_requires_command() -> None:
    """Summary: Reject invocations without a subcommand."""

    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_cli_classify(workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Summary: Print a classification for a business name.

    Importance: Confirms quick lookups work from the terminal.
    Alternatives: Use the HTTP API for every lookup.
    """

    run_cli(["classify", "Joe's Bistro"])
    output = capsys.readouterr().out
    assert "restaurant" in output
    assert "confidence=80" in output


def test_cli_map_workflow(workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Summary: Create a map, import markers, and print stats.

    Importance: Exercises the local bulk import path end to end.
    Alternatives: Test services directly only.
    """

    fixture = workdir / "markers.json"
    fixture.write_text(
        json.dumps(
            [
                {"name": "Starbucks", "address": "", "lat": 45.5, "lng": -73.57},
                {"name": "IGA", "address": "", "lat": 45.5, "lng": -73.56},
            ]
        ),
        encoding="utf-8",
    )
    run_cli(["create-map", "Downtown"])
    run_cli(["import-markers", "1", "--fixture", str(fixture)])
    run_cli(["add-marker", "1", "Pharmacie", "45.5", "-73.55"])
    run_cli(["stats", "1"])
    output = capsys.readouterr().out
    assert "Created map 1 (Downtown)." in output
    assert "Imported 2 markers." in output
    assert "as pharmacy (100)" in output
    assert "grocery: 1" in output
    assert "coffee: 1" in output


def test_cli_rename_and_categories(workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Summary: Print expanded codes and the category list."""

    run_cli(["rename", "FM 301"])
    run_cli(["list-categories"])
    output = capsys.readouterr().out
    assert "Familiprix [pattern, 95]" in output
    assert "farmers_market: Farmers Market / Marché Fermier" in output


def test_cli_classify_skips_database(workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Summary: Classify without creating the SQLite file."""

    run_cli(["classify", "Starbucks"])
    assert "coffee" in capsys.readouterr().out
    assert not (workdir / "cli.db").exists()


def test_cli_import_expands_codes(workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Summary: Expand store codes during import when requested.

    Importance: Makes code expansion reachable from the bulk import path.
    Alternatives: Run rename separately for every marker.
    """

    fixture = workdir / "codes.json"
    fixture.write_text(
        json.dumps([{"name": "FM 301", "address": "Laval", "lat": 45.57, "lng": -73.69}]),
        encoding="utf-8",
    )
    run_cli(["create-map", "Codes"])
    run_cli(["import-markers", "1", "--fixture", str(fixture), "--expand-codes"])
    run_cli(["list-markers", "1"])
    output = capsys.readouterr().out
    assert "Imported 1 markers." in output
    assert "Familiprix [pharmacy 95]" in output

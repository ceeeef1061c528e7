"""Tests for the command-line entry point."""

from __future__ import annotations

import json
import sys

import cli


def test_cli_prints_day_events_json(monkeypatch, capsys) -> None:
    monkeypatch.delenv("SOLAR_HORIZON_ALTITUDE", raising=False)
    monkeypatch.setattr(sys, "argv", ["cli.py", "2015-07-01", "37.7749", "-122.4194"])
    cli.main()
    data = json.loads(capsys.readouterr().out)
    assert set(data) == {
        "date",
        "latitude",
        "longitude",
        "approximate_transit",
        "transit",
        "sunrise",
        "sunset",
    }
    assert data["date"] == "2015-07-01"
    assert data["latitude"] == 37.7749
    assert 0.0 <= data["approximate_transit"] < 1.0
    # UT timestamps; San Francisco's sunset falls after midnight UT
    assert data["sunrise"].startswith("2015-07-01T12:")
    assert data["transit"].startswith("2015-07-01T20:")
    assert data["sunset"].startswith("2015-07-02T03:")


def test_cli_polar_day_has_no_sunrise(monkeypatch, capsys) -> None:
    monkeypatch.setattr(sys, "argv", ["cli.py", "2015-06-21", "80.0", "15.0"])
    cli.main()
    data = json.loads(capsys.readouterr().out)
    assert data["sunrise"] is None
    assert data["sunset"] is None
    assert data["transit"] is not None

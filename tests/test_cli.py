"""Tests for the command-line entry point."""

import json

from main import main


def test_cli_prints_json(capsys):
    main(["jaipur", "--days", "4", "--pref", "heritage", "--format", "json"])
    data = json.loads(capsys.readouterr().out)
    assert data["destination"] == "Jaipur"
    assert data["itinerary"][3]["activity"] == "Tour the City Palace"


def test_cli_lists_destinations(capsys):
    main(["--list"])
    out = capsys.readouterr().out
    assert "Kerala" in out
    assert "3,500 per day" in out


def test_cli_writes_html(tmp_path, capsys):
    target = tmp_path / "plan.html"
    main(["goa", "--days", "1", "--pref", "adventure", "--format", "html", "--output", str(target)])
    assert "Water sports at Baga" in target.read_text(encoding="utf-8")
    assert "Itinerary saved to" in capsys.readouterr().out

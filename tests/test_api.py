"""Tests for the HTTP endpoints."""

from unittest.mock import patch

from fastapi.testclient import TestClient

from wandernow.api import app, settings


client = TestClient(app)


def test_health():
    assert client.get("/health").json() == {"status": "ok"}


def test_list_destinations():
    names = [d["name"] for d in client.get("/destinations").json()]
    assert names == ["Delhi", "Jaipur", "Goa", "Kerala"]


def test_create_itinerary():
    resp = client.post(
        "/itinerary",
        json={"destination": "JAIPUR", "days": 3, "preferences": ["heritage", "nightlife"]},
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["destination"] == "Jaipur"
    assert data["cost_per_day"] == 2800
    assert data["total_cost"] == 8400
    assert len(data["itinerary"]) == 3


def test_create_itinerary_accepts_string_days_and_defaults():
    data = client.post("/itinerary", json={"destination": "Atlantis", "days": "two"}).json()
    assert data["destination"] == "Delhi"
    assert data["days"] == 0
    assert data["itinerary"] == []
    assert data["preferences"] == ["heritage"]


def test_create_itinerary_rejects_unknown_preference():
    resp = client.post("/itinerary", json={"destination": "Goa", "days": 1, "preferences": ["beaches"]})
    assert resp.status_code == 422


@patch("wandernow.api.generate_itinerary", side_effect=ValueError("Destination dataset is empty."))
def test_create_itinerary_maps_value_error(_mock_generate):
    resp = client.post("/itinerary", json={"destination": "Goa", "days": 1})
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Destination dataset is empty."


def test_index_serves_form():
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/html")
    assert 'id="generateBtn"' in resp.text


def test_plan_page_renders_itinerary():
    resp = client.get("/plan", params={"dest": "jaipur", "days": "2", "pref": ["heritage", "nightlife"]})
    assert resp.status_code == 200
    symbol = settings.currency_symbol
    assert "Suggested itinerary for Jaipur" in resp.text
    assert "Evening at Chokhi Dhani" in resp.text
    assert f"{symbol}5,600" in resp.text
    assert 'value="nightlife" checked' in resp.text


def test_plan_page_caps_day_count():
    resp = client.get("/plan", params={"dest": "goa", "days": "300000"})
    assert resp.status_code == 200
    assert resp.text.count('class="itinerary-day"') == settings.max_days


def test_create_itinerary_caps_day_count():
    data = client.post("/itinerary", json={"destination": "Goa", "days": "99999999999999999999"}).json()
    assert data["days"] == settings.max_days
    assert len(data["itinerary"]) == settings.max_days

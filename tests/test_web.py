"""Tests for the Flask JSON API."""

import pytest

from unicorn_clicker.engine.clock import VirtualClock
from unicorn_clicker.web import server


@pytest.fixture
def clock():
    return VirtualClock()


@pytest.fixture
def client(clock):
    server.reset_session(clock)
    server.app.config["TESTING"] = True
    with server.app.test_client() as c:
        yield c
    server.reset_session()


def test_state_starts_fresh_with_intro(client):
    data = client.get("/api/state").get_json()
    assert data["tap_count"] == 0
    assert data["banner"] == "Starting Level: Cloudy ☁️"
    assert data["rain"]["symbol"] == "☁️"


def test_tap_increments_and_reports_events(client):
    for _ in range(19):
        client.post("/api/action/tap")
    data = client.post("/api/action/tap").get_json()
    assert data["tap_count"] == 20
    assert data["events"] == [
        {"type": "level_entered", "index": 1, "name": "Rainbow Rider", "badge": "🌈", "initial": False}
    ]


def test_reset_route(client):
    client.post("/api/action/tap")
    data = client.post("/api/action/reset").get_json()
    assert data["tap_count"] == 0
    assert data["events"][0]["initial"] is True


def test_timers_catch_up_between_requests(client, clock):
    client.get("/api/state")
    clock.advance(2.0)
    data = client.get("/api/state").get_json()
    assert data["banner"] is None
    assert data["rain"] is not None


def test_tap_requires_post(client):
    assert client.get("/api/action/tap").status_code == 405


def test_index_page(client):
    res = client.get("/")
    assert res.status_code == 200
    assert "Unicorn Clicker" in res.get_data(as_text=True)

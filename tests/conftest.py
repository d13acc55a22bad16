"""Pytest configuration for ticketing API tests."""

import json
from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from ticketing_api.main import app
from ticketing_api.schemas import Event, Spot, SpotStatus
from ticketing_api.store import CatalogStore, get_store


def _make_event(event_id, name="Event"):
    return Event(
        id=event_id,
        name=f"{name} {event_id}",
        organization="Full Cycle",
        date=datetime(2024, 3, 15, 19, 0, 0),
        price=15000,
        rating="L",
        image_url=f"https://images.example.com/events/{event_id}.png",
        created_at=datetime(2024, 1, 10, 12, 0, 0),
        location="Sao Paulo - SP",
    )


@pytest.fixture
def store():
    """Event 1 has A1..A3 (A2 reserved), event 2 has its own A1, event 3 has no spots."""
    events = [_make_event(1), _make_event(2), _make_event(3)]
    spots = [
        Spot(id=1, name="A1", status=SpotStatus.AVAILABLE, event_id=1),
        Spot(id=2, name="A2", status=SpotStatus.RESERVED, event_id=1),
        Spot(id=3, name="A3", status=SpotStatus.AVAILABLE, event_id=1),
        Spot(id=4, name="A1", status=SpotStatus.AVAILABLE, event_id=2),
    ]
    return CatalogStore(events, spots)


@pytest.fixture
def client(store):
    """Test client wired to the fixture store instead of the startup snapshot."""
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def catalog_document():
    return {
        "events": [
            {
                "id": 1,
                "name": "Desenvolvedor Full Cycle Live",
                "organization": "Full Cycle",
                "date": "2024-03-15T19:00:00",
                "price": 15000,
                "rating": "L",
                "image_url": "https://images.example.com/events/1.png",
                "created_at": "2024-01-10T12:00:00",
                "location": "Sao Paulo - SP",
            }
        ],
        "spots": [
            {"id": 1, "name": "A1", "status": "available", "event_id": 1},
            {"id": 2, "name": "A2", "status": "reserved", "event_id": 1},
        ],
    }


@pytest.fixture
def write_catalog(tmp_path):
    """Write a catalog document to a temporary file and return its path."""
    def _write(document):
        path = tmp_path / "db.json"
        if isinstance(document, str):
            path.write_text(document, encoding="utf-8")
        else:
            path.write_text(json.dumps(document), encoding="utf-8")
        return str(path)
    return _write


@pytest.fixture
def make_event():
    """Factory for valid events."""
    return _make_event

import logging
import threading
from contextlib import contextmanager
from typing import Dict, Iterator, List, Optional, Tuple

from fastapi import Request
from pydantic import ValidationError

from ticketing_api.exceptions import StartupDataError
from ticketing_api.schemas import CatalogSnapshot, Event, Spot

logger = logging.getLogger(__name__)

SpotKey = Tuple[int, str]


class ReadWriteLock:
    """Many readers or one writer. A waiting writer holds off new readers."""

    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._waiting_writers = 0

    @contextmanager
    def read_locked(self) -> Iterator[None]:
        with self._cond:
            while self._writer or self._waiting_writers:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if not self._readers:
                    self._cond.notify_all()

    @contextmanager
    def write_locked(self) -> Iterator[None]:
        with self._cond:
            self._waiting_writers += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._waiting_writers -= 1
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


class CatalogStore:
    """
    In-memory events and spots, loaded once at startup.
    Events are never mutated; spot status is changed only inside spots_exclusive().
    """

    def __init__(self, events: List[Event], spots: List[Spot]):
        self._events = list(events)
        self._events_by_id: Dict[int, Event] = {event.id: event for event in self._events}
        self._spots = list(spots)
        self._spots_by_key: Dict[SpotKey, Spot] = {
            (spot.event_id, spot.name): spot for spot in self._spots
        }
        self._events_lock = ReadWriteLock()
        self._spots_lock = ReadWriteLock()

    def list_events(self) -> List[Event]:
        with self._events_lock.read_locked():
            return list(self._events)

    def get_event(self, event_id: int) -> Optional[Event]:
        with self._events_lock.read_locked():
            return self._events_by_id.get(event_id)

    def list_spots(self, event_id: int) -> List[Spot]:
        with self._spots_lock.read_locked():
            return [spot.model_copy() for spot in self._spots if spot.event_id == event_id]

    def get_spot(self, event_id: int, name: str) -> Optional[Spot]:
        with self._spots_lock.read_locked():
            spot = self._spots_by_key.get((event_id, name))
            return spot.model_copy() if spot is not None else None

    @contextmanager
    def spots_exclusive(self) -> Iterator[Dict[SpotKey, Spot]]:
        """Yield the live spots keyed by (event_id, name) with every other reader and writer excluded."""
        with self._spots_lock.write_locked():
            yield self._spots_by_key


def load_catalog(path: str) -> CatalogStore:
    logger.info(f"Loading catalog snapshot from {path}...")
    try:
        with open(path, encoding="utf-8") as f:
            raw = f.read()
    except OSError as e:
        raise StartupDataError(f"Could not read catalog file {path}: {e}") from e

    try:
        snapshot = CatalogSnapshot.model_validate_json(raw)
    except ValidationError as e:
        raise StartupDataError(f"Malformed catalog file {path}: {e}") from e

    _check_unique([event.id for event in snapshot.events], "event id")
    _check_unique([spot.id for spot in snapshot.spots], "spot id")
    _check_unique([(spot.event_id, spot.name) for spot in snapshot.spots], "spot name for event")

    event_ids = {event.id for event in snapshot.events}
    for spot in snapshot.spots:
        if spot.event_id not in event_ids:
            logger.warning(f"Spot {spot.id} ({spot.name}) references unknown event {spot.event_id}.")

    logger.info(f"Loaded {len(snapshot.events)} events and {len(snapshot.spots)} spots.")
    return CatalogStore(snapshot.events, snapshot.spots)


def _check_unique(values, label: str) -> None:
    seen = set()
    for value in values:
        if value in seen:
            raise StartupDataError(f"Duplicate {label} in catalog: {value}")
        seen.add(value)


# 카탈로그 스토어 의존성
def get_store(request: Request) -> CatalogStore:
    return request.app.state.store

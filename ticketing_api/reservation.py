import logging
from typing import Sequence

from opentelemetry import trace

from ticketing_api.exceptions import (
    DuplicateInRequest,
    MalformedRequestBody,
    SpotNotFound,
    SpotUnavailable,
)
from ticketing_api.schemas import SpotStatus
from ticketing_api.store import CatalogStore

logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)


def reserve_spots(store: CatalogStore, event_id: int, spot_names: Sequence[str]) -> None:
    """
    Reserve every named spot of an event, or none of them.

    The whole request is checked under the store's exclusive spot lock before
    anything is written: duplicates first, then existence and availability of
    each name in request order. The first offending name is reported.

    Raises:
        MalformedRequestBody: no spot names were given.
        DuplicateInRequest: a name appears twice in spot_names.
        SpotNotFound: the event has no spot with that name.
        SpotUnavailable: the spot is not available.
    """
    if not spot_names:
        raise MalformedRequestBody("At least one spot must be requested")

    with tracer.start_as_current_span("reserve_spots") as span:
        span.set_attribute("event.id", event_id)
        span.set_attribute("spots.count", len(spot_names))

        with store.spots_exclusive() as spots:
            seen = set()
            for name in spot_names:
                if name in seen:
                    logger.warning(f"Reservation for event {event_id} rejected: spot {name} requested twice.")
                    raise DuplicateInRequest(name)
                seen.add(name)

            to_reserve = []
            for name in spot_names:
                spot = spots.get((event_id, name))
                if spot is None:
                    logger.warning(f"Reservation for event {event_id} rejected: spot {name} not found.")
                    raise SpotNotFound(event_id, name)
                if spot.status != SpotStatus.AVAILABLE:
                    logger.warning(f"Reservation for event {event_id} rejected: spot {name} is {spot.status.value}.")
                    raise SpotUnavailable(name)
                to_reserve.append(spot)

            for spot in to_reserve:
                spot.status = SpotStatus.RESERVED

    logger.info(f"Reserved spots {list(spot_names)} for event {event_id}.")

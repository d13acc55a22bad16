from typing import List

from fastapi import APIRouter, Depends

from ticketing_api import crud, schemas
from ticketing_api.exceptions import EventNotFound
from ticketing_api.store import CatalogStore, get_store

router = APIRouter(
    prefix="/events",
    tags=["events"],
)

# ===============================
# Event Endpoints
# ===============================

@router.get("", response_model=List[schemas.Event])
def read_events(store: CatalogStore = Depends(get_store)):
    return crud.get_events(store)

@router.get("/{event_id}", response_model=schemas.Event)
def read_event(event_id: int, store: CatalogStore = Depends(get_store)):
    event = crud.get_event(store, event_id=event_id)
    if event is None:
        raise EventNotFound(event_id)
    return event

# ===============================
# Spot Endpoints
# ===============================

@router.get("/{event_id}/spots", response_model=List[schemas.Spot])
def read_spots_for_event(event_id: int, store: CatalogStore = Depends(get_store)):
    return crud.get_spots_by_event(store, event_id=event_id)

from fastapi import APIRouter, Depends, status

from ticketing_api import schemas
from ticketing_api.reservation import reserve_spots
from ticketing_api.store import CatalogStore, get_store

router = APIRouter(
    prefix="/event",
    tags=["reservations"],
)

@router.post("/{event_id}/reserve", status_code=status.HTTP_204_NO_CONTENT)
def reserve_event_spots(
    event_id: int,
    reservation_request: schemas.ReserveSpotsRequest,
    store: CatalogStore = Depends(get_store),
):
    """
    Reserve a batch of spots for one event. All or nothing.
    예: {"spots": ["A1", "A2"]}
    """
    reserve_spots(store, event_id, reservation_request.spots)
    return

from typing import List, Optional

from ticketing_api.schemas import Event, Spot
from ticketing_api.store import CatalogStore

# ===============================
# Event Queries
# ===============================

def get_events(store: CatalogStore) -> List[Event]:
    return store.list_events()

def get_event(store: CatalogStore, event_id: int) -> Optional[Event]:
    return store.get_event(event_id)

# ===============================
# Spot Queries
# ===============================

def get_spots_by_event(store: CatalogStore, event_id: int) -> List[Spot]:
    # Unknown events yield an empty list, not an error.
    return store.list_spots(event_id)

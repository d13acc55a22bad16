import re
from datetime import datetime
from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, field_validator

DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"
DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}")

# ===============================
# Event Schemas
# ===============================

class Event(BaseModel):
    model_config = ConfigDict(frozen=True, strict=True)

    id: PositiveInt
    name: str
    organization: str
    date: datetime
    price: int
    rating: str
    image_url: str
    created_at: datetime
    location: str

    @field_validator("date", "created_at", mode="before")
    @classmethod
    def parse_local_datetime(cls, value):
        # Only the offset-free local form is accepted, e.g. 2024-03-15T19:00:00
        if isinstance(value, datetime):
            return value
        if not isinstance(value, str) or not DATE_PATTERN.fullmatch(value):
            raise ValueError(f"expected a date formatted as {DATE_FORMAT}, got {value!r}")
        return datetime.strptime(value, DATE_FORMAT)

# ===============================
# Spot Schemas
# ===============================

class SpotStatus(str, Enum):
    AVAILABLE = "available"
    RESERVED = "reserved"

class Spot(BaseModel):
    model_config = ConfigDict(strict=True, validate_assignment=True)

    id: PositiveInt
    name: str
    # Lax so the snapshot's plain strings map onto the enum.
    status: SpotStatus = Field(strict=False)
    event_id: PositiveInt

# ===============================
# Reservation Schemas
# ===============================

class ReserveSpotsRequest(BaseModel):
    spots: List[str] = Field(min_length=1)

# ===============================
# Startup Snapshot
# ===============================

class CatalogSnapshot(BaseModel):
    model_config = ConfigDict(strict=True)

    events: List[Event]
    spots: List[Spot]

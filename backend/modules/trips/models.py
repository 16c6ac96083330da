"""
Trips module data models.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class TripStatus(str, Enum):
    """Trip lifecycle status. A trip moves active -> completed once."""

    ACTIVE = "active"
    COMPLETED = "completed"


class Trip(BaseModel):
    """A commuter journey as stored in the user_trips table."""

    id: int = Field(..., description="Trip ID")
    user_uid: str = Field(..., description="Owning account uid")
    from_location: str
    to_location: str
    route_name: Optional[str] = None
    transit_type: Optional[str] = Field(None, description="e.g. jeepney, bus, train")
    distance_km: Optional[float] = Field(None, ge=0)
    fare_paid: Optional[Decimal] = Field(None, ge=0)
    status: TripStatus = TripStatus.ACTIVE
    started_at: datetime
    completed_at: Optional[datetime] = None


class StartTripRequest(BaseModel):
    """Request to start a trip."""

    user_uid: str = Field(..., min_length=1, max_length=255)
    from_location: str = Field(..., min_length=1)
    to_location: str = Field(..., min_length=1)
    route_name: Optional[str] = None
    transit_type: Optional[str] = Field(None, max_length=50)
    distance_km: Optional[float] = Field(None, ge=0)
    fare_paid: Optional[Decimal] = Field(None, ge=0)

    model_config = {"extra": "forbid"}

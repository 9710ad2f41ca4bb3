"""
Pydantic models for pickup bookings.

A booking links a user to a catalogue service with a pickup slot and
address.  Its ``status`` follows the ``BookingStatus`` lifecycle
enforced by ``BookingService``; ``rating`` can be attached once the
booking is completed.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from .service import ServiceRead


class BookingStatus(str, Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    COMPLETED = "completed"


class BookingCreate(BaseModel):
    """Schema for creating a booking."""

    user_id: int = Field(..., examples=[1])
    service_id: int = Field(..., examples=[1])
    email: str = Field(..., examples=["alice@example.com"])
    pickup_date: str = Field(..., examples=["2026-10-21"])
    pickup_time: str = Field(..., examples=["10:00"])
    address: str = Field(..., examples=["12 Lake Road"])


class BookingUpdate(BaseModel):
    """Schema for a partial booking update.

    Every field is optional; only the supplied ones are written.
    Providers send ``status`` to accept, reject or complete an order,
    customers send ``rating`` (usually together with
    ``status="completed"``) once the order is done.
    """

    status: Optional[BookingStatus] = None
    rating: Optional[int] = Field(default=None, ge=1, le=5, description="Rating from 1 to 5")
    payment_status: Optional[str] = None
    pickup_date: Optional[str] = None
    pickup_time: Optional[str] = None
    address: Optional[str] = None


class BookingRead(BaseModel):
    id: int
    user_id: int
    service_id: int
    email: str
    pickup_date: str
    pickup_time: str
    address: str
    status: BookingStatus
    payment_status: str
    rating: Optional[int] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    model_config = {
        "from_attributes": True,
    }


class BookingUser(BaseModel):
    name: str
    email: str


class BookingWithService(BookingRead):
    service: Optional[ServiceRead] = None


class BookingDetail(BookingWithService):
    """Booking as shown on the provider dashboard."""

    user: Optional[BookingUser] = None


class BookingResponse(BaseModel):
    success: bool = True
    booking: BookingRead

"""
Booking endpoints.

Customers create bookings and list their own by email; the provider
dashboard lists every booking and moves orders through the
``pending -> accepted/rejected -> completed`` lifecycle with PATCH.
Business rules live in ``BookingService``; these handlers only map
its errors to HTTP status codes.
"""

from typing import List

from fastapi import APIRouter, HTTPException, Path, status

from quickwash_api.app.schemas.booking import (
    BookingCreate,
    BookingDetail,
    BookingResponse,
    BookingUpdate,
    BookingWithService,
)
from quickwash_api.app.services.booking_service import (
    BookingNotFound,
    BookingService,
    InvalidTransition,
)


router = APIRouter()


@router.post("/bookings", response_model=BookingResponse)
async def create_booking(booking: BookingCreate) -> BookingResponse:
    """Book a pickup.  The customer earns 10 eco points."""
    try:
        created = await BookingService.create_booking(booking)
    except Exception as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
    return BookingResponse(success=True, booking=created)


@router.get("/bookings/{email}", response_model=List[BookingWithService])
async def list_user_bookings(
    email: str = Path(..., description="Email the bookings were made with"),
) -> List[BookingWithService]:
    """List a customer's bookings, newest first, with their services."""
    try:
        return await BookingService.list_user_bookings(email)
    except Exception as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))


@router.get("/bookings", response_model=List[BookingDetail])
async def list_all_bookings() -> List[BookingDetail]:
    """List every booking with its service and customer, newest first."""
    try:
        return await BookingService.list_all_bookings()
    except Exception as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))


@router.patch("/bookings/{booking_id}", response_model=BookingResponse)
async def update_booking(
    update: BookingUpdate,
    booking_id: int = Path(..., description="ID of the booking"),
) -> BookingResponse:
    """Partially update a booking.

    Returns 404 for an unknown booking and 409 when the status change
    or rating is not allowed from the booking's current state.  Sending
    ``status="completed"`` together with a rating earns the customer
    20 eco points.
    """
    try:
        updated = await BookingService.update_booking(booking_id, update)
    except BookingNotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except InvalidTransition as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
    return BookingResponse(success=True, booking=updated)

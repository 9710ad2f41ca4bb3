"""
Business logic for pickup bookings and eco point rewards.

The ``BookingService`` creates bookings, lists them for a customer or
for the provider dashboard, and applies partial updates.  Status
changes follow a fixed lifecycle::

    pending -> accepted -> completed
    pending -> rejected

and a rating can be attached once, to a completed booking.  Eco
points are awarded twice over a booking's life: ``BOOKING_POINTS`` when
it is created and ``COMPLETION_POINTS`` when an update both sets the
status to ``completed`` and supplies a rating.  In both cases the
booking write and the points write share one transaction.
"""

import logging
import sqlite3
from typing import Any, Dict, List, Optional

from quickwash_api.app.core.db import get_connection
from quickwash_api.app.schemas.booking import (
    BookingCreate,
    BookingDetail,
    BookingRead,
    BookingStatus,
    BookingUpdate,
    BookingUser,
    BookingWithService,
)
from quickwash_api.app.schemas.service import ServiceRead

logger = logging.getLogger(__name__)

BOOKING_POINTS = 10
COMPLETION_POINTS = 20

ALLOWED_TRANSITIONS: Dict[BookingStatus, frozenset] = {
    BookingStatus.PENDING: frozenset({BookingStatus.ACCEPTED, BookingStatus.REJECTED}),
    BookingStatus.ACCEPTED: frozenset({BookingStatus.COMPLETED}),
    BookingStatus.REJECTED: frozenset(),
    BookingStatus.COMPLETED: frozenset(),
}

BOOKING_COLUMNS = (
    "b.id, b.user_id, b.service_id, b.email, b.pickup_date, b.pickup_time, b.address, "
    "b.status, b.payment_status, b.rating, b.created_at, b.updated_at"
)
SERVICE_COLUMNS = (
    "s.id AS s_id, s.name AS s_name, s.price AS s_price, "
    "s.description AS s_description, s.icon AS s_icon"
)


class BookingNotFound(ValueError):
    """Raised when a booking id does not exist."""


class InvalidTransition(ValueError):
    """Raised when an update would break the booking lifecycle."""


def check_transition(current: BookingStatus, target: BookingStatus) -> None:
    """Raise ``InvalidTransition`` unless ``current -> target`` is allowed.

    Re‑stating the current status is accepted as a no‑op.
    """
    if target == current or target in ALLOWED_TRANSITIONS[current]:
        return
    raise InvalidTransition(
        f"Cannot change booking status from '{current.value}' to '{target.value}'"
    )


def check_update(current: BookingStatus, current_rating: Optional[int], updates: Dict[str, Any]) -> None:
    """Validate a partial update against the booking's current state."""
    target = BookingStatus(updates["status"]) if "status" in updates else current
    check_transition(current, target)
    if "rating" in updates:
        if target != BookingStatus.COMPLETED:
            raise InvalidTransition("Only completed bookings can be rated")
        if current_rating is not None:
            raise InvalidTransition("Booking has already been rated")


def _row_to_booking(row: sqlite3.Row) -> Dict[str, Any]:
    return {
        "id": row["id"],
        "user_id": row["user_id"],
        "service_id": row["service_id"],
        "email": row["email"],
        "pickup_date": row["pickup_date"],
        "pickup_time": row["pickup_time"],
        "address": row["address"],
        "status": row["status"],
        "payment_status": row["payment_status"],
        "rating": row["rating"],
        "created_at": row["created_at"],
        "updated_at": row["updated_at"],
    }


def _row_to_service(row: sqlite3.Row) -> Optional[ServiceRead]:
    if row["s_id"] is None:
        return None
    return ServiceRead(
        id=row["s_id"],
        name=row["s_name"],
        price=row["s_price"],
        description=row["s_description"],
        icon=row["s_icon"],
    )


def _award_points(cursor: sqlite3.Cursor, user_id: int, points: int) -> bool:
    """Add ``points`` to a user's eco_points on the caller's transaction.

    A missing user is logged and skipped; the caller's booking write
    still goes through.
    """
    cursor.execute(
        "UPDATE users SET eco_points = COALESCE(eco_points, 0) + ? WHERE id = ?",
        (points, user_id),
    )
    if cursor.rowcount == 0:
        logger.warning("Skipping %s eco points: user %s not found", points, user_id)
        return False
    logger.info("Awarded %s eco points to user %s", points, user_id)
    return True


class BookingService:
    """Service for creating, listing and updating bookings."""

    @classmethod
    async def create_booking(cls, data: BookingCreate) -> BookingRead:
        """Create a pending booking and award ``BOOKING_POINTS``.

        Payment is taken on the client, so ``payment_status`` is stored
        as ``completed`` straight away.
        """
        conn = get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                """
                INSERT INTO bookings
                    (user_id, service_id, email, pickup_date, pickup_time, address, status, payment_status)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    data.user_id,
                    data.service_id,
                    data.email,
                    data.pickup_date,
                    data.pickup_time,
                    data.address,
                    BookingStatus.PENDING.value,
                    "completed",
                ),
            )
            booking_id = cursor.lastrowid
            _award_points(cursor, data.user_id, BOOKING_POINTS)
            conn.commit()
            logger.info("Booking %s created for %s", booking_id, data.email)
            row = cursor.execute(
                f"SELECT {BOOKING_COLUMNS} FROM bookings b WHERE b.id = ?", (booking_id,)
            ).fetchone()
            return BookingRead(**_row_to_booking(row))
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    @classmethod
    async def list_user_bookings(cls, email: str) -> List[BookingWithService]:
        """List a customer's bookings, newest first, each with its service."""
        conn = get_connection()
        try:
            rows = conn.execute(
                f"""
                SELECT {BOOKING_COLUMNS}, {SERVICE_COLUMNS}
                FROM bookings b
                LEFT JOIN services s ON s.id = b.service_id
                WHERE b.email = ?
                ORDER BY b.created_at DESC, b.id DESC
                """,
                (email,),
            ).fetchall()
            return [
                BookingWithService(**_row_to_booking(row), service=_row_to_service(row))
                for row in rows
            ]
        finally:
            conn.close()

    @classmethod
    async def list_all_bookings(cls) -> List[BookingDetail]:
        """List every booking for the provider dashboard, newest first.

        Each booking embeds its service and the owning user's name and
        email.
        """
        conn = get_connection()
        try:
            rows = conn.execute(
                f"""
                SELECT {BOOKING_COLUMNS}, {SERVICE_COLUMNS},
                       u.name AS u_name, u.email AS u_email
                FROM bookings b
                LEFT JOIN services s ON s.id = b.service_id
                LEFT JOIN users u ON u.id = b.user_id
                ORDER BY b.created_at DESC, b.id DESC
                """
            ).fetchall()
            bookings: List[BookingDetail] = []
            for row in rows:
                user = None
                if row["u_email"] is not None:
                    user = BookingUser(name=row["u_name"], email=row["u_email"])
                bookings.append(
                    BookingDetail(
                        **_row_to_booking(row),
                        service=_row_to_service(row),
                        user=user,
                    )
                )
            return bookings
        finally:
            conn.close()

    @classmethod
    async def update_booking(cls, booking_id: int, update: BookingUpdate) -> BookingRead:
        """Apply a partial update and award completion points.

        The update is checked against the lifecycle first; an illegal
        status move or rating raises ``InvalidTransition`` and nothing
        is written.  When the update sets ``status`` to ``completed``
        and carries a rating, the owning user receives
        ``COMPLETION_POINTS`` in the same transaction.  Fields sent as
        ``null`` are ignored.
        """
        updates = {
            key: value
            for key, value in update.model_dump(exclude_unset=True, mode="json").items()
            if value is not None
        }
        conn = get_connection()
        try:
            cursor = conn.cursor()
            row = cursor.execute(
                f"SELECT {BOOKING_COLUMNS} FROM bookings b WHERE b.id = ?", (booking_id,)
            ).fetchone()
            if not row:
                raise BookingNotFound(f"Booking {booking_id} not found")
            check_update(BookingStatus(row["status"]), row["rating"], updates)

            if updates:
                assignments = ", ".join(f"{key} = ?" for key in updates)
                cursor.execute(
                    f"UPDATE bookings SET {assignments}, updated_at = CURRENT_TIMESTAMP WHERE id = ?",
                    (*updates.values(), booking_id),
                )
                if updates.get("status") and updates["status"] != row["status"]:
                    logger.info(
                        "Booking %s status %s -> %s", booking_id, row["status"], updates["status"]
                    )
                if updates.get("status") == BookingStatus.COMPLETED.value and "rating" in updates:
                    _award_points(cursor, row["user_id"], COMPLETION_POINTS)
                conn.commit()

            updated = cursor.execute(
                f"SELECT {BOOKING_COLUMNS} FROM bookings b WHERE b.id = ?", (booking_id,)
            ).fetchone()
            return BookingRead(**_row_to_booking(updated))
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

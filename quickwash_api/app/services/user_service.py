"""
Business logic for users.

Users sign up with an email and password, log in by verifying the
stored PBKDF2 hash and read their profile by email.  ``eco_points`` is
never written here; it only changes as a side effect of booking
events (see ``BookingService``).
"""

import logging
import sqlite3
from typing import Optional

from quickwash_api.app.core.db import get_connection
from quickwash_api.app.core.security import hash_password, verify_password
from quickwash_api.app.schemas.user import ImpactRead, UserCreate, UserRead

logger = logging.getLogger(__name__)

USER_COLUMNS = "id, name, email, role, address, eco_points, created_at"

# Litres of water saved per 10 eco points, and points per reward.
WATER_LITERS_PER_10_POINTS = 2.5
POINTS_PER_REWARD = 100


def _row_to_user(row: sqlite3.Row) -> UserRead:
    return UserRead(
        id=row["id"],
        name=row["name"],
        email=row["email"],
        role=row["role"],
        address=row["address"],
        eco_points=row["eco_points"] or 0,
        created_at=row["created_at"],
    )


class UserService:
    """Service for signup, login and profile lookups."""

    @classmethod
    async def create_user(cls, data: UserCreate) -> UserRead:
        """Create a new user and return it without the password.

        Raises ``sqlite3.IntegrityError`` when the email is already
        registered or the role is not one of ``customer``/``provider``.
        """
        logger.info("Registering user %s", data.email)
        conn = get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                "INSERT INTO users (name, email, password, role, address) VALUES (?, ?, ?, ?, ?)",
                (data.name, data.email, hash_password(data.password), data.role, data.address),
            )
            user_id = cursor.lastrowid
            conn.commit()
            row = cursor.execute(
                f"SELECT {USER_COLUMNS} FROM users WHERE id = ?", (user_id,)
            ).fetchone()
            return _row_to_user(row)
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    @classmethod
    async def authenticate(cls, email: str, password: str) -> Optional[UserRead]:
        """Return the user if ``password`` matches the stored hash, else ``None``."""
        conn = get_connection()
        try:
            row = conn.execute(
                f"SELECT {USER_COLUMNS}, password FROM users WHERE email = ?",
                (email,),
            ).fetchone()
        finally:
            conn.close()
        if not row:
            logger.info("Login failed for unknown email %s", email)
            return None
        if not verify_password(password, row["password"]):
            logger.info("Login failed for %s: wrong password", email)
            return None
        return _row_to_user(row)

    @classmethod
    async def get_user_by_email(cls, email: str) -> Optional[UserRead]:
        """Retrieve a user by email."""
        conn = get_connection()
        try:
            row = conn.execute(
                f"SELECT {USER_COLUMNS} FROM users WHERE email = ?", (email,)
            ).fetchone()
            return _row_to_user(row) if row else None
        finally:
            conn.close()

    @classmethod
    async def get_impact(cls, email: str) -> Optional[ImpactRead]:
        """Summarise the eco impact of a user's points.

        Every 10 points stand for 2.5 litres of water saved and every
        100 points unlock one reward.
        """
        user = await cls.get_user_by_email(email)
        if not user:
            return None
        points = user.eco_points
        return ImpactRead(
            email=user.email,
            eco_points=points,
            # Half rounds up: 10 points -> 3 litres.
            water_saved_liters=int(points / 10 * WATER_LITERS_PER_10_POINTS + 0.5),
            rewards_available=points // POINTS_PER_REWARD,
        )

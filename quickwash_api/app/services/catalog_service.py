"""
Business logic for the laundry service catalogue.

The catalogue is read‑only through the API.  Rows are seeded
out‑of‑band with ``seed_default_services`` (used by the
``seed_services.py`` script).
"""

import logging
from typing import List

from quickwash_api.app.core.db import get_connection
from quickwash_api.app.schemas.service import ServiceRead

logger = logging.getLogger(__name__)

DEFAULT_SERVICES: list[dict] = [
    {
        "name": "Laundry",
        "price": 199,
        "description": "Wash and fold, picked up and delivered back.",
        "icon": "shirt",
    },
    {
        "name": "Ironing",
        "price": 99,
        "description": "Crisp pressing for shirts, trousers and sarees.",
        "icon": "wind",
    },
    {
        "name": "Shoe Clean",
        "price": 149,
        "description": "Deep cleaning for sneakers and leather shoes.",
        "icon": "footprints",
    },
    {
        "name": "Dry Clean",
        "price": 299,
        "description": "Solvent cleaning for delicate fabrics.",
        "icon": "sparkles",
    },
]


class CatalogService:
    """Service for reading and seeding the service catalogue."""

    @classmethod
    async def list_services(cls) -> List[ServiceRead]:
        conn = get_connection()
        try:
            rows = conn.execute(
                "SELECT id, name, price, description, icon FROM services ORDER BY id"
            ).fetchall()
            return [ServiceRead(**dict(row)) for row in rows]
        finally:
            conn.close()

    @classmethod
    def seed_default_services(cls, services: list[dict] | None = None) -> int:
        """Insert catalogue entries whose name is not yet present.

        Returns the number of rows inserted.  Running it twice is
        harmless.
        """
        services = DEFAULT_SERVICES if services is None else services
        conn = get_connection()
        try:
            cursor = conn.cursor()
            inserted = 0
            for service in services:
                cursor.execute(
                    "INSERT OR IGNORE INTO services (name, price, description, icon) VALUES (?, ?, ?, ?)",
                    (service["name"], service["price"], service.get("description"), service.get("icon")),
                )
                inserted += cursor.rowcount
            conn.commit()
            logger.info("Seeded %s catalogue entries", inserted)
            return inserted
        finally:
            conn.close()

"""
Service layer for the provider dashboard summary.

All queries are read‑only aggregates over the ``bookings`` table,
joined with ``services`` to compute earnings.
"""

from quickwash_api.app.core.db import get_connection
from quickwash_api.app.schemas.stats import DashboardStats


class StatisticsService:
    """Aggregated booking metrics for providers."""

    @classmethod
    async def dashboard(cls) -> DashboardStats:
        """Return booking counts per status, earnings, customers and rating.

        Earnings only count completed bookings.  ``average_rating`` is
        ``None`` until at least one booking has been rated.
        """
        conn = get_connection()
        try:
            cursor = conn.cursor()
            counts = {
                row["status"]: row["total"]
                for row in cursor.execute(
                    "SELECT status, COUNT(*) AS total FROM bookings GROUP BY status"
                ).fetchall()
            }
            total_earnings = cursor.execute(
                """
                SELECT COALESCE(SUM(s.price), 0)
                FROM bookings b JOIN services s ON s.id = b.service_id
                WHERE b.status = 'completed'
                """
            ).fetchone()[0]
            total_customers = cursor.execute(
                "SELECT COUNT(DISTINCT email) FROM bookings"
            ).fetchone()[0]
            average_rating = cursor.execute(
                "SELECT AVG(rating) FROM bookings WHERE rating IS NOT NULL"
            ).fetchone()[0]
            return DashboardStats(
                total_bookings=sum(counts.values()),
                pending=counts.get("pending", 0),
                accepted=counts.get("accepted", 0),
                rejected=counts.get("rejected", 0),
                completed=counts.get("completed", 0),
                total_earnings=total_earnings,
                total_customers=total_customers,
                average_rating=round(average_rating, 2) if average_rating is not None else None,
            )
        finally:
            conn.close()

"""Pydantic model for the provider dashboard summary."""

from typing import Optional

from pydantic import BaseModel


class DashboardStats(BaseModel):
    total_bookings: int
    pending: int
    accepted: int
    rejected: int
    completed: int
    # Sum of service prices over completed bookings.
    total_earnings: float
    # Distinct booking emails.
    total_customers: int
    average_rating: Optional[float] = None

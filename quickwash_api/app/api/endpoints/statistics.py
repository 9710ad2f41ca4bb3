"""
Provider dashboard statistics endpoint.
"""

from fastapi import APIRouter, HTTPException, status

from quickwash_api.app.schemas.stats import DashboardStats
from quickwash_api.app.services.statistics_service import StatisticsService


router = APIRouter()


@router.get("/stats", response_model=DashboardStats)
async def get_dashboard_stats() -> DashboardStats:
    """Return order counts per status, earnings, customers and average rating."""
    try:
        return await StatisticsService.dashboard()
    except Exception as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))

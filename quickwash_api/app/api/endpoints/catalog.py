"""
Service catalogue endpoints.

The catalogue is public and read‑only; entries are seeded
out‑of‑band.
"""

from typing import List

from fastapi import APIRouter, HTTPException, status

from quickwash_api.app.schemas.service import ServiceRead
from quickwash_api.app.services.catalog_service import CatalogService


router = APIRouter()


@router.get("/services", response_model=List[ServiceRead])
async def list_services() -> List[ServiceRead]:
    """List every laundry service with its price and icon."""
    try:
        return await CatalogService.list_services()
    except Exception as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))

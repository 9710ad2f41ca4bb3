"""Pydantic models for the laundry service catalogue."""

from typing import Optional

from pydantic import BaseModel


class ServiceRead(BaseModel):
    id: int
    name: str
    price: float
    description: Optional[str] = None
    icon: Optional[str] = None

    model_config = {
        "from_attributes": True,
    }

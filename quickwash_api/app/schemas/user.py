"""
Pydantic models for user data.

Defines schemas for signing up, logging in and reading user
information.  ``UserRead`` has no password field, so any response
built from it never carries the stored hash.
"""

from typing import Optional

from pydantic import BaseModel, Field


class UserBase(BaseModel):
    name: str = Field(..., examples=["Alice"])
    email: str = Field(..., examples=["alice@example.com"])
    # ``customer`` or ``provider``.  The value is checked by the
    # database so an unknown role fails the insert with a 400.
    role: str = Field("customer", examples=["customer"])
    address: Optional[str] = Field(None, examples=["12 Lake Road"])


class UserCreate(UserBase):
    """Schema for registering a user."""

    password: str = Field(..., examples=["strongpassword"])


class UserLogin(BaseModel):
    email: str
    password: str


class UserRead(UserBase):
    """Schema for reading a user from the API."""

    id: int
    eco_points: int = 0
    created_at: Optional[str] = None

    model_config = {
        "from_attributes": True,
    }


class AuthResponse(BaseModel):
    success: bool = True
    user: UserRead


class ImpactRead(BaseModel):
    """Eco impact derived from a user's points."""

    email: str
    eco_points: int
    water_saved_liters: int
    rewards_available: int

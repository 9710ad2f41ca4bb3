"""
User endpoints.

Signup, login and profile lookups.  No token is issued: a successful
login returns the user record (without its password) and the client
keeps it in memory.
"""

from fastapi import APIRouter, HTTPException, status

from quickwash_api.app.schemas.user import AuthResponse, ImpactRead, UserCreate, UserLogin, UserRead
from quickwash_api.app.services.user_service import UserService


router = APIRouter()


@router.post("/signup", response_model=AuthResponse)
async def signup(user: UserCreate) -> AuthResponse:
    """Register a new customer or provider.

    A duplicate email or an unknown role is rejected by the database
    and reported as 400.
    """
    try:
        created = await UserService.create_user(user)
    except Exception as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return AuthResponse(success=True, user=created)


@router.post("/login", response_model=AuthResponse)
async def login(credentials: UserLogin) -> AuthResponse:
    """Verify email and password and return the user."""
    try:
        user = await UserService.authenticate(credentials.email, credentials.password)
    except Exception as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")
    return AuthResponse(success=True, user=user)


@router.get("/profile/{email}", response_model=UserRead)
async def get_profile(email: str) -> UserRead:
    """Fetch a user's profile, including eco points, by email."""
    try:
        user = await UserService.get_user_by_email(email)
    except Exception as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user


@router.get("/profile/{email}/impact", response_model=ImpactRead)
async def get_impact(email: str) -> ImpactRead:
    """Water saved and rewards unlocked by a user's eco points."""
    try:
        impact = await UserService.get_impact(email)
    except Exception as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
    if not impact:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return impact

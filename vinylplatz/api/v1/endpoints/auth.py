"""
Auth endpoints - registration, login, current profile (RESTful API).
Challenge: Secure auth, validation, clear status codes.
"""

from fastapi import APIRouter, status

from vinylplatz.core.dependencies import AdminUser, CurrentUser, MarketplaceDep
from vinylplatz.schemas.auth import AuthResponse, LoginRequest, RegisterRequest
from vinylplatz.schemas.user import UserResponse

router = APIRouter()


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(mp: MarketplaceDep, data: RegisterRequest):
    """Create account and return a token for it."""
    return await mp.auth.register(data)


@router.post("/login", response_model=AuthResponse)
async def login(mp: MarketplaceDep, data: LoginRequest):
    """Authenticate and return JWT."""
    return await mp.auth.login(data.email, data.password)


@router.get("/profile", response_model=UserResponse)
async def profile(user: CurrentUser):
    return user


@router.get("/admin")
async def admin_check(user: AdminUser):
    return {"message": "Admin access granted"}

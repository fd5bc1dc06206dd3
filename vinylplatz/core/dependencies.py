"""
FastAPI dependencies - injection for services and auth (SOLID: Dependency Inversion).
Challenge: Reusable auth, consistent error responses.
"""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from vinylplatz.core.errors import ForbiddenError, UnauthorizedError
from vinylplatz.core.security import decode_access_token
from vinylplatz.db.models.user import User
from vinylplatz.db.repositories.user_repository import UserRepository
from vinylplatz.db.session import DbSession
from vinylplatz.services.marketplace import Marketplace

security = HTTPBearer(auto_error=False)


async def get_marketplace(session: DbSession) -> Marketplace:
    return Marketplace(session)


async def get_current_user(
    session: DbSession,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> User:
    """Resolve JWT to the user. Raises 401 if missing, invalid, or the user is gone."""
    if not credentials:
        raise UnauthorizedError()
    claims = decode_access_token(credentials.credentials)
    if claims is None:
        raise UnauthorizedError("Invalid or expired token", code="INVALID_TOKEN")
    user = await UserRepository(session).get_by_id(claims.sub)
    if user is None:
        raise UnauthorizedError("User not found", code="INVALID_TOKEN")
    return user


async def require_admin(user: Annotated[User, Depends(get_current_user)]) -> User:
    if not user.is_admin:
        raise ForbiddenError("Admin role required", code="ADMIN_REQUIRED")
    return user


MarketplaceDep = Annotated[Marketplace, Depends(get_marketplace)]
CurrentUser = Annotated[User, Depends(get_current_user)]
AdminUser = Annotated[User, Depends(require_admin)]

"""
Auth service - registration and login, returning a bearer token with the user.
"""

from vinylplatz.core.errors import UnauthorizedError
from vinylplatz.core.security import create_access_token
from vinylplatz.db.models.user import User
from vinylplatz.schemas.auth import AuthResponse, RegisterRequest
from vinylplatz.schemas.user import UserResponse
from vinylplatz.services.user_service import UserService


def issue_token(user: User) -> AuthResponse:
    token = create_access_token(user.id, user.email, user.role.value)
    return AuthResponse(access_token=token, user=UserResponse.model_validate(user))


class AuthService:
    def __init__(self, users: UserService):
        self.users = users

    async def register(self, data: RegisterRequest) -> AuthResponse:
        user = await self.users.create_user(data)
        return issue_token(user)

    async def login(self, email: str, password: str) -> AuthResponse:
        user = await self.users.verify_credentials(email, password)
        if user is None:
            raise UnauthorizedError("Invalid email or password", code="INVALID_CREDENTIALS")
        return issue_token(user)

"""Auth schemas - login payload and token response."""

from pydantic import BaseModel, EmailStr

from vinylplatz.schemas.user import UserCreate, UserResponse


class RegisterRequest(UserCreate):
    pass


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class AuthResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UserResponse

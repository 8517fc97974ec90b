"""
Authentication schemas.

These schemas define the API contracts for registration, login and the
public view of a user.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class RegisterRequest(BaseModel):
    """User registration request schema."""

    email: EmailStr = Field(description="Unique email address")
    password: str = Field(min_length=6, max_length=128, description="User password")

    model_config = ConfigDict(
        json_schema_extra={"example": {"email": "a@x.com", "password": "secret1"}}
    )


class LoginRequest(BaseModel):
    """User login request schema."""

    email: EmailStr = Field(description="Registered email address")
    password: str = Field(min_length=1, max_length=128, description="User password")


class UserResponse(BaseModel):
    """Public user view, the password hash is never part of it."""

    id: int = Field(description="User identifier")
    email: str = Field(description="User email")
    created_at: datetime = Field(description="Registration timestamp")

    model_config = ConfigDict(from_attributes=True)


class AuthResponse(BaseModel):
    """Token issued on register/login."""

    user: UserResponse
    access_token: str = Field(description="Signed identity token")
    token_type: str = Field(default="bearer", description="Token type")
    expires_in: int = Field(description="Token lifetime in seconds")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "user": {"id": 1, "email": "a@x.com", "created_at": "2025-10-01T10:30:00Z"},
                "access_token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                "token_type": "bearer",
                "expires_in": 86400,
            }
        }
    )

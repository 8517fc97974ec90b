"""Authentication API endpoints."""

from fastapi import APIRouter, Depends, status

from ..core.schemas.auth import AuthResponse, LoginRequest, RegisterRequest, UserResponse
from ..core.services import AuthService
from ..middleware.rate_limit import auth_rate_limit
from .deps import get_auth_service

router = APIRouter(prefix="/auth", tags=["authentication"], dependencies=[Depends(auth_rate_limit)])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(request: RegisterRequest, auth_service: AuthService = Depends(get_auth_service)):
    """Register a new user and get an access token."""
    return await auth_service.register(request)


@router.post("/login", response_model=AuthResponse)
async def login(request: LoginRequest, auth_service: AuthService = Depends(get_auth_service)):
    """Login user and get an access token."""
    return await auth_service.login(request)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: int, auth_service: AuthService = Depends(get_auth_service)):
    """Get a user's public profile."""
    return await auth_service.get_user(user_id)

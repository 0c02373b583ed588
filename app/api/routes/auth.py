from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, status
import structlog

from app.models.schemas import LoginRequest, LoginResponse, RegisterRequest, RegisterResponse, User
from app.services.auth_service import AuthService
from app.core.dependencies import get_auth_service, get_current_user, get_optional_user

logger = structlog.get_logger()

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
async def register(
    request: RegisterRequest,
    service: AuthService = Depends(get_auth_service)
):
    """Create a new user account"""
    user = await service.register(request)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="User already exists with this email"
        )
    return RegisterResponse(message="User registered successfully", user=user)


@router.post("/login", response_model=LoginResponse)
async def login(
    request: LoginRequest,
    service: AuthService = Depends(get_auth_service)
):
    """Exchange email and password for a bearer token"""
    response = await service.login(request.email, request.password)
    if not response:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials"
        )
    logger.info("User logged in", user_id=response.user.id)
    return response


@router.post("/logout")
async def logout(
    user: Optional[User] = Depends(get_optional_user),
    service: AuthService = Depends(get_auth_service)
):
    """Log out. Tokens are stateless, so this only records the event."""
    if user:
        await service.logout(user)
    return {"message": "Logged out successfully"}


@router.get("/me", response_model=User)
async def me(user: User = Depends(get_current_user)):
    """Return the authenticated user"""
    return user

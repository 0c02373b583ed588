from typing import Optional

import structlog

from app.core.security import create_access_token, get_password_hash, verify_password
from app.models.schemas import (
    ActivityAction,
    EntityType,
    LoginResponse,
    RegisterRequest,
    User,
)
from app.repositories.interfaces.user_repository import IUserRepository
from app.services.activity_log_service import ActivityLogService

logger = structlog.get_logger()


class AuthService:
    """Registration, login and logout, each mirrored into the activity log"""

    def __init__(self, user_repository: IUserRepository, activity_log_service: ActivityLogService):
        self.user_repository = user_repository
        self.activity_log_service = activity_log_service

    async def register(self, request: RegisterRequest) -> Optional[User]:
        """Create a user account. Returns None if the email is already taken."""
        if await self.user_repository.get_by_email(request.email):
            logger.info("Registration rejected, email in use", email=request.email)
            return None

        user = await self.user_repository.create(
            name=request.name,
            email=request.email,
            password_hash=get_password_hash(request.password),
            role=request.role,
        )
        await self.activity_log_service.record(
            user_id=user.id,
            action=ActivityAction.USER_REGISTERED,
            entity_type=EntityType.USER,
            entity_id=str(user.id),
            description=f"{user.name} registered as {user.role.value}",
            details={"role": user.role.value, "email": user.email},
        )
        logger.info("User registered", user_id=user.id)
        return user

    async def login(self, email: str, password: str) -> Optional[LoginResponse]:
        """Check credentials and issue an access token. Returns None on bad credentials."""
        credentials = await self.user_repository.get_credentials(email)
        if not credentials:
            return None
        user, password_hash = credentials
        if not verify_password(password, password_hash):
            logger.info("Login failed", user_id=user.id)
            return None

        token = create_access_token({"sub": str(user.id), "email": user.email})
        await self.activity_log_service.record(
            user_id=user.id,
            action=ActivityAction.USER_LOGIN,
            entity_type=EntityType.USER,
            entity_id=str(user.id),
            description=f"{user.name} logged in",
            details={"email": user.email, "role": user.role.value},
        )
        return LoginResponse(token=token, user=user)

    async def logout(self, user: User) -> None:
        await self.activity_log_service.record(
            user_id=user.id,
            action=ActivityAction.USER_LOGOUT,
            entity_type=EntityType.USER,
            entity_id=str(user.id),
            description=f"{user.name} logged out",
            details={"email": user.email, "role": user.role.value},
        )

    async def get_user(self, user_id: int) -> Optional[User]:
        return await self.user_repository.get_by_id(user_id)

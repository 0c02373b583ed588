from functools import lru_cache
from typing import Optional
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
from app.repositories.interfaces.test_case_repository import ITestCaseRepository
from app.repositories.interfaces.bug_report_repository import IBugReportRepository
from app.repositories.interfaces.user_repository import IUserRepository
from app.repositories.interfaces.activity_log_repository import IActivityLogRepository
from app.repositories.interfaces.ai_service import IAIService

from app.repositories.implementations.sql_test_case_repository import SQLTestCaseRepository
from app.repositories.implementations.sql_bug_report_repository import SQLBugReportRepository
from app.repositories.implementations.sql_user_repository import SQLUserRepository
from app.repositories.implementations.sql_activity_log_repository import SQLActivityLogRepository
from app.repositories.implementations.openai_service import OpenAIService
from app.repositories.implementations.gemini_service import GeminiService
from app.repositories.implementations.disabled_ai_service import DisabledAIService

from app.services.activity_log_service import ActivityLogService
from app.services.auth_service import AuthService
from app.services.bug_report_service import BugReportService
from app.services.generation.registry import get_profile
from app.services.generation_service import GenerationService
from app.services.test_case_service import TestCaseService
from app.config.settings import settings
from app.core.database import get_database
from app.core.security import decode_token
from app.models.schemas import User


class Container:
    """Dependency injection container"""

    def __init__(self):
        self._ai_service = None

    def test_case_repository(self, db: Session) -> ITestCaseRepository:
        return SQLTestCaseRepository(db)

    def bug_report_repository(self, db: Session) -> IBugReportRepository:
        return SQLBugReportRepository(db)

    def user_repository(self, db: Session) -> IUserRepository:
        return SQLUserRepository(db)

    def activity_log_repository(self, db: Session) -> IActivityLogRepository:
        return SQLActivityLogRepository(db)

    @lru_cache()
    def ai_service(self) -> IAIService:
        """Get AI service instance (singleton), chosen by AI_PROVIDER"""
        if self._ai_service is None:
            provider = settings.ai_provider.strip().lower()
            if provider == "openai":
                self._ai_service = OpenAIService()
            elif provider == "gemini":
                self._ai_service = GeminiService()
            else:
                self._ai_service = DisabledAIService()
        return self._ai_service

    def generation_service(self, ai_service: IAIService) -> GenerationService:
        return GenerationService(
            ai_service=ai_service,
            profile=get_profile(settings.generator_profile),
            timeout_seconds=settings.ai_timeout_seconds,
        )

    def activity_log_service(self, db: Session) -> ActivityLogService:
        return ActivityLogService(self.activity_log_repository(db))

    def auth_service(self, db: Session) -> AuthService:
        return AuthService(
            user_repository=self.user_repository(db),
            activity_log_service=self.activity_log_service(db),
        )

    def test_case_service(self, db: Session, ai_service: IAIService) -> TestCaseService:
        """Get test case service instance"""
        return TestCaseService(
            test_case_repository=self.test_case_repository(db),
            user_repository=self.user_repository(db),
            generation_service=self.generation_service(ai_service),
            activity_log_service=self.activity_log_service(db),
        )

    def bug_report_service(self, db: Session, ai_service: IAIService) -> BugReportService:
        return BugReportService(
            bug_report_repository=self.bug_report_repository(db),
            user_repository=self.user_repository(db),
            generation_service=self.generation_service(ai_service),
            activity_log_service=self.activity_log_service(db),
        )


# Global container instance
container = Container()

bearer_scheme = HTTPBearer(auto_error=False)


# Dependency providers for FastAPI
def get_ai_service() -> IAIService:
    """FastAPI dependency for AI service"""
    return container.ai_service()


def get_generation_service(ai_service: IAIService = Depends(get_ai_service)) -> GenerationService:
    return container.generation_service(ai_service)


def get_activity_log_service(db: Session = Depends(get_database)) -> ActivityLogService:
    return container.activity_log_service(db)


def get_auth_service(db: Session = Depends(get_database)) -> AuthService:
    return container.auth_service(db)


def get_test_case_service(
    db: Session = Depends(get_database),
    ai_service: IAIService = Depends(get_ai_service),
) -> TestCaseService:
    """FastAPI dependency for test case service"""
    return container.test_case_service(db, ai_service)


def get_bug_report_service(
    db: Session = Depends(get_database),
    ai_service: IAIService = Depends(get_ai_service),
) -> BugReportService:
    return container.bug_report_service(db, ai_service)


async def _user_from_credentials(
    credentials: Optional[HTTPAuthorizationCredentials], auth_service: AuthService
) -> Optional[User]:
    if credentials is None:
        return None
    payload = decode_token(credentials.credentials)
    if not payload or not payload.get("sub"):
        return None
    try:
        user_id = int(payload["sub"])
    except (TypeError, ValueError):
        return None
    return await auth_service.get_user(user_id)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth_service: AuthService = Depends(get_auth_service),
) -> User:
    """Resolve the bearer token to a user, or reject the request with 401"""
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    user = await _user_from_credentials(credentials, auth_service)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user


async def get_optional_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth_service: AuthService = Depends(get_auth_service),
) -> Optional[User]:
    return await _user_from_credentials(credentials, auth_service)

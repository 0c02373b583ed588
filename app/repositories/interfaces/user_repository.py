from abc import ABC, abstractmethod
from typing import Optional, Tuple
from app.models.schemas import User, UserRole


class IUserRepository(ABC):
    """Interface for user account storage"""

    @abstractmethod
    async def create(self, name: str, email: str, password_hash: str, role: UserRole) -> User:
        pass

    @abstractmethod
    async def get_by_id(self, user_id: int) -> Optional[User]:
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        pass

    @abstractmethod
    async def get_credentials(self, email: str) -> Optional[Tuple[User, str]]:
        """Return the user and stored password hash for an email"""
        pass

from typing import Optional, Tuple
from sqlalchemy.orm import Session
from app.repositories.interfaces.user_repository import IUserRepository
from app.models.database import UserModel
from app.models.schemas import User, UserRole


class SQLUserRepository(IUserRepository):
    """SQLAlchemy implementation of user repository"""

    def __init__(self, db: Session):
        self.db = db

    async def create(self, name: str, email: str, password_hash: str, role: UserRole) -> User:
        db_user = UserModel(name=name, email=email.lower(), password_hash=password_hash, role=role)
        self.db.add(db_user)
        self.db.commit()
        self.db.refresh(db_user)
        return User.model_validate(db_user)

    async def get_by_id(self, user_id: int) -> Optional[User]:
        db_user = self.db.query(UserModel).filter(UserModel.id == user_id).first()
        return User.model_validate(db_user) if db_user else None

    async def get_by_email(self, email: str) -> Optional[User]:
        db_user = self.db.query(UserModel).filter(UserModel.email == email.lower()).first()
        return User.model_validate(db_user) if db_user else None

    async def get_credentials(self, email: str) -> Optional[Tuple[User, str]]:
        db_user = self.db.query(UserModel).filter(UserModel.email == email.lower()).first()
        if not db_user:
            return None
        return User.model_validate(db_user), db_user.password_hash

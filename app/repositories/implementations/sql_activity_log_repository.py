from typing import List, Optional
from sqlalchemy.orm import Session
from app.repositories.interfaces.activity_log_repository import IActivityLogRepository
from app.models.database import ActivityLogModel
from app.models.schemas import ActivityLog, ActivityLogCreate, ActivityAction, EntityType


class SQLActivityLogRepository(IActivityLogRepository):
    """SQLAlchemy implementation of the activity log. Entries are never updated or deleted."""

    def __init__(self, db: Session):
        self.db = db

    def _filtered(self, entity_type: Optional[EntityType], action: Optional[ActivityAction], user_id: Optional[int]):
        query = self.db.query(ActivityLogModel)
        if entity_type:
            query = query.filter(ActivityLogModel.entity_type == entity_type)
        if action:
            query = query.filter(ActivityLogModel.action == action)
        if user_id is not None:
            query = query.filter(ActivityLogModel.user_id == user_id)
        return query

    async def append(self, entry: ActivityLogCreate) -> ActivityLog:
        db_entry = ActivityLogModel(**entry.model_dump())
        self.db.add(db_entry)
        self.db.commit()
        self.db.refresh(db_entry)
        return ActivityLog.model_validate(db_entry)

    async def get_page(
        self,
        skip: int = 0,
        limit: int = 50,
        entity_type: Optional[EntityType] = None,
        action: Optional[ActivityAction] = None,
        user_id: Optional[int] = None,
    ) -> List[ActivityLog]:
        db_entries = (
            self._filtered(entity_type, action, user_id)
            .order_by(ActivityLogModel.created_at.desc(), ActivityLogModel.id.desc())
            .offset(skip)
            .limit(limit)
            .all()
        )
        return [ActivityLog.model_validate(entry) for entry in db_entries]

    async def count(
        self,
        entity_type: Optional[EntityType] = None,
        action: Optional[ActivityAction] = None,
        user_id: Optional[int] = None,
    ) -> int:
        return self._filtered(entity_type, action, user_id).count()

from abc import ABC, abstractmethod
from typing import List, Optional
from app.models.schemas import ActivityLog, ActivityLogCreate, ActivityAction, EntityType


class IActivityLogRepository(ABC):
    """Append-only storage for activity log entries"""

    @abstractmethod
    async def append(self, entry: ActivityLogCreate) -> ActivityLog:
        pass

    @abstractmethod
    async def get_page(
        self,
        skip: int = 0,
        limit: int = 50,
        entity_type: Optional[EntityType] = None,
        action: Optional[ActivityAction] = None,
        user_id: Optional[int] = None,
    ) -> List[ActivityLog]:
        pass

    @abstractmethod
    async def count(
        self,
        entity_type: Optional[EntityType] = None,
        action: Optional[ActivityAction] = None,
        user_id: Optional[int] = None,
    ) -> int:
        pass

import math
from typing import Any, Dict, Optional

import structlog

from app.models.schemas import (
    ActivityAction,
    ActivityLog,
    ActivityLogCreate,
    ActivityLogPage,
    EntityType,
    Pagination,
)
from app.repositories.interfaces.activity_log_repository import IActivityLogRepository

logger = structlog.get_logger()


class ActivityLogService:
    """Writes and pages through the append-only activity log"""

    def __init__(self, activity_log_repository: IActivityLogRepository):
        self.activity_log_repository = activity_log_repository

    async def record(
        self,
        user_id: int,
        action: ActivityAction,
        description: str,
        entity_type: Optional[EntityType] = None,
        entity_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> ActivityLog:
        entry = await self.activity_log_repository.append(
            ActivityLogCreate(
                user_id=user_id,
                action=action,
                entity_type=entity_type,
                entity_id=entity_id,
                description=description,
                details=details or {},
            )
        )
        logger.info(
            "Activity recorded",
            action=action.value,
            entity_type=entity_type.value if entity_type else None,
            entity_id=entity_id,
            user_id=user_id,
        )
        return entry

    async def list_page(
        self,
        page: int = 1,
        limit: int = 50,
        entity_type: Optional[EntityType] = None,
        action: Optional[ActivityAction] = None,
        user_id: Optional[int] = None,
    ) -> ActivityLogPage:
        page = max(page, 1)
        limit = max(limit, 1)
        logs = await self.activity_log_repository.get_page(
            skip=(page - 1) * limit,
            limit=limit,
            entity_type=entity_type,
            action=action,
            user_id=user_id,
        )
        total = await self.activity_log_repository.count(entity_type=entity_type, action=action, user_id=user_id)
        return ActivityLogPage(
            logs=logs,
            pagination=Pagination(page=page, limit=limit, total=total, pages=math.ceil(total / limit)),
        )

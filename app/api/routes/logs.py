from typing import Optional
from fastapi import APIRouter, Depends, Query

from app.models.schemas import ActivityAction, ActivityLogPage, EntityType, User
from app.services.activity_log_service import ActivityLogService
from app.core.dependencies import get_activity_log_service, get_current_user

router = APIRouter(prefix="/logs", tags=["logs"])


@router.get("/", response_model=ActivityLogPage)
async def get_activity_logs(
    page: int = Query(1, ge=1),
    limit: int = Query(50, ge=1, le=500),
    entity_type: Optional[EntityType] = None,
    action: Optional[ActivityAction] = None,
    user_id: Optional[int] = None,
    user: User = Depends(get_current_user),
    service: ActivityLogService = Depends(get_activity_log_service)
):
    """Page through the activity log, newest first"""
    return await service.list_page(
        page=page,
        limit=limit,
        entity_type=entity_type,
        action=action,
        user_id=user_id,
    )

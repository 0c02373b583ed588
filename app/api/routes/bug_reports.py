from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query, status
import structlog

from app.models.schemas import (
    BugReport, BugReportCreate, BugReportUpdate, BugStatus,
    GenerateRecordRequest, User
)
from app.models.generation import Priority, Severity
from app.services.bug_report_service import BugReportService
from app.core.dependencies import get_bug_report_service, get_current_user

logger = structlog.get_logger()

router = APIRouter(prefix="/bug-reports", tags=["bug-reports"])


def _not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Bug report not found"
    )


@router.post("/generate", response_model=BugReport, status_code=status.HTTP_201_CREATED)
async def generate_bug_report(
    request: GenerateRecordRequest,
    user: User = Depends(get_current_user),
    service: BugReportService = Depends(get_bug_report_service)
):
    """Generate a full bug report from a one-line summary and save it"""
    try:
        return await service.generate_bug_report(request.summary, user, assignee_id=request.assignee_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logger.error("Failed to generate bug report", summary=request.summary[:100], error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to generate bug report"
        )


@router.get("/", response_model=List[BugReport])
async def get_all_bug_reports(
    skip: int = 0,
    limit: int = 100,
    status_filter: Optional[BugStatus] = Query(None, alias="status"),
    priority: Optional[Priority] = None,
    severity: Optional[Severity] = None,
    category: Optional[str] = None,
    assignee_id: Optional[int] = None,
    search: Optional[str] = None,
    user: User = Depends(get_current_user),
    service: BugReportService = Depends(get_bug_report_service)
):
    return await service.get_all_bug_reports(
        skip=skip,
        limit=limit,
        status=status_filter,
        priority=priority,
        severity=severity,
        category=category,
        assignee_id=assignee_id,
        search=search,
    )


@router.post("/", response_model=BugReport, status_code=status.HTTP_201_CREATED)
async def create_bug_report(
    data: BugReportCreate,
    user: User = Depends(get_current_user),
    service: BugReportService = Depends(get_bug_report_service)
):
    try:
        return await service.create_bug_report(data, user)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("/{bug_report_id}", response_model=BugReport)
async def get_bug_report(
    bug_report_id: str,
    user: User = Depends(get_current_user),
    service: BugReportService = Depends(get_bug_report_service)
):
    bug_report = await service.get_bug_report(bug_report_id)
    if not bug_report:
        raise _not_found()
    return bug_report


@router.put("/{bug_report_id}", response_model=BugReport)
async def update_bug_report(
    bug_report_id: str,
    update_data: BugReportUpdate,
    user: User = Depends(get_current_user),
    service: BugReportService = Depends(get_bug_report_service)
):
    try:
        updated_bug_report = await service.update_bug_report(bug_report_id, update_data, user)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if not updated_bug_report:
        raise _not_found()
    return updated_bug_report


@router.delete("/{bug_report_id}")
async def delete_bug_report(
    bug_report_id: str,
    user: User = Depends(get_current_user),
    service: BugReportService = Depends(get_bug_report_service)
):
    success = await service.delete_bug_report(bug_report_id, user)
    if not success:
        raise _not_found()
    return {"message": "Bug report deleted successfully"}


@router.post("/{bug_report_id}/regenerate", response_model=BugReport)
async def regenerate_bug_report(
    bug_report_id: str,
    user: User = Depends(get_current_user),
    service: BugReportService = Depends(get_bug_report_service)
):
    """Regenerate the report body from its stored summary"""
    try:
        regenerated = await service.regenerate_bug_report(bug_report_id, user)
    except Exception as e:
        logger.error("Failed to regenerate bug report", bug_id=bug_report_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to regenerate bug report"
        )
    if not regenerated:
        raise _not_found()
    return regenerated

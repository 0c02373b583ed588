from fastapi import APIRouter, Depends
import structlog

from app.models.generation import BugReportGenerationResult, GenerateRequest, TestCaseGenerationResult
from app.models.schemas import User
from app.services.generation_service import GenerationService
from app.core.dependencies import get_current_user, get_generation_service

logger = structlog.get_logger()

router = APIRouter(prefix="/generation", tags=["generation"])


@router.post("/test-case", response_model=TestCaseGenerationResult)
async def preview_test_case(
    request: GenerateRequest,
    user: User = Depends(get_current_user),
    service: GenerationService = Depends(get_generation_service)
):
    """Generate test case fields without saving them"""
    return await service.generate_test_case(request.summary)


@router.post("/bug-report", response_model=BugReportGenerationResult)
async def preview_bug_report(
    request: GenerateRequest,
    user: User = Depends(get_current_user),
    service: GenerationService = Depends(get_generation_service)
):
    """Generate bug report fields without saving them"""
    return await service.generate_bug_report(request.summary)

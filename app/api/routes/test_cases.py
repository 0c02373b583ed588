from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query, status
import structlog

from app.models.schemas import (
    TestCase, TestCaseCreate, TestCaseUpdate, TestCaseStatus,
    GenerateRecordRequest, User
)
from app.models.generation import Priority
from app.services.test_case_service import TestCaseService
from app.core.dependencies import get_test_case_service, get_current_user

logger = structlog.get_logger()

router = APIRouter(prefix="/test-cases", tags=["test-cases"])


def _not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Test case not found"
    )


@router.post("/generate", response_model=TestCase, status_code=status.HTTP_201_CREATED)
async def generate_test_case(
    request: GenerateRecordRequest,
    user: User = Depends(get_current_user),
    service: TestCaseService = Depends(get_test_case_service)
):
    """Generate a test case from a one-line summary and save it"""
    try:
        return await service.generate_test_case(request.summary, user, assignee_id=request.assignee_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logger.error("Failed to generate test case", summary=request.summary[:100], error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to generate test case"
        )


@router.get("/", response_model=List[TestCase])
async def get_all_test_cases(
    skip: int = 0,
    limit: int = 100,
    status_filter: Optional[TestCaseStatus] = Query(None, alias="status"),
    priority: Optional[Priority] = None,
    category: Optional[str] = None,
    assignee_id: Optional[int] = None,
    search: Optional[str] = None,
    user: User = Depends(get_current_user),
    service: TestCaseService = Depends(get_test_case_service)
):
    """Get all test cases, newest first, with filters and pagination"""
    return await service.get_all_test_cases(
        skip=skip,
        limit=limit,
        status=status_filter,
        priority=priority,
        category=category,
        assignee_id=assignee_id,
        search=search,
    )


@router.post("/", response_model=TestCase, status_code=status.HTTP_201_CREATED)
async def create_test_case(
    data: TestCaseCreate,
    user: User = Depends(get_current_user),
    service: TestCaseService = Depends(get_test_case_service)
):
    """Create a test case manually"""
    try:
        return await service.create_test_case(data, user)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("/{test_case_id}", response_model=TestCase)
async def get_test_case(
    test_case_id: str,
    user: User = Depends(get_current_user),
    service: TestCaseService = Depends(get_test_case_service)
):
    """Get a test case by ID"""
    test_case = await service.get_test_case(test_case_id)
    if not test_case:
        raise _not_found()
    return test_case


@router.put("/{test_case_id}", response_model=TestCase)
async def update_test_case(
    test_case_id: str,
    update_data: TestCaseUpdate,
    user: User = Depends(get_current_user),
    service: TestCaseService = Depends(get_test_case_service)
):
    """Update an existing test case, including its execution result"""
    try:
        updated_test_case = await service.update_test_case(test_case_id, update_data, user)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if not updated_test_case:
        raise _not_found()
    return updated_test_case


@router.delete("/{test_case_id}")
async def delete_test_case(
    test_case_id: str,
    user: User = Depends(get_current_user),
    service: TestCaseService = Depends(get_test_case_service)
):
    """Delete a test case"""
    success = await service.delete_test_case(test_case_id, user)
    if not success:
        raise _not_found()
    return {"message": "Test case deleted successfully"}


@router.post("/{test_case_id}/regenerate", response_model=TestCase)
async def regenerate_test_case(
    test_case_id: str,
    user: User = Depends(get_current_user),
    service: TestCaseService = Depends(get_test_case_service)
):
    """Regenerate steps, expected result, priority and category from the scenario"""
    try:
        regenerated = await service.regenerate_test_case(test_case_id, user)
    except Exception as e:
        logger.error("Failed to regenerate test case", test_case_id=test_case_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to regenerate test case"
        )
    if not regenerated:
        raise _not_found()
    return regenerated

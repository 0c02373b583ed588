from typing import List, Optional
import structlog
from app.models.schemas import (
    ActivityAction,
    EntityType,
    TestCase,
    TestCaseCreate,
    TestCaseStatus,
    TestCaseUpdate,
    User,
)
from app.models.generation import Priority
from app.repositories.interfaces.test_case_repository import ITestCaseRepository
from app.repositories.interfaces.user_repository import IUserRepository
from app.services.activity_log_service import ActivityLogService
from app.services.change_tracking import diff, update_action
from app.services.generation_service import GenerationService

logger = structlog.get_logger()


class TestCaseService:
    """Business logic service for test case operations"""

    def __init__(
        self,
        test_case_repository: ITestCaseRepository,
        user_repository: IUserRepository,
        generation_service: GenerationService,
        activity_log_service: ActivityLogService,
    ):
        self.test_case_repository = test_case_repository
        self.user_repository = user_repository
        self.generation_service = generation_service
        self.activity_log_service = activity_log_service

    async def _check_assignee(self, assignee_id: Optional[int]) -> None:
        if assignee_id is not None and not await self.user_repository.get_by_id(assignee_id):
            raise ValueError(f"Assignee {assignee_id} not found")

    async def get_all_test_cases(
        self,
        skip: int = 0,
        limit: int = 100,
        status: Optional[TestCaseStatus] = None,
        priority: Optional[Priority] = None,
        category: Optional[str] = None,
        assignee_id: Optional[int] = None,
        search: Optional[str] = None,
    ) -> List[TestCase]:
        return await self.test_case_repository.get_all(
            skip=skip,
            limit=limit,
            status=status,
            priority=priority,
            category=category,
            assignee_id=assignee_id,
            search=search,
        )

    async def get_test_case(self, test_case_id: str) -> Optional[TestCase]:
        return await self.test_case_repository.get_by_id(test_case_id)

    async def create_test_case(self, data: TestCaseCreate, user: User) -> TestCase:
        """Persist a test case and record the creation"""
        await self._check_assignee(data.assignee_id)
        test_case = await self.test_case_repository.create(data, created_by_id=user.id)

        await self.activity_log_service.record(
            user_id=user.id,
            action=ActivityAction.CREATED_TEST_CASE,
            entity_type=EntityType.TEST_CASE,
            entity_id=test_case.id,
            description=f'{user.name} created test case "{test_case.scenario}"',
            details={
                "test_case_id": test_case.id,
                "scenario": test_case.scenario,
                "priority": test_case.priority.value,
                "category": test_case.category,
                "ai_generated": test_case.ai_generated,
            },
        )
        logger.info("Test case created", test_case_id=test_case.id, ai_generated=test_case.ai_generated)
        return test_case

    async def generate_test_case(self, summary: str, user: User, assignee_id: Optional[int] = None) -> TestCase:
        """Generate fields from a summary and store them as a new, unexecuted test case"""
        logger.info("Generating test case", summary=summary[:100])
        await self._check_assignee(assignee_id)
        generated = await self.generation_service.generate_test_case(summary)
        data = TestCaseCreate(
            scenario=generated.scenario,
            steps=generated.steps,
            expected=generated.expected,
            actual="",
            status=TestCaseStatus.NOT_STARTED,
            remarks="",
            priority=generated.priority,
            category=generated.category,
            assignee_id=assignee_id,
            ai_generated=True,
        )
        return await self.create_test_case(data, user)

    async def regenerate_test_case(self, test_case_id: str, user: User) -> Optional[TestCase]:
        """Regenerate steps, expectation, priority and category from the stored scenario"""
        existing = await self.test_case_repository.get_by_id(test_case_id)
        if not existing:
            return None

        generated = await self.generation_service.generate_test_case(existing.scenario)
        update = TestCaseUpdate(
            steps=generated.steps,
            expected=generated.expected,
            priority=generated.priority,
            category=generated.category,
            ai_generated=True,
        )
        return await self.update_test_case(test_case_id, update, user)

    async def update_test_case(self, test_case_id: str, update: TestCaseUpdate, user: User) -> Optional[TestCase]:
        """Apply a partial update (including execution results) and record what changed"""
        existing = await self.test_case_repository.get_by_id(test_case_id)
        if not existing:
            return None

        updates = {
            field: value
            for field, value in update.model_dump(exclude_unset=True).items()
            if value is not None or field == "assignee_id"
        }
        if "assignee_id" in updates:
            await self._check_assignee(updates["assignee_id"])

        changes, changed_fields = diff(existing, updates)
        test_case = await self.test_case_repository.update(test_case_id, update)
        if not test_case:
            return None

        await self.activity_log_service.record(
            user_id=user.id,
            action=update_action(changed_fields, ActivityAction.UPDATED_TEST_CASE),
            entity_type=EntityType.TEST_CASE,
            entity_id=test_case.id,
            description=f'{user.name} updated test case "{test_case.scenario}"',
            details={
                "test_case_id": test_case.id,
                "changes": changes,
                "updated_fields": list(updates),
            },
        )
        logger.info("Test case updated", test_case_id=test_case.id, changed_fields=changed_fields)
        return test_case

    async def delete_test_case(self, test_case_id: str, user: User) -> bool:
        deleted = await self.test_case_repository.delete(test_case_id)
        if not deleted:
            return False

        await self.activity_log_service.record(
            user_id=user.id,
            action=ActivityAction.DELETED_TEST_CASE,
            entity_type=EntityType.TEST_CASE,
            entity_id=deleted.id,
            description=f'{user.name} deleted test case "{deleted.scenario}"',
            details={
                "test_case_id": deleted.id,
                "scenario": deleted.scenario,
                "priority": deleted.priority.value,
                "category": deleted.category,
            },
        )
        logger.info("Test case deleted", test_case_id=deleted.id)
        return True

from typing import List, Optional
import structlog
from app.models.schemas import (
    ActivityAction,
    BugReport,
    BugReportCreate,
    BugReportUpdate,
    BugStatus,
    EntityType,
    User,
)
from app.models.generation import Priority, Severity
from app.repositories.interfaces.bug_report_repository import IBugReportRepository
from app.repositories.interfaces.user_repository import IUserRepository
from app.services.activity_log_service import ActivityLogService
from app.services.change_tracking import diff, update_action
from app.services.generation_service import GenerationService

logger = structlog.get_logger()


class BugReportService:
    """Business logic service for bug report operations"""

    def __init__(
        self,
        bug_report_repository: IBugReportRepository,
        user_repository: IUserRepository,
        generation_service: GenerationService,
        activity_log_service: ActivityLogService,
    ):
        self.bug_report_repository = bug_report_repository
        self.user_repository = user_repository
        self.generation_service = generation_service
        self.activity_log_service = activity_log_service

    async def _check_assignee(self, assignee_id: Optional[int]) -> None:
        if assignee_id is not None and not await self.user_repository.get_by_id(assignee_id):
            raise ValueError(f"Assignee {assignee_id} not found")

    async def get_all_bug_reports(
        self,
        skip: int = 0,
        limit: int = 100,
        status: Optional[BugStatus] = None,
        priority: Optional[Priority] = None,
        severity: Optional[Severity] = None,
        category: Optional[str] = None,
        assignee_id: Optional[int] = None,
        search: Optional[str] = None,
    ) -> List[BugReport]:
        return await self.bug_report_repository.get_all(
            skip=skip,
            limit=limit,
            status=status,
            priority=priority,
            severity=severity,
            category=category,
            assignee_id=assignee_id,
            search=search,
        )

    async def get_bug_report(self, bug_report_id: str) -> Optional[BugReport]:
        return await self.bug_report_repository.get_by_id(bug_report_id)

    async def create_bug_report(self, data: BugReportCreate, user: User) -> BugReport:
        await self._check_assignee(data.assignee_id)
        bug_report = await self.bug_report_repository.create(data, reporter_id=user.id)

        await self.activity_log_service.record(
            user_id=user.id,
            action=ActivityAction.CREATED_BUG_REPORT,
            entity_type=EntityType.BUG_REPORT,
            entity_id=bug_report.id,
            description=f'{user.name} reported bug "{bug_report.summary}"',
            details={
                "bug_id": bug_report.id,
                "summary": bug_report.summary,
                "priority": bug_report.priority.value,
                "severity": bug_report.severity.value,
                "category": bug_report.category,
                "ai_generated": bug_report.ai_generated,
            },
        )
        logger.info("Bug report created", bug_id=bug_report.id, severity=bug_report.severity.value)
        return bug_report

    async def generate_bug_report(self, summary: str, user: User, assignee_id: Optional[int] = None) -> BugReport:
        """Generate a full report from a one-line summary and store it as an open bug"""
        logger.info("Generating bug report", summary=summary[:100])
        await self._check_assignee(assignee_id)
        generated = await self.generation_service.generate_bug_report(summary)
        data = BugReportCreate(
            summary=summary.strip(),
            description=generated.description,
            steps=generated.steps,
            expected=generated.expected,
            actual=generated.actual,
            priority=generated.priority,
            severity=generated.severity,
            status=BugStatus.OPEN,
            environment=generated.environment,
            category=generated.category,
            assignee_id=assignee_id,
            ai_generated=True,
        )
        return await self.create_bug_report(data, user)

    async def regenerate_bug_report(self, bug_report_id: str, user: User) -> Optional[BugReport]:
        """Regenerate the report body from its stored summary, keeping status and assignee"""
        existing = await self.bug_report_repository.get_by_id(bug_report_id)
        if not existing:
            return None

        generated = await self.generation_service.generate_bug_report(existing.summary)
        update = BugReportUpdate(
            description=generated.description,
            steps=generated.steps,
            expected=generated.expected,
            actual=generated.actual,
            priority=generated.priority,
            severity=generated.severity,
            environment=generated.environment,
            category=generated.category,
            ai_generated=True,
        )
        return await self.update_bug_report(bug_report_id, update, user)

    async def update_bug_report(self, bug_report_id: str, update: BugReportUpdate, user: User) -> Optional[BugReport]:
        existing = await self.bug_report_repository.get_by_id(bug_report_id)
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
        bug_report = await self.bug_report_repository.update(bug_report_id, update)
        if not bug_report:
            return None

        await self.activity_log_service.record(
            user_id=user.id,
            action=update_action(changed_fields, ActivityAction.UPDATED_BUG_REPORT),
            entity_type=EntityType.BUG_REPORT,
            entity_id=bug_report.id,
            description=f'{user.name} updated bug report "{bug_report.summary}"',
            details={
                "bug_id": bug_report.id,
                "changes": changes,
                "updated_fields": list(updates),
            },
        )
        logger.info("Bug report updated", bug_id=bug_report.id, changed_fields=changed_fields)
        return bug_report

    async def delete_bug_report(self, bug_report_id: str, user: User) -> bool:
        deleted = await self.bug_report_repository.delete(bug_report_id)
        if not deleted:
            return False

        await self.activity_log_service.record(
            user_id=user.id,
            action=ActivityAction.DELETED_BUG_REPORT,
            entity_type=EntityType.BUG_REPORT,
            entity_id=deleted.id,
            description=f'{user.name} deleted bug report "{deleted.summary}"',
            details={
                "bug_id": deleted.id,
                "summary": deleted.summary,
                "severity": deleted.severity.value,
            },
        )
        logger.info("Bug report deleted", bug_id=deleted.id)
        return True

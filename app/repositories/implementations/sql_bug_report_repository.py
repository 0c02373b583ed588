from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy import or_
from app.repositories.interfaces.bug_report_repository import IBugReportRepository
from app.models.database import BugReportModel
from app.models.schemas import BugReport, BugReportCreate, BugReportUpdate, BugStatus
from app.models.generation import Priority, Severity


class SQLBugReportRepository(IBugReportRepository):
    """SQLAlchemy implementation of bug report repository"""

    def __init__(self, db: Session):
        self.db = db

    def _find(self, bug_report_id: str) -> Optional[BugReportModel]:
        return self.db.query(BugReportModel).filter(BugReportModel.id == bug_report_id).first()

    async def create(self, bug_report: BugReportCreate, reporter_id: int) -> BugReport:
        db_bug_report = BugReportModel(**bug_report.model_dump(), reporter_id=reporter_id)
        self.db.add(db_bug_report)
        self.db.flush()
        db_bug_report.id = f"BUG-{db_bug_report.pk:04d}"
        self.db.commit()
        self.db.refresh(db_bug_report)
        return BugReport.model_validate(db_bug_report)

    async def get_by_id(self, bug_report_id: str) -> Optional[BugReport]:
        db_bug_report = self._find(bug_report_id)
        if db_bug_report:
            return BugReport.model_validate(db_bug_report)
        return None

    async def get_all(
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
        query = self.db.query(BugReportModel)
        if status:
            query = query.filter(BugReportModel.status == status)
        if priority:
            query = query.filter(BugReportModel.priority == priority)
        if severity:
            query = query.filter(BugReportModel.severity == severity)
        if category:
            query = query.filter(BugReportModel.category == category)
        if assignee_id is not None:
            query = query.filter(BugReportModel.assignee_id == assignee_id)
        if search:
            pattern = f"%{search}%"
            query = query.filter(or_(BugReportModel.summary.ilike(pattern), BugReportModel.category.ilike(pattern)))

        db_bug_reports = (
            query.order_by(BugReportModel.created_at.desc(), BugReportModel.pk.desc())
            .offset(skip)
            .limit(limit)
            .all()
        )
        return [BugReport.model_validate(bug_report) for bug_report in db_bug_reports]

    async def update(self, bug_report_id: str, bug_report_update: BugReportUpdate) -> Optional[BugReport]:
        db_bug_report = self._find(bug_report_id)
        if not db_bug_report:
            return None

        for field, value in bug_report_update.model_dump(exclude_unset=True).items():
            if value is None and field != "assignee_id":
                continue
            setattr(db_bug_report, field, value)

        self.db.commit()
        self.db.refresh(db_bug_report)
        return BugReport.model_validate(db_bug_report)

    async def delete(self, bug_report_id: str) -> Optional[BugReport]:
        db_bug_report = self._find(bug_report_id)
        if not db_bug_report:
            return None

        deleted = BugReport.model_validate(db_bug_report)
        self.db.delete(db_bug_report)
        self.db.commit()
        return deleted

from abc import ABC, abstractmethod
from typing import List, Optional
from app.models.schemas import BugReport, BugReportCreate, BugReportUpdate, BugStatus
from app.models.generation import Priority, Severity


class IBugReportRepository(ABC):
    """Interface for bug report repository operations"""

    @abstractmethod
    async def create(self, bug_report: BugReportCreate, reporter_id: int) -> BugReport:
        pass

    @abstractmethod
    async def get_by_id(self, bug_report_id: str) -> Optional[BugReport]:
        pass

    @abstractmethod
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
        pass

    @abstractmethod
    async def update(self, bug_report_id: str, bug_report_update: BugReportUpdate) -> Optional[BugReport]:
        pass

    @abstractmethod
    async def delete(self, bug_report_id: str) -> Optional[BugReport]:
        """Delete a bug report and return it as it was before deletion"""
        pass

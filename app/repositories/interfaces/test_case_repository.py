from abc import ABC, abstractmethod
from typing import List, Optional
from app.models.schemas import TestCase, TestCaseCreate, TestCaseUpdate, TestCaseStatus
from app.models.generation import Priority


class ITestCaseRepository(ABC):
    """Interface for test case repository operations"""

    @abstractmethod
    async def create(self, test_case: TestCaseCreate, created_by_id: int) -> TestCase:
        pass

    @abstractmethod
    async def get_by_id(self, test_case_id: str) -> Optional[TestCase]:
        pass

    @abstractmethod
    async def get_all(
        self,
        skip: int = 0,
        limit: int = 100,
        status: Optional[TestCaseStatus] = None,
        priority: Optional[Priority] = None,
        category: Optional[str] = None,
        assignee_id: Optional[int] = None,
        search: Optional[str] = None,
    ) -> List[TestCase]:
        pass

    @abstractmethod
    async def update(self, test_case_id: str, test_case_update: TestCaseUpdate) -> Optional[TestCase]:
        pass

    @abstractmethod
    async def delete(self, test_case_id: str) -> Optional[TestCase]:
        """Delete a test case and return it as it was before deletion"""
        pass

from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy import or_
from app.repositories.interfaces.test_case_repository import ITestCaseRepository
from app.models.database import TestCaseModel
from app.models.schemas import TestCase, TestCaseCreate, TestCaseUpdate, TestCaseStatus
from app.models.generation import Priority


class SQLTestCaseRepository(ITestCaseRepository):
    """SQLAlchemy implementation of test case repository"""

    def __init__(self, db: Session):
        self.db = db

    def _find(self, test_case_id: str) -> Optional[TestCaseModel]:
        return self.db.query(TestCaseModel).filter(TestCaseModel.id == test_case_id).first()

    async def create(self, test_case: TestCaseCreate, created_by_id: int) -> TestCase:
        """Create a new test case"""
        db_test_case = TestCaseModel(**test_case.model_dump(), created_by_id=created_by_id)
        self.db.add(db_test_case)
        # The human id is derived from the primary key, so it stays unique after deletions
        self.db.flush()
        db_test_case.id = f"TC-{db_test_case.pk:03d}"
        self.db.commit()
        self.db.refresh(db_test_case)
        return TestCase.model_validate(db_test_case)

    async def get_by_id(self, test_case_id: str) -> Optional[TestCase]:
        """Get test case by ID"""
        db_test_case = self._find(test_case_id)
        if db_test_case:
            return TestCase.model_validate(db_test_case)
        return None

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
        """Get test cases, newest first, with optional filters and pagination"""
        query = self.db.query(TestCaseModel)
        if status:
            query = query.filter(TestCaseModel.status == status)
        if priority:
            query = query.filter(TestCaseModel.priority == priority)
        if category:
            query = query.filter(TestCaseModel.category == category)
        if assignee_id is not None:
            query = query.filter(TestCaseModel.assignee_id == assignee_id)
        if search:
            pattern = f"%{search}%"
            query = query.filter(or_(TestCaseModel.scenario.ilike(pattern), TestCaseModel.category.ilike(pattern)))

        db_test_cases = (
            query.order_by(TestCaseModel.created_at.desc(), TestCaseModel.pk.desc())
            .offset(skip)
            .limit(limit)
            .all()
        )
        return [TestCase.model_validate(test_case) for test_case in db_test_cases]

    async def update(self, test_case_id: str, test_case_update: TestCaseUpdate) -> Optional[TestCase]:
        """Update an existing test case"""
        db_test_case = self._find(test_case_id)
        if not db_test_case:
            return None

        update_data = test_case_update.model_dump(exclude_unset=True)
        for field, value in update_data.items():
            # Only the assignee may be cleared; other columns are required
            if value is None and field != "assignee_id":
                continue
            setattr(db_test_case, field, value)

        self.db.commit()
        self.db.refresh(db_test_case)
        return TestCase.model_validate(db_test_case)

    async def delete(self, test_case_id: str) -> Optional[TestCase]:
        """Delete a test case"""
        db_test_case = self._find(test_case_id)
        if not db_test_case:
            return None

        deleted = TestCase.model_validate(db_test_case)
        self.db.delete(db_test_case)
        self.db.commit()
        return deleted

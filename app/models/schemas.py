from pydantic import BaseModel, Field, EmailStr
from typing import List, Optional, Dict, Any
from datetime import datetime
from enum import Enum

from app.models.generation import Priority, Severity, GenerateRequest


class UserRole(str, Enum):
    ADMIN = "admin"
    MANAGER = "manager"
    TESTER = "tester"
    DEVELOPER = "developer"


class TestCaseStatus(str, Enum):
    NOT_STARTED = "Not Started"
    IN_PROGRESS = "In Progress"
    PASSED = "Passed"
    FAILED = "Failed"
    BLOCKED = "Blocked"


class BugStatus(str, Enum):
    OPEN = "Open"
    IN_PROGRESS = "In Progress"
    RESOLVED = "Resolved"
    CLOSED = "Closed"
    REOPENED = "Reopened"


class ActivityAction(str, Enum):
    CREATED_TEST_CASE = "created_test_case"
    UPDATED_TEST_CASE = "updated_test_case"
    DELETED_TEST_CASE = "deleted_test_case"
    CREATED_BUG_REPORT = "created_bug_report"
    UPDATED_BUG_REPORT = "updated_bug_report"
    DELETED_BUG_REPORT = "deleted_bug_report"
    STATUS_CHANGED = "status_changed"
    ASSIGNED_TASK = "assigned_task"
    USER_LOGIN = "user_login"
    USER_LOGOUT = "user_logout"
    USER_REGISTERED = "user_registered"


class EntityType(str, Enum):
    TEST_CASE = "TestCase"
    BUG_REPORT = "BugReport"
    USER = "User"


# Users

class UserSummary(BaseModel):
    id: int
    name: str
    email: str
    role: UserRole

    class Config:
        from_attributes = True


class User(UserSummary):
    created_at: datetime
    updated_at: datetime


class RegisterRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=6, description="Plain password, stored as a bcrypt hash")
    role: UserRole = Field(default=UserRole.TESTER)


class RegisterResponse(BaseModel):
    message: str
    user: User


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class LoginResponse(BaseModel):
    token: str
    token_type: str = "bearer"
    user: User


# Test cases

class TestCaseBase(BaseModel):
    scenario: str = Field(..., min_length=1, description="Test scenario")
    steps: str = Field(..., min_length=1, description="Numbered test steps")
    expected: str = Field(..., min_length=1, description="Expected result")
    actual: str = Field(default="", description="Actual result, empty until executed")
    status: TestCaseStatus = Field(default=TestCaseStatus.NOT_STARTED)
    remarks: str = Field(default="")
    priority: Priority = Field(default=Priority.MEDIUM)
    category: str = Field(..., min_length=1)


class TestCaseCreate(TestCaseBase):
    assignee_id: Optional[int] = None
    ai_generated: bool = False


class TestCaseUpdate(BaseModel):
    scenario: Optional[str] = Field(None, min_length=1)
    steps: Optional[str] = Field(None, min_length=1)
    expected: Optional[str] = Field(None, min_length=1)
    actual: Optional[str] = None
    status: Optional[TestCaseStatus] = None
    remarks: Optional[str] = None
    priority: Optional[Priority] = None
    category: Optional[str] = Field(None, min_length=1)
    assignee_id: Optional[int] = None
    ai_generated: Optional[bool] = None


class TestCase(TestCaseBase):
    id: str
    assignee: Optional[UserSummary] = None
    created_by: UserSummary
    ai_generated: bool = False
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


# Bug reports

class BugReportBase(BaseModel):
    summary: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    steps: str = Field(..., min_length=1)
    expected: str = Field(..., min_length=1)
    actual: str = Field(..., min_length=1)
    priority: Priority = Field(default=Priority.MEDIUM)
    severity: Severity = Field(default=Severity.MAJOR)
    status: BugStatus = Field(default=BugStatus.OPEN)
    environment: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1)


class BugReportCreate(BugReportBase):
    assignee_id: Optional[int] = None
    ai_generated: bool = False


class BugReportUpdate(BaseModel):
    summary: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = Field(None, min_length=1)
    steps: Optional[str] = Field(None, min_length=1)
    expected: Optional[str] = Field(None, min_length=1)
    actual: Optional[str] = Field(None, min_length=1)
    priority: Optional[Priority] = None
    severity: Optional[Severity] = None
    status: Optional[BugStatus] = None
    environment: Optional[str] = Field(None, min_length=1)
    category: Optional[str] = Field(None, min_length=1)
    assignee_id: Optional[int] = None
    ai_generated: Optional[bool] = None


class BugReport(BugReportBase):
    id: str
    assignee: Optional[UserSummary] = None
    reporter: UserSummary
    ai_generated: bool = False
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


# Activity log

class ActivityLogCreate(BaseModel):
    user_id: int
    action: ActivityAction
    entity_type: Optional[EntityType] = None
    entity_id: Optional[str] = None
    description: str = Field(..., min_length=1)
    details: Dict[str, Any] = Field(default_factory=dict)


class ActivityLog(BaseModel):
    id: int
    user: UserSummary
    action: ActivityAction
    entity_type: Optional[EntityType] = None
    entity_id: Optional[str] = None
    description: str
    details: Dict[str, Any] = Field(default_factory=dict)
    created_at: datetime

    class Config:
        from_attributes = True


class Pagination(BaseModel):
    page: int
    limit: int
    total: int
    pages: int


class ActivityLogPage(BaseModel):
    logs: List[ActivityLog]
    pagination: Pagination


class GenerateRecordRequest(GenerateRequest):
    assignee_id: Optional[int] = Field(None, description="User to assign the generated record to")

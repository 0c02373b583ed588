from sqlalchemy import Column, Integer, String, Text, DateTime, Enum, JSON, Boolean, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.core.database import Base
from app.models.generation import Priority, Severity
from app.models.schemas import UserRole, TestCaseStatus, BugStatus, ActivityAction, EntityType


def _enum(enum_cls):
    # Persist the human-readable values ("Not Started") rather than member names
    return Enum(enum_cls, values_callable=lambda members: [m.value for m in members])


class UserModel(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(_enum(UserRole), nullable=False, default=UserRole.TESTER)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}', role='{self.role}')>"


class TestCaseModel(Base):
    __tablename__ = "test_cases"
    # Human ids derive from the primary key, so keys must never be reused
    __table_args__ = {"sqlite_autoincrement": True}

    pk = Column(Integer, primary_key=True, index=True)
    id = Column(String(20), nullable=True, unique=True, index=True)
    scenario = Column(Text, nullable=False)
    steps = Column(Text, nullable=False)
    expected = Column(Text, nullable=False)
    actual = Column(Text, nullable=False, default="")
    status = Column(_enum(TestCaseStatus), nullable=False, default=TestCaseStatus.NOT_STARTED)
    remarks = Column(Text, nullable=False, default="")
    priority = Column(_enum(Priority), nullable=False, default=Priority.MEDIUM)
    category = Column(String(100), nullable=False, index=True)
    assignee_id = Column(Integer, ForeignKey("users.id"), nullable=True)
    created_by_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    ai_generated = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    assignee = relationship(UserModel, foreign_keys=[assignee_id])
    created_by = relationship(UserModel, foreign_keys=[created_by_id])

    def __repr__(self):
        return f"<TestCase(id={self.id}, category='{self.category}', status='{self.status}')>"


class BugReportModel(Base):
    __tablename__ = "bug_reports"
    __table_args__ = {"sqlite_autoincrement": True}

    pk = Column(Integer, primary_key=True, index=True)
    id = Column(String(20), nullable=True, unique=True, index=True)
    summary = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    steps = Column(Text, nullable=False)
    expected = Column(Text, nullable=False)
    actual = Column(Text, nullable=False)
    priority = Column(_enum(Priority), nullable=False, default=Priority.MEDIUM)
    severity = Column(_enum(Severity), nullable=False, default=Severity.MAJOR)
    status = Column(_enum(BugStatus), nullable=False, default=BugStatus.OPEN)
    environment = Column(String(255), nullable=False)
    category = Column(String(100), nullable=False, index=True)
    assignee_id = Column(Integer, ForeignKey("users.id"), nullable=True)
    reporter_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    ai_generated = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    assignee = relationship(UserModel, foreign_keys=[assignee_id])
    reporter = relationship(UserModel, foreign_keys=[reporter_id])

    def __repr__(self):
        return f"<BugReport(id={self.id}, severity='{self.severity}', status='{self.status}')>"


class ActivityLogModel(Base):
    __tablename__ = "activity_logs"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    action = Column(_enum(ActivityAction), nullable=False, index=True)
    entity_type = Column(_enum(EntityType), nullable=True, index=True)
    entity_id = Column(String(50), nullable=True)
    description = Column(Text, nullable=False)
    details = Column(JSON, default=dict)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)

    user = relationship(UserModel)

    def __repr__(self):
        return f"<ActivityLog(id={self.id}, action='{self.action}', entity_id='{self.entity_id}')>"

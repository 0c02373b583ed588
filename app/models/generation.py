from enum import Enum
from pydantic import BaseModel, Field, field_validator


class Flavor(str, Enum):
    TEST_CASE = "test_case"
    BUG_REPORT = "bug_report"


class Priority(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"


class Severity(str, Enum):
    MINOR = "Minor"
    MAJOR = "Major"
    CRITICAL = "Critical"
    BLOCKER = "Blocker"


class _GenerationResult(BaseModel):
    class Config:
        frozen = True

    @field_validator("*", mode="before")
    @classmethod
    def _reject_blank(cls, value):
        if isinstance(value, str) and not value.strip():
            raise ValueError("field must not be blank")
        return value


class TestCaseGenerationResult(_GenerationResult):
    scenario: str = Field(..., description="Test scenario description")
    steps: str = Field(..., description="Numbered list of test steps")
    expected: str = Field(..., description="Expected result")
    priority: Priority
    category: str


class BugReportGenerationResult(_GenerationResult):
    description: str = Field(..., description="Bug description with impact")
    steps: str = Field(..., description="Numbered reproduction steps")
    expected: str = Field(..., description="Expected behaviour")
    actual: str = Field(..., description="Observed behaviour")
    priority: Priority
    severity: Severity
    category: str
    environment: str


class GenerateRequest(BaseModel):
    summary: str = Field(..., description="Free-text summary to generate from")

    @field_validator("summary")
    @classmethod
    def _summary_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("summary must not be empty")
        return value.strip()

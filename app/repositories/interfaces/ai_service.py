from abc import ABC, abstractmethod
from typing import Optional
from app.models.generation import TestCaseGenerationResult, BugReportGenerationResult
from app.services.generation.profiles import Profile


class IAIService(ABC):
    """Interface for remote AI text generation.

    Implementations return ``None`` when the provider is unavailable
    (not configured, transport error, malformed output). Callers fall back
    to the deterministic generator in that case.
    """

    @property
    @abstractmethod
    def is_configured(self) -> bool:
        pass

    @abstractmethod
    async def try_generate_test_case(self, summary: str, profile: Profile) -> Optional[TestCaseGenerationResult]:
        """Generate test case fields from a summary"""
        pass

    @abstractmethod
    async def try_generate_bug_report(self, summary: str, profile: Profile) -> Optional[BugReportGenerationResult]:
        """Generate bug report fields from a summary"""
        pass

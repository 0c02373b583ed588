from typing import Optional

from app.models.generation import BugReportGenerationResult, TestCaseGenerationResult
from app.repositories.interfaces.ai_service import IAIService
from app.services.generation.profiles import Profile


class DisabledAIService(IAIService):
    """Used when ai_provider is "none": every request goes to the fallback generator."""

    @property
    def is_configured(self) -> bool:
        return False

    async def try_generate_test_case(self, summary: str, profile: Profile) -> Optional[TestCaseGenerationResult]:
        return None

    async def try_generate_bug_report(self, summary: str, profile: Profile) -> Optional[BugReportGenerationResult]:
        return None

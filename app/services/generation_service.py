import asyncio
from typing import Awaitable, Optional, TypeVar

import structlog

from app.models.generation import (
    BugReportGenerationResult,
    Flavor,
    TestCaseGenerationResult,
)
from app.repositories.interfaces.ai_service import IAIService
from app.services.generation.profiles import Profile
from app.services.generation.renderer import generate_fallback

logger = structlog.get_logger()

ResultT = TypeVar("ResultT")


class GenerationService:
    """Turns a free-text summary into test case or bug report fields.

    The AI delegate is tried once, bounded by ``timeout_seconds``. Anything
    other than a valid result (``None``, an exception, a timeout) falls back to
    the keyword classifier and templates, so both entry points always return.
    """

    def __init__(self, ai_service: IAIService, profile: Profile, timeout_seconds: float = 20.0):
        self.ai_service = ai_service
        self.profile = profile
        self.timeout_seconds = timeout_seconds

    async def generate_test_case(self, summary: str) -> TestCaseGenerationResult:
        remote = await self._try_remote(
            Flavor.TEST_CASE, summary, self.ai_service.try_generate_test_case(summary, self.profile)
        )
        return remote or self.fallback_test_case(summary)

    async def generate_bug_report(self, summary: str) -> BugReportGenerationResult:
        remote = await self._try_remote(
            Flavor.BUG_REPORT, summary, self.ai_service.try_generate_bug_report(summary, self.profile)
        )
        return remote or self.fallback_bug_report(summary)

    def fallback_test_case(self, summary: str) -> TestCaseGenerationResult:
        result = generate_fallback(Flavor.TEST_CASE, summary, self.profile)
        logger.info("Generated test case via fallback", profile=self.profile.name, category=result.category)
        return result

    def fallback_bug_report(self, summary: str) -> BugReportGenerationResult:
        result = generate_fallback(Flavor.BUG_REPORT, summary, self.profile)
        logger.info("Generated bug report via fallback", profile=self.profile.name, category=result.category)
        return result

    async def _try_remote(self, flavor: Flavor, summary: str, call: Awaitable[Optional[ResultT]]) -> Optional[ResultT]:
        if not self.ai_service.is_configured or not summary.strip():
            # Never awaited; close it so no "coroutine was never awaited" warning
            if asyncio.iscoroutine(call):
                call.close()
            return None

        try:
            result = await asyncio.wait_for(call, timeout=self.timeout_seconds)
        except asyncio.TimeoutError:
            logger.warning("AI generation timed out", flavor=flavor.value, timeout=self.timeout_seconds)
            return None
        except Exception as e:
            logger.error("AI generation failed", flavor=flavor.value, error=str(e))
            return None

        expected = TestCaseGenerationResult if flavor is Flavor.TEST_CASE else BugReportGenerationResult
        if not isinstance(result, expected):
            logger.info("AI generation unavailable", flavor=flavor.value)
            return None

        logger.info("Generated via AI", flavor=flavor.value, category=getattr(result, "category", None))
        return result

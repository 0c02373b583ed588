import asyncio
import re

import pytest

from app.models import generation
from app.models.generation import BugReportGenerationResult, Priority, Severity
from app.repositories.implementations.disabled_ai_service import DisabledAIService
from app.repositories.interfaces.ai_service import IAIService
from app.services.generation import generic
from app.services.generation_service import GenerationService

REMOTE_CASE = generation.TestCaseGenerationResult(
    scenario="Remote scenario",
    steps="1. a\n2. b\n3. c\n4. d",
    expected="Remote expected",
    priority=Priority.LOW,
    category="Web",
)

REMOTE_BUG = BugReportGenerationResult(
    description="Remote description",
    steps="1. a\n2. b\n3. c\n4. d",
    expected="Remote expected",
    actual="Remote actual",
    priority=Priority.LOW,
    severity=Severity.MINOR,
    category="UI",
    environment="Staging",
)


class StubAIService(IAIService):
    """Configurable delegate: returns a fixed value, raises, or sleeps."""

    def __init__(self, result=None, error=None, delay=0.0, configured=True):
        self.result = result
        self.error = error
        self.delay = delay
        self.configured = configured
        self.calls = 0

    @property
    def is_configured(self) -> bool:
        return self.configured

    async def _respond(self):
        self.calls += 1
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error:
            raise self.error
        return self.result

    async def try_generate_test_case(self, summary, profile):
        return await self._respond()

    async def try_generate_bug_report(self, summary, profile):
        return await self._respond()


def _service(ai_service, timeout=1.0):
    return GenerationService(ai_service, generic.PROFILE, timeout_seconds=timeout)


@pytest.mark.asyncio
async def test_remote_result_is_used():
    service = _service(StubAIService(result=REMOTE_CASE))
    assert await service.generate_test_case("login page") == REMOTE_CASE

    service = _service(StubAIService(result=REMOTE_BUG))
    assert await service.generate_bug_report("login page") == REMOTE_BUG


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "stub",
    [
        StubAIService(result=None),
        StubAIService(error=RuntimeError("boom")),
        StubAIService(result={"scenario": "not a model"}),
        StubAIService(result=REMOTE_CASE, configured=False),
    ],
    ids=["unavailable", "raises", "wrong-type", "not-configured"],
)
async def test_falls_back_when_remote_fails(stub):
    service = _service(stub)
    result = await service.generate_test_case("User login with email and password")
    assert result == service.fallback_test_case("User login with email and password")
    assert result.category == "Security"


@pytest.mark.asyncio
async def test_timeout_falls_back():
    stub = StubAIService(result=REMOTE_BUG, delay=1.0)
    service = _service(stub, timeout=0.05)
    result = await service.generate_bug_report("app crashes on the login ui")
    assert result.category == "Crash"
    assert result.severity is Severity.BLOCKER
    assert stub.calls == 1


@pytest.mark.asyncio
async def test_unconfigured_delegate_is_not_called():
    stub = StubAIService(result=REMOTE_CASE, configured=False)
    await _service(stub).generate_test_case("anything")
    assert stub.calls == 0


@pytest.mark.asyncio
async def test_bug_report_result_type_must_match_flavor():
    # A test case result is not a valid bug report
    service = _service(StubAIService(result=REMOTE_CASE))
    result = await service.generate_bug_report("Payment fails when submitting credit card")
    assert isinstance(result, BugReportGenerationResult)
    assert result.category == "Payment"


@pytest.mark.asyncio
async def test_disabled_service_always_uses_fallback():
    service = _service(DisabledAIService())
    result = await service.generate_bug_report("zzz")
    assert result.category == "Functional"
    assert result.severity is Severity.MAJOR
    assert result.environment == "Production Environment"


@pytest.mark.asyncio
async def test_payment_bug_report_mentions_the_payment_in_every_field():
    summary = "payment fails with expired card"
    result = await _service(DisabledAIService()).generate_bug_report(summary)

    assert result.category == "Payment"
    assert result.priority is Priority.CRITICAL
    assert result.severity is Severity.CRITICAL
    for field in (result.description, result.steps, result.expected, result.actual):
        assert "payment" in field.lower() or summary in field


@pytest.mark.asyncio
async def test_invalid_credentials_login_is_high_priority_security_case():
    result = await _service(DisabledAIService()).generate_test_case("user login with invalid credentials")

    assert result.category == "Security"
    assert result.priority is Priority.HIGH
    numbered_steps = [line for line in result.steps.splitlines() if re.match(r"^\d+\. ", line)]
    assert len(numbered_steps) >= 4

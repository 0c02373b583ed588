import json
from types import SimpleNamespace

import pytest

from app.models.generation import Priority, Severity
from app.repositories.implementations.openai_service import OpenAIService
from app.services.generation import generic, kiosk


class FakeCompletions:
    def __init__(self, content=None, error=None):
        self.content = content
        self.error = error
        self.requests = []

    def create(self, **kwargs):
        self.requests.append(kwargs)
        if self.error:
            raise self.error
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def _service(content=None, error=None):
    completions = FakeCompletions(content=content, error=error)
    client = SimpleNamespace(chat=SimpleNamespace(completions=completions))
    return OpenAIService(client=client), completions


TEST_CASE_JSON = {
    "scenario": "Verify login with valid credentials",
    "steps": ["Open the login page", "Enter email", "Enter password", "Submit"],
    "expected": "User lands on the dashboard",
    "priority": "high",
    "category": "Security",
}

BUG_JSON = {
    "description": "Checkout crashes",
    "steps": "1. Add item\n2. Open cart\n3. Pay\n4. Observe crash",
    "expected": "Order is placed",
    "actual": "App closes",
    "priority": "Critical",
    "severity": "blocker",
    "category": "Crash",
    "environment": "Mobile Application Environment",
}


@pytest.mark.asyncio
async def test_valid_json_is_parsed_and_normalized():
    service, completions = _service(json.dumps(TEST_CASE_JSON))
    result = await service.try_generate_test_case("login", generic.PROFILE)

    assert result is not None
    assert result.priority is Priority.HIGH
    assert result.steps.splitlines() == [
        "1. Open the login page",
        "2. Enter email",
        "3. Enter password",
        "4. Submit",
    ]
    system = completions.requests[0]["messages"][0]["content"]
    assert "UI/UX" in system


@pytest.mark.asyncio
async def test_fenced_json_with_prose_is_parsed():
    content = "Here is the report:\n```json\n" + json.dumps(BUG_JSON) + "\n```\nHope this helps."
    service, _ = _service(content)
    result = await service.try_generate_bug_report("checkout crash", generic.PROFILE)

    assert result is not None
    assert result.severity is Severity.BLOCKER
    assert result.environment == "Mobile Application Environment"


@pytest.mark.asyncio
async def test_kiosk_profile_categories_are_offered():
    service, completions = _service(json.dumps(BUG_JSON))
    await service.try_generate_bug_report("banknote jam", kiosk.PROFILE)
    system = completions.requests[0]["messages"][0]["content"]
    assert "Cash Handling" in system


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "content",
    [
        "I cannot help with that.",
        "",
        json.dumps({**TEST_CASE_JSON, "priority": "urgent"}),
        json.dumps({**TEST_CASE_JSON, "expected": "   "}),
        json.dumps(["not", "an", "object"]),
    ],
    ids=["prose", "empty", "bad-enum", "blank-field", "array"],
)
async def test_unusable_output_is_unavailable(content):
    service, _ = _service(content)
    assert await service.try_generate_test_case("login", generic.PROFILE) is None


@pytest.mark.asyncio
async def test_transport_error_is_unavailable():
    service, _ = _service(error=ConnectionError("network down"))
    assert await service.try_generate_bug_report("anything", generic.PROFILE) is None


@pytest.mark.asyncio
async def test_missing_api_key_means_not_configured():
    service = OpenAIService()
    assert service.is_configured is False
    assert await service.try_generate_test_case("login", generic.PROFILE) is None

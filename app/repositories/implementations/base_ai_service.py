import asyncio
import json
import re
from abc import abstractmethod
from typing import Any, Dict, Optional, Type, TypeVar

import structlog
from pydantic import BaseModel, ValidationError

from app.models.generation import (
    BugReportGenerationResult,
    Flavor,
    Priority,
    Severity,
    TestCaseGenerationResult,
)
from app.repositories.interfaces.ai_service import IAIService
from app.services.generation.profiles import Profile

logger = structlog.get_logger()

ResultT = TypeVar("ResultT", bound=BaseModel)


class BaseAIService(IAIService):
    """Prompting and response parsing shared by the chat-completion providers.

    Subclasses only implement ``_complete``: a blocking call that returns the raw
    model text. It runs in the default executor so the event loop stays free.
    """

    provider = "base"

    @abstractmethod
    def _complete(self, system: str, prompt: str) -> str:
        pass

    async def try_generate_test_case(self, summary: str, profile: Profile) -> Optional[TestCaseGenerationResult]:
        return await self._try_generate(Flavor.TEST_CASE, summary, profile, TestCaseGenerationResult)

    async def try_generate_bug_report(self, summary: str, profile: Profile) -> Optional[BugReportGenerationResult]:
        return await self._try_generate(Flavor.BUG_REPORT, summary, profile, BugReportGenerationResult)

    async def _try_generate(self, flavor: Flavor, summary: str, profile: Profile, model: Type[ResultT]) -> Optional[ResultT]:
        if not self.is_configured:
            logger.info("AI provider not configured", provider=self.provider, flavor=flavor.value)
            return None

        system = self._system_prompt(flavor, profile)
        prompt = self._user_prompt(flavor, summary)

        def sync_call():
            return self._complete(system, prompt)

        try:
            text = await asyncio.get_event_loop().run_in_executor(None, sync_call)
        except Exception as e:
            logger.error("AI provider call failed", provider=self.provider, flavor=flavor.value, error=str(e))
            return None

        return self._parse(text, model)

    def _system_prompt(self, flavor: Flavor, profile: Profile) -> str:
        priorities = "|".join(p.value for p in Priority)
        if flavor is Flavor.TEST_CASE:
            categories = "|".join(profile.test_case.labels)
            return (
                "You are an expert QA engineer who writes comprehensive test cases.\n"
                "Reply with a single valid JSON object ONLY (no markdown, no commentary):\n"
                "{\n"
                '  "scenario": "Clear test scenario description",\n'
                '  "steps": "Numbered step-by-step testing instructions",\n'
                '  "expected": "Expected result description",\n'
                f'  "priority": "{priorities}",\n'
                f'  "category": "{categories}"\n'
                "}\n\n"
                "Guidelines:\n"
                "- Make steps specific and actionable, including setup and verification\n"
                "- Consider edge cases and error scenarios\n"
                "- Set priority by business impact and choose the most relevant category"
            )

        categories = "|".join(profile.bug_report.labels)
        severities = "|".join(s.value for s in Severity)
        return (
            "You are an expert QA engineer who writes detailed bug reports.\n"
            "Reply with a single valid JSON object ONLY (no markdown, no commentary):\n"
            "{\n"
            '  "description": "Bug description with impact analysis",\n'
            '  "steps": "Numbered reproduction steps",\n'
            '  "expected": "Expected behaviour",\n'
            '  "actual": "Observed behaviour",\n'
            f'  "priority": "{priorities}",\n'
            f'  "severity": "{severities}",\n'
            f'  "category": "{categories}",\n'
            '  "environment": "Most likely environment where this occurs"\n'
            "}\n\n"
            "Guidelines:\n"
            "- Write reproduction steps anyone can follow\n"
            "- Set priority by business impact and severity by technical impact"
        )

    def _user_prompt(self, flavor: Flavor, summary: str) -> str:
        if flavor is Flavor.TEST_CASE:
            return (
                f'Generate a comprehensive test case for: "{summary}"\n\n'
                "Include the setup, execution and verification steps a QA engineer would actually perform."
            )
        return (
            f'Generate a comprehensive bug report for: "{summary}"\n\n'
            "Write realistic reproduction steps and describe the impact on users."
        )

    def _parse(self, content: str, model: Type[ResultT]) -> Optional[ResultT]:
        extracted = self._extract_json(content)
        if not extracted:
            logger.warning("AI response contained no JSON object", provider=self.provider, preview=(content or "")[:200])
            return None
        try:
            data = json.loads(extracted)
            if not isinstance(data, dict):
                return None
            return model(**self._normalize(data))
        except (ValueError, ValidationError) as e:
            logger.warning("AI response failed validation", provider=self.provider, error=str(e))
            return None

    def _normalize(self, data: Dict[str, Any]) -> Dict[str, Any]:
        steps = data.get("steps")
        if isinstance(steps, list):
            data["steps"] = "\n".join(f"{i}. {str(step).strip()}" for i, step in enumerate(steps, 1))
        for key in ("priority", "severity"):
            value = data.get(key)
            if isinstance(value, str):
                data[key] = value.strip().capitalize()
        return data

    def _extract_json(self, content: str) -> Optional[str]:
        """Extract a single JSON object from content.
        Handles code fences and finds the first balanced JSON object.
        """
        if not content:
            return None
        cleaned = content.strip()
        if cleaned.startswith("```"):
            # remove opening fence and optional language (e.g., ```json)
            cleaned = cleaned.split("\n", 1)[1] if "\n" in cleaned else cleaned
            if cleaned.endswith("```"):
                cleaned = cleaned[: -3]
        cleaned = cleaned.replace("```json", "").replace("```JSON", "").strip()

        m = re.search(r"\{[\s\S]*\}", cleaned)
        if m:
            try:
                json.loads(m.group())
                return m.group()
            except ValueError:
                pass

        # Balanced braces scan
        depth = 0
        start = -1
        for i, ch in enumerate(cleaned):
            if ch == '{':
                if depth == 0:
                    start = i
                depth += 1
            elif ch == '}':
                if depth > 0:
                    depth -= 1
                    if depth == 0 and start != -1:
                        candidate = cleaned[start : i + 1]
                        try:
                            json.loads(candidate)
                            return candidate
                        except ValueError:
                            start = -1
                            continue
        return None

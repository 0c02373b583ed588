from enum import Enum
from typing import Iterable, Union

from app.models.generation import (
    BugReportGenerationResult,
    Flavor,
    TestCaseGenerationResult,
)
from app.services.generation.classifier import Classification, classify, ladder_for
from app.services.generation.profiles import Profile


class UnknownCategoryError(LookupError):
    """Raised when a category has no template in the active profile."""


GenerationResult = Union[TestCaseGenerationResult, BugReportGenerationResult]


def numbered(steps: Iterable[str], summary: str) -> str:
    return "\n".join(f"{i}. {step.format(summary=summary)}" for i, step in enumerate(steps, 1))


def render(flavor: Flavor, classification: Classification, text: str, profile: Profile) -> GenerationResult:
    """Fill the category's template with the summary text."""
    ladder = ladder_for(flavor, profile)
    category: Enum = classification.category
    template = ladder.templates.get(category)
    if template is None:
        raise UnknownCategoryError(f"No {flavor.value} template for category '{category}' in profile '{profile.name}'")

    summary = (text or "").strip()

    if flavor is Flavor.TEST_CASE:
        return TestCaseGenerationResult(
            scenario=profile.scenario.format(summary=summary),
            steps=numbered(template.steps, summary),
            expected=template.expected.format(summary=summary),
            priority=classification.priority,
            category=category.value,
        )

    return BugReportGenerationResult(
        description=template.description.format(summary=summary),
        steps=numbered(template.steps, summary),
        expected=template.expected.format(summary=summary),
        actual=template.actual.format(summary=summary),
        priority=classification.priority,
        severity=classification.severity,
        category=category.value,
        environment=classification.environment,
    )


def generate_fallback(flavor: Flavor, text: str, profile: Profile) -> GenerationResult:
    """Deterministic classify-then-render path."""
    return render(flavor, classify(flavor, text, profile), text, profile)

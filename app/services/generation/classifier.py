from dataclasses import dataclass
from enum import Enum
from typing import Optional

from app.models.generation import Flavor, Priority, Severity
from app.services.generation.profiles import FlavorLadder, Profile


@dataclass(frozen=True)
class Classification:
    category: Enum
    priority: Priority
    severity: Optional[Severity] = None
    environment: Optional[str] = None


def ladder_for(flavor: Flavor, profile: Profile) -> FlavorLadder:
    return profile.test_case if flavor is Flavor.TEST_CASE else profile.bug_report


def classify(flavor: Flavor, text: str, profile: Profile) -> Classification:
    """Map free text to category/priority (and severity/environment for bugs).

    Rules are tried in ladder order and the first match wins, so e.g. a crash
    keyword outranks a UI keyword in the same sentence. Text that matches
    nothing, including empty text, lands in the ladder's default category.
    """
    lowered = (text or "").lower()
    ladder = ladder_for(flavor, profile)

    matched = next((rule for rule in ladder.rules if rule.matches(lowered)), None)
    if matched:
        category, priority, severity = matched.category, matched.priority, matched.severity
    else:
        category, priority, severity = ladder.default_category, ladder.default_priority, ladder.default_severity

    if flavor is Flavor.TEST_CASE:
        return Classification(category=category, priority=priority)

    environment = next(
        (rule.label for rule in profile.environment_rules if rule.matches(lowered)),
        profile.default_environment,
    )
    return Classification(
        category=category,
        priority=priority,
        severity=severity or ladder.default_severity or Severity.MAJOR,
        environment=environment,
    )

"""Keyword ladders and templates, bundled per deployment profile.

A profile owns one category enumeration per flavor. The ladder (ordered
keyword rules) and the template table of a flavor are both keyed by that
enumeration, and ``FlavorLadder`` refuses to build if they disagree.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Tuple, Type, Union

from app.models.generation import Priority, Severity


@dataclass(frozen=True)
class Rule:
    """Matches when any keyword occurs as a substring of the lower-cased text."""

    keywords: Tuple[str, ...]
    category: Enum
    priority: Priority
    severity: Optional[Severity] = None

    def matches(self, text: str) -> bool:
        return any(keyword in text for keyword in self.keywords)


@dataclass(frozen=True)
class EnvironmentRule:
    keywords: Tuple[str, ...]
    label: str

    def matches(self, text: str) -> bool:
        return any(keyword in text for keyword in self.keywords)


@dataclass(frozen=True)
class TestCaseTemplate:
    steps: Tuple[str, ...]
    expected: str


@dataclass(frozen=True)
class BugReportTemplate:
    description: str
    steps: Tuple[str, ...]
    expected: str
    actual: str


Template = Union[TestCaseTemplate, BugReportTemplate]


@dataclass(frozen=True)
class FlavorLadder:
    categories: Type[Enum]
    rules: Tuple[Rule, ...]
    templates: Dict[Enum, Template]
    default_category: Enum
    default_priority: Priority = Priority.MEDIUM
    default_severity: Optional[Severity] = None

    def __post_init__(self):
        members = set(self.categories)
        missing = [c.value for c in self.categories if c not in self.templates]
        if missing:
            raise ValueError(f"categories without a template: {missing}")
        strays = [str(k) for k in self.templates if k not in members]
        strays += [str(r.category) for r in self.rules if r.category not in members]
        if self.default_category not in members:
            strays.append(str(self.default_category))
        if strays:
            raise ValueError(f"categories outside {self.categories.__name__}: {strays}")
        for template in self.templates.values():
            if len(template.steps) < 4:
                raise ValueError("templates need at least 4 steps")

    def category_for(self, label: str) -> Optional[Enum]:
        try:
            return self.categories(label)
        except ValueError:
            return None

    @property
    def labels(self) -> Tuple[str, ...]:
        return tuple(c.value for c in self.categories)


@dataclass(frozen=True)
class Profile:
    name: str
    test_case: FlavorLadder
    bug_report: FlavorLadder
    environment_rules: Tuple[EnvironmentRule, ...] = ()
    default_environment: str = "Production Environment"
    scenario: str = "Verify that {summary} works correctly and meets all functional requirements"
    description: str = field(default="", compare=False)

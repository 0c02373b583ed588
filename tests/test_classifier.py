import pytest

from app.models.generation import Flavor, Priority, Severity
from app.services.generation import generic, kiosk
from app.services.generation.classifier import classify
from app.services.generation.registry import get_profile

GENERIC = generic.PROFILE
KIOSK = kiosk.PROFILE


def test_first_matching_rule_wins():
    # "crash" and "ui" both match; crash comes first in the ladder
    result = classify(Flavor.BUG_REPORT, "app crashes on the login ui", GENERIC)
    assert result.category is generic.BugCategory.CRASH
    assert result.priority is Priority.CRITICAL
    assert result.severity is Severity.BLOCKER


def test_matching_is_case_insensitive():
    result = classify(Flavor.BUG_REPORT, "PAYMENT declined twice", GENERIC)
    assert result.category is generic.BugCategory.PAYMENT
    assert result.priority is Priority.CRITICAL
    assert result.severity is Severity.CRITICAL


@pytest.mark.parametrize("text", ["", "zzz", "   "])
def test_unmatched_text_falls_back_to_defaults(text):
    test_case = classify(Flavor.TEST_CASE, text, GENERIC)
    assert test_case.category is generic.TestCaseCategory.FUNCTIONAL
    assert test_case.priority is Priority.MEDIUM
    assert test_case.severity is None
    assert test_case.environment is None

    bug = classify(Flavor.BUG_REPORT, text, GENERIC)
    assert bug.category is generic.BugCategory.FUNCTIONAL
    assert bug.priority is Priority.MEDIUM
    assert bug.severity is Severity.MAJOR
    assert bug.environment == "Production Environment"


def test_classification_is_deterministic():
    text = "Slow dashboard load on android"
    assert classify(Flavor.BUG_REPORT, text, GENERIC) == classify(Flavor.BUG_REPORT, text, GENERIC)
    assert classify(Flavor.TEST_CASE, text, GENERIC) == classify(Flavor.TEST_CASE, text, GENERIC)


def test_login_test_case_is_high_priority_security():
    result = classify(Flavor.TEST_CASE, "User login with email and password", GENERIC)
    assert result.category is generic.TestCaseCategory.SECURITY
    assert result.priority is Priority.HIGH


@pytest.mark.parametrize("text", ["android app onboarding", "browser back navigation"])
def test_platform_words_alone_stay_functional(text):
    result = classify(Flavor.TEST_CASE, text, GENERIC)
    assert result.category is generic.TestCaseCategory.FUNCTIONAL
    assert result.priority is Priority.MEDIUM


def test_integration_words_alone_stay_functional():
    result = classify(Flavor.BUG_REPORT, "webhook retries fail", GENERIC)
    assert result.category is generic.BugCategory.FUNCTIONAL
    assert result.priority is Priority.MEDIUM
    assert result.severity is Severity.MAJOR


@pytest.mark.parametrize(
    "text,environment",
    [
        ("Checkout freezes on android", "Mobile Application Environment"),
        ("Chrome browser shows broken page", "Web Browser Environment"),
        ("Receipt missing on kiosk", "Kiosk Build 1.13.34_V_E450_prod"),
        ("Report totals are wrong", "Production Environment"),
    ],
)
def test_bug_environment_ladder(text, environment):
    assert classify(Flavor.BUG_REPORT, text, GENERIC).environment == environment


def test_kiosk_environment_is_checked_before_mobile():
    # Known difference: a mobile-first ladder would match the "ios" inside "kiosk"
    # and report the mobile environment for every kiosk bug.
    result = classify(Flavor.BUG_REPORT, "kiosk screen freezes", GENERIC)
    assert result.category is generic.BugCategory.CRASH
    assert result.environment == "Kiosk Build 1.13.34_V_E450_prod"


def test_kiosk_profile_has_its_own_ladders():
    result = classify(Flavor.BUG_REPORT, "Banknote jam in the dispenser", KIOSK)
    assert result.category is kiosk.BugCategory.CASH_HANDLING
    assert result.severity is Severity.CRITICAL
    assert result.environment == KIOSK.default_environment

    result = classify(Flavor.TEST_CASE, "Printer prints the daily ticket", KIOSK)
    assert result.category is kiosk.TestCaseCategory.HARDWARE

    result = classify(Flavor.BUG_REPORT, "Back office browser does not sync", KIOSK)
    assert result.category is kiosk.BugCategory.NETWORK
    assert result.environment == "Back Office Web Portal"


def test_get_profile():
    assert get_profile("generic") is GENERIC
    assert get_profile(" Kiosk ") is KIOSK
    with pytest.raises(ValueError):
        get_profile("unknown")

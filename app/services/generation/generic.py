"""General web/mobile QA profile."""
from enum import Enum

from app.config.settings import settings
from app.models.generation import Priority, Severity
from app.services.generation.profiles import (
    BugReportTemplate,
    EnvironmentRule,
    FlavorLadder,
    Profile,
    Rule,
    TestCaseTemplate,
)


class TestCaseCategory(str, Enum):
    FUNCTIONAL = "Functional"
    PAYMENT = "Payment"
    UI_UX = "UI/UX"
    SECURITY = "Security"
    PERFORMANCE = "Performance"
    API = "API"
    DATABASE = "Database"
    MOBILE = "Mobile"
    WEB = "Web"


class BugCategory(str, Enum):
    FUNCTIONAL = "Functional"
    CRASH = "Crash"
    PAYMENT = "Payment"
    UI = "UI"
    PERFORMANCE = "Performance"
    SECURITY = "Security"
    DATA = "Data"
    NETWORK = "Network"
    INTEGRATION = "Integration"


# Order is precedence: the first matching rule wins. Mobile, Web and Integration
# have no keyword rule; only the AI provider assigns them.
TEST_CASE_RULES = (
    Rule(("payment", "transaction", "money"), TestCaseCategory.PAYMENT, Priority.HIGH),
    Rule(("ui", "display", "screen", "button"), TestCaseCategory.UI_UX, Priority.MEDIUM),
    Rule(("security", "login", "auth"), TestCaseCategory.SECURITY, Priority.HIGH),
    Rule(("performance", "speed", "load"), TestCaseCategory.PERFORMANCE, Priority.MEDIUM),
    Rule(("api", "service", "integration"), TestCaseCategory.API, Priority.HIGH),
    Rule(("database", "data"), TestCaseCategory.DATABASE, Priority.HIGH),
)

BUG_RULES = (
    Rule(("crash", "freeze", "hang"), BugCategory.CRASH, Priority.CRITICAL, Severity.BLOCKER),
    Rule(("payment", "transaction", "money"), BugCategory.PAYMENT, Priority.CRITICAL, Severity.CRITICAL),
    Rule(("ui", "display", "visual", "layout"), BugCategory.UI, Priority.MEDIUM, Severity.MAJOR),
    Rule(("performance", "slow", "timeout"), BugCategory.PERFORMANCE, Priority.HIGH, Severity.MAJOR),
    Rule(("security", "unauthorized", "breach"), BugCategory.SECURITY, Priority.CRITICAL, Severity.CRITICAL),
    Rule(("data", "database", "corruption"), BugCategory.DATA, Priority.HIGH, Severity.CRITICAL),
    Rule(("network", "connection", "api"), BugCategory.NETWORK, Priority.HIGH, Severity.MAJOR),
)

# "kiosk" contains "ios", so it has to be tried before the mobile rule
ENVIRONMENT_RULES = (
    EnvironmentRule(("kiosk",), settings.kiosk_environment_label),
    EnvironmentRule(("mobile", "ios", "android"), "Mobile Application Environment"),
    EnvironmentRule(("web", "browser"), "Web Browser Environment"),
)


TEST_CASE_TEMPLATES = {
    TestCaseCategory.FUNCTIONAL: TestCaseTemplate(
        steps=(
            "Navigate to the relevant section of the application",
            "Verify initial state and prerequisites",
            "Execute the main functionality: {summary}",
            "Test normal use case scenarios",
            "Test edge cases and boundary conditions",
            "Verify error handling and user feedback",
            "Test integration with other system components",
            "Validate final state and cleanup",
        ),
        expected="System should function correctly and meet all requirements for {summary} with proper error handling and user feedback",
    ),
    TestCaseCategory.PAYMENT: TestCaseTemplate(
        steps=(
            "Navigate to the payment section of the application",
            "Verify payment options are displayed correctly",
            "Select the appropriate payment method for: {summary}",
            "Enter valid payment information",
            "Submit the payment for processing",
            "Verify the transaction completes",
            "Check receipt generation and email confirmation",
            "Validate the payment status in the user account",
        ),
        expected="Payment processing should complete successfully for {summary} with proper confirmation, receipt generation, and account updates",
    ),
    TestCaseCategory.UI_UX: TestCaseTemplate(
        steps=(
            "Navigate to the relevant screen or component",
            "Verify the initial UI state for: {summary}",
            "Exercise all interactive elements (buttons, links, forms)",
            "Check responsive layout across screen sizes",
            "Check accessibility (keyboard navigation, screen readers)",
            "Compare visuals against the design specification",
            "Walk through the user workflow and navigation paths",
            "Verify error states and user feedback",
        ),
        expected="UI elements should display correctly, be fully functional, and provide a good user experience for {summary}",
    ),
    TestCaseCategory.SECURITY: TestCaseTemplate(
        steps=(
            "Set up the test environment with security monitoring",
            "Identify the security-related functionality: {summary}",
            "Test authentication and authorization mechanisms",
            "Attempt unauthorized access scenarios",
            "Verify data encryption and protection measures",
            "Test input validation and sanitization",
            "Probe for common vulnerabilities (XSS, SQL injection)",
            "Validate security headers and configuration",
        ),
        expected="Security measures should protect against threats and ensure {summary} meets security requirements",
    ),
    TestCaseCategory.PERFORMANCE: TestCaseTemplate(
        steps=(
            "Set up performance monitoring tools",
            "Establish baseline performance metrics",
            "Execute the performance test for: {summary}",
            "Monitor response times and resource usage",
            "Repeat under increasing load",
            "Identify performance bottlenecks",
            "Verify system stability under stress",
            "Record metrics and recommendations",
        ),
        expected="System should perform within acceptable limits for {summary} under normal and peak load",
    ),
    TestCaseCategory.API: TestCaseTemplate(
        steps=(
            "Set up the API testing environment",
            "Verify endpoint availability for: {summary}",
            "Test request and response formats",
            "Validate data integrity and structure",
            "Test error handling and status codes",
            "Verify authentication and authorization",
            "Test rate limiting and throttling",
            "Record API behaviour and responses",
        ),
        expected="API should function correctly for {summary} with proper data exchange, error handling, and security",
    ),
    TestCaseCategory.DATABASE: TestCaseTemplate(
        steps=(
            "Set up the database testing environment",
            "Verify database connectivity and access",
            "Test data operations related to: {summary}",
            "Validate data integrity and constraints",
            "Test transaction handling and rollback",
            "Verify data access controls",
            "Test backup and recovery procedures",
            "Monitor query performance",
        ),
        expected="Database operations should work correctly for {summary} with proper data integrity, security, and performance",
    ),
    TestCaseCategory.MOBILE: TestCaseTemplate(
        steps=(
            "Install the latest build on the target iOS and Android devices",
            "Launch the app and sign in with a test account",
            "Perform the flow under test: {summary}",
            "Rotate the device and verify the layout adapts",
            "Background and resume the app mid-flow",
            "Repeat on a slow or intermittent network",
            "Verify push notifications and deep links if involved",
            "Check battery and memory usage during the flow",
        ),
        expected="The mobile app should handle {summary} consistently across supported devices, orientations, and network conditions",
    ),
    TestCaseCategory.WEB: TestCaseTemplate(
        steps=(
            "Open the application in a supported browser",
            "Clear cache and cookies before starting",
            "Perform the flow under test: {summary}",
            "Repeat in each supported browser",
            "Use browser back, forward, and refresh during the flow",
            "Verify console is free of errors",
            "Check behaviour at common viewport widths",
            "Verify session state after closing and reopening the tab",
        ),
        expected="The web application should handle {summary} consistently across supported browsers without client-side errors",
    ),
}


BUG_TEMPLATES = {
    BugCategory.FUNCTIONAL: BugReportTemplate(
        description="Functional issue occurs when {summary}. The system does not work as designed and users cannot complete their intended tasks.",
        steps=(
            "Navigate to the relevant section of the application",
            "Set up the necessary preconditions",
            "Attempt to perform: {summary}",
            "Observe system behaviour and responses",
            "Note any error messages or unexpected results",
            "Try alternative approaches or workarounds",
            "Test related functionality for side effects",
            "Record the complete failure scenario",
        ),
        expected="System should function correctly according to specifications and user expectations",
        actual="System does not work as expected, preventing users from completing their intended actions",
    ),
    BugCategory.CRASH: BugReportTemplate(
        description="Critical system failure occurs when {summary}. The application terminates, risking data loss and severely disrupting the user workflow.",
        steps=(
            "Launch the application in a clean state",
            "Navigate to the relevant section",
            "Perform the action that triggers: {summary}",
            "Observe application behaviour and system response",
            "Note any error messages or logs before the crash",
            "Attempt to reproduce the crash consistently",
            "Collect system logs and crash dumps",
            "Verify data integrity after recovery",
        ),
        expected="Application should keep running normally without crashes or unexpected terminations",
        actual="Application crashes unexpectedly, potentially causing data loss and disrupting the user workflow",
    ),
    BugCategory.PAYMENT: BugReportTemplate(
        description="Payment processing failure when {summary}. Users cannot complete transactions, which directly impacts revenue and customer satisfaction.",
        steps=(
            "Navigate to the payment section",
            "Select items or services for purchase",
            "Proceed to payment processing",
            "Attempt the specific scenario: {summary}",
            "Observe payment processing behaviour",
            "Check transaction status and confirmations",
            "Verify payment gateway responses",
            "Repeat with other payment methods if applicable",
        ),
        expected="Payment should be processed successfully with proper confirmation and receipt generation",
        actual="Payment processing fails, preventing transaction completion and potentially causing revenue loss",
    ),
    BugCategory.UI: BugReportTemplate(
        description="User interface malfunction when {summary}. Visual presentation or interaction is broken, which may stop users from completing their actions.",
        steps=(
            "Navigate to the affected screen or component",
            "Observe the initial UI state",
            "Perform actions related to: {summary}",
            "Note visual inconsistencies or malfunctions",
            "Repeat across browsers or devices if applicable",
            "Verify responsive layout behaviour",
            "Check accessibility features",
            "Capture screenshots of the problem",
        ),
        expected="UI elements should display correctly, be properly aligned, and respond to user interactions",
        actual="UI elements are misaligned, missing, or not responding correctly to user interactions",
    ),
    BugCategory.PERFORMANCE: BugReportTemplate(
        description="Performance degradation occurs when {summary}. Response times are slow and the system risks overload.",
        steps=(
            "Set up performance monitoring tools",
            "Establish baseline performance metrics",
            "Execute the scenario: {summary}",
            "Monitor response times and resource usage",
            "Repeat under different load conditions",
            "Identify performance bottlenecks",
            "Compare against expected performance targets",
            "Record metrics and user impact",
        ),
        expected="System should respond within acceptable time limits and maintain good performance",
        actual="System responds slowly, times out, or shows degraded performance affecting user experience",
    ),
    BugCategory.SECURITY: BugReportTemplate(
        description="Security vulnerability when {summary}. Protected data or functionality may be exposed to unauthorized users.",
        steps=(
            "Prepare accounts with different permission levels",
            "Sign in with the least-privileged account",
            "Attempt the scenario: {summary}",
            "Observe whether access is granted or data is exposed",
            "Repeat without authentication",
            "Inspect requests and responses for leaked data",
            "Check audit logs for the attempted access",
            "Record the exposure scope",
        ),
        expected="Access should be denied and no protected data exposed to unauthorized users",
        actual="Unauthorized access succeeds or protected data is exposed",
    ),
    BugCategory.DATA: BugReportTemplate(
        description="Data integrity issue when {summary}. Records may be lost, duplicated, or corrupted.",
        steps=(
            "Snapshot the affected records before testing",
            "Navigate to the relevant section",
            "Perform the operation: {summary}",
            "Compare stored data with the snapshot",
            "Check related records for side effects",
            "Repeat the operation to confirm consistency",
            "Inspect database logs for errors",
            "Record which records were affected",
        ),
        expected="Data should be stored and retrieved accurately without loss or corruption",
        actual="Data is missing, duplicated, or corrupted after the operation",
    ),
    BugCategory.NETWORK: BugReportTemplate(
        description="Network or connectivity failure when {summary}. Requests to backend services fail or never complete.",
        steps=(
            "Confirm baseline connectivity to backend services",
            "Open the network inspector",
            "Perform the action: {summary}",
            "Record failing requests and status codes",
            "Repeat on a throttled or unstable connection",
            "Check whether the client retries or reports the failure",
            "Review server logs for the matching requests",
            "Record the failure pattern",
        ),
        expected="Requests should complete successfully or fail gracefully with a clear message",
        actual="Requests fail, hang, or return errors without meaningful feedback to the user",
    ),
    BugCategory.INTEGRATION: BugReportTemplate(
        description="Integration failure when {summary}. Data exchange with an external system breaks.",
        steps=(
            "Identify the external system involved",
            "Verify credentials and configuration for the integration",
            "Trigger the flow: {summary}",
            "Capture outgoing and incoming payloads",
            "Compare payloads against the agreed contract",
            "Check retry and error handling behaviour",
            "Review logs on both sides of the integration",
            "Record the mismatch or failure point",
        ),
        expected="Data should be exchanged with the external system according to the agreed contract",
        actual="The external system rejects, drops, or misinterprets the exchanged data",
    ),
}


PROFILE = Profile(
    name="generic",
    test_case=FlavorLadder(
        categories=TestCaseCategory,
        rules=TEST_CASE_RULES,
        templates=TEST_CASE_TEMPLATES,
        default_category=TestCaseCategory.FUNCTIONAL,
    ),
    bug_report=FlavorLadder(
        categories=BugCategory,
        rules=BUG_RULES,
        templates=BUG_TEMPLATES,
        default_category=BugCategory.FUNCTIONAL,
        default_severity=Severity.MAJOR,
    ),
    environment_rules=ENVIRONMENT_RULES,
    description="General web and mobile application QA",
)

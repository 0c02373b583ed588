"""Self-service kiosk profile (cash, tickets, peripherals, back-office reports)."""
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
    CASH_HANDLING = "Cash Handling"
    PAYMENT = "Payment"
    HARDWARE = "Hardware"
    AUTHENTICATION = "Authentication"
    TICKETS = "Tickets"
    MACHINE_REGISTER = "Machine Register"
    DAILY_REPORT = "Daily Report"
    DASHBOARD = "Dashboard"
    SETTINGS = "Settings"


class BugCategory(str, Enum):
    FUNCTIONAL = "Functional"
    CRASH = "Crash"
    CASH_HANDLING = "Cash Handling"
    PAYMENT = "Payment"
    HARDWARE = "Hardware"
    NETWORK = "Network"
    AUTHENTICATION = "Authentication"
    CONFIGURATION = "Configuration"
    TICKETS = "Tickets"
    DATA = "Data"


TEST_CASE_RULES = (
    Rule(("cash", "coin", "banknote", "dispense"), TestCaseCategory.CASH_HANDLING, Priority.CRITICAL),
    Rule(("payment", "card reader", "refund", "transaction"), TestCaseCategory.PAYMENT, Priority.HIGH),
    Rule(("printer", "scanner", "touchscreen", "hardware", "peripheral"), TestCaseCategory.HARDWARE, Priority.HIGH),
    Rule(("login", "auth", "password", "badge", "pin code"), TestCaseCategory.AUTHENTICATION, Priority.HIGH),
    Rule(("ticket", "receipt", "voucher"), TestCaseCategory.TICKETS, Priority.HIGH),
    Rule(("register", "machine", "terminal id", "enrol"), TestCaseCategory.MACHINE_REGISTER, Priority.MEDIUM),
    Rule(("daily report", "end of day", "z report", "reconciliation", "report"), TestCaseCategory.DAILY_REPORT, Priority.MEDIUM),
    Rule(("dashboard", "overview", "widget", "chart"), TestCaseCategory.DASHBOARD, Priority.LOW),
    Rule(("setting", "config", "preference", "language"), TestCaseCategory.SETTINGS, Priority.LOW),
)

BUG_RULES = (
    Rule(("crash", "freeze", "hang", "reboot", "blue screen"), BugCategory.CRASH, Priority.CRITICAL, Severity.BLOCKER),
    Rule(("cash", "coin", "banknote", "dispense", "jam"), BugCategory.CASH_HANDLING, Priority.CRITICAL, Severity.CRITICAL),
    Rule(("payment", "card reader", "refund", "transaction"), BugCategory.PAYMENT, Priority.CRITICAL, Severity.CRITICAL),
    Rule(("printer", "scanner", "touchscreen", "hardware", "peripheral", "sensor"), BugCategory.HARDWARE, Priority.HIGH, Severity.MAJOR),
    Rule(("network", "offline", "connection", "sync"), BugCategory.NETWORK, Priority.HIGH, Severity.MAJOR),
    Rule(("login", "auth", "password", "badge", "pin code"), BugCategory.AUTHENTICATION, Priority.HIGH, Severity.MAJOR),
    Rule(("config", "setting", "parameter", "firmware"), BugCategory.CONFIGURATION, Priority.MEDIUM, Severity.MAJOR),
    Rule(("ticket", "receipt", "voucher"), BugCategory.TICKETS, Priority.HIGH, Severity.MAJOR),
    Rule(("report", "total", "reconciliation", "data"), BugCategory.DATA, Priority.HIGH, Severity.CRITICAL),
)

ENVIRONMENT_RULES = (
    EnvironmentRule(("kiosk",), settings.kiosk_environment_label),
    EnvironmentRule(("mobile", "ios", "android"), "Mobile Companion App"),
    EnvironmentRule(("web", "browser", "back office", "backoffice"), "Back Office Web Portal"),
)


TEST_CASE_TEMPLATES = {
    TestCaseCategory.FUNCTIONAL: TestCaseTemplate(
        steps=(
            "Power on the kiosk and wait for the idle screen",
            "Start a customer session from the idle screen",
            "Perform the flow under test: {summary}",
            "Verify each screen shows the expected prompts",
            "Complete or cancel the session",
            "Verify the kiosk returns to the idle screen",
        ),
        expected="The kiosk should complete {summary} and return to the idle screen without operator intervention",
    ),
    TestCaseCategory.CASH_HANDLING: TestCaseTemplate(
        steps=(
            "Record the current cash cassette and coin hopper levels",
            "Start a customer session",
            "Perform the cash flow under test: {summary}",
            "Insert notes and coins of each accepted denomination",
            "Verify the displayed credit after each insertion",
            "Verify the correct change is dispensed",
            "Compare cassette and hopper levels with the expected totals",
            "Verify the cash event appears in the machine log",
        ),
        expected="Cash for {summary} should be accepted, credited, and dispensed exactly, with levels matching the recorded totals",
    ),
    TestCaseCategory.PAYMENT: TestCaseTemplate(
        steps=(
            "Verify the card reader shows the ready state",
            "Start a customer session and select a product",
            "Pay by card for the scenario: {summary}",
            "Verify the authorisation result on screen",
            "Verify the receipt reflects the charged amount",
            "Verify the transaction in the back office",
        ),
        expected="Card payment for {summary} should be authorised, receipted, and visible in the back office",
    ),
    TestCaseCategory.HARDWARE: TestCaseTemplate(
        steps=(
            "Check peripheral status in the maintenance menu",
            "Run the built-in peripheral self test",
            "Exercise the device involved in: {summary}",
            "Disconnect the device and verify the out-of-service message",
            "Reconnect the device and verify automatic recovery",
            "Verify hardware events are written to the machine log",
        ),
        expected="Peripherals used by {summary} should work, report faults clearly, and recover after reconnection",
    ),
    TestCaseCategory.AUTHENTICATION: TestCaseTemplate(
        steps=(
            "Open the operator login screen",
            "Log in with valid operator credentials",
            "Exercise the authentication flow: {summary}",
            "Attempt login with invalid credentials",
            "Verify lockout after repeated failures",
            "Verify the session expires after inactivity",
        ),
        expected="Only valid operators should gain access for {summary}, with failures and lockouts handled correctly",
    ),
    TestCaseCategory.TICKETS: TestCaseTemplate(
        steps=(
            "Verify paper level and printer status",
            "Start a customer session and select a ticket",
            "Complete the purchase for: {summary}",
            "Verify the printed ticket contents and barcode",
            "Scan the ticket at a validator",
            "Verify the ticket sale appears in the sales log",
        ),
        expected="Tickets for {summary} should print correctly, validate at the gate, and appear in the sales log",
    ),
    TestCaseCategory.MACHINE_REGISTER: TestCaseTemplate(
        steps=(
            "Open the machine registration screen in the back office",
            "Enter the terminal id and location",
            "Register the machine for: {summary}",
            "Verify the kiosk receives its configuration",
            "Verify the machine appears as online in the back office",
            "Attempt a duplicate registration and verify it is rejected",
        ),
        expected="The machine should be registered once for {summary} and appear online with its configuration",
    ),
    TestCaseCategory.DAILY_REPORT: TestCaseTemplate(
        steps=(
            "Perform a known set of cash and card sales",
            "Trigger the end-of-day report",
            "Generate the report for: {summary}",
            "Compare totals against the recorded sales",
            "Verify the report is uploaded to the back office",
            "Verify counters reset for the next business day",
        ),
        expected="The daily report for {summary} should match recorded sales and be available in the back office",
    ),
    TestCaseCategory.DASHBOARD: TestCaseTemplate(
        steps=(
            "Log in to the back-office dashboard",
            "Select the kiosk fleet view",
            "Inspect the dashboard for: {summary}",
            "Verify widget figures against source data",
            "Apply date and location filters",
            "Verify the dashboard refreshes with new activity",
        ),
        expected="Dashboard figures for {summary} should match the source data and refresh with new activity",
    ),
    TestCaseCategory.SETTINGS: TestCaseTemplate(
        steps=(
            "Open the settings menu as an operator",
            "Record the current values",
            "Change the setting under test: {summary}",
            "Save and verify the change takes effect",
            "Restart the kiosk and verify the value persists",
            "Restore the original values",
        ),
        expected="The setting for {summary} should apply immediately and persist across restarts",
    ),
}


BUG_TEMPLATES = {
    BugCategory.FUNCTIONAL: BugReportTemplate(
        description="Kiosk flow does not behave as designed when {summary}. Customers cannot complete their session unaided.",
        steps=(
            "Start a customer session from the idle screen",
            "Navigate to the affected flow",
            "Attempt to perform: {summary}",
            "Record the screen and any error message shown",
            "Check whether the kiosk returns to the idle screen",
            "Collect the machine log for the session",
        ),
        expected="The kiosk should complete the flow and return to the idle screen",
        actual="The flow fails or stalls, requiring operator intervention",
    ),
    BugCategory.CRASH: BugReportTemplate(
        description="Kiosk application crashes when {summary}. The machine is out of service until it restarts.",
        steps=(
            "Start from the idle screen after a fresh boot",
            "Navigate to the affected flow",
            "Perform the action that triggers: {summary}",
            "Record the time and screen at the moment of failure",
            "Note whether the kiosk restarts on its own",
            "Collect crash dumps and the machine log",
        ),
        expected="The kiosk application should keep running and stay in service",
        actual="The application crashes or freezes and the kiosk goes out of service",
    ),
    BugCategory.CASH_HANDLING: BugReportTemplate(
        description="Cash handling fault when {summary}. Customer money may be retained or dispensed incorrectly.",
        steps=(
            "Record cassette and hopper levels",
            "Start a cash session",
            "Reproduce the scenario: {summary}",
            "Record credited and dispensed amounts",
            "Compare levels with the expected totals",
            "Collect the cash module log",
        ),
        expected="Inserted cash should be credited and change dispensed exactly",
        actual="Cash is not credited, change is wrong, or the module jams",
    ),
    BugCategory.PAYMENT: BugReportTemplate(
        description="Card payment failure when {summary}. Customers cannot pay by card and sales are lost.",
        steps=(
            "Verify the card reader shows the ready state",
            "Start a session and select a product",
            "Reproduce the scenario: {summary}",
            "Record the authorisation response",
            "Check the transaction in the back office",
            "Collect the payment terminal log",
        ),
        expected="Card payment should be authorised and recorded once",
        actual="Payment is declined, duplicated, or missing from the back office",
    ),
    BugCategory.HARDWARE: BugReportTemplate(
        description="Peripheral fault when {summary}. The kiosk cannot use one of its devices.",
        steps=(
            "Check peripheral status in the maintenance menu",
            "Run the peripheral self test",
            "Reproduce the scenario: {summary}",
            "Record device status codes",
            "Reconnect the device and retry",
            "Collect the hardware event log",
        ),
        expected="Peripherals should respond and recover after reconnection",
        actual="The device does not respond or fails to recover",
    ),
    BugCategory.NETWORK: BugReportTemplate(
        description="Connectivity failure when {summary}. The kiosk cannot reach back-office services.",
        steps=(
            "Verify the kiosk network status",
            "Start a session that needs back-office access",
            "Reproduce the scenario: {summary}",
            "Record failing requests",
            "Check whether offline mode activates",
            "Verify pending data syncs after reconnection",
        ),
        expected="The kiosk should stay usable offline and sync once the connection returns",
        actual="The kiosk blocks customers or loses data while offline",
    ),
    BugCategory.AUTHENTICATION: BugReportTemplate(
        description="Operator authentication problem when {summary}. Operators are locked out or access is granted incorrectly.",
        steps=(
            "Open the operator login screen",
            "Attempt to log in with valid credentials",
            "Reproduce the scenario: {summary}",
            "Record the response and any lockout",
            "Verify the audit log entry",
            "Repeat with another operator account",
        ),
        expected="Valid operators should log in and invalid attempts should be refused",
        actual="Valid operators are refused or invalid attempts succeed",
    ),
    BugCategory.CONFIGURATION: BugReportTemplate(
        description="Configuration problem when {summary}. The kiosk runs with unexpected settings.",
        steps=(
            "Record the configured values in the back office",
            "Compare them with the values on the kiosk",
            "Reproduce the scenario: {summary}",
            "Restart the kiosk",
            "Compare values again",
            "Collect the configuration sync log",
        ),
        expected="Kiosk settings should match the back-office configuration",
        actual="Kiosk settings differ from the configuration or revert after restart",
    ),
    BugCategory.TICKETS: BugReportTemplate(
        description="Ticket issuing fault when {summary}. Customers leave without a valid ticket.",
        steps=(
            "Verify paper level and printer status",
            "Start a session and buy a ticket",
            "Reproduce the scenario: {summary}",
            "Inspect the printed ticket",
            "Scan the ticket at a validator",
            "Check the sales log",
        ),
        expected="A valid ticket should be printed and recorded for every sale",
        actual="The ticket is missing, unreadable, or not recorded",
    ),
    BugCategory.DATA: BugReportTemplate(
        description="Report or data mismatch when {summary}. Back-office figures cannot be trusted.",
        steps=(
            "Perform a known set of sales",
            "Generate the relevant report",
            "Reproduce the scenario: {summary}",
            "Compare report totals with the sales performed",
            "Check the uploaded data in the back office",
            "Collect the report generation log",
        ),
        expected="Reports should match the recorded sales exactly",
        actual="Report totals differ from the recorded sales",
    ),
}


PROFILE = Profile(
    name="kiosk",
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
    default_environment=settings.kiosk_environment_label,
    scenario="Verify that the kiosk handles {summary} correctly",
    description="Self-service kiosk deployments",
)

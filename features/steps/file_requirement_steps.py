"""
Step definitions for required pattern checks.
"""

from behave import given, when, then

from config_checks.config import load_config
from config_checks.core.file_checker import FilePatternChecker, require_profile


def _collect_log(context):
    def log(level, message):
        context.log_lines.append((level, message))

    return log


@given('a file "{name}" containing')
def step_impl(context, name):
    """Write the scenario text to a file in the test data directory."""
    path = context.test_data_dir / name
    path.write_text(context.text + "\n")


@given("the example configuration is loaded")
def step_impl(context):
    """Load the shipped example configuration."""
    context.checks_config = load_config(str(context.test_config_file))


@when('I check "{name}" for the patterns "{patterns}"')
def step_impl(context, name, patterns):
    """Run the pattern check with a comma-separated pattern list."""
    checker = FilePatternChecker(_collect_log(context))
    pattern_list = [pattern.strip() for pattern in patterns.split(",")]
    context.result = checker.check(context.test_data_dir / name, pattern_list)


@when('I check "{name}" against the profile "{profile}"')
def step_impl(context, name, profile):
    """Run the pattern check for a configured profile."""
    context.result = require_profile(
        context.test_data_dir / name,
        profile,
        context.checks_config,
        log=_collect_log(context),
    )


@then("the check should succeed")
def step_impl(context):
    """Verify that the check passed."""
    assert context.result is True, f"Check failed: {context.log_lines}"


@then("the check should fail")
def step_impl(context):
    """Verify that the check failed."""
    assert context.result is False, "Check unexpectedly succeeded"


@then('the log should contain "{level}" "{text}"')
def step_impl(context, level, text):
    """Verify that a log line with the given level and text was emitted."""
    assert any(
        logged_level == level and text in message
        for logged_level, message in context.log_lines
    ), f"No {level} log line containing '{text}' in {context.log_lines}"

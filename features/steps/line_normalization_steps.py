"""
Step definitions for line normalization.
"""

from behave import given, when, then

from config_checks.parsers.line import normalize_line


def _unquote(text):
    # Example table cells are wrapped in single quotes to keep whitespace
    return text.strip()[1:-1]


@given("the line {line}")
def step_impl(context, line):
    """Store the line to normalize."""
    context.line = _unquote(line)


@when("I normalize the line")
def step_impl(context):
    """Normalize the stored line."""
    context.normalized = normalize_line(context.line)


@then("the normalized line should be {expected}")
def step_impl(context, expected):
    """Verify the normalized line."""
    expected = _unquote(expected)
    assert context.normalized == expected, f"{context.normalized!r} != {expected!r}"


@then("normalizing it again should not change it")
def step_impl(context):
    """Verify that normalization is idempotent."""
    assert normalize_line(context.normalized) == context.normalized

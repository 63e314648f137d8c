"""Rules for email addresses.

Only the shape of the address is checked; nothing is resolved or normalized.
"""
from ..core.base_rule import NotNullRule, PatternRule
from ..core.errors import InvalidEmailFormatError, NullEmailError


class EmailFormatRule(PatternRule):
    """Requires the email to fully match the configured email pattern."""

    name = "EmailFormat"
    field = "email"
    description = "Checks that the email address has a valid shape."
    error_class = InvalidEmailFormatError
    pattern_setting = "email_pattern"


class EmailNotNullRule(NotNullRule):
    name = "EmailNotNull"
    field = "email"
    description = "Checks that an email address was supplied."
    error_class = NullEmailError


EMAIL_RULES = (
    EmailFormatRule,
    EmailNotNullRule,
)

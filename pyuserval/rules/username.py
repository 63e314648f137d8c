"""Rules for usernames."""
from ..core.base_rule import MaxLengthRule, MinLengthRule, NotNullRule, PatternRule
from ..core.errors import (
    InvalidUsernameFormatError,
    InvalidUsernameLengthError,
    UsernameIsNullError,
)


class UsernameFormatRule(PatternRule):
    name = "UsernameFormat"
    field = "username"
    description = "Checks that the username only uses allowed characters."
    error_class = InvalidUsernameFormatError
    pattern_setting = "username_pattern"


class UsernameMinLengthRule(MinLengthRule):
    name = "UsernameMinLength"
    field = "username"
    description = "Checks that the username is not too short."
    message = "Username is too short"
    error_class = InvalidUsernameLengthError
    length_setting = "username_min_length"


class UsernameMaxLengthRule(MaxLengthRule):
    name = "UsernameMaxLength"
    field = "username"
    description = "Checks that the username is not too long."
    message = "Username is too long"
    error_class = InvalidUsernameLengthError
    length_setting = "username_max_length"


class UsernameNotNullRule(NotNullRule):
    name = "UsernameNotNull"
    field = "username"
    description = "Checks that a username was supplied."
    error_class = UsernameIsNullError


USERNAME_RULES = (
    UsernameFormatRule,
    UsernameMinLengthRule,
    UsernameMaxLengthRule,
    UsernameNotNullRule,
)

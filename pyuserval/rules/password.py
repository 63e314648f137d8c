"""Rules for passwords.

Password rules run in a different order than the username rules: the
username comparison comes before any length check, and the maximum length is
checked before the minimum.
"""
from typing import Any, Optional

from ..core.base_rule import BaseRule, MaxLengthRule, MinLengthRule, NotNullRule, PatternRule
from ..core.errors import (
    InvalidPasswordError,
    InvalidPasswordFormatError,
    InvalidPasswordLengthError,
    NullPasswordError,
)


class PasswordCharactersRule(PatternRule):
    name = "PasswordCharacters"
    field = "password"
    description = "Checks that the password only uses allowed characters."
    error_class = InvalidPasswordFormatError
    pattern_setting = "password_pattern"


class PasswordDiffersFromUsernameRule(BaseRule):
    """Rejects a password that is exactly the username.

    The comparison is case-sensitive and only applies when a username is
    given.
    """

    name = "PasswordDiffersFromUsername"
    field = "password"
    description = "Checks that the password is not the same as the username."
    error_class = InvalidPasswordError
    skip_none = False

    def _is_violated(self, value: Optional[str], **context: Any) -> bool:
        username = context.get("username")
        return username is not None and username == value


class PasswordMaxLengthRule(MaxLengthRule):
    name = "PasswordMaxLength"
    field = "password"
    description = "Checks that the password is not too long."
    message = "Password too long"
    error_class = InvalidPasswordLengthError
    length_setting = "password_max_length"


class PasswordMinLengthRule(MinLengthRule):
    name = "PasswordMinLength"
    field = "password"
    description = "Checks that the password is not too short."
    message = "Password too short"
    error_class = InvalidPasswordLengthError
    length_setting = "password_min_length"


class PasswordNotNullRule(NotNullRule):
    name = "PasswordNotNull"
    field = "password"
    description = "Checks that a password was supplied."
    error_class = NullPasswordError


PASSWORD_RULES = (
    PasswordCharactersRule,
    PasswordDiffersFromUsernameRule,
    PasswordMaxLengthRule,
    PasswordMinLengthRule,
    PasswordNotNullRule,
)

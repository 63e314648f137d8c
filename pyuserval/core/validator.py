"""Runs the validation rule chains for user input.

This module holds `UserValidator`, the object callers validate emails,
usernames and passwords with. A validator is built once from a
`ValidatorSettings` record (usually through the `Builder`) and can then be
used any number of times, from any number of threads: nothing on it changes
after construction.

Each `validate_*` method runs the field's rules in order and raises the error
of the first rule that fails. The `check_*` methods run the same chains but
return a `ValidationResult` instead of raising.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Sequence, Tuple, Type, TYPE_CHECKING

from .base_rule import BaseRule
from .errors import ValidationError
from .settings import ValidatorSettings
from ..rules import EMAIL_RULES, PASSWORD_RULES, USERNAME_RULES

if TYPE_CHECKING:
    from .builder import Builder

# Initialize a logger for this module.
logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidationResult:
    """The outcome of validating one field without raising.

    Attributes:
        field (str): The validated field.
        error (Optional[ValidationError]): The first violated rule's error,
            or None if the value passed every rule.
    """

    field: str
    error: Optional[ValidationError] = None

    @property
    def valid(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> Optional[str]:
        return self.error.kind if self.error else None

    @property
    def message(self) -> Optional[str]:
        return self.error.message if self.error else None

    def to_dict(self) -> Dict[str, Any]:
        """Returns the result in a standardized dictionary format."""
        return {
            "field": self.field,
            "valid": self.valid,
            "kind": self.kind,
            "message": self.message,
        }


class UserValidator:
    """Validates emails, usernames and passwords against configured rules.

    Attributes:
        settings (ValidatorSettings): The rule parameters this validator was
            built with.
    """

    def __init__(self, settings: Optional[ValidatorSettings] = None) -> None:
        """Initializes the validator and instantiates its rule chains.

        Args:
            settings (Optional[ValidatorSettings]): The rule parameters. The
                defaults are used when omitted.
        """
        self._settings = settings if settings is not None else ValidatorSettings()
        self._email_rules = self._instantiate(EMAIL_RULES)
        self._username_rules = self._instantiate(USERNAME_RULES)
        self._password_rules = self._instantiate(PASSWORD_RULES)

    @staticmethod
    def builder() -> "Builder":
        """Returns a new `Builder` pre-populated with the default settings."""
        from .builder import Builder

        return Builder()

    @property
    def settings(self) -> ValidatorSettings:
        return self._settings

    @property
    def rules(self) -> Dict[str, Tuple[BaseRule, ...]]:
        """The rule chains keyed by field, in the order they are applied."""
        return {
            "email": self._email_rules,
            "username": self._username_rules,
            "password": self._password_rules,
        }

    def _instantiate(self, rule_classes: Sequence[Type[BaseRule]]) -> Tuple[BaseRule, ...]:
        return tuple(rule_class(self._settings) for rule_class in rule_classes)

    def _run(self, rules: Sequence[BaseRule], value: Optional[str], **context: Any) -> bool:
        """Applies each rule in turn; the first violation propagates."""
        for rule in rules:
            try:
                rule.check(value, **context)
            except ValidationError as e:
                logger.debug(f"Rule {rule.name} failed for field '{rule.field}': {e.message}")
                raise
        return True

    def validate_email(self, email: Optional[str]) -> bool:
        """Validates an email address.

        Args:
            email (Optional[str]): The email address to check.

        Returns:
            bool: True if the email passes every rule.

        Raises:
            InvalidEmailFormatError: If the email does not match the pattern.
            NullEmailError: If the email is None.
        """
        return self._run(self._email_rules, email)

    def validate_username(self, username: Optional[str]) -> bool:
        """Validates a username.

        Args:
            username (Optional[str]): The username to check.

        Returns:
            bool: True if the username passes every rule.

        Raises:
            InvalidUsernameFormatError: If the username has disallowed
                characters.
            InvalidUsernameLengthError: If the username is too short or too
                long.
            UsernameIsNullError: If the username is None.
        """
        return self._run(self._username_rules, username)

    def validate_password(self, username: Optional[str], password: Optional[str]) -> bool:
        """Validates a password for the given username.

        Args:
            username (Optional[str]): The account's username. Only used to
                reject a password identical to it; may be None.
            password (Optional[str]): The password to check.

        Returns:
            bool: True if the password passes every rule.

        Raises:
            InvalidPasswordFormatError: If the password has disallowed
                characters.
            InvalidPasswordError: If the password equals the username.
            InvalidPasswordLengthError: If the password is too long or too
                short.
            NullPasswordError: If the password is None.
        """
        return self._run(self._password_rules, password, username=username)

    def check_email(self, email: Optional[str]) -> ValidationResult:
        """Like `validate_email`, but returns a `ValidationResult`."""
        return self._check("email", self.validate_email, email)

    def check_username(self, username: Optional[str]) -> ValidationResult:
        """Like `validate_username`, but returns a `ValidationResult`."""
        return self._check("username", self.validate_username, username)

    def check_password(self, username: Optional[str], password: Optional[str]) -> ValidationResult:
        """Like `validate_password`, but returns a `ValidationResult`."""
        return self._check("password", self.validate_password, username, password)

    @staticmethod
    def _check(field: str, validate: Callable[..., bool], *args: Optional[str]) -> ValidationResult:
        try:
            validate(*args)
        except ValidationError as e:
            return ValidationResult(field=field, error=e)
        return ValidationResult(field=field)

    def __repr__(self) -> str:
        return f"UserValidator({self._settings!r})"

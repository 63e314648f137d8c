"""Error taxonomy for user input validation.

Every rule in the validation chains raises exactly one of the classes defined
here. The classes are grouped by the field they guard so that callers can
catch either a specific rule violation (e.g. `InvalidPasswordLengthError`) or
every failure for one field (e.g. `PasswordError`).
"""
from typing import Any, Dict, Optional


class ValidationError(ValueError):
    """Base class for all rule violations.

    Attributes:
        field (str): The input field the failing rule guards.
        kind (str): A stable, language-independent identifier of the rule
            kind (e.g. "NullEmail"), suitable for mapping to user-facing text.
        message (str): The human-readable description of the violation.
    """

    field: str = "general"
    kind: str = "ValidationError"
    default_message: str = "Validation failed"

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Returns the error as a plain dictionary."""
        return {"field": self.field, "kind": self.kind, "message": self.message}


class EmailError(ValidationError):
    """Base class for email rule violations."""

    field = "email"


class NullEmailError(EmailError):
    kind = "NullEmail"
    default_message = "Email is null"


class InvalidEmailFormatError(EmailError):
    kind = "InvalidEmailFormat"
    default_message = "Email format is not valid"


class UsernameError(ValidationError):
    """Base class for username rule violations."""

    field = "username"


class UsernameIsNullError(UsernameError):
    kind = "UsernameIsNull"
    default_message = "Username is null"


class InvalidUsernameFormatError(UsernameError):
    kind = "InvalidUsernameFormat"
    default_message = "Username has no correct format"


class InvalidUsernameLengthError(UsernameError):
    """Raised for both too-short and too-long usernames; the message tells them apart."""

    kind = "InvalidUsernameLength"
    default_message = "Username has an invalid length"


class PasswordError(ValidationError):
    """Base class for password rule violations."""

    field = "password"


class NullPasswordError(PasswordError):
    kind = "NullPassword"
    default_message = "Password is null"


class InvalidPasswordFormatError(PasswordError):
    kind = "InvalidPasswordFormat"
    default_message = "Invalid characters in password"


class InvalidPasswordError(PasswordError):
    """Raised when the password is identical to the username."""

    kind = "InvalidPassword"
    default_message = "Password should be different than username"


class InvalidPasswordLengthError(PasswordError):
    kind = "InvalidPasswordLength"
    default_message = "Password has an invalid length"

"""pyuserval: Configurable validation of user account input.

This package checks emails, usernames and passwords against configurable
format and length rules, raising a distinct error for the first rule a value
breaks.
"""

from .core.builder import Builder, create, create_validator
from .core.config import Config
from .core.errors import (
    EmailError,
    InvalidEmailFormatError,
    InvalidPasswordError,
    InvalidPasswordFormatError,
    InvalidPasswordLengthError,
    InvalidUsernameFormatError,
    InvalidUsernameLengthError,
    NullEmailError,
    NullPasswordError,
    PasswordError,
    UsernameError,
    UsernameIsNullError,
    ValidationError,
)
from .core.settings import ValidatorSettings
from .core.validator import UserValidator, ValidationResult

__version__ = "0.1.0"
__license__ = "MIT"

__all__ = [
    "__version__",
    "__license__",
    "Builder",
    "Config",
    "UserValidator",
    "ValidationResult",
    "ValidatorSettings",
    "create",
    "create_validator",
    "ValidationError",
    "EmailError",
    "NullEmailError",
    "InvalidEmailFormatError",
    "UsernameError",
    "UsernameIsNullError",
    "InvalidUsernameFormatError",
    "InvalidUsernameLengthError",
    "PasswordError",
    "NullPasswordError",
    "InvalidPasswordFormatError",
    "InvalidPasswordError",
    "InvalidPasswordLengthError",
]

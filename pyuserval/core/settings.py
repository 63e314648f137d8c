"""Default rule parameters and the immutable settings record.

`ValidatorSettings` is the configuration bundle a `UserValidator` is built
from. It is frozen, so a validator's rules can never change after it has been
constructed.
"""
from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Tuple

# Local part, "@", a domain label, then one or more dot-separated labels.
DEFAULT_EMAIL_PATTERN = (
    r"^[A-Za-z0-9+._%-]{1,256}"
    r"@"
    r"[A-Za-z0-9][A-Za-z0-9-]{0,64}"
    r"(\.[A-Za-z0-9][A-Za-z0-9-]{1,25})+$"
)
DEFAULT_USERNAME_PATTERN = r"^[-_A-Za-z0-9]*$"
DEFAULT_USERNAME_MIN_LENGTH = 3
DEFAULT_USERNAME_MAX_LENGTH = 25
DEFAULT_PASSWORD_PATTERN = r"^[A-Za-z0-9_.,&%€@#~]*$"
DEFAULT_PASSWORD_MIN_LENGTH = 6
DEFAULT_PASSWORD_MAX_LENGTH = 20


@dataclass(frozen=True)
class ValidatorSettings:
    """The complete set of rule parameters used by a validator.

    Attributes:
        email_pattern (str): Regular expression an email must fully match.
        username_pattern (str): Regular expression a username must fully match.
        username_min_length (int): Shortest accepted username.
        username_max_length (int): Longest accepted username.
        password_pattern (str): Regular expression describing the allowed
            password characters.
        password_min_length (int): Shortest accepted password.
        password_max_length (int): Longest accepted password.
    """

    email_pattern: str = DEFAULT_EMAIL_PATTERN
    username_pattern: str = DEFAULT_USERNAME_PATTERN
    username_min_length: int = DEFAULT_USERNAME_MIN_LENGTH
    username_max_length: int = DEFAULT_USERNAME_MAX_LENGTH
    password_pattern: str = DEFAULT_PASSWORD_PATTERN
    password_min_length: int = DEFAULT_PASSWORD_MIN_LENGTH
    password_max_length: int = DEFAULT_PASSWORD_MAX_LENGTH

    @classmethod
    def field_names(cls) -> Tuple[str, ...]:
        """Returns the names of every setting, in declaration order."""
        return tuple(f.name for f in fields(cls))

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


DEFAULT_SETTINGS = ValidatorSettings()

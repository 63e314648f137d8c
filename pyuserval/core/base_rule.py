"""
Base rule class that all validation guard clauses inherit from.
"""

import re
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Type, TYPE_CHECKING

from .errors import ValidationError

if TYPE_CHECKING:
    from .settings import ValidatorSettings


class BaseRule(ABC):
    """Abstract base class for a single validation rule.

    A rule enforces one constraint (format, length, inequality or presence)
    on one field. Rules are arranged into ordered chains by the validator;
    the first rule whose `check` raises ends the chain.

    All rules must inherit from this class and implement `_is_violated`.

    Attributes:
        name (str): The display name of the rule.
        field (str): The field the rule guards ("email", "username" or
            "password").
        description (str): A brief explanation of what the rule checks.
        message (str): The message carried by the raised error.
        error_class (Type[ValidationError]): The error raised on violation.
        skip_none (bool): When True the rule is a no-op for a None value, so
            that a missing value is only ever reported by the presence rule.
    """

    name: str = "UnnamedRule"
    field: str = "general"
    description: str = "No description provided"
    message: Optional[str] = None
    error_class: Type[ValidationError] = ValidationError
    skip_none: bool = True

    def __init__(self, settings: "ValidatorSettings") -> None:
        """Initializes the rule with the validator's settings.

        Args:
            settings (ValidatorSettings): The immutable rule parameters.
        """
        self.settings = settings

    def check(self, value: Optional[str], **context: Any) -> None:
        """Applies the rule to a value.

        Args:
            value (Optional[str]): The field value being validated.
            **context: Additional values some rules compare against (e.g.
                the username when validating a password).

        Raises:
            ValidationError: The rule's `error_class` if the value violates
                the rule.
        """
        if value is None and self.skip_none:
            return
        if self._is_violated(value, **context):
            raise self.error_class(self.message)

    @abstractmethod
    def _is_violated(self, value: Optional[str], **context: Any) -> bool:
        """Returns True if the value breaks this rule.

        Subclasses must override this method with their specific constraint.
        """
        raise NotImplementedError("Subclasses must implement _is_violated()")

    def describe(self) -> Dict[str, Any]:
        """Returns the rule's metadata in a standardized dictionary format."""
        return {
            "name": self.name,
            "field": self.field,
            "description": self.description,
            "kind": self.error_class.kind,
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}(field={self.field!r})"


class PatternRule(BaseRule):
    """Requires the whole value to match a configured regular expression.

    Subclasses set `pattern_setting` to the name of the `ValidatorSettings`
    attribute holding the pattern.
    """

    pattern_setting: str = ""

    def _is_violated(self, value: Optional[str], **context: Any) -> bool:
        pattern = getattr(self.settings, self.pattern_setting)
        return re.fullmatch(pattern, value) is None


class MinLengthRule(BaseRule):
    """Rejects values shorter than a configured length."""

    length_setting: str = ""

    def _is_violated(self, value: Optional[str], **context: Any) -> bool:
        return len(value) < getattr(self.settings, self.length_setting)


class MaxLengthRule(BaseRule):
    """Rejects values longer than a configured length."""

    length_setting: str = ""

    def _is_violated(self, value: Optional[str], **context: Any) -> bool:
        return len(value) > getattr(self.settings, self.length_setting)


class NotNullRule(BaseRule):
    """Rejects a missing value. Always the last rule of a chain."""

    skip_none = False

    def _is_violated(self, value: Optional[str], **context: Any) -> bool:
        return value is None

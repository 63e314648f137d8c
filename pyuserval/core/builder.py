"""Construction of `UserValidator` instances.

Two equivalent ways are offered:

- `create()` returns a fluent `Builder` pre-populated with the defaults,
  whose `with_*` methods each override one setting before `build()`.
- `create_validator()` takes a mapping of overrides and returns the
  validator directly.

Neither validates the overrides themselves: a minimum larger than its
maximum, or a pattern that does not compile, is accepted and simply makes
the corresponding rule behave accordingly when used.
"""

import logging
from dataclasses import replace
from typing import Any, Dict, Mapping, Optional, TYPE_CHECKING

from .settings import DEFAULT_SETTINGS, ValidatorSettings
from .validator import UserValidator

if TYPE_CHECKING:
    from .config import Config

logger = logging.getLogger(__name__)


class Builder:
    """Stages validator settings and produces immutable validators."""

    def __init__(self) -> None:
        self._fields: Dict[str, Any] = DEFAULT_SETTINGS.to_dict()

    def _with(self, name: str, value: Any) -> "Builder":
        self._fields[name] = value
        return self

    def with_email_pattern(self, pattern: str) -> "Builder":
        return self._with("email_pattern", pattern)

    def with_username_pattern(self, pattern: str) -> "Builder":
        return self._with("username_pattern", pattern)

    def with_password_pattern(self, pattern: str) -> "Builder":
        return self._with("password_pattern", pattern)

    def with_username_min_length(self, length: int) -> "Builder":
        return self._with("username_min_length", length)

    def with_username_max_length(self, length: int) -> "Builder":
        return self._with("username_max_length", length)

    def with_password_min_length(self, length: int) -> "Builder":
        return self._with("password_min_length", length)

    def with_password_max_length(self, length: int) -> "Builder":
        return self._with("password_max_length", length)

    def with_config(self, config: "Config") -> "Builder":
        """Applies every validator setting found in a `Config`.

        Args:
            config (Config): The loaded application configuration.

        Returns:
            Builder: This builder, for chaining.
        """
        for name, value in config.settings_overrides().items():
            self._with(name, value)
        return self

    def build(self) -> UserValidator:
        """Returns a validator using a snapshot of the staged settings."""
        settings = ValidatorSettings(**self._fields)
        logger.debug(f"Building validator with {settings}")
        return UserValidator(settings)


def create() -> Builder:
    """Returns a `Builder` pre-populated with the default settings."""
    return Builder()


def create_validator(overrides: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> UserValidator:
    """Builds a validator from the defaults plus a partial set of overrides.

    Args:
        overrides (Optional[Mapping[str, Any]]): Settings to override, keyed
            by `ValidatorSettings` field name.
        **kwargs: Further overrides; these win over `overrides`.

    Returns:
        UserValidator: The configured validator.

    Raises:
        ValueError: If an override names an unknown setting.
    """
    changes = dict(overrides or {})
    changes.update(kwargs)
    unknown = sorted(set(changes) - set(ValidatorSettings.field_names()))
    if unknown:
        raise ValueError(f"Unknown validator setting(s): {', '.join(unknown)}")
    return UserValidator(replace(DEFAULT_SETTINGS, **changes))

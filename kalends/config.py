"""Configuration records for Kalends.

Two immutable pydantic models describe configuration:

    DatetimeConfig: The full process-wide record, every option defaulted.
    ConfigOverride: The same options, all optional, used for per-instance
        and per-call overrides.

Both accept snake_case field names and the camelCase keys of the
configuration file format (``firstDayOfWeek``, ``defaultFormat``, ...).

Precedence for any effective value:
    per-call override > per-instance override > process-wide > default

The process-wide record is replaced, never mutated, by configure() and
reset_config(). It is meant to be set once at startup; concurrent writers
from several threads need external locking.

Loading the record from configuration files is left to the application.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from kalends.errors import ConfigurationError

DEFAULT_FORMAT = "YYYY-MM-DDTHH:mm:ssZ"


class DatetimeConfig(BaseModel):
    """Process-wide configuration record.

    Attributes:
        verbose: Emit debug log records for degraded parses.
        locale: Default locale key for humanized output.
        timezone: Timezone name, stored and echoed back only.
        strict: Raise on malformed date and relative strings.
        first_day_of_week: First day of the week (0=Sunday .. 6=Saturday).
        default_format: Template used by format() and str().
        parse_locale: Locale key for parsing relative strings.

    Examples:
        >>> DatetimeConfig().first_day_of_week
        0
        >>> DatetimeConfig(firstDayOfWeek=1).first_day_of_week
        1
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    verbose: bool = True
    locale: str = "en"
    timezone: str = "UTC"
    strict: bool = False
    first_day_of_week: int = Field(default=0, ge=0, le=6)
    default_format: str = DEFAULT_FORMAT
    parse_locale: str = "en"


class ConfigOverride(BaseModel):
    """Partial configuration carried by a Datetime or passed to one call.

    Every field is optional; None means "not overridden here".
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    verbose: Optional[bool] = None
    locale: Optional[str] = None
    timezone: Optional[str] = None
    strict: Optional[bool] = None
    first_day_of_week: Optional[int] = Field(default=None, ge=0, le=6)
    default_format: Optional[str] = None
    parse_locale: Optional[str] = None


ConfigInput = Union[ConfigOverride, Mapping[str, Any], None]

_config: DatetimeConfig = DatetimeConfig()


def get_config() -> DatetimeConfig:
    """Return the current process-wide configuration."""
    return _config


def configure(**options: Any) -> DatetimeConfig:
    """Merge options onto the process-wide configuration.

    Args:
        **options: Any DatetimeConfig field, by snake_case name or
            camelCase alias.

    Returns:
        The new process-wide configuration.

    Raises:
        ConfigurationError: If an option is unknown or invalid.

    Examples:
        >>> configure(strict=True).strict
        True
        >>> configure(firstDayOfWeek=1).first_day_of_week
        1
    """
    global _config
    merged = _config.model_dump()
    merged.update(_to_snake(options))
    try:
        _config = DatetimeConfig.model_validate(merged)
    except ValidationError as e:
        raise ConfigurationError(f"invalid configuration: {e}") from e
    return _config


def reset_config() -> DatetimeConfig:
    """Restore the process-wide configuration to its defaults."""
    global _config
    _config = DatetimeConfig()
    return _config


def coerce_override(value: ConfigInput) -> ConfigOverride | None:
    """Turn a mapping or ConfigOverride into a ConfigOverride.

    Args:
        value: A ConfigOverride, a mapping of option names, or None.

    Returns:
        A ConfigOverride, or None when value is None.

    Raises:
        ConfigurationError: If the mapping holds unknown or invalid options.
    """
    if value is None or isinstance(value, ConfigOverride):
        return value
    if not isinstance(value, Mapping):
        raise ConfigurationError(
            f"config must be a mapping or ConfigOverride, got {type(value).__name__}"
        )
    try:
        return ConfigOverride.model_validate(dict(value))
    except ValidationError as e:
        raise ConfigurationError(f"invalid configuration override: {e}") from e


def resolve(
    name: str,
    call: ConfigOverride | None = None,
    instance: ConfigOverride | None = None,
) -> Any:
    """Resolve one option through the precedence chain.

    Args:
        name: The snake_case option name.
        call: Per-call override, highest precedence.
        instance: Per-instance override.

    Returns:
        The first value that is not None, ending with the process-wide
        configuration (which always has a value).

    Examples:
        >>> resolve("strict", ConfigOverride(strict=True))
        True
        >>> resolve("timezone")
        'UTC'
    """
    for layer in (call, instance):
        if layer is not None:
            value = getattr(layer, name)
            if value is not None:
                return value
    return getattr(_config, name)


def _to_snake(options: Mapping[str, Any]) -> dict[str, Any]:
    """Map camelCase aliases in options to field names."""
    aliases = {
        field.alias: name
        for name, field in DatetimeConfig.model_fields.items()
        if field.alias
    }
    return {aliases.get(key, key): value for key, value in options.items()}


__all__ = [
    "DEFAULT_FORMAT",
    "DatetimeConfig",
    "ConfigOverride",
    "ConfigInput",
    "get_config",
    "configure",
    "reset_config",
    "coerce_override",
    "resolve",
]

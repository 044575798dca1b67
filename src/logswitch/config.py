from typing import Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_TRUTHY = {'1', 'true', 'yes', 'on'}


def _flag(value: Any) -> Any:
    """Anything outside the truthy spellings reads as off."""
    if isinstance(value, str):
        return value.strip().lower() in _TRUTHY
    return value


class LogSettings(BaseSettings):
    """Facade settings, `CONFIG_LOGSWITCH_*`."""
    model_config = SettingsConfigDict(env_prefix='CONFIG_LOGSWITCH_', frozen=True)

    enabled: bool = True
    default: str = 'console'

    @field_validator('enabled', mode='before')
    @classmethod
    def parse_flag(cls, v: Any) -> Any:
        return _flag(v)

    @field_validator('default', mode='before')
    @classmethod
    def blank_is_console(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip() or 'console'
        return v


class ConsoleSettings(BaseSettings):
    """Console backend settings, `CONFIG_LOGSWITCH_CONSOLE_*`.

    `level` stays text; the console backend validates it.
    """
    model_config = SettingsConfigDict(env_prefix='CONFIG_LOGSWITCH_CONSOLE_', frozen=True)

    level: str = 'TRACE'
    colorize: bool = True

    @field_validator('colorize', mode='before')
    @classmethod
    def parse_flag(cls, v: Any) -> Any:
        return _flag(v)

    @field_validator('level', mode='before')
    @classmethod
    def upper_level(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().upper() or 'TRACE'
        return v


class DiagnosticSettings(BaseSettings):
    """Diagnostics written to stderr, `CONFIG_LOGSWITCH_DIAGNOSTIC_*`."""
    model_config = SettingsConfigDict(env_prefix='CONFIG_LOGSWITCH_DIAGNOSTIC_', frozen=True)

    traceback: bool = True

    @field_validator('traceback', mode='before')
    @classmethod
    def parse_flag(cls, v: Any) -> Any:
        return _flag(v)


# Environment
log = LogSettings()
console = ConsoleSettings()
diagnostic = DiagnosticSettings()

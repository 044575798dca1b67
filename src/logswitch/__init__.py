"""Logging facade with runtime-selectable backends.

Public API - users should only import from this module.

Usage:
    import logswitch

    # Module-level logging goes through the global logger (console by default)
    logswitch.info('Application started')
    logswitch.error('Upload of %s failed', path, exc)

    # Switch every module-level call to another backend
    logswitch.set_global('loguru')

    # Or hold a logger for a specific backend
    log = logswitch.of('logging')
    if log.is_debug_enabled():
        log.debug('Query took %.2fs', elapsed)

    # Plug in your own backend
    logswitch.add_factory('mine', MyFactory('Mine'))
"""
from typing import Any

from logswitch._caller import CallerFrame
from logswitch._context import add_prefix, clear_prefix, close_logger
from logswitch._context import is_logger_open, open_logger, prefixed
from logswitch._factory import Factory, InitState, Journal
from logswitch._logger import Logger
from logswitch._registry import Registry, get_registry
from logswitch.exceptions import BackendInvocationError, HandleCreationError
from logswitch.exceptions import LogSwitchError, MessageFormatError
from logswitch.exceptions import UnsupportedBackendError
from logswitch.levels import Level


def of(id: str | None = None) -> Logger:
    """Get a logger for backend `id` (console when None)."""
    return Logger.of(id)


def set_global(id: str | None) -> bool:
    """Make `id` the global logger. False if unknown or unsupported."""
    return Logger.set_global(id)


def get_global() -> Logger:
    """Get the global logger used by the module-level functions."""
    return Logger.get_global()


def add_factory(id: str | None, factory: Factory | None) -> bool:
    """Register a custom backend. False if either argument is None."""
    return get_registry().register(id, factory)


# Module-level convenience functions
def is_trace_enabled() -> bool:
    return get_global().is_trace_enabled()


def is_debug_enabled() -> bool:
    return get_global().is_debug_enabled()


def is_info_enabled() -> bool:
    return get_global().is_info_enabled()


def is_warn_enabled() -> bool:
    return get_global().is_warn_enabled()


def is_error_enabled() -> bool:
    return get_global().is_error_enabled()


def trace(template: str | None, *args: Any) -> None:
    """Log a trace message."""
    get_global().trace(template, *args)


def debug(template: str | None, *args: Any) -> None:
    """Log a debug message."""
    get_global().debug(template, *args)


def info(template: str | None, *args: Any) -> None:
    """Log an info message."""
    get_global().info(template, *args)


def warn(template: str | None, *args: Any) -> None:
    """Log a warning message."""
    get_global().warn(template, *args)


def error(template: str | None, *args: Any) -> None:
    """Log an error message. A trailing exception is logged as the cause."""
    get_global().error(template, *args)


def trace_or_raise(should_raise: bool, cause: BaseException | None, template: str | None,
                   *args: Any, error: type[BaseException] = RuntimeError) -> None:
    get_global().trace_or_raise(should_raise, cause, template, *args, error=error)


def debug_or_raise(should_raise: bool, cause: BaseException | None, template: str | None,
                   *args: Any, error: type[BaseException] = RuntimeError) -> None:
    get_global().debug_or_raise(should_raise, cause, template, *args, error=error)


def info_or_raise(should_raise: bool, cause: BaseException | None, template: str | None,
                  *args: Any, error: type[BaseException] = RuntimeError) -> None:
    get_global().info_or_raise(should_raise, cause, template, *args, error=error)


def warn_or_raise(should_raise: bool, cause: BaseException | None, template: str | None,
                  *args: Any, error: type[BaseException] = RuntimeError) -> None:
    get_global().warn_or_raise(should_raise, cause, template, *args, error=error)


def error_or_raise(should_raise: bool, cause: BaseException | None, template: str | None,
                   *args: Any, error: type[BaseException] = RuntimeError) -> None:
    get_global().error_or_raise(should_raise, cause, template, *args, error=error)


# Aliases
warning = warn


__all__ = [
    # Backend selection
    'of',
    'set_global',
    'get_global',
    'add_factory',
    'get_registry',
    # Types
    'Logger',
    'Level',
    'Factory',
    'Journal',
    'InitState',
    'Registry',
    'CallerFrame',
    # Logging methods
    'is_trace_enabled',
    'is_debug_enabled',
    'is_info_enabled',
    'is_warn_enabled',
    'is_error_enabled',
    'trace',
    'debug',
    'info',
    'warn',
    'warning',
    'error',
    'trace_or_raise',
    'debug_or_raise',
    'info_or_raise',
    'warn_or_raise',
    'error_or_raise',
    # Switches
    'open_logger',
    'close_logger',
    'is_logger_open',
    'add_prefix',
    'clear_prefix',
    'prefixed',
    # Errors
    'LogSwitchError',
    'UnsupportedBackendError',
    'HandleCreationError',
    'BackendInvocationError',
    'MessageFormatError',
]

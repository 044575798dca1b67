"""Logger facade - a lightweight handle on a backend id.

Users interact with this module, never with a backend directly.
"""
from __future__ import annotations

from typing import Any

from logswitch._caller import CallerFrame, resolve_caller
from logswitch._context import is_logger_open
from logswitch._factory import Journal
from logswitch._format import format_message
from logswitch.levels import Level

__all__ = ['Logger']


class Logger:
    """Logging facade bound to a backend id.

    Loggers are values: two loggers with the same id are interchangeable.
    Every call resolves the backend through the registry, so replacing a
    registration takes effect immediately.

    >>> log = Logger.of('console')  # doctest: +SKIP
    >>> log.info('loaded %d rows', 42)  # doctest: +SKIP
    """

    def __init__(self, id: str) -> None:
        # Unchecked; use Logger.of() to validate the id
        self._id = id

    @property
    def id(self) -> str:
        return self._id

    @classmethod
    def of(cls, id: str | None = None) -> Logger:
        """Get a logger for a registered, supported backend.

        Returns the console logger when `id` is None.

        Raises
            UnsupportedBackendError: `id` is unknown or its backend unusable
        """
        from logswitch._registry import get_registry
        registry = get_registry()
        if id is None:
            return registry.default
        registry.check(id, raise_error=True)
        return cls(id)

    @staticmethod
    def set_global(id: str | None) -> bool:
        """Route module-level logging calls to `id`. False if unusable."""
        from logswitch._registry import get_registry
        return get_registry().set_current(id)

    @staticmethod
    def get_global() -> Logger:
        from logswitch._registry import get_registry
        return get_registry().current()

    def _journal(self, caller: CallerFrame) -> Journal:
        from logswitch._registry import get_registry
        factory = get_registry().resolve(self._id)
        return factory.get_or_create_journal(caller.module)

    # enablement

    def is_enabled_for(self, level: Level | str) -> bool:
        if not is_logger_open():
            return False
        return self._journal(resolve_caller()).is_enabled_for(Level.parse(level))

    def is_trace_enabled(self) -> bool:
        return self.is_enabled_for(Level.TRACE)

    def is_debug_enabled(self) -> bool:
        return self.is_enabled_for(Level.DEBUG)

    def is_info_enabled(self) -> bool:
        return self.is_enabled_for(Level.INFO)

    def is_warn_enabled(self) -> bool:
        return self.is_enabled_for(Level.WARN)

    def is_error_enabled(self) -> bool:
        return self.is_enabled_for(Level.ERROR)

    # logging

    def log(self, level: Level | str, template: str | None, *args: Any) -> None:
        """Log `template % args` at `level`.

        A trailing exception in `args` is logged as the cause.
        """
        level = Level.parse(level)
        if not is_logger_open():
            return
        caller = resolve_caller()
        journal = self._journal(caller)
        if journal.is_enabled_for(level):
            journal.emit(level, template, *args, caller=caller)

    def trace(self, template: str | None, *args: Any) -> None:
        self.log(Level.TRACE, template, *args)

    def debug(self, template: str | None, *args: Any) -> None:
        self.log(Level.DEBUG, template, *args)

    def info(self, template: str | None, *args: Any) -> None:
        self.log(Level.INFO, template, *args)

    def warn(self, template: str | None, *args: Any) -> None:
        self.log(Level.WARN, template, *args)

    def error(self, template: str | None, *args: Any) -> None:
        self.log(Level.ERROR, template, *args)

    # Aliases
    warning = warn

    # log or raise

    def log_or_raise(self, level: Level | str, should_raise: bool,
                     cause: BaseException | None, template: str | None, *args: Any,
                     error: type[BaseException] = RuntimeError) -> None:
        """Raise `error(template % args)` from `cause`, or log it.

        When `should_raise` is false the message is logged at `level` with
        `cause` attached, but only if the level is enabled.
        """
        if should_raise:
            raise error(format_message(template, args)) from cause
        level = Level.parse(level)
        if not is_logger_open():
            return
        caller = resolve_caller()
        journal = self._journal(caller)
        if journal.is_enabled_for(level):
            if cause is not None:
                args = (*args, cause)
            journal.emit(level, template, *args, caller=caller)

    def trace_or_raise(self, should_raise: bool, cause: BaseException | None,
                       template: str | None, *args: Any,
                       error: type[BaseException] = RuntimeError) -> None:
        self.log_or_raise(Level.TRACE, should_raise, cause, template, *args, error=error)

    def debug_or_raise(self, should_raise: bool, cause: BaseException | None,
                       template: str | None, *args: Any,
                       error: type[BaseException] = RuntimeError) -> None:
        self.log_or_raise(Level.DEBUG, should_raise, cause, template, *args, error=error)

    def info_or_raise(self, should_raise: bool, cause: BaseException | None,
                      template: str | None, *args: Any,
                      error: type[BaseException] = RuntimeError) -> None:
        self.log_or_raise(Level.INFO, should_raise, cause, template, *args, error=error)

    def warn_or_raise(self, should_raise: bool, cause: BaseException | None,
                      template: str | None, *args: Any,
                      error: type[BaseException] = RuntimeError) -> None:
        self.log_or_raise(Level.WARN, should_raise, cause, template, *args, error=error)

    def error_or_raise(self, should_raise: bool, cause: BaseException | None,
                       template: str | None, *args: Any,
                       error: type[BaseException] = RuntimeError) -> None:
        self.log_or_raise(Level.ERROR, should_raise, cause, template, *args, error=error)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Logger):
            return NotImplemented
        return self._id.casefold() == other._id.casefold()

    def __hash__(self) -> int:
        return hash(self._id.casefold())

    def __repr__(self) -> str:
        return f'Logger({self._id!r})'

    def __str__(self) -> str:
        return self._id

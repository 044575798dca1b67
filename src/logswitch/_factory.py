"""Backend capability contract, handle cache and per-component journals.

A `Factory` stands for one backend. It detects once whether the backend
can be used, then hands out one `Journal` per calling component. Adapters
subclass `Factory` and implement `init`, `new_handle`, `is_enabled_for`
and `emit`; everything else here is shared machinery.
"""
from __future__ import annotations

import threading
from enum import Enum
from typing import Any

from logswitch._caller import CallerFrame, resolve_caller
from logswitch._context import apply_prefix, is_logger_open
from logswitch._diagnostic import report
from logswitch._format import format_message, split_cause
from logswitch._rwlock import ReadWriteLock
from logswitch.exceptions import BackendInvocationError, HandleCreationError
from logswitch.exceptions import MessageFormatError, UnsupportedBackendError
from logswitch.levels import Level

__all__ = ['Factory', 'Journal', 'InitState']


class InitState(Enum):
    """Capability detection state; leaves UNINIT exactly once."""
    UNINIT = 'uninit'
    SUCCEEDED = 'succeeded'
    FAILED = 'failed'


class Journal:
    """Backend handle bound to a single calling component.

    Created by `Factory.get_or_create_journal` and owned by that
    factory's cache. Neither method raises.
    """

    __slots__ = ('_factory', '_handle', '_component')

    def __init__(self, factory: Factory, handle: Any, component: str) -> None:
        self._factory = factory
        self._handle = handle
        self._component = component

    @property
    def factory(self) -> Factory:
        return self._factory

    @property
    def handle(self) -> Any:
        return self._handle

    @property
    def component(self) -> str:
        return self._component

    def is_enabled_for(self, level: Level) -> bool:
        if not is_logger_open():
            return False
        try:
            return bool(getattr(self._factory, level.enabled_hook)(self._handle))
        except Exception as exc:
            self._report(f'{level.name} enablement check failed for {self._component}', exc)
            return False

    def emit(self, level: Level, template: str | None, *args: Any,
             caller: CallerFrame | None = None) -> None:
        """Format and forward one entry to the factory's level hook.

        A trailing exception in `args` is carried as the cause instead of
        being interpolated.
        """
        if not is_logger_open():
            return
        args, cause = split_cause(args)
        if caller is None:
            caller = resolve_caller()
        try:
            message = apply_prefix(format_message(template, args))
        except MessageFormatError as exc:
            report(f'Dropped {level.name} entry from {caller}', exc)
            return
        try:
            getattr(self._factory, level.hook)(self._handle, caller, message, cause)
        except Exception as exc:
            self._report(f'Dropped {level.name} entry from {caller}', exc)

    def _report(self, message: str, exc: Exception) -> None:
        failure = BackendInvocationError(f"'{self._factory.name}' backend failed")
        failure.__cause__ = exc
        report(message, failure)

    def __repr__(self) -> str:
        return f'Journal({self._factory.name!r}, {self._component!r})'


class Factory:
    """One logging backend.

    Subclasses override `init` to detect the backend library, `new_handle`
    to create a backend-native logger for a component, and the generic
    `is_enabled_for` / `emit` pair. The per-level hooks default to the
    generic pair, so an adapter overrides a single level only where the
    backend differs (a different severity name, a different stream).
    """

    #: Console-style factories are always supported and skip `init`.
    console = False

    def __init__(self, name: str) -> None:
        self._name = name
        self._state = InitState.SUCCEEDED if self.console else InitState.UNINIT
        self._init_lock = threading.Lock()
        self._cache: dict[str, Journal] = {}
        self._cache_lock = ReadWriteLock()

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_console(self) -> bool:
        return self.console

    @property
    def init_state(self) -> InitState:
        return self._state

    # capability detection

    def init(self) -> bool:
        """Detect the backend. Exceptions count as "not supported"."""
        return self.console

    def is_supported(self) -> bool:
        """Run `init` once, on first call, and cache the answer.
        """
        state = self._state
        if state is InitState.UNINIT:
            with self._init_lock:
                if self._state is InitState.UNINIT:
                    self._state = self._detect()
                state = self._state
        return state is InitState.SUCCEEDED

    def _detect(self) -> InitState:
        try:
            supported = bool(self.init())
        except Exception as exc:
            report(f"The '{self._name}' logs are not supported", exc)
            return InitState.FAILED
        return InitState.SUCCEEDED if supported else InitState.FAILED

    # handle cache

    def new_handle(self, component: str) -> Any:
        """Create the backend-native logger for `component`."""
        raise NotImplementedError

    def get_or_create_journal(self, component: str) -> Journal:
        """Return the cached journal for `component`, creating it once.

        Raises
            UnsupportedBackendError: the backend failed detection
            HandleCreationError: `new_handle` failed or returned None
        """
        if not self.is_supported():
            raise UnsupportedBackendError(
                self._name, f"The '{self._name}' logs are not supported")
        with self._cache_lock.read_locked():
            journal = self._cache.get(component)
        if journal is not None:
            return journal
        with self._cache_lock.write_locked():
            journal = self._cache.get(component)
            if journal is not None:
                return journal
            try:
                handle = self.new_handle(component)
            except Exception as exc:
                raise HandleCreationError(self._name, component) from exc
            if handle is None:
                raise HandleCreationError(self._name, component)
            journal = Journal(self, handle, component)
            self._cache[component] = journal
        return journal

    def components(self) -> list[str]:
        """Component ids with a cached journal."""
        with self._cache_lock.read_locked():
            return list(self._cache)

    # enablement

    def is_enabled_for(self, handle: Any, level: Level) -> bool:
        return True

    def is_trace_enabled(self, handle: Any) -> bool:
        return self.is_enabled_for(handle, Level.TRACE)

    def is_debug_enabled(self, handle: Any) -> bool:
        return self.is_enabled_for(handle, Level.DEBUG)

    def is_info_enabled(self, handle: Any) -> bool:
        return self.is_enabled_for(handle, Level.INFO)

    def is_warn_enabled(self, handle: Any) -> bool:
        return self.is_enabled_for(handle, Level.WARN)

    def is_error_enabled(self, handle: Any) -> bool:
        return self.is_enabled_for(handle, Level.ERROR)

    # emission

    def emit(self, handle: Any, level: Level, caller: CallerFrame, message: str,
             cause: BaseException | None) -> None:
        raise NotImplementedError

    def trace(self, handle: Any, caller: CallerFrame, message: str,
              cause: BaseException | None) -> None:
        self.emit(handle, Level.TRACE, caller, message, cause)

    def debug(self, handle: Any, caller: CallerFrame, message: str,
              cause: BaseException | None) -> None:
        self.emit(handle, Level.DEBUG, caller, message, cause)

    def info(self, handle: Any, caller: CallerFrame, message: str,
             cause: BaseException | None) -> None:
        self.emit(handle, Level.INFO, caller, message, cause)

    def warn(self, handle: Any, caller: CallerFrame, message: str,
             cause: BaseException | None) -> None:
        self.emit(handle, Level.WARN, caller, message, cause)

    def error(self, handle: Any, caller: CallerFrame, message: str,
              cause: BaseException | None) -> None:
        self.emit(handle, Level.ERROR, caller, message, cause)

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self._name!r}, {self._state.value})'

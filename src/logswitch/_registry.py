"""Process-wide backend registry and the current global logger."""
from __future__ import annotations

import threading
from collections.abc import Mapping

from logswitch import config
from logswitch._backend import builtin_factories
from logswitch._diagnostic import report
from logswitch._factory import Factory
from logswitch._logger import Logger
from logswitch.exceptions import UnsupportedBackendError

__all__ = ['Registry', 'get_registry', 'DEFAULT_ID']

DEFAULT_ID = 'console'


def _key(backend_id: str) -> str:
    return backend_id.casefold()


class Registry:
    """Case-insensitive map of backend id to `Factory`.

    Writers swap in a new dict under a lock; readers use whatever dict is
    current, so a registration is visible to every thread as soon as
    `register` returns.
    """

    def __init__(self, factories: Mapping[str, Factory] | None = None) -> None:
        if factories is None:
            factories = builtin_factories()
        self._lock = threading.Lock()
        self._factories = {_key(k): v for k, v in factories.items()}
        self._default = Logger(DEFAULT_ID)
        self._current = self._default

    def register(self, backend_id: str | None, factory: Factory | None) -> bool:
        """Add or replace a backend. Last registration wins."""
        if backend_id is None or factory is None:
            return False
        with self._lock:
            factories = dict(self._factories)
            factories[_key(backend_id)] = factory
            self._factories = factories
        return True

    def get(self, backend_id: str) -> Factory | None:
        return self._factories.get(_key(backend_id))

    def resolve(self, backend_id: str) -> Factory:
        factory = self.get(backend_id)
        if factory is None:
            raise UnsupportedBackendError(backend_id)
        return factory

    def check(self, backend_id: str, raise_error: bool = False) -> bool:
        """Whether `backend_id` is registered and its backend usable.

        Raises UnsupportedBackendError instead of answering False when
        `raise_error` is set.
        """
        factory = self.get(backend_id) if backend_id is not None else None
        if factory is None:
            if raise_error:
                raise UnsupportedBackendError(backend_id)
            return False
        if factory.is_supported():
            return True
        if raise_error:
            raise UnsupportedBackendError(
                backend_id, f'The log implementation factory for [{backend_id}] is not supported.')
        return False

    def ids(self) -> list[str]:
        return sorted(self._factories)

    @property
    def default(self) -> Logger:
        """Console logger used when no id is given."""
        return self._default

    def current(self) -> Logger:
        return self._current

    def set_current(self, backend_id: str | None) -> bool:
        """Make `backend_id` the global logger if its backend is usable.
        """
        if not self.check(backend_id):
            return False
        if _key(self._current.id) != _key(backend_id):
            self._current = Logger(backend_id)
        return True


_registry: Registry | None = None
_registry_lock = threading.Lock()


def get_registry() -> Registry:
    """Get the process-wide registry, creating it on first use."""
    global _registry
    registry = _registry
    if registry is None:
        with _registry_lock:
            if _registry is None:
                _registry = _create_registry()
            registry = _registry
    return registry


def _create_registry() -> Registry:
    registry = Registry()
    default = config.log.default
    if _key(default) != DEFAULT_ID and not registry.set_current(default):
        report(f'Cannot use {default!r} as the global logger, falling back to {DEFAULT_ID!r}')
    return registry

"""Process-wide kill switch and per-context message prefix."""
from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

from logswitch import config

__all__ = [
    'open_logger',
    'close_logger',
    'is_logger_open',
    'add_prefix',
    'clear_prefix',
    'get_prefix',
    'prefixed',
    'apply_prefix',
    ]

_enabled = threading.Event()
if config.log.enabled:
    _enabled.set()

_prefix: ContextVar[str | None] = ContextVar('logswitch_prefix', default=None)


def open_logger() -> None:
    """Allow log entries to reach backends."""
    _enabled.set()


def close_logger() -> None:
    """Drop every log entry until `open_logger` is called."""
    _enabled.clear()


def is_logger_open() -> bool:
    return _enabled.is_set()


def add_prefix(prefix: str | None) -> None:
    """Prefix messages logged from the current thread/context."""
    _prefix.set(prefix)


def clear_prefix() -> None:
    _prefix.set(None)


def get_prefix() -> str | None:
    return _prefix.get()


@contextmanager
def prefixed(prefix: str) -> Iterator[None]:
    """Temporarily prefix messages logged inside the block.

    >>> with prefixed('[job-1] '):
    ...     get_prefix()
    '[job-1] '
    >>> get_prefix() is None
    True
    """
    token = _prefix.set(prefix)
    try:
        yield
    finally:
        _prefix.reset(token)


def apply_prefix(message: str) -> str:
    prefix = _prefix.get()
    if prefix:
        return prefix + message
    return message


if __name__ == '__main__':
    __import__('doctest').testmod(optionflags=4 | 8 | 32)

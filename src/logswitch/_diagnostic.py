"""Diagnostic stream for failures the facade recovers from.

Written straight to stderr, never through a backend, so a broken backend
cannot hide its own failure.
"""
from __future__ import annotations

import sys
import traceback

from logswitch import config

__all__ = ['report']


def report(message: str, exc: BaseException | None = None) -> None:
    """Write a diagnostic line and, optionally, the exception traceback.
    """
    stream = sys.stderr
    if stream is None:
        return
    try:
        stream.write(f'logswitch: {message}\n')
        if exc is not None:
            if config.diagnostic.traceback:
                traceback.print_exception(type(exc), exc, exc.__traceback__, file=stream)
            else:
                stream.write(f'{type(exc).__name__}: {exc}\n')
        stream.flush()
    except (OSError, ValueError):
        # closed or broken stderr, nothing left to report to
        pass

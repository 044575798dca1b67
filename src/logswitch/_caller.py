"""Caller resolution - find the first stack frame outside logswitch.

The walk skips by package membership, not by a fixed depth, so adding a
wrapper layer inside logswitch needs no adjustment here. Wrappers that
live outside the package (application helpers around `Logger.info`) are
reported as the caller.
"""
from __future__ import annotations

import os
import sys
from typing import NamedTuple

__all__ = ['CallerFrame', 'UNKNOWN_CALLER', 'resolve_caller']

_PACKAGE = __name__.partition('.')[0]


class CallerFrame(NamedTuple):
    """Call-site location attached to a log entry for display."""
    module: str
    function: str
    filename: str
    lineno: int

    def __str__(self) -> str:
        return f'{self.module}.{self.function}({os.path.basename(self.filename)}:{self.lineno})'


UNKNOWN_CALLER = CallerFrame('<unknown>', '<unknown>', '<unknown>', 0)


def _is_internal(module: str) -> bool:
    return module == _PACKAGE or module.startswith(_PACKAGE + '.')


def resolve_caller() -> CallerFrame:
    """Return the first frame not belonging to logswitch.
    """
    frame = sys._getframe(1)
    while frame is not None:
        module = frame.f_globals.get('__name__', '')
        if not _is_internal(module):
            code = frame.f_code
            return CallerFrame(module, code.co_name, code.co_filename, frame.f_lineno)
        frame = frame.f_back
    return UNKNOWN_CALLER

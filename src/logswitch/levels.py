"""Severity levels used as dispatch keys."""
from __future__ import annotations

from enum import IntEnum

__all__ = ['Level']


class Level(IntEnum):
    """Ordered severity levels.

    Values line up with the stdlib `logging` numbers so backends that
    speak integers can use them directly.
    """
    TRACE = 5
    DEBUG = 10
    INFO = 20
    WARN = 30
    ERROR = 40

    @property
    def hook(self) -> str:
        """Name of the factory emit hook for this level."""
        return self.name.lower()

    @property
    def enabled_hook(self) -> str:
        """Name of the factory enablement hook for this level."""
        return f'is_{self.name.lower()}_enabled'

    @classmethod
    def parse(cls, value: Level | str) -> Level:
        """Resolve a level from its name.

        >>> Level.parse('warning')
        <Level.WARN: 30>
        >>> Level.parse(Level.INFO)
        <Level.INFO: 20>
        """
        if isinstance(value, cls):
            return value
        name = str(value).strip().upper()
        if name == 'WARNING':
            name = 'WARN'
        try:
            return cls[name]
        except KeyError:
            raise ValueError(f'Unknown log level: {value!r}') from None


if __name__ == '__main__':
    __import__('doctest').testmod(optionflags=4 | 8 | 32)

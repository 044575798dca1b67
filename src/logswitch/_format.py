"""Message formatting with trailing-cause detection."""
from __future__ import annotations

from typing import Any

from logswitch.exceptions import MessageFormatError

__all__ = ['split_cause', 'format_message']


def split_cause(args: tuple[Any, ...]) -> tuple[tuple[Any, ...], BaseException | None]:
    """Detach a trailing exception from the positional arguments.

    >>> err = ValueError('bad')
    >>> split_cause(('x', err)) == (('x',), err)
    True
    >>> split_cause(('x', 1))
    (('x', 1), None)
    """
    if args and isinstance(args[-1], BaseException):
        return args[:-1], args[-1]
    return args, None


def format_message(template: str | None, args: tuple[Any, ...]) -> str:
    """Apply printf-style substitution.

    Surplus trailing arguments are ignored; too few arguments or a bad
    conversion raise `MessageFormatError`.

    >>> format_message('%s-%d', ('a', 1))
    'a-1'
    >>> format_message('100%', ())
    '100%'
    >>> format_message(None, ())
    ''
    >>> format_message('boom', ('x',))
    'boom'
    """
    if template is None:
        template = ''
    if not args:
        return template
    given = args
    while True:
        try:
            return template % args
        except TypeError as exc:
            if args and 'not all arguments converted' in str(exc):
                args = args[:-1]
                continue
            raise MessageFormatError(template, given) from exc
        except (ValueError, KeyError) as exc:
            raise MessageFormatError(template, given) from exc


if __name__ == '__main__':
    __import__('doctest').testmod(optionflags=4 | 8 | 32)

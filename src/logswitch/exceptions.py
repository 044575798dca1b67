"""Error taxonomy for the logging facade.

Only backend resolution and the explicit ``*_or_raise`` helpers surface
these to application code. Failures while checking or emitting on an
existing handle are reported to stderr and swallowed.
"""
from __future__ import annotations

__all__ = [
    'LogSwitchError',
    'UnsupportedBackendError',
    'HandleCreationError',
    'BackendInvocationError',
    'MessageFormatError',
    ]


class LogSwitchError(Exception):
    """Base type for all errors raised by logswitch."""


class UnsupportedBackendError(LogSwitchError, ValueError):
    """Backend id is unknown, or its library is missing or unusable.
    """

    def __init__(self, backend_id: str | None, reason: str = '') -> None:
        self.backend_id = backend_id
        message = reason or f'There is no log implementation factory for [{backend_id}].'
        super().__init__(message)


class HandleCreationError(LogSwitchError, RuntimeError):
    """A supported backend failed to produce a handle for a component.
    """

    def __init__(self, factory_name: str, component: str) -> None:
        self.factory_name = factory_name
        self.component = component
        super().__init__(
            f"Factory '{factory_name}' returned no handle for component '{component}'")


class BackendInvocationError(LogSwitchError):
    """An enablement check or emit on an existing handle failed."""


class MessageFormatError(LogSwitchError, ValueError):
    """Template and arguments do not match.
    """

    def __init__(self, template: str, args: tuple) -> None:
        self.template = template
        self.args_ = args
        super().__init__(f'Cannot format {template!r} with {len(args)} argument(s)')

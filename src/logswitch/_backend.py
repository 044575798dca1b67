"""Built-in backend adapters.

Each adapter imports its library inside `init`, so a missing library
shows up as "not supported" instead of an ImportError at import time.
Nothing outside the registry should construct these directly.
"""
from __future__ import annotations

import datetime
import importlib
import logging
import sys
import traceback
from typing import Any

from logswitch import config
from logswitch._caller import CallerFrame
from logswitch._diagnostic import report
from logswitch._factory import Factory
from logswitch.levels import Level

if sys.platform == 'win32':
    try:
        import colorama
        colorama.just_fix_windows_console()
    except ImportError:
        pass

__all__ = [
    'ConsoleFactory',
    'LoggingFactory',
    'LoguruFactory',
    'StructlogFactory',
    'builtin_factories',
    ]

# DEBUG: purple/magenta, INFO: green, WARN: yellow, ERROR: red
ANSI_COLORS = {
    Level.TRACE: '\033[2m',
    Level.DEBUG: '\033[35m',
    Level.INFO: '\033[32m',
    Level.WARN: '\033[33m',
    Level.ERROR: '\033[31m',
    }
ANSI_RESET = '\033[0m'


def _is_tty(stream) -> bool:
    isatty = getattr(stream, 'isatty', None)
    return bool(isatty and isatty())


class ConsoleFactory(Factory):
    """Plain stdout/stderr output, always available.

    ERROR goes to stderr, everything else to stdout. Streams are looked up
    on every write so redirection of `sys.stdout` is honoured.
    """

    console = True

    def __init__(self, name: str = 'Console', level: Level | str | None = None) -> None:
        super().__init__(name)
        value = level or config.console.level
        try:
            self.level = Level.parse(value)
        except ValueError:
            report(f'Unknown console level {value!r}, using TRACE')
            self.level = Level.TRACE

    def new_handle(self, component: str) -> str:
        return component

    def is_enabled_for(self, handle: Any, level: Level) -> bool:
        return level >= self.level

    def emit(self, handle: Any, level: Level, caller: CallerFrame, message: str,
             cause: BaseException | None) -> None:
        self._write(sys.stdout, level, caller, message, cause)

    def error(self, handle: Any, caller: CallerFrame, message: str,
              cause: BaseException | None) -> None:
        self._write(sys.stderr, Level.ERROR, caller, message, cause)

    def _write(self, stream, level: Level, caller: CallerFrame, message: str,
               cause: BaseException | None) -> None:
        now = datetime.datetime.now().astimezone().isoformat()
        line = f'[{now}] [{level.name}] {caller}: {message}'
        if config.console.colorize and _is_tty(stream):
            line = f'{ANSI_COLORS[level]}{line}{ANSI_RESET}'
        stream.write(line + '\n')
        if cause is not None:
            traceback.print_exception(type(cause), cause, cause.__traceback__, file=stream)
        stream.flush()


class LoggingFactory(Factory):
    """Standard library `logging` adapter.

    One `logging.Logger` per component; records carry the resolved caller
    rather than the adapter's own frame.
    """

    def __init__(self, name: str = 'Logging') -> None:
        super().__init__(name)

    def init(self) -> bool:
        if logging.getLevelName(int(Level.TRACE)) != 'TRACE':
            logging.addLevelName(int(Level.TRACE), 'TRACE')
        return True

    def new_handle(self, component: str) -> logging.Logger:
        return logging.getLogger(component)

    def is_enabled_for(self, handle: logging.Logger, level: Level) -> bool:
        return handle.isEnabledFor(int(level))

    def emit(self, handle: logging.Logger, level: Level, caller: CallerFrame, message: str,
             cause: BaseException | None) -> None:
        exc_info = (type(cause), cause, cause.__traceback__) if cause is not None else None
        record = handle.makeRecord(
            handle.name, int(level), caller.filename, caller.lineno,
            message, (), exc_info, func=caller.function)
        handle.handle(record)


class LoguruFactory(Factory):
    """Loguru adapter.

    Loguru filters per sink, so every level reports as enabled here and
    the sinks decide. WARN is spelled WARNING in loguru.
    """

    def __init__(self, name: str = 'Loguru') -> None:
        super().__init__(name)
        self._loguru = None

    def init(self) -> bool:
        self._loguru = importlib.import_module('loguru').logger
        # Custom level colors matching the console backend
        self._loguru.level('DEBUG', color='<magenta>')
        self._loguru.level('INFO', color='<green>')
        self._loguru.level('WARNING', color='<yellow>')
        self._loguru.level('ERROR', color='<red>')
        return True

    def new_handle(self, component: str) -> Any:
        return self._loguru.bind(logger_name=component)

    def emit(self, handle: Any, level: Level, caller: CallerFrame, message: str,
             cause: BaseException | None) -> None:
        self._log(handle, level.name, caller, message, cause)

    def warn(self, handle: Any, caller: CallerFrame, message: str,
             cause: BaseException | None) -> None:
        self._log(handle, 'WARNING', caller, message, cause)

    @staticmethod
    def _log(handle: Any, level_name: str, caller: CallerFrame, message: str,
             cause: BaseException | None) -> None:
        def patch_caller(record):
            record['name'] = caller.module
            record['function'] = caller.function
            record['line'] = caller.lineno

        # Message is already formatted, so braces in it must not be re-parsed
        handle.patch(patch_caller).opt(exception=cause).log(level_name, '{}', message)


class StructlogFactory(Factory):
    """Structlog adapter.

    structlog has no TRACE method; TRACE entries go out at debug.
    """

    _METHODS = {
        Level.DEBUG: 'debug',
        Level.INFO: 'info',
        Level.WARN: 'warning',
        Level.ERROR: 'error',
        }

    def __init__(self, name: str = 'Structlog') -> None:
        super().__init__(name)
        self._structlog = None

    def init(self) -> bool:
        self._structlog = importlib.import_module('structlog')
        return True

    def new_handle(self, component: str) -> Any:
        return self._structlog.get_logger(component)

    def is_enabled_for(self, handle: Any, level: Level) -> bool:
        levelno = int(Level.DEBUG if level is Level.TRACE else level)
        check = getattr(handle, 'is_enabled_for', None) or getattr(handle, 'isEnabledFor', None)
        if check is None:
            return True
        return bool(check(levelno))

    def emit(self, handle: Any, level: Level, caller: CallerFrame, message: str,
             cause: BaseException | None) -> None:
        method = getattr(handle, self._METHODS[level])
        if cause is not None:
            method(message, caller=str(caller), exc_info=cause)
        else:
            method(message, caller=str(caller))

    def trace(self, handle: Any, caller: CallerFrame, message: str,
              cause: BaseException | None) -> None:
        self.emit(handle, Level.DEBUG, caller, message, cause)


def builtin_factories() -> dict[str, Factory]:
    """Fresh instances of every built-in backend, keyed by id."""
    return {
        'console': ConsoleFactory(),
        'logging': LoggingFactory(),
        'loguru': LoguruFactory(),
        'structlog': StructlogFactory(),
        }

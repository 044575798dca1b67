import threading
from unittest.mock import patch

import pytest

from logswitch import Factory, Level
from logswitch._context import clear_prefix, open_logger
from logswitch._registry import Registry


class RecordingFactory(Factory):
    """Backend that keeps every entry in memory."""

    def __init__(self, name='Recording', supported=True, threshold=Level.TRACE):
        super().__init__(name)
        self.supported = supported
        self.threshold = threshold
        self.init_calls = 0
        self.handles_created = 0
        self.records = []
        self._lock = threading.Lock()

    def init(self):
        with self._lock:
            self.init_calls += 1
        return self.supported

    def new_handle(self, component):
        with self._lock:
            self.handles_created += 1
        return {'component': component}

    def is_enabled_for(self, handle, level):
        return level >= self.threshold

    def emit(self, handle, level, caller, message, cause):
        self.records.append((handle['component'], level, caller, message, cause))


@pytest.fixture(autouse=True)
def registry():
    """Fresh process-wide registry, logging open, no prefix."""
    fresh = Registry()
    with patch('logswitch._registry._registry', fresh):
        open_logger()
        clear_prefix()
        yield fresh
        open_logger()
        clear_prefix()


@pytest.fixture
def recording(registry):
    """A RecordingFactory registered as 'recording'."""
    factory = RecordingFactory()
    registry.register('recording', factory)
    return factory

"""Tests for logswitch._logger module."""
from unittest.mock import patch

import pytest
from conftest import RecordingFactory

from logswitch import HandleCreationError, Level, Logger, UnsupportedBackendError
from logswitch._context import close_logger, open_logger


class TestLoggerValue:

    def test_equality_by_id(self):
        """Test loggers with the same id are interchangeable."""
        assert Logger('loguru') == Logger('loguru')
        assert Logger('loguru') != Logger('console')
        assert hash(Logger('loguru')) == hash(Logger('loguru'))
        assert len({Logger('a'), Logger('a'), Logger('b')}) == 2

    def test_equality_ignores_case(self):
        """Test ids differing only in case are the same logger."""
        assert Logger('CONSOLE') == Logger('console')
        assert hash(Logger('CONSOLE')) == hash(Logger('console'))

    def test_str_and_repr(self):
        logger = Logger('console')
        assert str(logger) == 'console'
        assert repr(logger) == "Logger('console')"
        assert logger.id == 'console'

    def test_not_equal_to_string(self):
        assert Logger('console') != 'console'


class TestLoggerOf:

    def test_of_none_is_console(self, registry):
        """Test a missing id yields the default console logger."""
        assert Logger.of() is registry.default
        assert Logger.of(None).id == 'console'

    def test_of_registered(self, recording):
        assert Logger.of('recording') == Logger('recording')

    def test_of_case_insensitive(self, recording):
        assert Logger.of('RECORDING').id == 'RECORDING'

    @pytest.mark.parametrize('backend_id', ['nope', 'log4j', '', 'console2'])
    def test_of_unregistered(self, backend_id):
        """Test unknown ids are rejected."""
        with pytest.raises(UnsupportedBackendError):
            Logger.of(backend_id)

    def test_of_unsupported(self, registry):
        registry.register('off', RecordingFactory(supported=False))
        with pytest.raises(UnsupportedBackendError):
            Logger.of('off')


class TestLoggerGlobal:

    def test_default_global(self):
        assert Logger.get_global() == Logger('console')

    def test_set_global(self, recording):
        assert Logger.set_global('recording') is True
        assert Logger.get_global() == Logger('recording')

    def test_set_global_unregistered(self):
        """Test a failed switch leaves the global logger unchanged."""
        before = Logger.get_global()
        assert Logger.set_global('id-not-registered') is False
        assert Logger.get_global() is before


class TestLoggerLogging:

    def setup_method(self):
        self.factory = RecordingFactory(threshold=Level.INFO)

    def _logger(self, registry):
        registry.register('rec', self.factory)
        return Logger.of('rec')

    @pytest.mark.parametrize('level', list(Level))
    def test_level_methods(self, registry, level):
        """Test each level method reaches the backend at that level."""
        self.factory.threshold = Level.TRACE
        logger = self._logger(registry)
        getattr(logger, level.hook)('at %s', level.name)
        assert self.factory.records[-1][1] is level
        assert self.factory.records[-1][3] == f'at {level.name}'

    def test_component_is_calling_module(self, registry):
        """Test journals are keyed by the calling module."""
        self._logger(registry).info('hello')
        assert self.factory.components() == [__name__]
        assert self.factory.records[-1][0] == __name__

    def test_disabled_level_skipped(self, registry):
        """Test entries below the backend threshold never reach emit."""
        logger = self._logger(registry)
        logger.debug('hidden')
        logger.trace('hidden')
        assert self.factory.records == []

    def test_is_enabled(self, registry):
        logger = self._logger(registry)
        assert not logger.is_trace_enabled()
        assert not logger.is_debug_enabled()
        assert logger.is_info_enabled()
        assert logger.is_warn_enabled()
        assert logger.is_error_enabled()
        assert logger.is_enabled_for('warning')

    def test_cause(self, registry):
        err = KeyError('id')
        self._logger(registry).error('lookup of %s failed', 'id', err)
        _, _, _, message, cause = self.factory.records[-1]
        assert message == 'lookup of id failed'
        assert cause is err

    def test_log_by_name(self, registry):
        self._logger(registry).log('warning', 'careful')
        assert self.factory.records[-1][1] is Level.WARN

    def test_closed(self, registry):
        """Test the kill switch silences every level."""
        logger = self._logger(registry)
        close_logger()
        logger.error('dropped')
        assert not logger.is_error_enabled()
        open_logger()
        logger.error('kept')
        assert [r[3] for r in self.factory.records] == ['kept']

    def test_format_error_not_raised(self, registry, capsys):
        """Test a bad template is reported, not raised."""
        self._logger(registry).info('%d rows', 'many')
        assert self.factory.records == []
        assert 'MessageFormatError' in capsys.readouterr().err

    def test_reregistration_takes_effect(self, registry):
        """Test a replaced factory receives subsequent calls."""
        logger = self._logger(registry)
        replacement = RecordingFactory('Replacement')
        registry.register('REC', replacement)
        logger.info('after')
        assert self.factory.records == []
        assert replacement.records[-1][3] == 'after'

    def test_creation_failure_propagates(self, registry):
        """Test a backend that cannot create handles fails the call."""
        class NoHandle(RecordingFactory):
            def new_handle(self, component):
                return None

        registry.register('broken', NoHandle('Broken'))
        with pytest.raises(HandleCreationError):
            Logger.of('broken').info('x')

    def test_closed_skips_backend(self, registry):
        """Test a closed logger never touches the backend."""
        class NoHandle(RecordingFactory):
            def new_handle(self, component):
                self.handles_created += 1

        factory = NoHandle('Broken')
        registry.register('broken', factory)
        logger = Logger.of('broken')
        close_logger()
        logger.info('x')
        logger.error_or_raise(False, None, 'y')
        assert not logger.is_error_enabled()
        assert factory.handles_created == 0


class TestLoggerOrRaise:

    def setup_method(self):
        self.factory = RecordingFactory(threshold=Level.INFO)

    def _logger(self, registry):
        registry.register('rec', self.factory)
        return Logger.of('rec')

    def test_raises(self, registry):
        """Test the formatted message is raised, chained to the cause."""
        cause = OSError('disk')
        with pytest.raises(RuntimeError, match='write of a.txt failed') as excinfo:
            self._logger(registry).error_or_raise(True, cause, 'write of %s failed', 'a.txt')
        assert excinfo.value.__cause__ is cause
        assert self.factory.records == []

    def test_raises_custom_error(self, registry):
        with pytest.raises(ValueError, match='bad'):
            self._logger(registry).warn_or_raise(True, None, 'bad', error=ValueError)

    def test_logs_with_cause(self, registry):
        cause = OSError('disk')
        result = self._logger(registry).warn_or_raise(False, cause, 'retrying %s', 'a.txt')
        assert result is None
        _, level, _, message, logged_cause = self.factory.records[-1]
        assert level is Level.WARN
        assert message == 'retrying a.txt'
        assert logged_cause is cause

    def test_logs_without_cause(self, registry):
        self._logger(registry).info_or_raise(False, None, 'plain')
        assert self.factory.records[-1][3:] == ('plain', None)

    def test_disabled_level_not_logged(self, registry):
        """Test nothing is logged when the level is disabled."""
        self._logger(registry).debug_or_raise(False, None, 'quiet')
        self._logger(registry).trace_or_raise(False, None, 'quiet')
        assert self.factory.records == []

    def test_component_is_calling_module(self, registry):
        self._logger(registry).error_or_raise(False, None, 'x')
        assert self.factory.records[-1][0] == __name__


class TestLoggerAliases:

    def test_warning_is_warn(self):
        """Test warning is an alias for warn."""
        assert Logger.warning is Logger.warn


if __name__ == '__main__':
    pytest.main([__file__, '-v'])

# SPDX-FileCopyrightText: 2021-2022 RFC1924 Developers
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for logging configuration."""


# standard libs
import io
import logging

# external libs
import pytest
from cmdkit.config import Configuration, Namespace, ConfigurationError

# internal libs
from rfc1924.core.config import default
from rfc1924.core.logging import Logger, Formatter, TRACE, level_from_name, configure


def make_config(**section) -> Configuration:
    """Configuration with defaults and an extra 'logging' section."""
    return Configuration(default=default, extra=Namespace({'logging': section}))


@pytest.fixture
def console():
    """Stream for a configured console handler, removed afterward."""
    stream = io.StringIO()
    yield stream
    logger = logging.getLogger('rfc1924')
    for handler in list(logger.handlers):
        if handler.get_name() == 'rfc1924-console':
            logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.mark.unit
class TestLevels:
    """Unit tests for logging levels."""

    @pytest.mark.parametrize('name, level', [('trace', TRACE), ('debug', logging.DEBUG),
                                             ('INFO', logging.INFO), ('Warning', logging.WARNING),
                                             ('error', logging.ERROR), ('critical', logging.CRITICAL)])
    def test_level_from_name(self, name: str, level: int) -> None:
        assert level_from_name(name) == level

    def test_level_unsupported(self) -> None:
        with pytest.raises(ConfigurationError):
            level_from_name('verbose')

    def test_level_not_string(self) -> None:
        with pytest.raises(ConfigurationError):
            level_from_name(10)

    def test_trace_below_debug(self) -> None:
        assert TRACE < logging.DEBUG
        assert logging.getLevelName(TRACE) == 'TRACE'


@pytest.mark.unit
class TestLogger:
    """Unit tests for the TRACE-capable logger."""

    def test_with_name(self) -> None:
        log = Logger.with_name('rfc1924.tests')
        assert isinstance(log, Logger)
        assert log.logger is logging.getLogger('rfc1924.tests')

    def test_trace(self, caplog) -> None:
        log = Logger.with_name('rfc1924.tests')
        with caplog.at_level(TRACE, logger='rfc1924.tests'):
            log.trace('fine detail')
        record, = caplog.records
        assert record.levelname == 'TRACE'
        assert record.getMessage() == 'fine detail'

    def test_global_state_untouched(self) -> None:
        """The package leaves the logger class and record factory alone."""
        assert logging.getLoggerClass() is logging.Logger
        assert logging.getLogRecordFactory() is logging.LogRecord


@pytest.mark.unit
class TestConfigure:
    """Unit tests for console handler setup."""

    def test_level(self, console) -> None:
        configure(make_config(level='debug'), stream=console)
        assert logging.getLogger('rfc1924').level == logging.DEBUG
        Logger.with_name('rfc1924.tests').debug('visible')
        Logger.with_name('rfc1924.tests').trace('hidden')
        assert console.getvalue() == '   DEBUG visible\n'

    def test_detailed_style(self, console) -> None:
        configure(make_config(level='info', style='detailed'), stream=console)
        Logger.with_name('rfc1924.tests').info('hello')
        assert console.getvalue().endswith(' INFO [rfc1924.tests] hello\n')

    def test_replaces_handler(self, console) -> None:
        configure(make_config(), stream=console)
        configure(make_config(), stream=console)
        names = [handler.get_name() for handler in logging.getLogger('rfc1924').handlers]
        assert names.count('rfc1924-console') == 1

    def test_invalid_level(self, console) -> None:
        with pytest.raises(ConfigurationError):
            configure(make_config(level='loud'), stream=console)

    def test_color(self) -> None:
        """Color codes are only added when requested."""
        record = logging.makeLogRecord({'levelname': 'ERROR', 'msg': 'boom'})
        plain = Formatter('%(ansi_level)s%(message)s%(ansi_reset)s', color=False)
        colored = Formatter('%(ansi_level)s%(message)s%(ansi_reset)s', color=True)
        assert plain.format(record) == 'boom'
        assert colored.format(record) == '\033[31mboom\033[0m'
        assert not hasattr(record, 'ansi_level')

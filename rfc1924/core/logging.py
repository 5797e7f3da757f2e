# SPDX-FileCopyrightText: 2021-2022 RFC1924 Developers
# SPDX-License-Identifier: Apache-2.0

"""
Logging for rfc1924.

The library only emits records on the 'rfc1924' logger hierarchy. Handlers,
levels and formats are installed by `configure`, which the command-line
entry-point calls; importing the package leaves the logging module as is.
"""


# type annotations
from __future__ import annotations
from typing import Any, Dict, Optional

# standard libs
import sys
import logging

# external libs
from cmdkit.config import Configuration, ConfigurationError

# internal libs
from rfc1924.core.ansi import Ansi
from rfc1924.core.config import LOGGING_STYLES, blame, get_logging_style

# public interface
__all__ = ['Logger', 'Formatter', 'TRACE', 'level_from_name', 'configure', ]


TRACE: int = logging.DEBUG - 5
logging.addLevelName(TRACE, 'TRACE')


level_color: Dict[str, Ansi] = {
    'TRACE': Ansi.CYAN,
    'DEBUG': Ansi.BLUE,
    'INFO': Ansi.GREEN,
    'WARNING': Ansi.YELLOW,
    'ERROR': Ansi.RED,
    'CRITICAL': Ansi.MAGENTA,
}


# Nothing is printed unless an application installs a handler
logging.getLogger('rfc1924').addHandler(logging.NullHandler())


class Logger(logging.LoggerAdapter):
    """Standard logger with an added TRACE level."""

    def trace(self, msg: str, *args, **kwargs) -> None:
        """Log 'msg % args' with severity 'TRACE'."""
        self.log(TRACE, msg, *args, **kwargs)

    @classmethod
    def with_name(cls, name: str) -> Logger:
        """Wrap `logging.getLogger(name)`."""
        return cls(logging.getLogger(name), {})


class Formatter(logging.Formatter):
    """Adds ANSI codes to a copy of each record (empty when not writing to a terminal)."""

    def __init__(self, fmt: str, datefmt: Optional[str] = None, color: bool = True) -> None:
        super().__init__(fmt, datefmt=datefmt)
        self.color = color

    def format(self, record: logging.LogRecord) -> str:
        record = logging.makeLogRecord(record.__dict__)
        use = self.color
        record.ansi_level = level_color.get(record.levelname, Ansi.NULL).value if use else ''
        record.ansi_reset = Ansi.RESET.value if use else ''
        record.ansi_bold = Ansi.BOLD.value if use else ''
        record.ansi_faint = Ansi.FAINT.value if use else ''
        return super().format(record)


def level_from_name(name: Any, label: Optional[str] = None) -> int:
    """Get level value from `name` (e.g., 'debug')."""
    if not isinstance(name, str):
        raise ConfigurationError(f'Expected string for logging level, given \'{name}\' ({label})')
    name = name.upper()
    if name == 'TRACE':
        return TRACE
    elif name in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
        return getattr(logging, name)
    else:
        raise ConfigurationError(f'Unsupported logging level \'{name}\' ({label})')


def configure(base: Configuration, stream=None) -> logging.Handler:
    """Attach a console handler to the 'rfc1924' logger, replacing one from a previous call."""
    stream = stream or sys.stderr
    level = level_from_name(base.logging.level, blame(base, 'logging', 'level'))
    style = LOGGING_STYLES[get_logging_style(base)]
    handler = logging.StreamHandler(stream)
    handler.set_name('rfc1924-console')
    handler.setFormatter(Formatter(style['format'], datefmt=style['datefmt'],
                                   color=hasattr(stream, 'isatty') and stream.isatty()))
    logger = logging.getLogger('rfc1924')
    for previous in [h for h in logger.handlers if h.get_name() == 'rfc1924-console']:
        logger.removeHandler(previous)
    logger.addHandler(handler)
    logger.setLevel(level)
    return handler

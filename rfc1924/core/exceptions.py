# SPDX-FileCopyrightText: 2021-2022 RFC1924 Developers
# SPDX-License-Identifier: Apache-2.0

"""Codec exceptions and common error handling."""


# type annotations
from typing import Callable

# standard libs
import sys

# internal libs
from rfc1924.core.ansi import Ansi

# public interface
__all__ = ['Base85Error', 'InvalidCharacter', 'UnexpectedEof', 'log_exception', 'display_critical', ]


class Base85Error(ValueError):
    """Base class for decoding failures."""


class InvalidCharacter(Base85Error):
    """A byte in the input is neither an alphabet symbol nor whitespace."""

    def __init__(self, byte: int) -> None:
        self.byte = byte
        super().__init__(f'Unexpected character \'{self.char}\'')

    @property
    def char(self) -> str:
        """Printable form of the offending byte."""
        if 0x20 < self.byte < 0x7f:
            return chr(self.byte)
        else:
            return f'\\x{self.byte:02x}'


class UnexpectedEof(Base85Error):
    """A trailing group holds a single symbol, too short to recover a byte."""

    def __init__(self) -> None:
        super().__init__('Unexpected end of input')


def log_exception(exc: Exception, logger: Callable[[str], None], status: int) -> int:
    """Log the exception and exit with `status`."""
    logger(str(exc))
    return status


def display_critical(message: str) -> None:
    """Print critical `message` to stderr (for failures before logging is configured)."""
    color, reset = (Ansi.MAGENTA.value, Ansi.RESET.value) if sys.stderr.isatty() else ('', '')
    print(f'{color}CRITICAL{reset} {message}', file=sys.stderr)

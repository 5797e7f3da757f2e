# SPDX-FileCopyrightText: 2021-2022 RFC1924 Developers
# SPDX-License-Identifier: Apache-2.0

"""Encode binary data as Base85 text."""


# type annotations
from __future__ import annotations
from typing import List, Optional

# standard libs
import sys
import functools

# external libs
from cmdkit.app import Application, exit_status
from cmdkit.cli import Interface, ArgumentError
from cmdkit.config import ConfigurationError

# internal libs
from rfc1924.core.codec import encode
from rfc1924.core.config import load, get_wrap
from rfc1924.core.exceptions import log_exception
from rfc1924.core.logging import Logger

# public interface
__all__ = ['EncodeApp', 'wrap_lines', ]

# application logger
log = Logger.with_name('rfc1924')


PROGRAM = 'rfc1924 encode'
USAGE = f"""\
usage: {PROGRAM} [-h] FILE [-o FILE] [-w NUM]
{__doc__}\
"""

HELP = f"""\
{USAGE}

Encoded text is written to stdout followed by a newline, unless
an output file is given with -o/--output.

arguments:
FILE                     Path to input file ('-' for stdin).

options:
-o, --output    FILE     Path to output file.
-w, --wrap      NUM      Wrap lines at NUM columns (0 disables, default from `codec.wrap`).
-h, --help               Show this message and exit.\
"""


def wrap_lines(text: str, width: int) -> List[str]:
    """Split `text` into lines of at most `width` characters (`width=0` for a single line)."""
    if width == 0 or len(text) <= width:
        return [text, ]
    return [text[offset:offset + width] for offset in range(0, len(text), width)]


class EncodeApp(Application):
    """Application class for encode command."""

    interface = Interface(PROGRAM, USAGE, HELP)

    source: str = None
    interface.add_argument('source')

    output: Optional[str] = None
    interface.add_argument('-o', '--output', default=None)

    wrap: Optional[int] = None
    interface.add_argument('-w', '--wrap', type=int, default=None)

    exceptions = {
        OSError: functools.partial(log_exception, logger=log.critical,
                                   status=exit_status.runtime_error),
        ConfigurationError: functools.partial(log_exception, logger=log.critical,
                                              status=exit_status.bad_config),
    }

    def run(self) -> None:
        """Business logic for `rfc1924 encode`."""
        data = self.read_input()
        text = encode(data)
        log.debug(f'Encoded {len(data)} bytes into {len(text)} characters')
        self.write_output('\n'.join(wrap_lines(text, self.width)) + '\n')

    @functools.cached_property
    def width(self) -> int:
        """Line width from command-line or configuration."""
        if self.wrap is None:
            return get_wrap(load())
        if self.wrap < 0:
            raise ArgumentError(f'Expected non-negative value for -w/--wrap, given {self.wrap}')
        return self.wrap

    def read_input(self) -> bytes:
        """Raw bytes from file or stdin."""
        if self.source == '-':
            return sys.stdin.buffer.read()
        with open(self.source, mode='rb') as stream:
            return stream.read()

    def write_output(self, text: str) -> None:
        """Write `text` to file or stdout."""
        if self.output is None:
            print(text, end='', flush=True)
        else:
            with open(self.output, mode='w') as stream:
                stream.write(text)

# SPDX-FileCopyrightText: 2021-2022 RFC1924 Developers
# SPDX-License-Identifier: Apache-2.0

"""Decode Base85 text back to binary data."""


# type annotations
from __future__ import annotations
from typing import Optional

# standard libs
import sys
import functools

# external libs
from cmdkit.app import Application, exit_status
from cmdkit.cli import Interface

# internal libs
from rfc1924.core.codec import decode
from rfc1924.core.exceptions import Base85Error, log_exception
from rfc1924.core.logging import Logger

# public interface
__all__ = ['DecodeApp', ]

# application logger
log = Logger.with_name('rfc1924')


PROGRAM = 'rfc1924 decode'
USAGE = f"""\
usage: {PROGRAM} [-h] FILE [-o FILE]
{__doc__}\
"""

HELP = f"""\
{USAGE}

Whitespace (including line breaks) in the input is ignored.
Raw bytes are written to stdout unless an output file is given
with -o/--output.

arguments:
FILE                     Path to input file ('-' for stdin).

options:
-o, --output    FILE     Path to output file.
-h, --help               Show this message and exit.\
"""


class DecodeApp(Application):
    """Application class for decode command."""

    interface = Interface(PROGRAM, USAGE, HELP)

    source: str = None
    interface.add_argument('source')

    output: Optional[str] = None
    interface.add_argument('-o', '--output', default=None)

    exceptions = {
        Base85Error: functools.partial(log_exception, logger=log.critical,
                                       status=exit_status.runtime_error),
        OSError: functools.partial(log_exception, logger=log.critical,
                                   status=exit_status.runtime_error),
    }

    def run(self) -> None:
        """Business logic for `rfc1924 decode`."""
        text = self.read_input()
        data = decode(text)
        log.debug(f'Decoded {len(text)} characters into {len(data)} bytes')
        self.write_output(data)

    def read_input(self) -> bytes:
        """Encoded text (as raw bytes) from file or stdin."""
        if self.source == '-':
            return sys.stdin.buffer.read()
        with open(self.source, mode='rb') as stream:
            return stream.read()

    def write_output(self, data: bytes) -> None:
        """Write `data` to file or stdout."""
        if self.output is None:
            sys.stdout.buffer.write(data)
            sys.stdout.buffer.flush()
        else:
            with open(self.output, mode='wb') as stream:
                stream.write(data)

# SPDX-FileCopyrightText: 2021-2022 RFC1924 Developers
# SPDX-License-Identifier: Apache-2.0

"""Entry-point for rfc1924 command-line interface."""


# type annotations
from typing import List, Optional

# standard libs
import sys

# external libs
from cmdkit.app import Application, ApplicationGroup, exit_status
from cmdkit.cli import Interface
from cmdkit.config import ConfigurationError
from rich.traceback import install as enable_rich_tracebacks

# internal libs
from rfc1924.__meta__ import __version__, __description__, __copyright__
from rfc1924.core import config, logging
from rfc1924.core.exceptions import display_critical
from rfc1924.apps.rfc1924 import encode, decode

# public interface
__all__ = ['RFC1924App', 'main', ]

# application logger
log = logging.Logger.with_name('rfc1924')


PROGRAM = 'rfc1924'
USAGE = f"""\
usage: {PROGRAM} [-h] [-v] <command> [<args>...]
{__description__}\
"""

HELP = f"""\
{USAGE}

commands:
encode                 {encode.__doc__}
decode                 {decode.__doc__}

options:
-h, --help             Show this message and exit.
-v, --version          Show the version and exit.

Settings are read from /etc/rfc1924.toml, ~/.rfc1924/config.toml,
./.rfc1924/config.toml and RFC1924_* environment variables.

Copyright {__copyright__}\
"""


# command-line errors go through the package logger
Application.log_critical = log.critical
Application.log_exception = log.exception


class RFC1924App(ApplicationGroup):
    """Top-level application class for rfc1924."""

    interface = Interface(PROGRAM, USAGE, HELP)
    interface.add_argument('command')
    interface.add_argument('-v', '--version', action='version', version=__version__)

    command = None
    commands = {'encode': encode.EncodeApp,
                'decode': decode.DecodeApp,
                }


def main(argv: Optional[List[str]] = None) -> int:
    """Entry-point for `rfc1924` console application."""
    try:
        logging.configure(config.load())
    except ConfigurationError as error:
        display_critical(str(error))
        return exit_status.bad_config
    if sys.stderr.isatty():
        enable_rich_tracebacks()
    return RFC1924App.main(sys.argv[1:] if argv is None else argv)

# SPDX-FileCopyrightText: 2021-2022 RFC1924 Developers
# SPDX-License-Identifier: Apache-2.0

"""ANSI escape sequences for colorizing text output."""


# standard libs
from enum import Enum

# public interface
__all__ = ['Ansi', ]


class Ansi(Enum):
    """ANSI escape sequences for colors and formatting."""

    NULL = ''
    RESET = '\033[0m'
    BOLD = '\033[1m'
    FAINT = '\033[2m'
    RED = '\033[31m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    BLUE = '\033[34m'
    MAGENTA = '\033[35m'
    CYAN = '\033[36m'

# SPDX-FileCopyrightText: 2021-2022 RFC1924 Developers
# SPDX-License-Identifier: Apache-2.0

"""
Runtime configuration for the command-line interface.

Files (lowest to highest precedence):
         /etc/rfc1924.toml    System
    ~/.rfc1924/config.toml    User
      .rfc1924/config.toml    Local

Environment variables prefixed with RFC1924_ take precedence over all files
(e.g., RFC1924_CODEC_WRAP=76). Nothing is read until `load` is called; the
codec itself never consults configuration.
"""


# type annotations
from typing import Optional

# standard libs
import os
import stat
import functools

# external libs
from cmdkit.config import Namespace, Environ, Configuration, ConfigurationError

# public interface
__all__ = ['default', 'load', 'reload', 'read_file', 'config_paths', 'blame',
           'get_wrap', 'get_logging_style', 'LOGGING_STYLES', 'ConfigurationError', ]


# Output formats for the console handler, selected by `logging.style`
LOGGING_STYLES = {
    'default': {
        'format': '%(ansi_bold)s%(ansi_level)s%(levelname)8s%(ansi_reset)s %(message)s',
        'datefmt': None,
    },
    'detailed': {
        'format': ('%(ansi_faint)s%(asctime)s%(ansi_reset)s %(ansi_bold)s%(ansi_level)s%(levelname)8s'
                   '%(ansi_reset)s %(ansi_faint)s[%(name)s]%(ansi_reset)s %(message)s'),
        'datefmt': '%Y-%m-%d %H:%M:%S',
    },
}


default = Namespace({
    'logging': {
        'level': 'warning',
        'style': 'default',
    },
    'codec': {
        'wrap': 0,  # Columns for `rfc1924 encode` output (0 disables wrapping)
    },
})


def config_paths() -> Namespace:
    """Configuration file for each site, resolved against the current user and directory."""
    return Namespace({
        'system': '/etc/rfc1924.toml',
        'user': os.path.join(os.path.expanduser('~'), '.rfc1924', 'config.toml'),
        'local': os.path.join(os.getcwd(), '.rfc1924', 'config.toml'),
    })


def read_file(filepath: str) -> Namespace:
    """Load TOML file at `filepath` (empty if missing, must be private otherwise)."""
    if not os.path.exists(filepath):
        return Namespace({})
    mode = stat.filemode(os.stat(filepath).st_mode)
    if mode != '-rw-------':
        raise ConfigurationError(f'Non-private file permissions {mode} ({filepath})')
    try:
        return Namespace.from_toml(filepath)
    except Exception as err:
        raise ConfigurationError(f'(from file: {filepath}) {err.__class__.__name__}: {err}') from err


def reload() -> Configuration:
    """Read files and environment again, merged over the defaults."""
    paths = config_paths()
    return Configuration(default=default,
                         system=read_file(paths.system),
                         user=read_file(paths.user),
                         local=read_file(paths.local),
                         env=Environ(prefix='RFC1924').expand())


@functools.lru_cache(maxsize=None)
def load() -> Configuration:
    """Configuration for this process (read on first call)."""
    return reload()


def blame(base: Configuration, *varpath: str) -> Optional[str]:
    """Describe where the value at `varpath` was set."""
    source = base.which(*varpath)
    if not source:
        return None
    if source in ('system', 'user', 'local'):
        return f'from: {config_paths()[source]}'
    elif source == 'env':
        return 'from: RFC1924_' + '_'.join(node.upper() for node in varpath)
    else:
        return f'from: <{source}>'


def get_wrap(base: Configuration) -> int:
    """Validated `codec.wrap`."""
    label = blame(base, 'codec', 'wrap')
    try:
        wrap = int(base.codec.wrap)
    except (TypeError, ValueError):
        raise ConfigurationError(f'Expected integer for `codec.wrap` ({label})')
    if wrap < 0:
        raise ConfigurationError(f'Expected non-negative `codec.wrap`, given {wrap} ({label})')
    return wrap


def get_logging_style(base: Configuration) -> str:
    """Validated (lower case) `logging.style`."""
    style = base.logging.style
    label = blame(base, 'logging', 'style')
    if not isinstance(style, str):
        raise ConfigurationError(f'Expected string for `logging.style` ({label})')
    if style.lower() not in LOGGING_STYLES:
        raise ConfigurationError(f'Unrecognized `logging.style` \'{style}\' ({label})')
    return style.lower()

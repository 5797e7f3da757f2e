# SPDX-FileCopyrightText: 2021-2022 RFC1924 Developers
# SPDX-License-Identifier: Apache-2.0

"""
Character set for RFC 1924 Base85.

The 85 symbols are the ASCII digits, upper and lower case letters, and 23
punctuation marks. Quotes, backslash, comma, period, slash, colon and
whitespace are deliberately absent so encoded text can be embedded in source
code and shell commands without escaping.
"""


# type annotations
from typing import Optional, Tuple, Union

# internal libs
from rfc1924.core.exceptions import InvalidCharacter

# public interface
__all__ = ['ALPHABET', 'BASE', 'WHITESPACE', 'value_to_symbol', 'symbol_to_value', ]


BASE: int = 85
ALPHABET: str = ('0123456789'
                 'ABCDEFGHIJKLMNOPQRSTUVWXYZ'
                 'abcdefghijklmnopqrstuvwxyz'
                 '!#$%&()*+-;<=>?@^_`{|}~')


# Formatting bytes skipped by the decoder
WHITESPACE: bytes = b' \t\r\n'


# Inverse table indexed by byte value (None marks a byte outside the alphabet)
_SYMBOL_VALUE: Tuple[Optional[int], ...] = tuple(
    ALPHABET.find(chr(byte)) if chr(byte) in ALPHABET else None
    for byte in range(256)
)


def value_to_symbol(value: int) -> str:
    """Symbol for digit `value` (must be in the range 0-84)."""
    assert 0 <= value < BASE, f'Base85 digit out of range ({value})'
    return ALPHABET[value]


def symbol_to_value(symbol: Union[int, str]) -> int:
    """
    Digit value for `symbol`, given as a byte value or a single character.

    Raises:
        InvalidCharacter: `symbol` is a byte outside the alphabet.
        ValueError: `symbol` is not a byte (an int outside 0-255, or a
            character above U+00FF).
    """
    byte = ord(symbol) if isinstance(symbol, str) else symbol
    if not 0 <= byte < 256:
        raise ValueError(f'Expected a byte value (0-255), given {byte}')
    value = _SYMBOL_VALUE[byte]
    if value is None:
        raise InvalidCharacter(byte)
    return value

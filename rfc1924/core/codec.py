# SPDX-FileCopyrightText: 2021-2022 RFC1924 Developers
# SPDX-License-Identifier: Apache-2.0

"""
Base85 encoding/decoding as described in RFC 1924.

Data is processed in groups of four bytes, each read as a big-endian unsigned
32-bit integer and written as five base-85 digits (most significant first).
A trailing group of `n` bytes (1-3) is padded with zeros and only its leading
`n + 1` digits are written; the decoder restores it by filling the missing
digits with the largest symbol value and keeping `n` bytes.

Example:
    >>> encode(b'aaaaa')
    'VPRomVE'
    >>> decode('VPRom VE')
    b'aaaaa'
"""


# type annotations
from typing import List, Union

# standard libs
import struct

# internal libs
from rfc1924.core.alphabet import BASE, ALPHABET, WHITESPACE, symbol_to_value
from rfc1924.core.exceptions import UnexpectedEof
from rfc1924.core.logging import Logger

# public interface
__all__ = ['encode', 'decode', 'encoded_size', 'decoded_size', ]

# module level logger
log = Logger.with_name(__name__)


# Place values for the leading four digits of a group (85^4 .. 85^1)
PLACES = (52200625, 614125, 7225, 85)

# Number of digits written for a trailing group of 0, 1, 2, or 3 bytes
PARTIAL_DIGITS = (0, 2, 3, 4)

# Value assumed for each digit missing from a trailing group
PAD_VALUE = BASE - 1

MASK32 = 0xFFFFFFFF


def encoded_size(nbytes: int) -> int:
    """Number of symbols produced when encoding `nbytes` of data."""
    groups, extra = divmod(nbytes, 4)
    return groups * 5 + PARTIAL_DIGITS[extra]


def decoded_size(nchars: int) -> int:
    """Number of bytes recovered from `nchars` symbols (whitespace excluded)."""
    groups, extra = divmod(nchars, 5)
    return groups * 4 + max(0, extra - 1)


def _digits(value: int) -> List[str]:
    """All five symbols for 32-bit `value`, most significant first."""
    symbols = []
    for place in PLACES:
        digit, value = divmod(value, place)
        symbols.append(ALPHABET[digit])
    symbols.append(ALPHABET[value])
    return symbols


def encode(data: bytes) -> str:
    """Encode raw bytes-like `data` into a Base85 string."""
    data = memoryview(data).tobytes()
    groups, extra = divmod(len(data), 4)
    symbols = []
    for value in struct.unpack(f'>{groups}I', data[:groups * 4]):
        symbols.extend(_digits(value))
    if extra:
        value, = struct.unpack('>I', data[groups * 4:].ljust(4, b'\x00'))
        symbols.extend(_digits(value)[:extra + 1])
    log.trace(f'Encoded {len(data)} bytes ({groups} groups, {extra} trailing)')
    return ''.join(symbols)


def _group_value(group: bytes) -> int:
    """Accumulate symbols of `group` left to right, padding to five digits."""
    value = 0
    for symbol in group:
        value = value * BASE + symbol_to_value(symbol)
    for _ in range(5 - len(group)):
        value = value * BASE + PAD_VALUE
    return value & MASK32


def decode(text: Union[str, bytes]) -> bytes:
    """
    Decode Base85 `text` back to raw bytes.

    ASCII space, tab, carriage return and line feed are ignored anywhere
    in the input. Text given as `str` is read as UTF-8, so a non-ASCII
    character is reported by its first byte. Errors are raised for the
    first problem found, reading left to right.

    Raises:
        InvalidCharacter: A symbol outside the alphabet is present.
        UnexpectedEof: The input ends with a lone trailing symbol.
    """
    if isinstance(text, str):
        data = text.encode('utf-8', 'surrogatepass')
    else:
        data = memoryview(text).tobytes()
    data = data.translate(None, WHITESPACE)
    groups, extra = divmod(len(data), 5)
    output = bytearray(decoded_size(len(data)))
    for index in range(groups):
        output[index * 4:index * 4 + 4] = struct.pack('>I', _group_value(data[index * 5:index * 5 + 5]))
    if extra:
        value = _group_value(data[groups * 5:])
        if extra == 1:
            raise UnexpectedEof()
        output[groups * 4:] = struct.pack('>I', value)[:extra - 1]
    log.trace(f'Decoded {len(data)} symbols ({groups} groups, {extra} trailing)')
    return bytes(output)

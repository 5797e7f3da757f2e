# SPDX-FileCopyrightText: 2021-2022 RFC1924 Developers
# SPDX-License-Identifier: Apache-2.0

"""
Base85 encoding and decoding as described in RFC 1924.

Binary data is written with an 85 symbol alphabet that needs no escaping
in source code, shell commands, or JSON strings. Encoded text is 25% larger
than the input (base64 is 33%).

Example:
    >>> import rfc1924
    >>> rfc1924.encode(b'aaaa')
    'VPRom'
    >>> rfc1924.decode('VPRom')
    b'aaaa'
"""


# internal libs
from rfc1924.__meta__ import (__appname__, __version__, __authors__, __developer__, __license__,
                              __copyright__, __description__, __keywords__)
from rfc1924.core.exceptions import Base85Error, InvalidCharacter, UnexpectedEof
from rfc1924.core.codec import encode, decode, encoded_size, decoded_size

# public interface
__all__ = ['encode', 'decode', 'encoded_size', 'decoded_size',
           'Base85Error', 'InvalidCharacter', 'UnexpectedEof',
           '__appname__', '__version__', '__authors__', '__developer__', '__license__',
           '__copyright__', '__description__', '__keywords__', ]


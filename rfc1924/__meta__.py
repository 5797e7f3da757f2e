# SPDX-FileCopyrightText: 2021-2022 RFC1924 Developers
# SPDX-License-Identifier: Apache-2.0

"""Package metadata for rfc1924."""


__appname__     = 'rfc1924'
__version__     = '0.4.0'
__authors__     = ['RFC1924 Developers', ]
__developer__   = 'RFC1924 Developers'
__license__     = 'Apache License 2.0'
__copyright__   = 'RFC1924 Developers 2021-2022'
__description__ = 'Base85 encoding and decoding as described in RFC 1924.'
__keywords__    = 'base85 rfc1924 encoding binary text codec'

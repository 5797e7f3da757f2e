# SPDX-FileCopyrightText: 2021-2022 RFC1924 Developers
# SPDX-License-Identifier: Apache-2.0

"""Command-line applications."""

# SPDX-FileCopyrightText: 2021-2022 RFC1924 Developers
# SPDX-License-Identifier: Apache-2.0

"""Fixtures for unit tests."""


# standard libs
import os

# external libs
import pytest


def pytest_configure(config) -> None:
    """Register custom markers."""
    config.addinivalue_line('markers', 'unit: fast tests without external resources')


@pytest.fixture
def sample_file(tmp_path) -> str:
    """Path to a small binary file with bytes that span the full range."""
    path = os.path.join(tmp_path, 'sample.bin')
    with open(path, mode='wb') as stream:
        stream.write(bytes(range(256)) + b'aaaaa')
    return path

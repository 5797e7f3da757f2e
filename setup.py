# SPDX-FileCopyrightText: 2021-2022 RFC1924 Developers
# SPDX-License-Identifier: Apache-2.0

"""Setup and installation script for rfc1924."""


# standard libs
import re
from setuptools import setup, find_packages


# get long description from README.rst
with open('README.rst', mode='r') as readme:
    long_description = readme.read()


# get package metadata by parsing __meta__ module
with open('rfc1924/__meta__.py', mode='r') as source:
    content = source.read().strip()
    metadata = {key: re.search(key + r'\s*=\s*[\'"]([^\'"]*)[\'"]', content).group(1)
                for key in ['__version__', '__developer__', '__description__', '__license__', '__keywords__']}


setup(
    name                 = 'rfc1924',
    version              = metadata['__version__'],
    author               = metadata['__developer__'],
    description          = metadata['__description__'],
    license              = metadata['__license__'],
    keywords             = metadata['__keywords__'],
    packages             = find_packages(include=['rfc1924', 'rfc1924.*']),
    include_package_data = True,
    long_description     = long_description,
    long_description_content_type = 'text/x-rst',
    classifiers          = ['Development Status :: 4 - Beta',
                            'Topic :: Software Development :: Libraries',
                            'Programming Language :: Python :: 3',
                            'Programming Language :: Python :: 3.8',
                            'Programming Language :: Python :: 3.9',
                            'Programming Language :: Python :: 3.10',
                            'Operating System :: OS Independent', ],
    entry_points         = {'console_scripts': ['rfc1924=rfc1924.apps.rfc1924:main']},
    python_requires      = '>=3.8',
    install_requires     = [
        'cmdkit[toml]>=2.6.1,<2.7', 'tomli>=1.1.0; python_version < "3.11"', 'rich>=9.4.0',
    ],
    extras_require       = {
        'test': ['pytest>=6.2.5', 'hypothesis>=6.24.0'],
    },
)

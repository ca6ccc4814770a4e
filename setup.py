#!/usr/bin/env python3
"""
PyOriel install script

(c) 2026 The PyOriel Authors
This file is released under the GNU GPL version 3 or later.
"""

import os
import json
from io import open

from setuptools import find_packages, setup


###############################################################################
# get descriptions and version number

# file location
HERE = os.path.abspath(os.path.dirname(__file__))

# obtain metadata without importing the package (to avoid breaking sdist install)
with open(os.path.join(HERE, 'oriel', 'data', 'meta.json'), 'r') as meta:
    _METADATA = json.load(meta)
    VERSION = _METADATA['version']
    AUTHOR = _METADATA['author']


###############################################################################
# setup parameters

SETUP_OPTIONS = dict(
    name='pyoriel',
    version=VERSION,
    author=AUTHOR,
    description='Interpreter for the Oriel graphics batch language',
    license='GPLv3+',
    python_requires='>=3.9',

    # contents
    # only include subpackages of oriel: exclude tests etc
    packages=find_packages(exclude=[_name for _name in os.listdir(HERE) if _name != 'oriel']),
    include_package_data=True,
    package_data={'oriel': ['data/*.json', 'data/*.txt']},

    # dependencies
    install_requires=['pygame>=2.0'],
    extras_require={
        'test': ['pytest'],
    },

    # launchers
    entry_points=dict(
        console_scripts=['oriel=oriel:main'],
    ),
)

###############################################################################
# run the setup

# perform the installation
setup(**SETUP_OPTIONS)

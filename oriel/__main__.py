"""
PyOriel - interpreter for the Oriel graphics batch language

(c) 2026 The PyOriel Authors
This file is released under the GNU GPL version 3 or later.
"""

import sys

from .main import main

sys.exit(main())

"""
PyOriel - interpreter for the Oriel graphics batch language

(c) 2026 The PyOriel Authors
This file is released under the GNU GPL version 3 or later.
"""

from .core import __version__
from .core import NAME, VERSION, AUTHOR, COPYRIGHT
from .core import Session, Host, parse
from .main import main

"""
PyOriel - interpreter for the Oriel graphics batch language

(c) 2026 The PyOriel Authors
This file is released under the GNU GPL version 3 or later.
"""

from ..data import NAME, VERSION, AUTHOR, COPYRIGHT
from .api import Session, decode_source
from .base.error import *
from .base import signals, keycode
from .host import Host
from .interpreter import Interpreter, RUNNING, SUSPENDED, TERMINATED
from .parser import parse

__version__ = VERSION

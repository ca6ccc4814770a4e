"""
PyOriel - interface package
Display, input and process hosts

(c) 2026 The PyOriel Authors
This file is released under the GNU GPL version 3 or later.
"""

from .base import InitFailed, host_plugins
from .interface import Interface

# host plugins
from .host import HostPlugin
from .host_none import HostNone
from .host_pygame import HostPygame

"""
PyOriel - interface.base
Interface utility classes

(c) 2026 The PyOriel Authors
This file is released under the GNU GPL version 3 or later.
"""


class InitFailed(Exception):
    """Initialisation failed."""


class PluginRegister(object):
    """Register of host plugins by name."""

    def __init__(self):
        """Initialise plugin register."""
        self._plugins = {}

    def register(self, name):
        """Decorator to register a plugin."""
        def decorated_plugin(cls):
            self._plugins[name] = cls
            return cls
        return decorated_plugin

    def __getitem__(self, name):
        """Retrieve plugin."""
        return self._plugins[name]

    def __contains__(self, name):
        """Plugin has been registered."""
        return name in self._plugins


###############################################################################
# plugin registers

host_plugins = PluginRegister()

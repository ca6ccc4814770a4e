"""
PyOriel tests.utils
Shared testing utilities

(c) 2026 The PyOriel Authors
This file is released under the GNU GPL version 3 or later.
"""

import unittest
import os
import shutil
from unittest import main as run_tests

from oriel.core import Host
from oriel.core.base import error


class TestCase(unittest.TestCase):
    """Base class for test cases."""

    tag = None

    def __init__(self, *args, **kwargs):
        """Define output dir name."""
        unittest.TestCase.__init__(self, *args, **kwargs)
        here = os.path.dirname(os.path.abspath(__file__))
        self._dir = os.path.join(here, u'output', self.tag or u'')

    def setUp(self):
        """Ensure output directory exists and is empty."""
        try:
            shutil.rmtree(self._dir)
        except EnvironmentError:
            pass
        if not os.path.isdir(self._dir):
            os.makedirs(self._dir)

    def output_path(self, *names):
        """Output file name."""
        return os.path.join(self._dir, *names)

    def write_program(self, name, source):
        """Write an Oriel program to the output directory and return its path."""
        path = self.output_path(name)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(source)
        return path


class RecordingHost(Host):
    """Host that records forwarded commands and bindings."""

    def __init__(self, button=1):
        """Set up recorder; button is the answer to any message box."""
        self.calls = []
        self.mouse = []
        self.keys = []
        self.menus = []
        self.button = button

    def forward(self, name, args):
        """Record command."""
        self.calls.append((name, list(args)))
        if name == u'MessageBox':
            return self.button
        return None

    def register_mouse_binding(self, region, label, var_x, var_y, mode):
        """Record mouse binding."""
        self.mouse.append((region, label, var_x, var_y, mode))

    def register_keyboard_binding(self, key, label):
        """Record keyboard binding."""
        self.keys.append((key, label))

    def register_menu(self, menu):
        """Record menu."""
        self.menus.append(menu)

    def names(self):
        """Names of forwarded commands, in order."""
        return [_name for _name, _ in self.calls]


class FailingHost(RecordingHost):
    """Host that fails on a given command."""

    def __init__(self, fail_on):
        """Set up host."""
        RecordingHost.__init__(self)
        self.fail_on = fail_on

    def forward(self, name, args):
        """Raise on the chosen command."""
        if name == self.fail_on:
            raise IOError('cannot open file')
        return RecordingHost.forward(self, name, args)


class ClosingHost(RecordingHost):
    """Host whose window is closed after a number of statements."""

    def __init__(self, statements):
        """Set up host."""
        RecordingHost.__init__(self)
        self.statements = statements

    def check_events(self):
        """Shut down once the statements have run."""
        if not self.statements:
            raise error.Exit()
        self.statements -= 1

"""
PyOriel - host.py
Contract between the interpreter and its host

(c) 2026 The PyOriel Authors
This file is released under the GNU GPL version 3 or later.
"""


class Host(object):
    """Sink for commands and registry for input bindings; the base does nothing."""

    def forward(self, name, args):
        """
        Carry out a function-style command with resolved arguments.
        Returns the button number for MessageBox, None otherwise.
        """
        return None

    def register_mouse_binding(self, region, label, var_x, var_y, mode):
        """Record a clickable region (x1, y1, x2, y2) bound to a label."""

    def register_keyboard_binding(self, key, label):
        """Record a virtual-key code or PhysicalKey bound to a label."""

    def register_menu(self, menu):
        """Record the menu bar, a list of Popup."""

    def check_events(self):
        """Look for host events while the program runs; raise error.Exit on shutdown."""

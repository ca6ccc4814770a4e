"""
PyOriel - signals.py
Signals for communication between interpreter and host

(c) 2026 The PyOriel Authors
This file is released under the GNU GPL version 3 or later.
"""


class Event(object):
    """Signal object for the input queue."""

    def __init__(self, event_type, params=()):
        """Create signal."""
        self.event_type = event_type
        self.params = params

    def __repr__(self):
        """Represent signal as string."""
        return '<Event %s: %r>' % (self.event_type, self.params)


# general signals

# host has shut down (window closed)
QUIT = 'quit'


# input signals

# mouse button pressed: (x, y, button) in program coordinates
MOUSE_CLICK = 'mouse_click'
# key pressed: (virtual_key, char, ctrl)
# virtual_key is a Windows virtual-key code or None, char the typed character or None
KEY_DOWN = 'key_down'
# menu item chosen: (item_id,)
MENU_SELECT = 'menu_select'
# timed WaitInput has expired
TIMEOUT = 'timeout'

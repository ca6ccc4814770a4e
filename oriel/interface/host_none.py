"""
PyOriel - interface.host_none
Headless host

(c) 2026 The PyOriel Authors
This file is released under the GNU GPL version 3 or later.
"""

import time
import logging

from ..core.base import signals
from ..core.program import format_value
from .host import HostPlugin, default_button
from .base import host_plugins


@host_plugins.register('none')
class HostNone(HostPlugin):
    """Host without display: logs commands and lets timed waits expire."""

    def __init__(self, caption=u'', **kwargs):
        """Set up the headless host."""
        HostPlugin.__init__(self)
        self.caption = caption

    def forward(self, name, args):
        """Log and carry out a command."""
        logging.info('%s(%s)', name, u','.join(format_value(_arg) for _arg in args))
        return HostPlugin.forward(self, name, args)

    def wait_event(self):
        """Let a timed wait expire; nothing else will ever happen."""
        remaining = self.remaining()
        if remaining is None:
            logging.info('Waiting for input without a timeout; stopping')
            return signals.Event(signals.QUIT)
        time.sleep(remaining / 1000.)
        return signals.Event(signals.TIMEOUT)

    def message_box(self, box_type, default, icon, text, caption):
        """Answer a message box with its default button."""
        button = default_button(box_type, default)
        logging.info('Message box `%s`: %s; answered %d', caption, text, button)
        return button

    def run(self, command):
        """Don't start programs without a display."""
        logging.info('Not running `%s` in headless mode', command)

    def use_caption(self, text):
        """Set the window title."""
        self.caption = text

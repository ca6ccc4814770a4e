"""
PyOriel - interface.host
Base class for host plugins

(c) 2026 The PyOriel Authors
This file is released under the GNU GPL version 3 or later.
"""

import time
import logging
import subprocess

from ..core.base import signals
from ..core.base import tokens as tk
from ..core.host import Host
from ..core.program import Token


# buttons shown by each message box type, numbered from 1 in this order
MESSAGEBOX_BUTTONS = {
    u'OK': (u'OK',),
    u'OKCANCEL': (u'OK', u'Cancel'),
    u'YESNO': (u'Yes', u'No'),
    u'YESNOCANCEL': (u'Yes', u'No', u'Cancel'),
}

# stand-ins for Windows accessories started with Run
RUN_ALIASES = {
    u'NOTEPAD.EXE': u'mousepad',
    u'CALC.EXE': u'libreoffice --calc',
    u'WRITE.EXE': u'libreoffice --writer',
    u'C:\\COMMAND.COM': u'xterm',
}


def default_button(box_type, default):
    """Number of the button chosen when a message box is dismissed."""
    count = len(MESSAGEBOX_BUTTONS[box_type])
    if 1 <= default <= count:
        return default
    return 1


def launch(command):
    """Start a child process through the shell and don't wait for it."""
    command = RUN_ALIASES.get(command.upper(), command)
    logging.info('Running `%s`', command)
    return subprocess.Popen(command, shell=True)


class HostPlugin(Host):
    """Base class for hosts: dispatches commands to handler methods."""

    def __init__(self, **kwargs):
        """Set up the host."""
        self._handlers = {
            tk.BEEP: self.beep,
            tk.DRAWARC: self.draw_arc,
            tk.DRAWBACKGROUND: self.draw_background,
            tk.DRAWBITMAP: self.draw_bitmap,
            tk.DRAWCHORD: self.draw_chord,
            tk.DRAWELLIPSE: self.draw_ellipse,
            tk.DRAWFLOOD: self.draw_flood,
            tk.DRAWLINE: self.draw_line,
            tk.DRAWNUMBER: self.draw_number,
            tk.DRAWPIE: self.draw_pie,
            tk.DRAWRECTANGLE: self.draw_rectangle,
            tk.DRAWROUNDRECTANGLE: self.draw_round_rectangle,
            tk.DRAWSIZEDBITMAP: self.draw_sized_bitmap,
            tk.DRAWTEXT: self.draw_text,
            tk.MESSAGEBOX: self.message_box,
            tk.RUN: self.run,
            tk.SETKEYBOARD: self.set_keyboard,
            tk.SETMENU: self.set_menu,
            tk.SETMOUSE: self.set_mouse,
            tk.SETWAITMODE: self.set_wait_mode,
            tk.SETWINDOW: self.set_window,
            tk.USEBACKGROUND: self.use_background,
            tk.USEBRUSH: self.use_brush,
            tk.USECAPTION: self.use_caption,
            tk.USECOORDINATES: self.use_coordinates,
            tk.USEFONT: self.use_font,
            tk.USEPEN: self.use_pen,
            tk.WAITINPUT: self.wait_input,
        }
        # input bindings as reported by the interpreter
        self.mouse_regions = []
        self.keyboard = {}
        self.menu = []
        self.wait_mode = u'NULL'
        # monotonic time at which the pending wait expires; None if untimed
        self._deadline = None
        # child processes started with Run
        self._children = []

    # called by Interface

    def __enter__(self):
        """Final initialisation."""
        return self

    def __exit__(self, type, value, traceback):
        """Close the host; reap child processes that have finished."""
        self._reap()

    def _reap(self):
        """Collect the exit status of finished child processes."""
        self._children = [_child for _child in self._children if _child.poll() is None]

    def wait_event(self):
        """Block until an input event is available and return it."""
        return signals.Event(signals.QUIT)

    def remaining(self):
        """Milliseconds left in a timed wait; None if untimed."""
        if self._deadline is None:
            return None
        return max(0, int((self._deadline - time.monotonic()) * 1000))

    # called by the interpreter

    def forward(self, name, args):
        """Carry out a command; bare tokens are passed by name."""
        try:
            handler = self._handlers[name]
        except KeyError:
            logging.debug('Ignored unsupported command %s', name)
            return None
        args = tuple(_arg.name if isinstance(_arg, Token) else _arg for _arg in args)
        return handler(*args)

    def register_mouse_binding(self, region, label, var_x, var_y, mode):
        """Record a clickable region."""
        self.mouse_regions.append(region)

    def register_keyboard_binding(self, key, label):
        """Record a key binding."""
        self.keyboard[key] = label

    def register_menu(self, menu):
        """Record the menu bar."""
        self.menu = list(menu)

    # command handlers

    def beep(self):
        """Sound the system bell."""

    def draw_arc(self, x1, y1, x2, y2, x3, y3, x4, y4):
        """Draw an elliptic arc inside a bounding rectangle."""

    def draw_background(self):
        """Clear the window to the background colour."""

    def draw_bitmap(self, x, y, file_name):
        """Draw an image file at its natural size."""

    def draw_chord(self, x1, y1, x2, y2, x3, y3, x4, y4):
        """Draw a filled arc closed by a straight line."""

    def draw_ellipse(self, x1, y1, x2, y2):
        """Draw a filled ellipse."""

    def draw_flood(self, x, y, r, g, b):
        """Fill the area around a point up to a border colour."""

    def draw_line(self, x1, y1, x2, y2):
        """Draw a line."""

    def draw_number(self, x, y, number):
        """Draw a number as text."""
        self.draw_text(x, y, u'%d' % (number,))

    def draw_pie(self, x1, y1, x2, y2, x3, y3, x4, y4):
        """Draw a filled arc closed through the centre."""

    def draw_rectangle(self, x1, y1, x2, y2):
        """Draw a filled rectangle."""

    def draw_round_rectangle(self, x1, y1, x2, y2, width, height):
        """Draw a filled rectangle with rounded corners."""

    def draw_sized_bitmap(self, x1, y1, x2, y2, file_name):
        """Draw an image file stretched to a rectangle."""

    def draw_text(self, x, y, text):
        """Draw text with its top left corner at a point."""

    def message_box(self, box_type, default, icon, text, caption):
        """Show a modal message box; return the number of the button pressed."""
        return default_button(box_type, default)

    def run(self, command):
        """Start a program."""
        self._reap()
        self._children.append(launch(command))

    def set_keyboard(self, *args):
        """Keyboard bindings are replaced."""
        self.keyboard = {}

    def set_menu(self, *args):
        """Menu bar is replaced."""
        self.menu = []

    def set_mouse(self, *args):
        """Mouse bindings are replaced."""
        self.mouse_regions = []

    def set_wait_mode(self, mode):
        """Set whether timed waits only hold while the window is out of focus."""
        self.wait_mode = mode

    def set_window(self, option):
        """Maximise, minimise or restore the window."""

    def use_background(self, option, r, g, b):
        """Set background transparency and colour."""

    def use_brush(self, option, r, g, b):
        """Set fill pattern and colour."""

    def use_caption(self, text):
        """Set the window title."""

    def use_coordinates(self, option):
        """Set pixel or metric coordinates."""

    def use_font(self, name, width, height, bold, italic, underline, r, g, b):
        """Set text font and colour."""

    def use_pen(self, option, width, r, g, b):
        """Set line style, width and colour."""

    def wait_input(self, timeout=None):
        """Start waiting for input; timeout in milliseconds."""
        if timeout is None:
            self._deadline = None
        else:
            self._deadline = time.monotonic() + max(0, timeout) / 1000.

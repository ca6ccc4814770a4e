"""
PyOriel - keycode.py
Virtual-key codes

(c) 2026 The PyOriel Authors
This file is released under the GNU GPL version 3 or later.
"""

# these are Windows virtual-key codes
# they identify a key regardless of the character it produces
# https://learn.microsoft.com/en-us/windows/win32/inputdev/virtual-key-codes
BACKSPACE = 8
TAB = 9
ENTER = 13
SHIFT = 16
CTRL = 17
ALT = 18
PAUSE = 19
CAPSLOCK = 20
ESCAPE = 27
SPACE = 32
PGUP = 33
PGDN = 34
END = 35
HOME = 36
LEFT = 37
UP = 38
RIGHT = 39
DOWN = 40
PRINTSCREEN = 44
INSERT = 45
DELETE = 46
# digit row: 48..57 are '0'..'9'
N0 = 48
N9 = 57
# letters: 65..90 are 'A'..'Z'
A = 65
Z = 90
# numeric keypad
NUMPAD0 = 96
NUMPAD9 = 105
MULTIPLY = 106
ADD = 107
SUBTRACT = 109
DECIMAL = 110
DIVIDE = 111
# function keys F1..F16
F1 = 112
F16 = 127
NUMLOCK = 144
SCROLLLOCK = 145


VIRTUAL_KEYS = frozenset(
    (
        BACKSPACE, TAB, ENTER, SHIFT, CTRL, ALT, PAUSE, CAPSLOCK, ESCAPE, SPACE,
        PGUP, PGDN, END, HOME, LEFT, UP, RIGHT, DOWN, PRINTSCREEN, INSERT, DELETE,
        MULTIPLY, ADD, SUBTRACT, DECIMAL, DIVIDE, NUMLOCK, SCROLLLOCK,
    )
    + tuple(range(N0, N9 + 1))
    + tuple(range(A, Z + 1))
    + tuple(range(NUMPAD0, NUMPAD9 + 1))
    + tuple(range(F1, F16 + 1))
)


def is_virtual_key(code):
    """Check if an integer is a known virtual-key code."""
    return code in VIRTUAL_KEYS

"""
PyOriel - tokens.py
Oriel keywords and token names

(c) 2026 The PyOriel Authors
This file is released under the GNU GPL version 3 or later.
"""

import string


# character classes
DIGITS = string.digits
UPPERCASE = string.ascii_uppercase
LOWERCASE = string.ascii_lowercase
LETTERS = UPPERCASE + LOWERCASE + u'_'
# allowable as chars 2.. in an identifier
NAME_CHARS = LETTERS + DIGITS

# inter-token whitespace; line feed ends a command group
BLANKS = u' \t\r|'
LINE_FEED = u'\n'
COMMENT_START = u'{'
COMMENT_END = u'}'
QUOTE = u'"'


# control-flow keywords
GOTO = u'Goto'
GOSUB = u'Gosub'
RETURN = u'Return'
END = u'End'
IF = u'If'
THEN = u'Then'
SET = u'Set'

# commands without arguments
BEEP = u'Beep'
DRAWBACKGROUND = u'DrawBackground'

# function-style commands
DRAWARC = u'DrawArc'
DRAWBITMAP = u'DrawBitmap'
DRAWCHORD = u'DrawChord'
DRAWELLIPSE = u'DrawEllipse'
DRAWFLOOD = u'DrawFlood'
DRAWLINE = u'DrawLine'
DRAWNUMBER = u'DrawNumber'
DRAWPIE = u'DrawPie'
DRAWRECTANGLE = u'DrawRectangle'
DRAWROUNDRECTANGLE = u'DrawRoundRectangle'
DRAWSIZEDBITMAP = u'DrawSizedBitmap'
DRAWTEXT = u'DrawText'
MESSAGEBOX = u'MessageBox'
RUN = u'Run'
SETKEYBOARD = u'SetKeyboard'
SETMENU = u'SetMenu'
SETMOUSE = u'SetMouse'
SETWAITMODE = u'SetWaitMode'
SETWINDOW = u'SetWindow'
USEBACKGROUND = u'UseBackground'
USEBRUSH = u'UseBrush'
USECAPTION = u'UseCaption'
USECOORDINATES = u'UseCoordinates'
USEFONT = u'UseFont'
USEPEN = u'UsePen'
WAITINPUT = u'WaitInput'

NOARG_COMMANDS = (BEEP, DRAWBACKGROUND)

FUNCTION_COMMANDS = (
    DRAWARC, DRAWBITMAP, DRAWCHORD, DRAWELLIPSE, DRAWFLOOD, DRAWLINE, DRAWNUMBER,
    DRAWPIE, DRAWRECTANGLE, DRAWROUNDRECTANGLE, DRAWSIZEDBITMAP, DRAWTEXT,
    MESSAGEBOX, RUN, SETKEYBOARD, SETMENU, SETMOUSE, SETWAITMODE, SETWINDOW,
    USEBACKGROUND, USEBRUSH, USECAPTION, USECOORDINATES, USEFONT, USEPEN, WAITINPUT,
)

# bare token arguments, grouped by the option they select
MESSAGEBOX_TYPES = (u'OK', u'OKCANCEL', u'YESNO', u'YESNOCANCEL')
MESSAGEBOX_ICONS = (u'INFORMATION', u'EXCLAMATION', u'QUESTION', u'STOP', u'NOICON')
WINDOW_OPTIONS = (u'MAXIMIZE', u'MINIMIZE', u'RESTORE')
BACKGROUND_OPTIONS = (u'OPAQUE', u'TRANSPARENT')
BRUSH_TYPES = (
    u'SOLID', u'DIAGONALUP', u'DIAGONALDOWN', u'DIAGONALCROSS',
    u'HORIZONTAL', u'VERTICAL', u'CROSS', u'NULL'
)
COORDINATES = (u'PIXEL', u'METRIC')
WAIT_MODES = (u'NULL', u'FOCUS')
PEN_TYPES = (u'SOLID', u'NULL', u'DASH', u'DOT', u'DASHDOT', u'DASHDOTDOT')
FONT_WEIGHTS = (u'BOLD', u'NOBOLD')
FONT_SLANTS = (u'ITALIC', u'NOITALIC')
FONT_UNDERLINES = (u'UNDERLINE', u'NOUNDERLINE')
# SetMenu structure
IGNORE = u'IGNORE'
SEPARATOR = u'SEPARATOR'
ENDPOPUP = u'ENDPOPUP'
MENU_TOKENS = (IGNORE, SEPARATOR, ENDPOPUP)

TOKENS = frozenset(
    MESSAGEBOX_TYPES + MESSAGEBOX_ICONS + WINDOW_OPTIONS + BACKGROUND_OPTIONS
    + BRUSH_TYPES + COORDINATES + WAIT_MODES + PEN_TYPES
    + FONT_WEIGHTS + FONT_SLANTS + FONT_UNDERLINES + MENU_TOKENS
)


# comparison operators, longest first so that <= is not read as <
EQUAL = u'='
LESS_EQUAL = u'<='
NOT_EQUAL = u'<>'
LESS = u'<'
GREATER_EQUAL = u'>='
GREATER = u'>'
COMPARISONS = (LESS_EQUAL, NOT_EQUAL, GREATER_EQUAL, EQUAL, LESS, GREATER)

# arithmetic operators
PLUS = u'+'
MINUS = u'-'
TIMES = u'*'
DIVIDE = u'/'
MATH_OPERATORS = (PLUS, MINUS, TIMES, DIVIDE)


# keyword lookup by upper-case spelling
KEYWORDS = dict(
    (_kw.upper(), _kw)
    for _kw in (GOTO, GOSUB, RETURN, END, IF, THEN, SET) + NOARG_COMMANDS + FUNCTION_COMMANDS
)

# identifiers may not be spelled as any of these
RESERVED = frozenset(KEYWORDS) | TOKENS


def is_reserved(name):
    """Check whether a name collides with a keyword or token, case-insensitively."""
    return name.upper() in RESERVED

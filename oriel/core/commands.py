"""
PyOriel - commands.py
Function-command signatures and argument checking

(c) 2026 The PyOriel Authors
This file is released under the GNU GPL version 3 or later.
"""

from collections import namedtuple

from .base import error
from .base import tokens as tk
from .program import VarRef, Token, LabelRef, PhysicalKey


# lexical kinds of raw arguments as read by the parser
LITERAL_INTEGER = 'literal_integer'
LITERAL_STRING = 'literal_string'
NAME = 'name'

# argument as read from source, before checking against the signature
RawArg = namedtuple('RawArg', ['kind', 'value', 'pos'])


# argument slot kinds
INTEGER = 'integer'
STRING = 'string'
VARIABLE = 'variable'
LABEL = 'label'
KEY = 'key'
TOKEN = 'token'

Slot = namedtuple('Slot', ['kind', 'choices'])

INT = Slot(INTEGER, None)
STR = Slot(STRING, None)
VAR = Slot(VARIABLE, None)
LBL = Slot(LABEL, None)
KEY_SLOT = Slot(KEY, None)
# label operand of a menu item, which may be IGNORE instead
MENU_LBL = Slot(LABEL, (tk.IGNORE,))


def token(choices):
    """Slot accepting one of the given bare tokens."""
    return Slot(TOKEN, choices)


# fixed signatures
SIGNATURES = {
    tk.DRAWARC: (INT,) * 8,
    tk.DRAWBITMAP: (INT, INT, STR),
    tk.DRAWCHORD: (INT,) * 8,
    tk.DRAWELLIPSE: (INT,) * 4,
    tk.DRAWFLOOD: (INT,) * 5,
    tk.DRAWLINE: (INT,) * 4,
    tk.DRAWNUMBER: (INT,) * 3,
    tk.DRAWPIE: (INT,) * 8,
    tk.DRAWRECTANGLE: (INT,) * 4,
    tk.DRAWROUNDRECTANGLE: (INT,) * 6,
    tk.DRAWSIZEDBITMAP: (INT, INT, INT, INT, STR),
    tk.DRAWTEXT: (INT, INT, STR),
    tk.MESSAGEBOX: (
        token(tk.MESSAGEBOX_TYPES), INT, token(tk.MESSAGEBOX_ICONS), STR, STR, VAR
    ),
    tk.RUN: (STR,),
    tk.SETWAITMODE: (token(tk.WAIT_MODES),),
    tk.SETWINDOW: (token(tk.WINDOW_OPTIONS),),
    tk.USEBACKGROUND: (token(tk.BACKGROUND_OPTIONS), INT, INT, INT),
    tk.USEBRUSH: (token(tk.BRUSH_TYPES), INT, INT, INT),
    tk.USECAPTION: (STR,),
    tk.USECOORDINATES: (token(tk.COORDINATES),),
    tk.USEFONT: (
        STR, INT, INT,
        token(tk.FONT_WEIGHTS), token(tk.FONT_SLANTS), token(tk.FONT_UNDERLINES),
        INT, INT, INT
    ),
    tk.USEPEN: (token(tk.PEN_TYPES), INT, INT, INT, INT),
}

# signatures consisting of zero or more repeated groups
REPEATING = {
    # x1, y1, x2, y2, label, xvar, yvar
    tk.SETMOUSE: (INT, INT, INT, INT, LBL, VAR, VAR),
    # key, label
    tk.SETKEYBOARD: (KEY_SLOT, LBL),
}

# signatures whose arguments may all be left out
OPTIONAL = {
    # timeout in milliseconds
    tk.WAITINPUT: (INT,),
}


def check_arguments(name, raw_args, end_pos):
    """Check raw arguments against a command's signature; return (args, kinds)."""
    if name in SIGNATURES:
        slots = SIGNATURES[name]
        _check_count(name, raw_args, len(slots), end_pos)
    elif name in OPTIONAL:
        slots = OPTIONAL[name][:len(raw_args)]
        _check_count(name, raw_args, len(OPTIONAL[name]), end_pos, required=False)
    elif name in REPEATING:
        group = REPEATING[name]
        if len(raw_args) % len(group):
            raise error.OrielSyntaxError(u'expected another argument', end_pos)
        slots = group * (len(raw_args) // len(group))
    elif name == tk.SETMENU:
        return _check_menu(raw_args, end_pos)
    else:
        raise error.OrielSyntaxError(u"unknown command '%s'" % (name,), end_pos)
    args = tuple(convert(_slot, _raw) for _slot, _raw in zip(slots, raw_args))
    return args, tuple(_slot.kind for _slot in slots)


def _check_count(name, raw_args, count, end_pos, required=True):
    """Raise syntax error for too many or, if required, too few arguments."""
    if len(raw_args) > count:
        raise error.OrielSyntaxError(
            u"command '%s' has too many arguments" % (name,), raw_args[count].pos
        )
    if required and len(raw_args) < count:
        raise error.OrielSyntaxError(u'expected another argument', end_pos)


def convert(slot, raw):
    """Convert a raw argument to a value for a given slot."""
    if slot.kind == TOKEN:
        if raw.kind == NAME and raw.value.upper() in slot.choices:
            return Token(raw.value.upper())
        if raw.kind == NAME:
            raise error.OrielSyntaxError(u"failed to match token '%s'" % (raw.value,), raw.pos)
    elif slot.kind == STRING:
        if raw.kind == LITERAL_STRING:
            return raw.value
    elif raw.kind == NAME and slot.choices and raw.value.upper() in slot.choices:
        return Token(raw.value.upper())
    elif raw.kind == NAME and not tk.is_reserved(raw.value):
        if slot.kind == LABEL:
            return LabelRef(raw.value)
        return VarRef(raw.value)
    elif raw.kind == LITERAL_INTEGER and slot.kind in (INTEGER, KEY):
        return raw.value
    elif raw.kind == LITERAL_STRING and slot.kind == KEY:
        return parse_physical_key(raw.value, raw.pos)
    raise error.OrielSyntaxError(
        u"argument '%s' has incorrect type" % (_format_raw(raw),), raw.pos
    )


def parse_physical_key(text, pos=None):
    """Convert the contents of a quoted physical key to a PhysicalKey."""
    ctrl = len(text) == 2 and text[0] == u'^'
    char = text[-1:]
    if (
            len(text) not in (1, 2) or (len(text) == 2 and not ctrl)
            # printable ASCII, not whitespace
            or not (u'!' <= char <= u'~')
        ):
        raise error.OrielSyntaxError(u"physical key '\"%s\"' is invalid" % (text,), pos)
    return PhysicalKey(char, ctrl)


def _format_raw(raw):
    """Raw argument as it appeared in source."""
    if raw.kind == LITERAL_STRING:
        return u'"%s"' % (raw.value,)
    return u'%s' % (raw.value,)


def _check_menu(raw_args, end_pos):
    """Check SetMenu arguments: popups of "name", label|IGNORE, members..., ENDPOPUP."""
    args, kinds = [], []

    def _take(slot):
        if not remaining:
            raise error.OrielSyntaxError(u'expected another argument', end_pos)
        args.append(convert(slot, remaining.pop(0)))
        kinds.append(slot.kind)

    def _peek_token():
        raw = remaining[0] if remaining else None
        if raw and raw.kind == NAME and raw.value.upper() in (tk.SEPARATOR, tk.ENDPOPUP):
            return raw.value.upper()
        return None

    remaining = list(raw_args)
    while remaining:
        # popup header
        _take(STR)
        _take(MENU_LBL)
        # members up to ENDPOPUP
        while True:
            if not remaining:
                raise error.OrielSyntaxError(u'expected another argument', end_pos)
            member = _peek_token()
            if member is not None:
                _take(token((member,)))
                if member == tk.ENDPOPUP:
                    break
            else:
                _take(STR)
                _take(MENU_LBL)
    return tuple(args), tuple(kinds)

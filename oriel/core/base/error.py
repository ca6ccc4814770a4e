"""
PyOriel - error.py
Error constants and exceptions

(c) 2026 The PyOriel Authors
This file is released under the GNU GPL version 3 or later.
"""

# error constants
SYNTAX_ERROR = 1
UNDEFINED_LABEL = 2
RETURN_WITHOUT_GOSUB = 3
DIVISION_BY_ZERO = 4
OVERFLOW = 5
OUT_OF_STACK_SPACE = 6
INVALID_KEY = 7
HOST_ERROR = 8


class Interrupt(Exception):
    """Base type for exceptions."""

    message = u''

    def __repr__(self):
        """String representation of exception."""
        return u'<%s>' % (self.message,)


class Exit(Interrupt):
    """Host has shut down the run."""
    message = u'Exit'


class OrielError(Interrupt):
    """Error in an Oriel program, fatal to the run."""

    default_message = u'Unprintable error'
    messages = {
        1: u'Syntax error',
        2: u'Undefined label',
        3: u'Return without Gosub',
        4: u'Division by zero',
        5: u'Overflow',
        6: u'Out of stack space',
        7: u'Invalid virtual key',
        8: u'Host error',
    }

    # error number set by subclasses
    err = None

    def __init__(self, detail=u'', pos=None, err=None):
        """Set up error with optional description and (line, column) position."""
        Interrupt.__init__(self)
        if err is not None:
            self.err = err
        self.detail = detail
        self.pos = pos
        self.message = self.messages.get(self.err, self.default_message)

    def get_message(self):
        """Error message, without position."""
        if self.detail:
            return u'%s: %s' % (self.message, self.detail)
        return self.message

    def __str__(self):
        """Error message, prefixed with line:column: if known."""
        if self.pos is not None:
            return u'%d:%d: %s' % (self.pos[0], self.pos[1], self.get_message())
        return self.get_message()


class OrielSyntaxError(OrielError):
    """Malformed source text."""
    err = SYNTAX_ERROR


class UndefinedLabelError(OrielError):
    """Goto, Gosub or binding target is not defined."""
    err = UNDEFINED_LABEL


class StackUnderflowError(OrielError):
    """Return with an empty call stack."""
    err = RETURN_WITHOUT_GOSUB


class DivisionByZeroError(OrielError):
    """Integer division by zero."""
    err = DIVISION_BY_ZERO


class ArithmeticOverflowError(OrielError):
    """Result does not fit in a signed 64-bit integer."""
    err = OVERFLOW


class StackOverflowError(OrielError):
    """Gosub nested deeper than the configured maximum."""
    err = OUT_OF_STACK_SPACE


class InvalidKeyError(OrielError):
    """Virtual-key code not recognised."""
    err = INVALID_KEY


class HostError(OrielError):
    """Host interface reported a failure."""
    err = HOST_ERROR


def throw_if(bool, detail=u'', pos=None, err_class=OrielSyntaxError):
    """Raise error if condition is True."""
    if bool:
        raise err_class(detail, pos)

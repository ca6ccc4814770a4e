"""
PyOriel - codestream.py
Source code stream utilities

(c) 2026 The PyOriel Authors
This file is released under the GNU GPL version 3 or later.
"""

from . import error
from . import tokens as tk


class SourceStream(object):
    """Stream of Oriel source text, with line and column tracking."""

    blanks = tk.BLANKS

    def __init__(self, text):
        """Create stream over a source string."""
        # normalise DOS line endings; lone CR remains blank
        self._text = text.replace(u'\r\n', u'\n')
        self._pos = 0

    def read(self, n=1):
        """Read up to n chars."""
        d = self._text[self._pos:self._pos+n]
        self._pos += len(d)
        return d

    def peek(self, n=1):
        """Peek next chars in stream."""
        return self._text[self._pos:self._pos+n]

    def position(self, pos=None):
        """Line and column (1-based) of an offset, or of the current offset."""
        if pos is None:
            pos = self._pos
        line = self._text.count(tk.LINE_FEED, 0, pos) + 1
        col = pos - self._text.rfind(tk.LINE_FEED, 0, pos)
        return line, col

    def at_end(self):
        """Stream is exhausted."""
        return self._pos >= len(self._text)

    def _skip_comment(self):
        """Skip a {...} comment, having read the opening brace."""
        start = self._pos - 1
        end = self._text.find(tk.COMMENT_END, self._pos)
        if end < 0:
            raise error.OrielSyntaxError(u'unterminated comment', self.position(start))
        self._pos = end + 1

    def skip_blank(self, newlines=False):
        """Skip whitespace and comments, then peek next char."""
        while True:
            d = self.peek()
            if not d:
                return d
            if d == tk.COMMENT_START:
                self.read()
                self._skip_comment()
            elif d in self.blanks or (newlines and d == tk.LINE_FEED):
                self.read()
            else:
                return d

    def skip_blank_read_if(self, in_range, newlines=False):
        """Skip whitespace, then read and return the first string in range that follows."""
        self.skip_blank(newlines)
        for item in in_range:
            if self._text.startswith(item, self._pos):
                self._pos += len(item)
                return item
        return None

    def require_read(self, in_range, expected, newlines=False):
        """Skip whitespace, read and raise error if not in range."""
        item = self.skip_blank_read_if(in_range, newlines)
        if item is None:
            raise error.OrielSyntaxError(u'expected %s' % (expected,), self.position())
        return item

    def read_name(self):
        """Read an identifier; empty if none follows."""
        name = u''
        d = self.peek()
        if d and d in tk.LETTERS:
            while d and d in tk.NAME_CHARS:
                name += self.read()
                d = self.peek()
        return name

    def read_number(self):
        """Read an unsigned decimal literal as a string; empty if none follows."""
        number = u''
        d = self.peek()
        while d and d in tk.DIGITS:
            number += self.read()
            d = self.peek()
        return number

    def read_string(self):
        """Read a quoted string literal, having peeked the opening quote."""
        start = self._pos
        self.read()
        end = self._text.find(tk.QUOTE, self._pos)
        newline = self._text.find(tk.LINE_FEED, self._pos)
        if end < 0 or 0 <= newline < end:
            raise error.OrielSyntaxError(u'unterminated string', self.position(start))
        s = self._text[self._pos:end]
        self._pos = end + 1
        return s

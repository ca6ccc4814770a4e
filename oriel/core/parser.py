"""
PyOriel - parser.py
Oriel source parser

(c) 2026 The PyOriel Authors
This file is released under the GNU GPL version 3 or later.
"""

import logging

from .base import error
from .base import tokens as tk
from .base.codestream import SourceStream
from . import commands
from .commands import RawArg
from . import program as prog


# largest signed 64-bit integer
INT_MAX = 2**63 - 1


def parse(source, pedantic=False):
    """Parse Oriel source text into a Program."""
    return Parser(pedantic).parse(source)


class Parser(object):
    """Oriel statement parser."""

    def __init__(self, pedantic=False):
        """Initialise parser."""
        # labels must start at column 1
        self._pedantic = pedantic
        self._init_syntax()

    def _init_syntax(self):
        """Initialise syntax parsers."""
        self._simple = {
            tk.GOTO: self._parse_goto,
            tk.GOSUB: self._parse_gosub,
            tk.RETURN: self._parse_return,
            tk.END: self._parse_end,
            tk.IF: self._parse_if,
            tk.SET: self._parse_set,
            tk.BEEP: self._parse_noop,
            tk.DRAWBACKGROUND: self._parse_noop,
        }
        for name in tk.FUNCTION_COMMANDS:
            self._simple[name] = self._parse_function

    def parse(self, source):
        """Parse source text into a Program."""
        self._statements = []
        self._labels = {}
        self._groups = []
        # label operands to be validated: (name, pos)
        self._references = []
        ins = SourceStream(source)
        while not ins.at_end():
            self._parse_group(ins)
        for name, pos in self._references:
            if name.upper() not in self._labels:
                raise error.UndefinedLabelError(name, pos)
        logging.debug(
            'Parsed %d statements in %d groups, %d labels',
            len(self._statements), len(self._groups), len(self._labels)
        )
        return prog.Program(self._statements, self._labels, self._groups)

    def _parse_group(self, ins):
        """Parse the commands on one physical line."""
        start = len(self._statements)
        while True:
            d = ins.skip_blank()
            if not d:
                break
            if d == tk.LINE_FEED:
                ins.read()
                break
            self._parse_command(ins)
        end = len(self._statements)
        if end == start:
            return
        self._groups.append((start, end))
        # a false condition skips the rest of the group
        for index in range(start, end):
            statement = self._statements[index]
            if isinstance(statement, prog.If):
                self._statements[index] = statement._replace(skip_to=end)

    def _parse_command(self, ins):
        """Parse a single command or label."""
        pos = ins.position()
        name = ins.read_name()
        if not name:
            raise error.OrielSyntaxError(u"unexpected '%s'" % (ins.peek(),), pos)
        if ins.peek() == u':':
            ins.read()
            self._add_label(name, pos)
            return
        keyword = tk.KEYWORDS.get(name.upper())
        if keyword is None:
            raise error.OrielSyntaxError(u"unknown command '%s'" % (name,), pos)
        if keyword not in self._simple:
            raise error.OrielSyntaxError(u"unexpected '%s'" % (name,), pos)
        self._statements.append(self._simple[keyword](ins, keyword, pos))

    def _add_label(self, name, pos):
        """Define a label at the current statement index."""
        error.throw_if(
            tk.is_reserved(name), u"reserved word '%s' used as label" % (name,), pos
        )
        error.throw_if(
            self._pedantic and pos[1] != 1, u"label '%s' is not at line start" % (name,), pos
        )
        error.throw_if(
            name.upper() in self._labels, u"duplicate label '%s'" % (name,), pos
        )
        self._statements.append(prog.Label(name, pos))
        self._labels[name.upper()] = len(self._statements)

    ###########################################################################
    # operands

    def _parse_label_name(self, ins):
        """Parse a jump target, with optional trailing colon."""
        ins.skip_blank()
        pos = ins.position()
        name = ins.read_name()
        error.throw_if(not name or tk.is_reserved(name), u'expected label', pos)
        if ins.peek() == u':':
            ins.read()
        self._references.append((name, pos))
        return name

    def _parse_variable_name(self, ins):
        """Parse the name of a variable to be assigned."""
        ins.skip_blank()
        pos = ins.position()
        name = ins.read_name()
        error.throw_if(not name or tk.is_reserved(name), u'expected variable', pos)
        return name

    def _parse_integer(self, ins):
        """Parse an unsigned integer literal."""
        pos = ins.position()
        number = ins.read_number()
        value = int(number)
        error.throw_if(
            value > INT_MAX, u"failed to parse integer '%s'" % (number,), pos
        )
        return value

    def _parse_operand(self, ins):
        """Parse an integer literal or a variable."""
        d = ins.skip_blank()
        pos = ins.position()
        if d and d in tk.DIGITS:
            return self._parse_integer(ins)
        name = ins.read_name()
        error.throw_if(
            not name or tk.is_reserved(name), u'expected integer or variable', pos
        )
        return prog.VarRef(name)

    def _parse_raw_argument(self, ins):
        """Parse a function-command argument before checking its type."""
        d = ins.skip_blank(newlines=True)
        pos = ins.position()
        if d == tk.QUOTE:
            return RawArg(commands.LITERAL_STRING, ins.read_string(), pos)
        if d and d in tk.DIGITS:
            return RawArg(commands.LITERAL_INTEGER, self._parse_integer(ins), pos)
        name = ins.read_name()
        error.throw_if(not name, u'expected argument', pos)
        return RawArg(commands.NAME, name, pos)

    ###########################################################################
    # statements

    def _parse_goto(self, ins, keyword, pos):
        """Parse Goto syntax."""
        return prog.Goto(self._parse_label_name(ins), pos)

    def _parse_gosub(self, ins, keyword, pos):
        """Parse Gosub syntax."""
        return prog.Gosub(self._parse_label_name(ins), pos)

    def _parse_return(self, ins, keyword, pos):
        """Parse Return syntax."""
        return prog.Return(pos)

    def _parse_end(self, ins, keyword, pos):
        """Parse End syntax."""
        return prog.End(pos)

    def _parse_noop(self, ins, keyword, pos):
        """Parse Beep and DrawBackground."""
        return prog.NoOpCommand(keyword, pos)

    def _parse_if(self, ins, keyword, pos):
        """Parse If syntax."""
        lhs = self._parse_operand(ins)
        op = ins.require_read(tk.COMPARISONS, u'comparison operator')
        rhs = self._parse_operand(ins)
        ins.skip_blank()
        then_pos = ins.position()
        error.throw_if(ins.read_name().upper() != tk.THEN.upper(), u'expected Then', then_pos)
        # skip target is filled in once the group is complete
        return prog.If(lhs, op, rhs, None, pos)

    def _parse_set(self, ins, keyword, pos):
        """Parse Set syntax."""
        var = self._parse_variable_name(ins)
        ins.require_read((tk.EQUAL,), u"'='")
        lhs = self._parse_operand(ins)
        op = ins.skip_blank_read_if(tk.MATH_OPERATORS)
        rhs = self._parse_operand(ins) if op else None
        return prog.Set(var, lhs, op, rhs, pos)

    def _parse_function(self, ins, keyword, pos):
        """Parse a function-style command with parenthesised arguments."""
        ins.require_read((u'(',), u"'('")
        raw_args = []
        if not ins.skip_blank_read_if((u')',), newlines=True):
            while True:
                raw_args.append(self._parse_raw_argument(ins))
                ins.skip_blank(newlines=True)
                end_pos = ins.position()
                if ins.require_read((u',', u')'), u"',' or ')'", newlines=True) == u')':
                    break
        else:
            end_pos = ins.position()
        args, kinds = commands.check_arguments(keyword, raw_args, end_pos)
        for arg in args:
            if isinstance(arg, prog.LabelRef):
                self._references.append((arg.name, pos))
        return prog.FunctionCommand(keyword, args, kinds, pos)

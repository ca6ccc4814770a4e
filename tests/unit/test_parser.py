"""
PyOriel tests.test_parser
unit tests for source parser

(c) 2026 The PyOriel Authors
This file is released under the GNU GPL version 3 or later.
"""

from oriel.core import parse
from oriel.core import OrielSyntaxError, UndefinedLabelError
from oriel.core import commands
from oriel.core.program import (
    Label, FunctionCommand, Goto, If, Set, NoOpCommand, End,
    VarRef, Token, LabelRef, PhysicalKey,
)
from tests.unit.utils import TestCase, run_tests


class ParserTest(TestCase):
    """Unit tests for parser."""

    tag = u'parser'

    def _syntax_error(self, source, **kwargs):
        """Parse, expecting a syntax error; return it."""
        with self.assertRaises(OrielSyntaxError) as cm:
            parse(source, **kwargs)
        return cm.exception

    # program structure

    def test_labels(self):
        """Labels map to the statement following them, case-insensitively."""
        p = parse(u'Start:\nDrawLine(1,2,3,4)\nlater: Goto START\n')
        assert isinstance(p.statements[0], Label), p.statements
        assert p.get_label(u'start') == 1, p.labels
        assert p.get_label(u'LaTeR') == 3, p.labels
        assert isinstance(p.statements[3], Goto), p.statements
        assert p.has_label(u'Later')
        assert not p.has_label(u'Elsewhere')

    def test_keywords_case_insensitive(self):
        """Keywords are matched case-insensitively and stored in canonical case."""
        p = parse(u'drawline(1,2,3,4)\nGOTO x\nX: eNd')
        assert p.statements[0].name == u'DrawLine', p.statements
        assert p.statements[1].label == u'x', p.statements
        assert isinstance(p.statements[3], End), p.statements

    def test_keyword_prefixed_names(self):
        """Names that begin with a keyword are identifiers, not the keyword."""
        p = parse(u'Goto2: Set Goto2x = 1\nGoto Goto2:\n')
        assert p.labels == {u'GOTO2': 1}, p.labels
        assert p.statements[1] == Set(u'Goto2x', 1, None, None, (1, 8)), p.statements[1]
        # trailing colon on a jump target is not part of the name
        assert p.statements[2] == Goto(u'Goto2', (2, 1)), p.statements[2]

    def test_command_groups(self):
        """Each physical line is one command group; If skips to the next group."""
        p = parse(u'If a=1 Then Set b=2 Beep\nSet c=3\n')
        assert p.groups == ((0, 3), (3, 4)), p.groups
        assert isinstance(p.statements[0], If), p.statements
        assert p.statements[0].lhs == VarRef(u'a')
        assert p.statements[0].op == u'='
        assert p.statements[0].rhs == 1
        assert p.statements[0].skip_to == 3
        assert p.statements[1] == Set(u'b', 2, None, None, (1, 13)), p.statements[1]
        assert isinstance(p.statements[2], NoOpCommand), p.statements
        assert p.get_group(1) == (0, 3)
        assert p.get_group(3) == (3, 4)

    def test_empty_lines(self):
        """Blank lines and comment-only lines form no group."""
        p = parse(u'\n\n{ nothing here }\nBeep\n\n')
        assert p.groups == ((0, 1),), p.groups
        assert p.statements[0].pos == (4, 1), p.statements

    def test_comments_and_bars(self):
        """Comments may span lines; bars are whitespace."""
        p = parse(u'{ comment\nspanning lines }DrawLine(1,|2,3,4) { end }\n')
        assert len(p) == 1, p.statements
        assert p.statements[0].args == (1, 2, 3, 4), p.statements
        assert p.statements[0].pos == (2, 17), p.statements[0].pos

    def test_crlf(self):
        """DOS line endings end command groups."""
        p = parse(u'DrawLine(1,2,3,4)\r\nEnd\r\n')
        assert p.groups == ((0, 1), (1, 2)), p.groups

    def test_arguments_across_lines(self):
        """Line feeds are allowed inside argument lists."""
        p = parse(u'DrawText(10,\n  10,\n  "Hi")\nEnd\n')
        assert p.groups == ((0, 1), (1, 2)), p.groups
        assert p.statements[0].args == (10, 10, u'Hi'), p.statements[0]

    def test_comparisons(self):
        """Two-character comparison operators are read whole."""
        for op in (u'<=', u'>=', u'<>', u'<', u'>', u'='):
            p = parse(u'If a%sb Then End' % (op,))
            assert p.statements[0].op == op, (op, p.statements[0])

    def test_set_expressions(self):
        """Set takes one operand or one binary operation."""
        p = parse(u'Set x = y\nSet x = 10 / 3\nSet x = a*b')
        assert p.statements[0] == Set(u'x', VarRef(u'y'), None, None, (1, 1))
        assert p.statements[1] == Set(u'x', 10, u'/', 3, (2, 1))
        assert p.statements[2] == Set(u'x', VarRef(u'a'), u'*', VarRef(u'b'), (3, 1))

    # arguments

    def test_variable_arguments(self):
        """Names in integer slots are variable references."""
        p = parse(u'DrawLine(x,y,10,20)')
        statement = p.statements[0]
        assert isinstance(statement, FunctionCommand)
        assert statement.args == (VarRef(u'x'), VarRef(u'y'), 10, 20), statement.args
        assert statement.kinds == (commands.INTEGER,) * 4, statement.kinds

    def test_token_arguments(self):
        """Tokens are matched case-insensitively and stored in upper case."""
        p = parse(u'UsePen(dash,2,0,0,0)\nMessageBox(YesNo,1,question,"Sure?","Ask",answer)')
        assert p.statements[0].args[0] == Token(u'DASH'), p.statements[0]
        args = p.statements[1].args
        assert args[0] == Token(u'YESNO'), args
        assert args[2] == Token(u'QUESTION'), args
        assert args[5] == VarRef(u'answer'), args

    def test_optional_arguments(self):
        """WaitInput takes an optional timeout."""
        p = parse(u'WaitInput()\nWaitInput(500)\nWaitInput(t)')
        assert p.statements[0].args == ()
        assert p.statements[1].args == (500,)
        assert p.statements[2].args == (VarRef(u't'),)
        self._syntax_error(u'WaitInput(1,2)')

    def test_physical_keys(self):
        """Quoted keys are physical keys, with ^ for Ctrl."""
        p = parse(u'SetKeyboard("a",K,"^b",K,13,K)\nK: End')
        args = p.statements[0].args
        assert args == (
            PhysicalKey(u'a', False), LabelRef(u'K'),
            PhysicalKey(u'b', True), LabelRef(u'K'),
            13, LabelRef(u'K'),
        ), args
        assert p.statements[0].kinds[:2] == (commands.KEY, commands.LABEL)

    def test_bad_physical_keys(self):
        """Physical keys must be one printable character, optionally with ^."""
        for key in (u'ab', u' ', u'', u'^ab'):
            e = self._syntax_error(u'SetKeyboard("%s",K)\nK:' % (key,))
            assert u'physical key' in str(e), (key, str(e))

    def test_set_mouse_groups(self):
        """SetMouse takes whole groups of seven arguments."""
        p = parse(u'SetMouse()\nSetMouse(0,0,1,1,K,x,y,2,2,3,3,K,x,y)\nK:')
        assert p.statements[0].args == ()
        assert len(p.statements[1].args) == 14
        assert p.statements[1].args[4] == LabelRef(u'K')
        e = self._syntax_error(u'SetMouse(0,0,1,1,K,x)\nK:')
        assert u'expected another argument' in str(e), str(e)

    def test_set_menu(self):
        """SetMenu takes popups of items ending in ENDPOPUP."""
        p = parse(
            u'SetMenu("&File",IGNORE,"&Open",Op,SEPARATOR,"E&xit",Ex,ENDPOPUP,'
            u'"&Help",Hlp,ENDPOPUP)\nOp: End\nEx: End\nHlp: End'
        )
        args = p.statements[0].args
        assert args == (
            u'&File', Token(u'IGNORE'), u'&Open', LabelRef(u'Op'), Token(u'SEPARATOR'),
            u'E&xit', LabelRef(u'Ex'), Token(u'ENDPOPUP'),
            u'&Help', LabelRef(u'Hlp'), Token(u'ENDPOPUP'),
        ), args
        e = self._syntax_error(u'SetMenu("&File",IGNORE,"&Open",Op)\nOp:')
        assert u'expected another argument' in str(e), str(e)

    # diagnostics

    def test_unknown_command(self):
        """Unknown names are reported at their position."""
        e = self._syntax_error(u'Beep\n  Foo(1)')
        assert e.pos == (2, 3), e.pos
        assert u"unknown command 'Foo'" in str(e), str(e)
        assert str(e).startswith(u'2:3: Syntax error'), str(e)

    def test_argument_count(self):
        """Argument counts are checked against the command signature."""
        e = self._syntax_error(u'DrawLine(1,2,3,4,5)')
        assert u'too many arguments' in str(e), str(e)
        assert e.pos == (1, 18), e.pos
        e = self._syntax_error(u'DrawLine(1,2,3)')
        assert u'expected another argument' in str(e), str(e)

    def test_argument_types(self):
        """Argument types and tokens are checked against the command signature."""
        e = self._syntax_error(u'UsePen(THICK,1,0,0,0)')
        assert u"failed to match token 'THICK'" in str(e), str(e)
        e = self._syntax_error(u'DrawText(1,2,3)')
        assert u'incorrect type' in str(e), str(e)
        e = self._syntax_error(u'DrawLine("a",2,3,4)')
        assert u'incorrect type' in str(e), str(e)
        e = self._syntax_error(u'MessageBox(OK,1,NOICON,"a","b",3)')
        assert u'incorrect type' in str(e), str(e)

    def test_malformed_syntax(self):
        """Malformed statements are syntax errors."""
        for source in (
                u'Set Goto = 1',
                u'Set a = -1',
                u'Set a = 1 + 2 + 3',
                u'If a=1 Goto x\nx:',
                u'If a Then End',
                u'Then',
                u'DrawLine 1,2,3,4',
                u'DrawLine(1,2,3,4',
                u'Beep()',
                u'Goto',
            ):
            with self.assertRaises(OrielSyntaxError, msg=source):
                parse(source)

    def test_integer_range(self):
        """Integer literals must fit in a signed 64-bit integer."""
        p = parse(u'Set a = 9223372036854775807')
        assert p.statements[0].lhs == 2**63 - 1
        e = self._syntax_error(u'Set a = 9223372036854775808')
        assert u'failed to parse integer' in str(e), str(e)

    def test_unterminated(self):
        """Strings end on the same line; comments must be closed."""
        e = self._syntax_error(u'DrawText(1,1,"abc\n")')
        assert u'unterminated string' in str(e), str(e)
        assert e.pos == (1, 14), e.pos
        e = self._syntax_error(u'Beep { abc')
        assert u'unterminated comment' in str(e), str(e)
        assert e.pos == (1, 6), e.pos

    def test_undefined_label(self):
        """Jump and binding targets must be defined."""
        with self.assertRaises(UndefinedLabelError) as cm:
            parse(u'Goto Nowhere')
        assert cm.exception.pos == (1, 6), cm.exception.pos
        with self.assertRaises(UndefinedLabelError) as cm:
            parse(u'Beep\nSetMouse(0,0,1,1,Nowhere,x,y)')
        assert cm.exception.pos == (2, 1), cm.exception.pos
        assert u'Nowhere' in str(cm.exception), str(cm.exception)

    def test_bad_labels(self):
        """Labels must be unique and not reserved."""
        e = self._syntax_error(u'a:\nA:')
        assert u'duplicate label' in str(e), str(e)
        self._syntax_error(u'Goto:')
        self._syntax_error(u'Solid: End')

    def test_pedantic_labels(self):
        """In pedantic mode, labels must start at column 1."""
        parse(u'Beep Lbl: End')
        parse(u'Lbl: End', pedantic=True)
        e = self._syntax_error(u'  Lbl: End', pedantic=True)
        assert u'not at line start' in str(e), str(e)

    def test_listing(self):
        """Program representation lists groups with statement indices."""
        p = parse(u'Loop: DrawLine(0,0,10,10)\nGoto Loop')
        listing = repr(p)
        assert listing == u'[0] Loop: DrawLine(0,0,10,10)\n[2] Goto Loop', listing


if __name__ == '__main__':
    run_tests()

"""
PyOriel - program.py
Parsed program representation

(c) 2026 The PyOriel Authors
This file is released under the GNU GPL version 3 or later.
"""

from collections import namedtuple

from .base import error


###############################################################################
# argument values
# integers and strings are represented by int and str

# reference to a variable, resolved at run time
VarRef = namedtuple('VarRef', ['name'])
# bare token keyword such as SOLID or MAXIMIZE
Token = namedtuple('Token', ['name'])
# reference to a label, never resolved as a variable
LabelRef = namedtuple('LabelRef', ['name'])
# quoted physical key such as "a" or "^a" (with Ctrl)
PhysicalKey = namedtuple('PhysicalKey', ['char', 'ctrl'])


###############################################################################
# statements
# every statement carries its (line, column) source position as pos

Label = namedtuple('Label', ['name', 'pos'])
FunctionCommand = namedtuple('FunctionCommand', ['name', 'args', 'kinds', 'pos'])
Goto = namedtuple('Goto', ['label', 'pos'])
Gosub = namedtuple('Gosub', ['label', 'pos'])
Return = namedtuple('Return', ['pos'])
End = namedtuple('End', ['pos'])
NoOpCommand = namedtuple('NoOpCommand', ['name', 'pos'])
# skip_to is the index of the first statement of the next command group
If = namedtuple('If', ['lhs', 'op', 'rhs', 'skip_to', 'pos'])
# op and rhs are None for a plain assignment
Set = namedtuple('Set', ['var', 'lhs', 'op', 'rhs', 'pos'])


def format_value(value):
    """Representation of an argument value as it would appear in source."""
    if isinstance(value, str):
        return u'"%s"' % (value,)
    if isinstance(value, PhysicalKey):
        return u'"%s%s"' % (u'^' if value.ctrl else u'', value.char)
    if isinstance(value, (VarRef, Token, LabelRef)):
        return value.name
    return u'%d' % (value,)


def format_statement(statement):
    """Representation of a statement as it would appear in source."""
    kind = type(statement)
    if kind is Label:
        return u'%s:' % (statement.name,)
    if kind is FunctionCommand:
        return u'%s(%s)' % (statement.name, u','.join(format_value(_v) for _v in statement.args))
    if kind in (Goto, Gosub):
        return u'%s %s' % (kind.__name__, statement.label)
    if kind is NoOpCommand:
        return statement.name
    if kind is If:
        return u'If %s%s%s Then' % (
            format_value(statement.lhs), statement.op, format_value(statement.rhs)
        )
    if kind is Set:
        expr = format_value(statement.lhs)
        if statement.op is not None:
            expr += statement.op + format_value(statement.rhs)
        return u'Set %s=%s' % (statement.var, expr)
    return kind.__name__


class Program(object):
    """Oriel program: statements, label table and command groups."""

    def __init__(self, statements, labels, groups):
        """Initialise program."""
        self.statements = tuple(statements)
        # upper-case label name -> index of statement following the label
        self.labels = dict(labels)
        # (start, end) statement index ranges, one per command group
        self.groups = tuple(groups)

    def __len__(self):
        """Number of statements."""
        return len(self.statements)

    def __repr__(self):
        """Return a listing of the program with statement indices (for debugging)."""
        output = []
        for start, end in self.groups:
            output.append(u'[%d] %s' % (
                start, u' '.join(format_statement(_s) for _s in self.statements[start:end])
            ))
        return u'\n'.join(output)

    def has_label(self, name):
        """Label is defined, case-insensitively."""
        return name.upper() in self.labels

    def get_label(self, name, pos=None):
        """Statement index for a label, case-insensitively."""
        try:
            return self.labels[name.upper()]
        except KeyError:
            raise error.UndefinedLabelError(name, pos)

    def get_group(self, index):
        """Command group (start, end) containing a statement index, or None."""
        for start, end in self.groups:
            if start <= index < end:
                return start, end
        return None

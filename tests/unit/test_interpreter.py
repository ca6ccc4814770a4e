"""
PyOriel tests.test_interpreter
unit tests for execution engine

(c) 2026 The PyOriel Authors
This file is released under the GNU GPL version 3 or later.
"""

from oriel.core import parse, Interpreter, RUNNING, SUSPENDED, TERMINATED
from oriel.core import (
    DivisionByZeroError, StackUnderflowError, StackOverflowError,
    ArithmeticOverflowError, HostError,
)
from tests.unit.utils import TestCase, RecordingHost, FailingHost, ClosingHost, run_tests


def _interpreter(source, host=None, **kwargs):
    """Parse source and set up an interpreter."""
    return Interpreter(parse(source), host or RecordingHost(), **kwargs)


class InterpreterTest(TestCase):
    """Unit tests for Interpreter."""

    tag = u'interpreter'

    # control flow

    def test_goto_forward_and_backward(self):
        """Goto jumps to the statement after the label in either direction."""
        source = (
            u'Goto Fwd\n'
            u'Set a = 99\n'
            u'Back: Set b = 2\n'
            u'End\n'
            u'Fwd: Set a = 1\n'
            u'Goto Back\n'
        )
        interp = _interpreter(source)
        interp.step()
        assert interp.state.pc == interp._program.get_label(u'Fwd'), interp.state.pc
        assert interp.run() == TERMINATED
        assert interp.variables[u'a'] == 1, interp.variables.to_dict()
        assert interp.variables[u'b'] == 2, interp.variables.to_dict()

    def test_gosub_return(self):
        """Return resumes after the Gosub with the subroutine's changes in place."""
        source = (
            u'Set x = 1\n'
            u'Gosub Sub Set y = x\n'
            u'End\n'
            u'Sub: Set x = x + 10\n'
            u'Return\n'
        )
        interp = _interpreter(source)
        interp.step()
        interp.step()
        assert interp.state.call_stack == [2], interp.state.call_stack
        interp.step()
        interp.step()
        # back after the Gosub, on the same line
        assert interp.state.pc == 2, interp.state.pc
        assert interp.run() == TERMINATED
        assert interp.variables[u'y'] == 11, interp.variables.to_dict()

    def test_return_without_gosub(self):
        """Return with an empty call stack is fatal."""
        interp = _interpreter(u'Set a = 1\nReturn')
        with self.assertRaises(StackUnderflowError) as cm:
            interp.run()
        assert cm.exception.pos == (2, 1), cm.exception.pos
        assert interp.status == TERMINATED

    def test_stack_limit(self):
        """Unbounded recursion hits the stack limit."""
        interp = _interpreter(u'Sub: Gosub Sub', max_stack=50)
        with self.assertRaises(StackOverflowError):
            interp.run()
        assert len(interp.state.call_stack) == 50

    def test_false_condition_skips_group(self):
        """A false If skips the rest of its line."""
        interp = _interpreter(u'If 1=2 Then Goto Foo\nSet a = 1\nEnd\nFoo: Set a = 2')
        interp.step()
        assert interp.state.pc == 2, interp.state.pc
        interp.run()
        assert interp.variables[u'a'] == 1

    def test_true_condition_continues(self):
        """A true If continues with the rest of its line."""
        interp = _interpreter(u'If 1=1 Then Goto Foo\nSet a = 1\nEnd\nFoo: Set a = 2')
        interp.run()
        assert interp.variables[u'a'] == 2

    def test_chained_conditions(self):
        """Several Ifs on one line act as a conjunction."""
        interp = _interpreter(
            u'Set a = 3\n'
            u'If a > 1 Then If a < 3 Then Set r = 1\n'
            u'If a >= 3 Then If a <> 4 Then Set s = 1\n'
        )
        interp.run()
        assert interp.variables[u'r'] == 0
        assert interp.variables[u's'] == 1

    def test_jump_target_colon(self):
        """A jump target may carry the colon of its label."""
        interp = _interpreter(u'Goto Skip:\nSet a = 1\nSkip: Gosub Sub:\nEnd\nSub: Set b = 1\nReturn')
        assert interp.run() == TERMINATED
        assert interp.variables[u'a'] == 0
        assert interp.variables[u'b'] == 1

    def test_host_shutdown(self):
        """Closing the window ends a program stuck in a loop."""
        host = ClosingHost(100)
        interp = _interpreter(u'Loop: Set n = n + 1 DrawLine(0, 0, 10, 10)\nGoto Loop', host)
        with self.assertLogs(level='INFO') as logs:
            assert interp.run() == TERMINATED
        assert any(u'shut down' in _line for _line in logs.output), logs.output
        # the label runs once, then three statements per round
        assert interp.variables[u'n'] == 33, interp.variables.to_dict()
        assert len(host.calls) == 33, host.calls

    def test_end_and_exhaustion(self):
        """End and falling off the end both terminate."""
        interp = _interpreter(u'Set a = 1\nEnd\nSet a = 2')
        assert interp.run() == TERMINATED
        assert interp.variables[u'a'] == 1
        interp = _interpreter(u'Set a = 1')
        assert interp.run() == TERMINATED
        # stepping a terminated run does nothing
        assert interp.step() == TERMINATED

    # arithmetic

    def test_arithmetic(self):
        """Integer arithmetic with truncating division."""
        interp = _interpreter(
            u'Set x = 10 / 3\n'
            u'Set y = 5 + z\n'
            u'Set m = 0 - 7\n'
            u'Set q = m / 2\n'
            u'Set p = x * y\n'
            u'Set d = p - 1\n'
        )
        interp.run()
        values = interp.variables.to_dict()
        assert values[u'X'] == 3, values
        assert values[u'Y'] == 5, values
        assert values[u'Q'] == -3, values
        assert values[u'P'] == 15, values
        assert values[u'D'] == 14, values
        assert u'Z' not in values
        assert u'z' not in interp.variables
        assert u'x' in interp.variables

    def test_division_by_zero(self):
        """Division by zero is fatal and carries the statement position."""
        interp = _interpreter(u'Set a = 1\n  Set w = 1 / 0\nSet a = 2')
        with self.assertRaises(DivisionByZeroError) as cm:
            interp.run()
        assert cm.exception.pos == (2, 3), cm.exception.pos
        assert interp.status == TERMINATED
        assert interp.variables[u'a'] == 1

    def test_overflow(self):
        """Results outside the signed 64-bit range are fatal."""
        interp = _interpreter(u'Set a = 9223372036854775807 + 1')
        with self.assertRaises(ArithmeticOverflowError):
            interp.run()
        interp = _interpreter(u'Set a = 0 - 9223372036854775807\nSet a = a - 1\nSet a = a - 1')
        with self.assertRaises(ArithmeticOverflowError) as cm:
            interp.run()
        assert cm.exception.pos == (3, 1), cm.exception.pos

    def test_variables_case_insensitive(self):
        """Variable names are case-insensitive."""
        interp = _interpreter(u'Set Count = 4\nSet total = COUNT * count')
        interp.run()
        assert interp.variables[u'TOTAL'] == 16

    # forwarding

    def test_forward_resolved_arguments(self):
        """Commands are forwarded with variables resolved to their values."""
        host = RecordingHost()
        interp = _interpreter(
            u'Set x = 5\nDrawLine(x, y, 10, 20)\nUsePen(DASH, 1, 0, 0, 255)\nBeep', host
        )
        interp.run()
        assert host.names() == [u'DrawLine', u'UsePen', u'Beep'], host.calls
        assert host.calls[0][1] == [5, 0, 10, 20], host.calls[0]
        assert host.calls[1][1][0].name == u'DASH', host.calls[1]
        assert host.calls[2][1] == [], host.calls[2]

    def test_message_box(self):
        """MessageBox binds the pushed button to its variable."""
        host = RecordingHost(button=2)
        interp = _interpreter(
            u'MessageBox(YESNO, 1, QUESTION, "Continue?", "Question", answer)', host
        )
        interp.run()
        assert interp.variables[u'answer'] == 2
        name, args = host.calls[0]
        assert name == u'MessageBox'
        # the result variable is not forwarded
        assert len(args) == 5, args
        assert args[3:] == [u'Continue?', u'Question'], args

    def test_host_error(self):
        """Host failures are fatal with the host's message."""
        interp = _interpreter(u'Beep\nDrawBitmap(0, 0, "missing.bmp")\nBeep', FailingHost(u'DrawBitmap'))
        with self.assertRaises(HostError) as cm:
            interp.run()
        assert u'cannot open file' in str(cm.exception), str(cm.exception)
        assert cm.exception.pos == (2, 1), cm.exception.pos
        assert interp.status == TERMINATED

    def test_trace(self):
        """Trace mode logs each statement."""
        interp = _interpreter(u'Set a = 1\nBeep', trace=True)
        with self.assertLogs(level='DEBUG') as logs:
            interp.run()
        assert any(u'[1:1] Set a=1' in _line for _line in logs.output), logs.output
        assert any(u'[2:1] Beep' in _line for _line in logs.output), logs.output

    def test_independent_runs(self):
        """Interpreters over one program don't share state."""
        program = parse(u'Set a = a + 1')
        first = Interpreter(program, RecordingHost())
        second = Interpreter(program, RecordingHost())
        first.run()
        first.state.pc = 0
        first.state.status = RUNNING
        first.run()
        second.run()
        assert first.variables[u'a'] == 2
        assert second.variables[u'a'] == 1

    def test_wait_input_suspends(self):
        """WaitInput is forwarded and suspends the run on itself."""
        host = RecordingHost()
        interp = _interpreter(u'Beep\nWaitInput(250)\nBeep', host)
        assert interp.run() == SUSPENDED
        assert host.names() == [u'Beep', u'WaitInput'], host.calls
        assert host.calls[1][1] == [250]
        assert interp.state.timeout == 250
        assert interp.state.pc == 1
        # no stepping while suspended
        assert interp.step() == SUSPENDED
        assert interp.state.pc == 1


if __name__ == '__main__':
    run_tests()

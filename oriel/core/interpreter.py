"""
PyOriel - interpreter.py
Oriel execution engine

(c) 2026 The PyOriel Authors
This file is released under the GNU GPL version 3 or later.
"""

import logging
import operator

from .base import error
from .base import keycode
from .base import signals
from .base import tokens as tk
from . import commands
from . import inputevents
from . import program as prog
from .variables import Variables


# run states
RUNNING = 'running'
SUSPENDED = 'suspended'
TERMINATED = 'terminated'

# signed 64-bit range
INT_MIN = -2**63
INT_MAX = 2**63 - 1

# default maximum Gosub nesting depth
MAX_STACK = 10000

COMPARISONS = {
    tk.EQUAL: operator.eq,
    tk.LESS: operator.lt,
    tk.GREATER: operator.gt,
    tk.LESS_EQUAL: operator.le,
    tk.GREATER_EQUAL: operator.ge,
    tk.NOT_EQUAL: operator.ne,
}


def divide(lhs, rhs):
    """Integer division, truncating toward zero."""
    if rhs == 0:
        raise error.DivisionByZeroError()
    quotient = abs(lhs) // abs(rhs)
    if (lhs < 0) != (rhs < 0):
        return -quotient
    return quotient


OPERATIONS = {
    tk.PLUS: operator.add,
    tk.MINUS: operator.sub,
    tk.TIMES: operator.mul,
    tk.DIVIDE: divide,
}


class ExecutionState(object):
    """Mutable state of a single run."""

    def __init__(self):
        """Initialise state at the start of the program."""
        self.pc = 0
        self.variables = Variables()
        # return indices pushed by Gosub
        self.call_stack = []
        self.bindings = inputevents.InputBindings()
        self.status = RUNNING
        # timeout in ms of the pending WaitInput; None if untimed
        self.timeout = None
        self.wait_mode = u'NULL'
        # (line, column) of the last executed statement
        self.last_pos = None


class Interpreter(object):
    """Oriel interpreter."""

    def __init__(self, program, host, max_stack=MAX_STACK, trace=False):
        """Initialise interpreter."""
        self._program = program
        self._host = host
        self._max_stack = max_stack
        # log each statement as it executes
        self.trace = trace
        self.state = ExecutionState()
        self._init_statements()

    def _init_statements(self):
        """Initialise statement dispatch tables."""
        self._statements = {
            prog.Label: self._exec_label,
            prog.FunctionCommand: self._exec_function,
            prog.Goto: self._exec_goto,
            prog.Gosub: self._exec_gosub,
            prog.Return: self._exec_return,
            prog.End: self._exec_end,
            prog.NoOpCommand: self._exec_noop,
            prog.If: self._exec_if,
            prog.Set: self._exec_set,
        }
        self._functions = {
            tk.WAITINPUT: self._exec_wait_input,
            tk.MESSAGEBOX: self._exec_message_box,
            tk.SETMOUSE: self._exec_set_mouse,
            tk.SETKEYBOARD: self._exec_set_keyboard,
            tk.SETMENU: self._exec_set_menu,
            tk.SETWAITMODE: self._exec_set_wait_mode,
        }
        self._events = {
            signals.MOUSE_CLICK: self._resume_mouse,
            signals.KEY_DOWN: self._resume_key,
            signals.MENU_SELECT: self._resume_menu,
            signals.TIMEOUT: self._resume_timeout,
            signals.QUIT: self._resume_quit,
        }

    @property
    def status(self):
        """Current run state."""
        return self.state.status

    @property
    def variables(self):
        """Variable store."""
        return self.state.variables

    ###########################################################################
    # stepping

    def run(self):
        """Step until suspended or terminated."""
        while self.state.status == RUNNING:
            self.step()
        return self.state.status

    def step(self):
        """Execute the statement at the program counter."""
        state = self.state
        if state.status != RUNNING:
            return state.status
        if state.pc >= len(self._program.statements):
            # falling off the end is End
            self._terminate()
            return state.status
        statement = self._program.statements[state.pc]
        state.last_pos = statement.pos
        if self.trace:
            logging.debug(
                '[%d:%d] %s', statement.pos[0], statement.pos[1],
                prog.format_statement(statement)
            )
        try:
            # may raise Exit if the host has shut down
            self._call_host(self._host.check_events)
            self._statements[type(statement)](statement)
        except error.Exit:
            logging.info('Host has shut down')
            self._terminate()
        except error.OrielError as e:
            if e.pos is None:
                e.pos = statement.pos
            self._terminate()
            raise
        return state.status

    def _terminate(self):
        """End the run."""
        self.state.status = TERMINATED
        self.state.timeout = None

    ###########################################################################
    # input events

    def resume(self, event):
        """Deliver an input event; continue running if it matches a binding."""
        if self.state.status != SUSPENDED:
            return self.state.status
        try:
            handler = self._events[event.event_type]
        except KeyError:
            logging.debug('Ignoring unknown event %r', event)
            return self.state.status
        if handler(*event.params):
            self.state.status = RUNNING
            self.state.timeout = None
            return self.run()
        return self.state.status

    def _resume_mouse(self, x, y, button=None):
        """Handle a mouse click; return True if it matched."""
        region = self.state.bindings.match_mouse(x, y)
        if region is None:
            return False
        self.state.variables.set(region.var_x, x)
        self.state.variables.set(region.var_y, y)
        self._jump(region.label)
        return True

    def _resume_key(self, virtual_key, char=None, ctrl=False):
        """Handle a key press; return True if it matched."""
        label = self.state.bindings.match_key(virtual_key, char, ctrl)
        if label is None:
            return False
        self._jump(label)
        return True

    def _resume_menu(self, item_id):
        """Handle a menu selection; return True if it matched."""
        label = self.state.bindings.match_menu(item_id)
        if label is None:
            return False
        self._jump(label)
        return True

    def _resume_timeout(self):
        """End a timed wait; untimed waits ignore timeouts."""
        if self.state.timeout is None:
            return False
        self.state.pc += 1
        return True

    def _resume_quit(self):
        """Host has shut down."""
        logging.info('Host has shut down')
        self._terminate()
        return False

    ###########################################################################
    # helpers

    def _jump(self, label, pos=None):
        """Set the program counter to a label."""
        self.state.pc = self._program.get_label(label, pos)

    def _value(self, operand):
        """Value of an integer literal or variable."""
        if isinstance(operand, prog.VarRef):
            return self.state.variables.get(operand.name)
        return operand

    def _resolve(self, statement):
        """Resolve variable references in integer and key arguments."""
        return tuple(
            self._value(_arg) if _kind in (commands.INTEGER, commands.KEY) else _arg
            for _arg, _kind in zip(statement.args, statement.kinds)
        )

    def _forward(self, name, args):
        """Forward a command to the host, wrapping host failures."""
        try:
            return self._host.forward(name, args)
        except error.Interrupt:
            raise
        except Exception as e:
            raise error.HostError(u'%s' % (e,) or type(e).__name__)

    def _call_host(self, method, *args):
        """Call a host registration hook, wrapping host failures."""
        try:
            method(*args)
        except error.Interrupt:
            raise
        except Exception as e:
            raise error.HostError(u'%s' % (e,) or type(e).__name__)

    ###########################################################################
    # statements

    def _exec_label(self, statement):
        """Label: no-op."""
        self.state.pc += 1

    def _exec_noop(self, statement):
        """Beep, DrawBackground: forward without arguments."""
        self._forward(statement.name, ())
        self.state.pc += 1

    def _exec_goto(self, statement):
        """Goto: jump to label."""
        self._jump(statement.label, statement.pos)

    def _exec_gosub(self, statement):
        """Gosub: push return index and jump to label."""
        stack = self.state.call_stack
        error.throw_if(
            len(stack) >= self._max_stack, statement.label, statement.pos,
            err_class=error.StackOverflowError
        )
        stack.append(self.state.pc + 1)
        self._jump(statement.label, statement.pos)

    def _exec_return(self, statement):
        """Return: pop return index."""
        error.throw_if(
            not self.state.call_stack, pos=statement.pos, err_class=error.StackUnderflowError
        )
        self.state.pc = self.state.call_stack.pop()

    def _exec_end(self, statement):
        """End: terminate the run."""
        self._terminate()

    def _exec_if(self, statement):
        """If: skip the rest of the command group if the comparison is false."""
        lhs, rhs = self._value(statement.lhs), self._value(statement.rhs)
        if COMPARISONS[statement.op](lhs, rhs):
            self.state.pc += 1
        else:
            self.state.pc = statement.skip_to

    def _exec_set(self, statement):
        """Set: assign integer expression to variable."""
        value = self._value(statement.lhs)
        if statement.op is not None:
            value = OPERATIONS[statement.op](value, self._value(statement.rhs))
            error.throw_if(
                not INT_MIN <= value <= INT_MAX, u'%d' % (value,), statement.pos,
                err_class=error.ArithmeticOverflowError
            )
        self.state.variables.set(statement.var, value)
        self.state.pc += 1

    def _exec_function(self, statement):
        """Function-style command: resolve arguments and forward."""
        args = self._resolve(statement)
        if statement.name in self._functions:
            self._functions[statement.name](statement, args)
        else:
            self._forward(statement.name, args)
            self.state.pc += 1

    ###########################################################################
    # commands with engine-side effects

    def _exec_wait_input(self, statement, args):
        """WaitInput: forward, then suspend until an input event."""
        timeout = max(0, args[0]) if args else None
        self._forward(statement.name, args)
        self.state.timeout = timeout
        self.state.status = SUSPENDED

    def _exec_message_box(self, statement, args):
        """MessageBox: bind the number of the pushed button to the last argument."""
        button = self._forward(statement.name, args[:-1])
        self.state.variables.set(args[-1].name, int(button or 0))
        self.state.pc += 1

    def _exec_set_mouse(self, statement, args):
        """SetMouse: replace mouse bindings."""
        regions = inputevents.build_mouse_regions(args)
        self.state.bindings.set_mouse(regions)
        self._forward(statement.name, args)
        mode = prog.Token(self.state.wait_mode)
        for region in regions:
            self._call_host(
                self._host.register_mouse_binding,
                region.rect, region.label, region.var_x, region.var_y, mode
            )
        self.state.pc += 1

    def _exec_set_keyboard(self, statement, args):
        """SetKeyboard: replace keyboard bindings."""
        keys = inputevents.build_keys(args)
        for key, _ in keys:
            if not isinstance(key, prog.PhysicalKey):
                error.throw_if(
                    not keycode.is_virtual_key(key), u'%d' % (key,), statement.pos,
                    err_class=error.InvalidKeyError
                )
        self.state.bindings.set_keyboard(keys)
        self._forward(statement.name, args)
        for key, label in keys:
            self._call_host(self._host.register_keyboard_binding, key, label)
        self.state.pc += 1

    def _exec_set_menu(self, statement, args):
        """SetMenu: replace menu bindings."""
        menu = inputevents.build_menu(args)
        self.state.bindings.set_menu(menu)
        self._forward(statement.name, args)
        self._call_host(self._host.register_menu, menu)
        self.state.pc += 1

    def _exec_set_wait_mode(self, statement, args):
        """SetWaitMode: record and forward."""
        self.state.wait_mode = args[0].name
        self._forward(statement.name, args)
        self.state.pc += 1

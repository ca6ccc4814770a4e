"""
PyOriel - api.py
Session API

(c) 2026 The PyOriel Authors
This file is released under the GNU GPL version 3 or later.
"""

import io
import logging

from .base import error
from .host import Host
from .interpreter import Interpreter, MAX_STACK
from .parser import parse


def decode_source(data):
    """Decode program bytes as UTF-8, falling back to Latin-1."""
    if isinstance(data, str):
        return data
    try:
        return data.decode('utf-8')
    except UnicodeDecodeError:
        logging.debug('Program is not valid UTF-8, reading as Latin-1')
        return data.decode('latin-1')


class Session(object):
    """Public API to an Oriel run."""

    def __init__(self, host=None, pedantic=False, max_stack=MAX_STACK, debug=False):
        """Set up session object."""
        self._host = host
        self._pedantic = pedantic
        self._max_stack = max_stack
        self._debug = debug
        self._program = None
        self._interpreter = None

    def __enter__(self):
        """Context guard."""
        return self

    def __exit__(self, ex_type, ex_val, tb):
        """Context guard."""
        self.close()
        # catch host shutdown
        if ex_type is error.Exit:
            return True

    def attach(self, host=None):
        """Attach host to session."""
        self._host = host
        if self._interpreter:
            self._interpreter = None
            self._start()
        return self

    def load(self, source):
        """Parse program source (str or bytes) and prepare to run it."""
        self._program = parse(decode_source(source), pedantic=self._pedantic)
        self._interpreter = None
        self._start()
        return self._program

    def load_file(self, file_name_or_object):
        """Parse a program from a file name or binary stream."""
        if isinstance(file_name_or_object, str):
            with io.open(file_name_or_object, 'rb') as f:
                return self.load(f.read())
        return self.load(file_name_or_object.read())

    def _start(self):
        """Create the interpreter for the loaded program."""
        if self._program is not None and not self._interpreter:
            self._interpreter = Interpreter(
                self._program, self._host or Host(),
                max_stack=self._max_stack, trace=self._debug
            )

    def _require_program(self):
        """Raise if no program has been loaded."""
        if not self._interpreter:
            raise ValueError('No program loaded')

    def run(self):
        """Run until the program suspends or terminates; return the status."""
        self._require_program()
        return self._interpreter.run()

    def step(self):
        """Execute a single statement; return the status."""
        self._require_program()
        return self._interpreter.step()

    def resume(self, event):
        """Deliver an input event to a suspended program; return the status."""
        self._require_program()
        return self._interpreter.resume(event)

    @property
    def program(self):
        """The loaded program."""
        return self._program

    @property
    def status(self):
        """Run state: running, suspended or terminated; None if nothing loaded."""
        if not self._interpreter:
            return None
        return self._interpreter.status

    @property
    def timeout(self):
        """Timeout in ms of the pending wait; None if untimed."""
        self._require_program()
        return self._interpreter.state.timeout

    @property
    def wait_mode(self):
        """Current wait mode token name."""
        self._require_program()
        return self._interpreter.state.wait_mode

    def get_variable(self, name):
        """Get the value of a variable; 0 if never assigned."""
        self._require_program()
        return self._interpreter.variables.get(name)

    def set_variable(self, name, value):
        """Set the value of a variable."""
        self._require_program()
        self._interpreter.variables.set(name, int(value))

    def close(self):
        """Close the session."""
        self._interpreter = None

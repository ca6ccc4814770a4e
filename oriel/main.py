"""
PyOriel - interpreter for the Oriel graphics batch language

(c) 2026 The PyOriel Authors
This file is released under the GNU GPL version 3 or later.
"""

import sys
import logging

from . import config
from .data import NAME, VERSION, COPYRIGHT, read_usage
from .core import Session, OrielError
from .interface import Interface, InitFailed


# exit statuses
EXIT_OK = 0
EXIT_ERROR = 1
EXIT_USAGE = 2


def main(*arguments):
    """Initialise, parse arguments and perform requested operations; return exit status."""
    # get settings and prepare logging
    settings = config.Settings(arguments)
    if settings.version:
        # print version and exit
        _show_version()
    elif settings.help:
        # print usage and exit
        _show_usage()
    else:
        return _run_program(settings)
    return EXIT_OK


def _show_usage():
    """Show usage description."""
    sys.stdout.write(read_usage())

def _show_version():
    """Show version and copyright."""
    sys.stdout.write(u'%s %s\n%s\n' % (NAME, VERSION, COPYRIGHT))


def _run_program(settings):
    """Load and run a program with the selected interface."""
    prog = settings.program
    if not prog:
        sys.stderr.write(u'%s: no program file specified; see oriel -h\n' % (NAME,))
        return EXIT_USAGE
    with Session(**settings.session_params) as session:
        try:
            session.load_file(prog)
        except EnvironmentError as e:
            sys.stderr.write(u'%s: cannot read program: %s\n' % (prog, e))
            return EXIT_USAGE
        except OrielError as e:
            sys.stderr.write(u'%s:%s\n' % (prog, e))
            return EXIT_ERROR
        try:
            interface = Interface(**settings.iface_params)
        except InitFailed as e:
            logging.error(e)
            return EXIT_ERROR
        session.attach(interface.host)
        try:
            status = interface.run(session)
        except OrielError as e:
            sys.stderr.write(u'%s:%s\n' % (prog, e))
            return EXIT_ERROR
        logging.debug('Program %s', status)
    return EXIT_OK

"""
PyOriel - interface.interface
Interface class

(c) 2026 The PyOriel Authors
This file is released under the GNU GPL version 3 or later.
"""

import logging

from ..core.interpreter import SUSPENDED
from .base import InitFailed, host_plugins


class Interface(object):
    """Host and event loop for an Oriel session."""

    def __init__(self, try_interfaces=(), **kwargs):
        """Initialise the first host plugin that works."""
        self._host = None
        for name in try_interfaces:
            try:
                self._host = host_plugins[name](**kwargs)
            except KeyError:
                logging.error('Unknown interface plugin `%s`', name)
            except InitFailed as e:
                logging.info('Could not initialise interface plugin `%s`: %s', name, e)
            if self._host:
                logging.debug('Using interface plugin `%s`', name)
                break
        else:
            # a host is necessary, fail without it
            raise InitFailed('Failed to initialise any interface plugin.')

    @property
    def host(self):
        """The host plugin in use."""
        return self._host

    def run(self, session):
        """Run the session's program, delivering host events while it waits for input."""
        with self._host:
            status = session.run()
            while status == SUSPENDED:
                event = self._host.wait_event()
                logging.debug('Input event %r', event)
                status = session.resume(event)
        return status

"""
PyOriel tests.test_config
unit tests for settings

(c) 2026 The PyOriel Authors
This file is released under the GNU GPL version 3 or later.
"""

import os
import io
import logging

from oriel.config import Settings, MAX_STACK
from tests.unit.utils import TestCase, run_tests


class ConfigTest(TestCase):
    """Unit tests for Settings."""

    tag = u'config'

    def tearDown(self):
        """Don't leave our log handlers behind."""
        root_logger = logging.getLogger()
        for handler in list(root_logger.handlers):
            root_logger.removeHandler(handler)
            handler.close()
        root_logger.setLevel(logging.WARNING)

    def _settings(self, *args, **kwargs):
        """Settings with the user config file in the output directory."""
        return Settings(args, user_config_path=self.output_path(u'ORIEL.INI'), **kwargs)

    def _write_config(self, text):
        """Write the user config file."""
        with io.open(self.output_path(u'ORIEL.INI'), 'w', encoding='utf-8') as f:
            f.write(text)

    def test_defaults(self):
        """Without options, defaults are used."""
        settings = self._settings(u'prog.orl')
        assert settings.program == u'prog.orl'
        assert settings.session_params == {
            'pedantic': False, 'max_stack': MAX_STACK, 'debug': False,
        }, settings.session_params
        iface = settings.iface_params
        assert iface['try_interfaces'] == ('pygame', 'none'), iface
        assert iface['caption'] == u'PyOriel', iface
        assert iface['dimensions'] == [], iface
        assert not settings.help
        assert not settings.version

    def test_default_config_file(self):
        """A commented-out config file is created if there is none."""
        self._settings(u'prog.orl')
        with io.open(self.output_path(u'ORIEL.INI'), encoding='utf_8_sig') as f:
            text = f.read()
        assert u'[oriel]' in text
        assert u'#max-stack=%d' % (MAX_STACK,) in text, text

    def test_no_program(self):
        """Program is empty if not given."""
        settings = self._settings(u'-n')
        assert settings.program == u''

    def test_config_file(self):
        """Options are read from the [oriel] section; the command line overrides them."""
        self._write_config(u'[oriel]\npedantic=True\ncaption=Hello\n  max-stack = 99\n')
        settings = self._settings(u'prog.orl')
        assert settings.session_params['pedantic'] is True
        assert settings.session_params['max_stack'] == 99
        assert settings.iface_params['caption'] == u'Hello'
        settings = self._settings(u'prog.orl', u'--caption=World', u'--pedantic=no')
        assert settings.iface_params['caption'] == u'World'
        assert settings.session_params['pedantic'] is False

    def test_explicit_config_file(self):
        """A config file can be named on the command line."""
        path = self.output_path(u'other.ini')
        with io.open(path, 'w', encoding='utf-8') as f:
            f.write(u'[oriel]\ninterface=none\n')
        settings = self._settings(u'prog.orl', u'--config=%s' % (path,))
        assert settings.iface_params['try_interfaces'] == ('none',)

    def test_presets(self):
        """Presets load a group of options."""
        settings = self._settings(u'prog.orl', u'--preset=strict')
        assert settings.session_params['pedantic'] is True
        settings = self._settings(u'prog.orl', u'--preset=headless')
        assert settings.iface_params['try_interfaces'] == ('none',)
        self._write_config(u'[shallow]\nmax-stack=5\n')
        settings = self._settings(u'prog.orl', u'--preset=shallow')
        assert settings.session_params['max_stack'] == 5

    def test_short_options(self):
        """Short options stand for long ones and may be combined."""
        settings = self._settings(u'-n', u'prog.orl')
        assert settings.program == u'prog.orl'
        assert settings.iface_params['try_interfaces'] == ('none',)
        settings = self._settings(u'-pd', u'prog.orl')
        assert settings.program == u'prog.orl'
        assert settings.session_params['pedantic'] is True
        assert settings.debug
        assert self._settings(u'-h').help
        assert self._settings(u'-v').version

    def test_interface_categories(self):
        """Graphical means pygame; invalid choices are ignored."""
        settings = self._settings(u'prog.orl', u'--interface=graphical')
        assert settings.iface_params['try_interfaces'] == ('pygame',)
        settings = self._settings(u'prog.orl', u'--interface=curses')
        assert settings.iface_params['try_interfaces'] == ('pygame', 'none')

    def test_dimensions(self):
        """Dimensions take two integers."""
        settings = self._settings(u'prog.orl', u'--dimensions=640,480')
        assert settings.iface_params['dimensions'] == [640, 480]
        settings = self._settings(u'prog.orl', u'--dimensions=640')
        assert settings.iface_params['dimensions'] == []

    def test_bad_integer(self):
        """Non-numeric integers fall back to the default; negatives are clipped."""
        settings = self._settings(u'prog.orl', u'--max-stack=lots')
        assert settings.session_params['max_stack'] == MAX_STACK
        settings = self._settings(u'prog.orl', u'--max-stack=-3')
        assert settings.session_params['max_stack'] == 0

    def test_logfile(self):
        """Logs can be sent to a file."""
        path = self.output_path(u'oriel.log')
        self._settings(u'prog.orl', u'--logfile=%s' % (path,))
        logging.info('written to the log')
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert os.path.isfile(path)
        with io.open(path, encoding='utf-8') as f:
            assert u'written to the log' in f.read()


if __name__ == '__main__':
    run_tests()

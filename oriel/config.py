"""
PyOriel - config.py
Configuration file and command-line options parser

(c) 2026 The PyOriel Authors
This file is released under the GNU GPL version 3 or later.
"""

import os
import io
import sys
import logging
import configparser

from .data import VERSION, NAME
from .core.interpreter import MAX_STACK


# user configuration directory
HOME_DIR = os.path.expanduser(u'~')
if sys.platform == 'win32':
    USER_CONFIG_HOME = os.getenv(u'APPDATA', default=u'')
elif sys.platform == 'darwin':
    USER_CONFIG_HOME = os.path.join(HOME_DIR, u'Library', u'Application Support')
else:
    USER_CONFIG_HOME = os.environ.get(u'XDG_CONFIG_HOME') or os.path.join(HOME_DIR, u'.config')

# base directory name
MAJOR_VERSION = u'.'.join(VERSION.split(u'.')[:2])
BASENAME = u'oriel-{0}'.format(MAJOR_VERSION)
USER_CONFIG_DIR = os.path.join(USER_CONFIG_HOME, BASENAME)

# config file name, in the user config directory or the current directory
CONFIG_NAME = u'ORIEL.INI'
USER_CONFIG_PATH = os.path.join(USER_CONFIG_DIR, CONFIG_NAME)

# format for log files
LOGGING_FORMAT = u'[%(asctime)s.%(msecs)04d] %(levelname)s: %(message)s'
LOGGING_FORMATTER = logging.Formatter(fmt=LOGGING_FORMAT, datefmt=u'%H:%M:%S')

# bool strings
TRUES = (u'YES', u'TRUE', u'ON', u'1')
FALSES = (u'NO', u'FALSE', u'OFF', u'0')


##############################################################################
# presets
# --preset=NAME loads the options in section [NAME] of the config file, or below.
# the [oriel] section is always loaded; presets override it.

PRESETS = {
    u'strict': {
        u'pedantic': u'True',
    },
    u'headless': {
        u'interface': u'none',
    },
}

DEFAULT_SECTION = u'oriel'


##############################################################################
# options

# single-letter flags and the long option each stands for
SHORT_ARGS = {
    u'd': (u'debug', u'True'),
    u'h': (u'help', u'True'),
    u'v': (u'version', u'True'),
    u'p': (u'pedantic', u'True'),
    u'n': (u'interface', u'none'),
}

# number of positional arguments
NUM_POSITIONAL = 1

ARGUMENTS = {
    u'interface': {
        u'type': u'string', u'default': u'',
        u'choices': (u'', u'none', u'graphical', u'pygame'),
    },
    u'pedantic': {u'type': u'bool', u'default': False,},
    u'max-stack': {u'type': u'int', u'default': MAX_STACK,},
    u'caption': {u'type': u'string', u'default': NAME,},
    u'dimensions': {u'type': u'int', u'list': 2, u'default': [],},
    u'debug': {u'type': u'bool', u'default': False,},
    u'logfile': {u'type': u'string', u'default': u'',},
    u'config': {u'type': u'string', u'default': u'',},
    u'help': {u'type': u'bool', u'default': False,},
    u'version': {u'type': u'bool', u'default': False,},
}


##########################################################################
# logging

class Lumberjack(object):
    """Logging manager."""

    def __init__(self):
        """Hold log messages in memory until we know where they should go."""
        logging.captureWarnings(True)
        root_logger = logging.getLogger()
        root_logger.setLevel(logging.INFO)
        self._buffer = io.StringIO()
        handler = logging.StreamHandler(self._buffer)
        handler.setFormatter(LOGGING_FORMATTER)
        root_logger.addHandler(handler)

    def reset(self):
        """Detach all handlers from the root logger."""
        root_logger = logging.getLogger()
        for handler in list(root_logger.handlers):
            root_logger.removeHandler(handler)
        return root_logger

    def prepare(self, logfile, debug):
        """Send logs to the log file or to stderr, starting with what was held back."""
        root_logger = self.reset()
        root_logger.setLevel(logging.DEBUG if debug else logging.INFO)
        if logfile:
            stream = io.open(logfile, 'w', encoding='utf_8', errors='replace')
        else:
            stream = sys.stderr
        stream.write(self._buffer.getvalue())
        handler = logging.StreamHandler(stream)
        handler.setFormatter(LOGGING_FORMATTER)
        root_logger.addHandler(handler)


##########################################################################
# default config file

CONFIG_TEMPLATE = u"""\
# PyOriel configuration file.
# Lines starting with # are comments. Remove the # to set an option.
# Options have the same names as on the command line; see oriel -h.

[oriel]
# Options in this section are always loaded (version {version}).
{options}

# Define a preset by adding a section, for example:
# [shallow]
# max-stack=100
# and load it with --preset=shallow.
"""


def _format_default(name):
    """Commented-out default setting for the config file."""
    spec = ARGUMENTS[name]
    lines = []
    if u'choices' in spec:
        lines.append(u'## choices: %s' % u', '.join(spec[u'choices']))
    if u'list' in spec:
        value = u','.join(u'%s' % (_v,) for _v in spec[u'default'])
    else:
        value = u'%s' % (spec[u'default'],)
    lines.append(u'#%s=%s' % (name, value))
    return u'\n'.join(lines)


def _build_default_config_file(file_name):
    """Write a default config file; give up silently if we can't."""
    text = CONFIG_TEMPLATE.format(
        version=VERSION,
        options=u'\n'.join(_format_default(_name) for _name in sorted(ARGUMENTS)),
    )
    try:
        if os.path.dirname(file_name):
            os.makedirs(os.path.dirname(file_name), exist_ok=True)
        with io.open(file_name, 'w', encoding='utf_8_sig') as f:
            f.write(text)
    except EnvironmentError as e:
        logging.debug('Could not create config file %s: %s', file_name, e)


##############################################################################
# settings container

class Settings(object):
    """Read and retrieve command-line settings and options."""

    def __init__(self, arguments, user_config_path=USER_CONFIG_PATH):
        """Initialise settings."""
        uargv = list(arguments) if arguments else sys.argv[1:]
        lumberjack = Lumberjack()
        try:
            if user_config_path and not os.path.exists(user_config_path):
                _build_default_config_file(user_config_path)
            self._options = ArgumentParser(user_config_path).retrieve_options(uargv)
        except BaseException:
            # don't swallow messages logged so far
            lumberjack.prepare(u'', False)
            raise
        lumberjack.prepare(self.get('logfile'), self.get('debug'))

    def get(self, name, get_default=True):
        """Value of an option; unset or empty options give the default, or None."""
        value = self._options.get(name)
        if value not in (None, u'', []):
            return value
        if not get_default:
            return None
        if name in ARGUMENTS:
            return ARGUMENTS[name][u'default']
        if name in range(NUM_POSITIONAL):
            return u''
        raise KeyError(name)

    @property
    def session_params(self):
        """Keyword arguments for Session."""
        return {
            'pedantic': self.get('pedantic'),
            'max_stack': max(0, self.get('max-stack')),
            'debug': self.get('debug'),
        }

    @property
    def iface_params(self):
        """Keyword arguments for Interface."""
        interface = self.get('interface')
        if interface == 'graphical':
            try_interfaces = ('pygame',)
        elif interface:
            try_interfaces = (interface,)
        else:
            # graphical if we can, headless if we must
            try_interfaces = ('pygame', 'none')
        return {
            'try_interfaces': try_interfaces,
            'caption': self.get('caption'),
            'dimensions': self.get('dimensions'),
        }

    @property
    def program(self):
        """Program file name."""
        return self.get(0)

    @property
    def version(self):
        """Version operating mode."""
        return self.get('version')

    @property
    def help(self):
        """Help operating mode."""
        return self.get('help')

    @property
    def debug(self):
        """Debugging mode."""
        return self.get('debug')


##############################################################################
# argument parsing

class ArgumentParser(object):
    """Parse PyOriel config files and command-line arguments."""

    def __init__(self, user_config_path=USER_CONFIG_PATH):
        """Initialise parser."""
        self._user_config_path = user_config_path

    def retrieve_options(self, uargv):
        """Combine config file sections, presets and command line into typed options."""
        cmdline = self._read_command_line(uargv)
        sections = self._read_sections(cmdline.pop(u'config', None))
        # [oriel] first, then presets, then command line
        options = self._expand_section(sections, DEFAULT_SECTION, required=False)
        preset = cmdline.pop(u'preset', u'')
        for name in self._split(preset):
            options.update(self._expand_section(sections, name))
        options.pop(u'preset', None)
        for key, value in list(options.items()):
            if key not in ARGUMENTS:
                logging.warning('Ignored unrecognised option `%s=%s` in configuration file', key, value)
                del options[key]
        options.update(cmdline)
        return {_key: self._convert(_key, _value) for _key, _value in options.items()}

    def _read_command_line(self, uargv):
        """Split command-line arguments into a dict of option strings and numbered positionals."""
        args = {}
        position = 0
        options_ended = False
        for arg in uargv:
            if options_ended or not arg.startswith(u'-') or arg == u'-':
                if position >= NUM_POSITIONAL:
                    logging.warning('Ignored surplus positional command-line argument `%s`', arg)
                else:
                    args[position] = self._unquote(arg)
                position += 1
            elif arg == u'--':
                options_ended = True
            elif arg.startswith(u'--'):
                key, _, value = arg[2:].partition(u'=')
                if key in ARGUMENTS or key == u'preset':
                    args[key] = value
                else:
                    logging.warning('Ignored unrecognised command-line argument `%s`', arg)
            else:
                for letter in arg[1:]:
                    try:
                        key, value = SHORT_ARGS[letter]
                    except KeyError:
                        logging.warning('Ignored unrecognised option `-%s`', letter)
                    else:
                        args[key] = value
        return args

    def _unquote(self, arg):
        """Strip a pair of enclosing quotes."""
        for quote in u'"\'':
            if len(arg) > 1 and arg[0] == quote and arg[-1] == quote:
                return arg[1:-1]
        return arg

    def _read_sections(self, config_file):
        """Built-in presets, overridden by user config file, overridden by local config file."""
        sections = {_name: dict(_options) for _name, _options in PRESETS.items()}
        if self._user_config_path:
            sections.update(self._read_config_file(self._user_config_path))
        if not config_file and os.path.exists(CONFIG_NAME):
            config_file = CONFIG_NAME
        if config_file:
            sections.update(self._read_config_file(config_file))
        return sections

    def _read_config_file(self, config_file):
        """Read a config file into a dict of sections."""
        config = configparser.RawConfigParser(allow_no_value=True)
        try:
            # utf_8_sig skips a BOM
            with io.open(config_file, 'r', encoding='utf_8_sig', errors='replace') as f:
                config.read_file(WhitespaceStripper(f))
        except (configparser.Error, EnvironmentError) as e:
            logging.warning('Configuration file `%s` not loaded: %s', config_file, e)
            return {}
        return {_name: dict(config.items(_name)) for _name in config.sections()}

    def _expand_section(self, sections, name, required=True, seen=()):
        """Options in a section, with any presets it names loaded underneath."""
        if name in seen:
            logging.warning('Ignored recursive preset `%s`', name)
            return {}
        try:
            section = sections[name]
        except KeyError:
            if required:
                logging.warning('Ignored undefined preset `%s`', name)
            return {}
        options = {}
        for nested in self._split(section.get(u'preset')):
            options.update(self._expand_section(sections, nested, seen=seen + (name,)))
        options.update(section)
        return options

    def _split(self, value):
        """Split a comma-separated string into its non-empty items."""
        return [_item.strip() for _item in (value or u'').split(u',') if _item.strip()]

    ##########################################################################
    # type conversions

    def _convert(self, name, value):
        """Convert an option string to its declared type."""
        if not isinstance(name, str):
            return value
        spec = ARGUMENTS[name]
        if u'list' not in spec:
            return self._convert_item(name, value)
        items = [self._convert_item(name, _item) for _item in self._split(value)]
        items = [_item for _item in items if _item is not None]
        if items and len(items) != spec[u'list']:
            logging.warning(
                'Option `%s=%s` ignored: should have %d elements', name, value, spec[u'list']
            )
            return []
        return items

    def _convert_item(self, name, value):
        """Convert a single value to the option's type and check its choices."""
        spec = ARGUMENTS[name]
        value = value or u''
        if spec[u'type'] == u'bool':
            return self._to_bool(name, value)
        if spec[u'type'] == u'int':
            return self._to_int(name, value)
        if u'choices' in spec:
            value = value.lower()
            if value not in spec[u'choices']:
                logging.warning(
                    'Option `%s=%s` ignored; should be one of `%s`',
                    name, value, u'`, `'.join(_c for _c in spec[u'choices'] if _c)
                )
                return u''
        return value

    def _to_bool(self, name, value):
        """Convert to bool; an option given without a value is True."""
        if not value or value.upper() in TRUES:
            return True
        if value.upper() in FALSES:
            return False
        logging.warning('Boolean option `%s=%s` interpreted as `%s=True`', name, value, name)
        return True

    def _to_int(self, name, value):
        """Convert to int; None if not a number."""
        try:
            return int(value)
        except ValueError:
            if value:
                logging.warning('Option `%s=%s` ignored: value should be an integer', name, value)
            return None


##############################################################################
# utilities

class WhitespaceStripper(object):
    """File wrapper for ConfigParser that strips leading whitespace."""

    def __init__(self, file):
        """Initialise to file object."""
        self._file = file

    def readline(self):
        """Read a line and strip whitespace (but not EOL)."""
        return self._file.readline().lstrip(u' \t')

    def __next__(self):
        """Make iterable."""
        line = self.readline()
        if not line:
            raise StopIteration()
        return line

    def __iter__(self):
        """We are iterable."""
        return self

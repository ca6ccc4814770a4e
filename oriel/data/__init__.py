"""
PyOriel - application data package
Metadata and usage text

(c) 2026 The PyOriel Authors
This file is released under the GNU GPL version 3 or later.
"""

import json as _json
from importlib import resources as _resources

# copyright metadata
_METADATA = _json.loads(_resources.files(__package__).joinpath('meta.json').read_bytes())
NAME, VERSION, AUTHOR, COPYRIGHT = (_METADATA[_key] for _key in (
    'name', 'version', 'author', 'copyright'
))


def read_usage():
    """Retrieve the usage text."""
    return _resources.files(__package__).joinpath('USAGE.txt').read_text(
        encoding='utf-8', errors='replace'
    )

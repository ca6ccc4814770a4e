"""
PyOriel - variables.py
Integer variable store

(c) 2026 The PyOriel Authors
This file is released under the GNU GPL version 3 or later.
"""


class Variables(object):
    """Global integer variables, with case-insensitive names."""

    def __init__(self):
        """Initialise variables."""
        self.clear()

    def clear(self):
        """Clear all variables."""
        self._variables = {}

    def set(self, name, value):
        """Assign a value to a variable."""
        self._variables[name.upper()] = value

    def get(self, name):
        """Retrieve the value of a variable; 0 if never assigned."""
        return self._variables.get(name.upper(), 0)

    def __getitem__(self, name):
        """Retrieve the value of a variable."""
        return self.get(name)

    def __contains__(self, name):
        """Variable has been assigned."""
        return name.upper() in self._variables

    def __len__(self):
        """Number of assigned variables."""
        return len(self._variables)

    def to_dict(self):
        """Copy of all assigned variables, by upper-case name."""
        return dict(self._variables)

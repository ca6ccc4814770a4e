"""
PyOriel - inputevents.py
Mouse, keyboard and menu bindings

(c) 2026 The PyOriel Authors
This file is released under the GNU GPL version 3 or later.
"""

from collections import namedtuple

from .base import tokens as tk
from .program import LabelRef, PhysicalKey, Token


###############################################################################
# binding records

class MouseRegion(namedtuple('MouseRegion', ['x1', 'y1', 'x2', 'y2', 'label', 'var_x', 'var_y'])):
    """Clickable rectangle with its target label and coordinate variables."""

    __slots__ = ()

    @property
    def rect(self):
        """Corners as (x1, y1, x2, y2)."""
        return self.x1, self.y1, self.x2, self.y2

    def contains(self, x, y):
        """Point lies within the region, bounds included; corners may be in any order."""
        return (
            min(self.x1, self.x2) <= x <= max(self.x1, self.x2)
            and min(self.y1, self.y2) <= y <= max(self.y1, self.y2)
        )


# item_id numbers named items in definition order, from 1; label is None for IGNORE
MenuItem = namedtuple('MenuItem', ['item_id', 'name', 'label'])
# members are MenuItem or SEPARATOR
Popup = namedtuple('Popup', ['item', 'members'])
SEPARATOR = None


def build_mouse_regions(args):
    """Build mouse regions from resolved SetMouse arguments."""
    regions = []
    for i in range(0, len(args), 7):
        x1, y1, x2, y2, label, var_x, var_y = args[i:i+7]
        regions.append(MouseRegion(x1, y1, x2, y2, label.name, var_x.name, var_y.name))
    return regions


def build_keys(args):
    """Build (key, label) pairs from resolved SetKeyboard arguments."""
    return [(args[i], args[i+1].name) for i in range(0, len(args), 2)]


def build_menu(args):
    """Build the popup tree from checked SetMenu arguments."""
    menu = []
    item_id = 0
    args = list(args)

    def _item(name, target):
        return MenuItem(item_id, name, target.name if isinstance(target, LabelRef) else None)

    while args:
        item_id += 1
        header = _item(args.pop(0), args.pop(0))
        members = []
        while True:
            arg = args.pop(0)
            if isinstance(arg, Token) and arg.name == tk.ENDPOPUP:
                break
            elif isinstance(arg, Token) and arg.name == tk.SEPARATOR:
                members.append(SEPARATOR)
            else:
                item_id += 1
                members.append(_item(arg, args.pop(0)))
        menu.append(Popup(header, members))
    return menu


###############################################################################
# binding store

class InputBindings(object):
    """Pending input bindings; each class is replaced as a whole by its binding command."""

    def __init__(self):
        """Initialise bindings."""
        self.mouse = []
        self.keyboard = {}
        self.menu = []
        self._menu_labels = {}

    def set_mouse(self, regions):
        """Replace mouse bindings."""
        self.mouse = list(regions)

    def set_keyboard(self, keys):
        """Replace keyboard bindings; keys is a sequence of (key, label)."""
        self.keyboard = dict(keys)

    def set_menu(self, menu):
        """Replace menu bindings."""
        self.menu = list(menu)
        self._menu_labels = {}
        for popup in self.menu:
            for item in [popup.item] + popup.members:
                if item is not SEPARATOR and item.label is not None:
                    self._menu_labels[item.item_id] = item.label

    def match_mouse(self, x, y):
        """Most recently registered region containing the point, or None."""
        for region in reversed(self.mouse):
            if region.contains(x, y):
                return region
        return None

    def match_key(self, virtual_key, char, ctrl):
        """Label bound to a key press, or None."""
        if virtual_key is not None and virtual_key in self.keyboard:
            return self.keyboard[virtual_key]
        if char:
            return self.keyboard.get(PhysicalKey(char, bool(ctrl)))
        return None

    def match_menu(self, item_id):
        """Label bound to a menu item, or None."""
        return self._menu_labels.get(item_id)

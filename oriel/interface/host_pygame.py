"""
PyOriel - interface.host_pygame
Graphical host based on PyGame

(c) 2026 The PyOriel Authors
This file is released under the GNU GPL version 3 or later.
"""

import os
import math
import array
import logging

if False:
    # for detection by packagers
    import pygame

from ..core.base import error
from ..core.base import signals
from ..core.base import keycode
from ..core.inputevents import SEPARATOR
from .host import HostPlugin, MESSAGEBOX_BUTTONS, default_button
from .base import host_plugins, InitFailed
from . import geometry


# window size in pixels if not specified
DEFAULT_DIMENSIONS = (800, 600)
# text height in pixels if UseFont does not set one
DEFAULT_TEXT_SIZE = 18

# menu bar and popup layout
MENU_HEIGHT = 22
MENU_PADDING = 10
MENU_ITEM_HEIGHT = 22
MENU_SEPARATOR_HEIGHT = 8
MENU_TEXT_SIZE = 18

# message box layout
DIALOG_TEXT_SIZE = 20
DIALOG_PADDING = 16
BUTTON_WIDTH = 80
BUTTON_HEIGHT = 26

# glyph shown for each message box icon
ICON_MARKS = {
    u'INFORMATION': u'i',
    u'EXCLAMATION': u'!',
    u'QUESTION': u'?',
    u'STOP': u'X',
    u'NOICON': u'',
}

# colours of window furniture
WHITE = (0xff, 0xff, 0xff)
BLACK = (0, 0, 0)
FACE = (0xd4, 0xd0, 0xc8)
SHADOW = (0x80, 0x80, 0x80)
TITLE = (0, 0, 0x80)

# side of the square tile hatched brushes repeat
PATTERN_SIZE = 8
_LAST = PATTERN_SIZE - 1
PATTERN_LINES = {
    u'DIAGONALUP': (((0, _LAST), (_LAST, 0)),),
    u'DIAGONALDOWN': (((0, 0), (_LAST, _LAST)),),
    u'DIAGONALCROSS': (((0, _LAST), (_LAST, 0)), ((0, 0), (_LAST, _LAST))),
    u'HORIZONTAL': (((0, 0), (_LAST, 0)),),
    u'VERTICAL': (((0, 0), (0, _LAST)),),
    u'CROSS': (((0, 0), (_LAST, 0)), ((0, 0), (0, _LAST))),
}

# beep tone
MIXER_RATE = 22050
BEEP_FREQUENCY = 800
BEEP_DURATION = 250
BEEP_AMPLITUDE = 8000

# ms between checks for window focus in FOCUS wait mode
FOCUS_POLL = 100


def square_wave(rate, channels, frequency=BEEP_FREQUENCY, duration=BEEP_DURATION):
    """Signed 16-bit samples of a square wave tone."""
    half_period = rate / float(frequency) / 2.
    count = rate * duration // 1000
    samples = array.array('h', (
        BEEP_AMPLITUDE if int(_i / half_period) % 2 == 0 else -BEEP_AMPLITUDE
        for _i in range(count)
        for _ in range(channels)
    ))
    return samples.tobytes()


def _colour(r, g, b):
    """Clip a colour to the 0--255 range."""
    return tuple(min(255, max(0, _c)) for _c in (r, g, b))


@host_plugins.register('pygame')
class HostPygame(HostPlugin):
    """Pygame-based graphical host."""

    def __init__(self, caption=u'', dimensions=None, **kwargs):
        """Initialise pygame host."""
        try:
            _import_pygame()
        except ImportError:
            raise InitFailed('Module `pygame` not found')
        HostPlugin.__init__(self)
        pygame.init()
        try:
            # poll the driver to force an exception if not initialised
            pygame.display.get_driver()
        except pygame.error as e:
            self._close_pygame()
            raise InitFailed('No suitable display driver: %s' % e)
        self.caption = caption
        self._size = tuple(dimensions) if dimensions else DEFAULT_DIMENSIONS
        self._restore_size = self._size
        # drawing state
        self._pen_style, self._pen_width, self._pen_colour = u'SOLID', 1, BLACK
        self._brush_style, self._brush_colour = u'NULL', BLACK
        self._opaque, self._background = True, WHITE
        self._font_name, self._font_width, self._font_height = u'', 0, 0
        self._bold, self._italic, self._underline = False, False, False
        self._text_colour = BLACK
        self._font = None
        self._scale = geometry.program_scale(u'METRIC')
        # index of the popup menu that is open, if any
        self._open_popup = None
        self._canvas = pygame.Surface(self._size)
        self._canvas.fill(self._background)
        try:
            self._set_display()
        except pygame.error as e:
            self._close_pygame()
            raise InitFailed('Could not initialise display: %s' % e)
        pygame.display.set_caption(self.caption)
        pygame.key.set_repeat(500, 24)

    def __exit__(self, type, value, traceback):
        """Close the pygame host."""
        HostPlugin.__exit__(self, type, value, traceback)
        self._close_pygame()

    def _close_pygame(self):
        """Close pygame modules and displays."""
        if pygame:
            pygame.display.quit()
            pygame.quit()

    ###########################################################################
    # display

    def _menu_height(self):
        """Height of the menu bar; zero if there is no menu."""
        return MENU_HEIGHT if self.menu else 0

    def _set_display(self):
        """Set the window size to fit canvas and menu bar."""
        width, height = self._size
        self._display = pygame.display.set_mode(
            (width, height + self._menu_height()), pygame.RESIZABLE
        )

    def _resize(self, size):
        """Resize the canvas, keeping what has been drawn."""
        self._size = tuple(size)
        canvas = pygame.Surface(self._size)
        canvas.fill(self._background)
        canvas.blit(self._canvas, (0, 0))
        self._canvas = canvas
        self._set_display()

    def _refresh(self):
        """Draw canvas and menus to the window."""
        self._display.fill(FACE)
        self._display.blit(self._canvas, (0, self._menu_height()))
        if self.menu:
            self._draw_menu_bar()
        if self._open_popup is not None:
            self._draw_popup(self._open_popup)
        pygame.display.flip()

    def _point(self, x, y):
        """Convert program coordinates to canvas pixels."""
        return x * self._scale, y * self._scale

    def _points(self, *coords):
        """Convert a flat sequence of program coordinates to canvas pixels."""
        return [self._point(_x, _y) for _x, _y in zip(coords[::2], coords[1::2])]

    ###########################################################################
    # painting

    def _pattern_tile(self):
        """Tile of a hatched brush, over the background if opaque."""
        tile = pygame.Surface((PATTERN_SIZE, PATTERN_SIZE), pygame.SRCALPHA)
        if self._opaque:
            tile.fill(self._background + (255,))
        else:
            tile.fill((0, 0, 0, 0))
        for start, end in PATTERN_LINES[self._brush_style]:
            pygame.draw.line(tile, self._brush_colour, start, end)
        return tile

    def _brush_surface(self, size):
        """Surface of the given size covered with the current brush; None for a null brush."""
        if self._brush_style == u'NULL':
            return None
        surface = pygame.Surface(size, pygame.SRCALPHA)
        if self._brush_style == u'SOLID':
            surface.fill(self._brush_colour + (255,))
            return surface
        tile = self._pattern_tile()
        for x in range(0, size[0], PATTERN_SIZE):
            for y in range(0, size[1], PATTERN_SIZE):
                surface.blit(tile, (x, y))
        return surface

    def _paint_through(self, stencil, offset):
        """Paint the brush onto the canvas where the stencil is opaque white."""
        fill = self._brush_surface(stencil.get_size())
        if fill is None:
            return
        fill.blit(stencil, (0, 0), special_flags=pygame.BLEND_RGBA_MULT)
        self._canvas.blit(fill, offset)

    def _fill(self, points):
        """Fill a polygon with the brush."""
        if self._brush_style == u'NULL' or len(points) < 3:
            return
        left = int(math.floor(min(_x for _x, _ in points)))
        top = int(math.floor(min(_y for _, _y in points)))
        right = int(math.ceil(max(_x for _x, _ in points)))
        bottom = int(math.ceil(max(_y for _, _y in points)))
        stencil = pygame.Surface((right - left + 1, bottom - top + 1), pygame.SRCALPHA)
        stencil.fill((0, 0, 0, 0))
        pygame.draw.polygon(
            stencil, WHITE + (255,), [(_x - left, _y - top) for _x, _y in points]
        )
        self._paint_through(stencil, (left, top))

    def _stroke(self, points):
        """Draw a polyline with the background, then with the pen."""
        if len(points) < 2:
            return
        width = max(1, self._pen_width)
        if self._opaque:
            pygame.draw.lines(self._canvas, self._background, False, points, width)
        if self._pen_style == u'NULL':
            return
        for segment in geometry.dash_segments(points, geometry.PEN_DASHES[self._pen_style]):
            if len(segment) > 1:
                pygame.draw.lines(self._canvas, self._pen_colour, False, segment, width)

    def _shape(self, points):
        """Fill and outline a closed shape."""
        self._fill(points)
        self._stroke(points)

    def _get_font(self):
        """Font for the current text settings."""
        if not self._font:
            height = DEFAULT_TEXT_SIZE
            if self._font_height:
                height = max(1, int(self._font_height * self._scale))
            self._font = pygame.font.SysFont(
                self._font_name or None, height, bold=self._bold, italic=self._italic
            )
            self._font.set_underline(self._underline)
        return self._font

    ###########################################################################
    # drawing commands

    def draw_arc(self, x1, y1, x2, y2, x3, y3, x4, y4):
        """Draw an elliptic arc inside a bounding rectangle."""
        _, points = geometry.bounded_arc(*self._scaled(x1, y1, x2, y2, x3, y3, x4, y4))
        self._stroke(points)

    def draw_chord(self, x1, y1, x2, y2, x3, y3, x4, y4):
        """Draw a filled arc closed by a straight line."""
        _, points = geometry.bounded_arc(*self._scaled(x1, y1, x2, y2, x3, y3, x4, y4))
        self._shape(points + [points[0]])

    def draw_pie(self, x1, y1, x2, y2, x3, y3, x4, y4):
        """Draw a filled arc closed through the centre."""
        centre, points = geometry.bounded_arc(*self._scaled(x1, y1, x2, y2, x3, y3, x4, y4))
        self._shape(points + [centre, points[0]])

    def draw_ellipse(self, x1, y1, x2, y2):
        """Draw a filled ellipse."""
        self._shape(geometry.ellipse_points(*self._scaled(x1, y1, x2, y2)))

    def draw_line(self, x1, y1, x2, y2):
        """Draw a line."""
        self._stroke(self._points(x1, y1, x2, y2))

    def draw_rectangle(self, x1, y1, x2, y2):
        """Draw a filled rectangle."""
        self._shape(geometry.rectangle_points(*self._scaled(x1, y1, x2, y2)))

    def draw_round_rectangle(self, x1, y1, x2, y2, width, height):
        """Draw a filled rectangle with rounded corners."""
        self._shape(geometry.round_rectangle_points(
            *self._scaled(x1, y1, x2, y2, width, height)
        ))

    def _scaled(self, *values):
        """Scale program units to pixels."""
        return tuple(_v * self._scale for _v in values)

    def draw_background(self):
        """Clear the canvas to the background colour."""
        self._canvas.fill(self._background)

    def draw_flood(self, x, y, r, g, b):
        """Fill the area around a point, bounded by the given colour, with the brush."""
        x, y = (int(_c) for _c in self._point(x, y))
        width, height = self._size
        if not (0 <= x < width and 0 <= y < height):
            return
        area = pygame.mask.from_threshold(self._canvas, _colour(r, g, b), (1, 1, 1, 255))
        area.invert()
        if not area.get_at((x, y)):
            return
        region = area.connected_component((x, y))
        stencil = region.to_surface(setcolor=WHITE + (255,), unsetcolor=(0, 0, 0, 0))
        self._paint_through(stencil, (0, 0))

    def draw_bitmap(self, x, y, file_name):
        """Draw an image file at its natural size."""
        image = pygame.image.load(file_name)
        self._canvas.blit(image, self._point(x, y))

    def draw_sized_bitmap(self, x1, y1, x2, y2, file_name):
        """Draw an image file stretched to a rectangle, mirrored if the corners are swapped."""
        (x1, y1), (x2, y2) = self._points(x1, y1, x2, y2)
        size = int(abs(x2 - x1)), int(abs(y2 - y1))
        if not size[0] or not size[1]:
            return
        image = pygame.transform.scale(pygame.image.load(file_name), size)
        image = pygame.transform.flip(image, x2 < x1, y2 < y1)
        self._canvas.blit(image, (min(x1, x2), min(y1, y2)))

    def draw_text(self, x, y, text):
        """Draw text with its top left corner at a point."""
        font = self._get_font()
        background = self._background if self._opaque else None
        if self._font_width:
            advance = max(1, int(self._font_width * self._scale))
            surface = pygame.Surface(
                (advance * len(text), font.get_linesize()), pygame.SRCALPHA
            )
            surface.fill(background + (255,) if background else (0, 0, 0, 0))
            for i, char in enumerate(text):
                surface.blit(font.render(char, True, self._text_colour), (i * advance, 0))
        else:
            surface = font.render(text, True, self._text_colour, background)
        self._canvas.blit(surface, self._point(x, y))

    ###########################################################################
    # drawing state

    def use_background(self, option, r, g, b):
        """Set background transparency and colour."""
        self._opaque = option == u'OPAQUE'
        self._background = _colour(r, g, b)

    def use_brush(self, option, r, g, b):
        """Set fill pattern and colour."""
        self._brush_style = option
        self._brush_colour = _colour(r, g, b)

    def use_pen(self, option, width, r, g, b):
        """Set line style, width and colour."""
        self._pen_style = option
        self._pen_width = max(0, width)
        self._pen_colour = _colour(r, g, b)

    def use_font(self, name, width, height, bold, italic, underline, r, g, b):
        """Set text font and colour."""
        self._font_name = name
        self._font_width, self._font_height = max(0, width), max(0, height)
        self._bold = bold == u'BOLD'
        self._italic = italic == u'ITALIC'
        self._underline = underline == u'UNDERLINE'
        self._text_colour = _colour(r, g, b)
        self._font = None

    def use_coordinates(self, option):
        """Set pixel or metric coordinates."""
        self._scale = geometry.program_scale(option)
        self._font = None

    def use_caption(self, text):
        """Set the window title."""
        self.caption = text
        pygame.display.set_caption(text)

    def set_window(self, option):
        """Maximise, minimise or restore the window."""
        if option == u'MINIMIZE':
            pygame.display.iconify()
        elif option == u'MAXIMIZE':
            width, height = pygame.display.get_desktop_sizes()[0]
            self._resize((width, height - self._menu_height()))
        else:
            self._resize(self._restore_size)

    ###########################################################################
    # other commands

    def beep(self):
        """Play a short tone."""
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init(frequency=MIXER_RATE, size=-16, channels=1)
        except pygame.error as e:
            logging.warning('Could not initialise sound: %s', e)
            return
        rate, _, channels = pygame.mixer.get_init()
        pygame.mixer.Sound(buffer=square_wave(rate, channels)).play()

    def message_box(self, box_type, default, icon, text, caption):
        """Show a modal message box in the window; return the number of the button pressed."""
        chosen = default_button(box_type, default)
        font = pygame.font.SysFont(None, DIALOG_TEXT_SIZE)
        mark = ICON_MARKS[icon]
        message = u'%s  %s' % (mark, text) if mark else text
        buttons = MESSAGEBOX_BUTTONS[box_type]
        buttons_width = len(buttons) * (BUTTON_WIDTH + DIALOG_PADDING) - DIALOG_PADDING
        line = font.get_linesize()
        width = max(font.size(message)[0], font.size(caption)[0], buttons_width)
        width += 2 * DIALOG_PADDING
        height = line + 3 * DIALOG_PADDING + line + BUTTON_HEIGHT
        frame = pygame.Rect(0, 0, width, height)
        frame.center = self._display.get_rect().center
        self._refresh()
        pygame.draw.rect(self._display, FACE, frame)
        pygame.draw.rect(self._display, SHADOW, frame, 1)
        title = pygame.Rect(frame.left, frame.top, width, line + 4)
        pygame.draw.rect(self._display, TITLE, title)
        self._display.blit(font.render(caption, True, WHITE), (title.left + 4, title.top + 2))
        self._display.blit(
            font.render(message, True, BLACK),
            (frame.left + DIALOG_PADDING, title.bottom + DIALOG_PADDING)
        )
        rects = []
        left = frame.centerx - buttons_width // 2
        for number, label in enumerate(buttons, 1):
            rect = pygame.Rect(
                left, frame.bottom - DIALOG_PADDING - BUTTON_HEIGHT, BUTTON_WIDTH, BUTTON_HEIGHT
            )
            pygame.draw.rect(self._display, WHITE, rect)
            pygame.draw.rect(self._display, BLACK, rect, 2 if number == chosen else 1)
            glyphs = font.render(label, True, BLACK)
            self._display.blit(glyphs, glyphs.get_rect(center=rect.center))
            rects.append(rect)
            left += BUTTON_WIDTH + DIALOG_PADDING
        pygame.display.flip()
        result = None
        while result is None:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                # closing the window dismisses the box; pass the quit on to the wait loop
                pygame.event.post(event)
                result = chosen
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                for number, rect in enumerate(rects, 1):
                    if rect.collidepoint(event.pos):
                        result = number
            elif event.type == pygame.KEYDOWN:
                if event.key in (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_SPACE, pygame.K_ESCAPE):
                    result = chosen
        self._refresh()
        return result

    ###########################################################################
    # menu

    def register_menu(self, menu):
        """Record the menu bar and make room for it."""
        had_menu = bool(self.menu)
        HostPlugin.register_menu(self, menu)
        self._open_popup = None
        if had_menu != bool(self.menu):
            self._set_display()

    def _menu_font(self):
        """Font for menu text."""
        return pygame.font.SysFont(None, MENU_TEXT_SIZE)

    def _header_rects(self):
        """Rectangles of the menu bar headers."""
        font = self._menu_font()
        rects, left = [], 0
        for popup in self.menu:
            width = font.size(popup.item.name)[0] + 2 * MENU_PADDING
            rects.append(pygame.Rect(left, 0, width, MENU_HEIGHT))
            left += width
        return rects

    def _member_rects(self, index):
        """Rectangles of the members of a popup menu, below its header."""
        font = self._menu_font()
        header = self._header_rects()[index]
        members = self.menu[index].members
        width = max(
            [header.width] + [
                font.size(_item.name)[0] + 2 * MENU_PADDING
                for _item in members if _item is not SEPARATOR
            ]
        )
        rects, top = [], header.bottom
        for item in members:
            height = MENU_SEPARATOR_HEIGHT if item is SEPARATOR else MENU_ITEM_HEIGHT
            rects.append(pygame.Rect(header.left, top, width, height))
            top += height
        return rects

    def _draw_menu_bar(self):
        """Draw the menu bar headers."""
        font = self._menu_font()
        for popup, rect in zip(self.menu, self._header_rects()):
            self._display.blit(
                font.render(popup.item.name, True, BLACK), (rect.left + MENU_PADDING, rect.top + 3)
            )
        pygame.draw.line(
            self._display, SHADOW, (0, MENU_HEIGHT - 1), (self._display.get_width(), MENU_HEIGHT - 1)
        )

    def _draw_popup(self, index):
        """Draw an open popup menu."""
        font = self._menu_font()
        rects = self._member_rects(index)
        if not rects:
            return
        outline = rects[0].unionall(rects[1:])
        pygame.draw.rect(self._display, FACE, outline)
        pygame.draw.rect(self._display, SHADOW, outline, 1)
        for item, rect in zip(self.menu[index].members, rects):
            if item is SEPARATOR:
                pygame.draw.line(
                    self._display, SHADOW, (rect.left + 2, rect.centery), (rect.right - 3, rect.centery)
                )
            else:
                colour = BLACK if item.label is not None else SHADOW
                self._display.blit(
                    font.render(item.name, True, colour), (rect.left + MENU_PADDING, rect.top + 3)
                )

    def _menu_click(self, x, y):
        """Handle a click while a popup is open or on the menu bar; return a selection event or None."""
        if self._open_popup is not None:
            index, self._open_popup = self._open_popup, None
            for item, rect in zip(self.menu[index].members, self._member_rects(index)):
                if item is not SEPARATOR and rect.collidepoint(x, y):
                    self._refresh()
                    return signals.Event(signals.MENU_SELECT, (item.item_id,))
        for index, rect in enumerate(self._header_rects()):
            if rect.collidepoint(x, y):
                popup = self.menu[index]
                if not popup.members:
                    return signals.Event(signals.MENU_SELECT, (popup.item.item_id,))
                self._open_popup = index
        self._refresh()
        return None

    ###########################################################################
    # input

    def wait_event(self):
        """Block until an input event is available and return it."""
        self._refresh()
        self._reap()
        while True:
            remaining = self.remaining()
            if remaining is not None and self.wait_mode == u'FOCUS':
                # timed waits in focus mode only hold while the window is inactive
                if pygame.key.get_focused():
                    return signals.Event(signals.TIMEOUT)
                event = pygame.event.wait(FOCUS_POLL)
            elif remaining is None:
                event = pygame.event.wait()
            elif remaining <= 0:
                return signals.Event(signals.TIMEOUT)
            else:
                event = pygame.event.wait(remaining)
            signal = self._translate(event)
            if signal is not None:
                return signal

    def check_events(self):
        """Stop the run if the window has been closed."""
        if pygame.event.peek(pygame.QUIT):
            raise error.Exit()

    def _translate(self, event):
        """Convert a pygame event to an input event, or None."""
        if event.type == pygame.QUIT:
            return signals.Event(signals.QUIT)
        elif event.type == pygame.MOUSEBUTTONDOWN:
            return self._translate_click(event)
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE and self._open_popup is not None:
                self._open_popup = None
                self._refresh()
                return None
            return self._translate_key(event)
        elif event.type == pygame.VIDEORESIZE:
            self._resize((event.w, max(1, event.h - self._menu_height())))
            self._refresh()
        elif event.type in (pygame.VIDEOEXPOSE, pygame.WINDOWEXPOSED):
            self._refresh()
        return None

    def _translate_click(self, event):
        """Convert a mouse click to program coordinates, or handle it in the menu."""
        x, y = event.pos
        menu_height = self._menu_height()
        if self._open_popup is not None or y < menu_height:
            return self._menu_click(x, y)
        # ignore the scroll wheel
        if event.button not in (1, 2, 3):
            return None
        return signals.Event(signals.MOUSE_CLICK, (
            int(x / self._scale), int((y - menu_height) / self._scale), event.button
        ))

    def _translate_key(self, event):
        """Convert a key press to virtual-key code, character and Ctrl state."""
        ctrl = bool(event.mod & pygame.KMOD_CTRL)
        char = event.unicode if event.unicode and u'!' <= event.unicode <= u'~' else None
        if char is None and ctrl and ord(u'!') <= event.key <= ord(u'~'):
            # with Ctrl down, pygame reports a control character
            char = chr(event.key)
        virtual_key = KEY_TO_VK.get(event.key)
        if virtual_key is None and char is None:
            return None
        return signals.Event(signals.KEY_DOWN, (virtual_key, char, ctrl))


pygame = None


def _import_pygame():
    """Import pygame and define constants."""
    global pygame
    global KEY_TO_VK

    # keep the console quiet
    os.environ.setdefault('PYGAME_HIDE_SUPPORT_PROMPT', '1')
    import pygame

    # these are Windows virtual-key codes
    KEY_TO_VK = {
        pygame.K_BACKSPACE: keycode.BACKSPACE,
        pygame.K_TAB: keycode.TAB,
        pygame.K_RETURN: keycode.ENTER,
        pygame.K_KP_ENTER: keycode.ENTER,
        pygame.K_LSHIFT: keycode.SHIFT,
        pygame.K_RSHIFT: keycode.SHIFT,
        pygame.K_LCTRL: keycode.CTRL,
        pygame.K_RCTRL: keycode.CTRL,
        pygame.K_LALT: keycode.ALT,
        pygame.K_RALT: keycode.ALT,
        pygame.K_PAUSE: keycode.PAUSE,
        pygame.K_CAPSLOCK: keycode.CAPSLOCK,
        pygame.K_ESCAPE: keycode.ESCAPE,
        pygame.K_SPACE: keycode.SPACE,
        pygame.K_PAGEUP: keycode.PGUP,
        pygame.K_PAGEDOWN: keycode.PGDN,
        pygame.K_END: keycode.END,
        pygame.K_HOME: keycode.HOME,
        pygame.K_LEFT: keycode.LEFT,
        pygame.K_UP: keycode.UP,
        pygame.K_RIGHT: keycode.RIGHT,
        pygame.K_DOWN: keycode.DOWN,
        pygame.K_PRINT: keycode.PRINTSCREEN,
        pygame.K_INSERT: keycode.INSERT,
        pygame.K_DELETE: keycode.DELETE,
        pygame.K_KP_MULTIPLY: keycode.MULTIPLY,
        pygame.K_KP_PLUS: keycode.ADD,
        pygame.K_KP_MINUS: keycode.SUBTRACT,
        pygame.K_KP_PERIOD: keycode.DECIMAL,
        pygame.K_KP_DIVIDE: keycode.DIVIDE,
        pygame.K_NUMLOCK: keycode.NUMLOCK,
        pygame.K_SCROLLOCK: keycode.SCROLLLOCK,
    }
    # letters, digit row, keypad digits and function keys
    KEY_TO_VK.update({
        getattr(pygame, 'K_%s' % (_c.lower(),)): keycode.A + _i
        for _i, _c in enumerate(u'ABCDEFGHIJKLMNOPQRSTUVWXYZ')
    })
    KEY_TO_VK.update({getattr(pygame, 'K_%d' % (_i,)): keycode.N0 + _i for _i in range(10)})
    KEY_TO_VK.update({getattr(pygame, 'K_KP%d' % (_i,)): keycode.NUMPAD0 + _i for _i in range(10)})
    KEY_TO_VK.update({getattr(pygame, 'K_F%d' % (_i,)): keycode.F1 + _i - 1 for _i in range(1, 16)})

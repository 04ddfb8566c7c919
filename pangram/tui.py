"""Curses front end: draws the alphabet and input boxes, feeds keys to the controller."""
import curses
import logging
import os

from pangram.app import Controller
from pangram.config import Config
from pangram.events import event_from_key

logger = logging.getLogger(__name__)

ALPHABET_HEIGHT = 3
_BORDER = 2  # one cell on each side
_ESCAPE = "\x1b"


def alphabet_line(snapshot, placeholder: str = ".") -> str:
    """One glyph per letter: the letter itself if present, else the placeholder."""
    return ''.join(chr(ord('A') + i) if present else placeholder
                   for i, present in enumerate(snapshot))


def border_color(complete: bool, config: Config) -> str:
    return config.complete_color if complete else config.incomplete_color


def wrap_text(text: str, width: int) -> list[str]:
    """Split text into rows of `width` characters, no word wrapping."""
    if width < 1:
        return []
    return [text[i:i + width] for i in range(0, len(text), width)] or [""]


def _curses_color(name: str) -> int:
    return getattr(curses, "COLOR_" + name.upper())


class Screen:
    """Draws the controller's state onto a curses window."""

    def __init__(self, window, controller: Controller, config: Config):
        self.window = window
        self.controller = controller
        self.config = config
        self._pairs: dict[str, int] = {}

    def setup(self):
        curses.raw()
        self.window.keypad(True)
        try:
            curses.curs_set(1)
        except curses.error:
            pass
        if curses.has_colors():
            curses.start_color()
            curses.use_default_colors()
            for name in (self.config.incomplete_color, self.config.complete_color):
                if name not in self._pairs:
                    pair = len(self._pairs) + 1
                    curses.init_pair(pair, _curses_color(name), -1)
                    self._pairs[name] = pair

    def _border_attr(self) -> int:
        name = border_color(self.controller.is_pangram_complete(), self.config)
        pair = self._pairs.get(name)
        if pair is None:
            return curses.A_NORMAL
        return curses.color_pair(pair)

    def _put(self, y, x, text, attr=0):
        # Writing into the bottom-right cell raises even when it succeeds.
        try:
            self.window.addstr(y, x, text, attr)
        except curses.error:
            pass

    def _box(self, y, x, height, width, title, attr):
        if height < 2 or width < 2:
            return
        self._put(y, x, "╭" + "─" * (width - 2) + "╮", attr)
        for row in range(y + 1, y + height - 1):
            self._put(row, x, "│", attr)
            self._put(row, x + width - 1, "│", attr)
        self._put(y + height - 1, x, "╰" + "─" * (width - 2) + "╯", attr)
        title = title[:max(0, width - 4)]
        if title:
            self._put(y, x + (width - len(title)) // 2, title, curses.A_BOLD)

    def draw(self):
        height, width = self.window.getmaxyx()
        self.window.erase()
        attr = self._border_attr()

        self._box(0, 0, ALPHABET_HEIGHT, width, self.config.alphabet_title, attr)
        letters = alphabet_line(self.controller.letters_snapshot(), self.config.placeholder)
        inner = width - _BORDER
        if inner > 0:
            self._put(1, 1, letters[:inner].center(inner))

        box_height = height - ALPHABET_HEIGHT
        self._box(ALPHABET_HEIGHT, 0, box_height, width, self.config.input_title, attr)
        rows = box_height - _BORDER
        if inner < 1 or rows < 1:
            self.window.refresh()
            return
        for i, line in enumerate(wrap_text(self.controller.displayed_text(), inner)[:rows]):
            self._put(ALPHABET_HEIGHT + 1 + i, 1, line)

        column, row = self.controller.cursor_screen_position(inner)
        if row < rows:
            try:
                self.window.move(ALPHABET_HEIGHT + 1 + row, 1 + column)
            except curses.error:
                pass
        self.window.refresh()

    def read_event(self):
        key = self.window.get_wch()
        if key == _ESCAPE:
            # Alt+key arrives as ESC immediately followed by the key.
            following = self._read_pending()
            if following is not None:
                key = following
        return event_from_key(key)

    def _read_pending(self):
        """Next key if one is already queued, else None."""
        self.window.nodelay(True)
        try:
            return self.window.get_wch()
        except curses.error:
            return None
        finally:
            self.window.nodelay(False)


def _loop(window, controller: Controller, config: Config):
    screen = Screen(window, controller, config)
    screen.setup()
    while not controller.is_quitting():
        screen.draw()
        try:
            event = screen.read_event()
        except KeyboardInterrupt:
            logger.info("Interrupted")
            break
        controller.handle_event(event)


def run(controller: Controller, config: Config):
    """Block until the user quits. The terminal is restored on any exit."""
    os.environ.setdefault("ESCDELAY", "25")
    logger.info("Starting interactive session")
    curses.wrapper(_loop, controller, config)
    logger.info("Session ended")

"""Input events and the mapping from curses keys onto them."""
import curses
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Union

_ESCAPE = '\x1b'
_CTRL_C = '\x03'
_BACKSPACE_CHARS = ('\x7f', '\x08')


class EventKind(Enum):
    CHAR = auto()
    BACKSPACE = auto()
    DELETE = auto()
    LEFT = auto()
    RIGHT = auto()
    QUIT = auto()
    OTHER = auto()


@dataclass(frozen=True)
class Event:
    kind: EventKind
    char: Optional[str] = None  # only set for CHAR

    @classmethod
    def char_typed(cls, char: str) -> "Event":
        return cls(EventKind.CHAR, char)

    @classmethod
    def backspace(cls) -> "Event":
        return cls(EventKind.BACKSPACE)

    @classmethod
    def delete(cls) -> "Event":
        return cls(EventKind.DELETE)

    @classmethod
    def left(cls) -> "Event":
        return cls(EventKind.LEFT)

    @classmethod
    def right(cls) -> "Event":
        return cls(EventKind.RIGHT)

    @classmethod
    def quit(cls) -> "Event":
        return cls(EventKind.QUIT)

    @classmethod
    def other(cls) -> "Event":
        return cls(EventKind.OTHER)


_SPECIAL_KEYS = {
    curses.KEY_BACKSPACE: EventKind.BACKSPACE,
    curses.KEY_DC: EventKind.DELETE,
    curses.KEY_LEFT: EventKind.LEFT,
    curses.KEY_RIGHT: EventKind.RIGHT,
}


def event_from_key(key: Union[str, int]) -> Event:
    """Translate a `window.get_wch()` result into an Event.

    Strings are typed characters (control characters included), ints are
    curses key codes. Anything unmapped becomes an OTHER event.
    """
    if isinstance(key, str):
        if key in (_ESCAPE, _CTRL_C):
            return Event.quit()
        if key in _BACKSPACE_CHARS:
            return Event.backspace()
        if len(key) == 1 and key.isprintable():
            return Event.char_typed(key)
        return Event.other()

    kind = _SPECIAL_KEYS.get(key)
    if kind is None:
        return Event.other()
    return Event(kind)

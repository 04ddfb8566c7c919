"""Controller — routes input events to the text buffer and letter tracker."""
import logging

from pangram.alphabet import LetterTracker
from pangram.buffer import TextBuffer
from pangram.errors import CapacityError
from pangram.events import Event, EventKind

logger = logging.getLogger(__name__)


def is_tracked_letter(char) -> bool:
    """True for ASCII letters, the only characters the tracker counts."""
    return char is not None and len(char) == 1 and char.isascii() and char.isalpha()


class Controller:
    """Owns the typed text and the letter counts and keeps them in sync.

    For every letter, the tracker's count equals the number of
    case-insensitive occurrences of that letter in the buffer. Every
    mutation of the buffer goes through handle_event so the two never
    drift apart.
    """

    def __init__(self):
        self._tracker = LetterTracker()
        self._buffer = TextBuffer()
        self._quitting = False
        self._complete = False

    @property
    def tracker(self) -> LetterTracker:
        return self._tracker

    @property
    def buffer(self) -> TextBuffer:
        return self._buffer

    def handle_event(self, event: Event):
        """Apply one input event.

        Errors from the tracker mean the routing below is broken; they
        propagate to the caller.
        """
        if self._quitting:
            logger.debug("Ignoring %s after quit", event.kind.name)
            return

        kind = event.kind
        if kind is EventKind.QUIT:
            logger.info("Quit requested")
            self._quitting = True
            return
        if kind is EventKind.CHAR:
            self._on_char(event.char)
        elif kind is EventKind.BACKSPACE:
            self._forget(self._buffer.delete_before_cursor())
        elif kind is EventKind.DELETE:
            self._forget(self._buffer.delete_after_cursor())
        elif kind is EventKind.LEFT:
            self._buffer.move_left()
        elif kind is EventKind.RIGHT:
            self._buffer.move_right()

        logger.debug("%s -> text=%r cursor=%d", kind.name,
                     self._buffer.content, self._buffer.cursor)
        self._update_complete()

    def _on_char(self, char: str):
        # Count first so a failing add leaves the text untouched.
        letter = char.upper() if is_tracked_letter(char) else None
        if letter:
            self._tracker.add(letter)
        try:
            self._buffer.insert(char)
        except CapacityError:
            if letter:
                self._tracker.remove(letter)
            raise

    def _forget(self, removed):
        if is_tracked_letter(removed):
            self._tracker.remove(removed.upper())

    def _update_complete(self):
        complete = self._tracker.is_complete()
        if complete != self._complete:
            logger.info("Pangram %s", "complete" if complete else "incomplete")
        self._complete = complete

    @property
    def complete(self) -> bool:
        return self._complete

    def is_quitting(self) -> bool:
        return self._quitting

    def displayed_text(self) -> str:
        return self._buffer.content

    def cursor_screen_position(self, width: int) -> tuple[int, int]:
        return self._buffer.cursor_screen_position(width)

    def is_pangram_complete(self) -> bool:
        return self._tracker.is_complete()

    def letters_snapshot(self) -> tuple:
        """26 booleans, True where the letter currently appears in the text."""
        return self._tracker.present()

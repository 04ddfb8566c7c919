"""Text buffer — the typed text plus an insertion cursor."""
from pangram.errors import CapacityError

MAX_LENGTH = 2 ** 32 - 1


class TextBuffer:
    """Single-line editable text with a cursor.

    The cursor is the index before which the next character lands, so it
    always lies in [0, len(text)]. Characters are stored exactly as typed;
    the buffer does not care whether they are letters.
    """

    def __init__(self):
        self._chars: list[str] = []
        self._cursor: int = 0

    def __len__(self) -> int:
        return len(self._chars)

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def content(self) -> str:
        return ''.join(self._chars)

    def _clamp(self):
        self._cursor = max(0, min(self._cursor, len(self._chars)))

    def insert(self, char: str):
        """Insert a character at the cursor and move the cursor past it."""
        if len(self._chars) >= MAX_LENGTH:
            raise CapacityError(f"You can type at most {MAX_LENGTH} characters")
        self._chars.insert(self._cursor, char)
        self._cursor += 1
        self._clamp()

    def delete_before_cursor(self) -> str | None:
        """Backspace. Returns the removed character, or None at the start."""
        if self._cursor == 0:
            return None
        self._cursor -= 1
        removed = self._chars.pop(self._cursor)
        self._clamp()
        return removed

    def delete_after_cursor(self) -> str | None:
        """Delete key. Returns the removed character, or None at the end."""
        if self._cursor >= len(self._chars):
            return None
        self.move_right()
        return self.delete_before_cursor()

    def move_left(self):
        if self._cursor > 0:
            self._cursor -= 1

    def move_right(self):
        if self._cursor < len(self._chars):
            self._cursor += 1

    def cursor_screen_position(self, available_width: int) -> tuple[int, int]:
        """(column, row) of the cursor when the text wraps every
        `available_width` characters, ignoring word boundaries.

        A cursor sitting exactly on a multiple of the width belongs to the
        start of the next row.
        """
        if available_width < 1:
            raise ValueError(f"available_width must be at least 1, got {available_width}")
        row, column = divmod(self._cursor, available_width)
        return column, row

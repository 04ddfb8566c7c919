"""Letter tracker — counts how often each of A..Z is present in the text."""
import logging

from pangram.errors import (
    InvariantViolationError,
    LetterOverflowError,
    OutOfRangeError,
)

logger = logging.getLogger(__name__)

LETTER_COUNT = 26
MAX_COUNT = 2 ** 32 - 1  # u32 counters
_BASE = ord('A')


def letter_index(letter: str) -> int:
    """Return the slot of an uppercase letter ('A' -> 0 ... 'Z' -> 25)."""
    if not isinstance(letter, str) or len(letter) != 1:
        raise OutOfRangeError(f"expected a single character, got {letter!r}")
    index = ord(letter) - _BASE
    if not 0 <= index < LETTER_COUNT:
        raise OutOfRangeError(f"{letter!r} is not in the 'A'..'Z' range")
    return index


class LetterTracker:
    """Keeps one counter per letter of the Latin alphabet.

    Only presence matters to callers, but the counts must be exact: the
    same letter may be typed several times and deleted one at a time.
    """

    def __init__(self):
        self._counts: list[int] = [0] * LETTER_COUNT

    @property
    def counts(self) -> tuple:
        return tuple(self._counts)

    def count(self, letter: str) -> int:
        return self._counts[letter_index(letter)]

    def add(self, letter: str):
        """Record one more occurrence of an uppercase letter."""
        index = letter_index(letter)
        if self._counts[index] >= MAX_COUNT:
            raise LetterOverflowError(f"count for {letter!r} is already at {MAX_COUNT}")
        self._counts[index] += 1

    def remove(self, letter: str):
        """Forget one occurrence of an uppercase letter.

        Raises InvariantViolationError if the letter is not present.
        """
        index = letter_index(letter)
        if self._counts[index] == 0:
            raise InvariantViolationError(
                f"cannot remove {letter!r}: it is not present in the text")
        self._counts[index] -= 1

    def is_complete(self) -> bool:
        return all(self._counts)

    def present(self) -> tuple:
        """Per-letter presence flags, in alphabetical order."""
        return tuple(c > 0 for c in self._counts)

    def missing(self) -> str:
        return ''.join(chr(_BASE + i) for i, c in enumerate(self._counts) if c == 0)

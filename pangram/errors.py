"""Error definitions for the pangram checker.

All of these signal a bug in the caller's routing, never bad user input.
Unmapped keys are ignored rather than reported.
"""


class PangramError(Exception):
    """Base exception for all custom errors."""


class OutOfRangeError(PangramError, ValueError):
    """Raised when a character outside 'A'..'Z' reaches the letter tracker."""


class InvariantViolationError(PangramError, RuntimeError):
    """Raised when a letter is removed more often than it was added."""


class LetterOverflowError(PangramError, OverflowError):
    """Raised when a letter count would exceed its representable maximum."""


class CapacityError(PangramError, OverflowError):
    """Raised when the text buffer would exceed its maximum length."""

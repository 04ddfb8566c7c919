"""Interactive terminal pangram checker."""

__version__ = "0.0.1"

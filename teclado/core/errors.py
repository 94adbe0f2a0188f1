"""Exceptions raised by the keyboard core and settings loader."""

from __future__ import annotations


class KeyboardError(Exception):
    """Base class for all keyboard errors."""


class InvalidCaretRange(KeyboardError, ValueError):
    """A sink's caret position does not fit inside its current text."""

    def __init__(self, caret: int, length: int) -> None:
        super().__init__(f"caret {caret} outside text of length {length}")
        self.caret = caret
        self.length = length


class UnknownKeyError(KeyboardError, LookupError):
    """An activation was raised for a code that is not in the key catalog."""


class SettingsError(KeyboardError, ValueError):
    """The settings file exists but cannot be used."""

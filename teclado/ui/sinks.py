"""Adapters that expose Qt text widgets as insertion sinks.

The adapters only call widget methods, so they work with any object that has
the same methods as ``QLineEdit`` or ``QPlainTextEdit``.

Qt reports and accepts cursor positions in UTF-16 code units, while the
editor works in Python string indices. Characters outside the Basic
Multilingual Plane (emoji, for instance) take two units on the Qt side, so
every position is converted at this boundary.
"""

from __future__ import annotations

from typing import Any, Optional

from teclado.core.editor import InsertionSink
from teclado.core.errors import InvalidCaretRange


def utf16_offset(text: str, index: int) -> int:
    """Qt cursor position of string index *index* in *text*."""
    return len(text[:index].encode("utf-16-le")) // 2


def string_index(text: str, offset: int) -> int:
    """String index of Qt cursor position *offset* in *text*.

    An offset inside a surrogate pair rounds up past the character it splits.
    Offsets past the end stay past the end so range checks still see them.
    """
    units = 0
    for index, ch in enumerate(text):
        if units >= offset:
            return index
        units += 2 if ord(ch) > 0xFFFF else 1
    return len(text) + max(offset - units, 0)


def _check_range(position: int, text: str) -> None:
    if position < 0 or position > len(text):
        raise InvalidCaretRange(position, len(text))


class LineEditSink:
    """Sink over a single-line editor (``QLineEdit``)."""

    def __init__(self, widget: Any) -> None:
        self.widget = widget

    def get_text(self) -> str:
        return self.widget.text()

    def set_text(self, text: str) -> None:
        self.widget.setText(text)

    def get_caret_position(self) -> int:
        return string_index(self.widget.text(), self.widget.cursorPosition())

    def set_caret_position(self, position: int) -> None:
        # QLineEdit silently clamps, so reject out-of-range moves here.
        text = self.widget.text()
        _check_range(position, text)
        self.widget.setCursorPosition(utf16_offset(text, position))


class PlainTextSink:
    """Sink over a multi-line editor (``QPlainTextEdit`` / ``QTextEdit``)."""

    def __init__(self, widget: Any) -> None:
        self.widget = widget

    def get_text(self) -> str:
        return self.widget.toPlainText()

    def set_text(self, text: str) -> None:
        self.widget.setPlainText(text)

    def get_caret_position(self) -> int:
        return string_index(self.widget.toPlainText(), self.widget.textCursor().position())

    def set_caret_position(self, position: int) -> None:
        text = self.widget.toPlainText()
        _check_range(position, text)
        cursor = self.widget.textCursor()
        cursor.setPosition(utf16_offset(text, position))
        self.widget.setTextCursor(cursor)


def sink_for_widget(widget: Any) -> Optional[InsertionSink]:
    """Wrap *widget* if it is an editable text field, else return None."""
    if widget is None:
        return None
    is_read_only = getattr(widget, "isReadOnly", None)
    if callable(is_read_only) and is_read_only():
        return None
    if callable(getattr(widget, "cursorPosition", None)) and callable(getattr(widget, "setText", None)):
        return LineEditSink(widget)
    if callable(getattr(widget, "toPlainText", None)) and callable(getattr(widget, "textCursor", None)):
        return PlainTextSink(widget)
    return None

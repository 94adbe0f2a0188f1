from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from teclado.core.errors import InvalidCaretRange

logger = logging.getLogger(__name__)


@runtime_checkable
class InsertionSink(Protocol):
    """A text buffer with a caret that the keyboard can type into.

    Implementations may raise ``InvalidCaretRange`` from any method to reject
    an edit.
    """

    def get_text(self) -> str: ...

    def set_text(self, text: str) -> None: ...

    def get_caret_position(self) -> int: ...

    def set_caret_position(self, position: int) -> None: ...


def _read(sink: InsertionSink) -> tuple[str, int]:
    full = sink.get_text()
    caret = sink.get_caret_position()
    if caret < 0 or caret > len(full):
        raise InvalidCaretRange(caret, len(full))
    return full, caret


def _apply(sink: InsertionSink, original: str, text: str, caret: int) -> None:
    sink.set_text(text)
    try:
        sink.set_caret_position(caret)
    except InvalidCaretRange:
        sink.set_text(original)
        raise


class TextEditor:
    """Caret-aware edits against an ``InsertionSink``.

    Each edit computes the whole new text before touching the sink, and a
    rejected caret move puts the old text back, so an abandoned edit leaves
    the sink as it was. Rejections are logged and reported as ``False``.
    """

    def insert(self, sink: InsertionSink, text: str) -> bool:
        try:
            full, caret = _read(sink)
            _apply(sink, full, full[:caret] + text + full[caret:], caret + len(text))
        except InvalidCaretRange as e:
            logger.debug("Insert of %r abandoned: %s", text, e)
            return False
        return True

    def backspace(self, sink: InsertionSink) -> bool:
        try:
            full, caret = _read(sink)
            if not full or caret == 0:
                return False
            _apply(sink, full, full[: caret - 1] + full[caret:], caret - 1)
        except InvalidCaretRange as e:
            logger.debug("Backspace abandoned: %s", e)
            return False
        return True

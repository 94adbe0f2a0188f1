"""Shared fakes: a recording keyboard host and an in-memory text sink."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import pytest

from teclado.core.errors import InvalidCaretRange
from teclado.core.keyboard import VirtualKeyboard
from teclado.core.keys import KeyCode


class FakeSink:
    def __init__(self, text: str = "", caret: Optional[int] = None, name: str = "field") -> None:
        self.text = text
        self.caret = len(text) if caret is None else caret
        self.name = name
        self.writes = 0

    def get_text(self) -> str:
        return self.text

    def set_text(self, text: str) -> None:
        self.writes += 1
        self.text = text

    def get_caret_position(self) -> int:
        return self.caret

    def set_caret_position(self, position: int) -> None:
        if position < 0 or position > len(self.text):
            raise InvalidCaretRange(position, len(self.text))
        self.caret = position

    def __repr__(self) -> str:
        return f"FakeSink({self.name!r})"


class FakeWidget:
    """Stand-in for a toolkit widget; may or may not carry a text sink."""

    def __init__(self, name: str, sink: Optional[FakeSink] = None) -> None:
        self.name = name
        self.sink = sink

    def __repr__(self) -> str:
        return f"FakeWidget({self.name!r})"


class FakeHost:
    def __init__(self) -> None:
        self.labels: Dict[KeyCode, str] = {}
        self.highlights: Dict[KeyCode, bool] = {}
        self.label_calls: List[KeyCode] = []
        self.highlight_calls: List[tuple[KeyCode, bool]] = []
        self.focus_requests: List[Any] = []
        self.focus_chain: List[Any] = []
        self.buttons: List[Any] = []

    def render_key_label(self, code: KeyCode, text: str) -> None:
        self.labels[code] = text
        self.label_calls.append(code)

    def set_key_highlight(self, code: KeyCode, on: bool) -> None:
        self.highlights[code] = on
        self.highlight_calls.append((code, on))

    def request_focus(self, widget: Any) -> None:
        self.focus_requests.append(widget)

    def next_focusable(self, widget: Any) -> Optional[Any]:
        if widget not in self.focus_chain:
            return None
        index = self.focus_chain.index(widget)
        if index + 1 < len(self.focus_chain):
            return self.focus_chain[index + 1]
        return None

    def is_keyboard_widget(self, widget: Any) -> bool:
        return any(widget is button for button in self.buttons)

    def text_sink_for(self, widget: Any) -> Optional[FakeSink]:
        if isinstance(widget, FakeSink):
            return widget
        return getattr(widget, "sink", None)

    def reset_calls(self) -> None:
        self.label_calls.clear()
        self.highlight_calls.clear()
        self.focus_requests.clear()


@pytest.fixture()
def host() -> FakeHost:
    return FakeHost()


@pytest.fixture()
def sink() -> FakeSink:
    return FakeSink()


@pytest.fixture()
def keyboard(host: FakeHost, sink: FakeSink) -> VirtualKeyboard:
    kb = VirtualKeyboard(host=host)
    kb.attach_sink(sink)
    kb.refresh()
    host.reset_calls()
    return kb

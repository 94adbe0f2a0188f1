"""What the keyboard core needs from the toolkit that draws it."""

from __future__ import annotations

from typing import Any, Optional, Protocol

from teclado.core.editor import InsertionSink
from teclado.core.keys import KeyCode


class KeyboardHost(Protocol):
    """Rendering and focus services supplied by the GUI layer.

    Widgets are opaque to the core; it only hands them back to the host.
    """

    def render_key_label(self, code: KeyCode, text: str) -> None: ...

    def set_key_highlight(self, code: KeyCode, on: bool) -> None: ...

    def request_focus(self, widget: Any) -> None: ...

    def next_focusable(self, widget: Any) -> Optional[Any]: ...

    def is_keyboard_widget(self, widget: Any) -> bool: ...

    def text_sink_for(self, widget: Any) -> Optional[InsertionSink]: ...

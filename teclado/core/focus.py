from __future__ import annotations

import logging
from typing import Any, Optional

from teclado.core.editor import InsertionSink
from teclado.core.host import KeyboardHost

logger = logging.getLogger(__name__)


class FocusTracker:
    """Remembers which widget the keyboard types into.

    Clicking a keyboard button moves toolkit focus onto the button, so the
    tracker keeps the widget that had focus *before* the click rather than
    the one that has it now.
    """

    def __init__(self, host: KeyboardHost, initial_target: Any = None) -> None:
        self._host = host
        self._target: Any = None
        self._sink: Optional[InsertionSink] = None
        if initial_target is not None:
            self._adopt(initial_target)

    @property
    def current_target(self) -> Any:
        return self._target

    def current_text_sink(self) -> Optional[InsertionSink]:
        return self._sink

    def on_focus_changed(self, previous: Any, next_: Any) -> None:
        if previous is None or self._host.is_keyboard_widget(previous):
            return
        if previous is not self._target:
            self._adopt(previous)

    def on_tab(self) -> bool:
        """Move to the widget after the current target. Return True if focus moved."""
        if self._target is None:
            return False
        following = self._host.next_focusable(self._target)
        if following is None:
            return False
        self._host.request_focus(following)
        self._adopt(following)
        return True

    def restore_focus(self) -> None:
        if self._target is not None:
            self._host.request_focus(self._target)

    def attach_sink(self, sink: Optional[InsertionSink]) -> None:
        self._target = sink
        self._sink = sink
        logger.debug("Sink attached explicitly: %r", sink)

    def _adopt(self, widget: Any) -> None:
        self._target = widget
        self._sink = self._host.text_sink_for(widget)
        logger.debug("Focus target is now %r (sink: %s)", widget, "yes" if self._sink is not None else "no")

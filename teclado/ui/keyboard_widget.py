"""PySide6 panel that draws the ABNT2 keyboard and hosts the ``VirtualKeyboard``."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from PySide6.QtCore import Qt, Slot
from PySide6.QtWidgets import (
    QApplication,
    QHBoxLayout,
    QPushButton,
    QSizePolicy,
    QVBoxLayout,
    QWidget,
)

from teclado.core.editor import InsertionSink
from teclado.core.keyboard import VirtualKeyboard
from teclado.core.keys import KeyCode
from teclado.core.settings import KeyboardSettings
from teclado.ui.colors import KeyboardColors, key_style
from teclado.ui.sinks import sink_for_widget

logger = logging.getLogger(__name__)

# Relative widths; every other key is 1 unit.
KEY_WIDTHS: Dict[KeyCode, int] = {
    KeyCode.BACKSPACE: 2,
    KeyCode.TAB: 2,
    KeyCode.CAPS_LOCK: 2,
    KeyCode.SHIFT: 2,
    KeyCode.SPACE: 10,
}

SPECIAL_KEYS = frozenset(
    {KeyCode.BACKSPACE, KeyCode.TAB, KeyCode.CAPS_LOCK, KeyCode.SHIFT, KeyCode.SPACE}
)


def first_focusable_child(container: QWidget) -> Optional[QWidget]:
    """Return the first widget in *container* that takes Tab focus."""
    for child in container.findChildren(QWidget):
        if child.focusPolicy() & Qt.TabFocus and child.isEnabled():
            return child
    return None


class KeyboardWidget(QWidget):
    """Grid of key buttons, one per ``KeyCode``.

    The widget owns the ``code -> button`` table and the colors; all typing
    logic lives in the ``VirtualKeyboard`` it hosts.
    """

    def __init__(
        self,
        settings: Optional[KeyboardSettings] = None,
        initial_target: Optional[QWidget] = None,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self._settings = settings or KeyboardSettings()
        self._buttons: Dict[KeyCode, QPushButton] = {}
        self.keyboard = VirtualKeyboard(host=self, initial_target=initial_target)

        self._build()
        self.keyboard.refresh()

        app = QApplication.instance()
        if app is not None:
            app.focusChanged.connect(self._on_focus_changed)

    def _build(self) -> None:
        self.setStyleSheet(f"background: {KeyboardColors.PANEL_BG}; border-radius: 10px;")
        rows = QVBoxLayout(self)
        rows.setSpacing(self._settings.spacing)
        rows.setContentsMargins(8, 8, 8, 8)

        for row in self.keyboard.catalog.rows:
            line = QHBoxLayout()
            line.setSpacing(self._settings.spacing)
            for key in row:
                button = QPushButton(key.value)
                button.setMinimumHeight(self._settings.key_height)
                button.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Fixed)
                button.setStyleSheet(self._style_for(key.code, highlighted=False))
                button.clicked.connect(lambda _checked=False, code=key.code: self._on_clicked(code))
                line.addWidget(button, KEY_WIDTHS.get(key.code, 1))
                self._buttons[key.code] = button
            rows.addLayout(line)

    @Slot(QWidget, QWidget)
    def _on_focus_changed(self, old: Optional[QWidget], new: Optional[QWidget]) -> None:
        # Bound to this widget so Qt drops the connection when it is destroyed.
        self.keyboard.on_focus_changed(old, new)

    def _on_clicked(self, code: KeyCode) -> None:
        typed = self.keyboard.activate(code)
        if typed:
            logger.debug("Typed %r", typed)

    def _style_for(self, code: KeyCode, highlighted: bool) -> str:
        return key_style(
            self._settings.font_size,
            special=code in SPECIAL_KEYS,
            highlighted=highlighted,
            highlight_color=self._settings.highlight_color,
        )

    # -- KeyboardHost ------------------------------------------------------

    def render_key_label(self, code: KeyCode, text: str) -> None:
        self._buttons[code].setText(text)

    def set_key_highlight(self, code: KeyCode, on: bool) -> None:
        self._buttons[code].setStyleSheet(self._style_for(code, highlighted=on))

    def request_focus(self, widget: Any) -> None:
        set_focus = getattr(widget, "setFocus", None)
        if callable(set_focus):
            set_focus()

    def next_focusable(self, widget: Any) -> Optional[QWidget]:
        if not isinstance(widget, QWidget):
            return None
        candidate = widget.nextInFocusChain()
        while candidate is not None and candidate is not widget:
            if (
                candidate.focusPolicy() & Qt.TabFocus
                and candidate.isEnabled()
                and candidate.isVisible()
                and not self.is_keyboard_widget(candidate)
            ):
                return candidate
            candidate = candidate.nextInFocusChain()
        return None

    def is_keyboard_widget(self, widget: Any) -> bool:
        if widget is self:
            return True
        return any(widget is button for button in self._buttons.values())

    def text_sink_for(self, widget: Any) -> Optional[InsertionSink]:
        return sink_for_widget(widget)

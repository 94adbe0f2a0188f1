from __future__ import annotations

from typing import Optional

from PySide6.QtWidgets import (
    QFormLayout,
    QLineEdit,
    QMainWindow,
    QPlainTextEdit,
    QVBoxLayout,
    QWidget,
)

from teclado.core.settings import KeyboardSettings
from teclado.ui.colors import KeyboardColors
from teclado.ui.keyboard_widget import KeyboardWidget, first_focusable_child


class MainWindow(QMainWindow):
    """Demo window: a small form with the on-screen keyboard underneath it."""

    def __init__(self, settings: Optional[KeyboardSettings] = None) -> None:
        super().__init__()
        self._settings = settings or KeyboardSettings()
        self.setWindowTitle("Teclado virtual ABNT2")
        self.setMinimumSize(820, 520)

        central = QWidget()
        central.setStyleSheet(f"background: {KeyboardColors.WINDOW_BG};")
        layout = QVBoxLayout(central)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(12)

        form_container = QWidget()
        form = QFormLayout(form_container)
        self.name_field = QLineEdit()
        self.email_field = QLineEdit()
        self.message_field = QPlainTextEdit()
        field_style = (
            f"background: white; border: 1px solid {KeyboardColors.FIELD_BORDER};"
            " border-radius: 4px; padding: 4px;"
        )
        for field in (self.name_field, self.email_field, self.message_field):
            field.setStyleSheet(field_style)
        form.addRow("Nome:", self.name_field)
        form.addRow("E-mail:", self.email_field)
        form.addRow("Mensagem:", self.message_field)
        layout.addWidget(form_container, 1)

        # Type into whatever had focus when the window opened, or the first field.
        initial = self.focusWidget() or first_focusable_child(form_container)
        self.keyboard_widget = KeyboardWidget(settings=self._settings, initial_target=initial)
        layout.addWidget(self.keyboard_widget)

        self.setCentralWidget(central)

from __future__ import annotations

import logging
from typing import Any, Iterable, Optional

from teclado.core.diacritics import DiacriticComposer, DiacriticKind, is_dead_key
from teclado.core.editor import InsertionSink, TextEditor
from teclado.core.focus import FocusTracker
from teclado.core.host import KeyboardHost
from teclado.core.keys import Key, KeyCatalog, KeyCode
from teclado.core.modifiers import ModifierState

logger = logging.getLogger(__name__)


class VirtualKeyboard:
    """Input-composition state machine behind the on-screen keyboard.

    The host calls :meth:`activate` for every button click and forwards
    toolkit focus changes to :meth:`on_focus_changed`. In return the keyboard
    asks the host to relabel and highlight buttons and to move focus; it never
    touches widgets itself.

    Each activation runs to completion in three steps: work out the effect of
    the key, apply it to the focused sink, then apply the Shift release policy
    (one re-render, however many things changed).
    """

    def __init__(
        self,
        host: KeyboardHost,
        catalog: Optional[KeyCatalog] = None,
        initial_target: Any = None,
    ) -> None:
        self._host = host
        self._catalog = catalog or KeyCatalog()
        self._modifiers = ModifierState()
        self._composer = DiacriticComposer()
        self._editor = TextEditor()
        self._focus = FocusTracker(host, initial_target)

    # -- read-only views for the host -------------------------------------

    @property
    def catalog(self) -> KeyCatalog:
        return self._catalog

    @property
    def modifiers(self) -> ModifierState:
        return ModifierState(caps_lock=self._modifiers.caps_lock, shift=self._modifiers.shift)

    @property
    def pending_diacritic(self) -> Optional[DiacriticKind]:
        return self._composer.pending

    @property
    def current_sink(self) -> Optional[InsertionSink]:
        return self._focus.current_text_sink()

    @property
    def focus_target(self) -> Any:
        return self._focus.current_target

    def label_for(self, code: KeyCode) -> str:
        return self._modifiers.label_for(self._catalog.get(code))

    # -- inbound events ----------------------------------------------------

    def attach_sink(self, sink: Optional[InsertionSink]) -> None:
        self._focus.attach_sink(sink)

    def on_focus_changed(self, previous: Any, next_: Any) -> None:
        self._focus.on_focus_changed(previous, next_)

    def refresh(self) -> None:
        """Push every label and both modifier highlights to the host."""
        self._render(self._catalog.all())
        self._host.set_key_highlight(KeyCode.CAPS_LOCK, self._modifiers.caps_lock)
        self._host.set_key_highlight(KeyCode.SHIFT, self._modifiers.shift)

    def activate(self, code: KeyCode) -> Optional[str]:
        """Handle one button click. Return the text typed, if any.

        Raises ``UnknownKeyError`` for codes outside the catalog.
        """
        key = self._catalog.get(code)
        self._focus.restore_focus()

        if key.code is KeyCode.CAPS_LOCK:
            on = self._modifiers.toggle_caps_lock()
            logger.debug("Caps Lock %s", "on" if on else "off")
            self._render(self._catalog.shiftable(letters_only=True))
            self._host.set_key_highlight(KeyCode.CAPS_LOCK, on)
            return None
        if key.code is KeyCode.SHIFT:
            on = self._modifiers.toggle_shift()
            logger.debug("Shift %s", "on" if on else "off")
            self._render(self._catalog.shiftable())
            self._host.set_key_highlight(KeyCode.SHIFT, on)
            return None
        if key.code is KeyCode.TAB:
            self._focus.on_tab()
            return None
        if is_dead_key(key.code):
            kind = self._composer.arm(key.code, self._modifiers.shift)
            logger.debug("Dead key pending: %s", kind.value)
            self._release_shift()
            return None

        sink = self._focus.current_text_sink()
        if sink is None:
            logger.debug("No text sink focused; ignoring %s", key.code.value)
            return None
        if key.code is KeyCode.BACKSPACE:
            self._editor.backspace(sink)
            return None
        return self._type(key, sink)

    # -- internals ---------------------------------------------------------

    def _type(self, key: Key, sink: InsertionSink) -> str:
        text = self._modifiers.transform(key, self._composer.consume(key))
        self._editor.insert(sink, text)
        self._release_shift()
        return text

    def _release_shift(self) -> None:
        if self._modifiers.release_shift():
            self._render(self._catalog.shiftable())
            self._host.set_key_highlight(KeyCode.SHIFT, False)

    def _render(self, keys: Iterable[Key]) -> None:
        for key in keys:
            self._host.render_key_label(key.code, self._modifiers.label_for(key))

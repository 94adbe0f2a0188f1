from __future__ import annotations

from dataclasses import dataclass

from teclado.core.keys import Key


@dataclass
class ModifierState:
    """Caps Lock and Shift flags plus the case rules derived from them.

    Caps Lock is a latching toggle. Shift is one-shot: the keyboard releases it
    after the next character it affects (see ``VirtualKeyboard``). Both can be
    active at the same time.
    """

    caps_lock: bool = False
    shift: bool = False

    def toggle_caps_lock(self) -> bool:
        self.caps_lock = not self.caps_lock
        return self.caps_lock

    def toggle_shift(self) -> bool:
        self.shift = not self.shift
        return self.shift

    def release_shift(self) -> bool:
        """Turn Shift off; return True if it was on."""
        was_active = self.shift
        self.shift = False
        return was_active

    def label_for(self, key: Key) -> str:
        """Text a key's button should show under the current flags."""
        if self.shift or (self.caps_lock and key.is_letter):
            return key.shift_value
        return key.value

    def transform(self, key: Key, text: str) -> str:
        """Apply the case rules to *text* produced by *key*.

        Letters (including composed accents) are uppercased by either flag.
        Only Shift selects the alternate glyph of punctuation.
        """
        if key.is_letter:
            return text.upper() if (self.caps_lock or self.shift) else text
        if self.shift:
            return key.shift_value
        return text

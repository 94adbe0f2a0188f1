"""Dead-key composition of acute, grave, tilde and circumflex accents."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, Optional

from teclado.core.keys import Key, KeyCode

logger = logging.getLogger(__name__)


class DiacriticKind(Enum):
    ACUTE = "acute"
    GRAVE = "grave"
    TILDE = "tilde"
    CIRCUMFLEX = "circumflex"


# Tilde has no precomposed e/i/u in the ABNT2 output set, so those keep a
# leading "~" instead of a composed glyph.
COMPOSITIONS: Dict[DiacriticKind, Dict[str, str]] = {
    DiacriticKind.ACUTE: {"a": "á", "e": "é", "i": "í", "o": "ó", "u": "ú"},
    DiacriticKind.GRAVE: {"a": "à", "e": "è", "i": "ì", "o": "ò", "u": "ù"},
    DiacriticKind.TILDE: {"a": "ã", "e": "~e", "i": "~i", "o": "õ", "u": "~u"},
    DiacriticKind.CIRCUMFLEX: {"a": "â", "e": "ê", "i": "î", "o": "ô", "u": "û"},
}

# (dead key, shift active) -> accent it arms
_DEAD_KEYS: Dict[tuple[KeyCode, bool], DiacriticKind] = {
    (KeyCode.DEAD_ACUTE, False): DiacriticKind.ACUTE,
    (KeyCode.DEAD_ACUTE, True): DiacriticKind.GRAVE,
    (KeyCode.DEAD_TILDE, False): DiacriticKind.TILDE,
    (KeyCode.DEAD_TILDE, True): DiacriticKind.CIRCUMFLEX,
}


def is_dead_key(code: KeyCode) -> bool:
    return (code, False) in _DEAD_KEYS


def compose(kind: DiacriticKind, key: Key) -> str:
    """Return what *key* types after *kind*: the accented vowel, or the key's own value."""
    return COMPOSITIONS[kind].get(key.value.lower(), key.value)


class DiacriticComposer:
    """Two-state machine: Idle (``pending is None``) or Pending(kind)."""

    def __init__(self) -> None:
        self._pending: Optional[DiacriticKind] = None

    @property
    def pending(self) -> Optional[DiacriticKind]:
        return self._pending

    def arm(self, code: KeyCode, shift: bool) -> DiacriticKind:
        """Record a dead-key press. A second dead key replaces the first."""
        try:
            kind = _DEAD_KEYS[(code, shift)]
        except KeyError:
            raise ValueError(f"{code!r} is not a dead key") from None
        if self._pending is not None:
            logger.debug("Replacing pending %s with %s", self._pending.value, kind.value)
        self._pending = kind
        return kind

    def consume(self, key: Key) -> str:
        """Produce the text for a character key and return to Idle."""
        kind = self._pending
        self._pending = None
        if kind is None:
            return key.value
        text = compose(kind, key)
        if text == key.value:
            logger.debug("Discarding %s accent before %r", kind.value, key.value)
        return text

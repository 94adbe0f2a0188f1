"""ABNT2 key catalog: key codes, key definitions and the five keyboard rows."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple

from teclado.core.errors import UnknownKeyError


class KeyCode(str, Enum):
    QUOTE = "quote"
    DIGIT_1 = "1"
    DIGIT_2 = "2"
    DIGIT_3 = "3"
    DIGIT_4 = "4"
    DIGIT_5 = "5"
    DIGIT_6 = "6"
    DIGIT_7 = "7"
    DIGIT_8 = "8"
    DIGIT_9 = "9"
    DIGIT_0 = "0"
    MINUS = "minus"
    BACKSPACE = "backspace"

    TAB = "tab"
    Q = "q"
    W = "w"
    E = "e"
    R = "r"
    T = "t"
    Y = "y"
    U = "u"
    I = "i"
    O = "o"
    P = "p"
    DEAD_ACUTE = "dead_acute"
    BRACKET_LEFT = "bracket_left"

    CAPS_LOCK = "caps_lock"
    A = "a"
    S = "s"
    D = "d"
    F = "f"
    G = "g"
    H = "h"
    J = "j"
    K = "k"
    L = "l"
    CEDILLA = "cedilla"
    DEAD_TILDE = "dead_tilde"
    BRACKET_RIGHT = "bracket_right"

    SHIFT = "shift"
    BACKSLASH = "backslash"
    Z = "z"
    X = "x"
    C = "c"
    V = "v"
    B = "b"
    N = "n"
    M = "m"
    COMMA = "comma"
    PERIOD = "period"
    SEMICOLON = "semicolon"
    SLASH = "slash"

    SPACE = "space"


@dataclass(frozen=True)
class Key:
    """A single key: its code, the glyph it types and the glyph it types with Shift."""

    code: KeyCode
    value: str
    shift_value: str

    @property
    def is_letter(self) -> bool:
        return len(self.value) == 1 and self.value.isalpha()

    @property
    def has_shift_value(self) -> bool:
        return self.value != self.shift_value


def _key(code: KeyCode, value: str, shift_value: Optional[str] = None) -> Key:
    if shift_value is None:
        # Letters type their capital with Shift; everything else repeats itself.
        shift_value = value.upper() if len(value) == 1 and value.isalpha() else value
    return Key(code=code, value=value, shift_value=shift_value)


def _letters(letters: str) -> List[Key]:
    return [_key(KeyCode(ch), ch) for ch in letters]


ABNT2_ROWS: Tuple[Tuple[Key, ...], ...] = (
    (
        _key(KeyCode.QUOTE, "'", '"'),
        *(_key(KeyCode(d), d) for d in "1234567890"),
        _key(KeyCode.MINUS, "-", "_"),
        _key(KeyCode.BACKSPACE, "<<<"),
    ),
    (
        _key(KeyCode.TAB, "Tab"),
        *_letters("qwertyuiop"),
        _key(KeyCode.DEAD_ACUTE, "´", "`"),
        _key(KeyCode.BRACKET_LEFT, "[", "{"),
    ),
    (
        _key(KeyCode.CAPS_LOCK, "Caps Lock"),
        *_letters("asdfghjkl"),
        _key(KeyCode.CEDILLA, "ç"),
        _key(KeyCode.DEAD_TILDE, "~", "^"),
        _key(KeyCode.BRACKET_RIGHT, "]", "}"),
    ),
    (
        _key(KeyCode.SHIFT, "Shift"),
        _key(KeyCode.BACKSLASH, "\\", "|"),
        *_letters("zxcvbnm"),
        _key(KeyCode.COMMA, ",", "<"),
        _key(KeyCode.PERIOD, ".", ">"),
        _key(KeyCode.SEMICOLON, ";", ":"),
        _key(KeyCode.SLASH, "/", "?"),
    ),
    (_key(KeyCode.SPACE, " "),),
)


class KeyCatalog:
    """Interned keys of the ABNT2 layout, one ``Key`` per ``KeyCode``."""

    def __init__(self, rows: Tuple[Tuple[Key, ...], ...] = ABNT2_ROWS) -> None:
        self._rows = rows
        self._keys: Dict[KeyCode, Key] = {}
        for row in rows:
            for key in row:
                if key.code in self._keys:
                    raise ValueError(f"Duplicate key code in layout: {key.code.value}")
                self._keys[key.code] = key

    @property
    def rows(self) -> Tuple[Tuple[Key, ...], ...]:
        return self._rows

    def all(self) -> List[Key]:
        return list(self._keys.values())

    def get(self, code: KeyCode) -> Key:
        try:
            return self._keys[code]
        except KeyError:
            raise UnknownKeyError(f"Key code not in catalog: {code!r}") from None

    def __contains__(self, code: object) -> bool:
        return code in self._keys

    def __iter__(self) -> Iterator[Key]:
        return iter(self._keys.values())

    def __len__(self) -> int:
        return len(self._keys)

    def shiftable(self, letters_only: bool = False) -> List[Key]:
        """Keys whose label changes with Shift (or, with *letters_only*, with Caps Lock)."""
        return [
            key for key in self._keys.values()
            if key.has_shift_value and (key.is_letter or not letters_only)
        ]

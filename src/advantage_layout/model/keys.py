from __future__ import annotations

from enum import Enum
from typing import FrozenSet, Iterable, Tuple, TypeAlias, Union

from pydantic import BaseModel, ConfigDict


class Layer(str, Enum):
    """Keypad addressing state of a key."""

    OFF = "off"
    ON = "on"


class Modifier(str, Enum):
    """Modifier keys; left/right are distinct. Declaration order is the sort order."""

    LEFT_SHIFT = "lshift"
    RIGHT_SHIFT = "rshift"
    LEFT_COMMAND = "lwin"
    RIGHT_COMMAND = "rwin"
    LEFT_CONTROL = "lctrl"
    RIGHT_CONTROL = "rctrl"
    LEFT_ALT = "lalt"
    RIGHT_ALT = "ralt"


class NonModifier(str, Enum):
    """Base keys, valued by their normal-layer token. Declaration order is the sort order."""

    F1 = "f1"
    F2 = "f2"
    F3 = "f3"
    F4 = "f4"
    F5 = "f5"
    F6 = "f6"
    F7 = "f7"
    F8 = "f8"
    F9 = "f9"
    F10 = "f10"
    F11 = "f11"
    F12 = "f12"
    ONE = "1"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    ZERO = "0"
    BACKTICK = "`"
    HYPHEN = "hyphen"
    EQUALS = "="
    A = "a"
    B = "b"
    C = "c"
    D = "d"
    E = "e"
    F = "f"
    G = "g"
    H = "h"
    I = "i"  # noqa: E741
    J = "j"
    K = "k"
    L = "l"
    M = "m"
    N = "n"
    O = "o"  # noqa: E741
    P = "p"
    Q = "q"
    R = "r"
    S = "s"
    T = "t"
    U = "u"
    V = "v"
    W = "w"
    X = "x"
    Y = "y"
    Z = "z"
    BACKSLASH = "\\"
    SEMICOLON = ";"
    QUOTE = "'"
    COMMA = ","
    FULL_STOP = "."
    FORWARD_SLASH = "/"
    OPEN_BRACKET = "obrack"
    CLOSE_BRACKET = "cbrack"
    ENTER = "enter"
    PAGE_UP = "pup"
    TAB = "tab"
    PAGE_DOWN = "pdown"
    SPACE = "space"
    LEFT_ARROW = "left"
    DELETE = "delete"
    RIGHT_ARROW = "right"
    BACKSPACE = "bspace"
    UP_ARROW = "up"
    INSERT = "insert"
    DOWN_ARROW = "down"
    HOME = "home"
    END = "end"


Key: TypeAlias = Union[Modifier, NonModifier]

DIGITS: Tuple[NonModifier, ...] = (
    NonModifier.ONE,
    NonModifier.TWO,
    NonModifier.THREE,
    NonModifier.FOUR,
    NonModifier.FIVE,
    NonModifier.SIX,
    NonModifier.SEVEN,
    NonModifier.EIGHT,
    NonModifier.NINE,
    NonModifier.ZERO,
)

_LAYER_ORDER = {layer: i for i, layer in enumerate(Layer)}
_MODIFIER_ORDER = {mod: i for i, mod in enumerate(Modifier)}
_NON_MODIFIER_ORDER = {key: i for i, key in enumerate(NonModifier)}

# Keys on the right half double as a numeric pad when the keypad layer is on.
KEYPAD_ALIASES: dict[NonModifier, str] = {
    NonModifier.SPACE: "kp0",
    NonModifier.M: "kp1",
    NonModifier.COMMA: "kp2",
    NonModifier.FULL_STOP: "kp3",
    NonModifier.J: "kp4",
    NonModifier.K: "kp5",
    NonModifier.L: "kp6",
    NonModifier.U: "kp7",
    NonModifier.I: "kp8",
    NonModifier.O: "kp9",
    NonModifier.SEVEN: "numlk",
    NonModifier.CLOSE_BRACKET: "k.",
    NonModifier.EIGHT: "k=",
    NonModifier.NINE: "kpdiv",
    NonModifier.SEMICOLON: "kpplus",
    NonModifier.ZERO: "kpmult",
    NonModifier.P: "kpmin",
    NonModifier.FORWARD_SLASH: "kpenter1",
}


def key_sort_key(key: Key) -> tuple[int, int]:
    """Total order over keys: every modifier sorts before every base key."""

    if isinstance(key, Modifier):
        return (0, _MODIFIER_ORDER[key])
    return (1, _NON_MODIFIER_ORDER[key])


def modifiers_sort_key(modifiers: Iterable[Modifier]) -> tuple[int, ...]:
    return tuple(sorted(_MODIFIER_ORDER[m] for m in modifiers))


def sorted_modifiers(modifiers: Iterable[Modifier]) -> list[Modifier]:
    return sorted(modifiers, key=_MODIFIER_ORDER.__getitem__)


def layer_sort_key(layer: Layer) -> int:
    return _LAYER_ORDER[layer]


def key_token(key: Key, layer: Layer = Layer.OFF) -> str:
    """Render the canonical importer token of `key` addressed under `layer`."""

    if layer is Layer.OFF:
        return key.value
    if isinstance(key, NonModifier) and key in KEYPAD_ALIASES:
        return KEYPAD_ALIASES[key]
    return f"kp-{key.value}"


class KeyLayer(BaseModel):
    """A physical key together with the layer it is addressed in."""

    model_config = ConfigDict(frozen=True)

    layer: Layer
    key: Key

    @classmethod
    def off(cls, key: Key) -> KeyLayer:
        return cls(layer=Layer.OFF, key=key)

    @classmethod
    def on(cls, key: Key) -> KeyLayer:
        return cls(layer=Layer.ON, key=key)

    def token(self) -> str:
        return key_token(self.key, self.layer)

    def sort_key(self) -> tuple:
        return (layer_sort_key(self.layer), key_sort_key(self.key))


class KeyPress(BaseModel):
    """One literal keystroke, optionally requiring shift."""

    model_config = ConfigDict(frozen=True)

    shifted: bool
    key: NonModifier

    @classmethod
    def with_shift(cls, key: NonModifier) -> KeyPress:
        return cls(shifted=True, key=key)

    @classmethod
    def not_shifted(cls, key: NonModifier) -> KeyPress:
        return cls(shifted=False, key=key)


class Shortcut(BaseModel):
    """A chord: held modifiers plus one base key, on a given layer.

    Used both as a macro trigger and as a chord emitted by a macro.
    """

    model_config = ConfigDict(frozen=True)

    layer: Layer = Layer.OFF
    modifiers: FrozenSet[Modifier] = frozenset()
    key: NonModifier

    @classmethod
    def keypad_off(cls, modifiers: Iterable[Modifier], key: NonModifier) -> Shortcut:
        return cls(layer=Layer.OFF, modifiers=frozenset(modifiers), key=key)

    @classmethod
    def keypad_on(cls, modifiers: Iterable[Modifier], key: NonModifier) -> Shortcut:
        return cls(layer=Layer.ON, modifiers=frozenset(modifiers), key=key)

    def sorted_modifiers(self) -> list[Modifier]:
        return sorted_modifiers(self.modifiers)

    def token(self) -> str:
        """Trigger form: `{mod}...{key}`, every token addressed in this shortcut's layer."""

        parts = [f"{{{key_token(m, self.layer)}}}" for m in self.sorted_modifiers()]
        parts.append(f"{{{key_token(self.key, self.layer)}}}")
        return "".join(parts)

    def sort_key(self) -> tuple:
        return (
            layer_sort_key(self.layer),
            modifiers_sort_key(self.modifiers),
            key_sort_key(self.key),
        )

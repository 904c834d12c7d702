from __future__ import annotations

from typing import List, Mapping

from advantage_layout.model.keys import (
    KEYPAD_ALIASES,
    Key,
    KeyLayer,
    Layer,
    Modifier,
    NonModifier,
    Shortcut,
)

_KEYPAD_PREFIX = "kp-"

_MODIFIER_TOKENS = {m.value: m for m in Modifier}
_KEY_TOKENS = {k.value: k for k in NonModifier}
_KEYPAD_TOKENS = {token: key for key, token in KEYPAD_ALIASES.items()}

ALIASES: Mapping[str, str] = {
    "shift": "lshift",
    "ctrl": "lctrl",
    "control": "lctrl",
    "alt": "lalt",
    "option": "lalt",
    "cmd": "lwin",
    "command": "lwin",
    "win": "lwin",
    "backtick": "`",
    "grave": "`",
    "-": "hyphen",
    "minus": "hyphen",
    "equals": "=",
    "backslash": "\\",
    "semicolon": ";",
    "quote": "'",
    "comma": ",",
    "period": ".",
    "dot": ".",
    "slash": "/",
    "lbracket": "obrack",
    "[": "obrack",
    "rbracket": "cbrack",
    "]": "cbrack",
    "return": "enter",
    "pageup": "pup",
    "pagedown": "pdown",
    "backspace": "bspace",
    "del": "delete",
    "ins": "insert",
    "left_arrow": "left",
    "right_arrow": "right",
    "up_arrow": "up",
    "down_arrow": "down",
}


def _normalize(token: str) -> str:
    token = token.strip().lower()
    return ALIASES.get(token, token)


def parse_key(token: str) -> Key:
    """Parse a single key token (modifier or base key) in normal-layer spelling."""

    normalized = _normalize(token)
    if normalized in _MODIFIER_TOKENS:
        return _MODIFIER_TOKENS[normalized]
    if normalized in _KEY_TOKENS:
        return _KEY_TOKENS[normalized]
    raise ValueError(f"unknown key: {token!r}")


def parse_key_layer(token: str) -> KeyLayer:
    """Parse a key token; `kp-<key>` and keypad aliases such as `kp0` address the keypad layer."""

    raw = token.strip().lower()
    if not raw:
        raise ValueError("key expression is empty")
    if raw in _KEYPAD_TOKENS:
        return KeyLayer.on(_KEYPAD_TOKENS[raw])
    if raw.startswith(_KEYPAD_PREFIX) and len(raw) > len(_KEYPAD_PREFIX):
        return KeyLayer.on(parse_key(raw[len(_KEYPAD_PREFIX):]))
    return KeyLayer.off(parse_key(raw))


def parse_non_modifier(token: str) -> NonModifier:
    key = parse_key(token)
    if not isinstance(key, NonModifier):
        raise ValueError(f"expected a non-modifier key, got {token!r}")
    return key


def parse_shortcut(expr: str, *, keypad: bool = False, chord_sep: str = "+") -> Shortcut:
    """Parse `mod+mod+key` into a Shortcut. The last token is the base key."""

    tokens: List[str] = [t.strip() for t in expr.split(chord_sep)]
    if not expr.strip() or any(not t for t in tokens):
        raise ValueError(f"invalid shortcut expression: {expr!r}")

    *mod_tokens, key_token = tokens
    modifiers = set()
    for token in mod_tokens:
        key = parse_key(token)
        if not isinstance(key, Modifier):
            raise ValueError(f"invalid shortcut expression (not a modifier: {token!r}): {expr!r}")
        modifiers.add(key)

    try:
        base = parse_non_modifier(key_token)
    except ValueError as exc:
        raise ValueError(f"invalid shortcut expression: {expr!r}: {exc}") from exc

    layer = Layer.ON if keypad else Layer.OFF
    return Shortcut(layer=layer, modifiers=frozenset(modifiers), key=base)

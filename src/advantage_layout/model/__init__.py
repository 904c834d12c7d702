from __future__ import annotations

from .commands import Command, Platform, resolve_command
from .configure import Configure, Layout
from .keys import Key, KeyLayer, KeyPress, Layer, Modifier, NonModifier, Shortcut
from .layouts import LAYOUTS, colemak
from .macros import (
    CommandOutput,
    KeyPresses,
    Macro,
    MacroBuilder,
    PendingMacro,
    ShortcutOutput,
    UnsupportedCharacterError,
)

__all__ = [
    "Command",
    "CommandOutput",
    "Configure",
    "Key",
    "KeyLayer",
    "KeyPress",
    "KeyPresses",
    "LAYOUTS",
    "Layer",
    "Layout",
    "Macro",
    "MacroBuilder",
    "Modifier",
    "NonModifier",
    "PendingMacro",
    "Platform",
    "Shortcut",
    "ShortcutOutput",
    "UnsupportedCharacterError",
    "colemak",
    "resolve_command",
]

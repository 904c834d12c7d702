from __future__ import annotations

from .config import Config, MacroConfig, MacroStepConfig, RemapConfig
from .dsl import parse_key, parse_key_layer, parse_non_modifier, parse_shortcut
from .frontend import ShortcutFrontend, build_macro

__all__ = [
    "Config",
    "MacroConfig",
    "MacroStepConfig",
    "RemapConfig",
    "ShortcutFrontend",
    "build_macro",
    "parse_key",
    "parse_key_layer",
    "parse_non_modifier",
    "parse_shortcut",
]

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict
import logging
import tomllib

from advantage_layout.model.configure import Configure
from advantage_layout.model.keys import NonModifier
from advantage_layout.model.layouts import LAYOUTS
from advantage_layout.model.macros import MacroBuilder, PendingMacro

from .config import Config, MacroConfig, RemapConfig
from .dsl import parse_key, parse_key_layer, parse_non_modifier, parse_shortcut

logger = logging.getLogger(__name__)

_ARROWS = {
    "left": NonModifier.LEFT_ARROW,
    "right": NonModifier.RIGHT_ARROW,
    "up": NonModifier.UP_ARROW,
    "down": NonModifier.DOWN_ARROW,
}


class ShortcutFrontend:
    """Parse a layout config (TOML) into a `Configure` builder."""

    def load_toml(self, path: str | Path) -> Dict[str, Any]:
        """Load a TOML config file into a dict."""

        path = Path(path)
        return tomllib.loads(path.read_text(encoding="utf-8"))

    def parse_config(self, config: Dict[str, Any]) -> Configure:
        cfg = Config.model_validate(config)
        builder = Configure(cfg.platform)

        # Base layout first so explicit remaps below override it.
        if cfg.base_layout:
            try:
                table = LAYOUTS[cfg.base_layout.lower()]
            except KeyError:
                raise ValueError(
                    f"unknown base layout {cfg.base_layout!r}; known: {sorted(LAYOUTS)}"
                ) from None
            logger.debug("applying base layout %s", cfg.base_layout)
            builder.with_remappings(table())

        for remap in cfg.remap:
            _apply_remap(builder, remap)

        for token in cfg.remove:
            builder.remove_remap(parse_key(token))
        for token in cfg.remove_keypad:
            builder.remove_remap_keypad(parse_key(token))

        for token in cfg.dead:
            builder.dead_key(parse_key(token))
        for token in cfg.dead_keypad:
            builder.keypad_dead_key(parse_key(token))

        if cfg.invert_numbers:
            builder.invert_numbers()
        for token in cfg.invert:
            builder.invert_key(parse_non_modifier(token))
        for token in cfg.invert_keypad:
            builder.invert_keypad_key(parse_non_modifier(token))

        for macro in cfg.macro:
            builder.with_macro(
                parse_shortcut(macro.trigger, keypad=macro.keypad),
                build_macro(macro),
            )

        return builder


def _apply_remap(builder: Configure, remap: RemapConfig) -> None:
    if remap.layer == "permissive":
        builder.remap_permissive(parse_key_layer(remap.from_), parse_key_layer(remap.to))
        return

    old_key = parse_key(remap.from_)
    new_key = parse_key(remap.to)
    if remap.layer == "off":
        builder.remap(old_key, new_key)
    elif remap.layer == "on":
        builder.remap_keypad(old_key, new_key)
    else:
        builder.remap_all(old_key, new_key)


def build_macro(macro: MacroConfig) -> PendingMacro:
    builder = MacroBuilder()
    for step in macro.steps:
        if step.text is not None:
            builder.with_string(step.text)
        elif step.cursor is not None:
            builder.cursor(_ARROWS[step.cursor], step.count)
        elif step.shortcut is not None:
            builder.with_shortcut(parse_shortcut(step.shortcut, keypad=step.keypad))
        elif step.command is not None:
            builder.with_command(step.command)
    return builder.make()

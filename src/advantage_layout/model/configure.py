from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from .commands import Platform
from .keys import DIGITS, Key, KeyLayer, Modifier, NonModifier, Shortcut
from .macros import Macro, MacroBuilder, PendingMacro

logger = logging.getLogger(__name__)

RemapTable = Dict[KeyLayer, Optional[KeyLayer]]


class Layout(BaseModel):
    """Finalized keyboard layout: remaps plus macros resolved for one platform.

    Built by `Configure.make`; holds its own copies of both tables.
    """

    model_config = ConfigDict(frozen=True)

    remappings: Mapping[KeyLayer, Optional[KeyLayer]]
    macros: Mapping[Shortcut, Macro]

    @field_validator("remappings", "macros", mode="after")
    @classmethod
    def _read_only(cls, value: Mapping) -> Mapping:
        return MappingProxyType(dict(value))


class Configure:
    """Builder for a `Layout`.

    Every mutator returns the builder so calls can be chained. Registering a
    remap or macro on a key that already has one replaces the old entry.
    """

    def __init__(self, platform: Platform = Platform.PC) -> None:
        self.platform = Platform(platform)
        self.remappings: RemapTable = {}
        self.macros: Dict[Shortcut, PendingMacro] = {}

    def set_platform(self, platform: Platform) -> Configure:
        self.platform = Platform(platform)
        return self

    def _set_remap(self, source: KeyLayer, target: Optional[KeyLayer]) -> Configure:
        if source in self.remappings:
            logger.debug("overwriting remap of %s", source.token())
        self.remappings[source] = target
        return self

    def remap(self, old_key: Key, new_key: Key) -> Configure:
        return self._set_remap(KeyLayer.off(old_key), KeyLayer.off(new_key))

    def remap_keypad(self, old_key: Key, new_key: Key) -> Configure:
        return self._set_remap(KeyLayer.on(old_key), KeyLayer.on(new_key))

    def remap_all(self, old_key: Key, new_key: Key) -> Configure:
        """Remap `old_key` to `new_key` in both the normal and keypad layers."""

        self.remap(old_key, new_key)
        return self.remap_keypad(old_key, new_key)

    def remap_permissive(self, old_key: KeyLayer, new_key: KeyLayer) -> Configure:
        """Remap between arbitrary layers, e.g. a normal key onto a keypad key.

        Prefer `remap`, `remap_keypad` or `remap_all` when both keys share a layer.
        """

        return self._set_remap(old_key, new_key)

    def with_remappings(self, remappings: Mapping[KeyLayer, Optional[KeyLayer]]) -> Configure:
        """Merge a whole remap table, such as an alternate base layout."""

        for source, target in remappings.items():
            self._set_remap(source, target)
        return self

    def dead_key(self, key: Key) -> Configure:
        return self._set_remap(KeyLayer.off(key), None)

    def keypad_dead_key(self, key: Key) -> Configure:
        return self._set_remap(KeyLayer.on(key), None)

    def remove_remap(self, key: Key) -> Configure:
        source = KeyLayer.off(key)
        if source in self.remappings:
            del self.remappings[source]
            logger.debug("removed remap of %s", source.token())
        return self

    def remove_remap_keypad(self, key: Key) -> Configure:
        source = KeyLayer.on(key)
        if source in self.remappings:
            del self.remappings[source]
            logger.debug("removed remap of %s", source.token())
        return self

    def with_macro(self, shortcut: Shortcut, macro: PendingMacro) -> Configure:
        if shortcut in self.macros:
            logger.debug("overwriting macro on %s", shortcut.token())
        self.macros[shortcut] = macro
        return self

    def _invert(self, plain: Shortcut, shifted: Shortcut) -> Configure:
        self.with_macro(plain, MacroBuilder().with_shortcut(shifted).make())
        return self.with_macro(shifted, MacroBuilder().with_shortcut(plain).make())

    def invert_key(self, key: NonModifier) -> Configure:
        """Swap the shifted and unshifted output of `key`, e.g. `5` types `%`."""

        return self._invert(
            Shortcut.keypad_off((), key),
            Shortcut.keypad_off({Modifier.RIGHT_SHIFT}, key),
        )

    def invert_keypad_key(self, key: NonModifier) -> Configure:
        return self._invert(
            Shortcut.keypad_on((), key),
            Shortcut.keypad_on({Modifier.RIGHT_SHIFT}, key),
        )

    def invert_numbers(self) -> Configure:
        """Invert the number row (1-9) so symbols are typed without shift."""

        for digit in DIGITS:
            if digit is NonModifier.ZERO:
                continue
            self.invert_key(digit)
        return self

    def make(self) -> Layout:
        return Layout(
            remappings=dict(self.remappings),
            macros={
                shortcut: macro.resolve(self.platform)
                for shortcut, macro in self.macros.items()
            },
        )

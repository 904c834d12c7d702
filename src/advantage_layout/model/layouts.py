from __future__ import annotations

from typing import Callable, Dict, Optional

from .keys import KeyLayer, NonModifier

RemapTable = Dict[KeyLayer, Optional[KeyLayer]]

_COLEMAK = (
    ("t", "g"),
    ("r", "p"),
    ("e", "f"),
    ("g", "d"),
    ("f", "t"),
    ("d", "s"),
    ("s", "r"),
    ("y", "j"),
    ("u", "l"),
    ("i", "u"),
    ("o", "y"),
    ("p", ";"),
    ("j", "n"),
    ("k", "e"),
    ("l", "i"),
    (";", "o"),
    ("n", "k"),
)


def colemak() -> RemapTable:
    """Normal-layer remaps that turn the QWERTY base layer into Colemak."""

    return {
        KeyLayer.off(NonModifier(old)): KeyLayer.off(NonModifier(new))
        for old, new in _COLEMAK
    }


LAYOUTS: Dict[str, Callable[[], RemapTable]] = {
    "colemak": colemak,
}

"""Build Kinesis Advantage keyboard layouts (remaps and macros) in Python."""

from __future__ import annotations

from .kinesis import KinesisBackend, serialize
from .model import (
    Command,
    Configure,
    KeyLayer,
    Layer,
    Layout,
    MacroBuilder,
    Modifier,
    NonModifier,
    Platform,
    Shortcut,
    colemak,
)

__all__ = [
    "Command",
    "Configure",
    "KeyLayer",
    "KinesisBackend",
    "Layer",
    "Layout",
    "MacroBuilder",
    "Modifier",
    "NonModifier",
    "Platform",
    "Shortcut",
    "colemak",
    "serialize",
]

from __future__ import annotations

from .backend import KinesisBackend, serialize
from .compiler import compile_toml_config

__all__ = [
    "KinesisBackend",
    "compile_toml_config",
    "serialize",
]

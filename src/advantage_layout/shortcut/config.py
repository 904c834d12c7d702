from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from advantage_layout.model.commands import Command, Platform


class RemapConfig(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    from_: str = Field(alias="from")
    to: str
    layer: Literal["off", "on", "all", "permissive"] = "off"


class MacroStepConfig(BaseModel):
    """One macro fragment; exactly one of text/cursor/shortcut/command is set."""

    text: Optional[str] = None
    cursor: Optional[Literal["left", "right", "up", "down"]] = None
    count: int = Field(default=1, ge=0)
    shortcut: Optional[str] = None
    keypad: bool = False
    command: Optional[Command] = None

    @model_validator(mode="after")
    def _one_kind(self) -> MacroStepConfig:
        kinds = [k for k in ("text", "cursor", "shortcut", "command") if getattr(self, k) is not None]
        if len(kinds) != 1:
            raise ValueError(
                f"macro step needs exactly one of text/cursor/shortcut/command, got {kinds or 'none'}"
            )
        return self


class MacroConfig(BaseModel):
    trigger: str
    keypad: bool = False
    steps: List[MacroStepConfig] = Field(default_factory=list)


class Config(BaseModel):
    description: str | None = None
    platform: Platform = Platform.PC
    base_layout: str | None = None
    invert_numbers: bool = False
    invert: List[str] = Field(default_factory=list)
    invert_keypad: List[str] = Field(default_factory=list)
    remap: List[RemapConfig] = Field(default_factory=list)
    remove: List[str] = Field(default_factory=list)
    remove_keypad: List[str] = Field(default_factory=list)
    dead: List[str] = Field(default_factory=list)
    dead_keypad: List[str] = Field(default_factory=list)
    macro: List[MacroConfig] = Field(default_factory=list)

from __future__ import annotations

from enum import Enum

from .keys import Modifier, NonModifier, Shortcut


class Command(str, Enum):
    """Platform-agnostic editing action, resolved to a chord per platform."""

    COPY = "copy"
    PASTE = "paste"
    CUT = "cut"
    UNDO = "undo"
    JUMP_FORWARD = "jump_forward"
    JUMP_BACK = "jump_back"
    LINE_END = "line_end"
    LINE_START = "line_start"


class Platform(str, Enum):
    PC = "pc"
    MAC = "mac"


def _chord(key: NonModifier, *modifiers: Modifier) -> Shortcut:
    return Shortcut.keypad_off(modifiers, key)


_CTRL = Modifier.LEFT_CONTROL
_CMD = Modifier.LEFT_COMMAND
_ALT = Modifier.LEFT_ALT

COMMAND_TABLE: dict[Platform, dict[Command, Shortcut]] = {
    Platform.PC: {
        Command.COPY: _chord(NonModifier.C, _CTRL),
        Command.PASTE: _chord(NonModifier.V, _CTRL),
        Command.CUT: _chord(NonModifier.X, _CTRL),
        Command.UNDO: _chord(NonModifier.Z, _CTRL),
        Command.JUMP_FORWARD: _chord(NonModifier.RIGHT_ARROW, _CTRL),
        # Same chord as COPY; listed in FLAGGED_RESOLUTIONS until confirmed.
        Command.JUMP_BACK: _chord(NonModifier.C, _CTRL),
        Command.LINE_END: _chord(NonModifier.END),
        Command.LINE_START: _chord(NonModifier.HOME),
    },
    Platform.MAC: {
        Command.COPY: _chord(NonModifier.C, _CMD),
        Command.PASTE: _chord(NonModifier.V, _CMD),
        Command.CUT: _chord(NonModifier.X, _CMD),
        Command.UNDO: _chord(NonModifier.Z, _CMD),
        Command.JUMP_FORWARD: _chord(NonModifier.RIGHT_ARROW, _ALT),
        Command.JUMP_BACK: _chord(NonModifier.LEFT_ARROW, _ALT),
        Command.LINE_END: _chord(NonModifier.LEFT_ARROW, _CMD),
        Command.LINE_START: _chord(NonModifier.RIGHT_ARROW, _CMD),
    },
}

# Table entries that look like transcription errors but are kept as-is:
# PC jump-back repeats copy, and the Mac line-end/line-start pair reads as swapped.
FLAGGED_RESOLUTIONS: frozenset[tuple[Platform, Command]] = frozenset(
    {
        (Platform.PC, Command.JUMP_BACK),
        (Platform.MAC, Command.LINE_END),
        (Platform.MAC, Command.LINE_START),
    }
)


def resolve_command(command: Command, platform: Platform) -> Shortcut:
    """Return the concrete chord that performs `command` on `platform`."""

    return COMMAND_TABLE[Platform(platform)][Command(command)]

from __future__ import annotations

import pytest

from advantage_layout.model.commands import (
    COMMAND_TABLE,
    FLAGGED_RESOLUTIONS,
    Command,
    Platform,
    resolve_command,
)
from advantage_layout.model.keys import Modifier, NonModifier, Shortcut


def test_every_command_resolves_on_every_platform() -> None:
    for platform in Platform:
        assert set(COMMAND_TABLE[platform]) == set(Command)
        for command in Command:
            assert isinstance(resolve_command(command, platform), Shortcut)


def test_copy_resolution() -> None:
    assert resolve_command(Command.COPY, Platform.PC) == Shortcut.keypad_off(
        {Modifier.LEFT_CONTROL}, NonModifier.C
    )
    assert resolve_command(Command.COPY, Platform.MAC) == Shortcut.keypad_off(
        {Modifier.LEFT_COMMAND}, NonModifier.C
    )


def test_line_end_resolution() -> None:
    assert resolve_command(Command.LINE_END, Platform.PC) == Shortcut.keypad_off(
        (), NonModifier.END
    )
    assert resolve_command(Command.LINE_END, Platform.MAC) == Shortcut.keypad_off(
        {Modifier.LEFT_COMMAND}, NonModifier.LEFT_ARROW
    )


def test_jump_back_on_pc_is_kept_and_flagged() -> None:
    assert resolve_command(Command.JUMP_BACK, Platform.PC) == resolve_command(
        Command.COPY, Platform.PC
    )
    assert (Platform.PC, Command.JUMP_BACK) in FLAGGED_RESOLUTIONS


def test_resolve_accepts_plain_values() -> None:
    assert resolve_command("undo", "mac") == Shortcut.keypad_off(
        {Modifier.LEFT_COMMAND}, NonModifier.Z
    )


def test_mac_line_end_and_start_are_flagged() -> None:
    assert (Platform.MAC, Command.LINE_END) in FLAGGED_RESOLUTIONS
    assert (Platform.MAC, Command.LINE_START) in FLAGGED_RESOLUTIONS
    assert len(FLAGGED_RESOLUTIONS) == 3


_CTRL = Modifier.LEFT_CONTROL
_CMD = Modifier.LEFT_COMMAND
_ALT = Modifier.LEFT_ALT


@pytest.mark.parametrize(
    "command, platform, modifiers, key",
    [
        (Command.COPY, Platform.PC, {_CTRL}, NonModifier.C),
        (Command.PASTE, Platform.PC, {_CTRL}, NonModifier.V),
        (Command.CUT, Platform.PC, {_CTRL}, NonModifier.X),
        (Command.UNDO, Platform.PC, {_CTRL}, NonModifier.Z),
        (Command.JUMP_FORWARD, Platform.PC, {_CTRL}, NonModifier.RIGHT_ARROW),
        (Command.JUMP_BACK, Platform.PC, {_CTRL}, NonModifier.C),
        (Command.LINE_END, Platform.PC, set(), NonModifier.END),
        (Command.LINE_START, Platform.PC, set(), NonModifier.HOME),
        (Command.COPY, Platform.MAC, {_CMD}, NonModifier.C),
        (Command.PASTE, Platform.MAC, {_CMD}, NonModifier.V),
        (Command.CUT, Platform.MAC, {_CMD}, NonModifier.X),
        (Command.UNDO, Platform.MAC, {_CMD}, NonModifier.Z),
        (Command.JUMP_FORWARD, Platform.MAC, {_ALT}, NonModifier.RIGHT_ARROW),
        (Command.JUMP_BACK, Platform.MAC, {_ALT}, NonModifier.LEFT_ARROW),
        (Command.LINE_END, Platform.MAC, {_CMD}, NonModifier.LEFT_ARROW),
        (Command.LINE_START, Platform.MAC, {_CMD}, NonModifier.RIGHT_ARROW),
    ],
)
def test_resolution_table(
    command: Command, platform: Platform, modifiers: set[Modifier], key: NonModifier
) -> None:
    assert resolve_command(command, platform) == Shortcut.keypad_off(modifiers, key)

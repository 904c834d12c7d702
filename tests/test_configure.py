from __future__ import annotations

import pytest

from advantage_layout.model.commands import Command, Platform
from advantage_layout.model.configure import Configure
from advantage_layout.model.keys import KeyLayer, Modifier, NonModifier, Shortcut
from advantage_layout.model.layouts import colemak
from advantage_layout.model.macros import MacroBuilder


def test_remap_overwrites_previous_target() -> None:
    builder = Configure().remap(NonModifier.A, NonModifier.B).remap(NonModifier.A, NonModifier.C)
    assert builder.remappings == {KeyLayer.off(NonModifier.A): KeyLayer.off(NonModifier.C)}


def test_remap_all_touches_both_layers() -> None:
    builder = Configure().remap_all(NonModifier.Q, NonModifier.W)
    assert builder.remappings == {
        KeyLayer.off(NonModifier.Q): KeyLayer.off(NonModifier.W),
        KeyLayer.on(NonModifier.Q): KeyLayer.on(NonModifier.W),
    }


def test_remap_permissive_crosses_layers() -> None:
    builder = Configure().remap_permissive(
        KeyLayer.off(NonModifier.F1),
        KeyLayer.on(NonModifier.SPACE),
    )
    assert builder.remappings[KeyLayer.off(NonModifier.F1)] == KeyLayer.on(NonModifier.SPACE)


def test_dead_keys_and_removal() -> None:
    builder = (
        Configure()
        .dead_key(NonModifier.BACKTICK)
        .keypad_dead_key(NonModifier.BACKTICK)
        .remove_remap(NonModifier.BACKTICK)
    )
    assert builder.remappings == {KeyLayer.on(NonModifier.BACKTICK): None}

    builder.remove_remap_keypad(NonModifier.BACKTICK).remove_remap_keypad(NonModifier.A)
    assert builder.remappings == {}


def test_with_remappings_merges_and_overwrites() -> None:
    builder = Configure().remap(NonModifier.T, NonModifier.Z).with_remappings(colemak())
    assert builder.remappings[KeyLayer.off(NonModifier.T)] == KeyLayer.off(NonModifier.G)
    assert len(builder.remappings) == 17

    builder.remove_remap(NonModifier.T)
    assert KeyLayer.off(NonModifier.T) not in builder.remappings
    assert KeyLayer.off(NonModifier.T) in colemak()


def test_invert_key_registers_two_inverse_macros() -> None:
    layout = Configure().invert_key(NonModifier.FIVE).make()
    plain = Shortcut.keypad_off((), NonModifier.FIVE)
    shifted = Shortcut.keypad_off({Modifier.RIGHT_SHIFT}, NonModifier.FIVE)

    assert set(layout.macros) == {plain, shifted}
    assert layout.macros[plain].render() == "{-rshift}{5}{+rshift}"
    assert layout.macros[shifted].render() == "{5}"


def test_invert_keypad_key_uses_keypad_layer() -> None:
    layout = Configure().invert_keypad_key(NonModifier.J).make()
    assert layout.macros[Shortcut.keypad_on((), NonModifier.J)].render() == "{-rshift}{kp4}{+rshift}"


def test_invert_numbers_covers_one_to_nine() -> None:
    layout = Configure().invert_numbers().make()
    assert len(layout.macros) == 18
    assert Shortcut.keypad_off((), NonModifier.ZERO) not in layout.macros


def test_make_resolves_against_platform() -> None:
    trigger = Shortcut.keypad_off({Modifier.LEFT_ALT}, NonModifier.C)
    builder = Configure().with_macro(trigger, MacroBuilder().with_command(Command.COPY).make())

    assert builder.make().macros[trigger].render() == "{-lctrl}{c}{+lctrl}"
    builder.set_platform(Platform.MAC)
    assert builder.make().macros[trigger].render() == "{-lwin}{c}{+lwin}"


def test_layout_is_independent_of_later_mutation() -> None:
    builder = Configure().remap(NonModifier.A, NonModifier.B)
    layout = builder.make()

    builder.remap(NonModifier.A, NonModifier.C).dead_key(NonModifier.Q).invert_numbers()

    assert layout.remappings == {KeyLayer.off(NonModifier.A): KeyLayer.off(NonModifier.B)}
    assert layout.macros == {}


def test_with_macro_overwrites_trigger() -> None:
    trigger = Shortcut.keypad_off({Modifier.LEFT_ALT}, NonModifier.X)
    layout = (
        Configure()
        .with_macro(trigger, MacroBuilder.from_string("one").make())
        .with_macro(trigger, MacroBuilder.from_string("two").make())
        .make()
    )
    assert len(layout.macros) == 1
    assert layout.macros[trigger].render() == "{t}{w}{o}"


def test_layout_tables_are_read_only() -> None:
    trigger = Shortcut.keypad_off({Modifier.LEFT_ALT}, NonModifier.X)
    layout = (
        Configure()
        .remap(NonModifier.A, NonModifier.B)
        .with_macro(trigger, MacroBuilder.from_string("x").make())
        .make()
    )

    with pytest.raises(TypeError):
        layout.remappings[KeyLayer.off(NonModifier.Q)] = None  # type: ignore[index]
    with pytest.raises(TypeError):
        del layout.macros[trigger]  # type: ignore[attr-defined]

    assert len(layout.remappings) == 1
    assert len(layout.macros) == 1

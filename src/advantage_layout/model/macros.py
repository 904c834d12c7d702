from __future__ import annotations

from typing import Annotated, List, Literal, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from .commands import Command, Platform, resolve_command
from .keys import KeyPress, Modifier, NonModifier, Shortcut, key_token

SHIFT_TOKEN = Modifier.LEFT_SHIFT.value


class UnsupportedCharacterError(ValueError):
    """Raised when macro text contains a character the keyboard cannot type."""

    def __init__(self, char: str, text: str) -> None:
        super().__init__(f"unsupported character {char!r} in macro text: {text!r}")
        self.char = char
        self.text = text


def _build_char_table() -> dict[str, KeyPress]:
    pairs = {
        NonModifier.ONE: "1!",
        NonModifier.TWO: "2@",
        NonModifier.THREE: "3#",
        NonModifier.FOUR: "4$",
        NonModifier.FIVE: "5%",
        NonModifier.SIX: "6^",
        NonModifier.SEVEN: "7&",
        NonModifier.EIGHT: "8*",
        NonModifier.NINE: "9(",
        NonModifier.ZERO: "0)",
        NonModifier.BACKTICK: "`~",
        NonModifier.HYPHEN: "-_",
        NonModifier.EQUALS: "=+",
        NonModifier.BACKSLASH: "\\|",
        NonModifier.SEMICOLON: ";:",
        NonModifier.QUOTE: "'\"",
        NonModifier.COMMA: ",<",
        NonModifier.FULL_STOP: ".>",
        NonModifier.FORWARD_SLASH: "/?",
        NonModifier.OPEN_BRACKET: "[{",
        NonModifier.CLOSE_BRACKET: "]}",
    }
    table: dict[str, KeyPress] = {}
    for key, (plain, shifted) in pairs.items():
        table[plain] = KeyPress.not_shifted(key)
        table[shifted] = KeyPress.with_shift(key)
    for letter in "abcdefghijklmnopqrstuvwxyz":
        key = NonModifier(letter)
        table[letter] = KeyPress.not_shifted(key)
        table[letter.upper()] = KeyPress.with_shift(key)
    table[" "] = KeyPress.not_shifted(NonModifier.SPACE)
    table["\t"] = KeyPress.not_shifted(NonModifier.TAB)
    table["\n"] = KeyPress.not_shifted(NonModifier.ENTER)
    return table


CHAR_TABLE: dict[str, KeyPress] = _build_char_table()


def text_presses(text: str) -> Tuple[KeyPress, ...]:
    """Translate literal text into keystrokes; the shifted flag carries case and symbols."""

    presses: List[KeyPress] = []
    for char in text:
        press = CHAR_TABLE.get(char)
        if press is None:
            raise UnsupportedCharacterError(char, text)
        presses.append(press)
    return tuple(presses)


class KeyPresses(BaseModel):
    """Literal keystrokes: typed text or cursor movement."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["keys"] = "keys"
    presses: Tuple[KeyPress, ...]

    def render(self) -> str:
        # Shift is held across runs of shifted keys instead of wrapping each one.
        out: List[str] = []
        held = False
        for press in self.presses:
            if press.shifted and not held:
                held = True
                out.append(f"{{-{SHIFT_TOKEN}}}")
            elif held and not press.shifted:
                held = False
                out.append(f"{{+{SHIFT_TOKEN}}}")
            out.append(f"{{{press.key.value}}}")
        if held:
            out.append(f"{{+{SHIFT_TOKEN}}}")
        return "".join(out)


class ShortcutOutput(BaseModel):
    """A chord emitted by a macro."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["shortcut"] = "shortcut"
    shortcut: Shortcut

    def render(self) -> str:
        # Presses in reverse sorted order, releases in sorted order.
        mods = self.shortcut.sorted_modifiers()
        press = "".join(f"{{-{m.value}}}" for m in reversed(mods))
        release = "".join(f"{{+{m.value}}}" for m in mods)
        key = key_token(self.shortcut.key, self.shortcut.layer)
        return f"{press}{{{key}}}{release}"


class CommandOutput(BaseModel):
    """An agnostic editing command, replaced by a chord when the macro is resolved."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["command"] = "command"
    command: Command

    def resolve(self, platform: Platform) -> ShortcutOutput:
        return ShortcutOutput(shortcut=resolve_command(self.command, platform))


MacroFragment = Annotated[
    Union[KeyPresses, ShortcutOutput],
    Field(discriminator="kind"),
]

PendingFragment = Annotated[
    Union[KeyPresses, ShortcutOutput, CommandOutput],
    Field(discriminator="kind"),
]


class Macro(BaseModel):
    """A resolved macro: only keystrokes and concrete chords remain."""

    model_config = ConfigDict(frozen=True)

    fragments: Tuple[MacroFragment, ...] = ()

    def render(self) -> str:
        return "".join(fragment.render() for fragment in self.fragments)


class PendingMacro(BaseModel):
    """A macro as built; may still contain platform-agnostic commands."""

    model_config = ConfigDict(frozen=True)

    fragments: Tuple[PendingFragment, ...] = ()

    def resolve(self, platform: Platform) -> Macro:
        resolved: List[Union[KeyPresses, ShortcutOutput]] = []
        for fragment in self.fragments:
            if isinstance(fragment, CommandOutput):
                resolved.append(fragment.resolve(platform))
            elif isinstance(fragment, (KeyPresses, ShortcutOutput)):
                resolved.append(fragment)
            else:
                raise TypeError(f"unknown macro fragment: {fragment!r}")
        return Macro(fragments=tuple(resolved))


class MacroBuilder:
    """Accumulate macro fragments in call order."""

    def __init__(self) -> None:
        self._fragments: List[Union[KeyPresses, ShortcutOutput, CommandOutput]] = []

    @classmethod
    def from_string(cls, text: str) -> MacroBuilder:
        return cls().with_string(text)

    def with_string(self, text: str) -> MacroBuilder:
        self._fragments.append(KeyPresses(presses=text_presses(text)))
        return self

    def with_keys(self, presses: Tuple[KeyPress, ...]) -> MacroBuilder:
        self._fragments.append(KeyPresses(presses=tuple(presses)))
        return self

    def cursor(self, arrow: NonModifier, times: int) -> MacroBuilder:
        if times < 0:
            raise ValueError(f"cursor repeat count must be >= 0, got {times}")
        return self.with_keys(tuple(KeyPress.not_shifted(arrow) for _ in range(times)))

    def cursor_left(self, times: int) -> MacroBuilder:
        return self.cursor(NonModifier.LEFT_ARROW, times)

    def cursor_right(self, times: int) -> MacroBuilder:
        return self.cursor(NonModifier.RIGHT_ARROW, times)

    def cursor_up(self, times: int) -> MacroBuilder:
        return self.cursor(NonModifier.UP_ARROW, times)

    def cursor_down(self, times: int) -> MacroBuilder:
        return self.cursor(NonModifier.DOWN_ARROW, times)

    def with_shortcut(self, shortcut: Shortcut) -> MacroBuilder:
        self._fragments.append(ShortcutOutput(shortcut=shortcut))
        return self

    def with_command(self, command: Command) -> MacroBuilder:
        self._fragments.append(CommandOutput(command=command))
        return self

    def make(self) -> PendingMacro:
        return PendingMacro(fragments=tuple(self._fragments))

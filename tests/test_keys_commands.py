from __future__ import annotations

import pytest

from vie import commands
from vie.backend.keys import Key, KeyCode, keys_from_text
from vie.commands import Command, CommandKind, ModeKind


@pytest.mark.parametrize(
    ("key", "token"),
    [
        (Key.character("j"), "j"),
        (Key.character(":"), ":"),
        (Key.ctrl("Q"), "ctrl+q"),
        (Key.of(KeyCode.ESC), "ESC"),
        (Key.of(KeyCode.PAGE_UP), "PAGE_UP"),
    ],
)
def test_key_tokens(key: Key, token: str) -> None:
    assert key.token == token


def test_character_keys_need_one_character() -> None:
    with pytest.raises(ValueError):
        Key(KeyCode.CHAR)
    with pytest.raises(ValueError):
        Key.character("ab")
    with pytest.raises(ValueError):
        Key(KeyCode.ENTER, "x")


def test_printable_only_for_visible_characters() -> None:
    assert Key.character("a").printable
    assert not Key.character("\x07").printable
    assert not Key.ctrl("a").printable
    assert not Key.of(KeyCode.TAB).printable


def test_keys_from_text() -> None:
    assert keys_from_text("1j") == [Key.character("1"), Key.character("j")]


def test_commands_compare_by_value() -> None:
    assert commands.move_down(12) == Command(CommandKind.MOVE_CURSOR_DOWN, 12)
    assert commands.move_down(12) != commands.move_down(1)
    assert commands.enter_mode(ModeKind.EXECUTE).mode is ModeKind.EXECUTE


@pytest.mark.parametrize(
    ("kind", "argument"),
    [
        (CommandKind.MOVE_CURSOR_UP, 0),
        (CommandKind.MOVE_CURSOR_UP, True),
        (CommandKind.INSERT_CHAR, "ab"),
        (CommandKind.ENTER_MODE, "normal"),
        (CommandKind.SAVE_AS, ""),
        (CommandKind.QUIT, "now"),
    ],
)
def test_command_arguments_are_validated(kind: CommandKind, argument: object) -> None:
    with pytest.raises((TypeError, ValueError)):
        Command(kind, argument)


def test_count_defaults_to_one_for_uncounted_commands() -> None:
    assert commands.save().count == 1
    assert commands.move_left(4).count == 4


def test_mode_labels() -> None:
    assert [kind.label for kind in ModeKind] == ["NORMAL", "INSERT", "EXECUTE"]

from __future__ import annotations

import pytest

from vie import commands
from vie.command_line import PROMPT, CommandLine, parse_command_line
from vie.commands import ModeKind


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        (":q", commands.quit_editor()),
        (":w", commands.save()),
        (":w notes.txt", commands.save_as("notes.txt")),
        (":w my notes.txt", commands.save_as("my notes.txt")),
    ],
)
def test_grammar_recognises_commands(text: str, expected: commands.Command) -> None:
    assert parse_command_line(text) == expected


@pytest.mark.parametrize(
    "text",
    [":x", ":", "", "q", ":qa", ":q ", ":w ", ":wq", " :w", "w notes.txt"],
)
def test_grammar_rejects_everything_else(text: str) -> None:
    assert parse_command_line(text) is None


def type_text(line: CommandLine, text: str) -> None:
    for char in text:
        assert line.execute_command(commands.insert_char(char)) is None


def test_command_line_starts_with_prompt() -> None:
    line = CommandLine()

    assert line.contents == PROMPT
    assert line.cursor_col == 1


def test_typing_appends_and_advances_cursor() -> None:
    line = CommandLine()

    type_text(line, "w a")

    assert line.contents == ":w a"
    assert line.cursor_col == 4


def test_insert_happens_at_cursor() -> None:
    line = CommandLine()
    type_text(line, "wq")
    line.execute_command(commands.move_left())

    type_text(line, "x")

    assert line.contents == ":wxq"
    assert line.cursor_col == 3


def test_cursor_never_moves_over_prompt_or_past_end() -> None:
    line = CommandLine()
    type_text(line, "ab")

    line.execute_command(commands.move_left(10))
    assert line.cursor_col == 1
    line.execute_command(commands.move_right(10))
    assert line.cursor_col == 3
    line.execute_command(commands.move_line_start())
    assert line.cursor_col == 1
    line.execute_command(commands.move_line_end())
    assert line.cursor_col == 3


def test_backspace_removes_character_before_cursor() -> None:
    line = CommandLine()
    type_text(line, "abc")
    line.execute_command(commands.move_left())

    assert line.execute_command(commands.delete_char_backward()) is None
    assert line.contents == ":ac"
    assert line.cursor_col == 2


def test_backspace_at_start_keeps_prompt() -> None:
    line = CommandLine()
    type_text(line, "ab")
    line.execute_command(commands.move_line_start())

    assert line.execute_command(commands.delete_char_backward()) is None
    assert line.contents == ":ab"


def test_delete_removes_character_under_cursor() -> None:
    line = CommandLine()
    type_text(line, "abc")
    line.execute_command(commands.move_line_start())

    line.execute_command(commands.delete_char_forward())

    assert line.contents == ":bc"
    assert line.cursor_col == 1


def test_emptying_the_row_abandons_it() -> None:
    line = CommandLine()
    type_text(line, "w")

    follow_up = line.execute_command(commands.delete_char_backward())

    assert follow_up == commands.enter_mode(ModeKind.NORMAL)
    assert line.contents == PROMPT


def test_backspace_on_bare_prompt_abandons_it() -> None:
    line = CommandLine()

    assert line.execute_command(commands.delete_char_backward()) == commands.enter_mode(
        ModeKind.NORMAL
    )


def test_non_line_commands_are_ignored() -> None:
    line = CommandLine()
    type_text(line, "q")

    assert line.execute_command(commands.move_down(3)) is None
    assert line.execute_command(commands.insert_line_break()) is None
    assert line.contents == ":q"


def test_take_returns_text_and_resets() -> None:
    line = CommandLine()
    type_text(line, "q")

    assert line.take() == ":q"
    assert line.contents == PROMPT
    assert line.cursor_col == 1

"""Key-bound actions; each one turns a key press into a ``ModeResult``."""

from .command import abort_command_line, submit_command_line
from .core import enter_execute_mode, enter_insert_mode, exit_to_normal_mode
from .edit import delete_char_backward, delete_char_forward, insert_line_break
from .motion import (
    move_down,
    move_left,
    move_line_end,
    move_line_start,
    move_page_down,
    move_page_up,
    move_right,
    move_up,
)

__all__ = [
    "abort_command_line",
    "submit_command_line",
    "enter_execute_mode",
    "enter_insert_mode",
    "exit_to_normal_mode",
    "delete_char_backward",
    "delete_char_forward",
    "insert_line_break",
    "move_down",
    "move_left",
    "move_line_end",
    "move_line_start",
    "move_page_down",
    "move_page_up",
    "move_right",
    "move_up",
]

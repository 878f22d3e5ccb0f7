from __future__ import annotations

import pytest

from vie import commands
from vie.modes.sequence import parse_input_sequence

LIMIT = 99999


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("j", commands.move_down(1)),
        ("h", commands.move_left(1)),
        ("k", commands.move_up(1)),
        ("l", commands.move_right(1)),
        ("12j", commands.move_down(12)),
        ("105l", commands.move_right(105)),
        ("99999k", commands.move_up(99999)),
    ],
)
def test_counted_motions_match(text: str, expected: commands.Command) -> None:
    sequence = parse_input_sequence(text, max_count=LIMIT)

    assert sequence.status == "match"
    assert sequence.command == expected


@pytest.mark.parametrize("text", ["1", "12", "10", "99999"])
def test_count_prefixes_are_pending(text: str) -> None:
    assert parse_input_sequence(text, max_count=LIMIT).status == "pending"


@pytest.mark.parametrize(
    "text",
    ["0", "0j", "x", "12x", "j1", "jj", "", "1 2j", "١j"],
)
def test_other_text_is_invalid(text: str) -> None:
    sequence = parse_input_sequence(text, max_count=LIMIT)

    assert sequence.status == "invalid"
    assert sequence.command is None


def test_counts_above_limit_overflow() -> None:
    assert parse_input_sequence("100000", max_count=LIMIT).status == "overflow"
    assert parse_input_sequence("100000j", max_count=LIMIT).status == "overflow"
    assert parse_input_sequence("6j", max_count=5).status == "overflow"
    assert parse_input_sequence("6j", max_count=5).command is None


def test_huge_counts_do_not_wrap() -> None:
    text = "9" * 400 + "j"

    assert parse_input_sequence(text, max_count=LIMIT).status == "overflow"

"""Grammar for buffered normal-mode input such as ``12j``.

A sequence is an optional repeat count followed by one motion key::

    sequence := count? motion
    count    := [1-9][0-9]*
    motion   := 'h' | 'j' | 'k' | 'l'

``0`` never starts a count; it stays free for a line-start binding.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal, Optional

from vie import commands
from vie.commands import Command

_MOTIONS = {
    "h": commands.move_left,
    "j": commands.move_down,
    "k": commands.move_up,
    "l": commands.move_right,
}

MOTION_KEYS = frozenset(_MOTIONS)

_SEQUENCE = re.compile(r"(?P<count>[1-9][0-9]*)?(?P<motion>[hjkl])")
_COUNT_PREFIX = re.compile(r"[1-9][0-9]*")


@dataclass(frozen=True, slots=True)
class SequenceMatch:
    """``match`` carries a command; ``pending`` may still become one;
    ``overflow`` is a count above the limit; ``invalid`` never matches."""

    status: Literal["match", "pending", "overflow", "invalid"]
    command: Optional[Command] = None


def _within(digits: str, max_count: int) -> bool:
    # Longer digit strings than the limit are rejected before int().
    limit = str(max_count)
    if len(digits) != len(limit):
        return len(digits) < len(limit)
    return int(digits) <= max_count


def parse_input_sequence(text: str, *, max_count: int) -> SequenceMatch:
    match = _SEQUENCE.fullmatch(text)
    if match is not None:
        raw = match.group("count")
        if raw and not _within(raw, max_count):
            return SequenceMatch("overflow")
        count = int(raw) if raw else 1
        return SequenceMatch("match", _MOTIONS[match.group("motion")](count))

    if _COUNT_PREFIX.fullmatch(text):
        if not _within(text, max_count):
            return SequenceMatch("overflow")
        return SequenceMatch("pending")
    return SequenceMatch("invalid")


__all__ = ["MOTION_KEYS", "SequenceMatch", "parse_input_sequence"]

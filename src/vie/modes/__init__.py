"""Editor modes and the normal-mode sequence grammar."""

from .base_mode import Mode, ModeBus, ModeContext, ModeResult
from .normal_mode import NormalMode
from .insert_mode import InsertMode
from .execute_mode import ExecuteMode
from .sequence import SequenceMatch, parse_input_sequence

__all__ = [
    "Mode",
    "ModeBus",
    "ModeContext",
    "ModeResult",
    "NormalMode",
    "InsertMode",
    "ExecuteMode",
    "SequenceMatch",
    "parse_input_sequence",
]

from __future__ import annotations

from vie.__main__ import build_parser, main


def test_parser_defaults() -> None:
    args = build_parser().parse_args([])

    assert args.file == ""
    assert args.tick_rate is None
    assert args.log_file is None


def test_parser_reads_options() -> None:
    args = build_parser().parse_args(["notes.txt", "--tick-rate", "0.5", "--log-file", "vie.log"])

    assert (args.file, args.tick_rate, args.log_file) == ("notes.txt", 0.5, "vie.log")


def test_invalid_tick_rate_exits_before_touching_terminal(capsys) -> None:
    assert main(["--tick-rate", "-1"]) == 2
    assert "tick_rate must be positive" in capsys.readouterr().err

"""Command line entry point: ``vie [FILE]``."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from vie.config import EditorConfig
from vie.errors import BackendError
from vie.runtime import telemetry


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="vie", description="Modal terminal text editor.")
    parser.add_argument("file", nargs="?", default="", help="file to open")
    parser.add_argument(
        "--tick-rate",
        type=float,
        default=None,
        metavar="SECONDS",
        help="input poll timeout before an idle tick (default: 0.25)",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        metavar="PATH",
        help="write telemetry to PATH; the console is never used",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        config = EditorConfig.from_env().with_overrides(
            tick_rate=args.tick_rate, log_file=args.log_file
        )
    except ValueError as exc:
        print(f"vie: {exc}", file=sys.stderr)
        return 2

    telemetry.configure(console=False, log_file=config.log_file)

    # Imported here so --help works without a terminal library installed.
    from vie.backend.terminal import TerminalCanvas, TerminalEventLoop
    from vie.editor import Editor

    try:
        with TerminalCanvas() as canvas:
            event_loop = TerminalEventLoop(canvas.term, tick_rate=config.tick_rate)
            try:
                Editor(event_loop, canvas, config, file_name=args.file).run()
            finally:
                event_loop.stop()
    except BackendError as exc:
        telemetry.record_event(
            "editor.failed", level="error", data={"reason": str(exc)}
        )
        print(f"vie: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())

from __future__ import annotations

import pytest

from vie.errors import BackendError
from vie.ui import Frame, Position, Rect, Viewport

from conftest import RecordingCanvas


def write_row(text: str, row: int = 0, cursor: Position | None = None):
    def render(frame: Frame) -> None:
        frame.render(_Line(row, text))
        if cursor is not None:
            frame.set_cursor_position(cursor)

    return render


class _Line:
    def __init__(self, row: int, text: str) -> None:
        self.row = row
        self.text = text

    def render(self, buffer) -> None:
        buffer.write_line(self.row, self.text)


def test_viewport_takes_area_from_canvas(canvas: RecordingCanvas) -> None:
    viewport = Viewport(canvas)

    assert viewport.area == Rect(10, 10)
    assert len(viewport.current_buffer) == 100


def test_viewport_wraps_size_failure() -> None:
    canvas = RecordingCanvas()
    canvas.fail_on = "size"

    with pytest.raises(BackendError):
        Viewport(canvas)


def test_draw_runs_steps_in_order(canvas: RecordingCanvas) -> None:
    viewport = Viewport(canvas)

    viewport.draw(write_row("Hi", cursor=Position(2, 0)))

    assert canvas.calls == [
        ("hide",),
        ("draw", "Hi"),
        ("position", 0, 2),
        ("show",),
        ("flush",),
    ]


def test_second_draw_only_sends_changed_cells(canvas: RecordingCanvas) -> None:
    viewport = Viewport(canvas)

    viewport.draw(write_row("Hello World!"))
    viewport.draw(write_row("Hello Girl"))

    draws = [call for call in canvas.calls if call[0] == "draw"]
    # Row is ten cells wide, so the first frame shows "Hello Worl".
    assert draws == [("draw", "HelloWorl"), ("draw", "Gi")]
    assert [cell.position.col for cell in canvas.drawn[1]] == [6, 7]


def test_shorter_text_blanks_the_tail(canvas: RecordingCanvas) -> None:
    viewport = Viewport(canvas)

    viewport.draw(write_row("abcdef"))
    viewport.draw(write_row("ab"))

    cells = canvas.drawn[1]
    assert [(cell.position.col, cell.symbol) for cell in cells] == [
        (2, " "),
        (3, " "),
        (4, " "),
        (5, " "),
    ]


def test_identical_frames_send_nothing(canvas: RecordingCanvas) -> None:
    viewport = Viewport(canvas)

    viewport.draw(write_row("same"))
    viewport.draw(write_row("same"))

    assert canvas.calls[-5:] == [
        ("hide",),
        ("draw", ""),
        ("position", 0, 0),
        ("show",),
        ("flush",),
    ]


def test_draw_swaps_buffers(canvas: RecordingCanvas) -> None:
    viewport = Viewport(canvas)

    viewport.draw(write_row("x"))
    assert viewport.current_buffer_index == 1
    assert viewport.previous_buffer.row_text(0).startswith("x")
    assert viewport.current_buffer.row_text(0) == " " * 10

    viewport.draw(write_row("y"))
    assert viewport.current_buffer_index == 0


def test_failed_draw_does_not_swap(canvas: RecordingCanvas) -> None:
    viewport = Viewport(canvas)
    viewport.draw(write_row("first"))
    canvas.fail_on = "draw"

    with pytest.raises(BackendError) as excinfo:
        viewport.draw(write_row("broken"))

    assert isinstance(excinfo.value.cause, OSError)
    assert viewport.current_buffer_index == 1
    assert viewport.current_buffer.row_text(0) == " " * 10


def test_retry_after_failure_diffs_against_screen(canvas: RecordingCanvas) -> None:
    viewport = Viewport(canvas)
    viewport.draw(write_row("first"))
    canvas.fail_on = "draw"
    with pytest.raises(BackendError):
        viewport.draw(write_row("fixed"))
    canvas.fail_on = None

    viewport.draw(write_row("first"))

    assert canvas.drawn[-1] == []


def test_render_errors_propagate_without_swap(canvas: RecordingCanvas) -> None:
    viewport = Viewport(canvas)

    def explode(frame: Frame) -> None:
        frame.render(_Line(0, "partial"))
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        viewport.draw(explode)

    assert viewport.current_buffer_index == 0
    assert viewport.current_buffer.row_text(0) == " " * 10


def test_failed_flush_happens_after_swap(canvas: RecordingCanvas) -> None:
    viewport = Viewport(canvas)
    canvas.fail_on = "flush"

    with pytest.raises(BackendError):
        viewport.draw(write_row("x"))

    assert viewport.current_buffer_index == 1


def test_last_cursor_position_wins(canvas: RecordingCanvas) -> None:
    viewport = Viewport(canvas)

    def render(frame: Frame) -> None:
        frame.set_cursor_position(Position(1, 1))
        frame.set_cursor_position(Position(4, 2))

    viewport.draw(render)

    assert ("position", 2, 4) in canvas.calls


def test_clear_resets_both_buffers(canvas: RecordingCanvas) -> None:
    viewport = Viewport(canvas)
    viewport.draw(write_row("abc"))

    viewport.clear()

    assert canvas.calls[-1] == ("clear",)
    assert viewport.previous_buffer.row_text(0) == " " * 10

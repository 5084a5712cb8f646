from __future__ import annotations

import pytest

from jot_engine.buffer import Buffer, Line, Position
from jot_engine.viewport import Movement, ViewportController, ViewportSize


def make_controller(
    *texts: str, width: int = 80, height: int = 10
) -> ViewportController:
    buffer = Buffer([Line(text) for text in texts])
    return ViewportController(buffer, size=ViewportSize(width=width, height=height))


def numbered(count: int) -> list[str]:
    return [f"line {index}" for index in range(count)]


def test_viewport_size_must_be_positive() -> None:
    with pytest.raises(ValueError):
        ViewportSize(width=0, height=5)


def test_up_floors_at_zero() -> None:
    controller = make_controller("a", "b")

    assert controller.move(Movement.UP) == Position(0, 0)


def test_down_stops_at_virtual_row() -> None:
    controller = make_controller("a", "b")

    controller.move(Movement.DOWN)
    controller.move(Movement.DOWN)
    controller.move(Movement.DOWN)

    assert controller.cursor == Position(column=0, row=2)


def test_right_wraps_to_next_row() -> None:
    controller = make_controller("ab", "cd")
    controller.set_cursor(Position(column=2, row=0))

    assert controller.move(Movement.RIGHT) == Position(column=0, row=1)


def test_right_on_virtual_row_stays_put() -> None:
    controller = make_controller("ab")
    controller.set_cursor(Position(column=0, row=1))

    assert controller.move(Movement.RIGHT) == Position(column=0, row=1)


def test_left_wraps_to_end_of_previous_row() -> None:
    controller = make_controller("hello", "cd")
    controller.set_cursor(Position(column=0, row=1))

    assert controller.move(Movement.LEFT) == Position(column=5, row=0)


def test_left_at_document_start_stays_put() -> None:
    controller = make_controller("ab")

    assert controller.move(Movement.LEFT) == Position(0, 0)


def test_vertical_move_clamps_column_to_row_length() -> None:
    controller = make_controller("long line", "ab")
    controller.set_cursor(Position(column=8, row=0))

    assert controller.move(Movement.DOWN) == Position(column=2, row=1)


def test_home_and_end() -> None:
    controller = make_controller("héllo")
    controller.set_cursor(Position(column=2, row=0))

    assert controller.move(Movement.END) == Position(column=5, row=0)
    assert controller.move(Movement.HOME) == Position(column=0, row=0)


def test_page_moves_by_height() -> None:
    controller = make_controller(*numbered(25), height=10)

    assert controller.move(Movement.PAGE_DOWN).row == 10
    assert controller.move(Movement.PAGE_DOWN).row == 20
    assert controller.move(Movement.PAGE_DOWN).row == 25
    assert controller.move(Movement.PAGE_UP).row == 15
    assert controller.move(Movement.PAGE_UP).row == 5
    assert controller.move(Movement.PAGE_UP).row == 0


def test_advance_moves_right_by_cells() -> None:
    controller = make_controller("    x")

    assert controller.advance(4) == Position(column=4, row=0)


def test_set_cursor_clamps_into_document() -> None:
    controller = make_controller("abc")

    assert controller.set_cursor(Position(column=9, row=9)) == Position(0, 1)
    assert controller.set_cursor(Position(column=9, row=0)) == Position(3, 0)


def test_vertical_scroll_keeps_offset_near_top() -> None:
    controller = make_controller(*numbered(40), height=10)

    controller.set_cursor(Position(column=0, row=3))

    assert controller.scroll_offset.row == 0


def test_vertical_scroll_applies_margin_below() -> None:
    controller = make_controller(*numbered(40), height=10)

    controller.set_cursor(Position(column=0, row=20))

    assert controller.scroll_offset.row == 16


def test_vertical_scroll_applies_margin_above() -> None:
    controller = make_controller(*numbered(40), height=10)
    controller.set_cursor(Position(column=0, row=30))

    controller.set_cursor(Position(column=0, row=22))

    assert controller.scroll_offset.row == 17


def test_vertical_scroll_inside_window_is_stable() -> None:
    controller = make_controller(*numbered(40), height=20)
    controller.set_cursor(Position(column=0, row=10))

    assert controller.scroll_offset.row == 0

    controller.move(Movement.DOWN)
    assert controller.scroll_offset.row == 0


def test_horizontal_scroll_follows_cursor() -> None:
    controller = make_controller("x" * 100, width=80)

    controller.set_cursor(Position(column=85, row=0))
    assert controller.scroll_offset.column == 6

    controller.set_cursor(Position(column=3, row=0))
    assert controller.scroll_offset.column == 3


def test_screen_cursor_is_relative_to_offset() -> None:
    controller = make_controller("x" * 100, *numbered(40), width=80, height=10)

    controller.set_cursor(Position(column=85, row=0))

    assert controller.screen_cursor() == Position(column=79, row=0)

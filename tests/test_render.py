import pytest

from textsnake.game import Food, Snake
from textsnake.render import FOOD_GLYPH, SNAKE_GLYPH, GridRenderer, render


def test_three_by_three_layout():
    frame = render(Snake(body=[(0, 0)]), Food((1, 1)), 3)
    assert frame.splitlines() == ["  *", " ~ ", "   "]


@pytest.mark.parametrize("field_size", [1, 2, 5, 30])
def test_frame_is_square(field_size):
    frame = render(Snake(), Food((1, 0)), field_size)
    assert frame.endswith("\n")
    lines = frame.split("\n")[:-1]
    assert len(lines) == field_size
    assert all(len(line) == field_size for line in lines)


def test_food_wins_over_snake():
    frame = render(Snake(body=[(1, 0), (0, 0)], length=2), Food((1, 0)), 3)
    assert frame.splitlines()[1] == " ~*"


def test_out_of_field_cells_are_skipped():
    snake = Snake(body=[(5, 0), (-5, 0), (0, -2)], length=3)
    frame = render(snake, Food((0, 9)), 3)
    assert SNAKE_GLYPH not in frame
    assert FOOD_GLYPH not in frame


def test_even_field_drops_positive_edge():
    # half == 1, so x == 1 projects to column 2, outside a 2-wide buffer.
    frame = render(Snake(body=[(0, 0)]), Food((1, 1)), 2)
    assert frame == " ~\n  \n"


def test_build_orders_rows_by_ascending_y():
    grid = GridRenderer(3).build(Snake(body=[(-1, -1)]), Food((1, 1)))
    assert grid[0, 0] == SNAKE_GLYPH
    assert grid[2, 2] == FOOD_GLYPH


def test_renderer_rejects_non_positive_size():
    with pytest.raises(ValueError):
        GridRenderer(0)

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

import numpy as np

if TYPE_CHECKING:
    from textsnake.game import Cell, Food, Snake

EMPTY_GLYPH = " "
SNAKE_GLYPH = "~"
FOOD_GLYPH = "*"


class GridRenderer:
    """Projects snake and food cells onto a square character buffer.

    Row 0 of the buffer holds y == -half; serialization flips it so the
    largest y is printed first.
    """

    def __init__(self, field_size: int) -> None:
        if field_size <= 0:
            raise ValueError(f"field size must be positive, got {field_size}")
        self.field_size = field_size
        self.half = field_size // 2

    def blank(self) -> np.ndarray:
        return np.full((self.field_size, self.field_size), EMPTY_GLYPH, dtype="<U1")

    def _paint(self, grid: np.ndarray, cells: Iterable[Cell], glyph: str) -> None:
        for x, y in cells:
            col, row = x + self.half, y + self.half
            if 0 <= col < self.field_size and 0 <= row < self.field_size:
                grid[row, col] = glyph

    def build(self, snake: Snake, food: Food) -> np.ndarray:
        grid = self.blank()
        self._paint(grid, snake.body, SNAKE_GLYPH)
        # Food is painted last and wins when it shares a cell with the body.
        self._paint(grid, [food.position], FOOD_GLYPH)
        return grid

    @staticmethod
    def serialize(grid: np.ndarray) -> str:
        return "".join("".join(row) + "\n" for row in grid[::-1])

    def render(self, snake: Snake, food: Food) -> str:
        return self.serialize(self.build(snake, food))


def render(snake: Snake, food: Food, field_size: int) -> str:
    return GridRenderer(field_size).render(snake, food)

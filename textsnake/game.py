from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from textsnake.render import render as render_grid

Cell = Tuple[int, int]


class Direction(Enum):
    IDLE = "idle"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


OFFSETS = {
    Direction.IDLE: (0, 0),
    Direction.UP: (0, 1),
    Direction.DOWN: (0, -1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


def add_pos(a: Cell, b: Cell) -> Cell:
    return a[0] + b[0], a[1] + b[1]


def offset_for(direction: Direction) -> Cell:
    return OFFSETS[direction]


def is_legal_turn(current: Direction, requested: Direction) -> bool:
    """A turn is illegal only when it reverses straight into the neck."""
    return OPPOSITES.get(current) != requested


@dataclass(frozen=True)
class FieldConfig:
    size: int = 30

    def __post_init__(self) -> None:
        if self.size <= 0:
            raise ValueError(f"field size must be positive, got {self.size}")

    @property
    def half(self) -> int:
        return self.size // 2


@dataclass
class Snake:
    body: List[Cell] = field(default_factory=lambda: [(0, 0)])
    length: int = 1
    direction: Direction = Direction.IDLE

    @property
    def head(self) -> Cell:
        assert self.body, "snake body must never be empty"
        return self.body[0]

    def grow(self, amount: int = 1) -> None:
        if amount < 0:
            raise ValueError("snake length never shrinks")
        self.length += amount


@dataclass
class Food:
    position: Cell


def spawn_food(field_size: int, rng: Optional[random.Random] = None) -> Cell:
    # Range is [-half, half] on both axes, so odd sizes reach one cell further right/up.
    half = FieldConfig(field_size).half
    if half == 0:
        raise ValueError("field has no cell other than the centre to place food on")
    rng = rng or random.Random()
    while True:
        x = rng.randint(-half, half)
        y = rng.randint(-half, half)
        if (x, y) != (0, 0):
            return x, y


class SimulationState:
    """Owns the single snake and food, and steps them once per tick."""

    def __init__(self, field_size: int = 30, seed: Optional[int] = None) -> None:
        self.field = FieldConfig(field_size)
        self.random = random.Random(seed)
        self.snake = Snake()
        self.food = Food(spawn_food(self.field.size, self.random))

    @property
    def field_size(self) -> int:
        return self.field.size

    @property
    def food_eaten(self) -> bool:
        return self.snake.head == self.food.position

    def set_direction(self, requested: Direction, baseline: Optional[Direction] = None) -> bool:
        if requested is Direction.IDLE:
            return False
        current = self.snake.direction if baseline is None else baseline
        if not is_legal_turn(current, requested):
            return False
        self.snake.direction = requested
        return True

    def advance(self) -> None:
        new_head = add_pos(self.snake.head, offset_for(self.snake.direction))
        self.snake.body.insert(0, new_head)
        if len(self.snake.body) > self.snake.length:
            self.snake.body.pop()

    def render(self) -> str:
        return render_grid(self.snake, self.food, self.field.size)

    def tick(self, input_events: Iterable[Direction] = ()) -> str:
        # Every event is judged against the direction held when the tick began.
        baseline = self.snake.direction
        for event in input_events:
            self.set_direction(event, baseline=baseline)
        self.advance()
        return self.render()

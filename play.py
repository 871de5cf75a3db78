from __future__ import annotations

import argparse
from typing import List

from textsnake.game import Direction, SimulationState, is_legal_turn

try:
    import pygame  # type: ignore
except ImportError:  # pragma: no cover - pygame not installed in some envs
    pygame = None


def key_bindings() -> dict:
    return {
        pygame.K_w: Direction.UP,
        pygame.K_UP: Direction.UP,
        pygame.K_s: Direction.DOWN,
        pygame.K_DOWN: Direction.DOWN,
        pygame.K_a: Direction.LEFT,
        pygame.K_LEFT: Direction.LEFT,
        pygame.K_d: Direction.RIGHT,
        pygame.K_RIGHT: Direction.RIGHT,
    }


def positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return number


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play text-grid Snake")
    parser.add_argument("--field-size", type=positive_int, default=30)
    parser.add_argument("--interval-ms", type=positive_int, default=250)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--window", type=positive_int, nargs=2, default=(800, 800))
    parser.add_argument("--headless", action="store_true", help="Print frames to stdout instead of opening a window")
    parser.add_argument("--ticks", type=positive_int, default=None, help="Stop after N ticks")
    return parser.parse_args(argv)


def run_headless(state: SimulationState, ticks: int) -> None:
    for _ in range(ticks):
        print(state.tick())


def run_window(state: SimulationState, args: argparse.Namespace) -> int:
    if pygame is None:
        raise ImportError("pygame is required for the windowed shell")

    pygame.init()
    width_px, height_px = args.window
    window = pygame.display.set_mode((width_px, height_px))
    pygame.display.set_caption("Snake")
    font_size = max(1, height_px // state.field_size)
    font = pygame.font.SysFont("liberationmono,dejavusansmono,couriernew,monospace", font_size)
    line_height = font.get_linesize()
    clock = pygame.time.Clock()
    bindings = key_bindings()

    ticks = 0
    running = True
    while running:
        events: List[Direction] = []
        baseline = state.snake.direction
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key in bindings:
                requested = bindings[event.key]
                print(f"Moving {requested.value}! legal={is_legal_turn(baseline, requested)}")
                events.append(requested)
        if not running:
            break

        frame = state.tick(events)
        ticks += 1

        window.fill((0, 0, 0))
        lines = frame.splitlines()
        top = (height_px - line_height * len(lines)) // 2
        for i, line in enumerate(lines):
            surface = font.render(line, False, (255, 255, 255))
            rect = surface.get_rect(centerx=width_px // 2, top=top + i * line_height)
            window.blit(surface, rect)
        pygame.display.flip()

        if args.ticks is not None and ticks >= args.ticks:
            break
        clock.tick(1000 / args.interval_ms)

    pygame.quit()
    return ticks


def main(argv=None) -> None:
    args = parse_args(argv)
    state = SimulationState(field_size=args.field_size, seed=args.seed)

    if args.headless:
        run_headless(state, args.ticks or 1)
        return

    ticks = run_window(state, args)
    print(f"Closed after {ticks} ticks.")


if __name__ == "__main__":
    main()

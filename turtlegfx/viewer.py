"""Animated viewer for the drawing primitives emitted by the interpreter."""

from __future__ import annotations

import argparse
import math
import re
import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional

Point = tuple[float, float]
Rgb = tuple[float, float, float]

DURATION = 10.0
JUMP = 1.0
SCREEN_SIZE = (1024, 576)
VIEW_SIZE = (1000.0, 1000.0)
VIEW_CENTER = (0.0, 0.0)
LINE_WIDTH = 3.0
TURTLE_RADIUS = 5.0
BLACK: Rgb = (0.0, 0.0, 0.0)


class Op(Enum):
    """Kind of drawing primitive."""

    COLOR = "Color"
    MOVE_TO = "MoveTo"
    LINE_TO = "LineTo"


_ARITY = {Op.COLOR: 3, Op.MOVE_TO: 2, Op.LINE_TO: 2}

_NUMBER = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|(?i:infinity|inf|nan)))"
)


@dataclass(frozen=True)
class Instruction:
    """One drawing primitive and its numeric arguments."""

    op: Op
    values: tuple[float, ...]


@dataclass(frozen=True)
class Segment:
    """A coloured line between two points."""

    start: Point
    end: Point
    color: Rgb


@dataclass
class Frame:
    """What is drawn at a given moment: the lines and the turtle."""

    segments: list[Segment] = field(default_factory=list)
    turtle: Optional[Point] = None


def _read_numbers(text: str, count: int) -> tuple[float, ...]:
    """Read numbers one after another, giving 0 where none can be read."""
    values = []
    pos = 0
    for _ in range(count):
        match = _NUMBER.match(text, pos)
        if match is None:
            values.append(0.0)
            continue
        values.append(float(match.group(1)))
        pos = match.end()
    return tuple(values)


def parse_line(line: str) -> list[Instruction]:
    """Return the instructions found in one line of interpreter output."""
    found = []
    for op in (Op.COLOR, Op.MOVE_TO, Op.LINE_TO):
        if op.value in line:
            rest = line[len(op.value):]
            found.append(Instruction(op, _read_numbers(rest, _ARITY[op])))
    return found


def parse_instructions(lines: Iterable[str]) -> list[Instruction]:
    """Return the instructions found in all the given lines."""
    return [item for line in lines for item in parse_line(line.rstrip("\n"))]


def _lerp(start: Point, end: Point, t: float) -> Point:
    return (start[0] + (end[0] - start[0]) * t, start[1] + (end[1] - start[1]) * t)


def compute_frame(
    instructions: list[Instruction], elapsed: float, duration: float = DURATION
) -> Frame:
    """Return what is drawn after the given time of an animation of the given length."""
    if not instructions:
        return Frame()
    elapsed = min(max(elapsed, 0.0), duration)
    movements = sum(1 for item in instructions if item.op is not Op.COLOR)
    steps = elapsed / duration * movements
    max_step = math.floor(steps)
    in_step = math.fmod(steps, 1.0)

    point: Point = (0.0, 0.0)
    color: Rgb = BLACK
    segments = []
    step = 0
    for item in instructions:
        if step > max_step:
            break
        if item.op is Op.COLOR:
            color = (item.values[0], item.values[1], item.values[2])
            continue
        target: Point = (item.values[0], item.values[1])
        if item.op is Op.LINE_TO:
            if step == max_step:
                target = _lerp(point, target, in_step)
            segments.append(Segment(point, target, color))
        point = target
        step += 1
    return Frame(segments, point)


def _transform(window_size: tuple[int, int]):
    """Map world coordinates to the window, keeping the whole view visible."""
    width, height = window_size
    scale = min(width / VIEW_SIZE[0], height / VIEW_SIZE[1])

    def to_screen(p: Point) -> tuple[float, float]:
        return (
            width / 2 + (p[0] - VIEW_CENTER[0]) * scale,
            height / 2 + (p[1] - VIEW_CENTER[1]) * scale,
        )

    return to_screen, scale


def _to_rgb255(color: Rgb) -> tuple[int, int, int]:
    return tuple(max(0, min(255, round(c * 255))) for c in color)  # type: ignore[return-value]


def _run_window(instructions: list[Instruction]) -> None:
    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode(SCREEN_SIZE, pygame.RESIZABLE)
        pygame.display.set_caption("Turtle Viewer")
        clock = pygame.time.Clock()
        elapsed = 0.0
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_f:
                        pygame.display.toggle_fullscreen()
                    elif event.key == pygame.K_SPACE:
                        elapsed = DURATION
                    elif event.key == pygame.K_RIGHT:
                        elapsed += JUMP
                    elif event.key == pygame.K_LEFT:
                        elapsed -= JUMP
            if not running:
                break

            elapsed += clock.tick(60) / 1000.0
            elapsed = min(max(elapsed, 0.0), DURATION)

            screen.fill((255, 255, 255))
            frame = compute_frame(instructions, elapsed, DURATION)
            to_screen, scale = _transform(screen.get_size())
            width = max(1, round(LINE_WIDTH * scale))
            for segment in frame.segments:
                pygame.draw.line(
                    screen,
                    _to_rgb255(segment.color),
                    to_screen(segment.start),
                    to_screen(segment.end),
                    width,
                )
            if frame.turtle is not None:
                pygame.draw.circle(
                    screen,
                    (127, 255, 0),
                    to_screen(frame.turtle),
                    max(1.0, TURTLE_RADIUS * scale),
                )
            pygame.display.flip()
    finally:
        pygame.quit()


def main(argv: Optional[list[str]] = None) -> int:
    """Read drawing primitives from standard input and animate them."""
    parser = argparse.ArgumentParser(
        prog="turtle-viewer",
        description="Animate the drawing primitives read from standard input.",
    )
    parser.parse_args(argv)
    instructions = parse_instructions(sys.stdin)
    _run_window(instructions)
    return 0


if __name__ == "__main__":
    sys.exit(main())
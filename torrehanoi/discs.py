"""Discs of the tower and their step-by-step animation between rods."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

import pygame

from torrehanoi.wires import BASE_MARGIN, WIRE_TOP, Wire

FIRST_WIDTH = 40
WIDTH_STEP = 20
START_CENTER_X = 100
LIFT_CLEARANCE = 150
HORIZONTAL_TOLERANCE = 0.1


class Color(IntEnum):
    RED = 0
    ORANGE = 1
    YELLOW = 2
    GREEN = 3
    BLUE = 4
    PURPLE = 5
    PINK = 6


_RGB = {
    Color.RED: (255, 0, 0),
    Color.ORANGE: (255, 165, 0),
    Color.YELLOW: (255, 255, 0),
    Color.GREEN: (0, 255, 0),
    Color.BLUE: (0, 0, 255),
    Color.PURPLE: (128, 0, 128),
    Color.PINK: (255, 105, 180),
}
_FALLBACK_RGB = (255, 255, 255)


def color_rgb(color: Color | int) -> tuple[int, int, int]:
    """RGB triple of a disc colour; unknown values are white."""
    return _RGB.get(color, _FALLBACK_RGB)


@dataclass
class Disc:
    """One disc: its box, its number (1 is the smallest) and its rod."""

    x: float
    y: float
    width: float
    height: float
    number: int
    rod: int = 0
    moved_up: bool = False
    moved_down: bool = False
    moved_horizontal: bool = False
    color: Color = Color.RED

    def reset_moves(self) -> None:
        self.moved_up = False
        self.moved_down = False
        self.moved_horizontal = False


def create_discs(count: int, height: float) -> list[Disc]:
    """Stack ``count`` discs on the first rod, sharing ``height`` between them."""
    if count < 0:
        raise ValueError(f"disc count must not be negative: {count}")
    if count == 0:
        return []
    disc_height = height / count
    discs: list[Disc] = []
    width = FIRST_WIDTH
    y = float(WIRE_TOP + BASE_MARGIN)
    for index in range(count):
        if index:
            y = discs[-1].y + disc_height
        discs.append(
            Disc(
                x=float(START_CENTER_X - width // 2),
                y=y,
                width=float(width),
                height=disc_height,
                number=index + 1,
                color=Color(index % len(Color)),
            )
        )
        width += WIDTH_STEP
    return discs


def reset_moves(count: int, discs: list[Disc]) -> None:
    """Clear the animation phase flags of the first ``count`` discs."""
    for disc in discs[:count]:
        disc.reset_moves()


def _find_wire(wires: list[Wire], rod_id: int) -> Wire | None:
    return next((wire for wire in wires[:3] if wire.id == rod_id), None)


def _step_disc(disc: Disc, previous: Wire, target: Wire, speed: float) -> bool:
    if not disc.moved_up:
        goal = previous.y - LIFT_CLEARANCE
        if disc.y > goal:
            disc.y -= min(disc.y - goal, speed)
        else:
            disc.y = goal
            disc.moved_up = True
    elif not disc.moved_horizontal:
        goal = target.x + target.width / 2 - disc.width / 2
        distance = disc.x - goal
        if abs(distance) > HORIZONTAL_TOLERANCE:
            if abs(distance) > speed:
                disc.x += -speed if distance > 0 else speed
            else:
                disc.x -= distance
        else:
            disc.x = goal
            disc.moved_horizontal = True
    elif not disc.moved_down:
        goal = target.base - disc.height * target.count
        if disc.y < goal:
            disc.y += min(goal - disc.y, speed)
        else:
            disc.y = goal
            disc.moved_down = True
            return True
    return False


def move_disc(
    discs: list[Disc], wires: list[Wire], disc_id: int, rod_id: int, speed: float
) -> bool:
    """Advance disc ``disc_id`` one step towards rod ``rod_id``.

    The disc rises, slides across, then drops; returns True on the step that
    lands it.
    """
    landed = False
    for disc in discs:
        if disc.number != disc_id:
            continue
        target = _find_wire(wires, rod_id)
        if target is None:
            continue
        if _step_disc(disc, wires[disc.rod], target, speed):
            landed = True
    return landed


def update_states(discs: list[Disc], wires: list[Wire], disc_id: int, rod_id: int) -> None:
    """Record that disc ``disc_id`` now belongs to rod ``rod_id``."""
    for disc in discs:
        if disc.number != disc_id:
            continue
        target = _find_wire(wires, rod_id)
        if target is None:
            continue
        target.count += 1
        wires[disc.rod].count -= 1
        disc.rod = target.id


def render_discs(surface: pygame.Surface, discs: list[Disc]) -> None:
    """Draw every disc onto ``surface`` in its colour."""
    for disc in discs:
        rect = pygame.Rect(
            round(disc.x), round(disc.y), round(disc.width), round(disc.height)
        )
        pygame.draw.rect(surface, color_rgb(disc.color), rect, border_radius=10)
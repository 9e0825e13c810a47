"""The three rods the discs are stacked on."""

from __future__ import annotations

from dataclasses import dataclass

import pygame

WIRE_WIDTH = 10
WIRE_HEIGHT = 220
WIRE_TOP = 300
FIRST_CENTER_X = 100
WIRE_SPACING = 305
BASE_MARGIN = 20
WIRE_COLOR = (0, 0, 0)


@dataclass
class Wire:
    """A vertical rod and the number of discs currently on it."""

    id: int
    x: float
    y: float
    width: float
    height: float
    count: int = 0

    @property
    def base(self) -> float:
        """Y coordinate of the bottom of the rod, where the lowest disc rests."""
        return self.y + self.height + BASE_MARGIN

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2


def create_wires(count: int, discs: int) -> list[Wire]:
    """Lay out ``count`` rods left to right; the first one holds all ``discs``."""
    wires = []
    for index in range(count):
        center_x = FIRST_CENTER_X + index * WIRE_SPACING
        wires.append(
            Wire(
                id=index,
                x=float(center_x - WIRE_WIDTH // 2),
                y=float(WIRE_TOP),
                width=float(WIRE_WIDTH),
                height=float(WIRE_HEIGHT),
                count=discs if index == 0 else 0,
            )
        )
    return wires


def render_wires(surface: pygame.Surface, wires: list[Wire]) -> None:
    """Draw every rod onto ``surface``."""
    for wire in wires:
        rect = pygame.Rect(
            round(wire.x),
            round(wire.y),
            round(wire.width),
            round(wire.height + BASE_MARGIN),
        )
        pygame.draw.rect(surface, WIRE_COLOR, rect, border_radius=5)
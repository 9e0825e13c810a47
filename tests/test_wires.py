import pygame
import pytest

from torrehanoi.wires import Wire, create_wires, render_wires


def test_first_wire_holds_all_discs():
    wires = create_wires(3, 5)
    assert [w.count for w in wires] == [5, 0, 0]


def test_ids_follow_order():
    wires = create_wires(3, 4)
    assert [w.id for w in wires] == [0, 1, 2]


def test_wires_are_evenly_spaced():
    wires = create_wires(3, 2)
    gaps = {b.x - a.x for a, b in zip(wires, wires[1:])}
    assert gaps == {305}


def test_first_wire_centered_on_start():
    wires = create_wires(3, 2)
    assert wires[0].center_x == pytest.approx(100)


def test_wires_share_geometry():
    wires = create_wires(3, 2)
    assert len({(w.y, w.width, w.height) for w in wires}) == 1
    assert wires[0].y == 300
    assert wires[0].height == 220


def test_base_is_below_top():
    wire = create_wires(1, 3)[0]
    assert wire.base == wire.y + wire.height + 20


def test_zero_wires():
    assert create_wires(0, 3) == []


def test_render_draws_black_rods():
    surface = pygame.Surface((800, 800))
    surface.fill((178, 178, 178))
    wires = create_wires(3, 3)
    render_wires(surface, wires)
    for wire in wires:
        point = (int(wire.center_x), int(wire.y + wire.height / 2))
        assert tuple(surface.get_at(point))[:3] == (0, 0, 0)


def test_render_leaves_background_between_rods():
    surface = pygame.Surface((800, 800))
    surface.fill((178, 178, 178))
    wires = create_wires(3, 3)
    render_wires(surface, wires)
    between = (int((wires[0].center_x + wires[1].center_x) / 2), 400)
    assert tuple(surface.get_at(between))[:3] == (178, 178, 178)


def test_wire_dataclass_equality():
    assert create_wires(1, 0)[0] == Wire(id=0, x=95.0, y=300.0, width=10.0, height=220.0, count=0)
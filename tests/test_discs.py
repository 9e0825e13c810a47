import pygame
import pytest

from torrehanoi.discs import (
    Color,
    Disc,
    color_rgb,
    create_discs,
    move_disc,
    render_discs,
    reset_moves,
    update_states,
)
from torrehanoi.wires import create_wires


def _perform(discs, wires, disc_id, rod_id, speed=7.0):
    update_states(discs, wires, disc_id, rod_id)
    reset_moves(disc_id, discs)
    for _ in range(10_000):
        if move_disc(discs, wires, disc_id, rod_id, speed):
            return
    raise AssertionError("disc never landed")


def _disc(discs, number):
    return next(d for d in discs if d.number == number)


def test_create_discs_numbers_and_rod():
    discs = create_discs(4, 220)
    assert [d.number for d in discs] == [1, 2, 3, 4]
    assert all(d.rod == 0 for d in discs)


def test_create_discs_widths_grow():
    discs = create_discs(5, 220)
    assert all(b.width - a.width == 20 for a, b in zip(discs, discs[1:]))
    assert discs[0].width == 40


def test_create_discs_stacked_contiguously():
    discs = create_discs(4, 220)
    assert discs[0].y == 320
    for a, b in zip(discs, discs[1:]):
        assert b.y == pytest.approx(a.y + a.height)
    assert discs[-1].y + discs[-1].height == pytest.approx(320 + 220)


def test_create_discs_centered_on_first_rod():
    for disc in create_discs(3, 220):
        assert disc.x + disc.width / 2 == pytest.approx(100)


def test_colors_cycle():
    discs = create_discs(9, 220)
    assert [d.color for d in discs] == [Color(i % 7) for i in range(9)]


def test_create_discs_negative_count():
    with pytest.raises(ValueError):
        create_discs(-1, 220)


def test_create_discs_zero():
    assert create_discs(0, 220) == []


def test_color_rgb_known_and_unknown():
    assert color_rgb(Color.RED) == (255, 0, 0)
    assert color_rgb(Color.PINK) == (255, 105, 180)
    assert color_rgb(9) == (255, 255, 255)


def test_reset_moves_only_first_discs():
    discs = create_discs(3, 220)
    for d in discs:
        d.moved_up = d.moved_down = d.moved_horizontal = True
    reset_moves(2, discs)
    assert [(d.moved_up, d.moved_down, d.moved_horizontal) for d in discs] == [
        (False, False, False),
        (False, False, False),
        (True, True, True),
    ]


def test_update_states_moves_counts():
    discs = create_discs(3, 220)
    wires = create_wires(3, 3)
    update_states(discs, wires, 1, 2)
    assert [w.count for w in wires] == [2, 0, 1]
    assert _disc(discs, 1).rod == 2


def test_update_states_unknown_disc_changes_nothing():
    discs = create_discs(3, 220)
    wires = create_wires(3, 3)
    update_states(discs, wires, 8, 2)
    assert [w.count for w in wires] == [3, 0, 0]


def test_first_step_lifts_by_speed():
    discs = create_discs(3, 220)
    wires = create_wires(3, 3)
    update_states(discs, wires, 1, 2)
    start = discs[0].y
    assert move_disc(discs, wires, 1, 2, 5.0) is False
    assert discs[0].y == pytest.approx(start - 5.0)
    assert discs[1].y == pytest.approx(discs[0].height + 320)


def test_full_move_lands_centered_at_base():
    discs = create_discs(3, 220)
    wires = create_wires(3, 3)
    _perform(discs, wires, 1, 2)
    disc, wire = discs[0], wires[2]
    assert disc.x + disc.width / 2 == pytest.approx(wire.center_x)
    assert disc.y == pytest.approx(wire.base - disc.height)
    assert disc.moved_up and disc.moved_horizontal and disc.moved_down


def test_sequence_keeps_stacks_consistent():
    discs = create_discs(3, 220)
    wires = create_wires(3, 3)
    for disc_id, rod in [(1, 2), (2, 1), (1, 1)]:
        _perform(discs, wires, disc_id, rod)
    assert [w.count for w in wires] == [1, 2, 0]
    small, middle = _disc(discs, 1), _disc(discs, 2)
    assert small.rod == middle.rod == 1
    assert middle.y == pytest.approx(wires[1].base - middle.height)
    assert small.y + small.height == pytest.approx(middle.y)


def test_move_disc_unknown_rod_does_nothing():
    discs = create_discs(2, 220)
    wires = create_wires(3, 2)
    before = [Disc(**vars(d)) for d in discs]
    assert move_disc(discs, wires, 1, 7, 5.0) is False
    assert discs == before


def test_render_discs_draws_colors():
    surface = pygame.Surface((800, 800))
    surface.fill((178, 178, 178))
    discs = create_discs(3, 220)
    render_discs(surface, discs)
    for disc in discs:
        point = (int(disc.x + disc.width / 2), int(disc.y + disc.height / 2))
        assert tuple(surface.get_at(point))[:3] == color_rgb(disc.color)
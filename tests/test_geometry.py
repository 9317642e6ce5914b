import math
import random

import pygame
import pytest

from asteroids.geometry import distance, heading_vector, ticks, wrap, wrap_position


def test_distance():
    assert distance((0, 0), (3, 4)) == 5
    assert distance(pygame.Vector2(1, 1), pygame.Vector2(1, 1)) == 0


@pytest.mark.parametrize(
    "value, expected",
    [
        (100, 100),
        (-10, -10),  # still touching the playfield
        (-10.5, 810),
        (810, 810),
        (810.5, -10),
    ],
)
def test_wrap_moves_to_opposite_edge(value, expected):
    assert wrap(value, 10, 800) == expected


def test_wrapped_circle_never_entirely_outside():
    rng = random.Random(3)
    size = 600
    for _ in range(500):
        radius = rng.uniform(0, 60)
        value = rng.uniform(-2000, 2000)
        wrapped = wrap(value, radius, size)
        assert wrapped + radius >= -1e-9
        assert wrapped - radius <= size + 1e-9


def test_wrap_position_mutates_vector():
    pos = pygame.Vector2(-20, 700)
    result = wrap_position(pos, 15, 800, 600)
    assert result is pos
    assert pos.x == 815
    assert pos.y == -15


def test_heading_vector_points_up_at_half_pi():
    v = heading_vector(math.pi / 2, 2)
    assert v.x == pytest.approx(0, abs=1e-12)
    assert v.y == pytest.approx(-2)


def test_ticks_rounds_up():
    assert ticks(0.3, 120) == 36
    assert ticks(0.01, 120) == 2
    assert ticks(2.5, 120) == 300

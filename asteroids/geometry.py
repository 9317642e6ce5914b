import math

import pygame


def ticks(seconds, tick_rate):
    """Number of whole ticks covering ``seconds``."""
    return math.ceil(seconds * tick_rate)


def distance(a, b):
    return math.hypot(b[0] - a[0], b[1] - a[1])


def wrap(value, radius, size):
    # Leaving one edge by more than the radius re-enters just outside the opposite one.
    if value < -radius:
        return size + radius
    if value > size + radius:
        return -radius
    return value


def wrap_position(pos, radius, width, height):
    pos.x = wrap(pos.x, radius, width)
    pos.y = wrap(pos.y, radius, height)
    return pos


def heading_vector(angle, length=1.0):
    # Screen y grows downwards; a heading of pi/2 points up.
    return pygame.Vector2(math.cos(angle) * length, -math.sin(angle) * length)

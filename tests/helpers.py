import pygame

from asteroids.entities import AsteroidSize
from asteroids.simulation import AsteroidDestroyed


def still_asteroid(spawner, x, y, size=AsteroidSize.LARGE):
    asteroid = spawner.new_asteroid(x, y, size)
    asteroid.velocity = pygame.Vector2(0, 0)
    return asteroid


def freeze(session):
    for asteroid in session.asteroids:
        asteroid.velocity.update(0, 0)


def run_until(controller, event_type, limit=1000, keep_frozen=True):
    """Tick until an event of ``event_type`` shows up; return (event, events of that tick)."""
    for _ in range(limit):
        events = controller.tick()
        if keep_frozen:
            freeze(controller.session)
        for event in events:
            if isinstance(event, event_type):
                return event, events
    raise AssertionError(f"no {event_type.__name__} within {limit} ticks")


def shoot(controller, limit=200):
    """Fire one laser and wait until it destroys an asteroid."""
    controller.request_fire()
    event, events = run_until(controller, AsteroidDestroyed, limit)
    controller.release_fire_gate()
    controller.tick()
    freeze(controller.session)
    return event, events


def crash(controller):
    """Drop the ship's invincibility and put a small rock on top of it."""
    session = controller.session
    session.ship.blink_number = 0
    x, y = session.ship.position
    session.asteroids.append(still_asteroid(controller.spawner, x, y, AsteroidSize.SMALL))
    return controller.tick()

import argparse
import logging
import math
import random
import time

import pygame

from asteroids import GameConfig, GameController, JsonHighScoreStore, MemoryHighScoreStore, load_config
from asteroids.constants import SAVE_PATH


COLORS = {
    "bg": (0, 0, 0),
    "ship": (255, 255, 255),
    "thruster": (255, 190, 120),
    "laser": (250, 128, 114),
    "laser_burst": (255, 140, 60),
    "asteroid": (112, 128, 144),
    "particle": (255, 255, 255, 128),
    "bounding": (0, 255, 0),
    "centre": (255, 0, 0),
    "ui": (220, 220, 220),
    "warning": (255, 140, 140),
}

ROTATE_KEYS = {
    pygame.K_LEFT: 1,
    pygame.K_RIGHT: -1,
}


def seed_from_time():
    return int(time.time()) & 0xFFFFFFFF


def ship_points(pos, angle, radius):
    x, y = pos
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    nose = (x + 4 / 3 * radius * cos_a, y - 4 / 3 * radius * sin_a)
    rear_left = (x - radius * (2 / 3 * cos_a + sin_a), y + radius * (2 / 3 * sin_a - cos_a))
    rear_right = (x - radius * (2 / 3 * cos_a - sin_a), y + radius * (2 / 3 * sin_a + cos_a))
    return [nose, rear_left, rear_right]


def draw_ship(surface, ship, color, width=2):
    pygame.draw.lines(surface, color, True, ship_points(ship.position, ship.angle, ship.radius), width)


def draw_thruster(surface, ship, color):
    x, y = ship.position
    r = ship.radius
    cos_a, sin_a = math.cos(ship.angle), math.sin(ship.angle)
    points = [
        (x - r * (2 / 3 * cos_a + 0.5 * sin_a), y + r * (2 / 3 * sin_a - 0.5 * cos_a)),
        (x - r * 5 / 3 * cos_a, y + r * 5 / 3 * sin_a),
        (x - r * (2 / 3 * cos_a - 0.5 * sin_a), y + r * (2 / 3 * sin_a + 0.5 * cos_a)),
    ]
    pygame.draw.lines(surface, color, True, points, 2)


def draw_asteroid(surface, asteroid, color, width=2):
    x, y = asteroid.position
    step = math.tau / asteroid.vertices
    points = []
    for i, offset in enumerate(asteroid.offsets):
        a = asteroid.angle + i * step
        r = asteroid.radius * offset
        points.append((x + r * math.cos(a), y + r * math.sin(a)))
    pygame.draw.lines(surface, color, True, points, width)


def draw_laser(surface, laser, ship_size):
    pos = (int(laser.position[0]), int(laser.position[1]))
    if laser.exploding:
        pygame.draw.circle(surface, COLORS["laser_burst"], pos, max(1, int(ship_size * 0.25)))
        pygame.draw.circle(surface, COLORS["laser"], pos, max(1, int(ship_size * 0.15)))
    else:
        pygame.draw.circle(surface, COLORS["laser"], pos, max(1, int(ship_size / 15)))


def draw_particles(surface, particles):
    layer = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
    for p in particles:
        pygame.draw.circle(layer, COLORS["particle"], (int(p.position[0]), int(p.position[1])), max(1, int(p.radius)))
    surface.blit(layer, (0, 0))


def draw_status(surface, font, text, alpha, color):
    rendered = font.render(text, True, color)
    rendered.set_alpha(int(255 * max(0.0, min(1.0, alpha))))
    width, height = surface.get_size()
    surface.blit(rendered, (width / 2 - rendered.get_width() / 2, height * 0.75))


def draw_frame(screen, fonts, snap, config, show_bounding=False, show_centre=False):
    font, big_font = fonts
    screen.fill(COLORS["bg"])

    ship = snap.ship
    if ship.alive and not ship.exploding:
        if ship.blink_visible:
            if ship.thrusting:
                draw_thruster(screen, ship, COLORS["thruster"])
            draw_ship(screen, ship, COLORS["ship"])
    elif ship.exploding:
        draw_particles(screen, snap.particles)

    for laser in snap.lasers:
        draw_laser(screen, laser, config.ship_size)

    for asteroid in snap.asteroids:
        draw_asteroid(screen, asteroid, COLORS["asteroid"])
        if show_bounding:
            pygame.draw.circle(screen, COLORS["bounding"], asteroid.position, asteroid.radius, 1)

    if show_bounding and ship.alive:
        pygame.draw.circle(screen, COLORS["bounding"], ship.position, ship.radius, 1)
    if show_centre and ship.alive:
        screen.fill(COLORS["centre"], pygame.Rect(ship.position[0] - 1, ship.position[1] - 1, 2, 2))

    if snap.status_text:
        color = COLORS["warning"] if snap.phase == "game_over" else COLORS["ui"]
        draw_status(screen, big_font, snap.status_text, snap.status_alpha, color)

    for i in range(snap.lives):
        draw_ship(screen, _LifeIcon((30 + i * 36, 30), config.ship_radius), COLORS["ship"], 1)

    width = screen.get_width()
    score = font.render(f"{snap.score}", True, COLORS["ui"])
    screen.blit(score, (width - score.get_width() - 15, 15))
    best = font.render(f"BEST {snap.high_score}", True, COLORS["ui"])
    screen.blit(best, (width / 2 - best.get_width() / 2, 15))


class _LifeIcon:
    angle = math.pi / 2

    def __init__(self, position, radius):
        self.position = position
        self.radius = radius


def handle_event(controller, event):
    if event.type == pygame.KEYDOWN:
        if event.key == pygame.K_SPACE:
            controller.request_fire()
        elif event.key in ROTATE_KEYS:
            controller.apply_rotation(ROTATE_KEYS[event.key])
        elif event.key == pygame.K_UP:
            controller.set_thrusting(True)
    elif event.type == pygame.KEYUP:
        if event.key == pygame.K_SPACE:
            controller.release_fire_gate()
        elif event.key in ROTATE_KEYS:
            controller.apply_rotation(0)
        elif event.key == pygame.K_UP:
            controller.set_thrusting(False)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Asteroids")
    parser.add_argument("--seed", type=int, default=None, help="Random seed (default: time based)")
    parser.add_argument("--config", type=str, default=None, help="JSON file overriding game settings")
    parser.add_argument("--highscore-file", type=str, default=SAVE_PATH)
    parser.add_argument("--no-save", action="store_true", help="Keep the high score in memory only")
    parser.add_argument("--log-level", type=str, default="INFO")
    parser.add_argument("--show-bounding", action="store_true", help="Draw collision circles")
    parser.add_argument("--show-centre", action="store_true", help="Draw the ship's centre dot")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logger = logging.getLogger("asteroids")

    config = load_config(args.config) if args.config else GameConfig()
    seed = args.seed if args.seed is not None else seed_from_time()
    store = MemoryHighScoreStore() if args.no_save else JsonHighScoreStore(args.highscore_file)
    logger.info("Seed: %d", seed)

    controller = GameController(config, rng=random.Random(seed), store=store)

    pygame.init()
    screen = pygame.display.set_mode((config.width, config.height))
    pygame.display.set_caption("Asteroids")
    clock = pygame.time.Clock()
    fonts = (pygame.font.SysFont("Consolas", 24), pygame.font.SysFont("Consolas", 40))

    running = True
    while running:
        clock.tick(config.tick_rate)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False
            else:
                handle_event(controller, event)

        controller.tick()
        draw_frame(screen, fonts, controller.snapshot(), config, args.show_bounding, args.show_centre)
        pygame.display.flip()

    pygame.quit()


if __name__ == "__main__":
    main()

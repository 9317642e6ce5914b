TICK_RATE = 120
WIDTH = 800
HEIGHT = 600

SHIP_SIZE = 30
SHIP_TURN_SPEED = 360  # degrees/sec
SHIP_THRUST = 5  # px/sec^2
SHIP_FRICTION = 0.5
SHIP_EXPLODE_DURATION = 0.3
SHIP_INVINCIBILITY_DURATION = 2.0
SHIP_BLINK_DURATION = 0.1

LASER_MAX = 10
LASER_SPEED = 500  # px/sec
LASER_DISTANCE = 0.6  # fraction of playfield width
LASER_EXPLODE_DURATION = 0.1

NUMBER_ASTEROIDS = 10
ASTEROIDS_PER_LEVEL = 2
ASTEROID_SIZE = 100
ASTEROID_SPEED = 50  # px/sec
ASTEROID_VERTICES = 10
ASTEROID_JAGGEDNESS = 0.3
LEVEL_SPEED_STEP = 0.1

ASTEROID_POINTS = {
    "large": 20,
    "medium": 50,
    "small": 80,
}

GAME_LIVES = 3
TEXT_FADE_TIME = 2.5

PARTICLE_COUNT = 30
PARTICLE_SHRINK = 0.02

SAVE_PATH = "highscore.json"
SAVE_KEY_SCORE = "highscore"

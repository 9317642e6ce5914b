"""Fixed-step simulation core for a wrapped-playfield asteroids game."""

from .config import GameConfig, load_config
from .game import GameController, Phase
from .spawner import Spawner
from .storage import JsonHighScoreStore, MemoryHighScoreStore

__all__ = [
    "GameConfig",
    "GameController",
    "JsonHighScoreStore",
    "MemoryHighScoreStore",
    "Phase",
    "Spawner",
    "load_config",
]

from .base import BasePlayer
from .random_player import RandomPlayer

__all__ = [
    'BasePlayer',
    'RandomPlayer',
]

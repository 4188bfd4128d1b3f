"""
Player implementations for the snake engine.

A player is any source of direction commands; the presentation layer's
keyboard handler is one, the headless autopilot below is another.
"""

from .base import Player
from .random_player import RandomPlayer

__all__ = [
    'Player',
    'RandomPlayer',
]

"""
Game Module

This module ties the engine core together for front-ends.

Key Components:
    - Settings: AI depth, forced-capture rule, side moving first
    - Game: Current position, history stack, player/AI moves and undo
"""

from checkers_engine.game.settings import Settings
from checkers_engine.game.controller import Game

__all__ = ['Settings', 'Game']

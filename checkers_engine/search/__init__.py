"""
Search Module

This module implements the checkers search algorithm: depth-limited
minimax with alpha-beta pruning over the successors produced by the move
generator.

Key Components:
    - minimax: Core search algorithm with alpha-beta pruning
    - find_best_move: Root-level search returning move, score and node count
    - choose_move: Root-level search returning only the move
"""

from checkers_engine.search.minimax import (
    MAX_DEPTH,
    MIN_DEPTH,
    choose_move,
    find_best_move,
    minimax,
)

__all__ = ['minimax', 'find_best_move', 'choose_move', 'MIN_DEPTH', 'MAX_DEPTH']

"""
Board Module

This module provides the position model, board geometry, legal move
generation and conversions between positions and their external forms.

Key Components:
    - Position: Immutable 32-square position with side to move and chain origin
    - successors: Legal moves of a position (forced capture, multi-jumps)
    - position_to_fen / position_from_fen: FEN-style text form
    - position_to_tensor: 4-channel (4, 8, 8) numpy encoding

Data Flow:
    Position → successors() → [Move(from, to, position), ...]
"""

from checkers_engine.board.position import (
    Piece,
    Player,
    Position,
    Rank,
    initial_position,
)
from checkers_engine.board.movegen import (
    Move,
    has_legal_move,
    is_terminal,
    successors,
    winner,
)
from checkers_engine.board.representation import (
    position_from_fen,
    position_to_fen,
    position_to_tensor,
    tensor_to_position,
)

__all__ = [
    'Piece',
    'Player',
    'Position',
    'Rank',
    'initial_position',
    'Move',
    'has_legal_move',
    'is_terminal',
    'successors',
    'winner',
    'position_from_fen',
    'position_to_fen',
    'position_to_tensor',
    'tensor_to_position',
]

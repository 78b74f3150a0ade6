"""
Utilities Module

This module provides utility functions for testing and benchmarking the
checkers engine.

Key Components:
    - Perft: Move generation verification
    - Tactical test suite: positions with a known best move

Success Metrics:
    - Perft: exact leaf counts at every depth
    - Tactics: all positions solved at depth 3
"""

from checkers_engine.utils.testing import (
    evaluate_position,
    perft,
    perft_divide,
    run_perft,
    run_tactics,
)

__all__ = [
    'evaluate_position',
    'perft',
    'perft_divide',
    'run_perft',
    'run_tactics',
]

"""
Evaluation Module

This module provides position evaluation functions for the checkers engine.
The key design principle is that evaluators are SWAPPABLE - the search
algorithm works with any evaluator that implements the base interface.

Key Components:
    - Evaluator (ABC): Abstract base class defining the evaluation interface
    - MaterialEvaluator: Men and kings counted with fixed weights (king = 2 men)

Data Flow:
    Position → evaluator.evaluate() → float
                                      Positive = AI advantage
                                      Negative = Human advantage
                                      ±inf     = decided game
"""

from checkers_engine.evaluation.base import Evaluator, INFINITY
from checkers_engine.evaluation.material import MaterialEvaluator

__all__ = ['Evaluator', 'MaterialEvaluator', 'INFINITY']

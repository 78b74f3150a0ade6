"""
Abstract Evaluator Interface

This module defines the abstract base class for all position evaluators.
By defining a common interface, we can swap between
evaluators without modifying the search algorithm.

Key Principles:
    1. Evaluators are stateless
    2. evaluate() always returns a score from the AI's perspective
    3. Positive = AI advantage, Negative = Human advantage
    4. Terminal positions return ±INFINITY

Convention:
    - Material values in men (man = 1, king = 2 by default)
    - Return 0 for perfectly equal positions
"""

from abc import ABC, abstractmethod
import math
from typing import Optional

from checkers_engine.board.movegen import has_legal_move
from checkers_engine.board.position import Player, Position


# Evaluation constants
INFINITY = math.inf  # Represents certain victory/defeat


class Evaluator(ABC):
    """
    Abstract base class for position evaluation.

    All evaluator implementations must inherit from this class and implement
    the evaluate_material() method. This ensures compatibility with the search
    algorithm.

    Methods:
        evaluate(position): Returns position evaluation from the AI's viewpoint
    """

    @abstractmethod
    def evaluate_material(self, position: Position) -> float:
        """
        Score a non-terminal position from the AI's perspective.

        Args:
            position: Position to evaluate

        Returns:
            float: Evaluation in men

        Raises:
            NotImplementedError: If subclass doesn't implement this method
        """
        pass

    def evaluate_terminal(self, position: Position) -> Optional[float]:
        """
        Evaluate terminal positions.

        The side to move has lost when it cannot move, so a stuck human is
        a win for the AI and a stuck AI a loss.

        Args:
            position: Position to check

        Returns:
            float: +INFINITY / -INFINITY if terminal
            None: If position is not terminal
        """
        if has_legal_move(position):
            return None

        if position.side_to_move is Player.HUMAN:
            return INFINITY
        return -INFINITY

    def evaluate(self, position: Position) -> float:
        """
        Evaluate any position from the AI's perspective.

        Args:
            position: Position to evaluate

        Returns:
            float: ±INFINITY for terminal positions, static score otherwise
        """
        terminal_score = self.evaluate_terminal(position)
        if terminal_score is not None:
            return terminal_score
        return self.evaluate_material(position)

    def __repr__(self) -> str:
        """String representation of evaluator."""
        return f"{self.__class__.__name__}()"

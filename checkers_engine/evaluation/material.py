"""
Material Evaluation

This module implements the baseline checkers evaluation: material balance,
with kings weighted more heavily than men.

    score = material(AI) - material(HUMAN)
    material(owner) = men(owner) + K * kings(owner)

The default king weight K = 2 makes a king worth two men.

Material is counted over the 4-channel tensor encoding of the position, so
the per-channel piece counts come from a single numpy reduction and the
weighting is a dot product with a fixed weight vector.
"""

import numpy as np

from checkers_engine.board.position import Position
from checkers_engine.board.representation import position_to_tensor
from checkers_engine.evaluation.base import Evaluator

MAN_VALUE = 1.0
KING_VALUE = 2.0


class MaterialEvaluator(Evaluator):
    """
    Material-only evaluation.

    Attributes:
        man_value: Weight of a man
        king_value: Weight of a king
        weights: Per-channel weight vector matching the tensor channel order
            (human men, human kings, AI men, AI kings)
    """

    def __init__(self, man_value: float = MAN_VALUE, king_value: float = KING_VALUE):
        if man_value <= 0 or king_value <= 0:
            raise ValueError(
                f"Piece values must be positive, got man={man_value}, king={king_value}"
            )

        self.man_value = man_value
        self.king_value = king_value

        # Human material counts against the AI
        self.weights = np.array(
            [-man_value, -king_value, man_value, king_value], dtype=np.float32
        )

    def evaluate_material(self, position: Position) -> float:
        """
        Evaluate material balance from the AI's perspective.

        Args:
            position: Position to evaluate

        Returns:
            float: AI material minus human material
        """
        counts = position_to_tensor(position).sum(axis=(1, 2))
        return float(np.dot(counts, self.weights))

    def __repr__(self) -> str:
        return f"MaterialEvaluator(man_value={self.man_value}, king_value={self.king_value})"

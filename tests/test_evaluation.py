"""
Unit Tests for Evaluation Module

Tests for position evaluation functions, focusing on:
    - Material counting accuracy
    - King weighting
    - Symmetry (mirrored position = negated evaluation)
    - Terminal position detection
"""

import math

import pytest

from checkers_engine.board import initial_position, position_from_fen
from checkers_engine.evaluation import INFINITY, Evaluator, MaterialEvaluator


class TestMaterialEvaluator:
    """Tests for MaterialEvaluator."""

    @pytest.fixture
    def evaluator(self):
        """Create a MaterialEvaluator instance."""
        return MaterialEvaluator()

    def test_starting_position_is_equal(self, evaluator):
        assert evaluator.evaluate(initial_position()) == 0.0

    def test_material_advantage(self, evaluator):
        """
        AI has a man and a king against a single man: 1 + 2 - 1 = 2.
        """
        position = position_from_fen("H:H8:A20,K21")

        assert evaluator.evaluate(position) == 2.0

    def test_custom_king_value(self):
        evaluator = MaterialEvaluator(king_value=3)
        position = position_from_fen("H:H8:A20,K21")

        assert evaluator.evaluate(position) == 3.0

    def test_human_advantage_is_negative(self, evaluator):
        position = position_from_fen("A:H8,K13:A20")

        assert evaluator.evaluate(position) == -2.0

    def test_score_is_python_float(self, evaluator):
        assert type(evaluator.evaluate(initial_position())) is float

    @pytest.mark.parametrize("man_value,king_value", [(0, 2), (1, 0), (-1, 2)])
    def test_non_positive_values_rejected(self, man_value, king_value):
        with pytest.raises(ValueError):
            MaterialEvaluator(man_value=man_value, king_value=king_value)

    def test_consistency(self, evaluator):
        position = position_from_fen("A:H8,K13:A20,K21")

        scores = [evaluator.evaluate(position) for _ in range(5)]

        assert len(set(scores)) == 1, f"Evaluator is not deterministic: {scores}"

    @pytest.mark.parametrize("fen", [
        "H:H8:A20,K21",
        "A:H8,K13:A20",
        "H:H0:A4,5,9",
        "A:H10,17,18:A22,30",
    ])
    def test_symmetry(self, evaluator, fen):
        """Swapping the players negates the evaluation."""
        position = position_from_fen(fen)

        assert evaluator.evaluate(position.mirrored()) == -evaluator.evaluate(position)

    def test_repr(self, evaluator):
        assert repr(evaluator) == "MaterialEvaluator(man_value=1.0, king_value=2.0)"


class TestTerminalEvaluation:
    """Tests for terminal scores."""

    @pytest.fixture
    def evaluator(self):
        return MaterialEvaluator()

    def test_stuck_human_is_ai_win(self, evaluator):
        position = position_from_fen("H:H0:A4,5,9")

        assert evaluator.evaluate(position) == INFINITY
        assert math.isinf(evaluator.evaluate_terminal(position))

    def test_ai_without_pieces_is_ai_loss(self, evaluator):
        position = position_from_fen("A:H8:A")

        assert evaluator.evaluate(position) == -INFINITY

    def test_non_terminal_returns_none(self, evaluator):
        assert evaluator.evaluate_terminal(initial_position()) is None


class TestEvaluatorInterface:
    """Tests for Evaluator abstract interface."""

    def test_evaluator_is_abstract(self):
        """
        Test that Evaluator cannot be instantiated directly.
        """
        with pytest.raises(TypeError):
            Evaluator()

    def test_subclass_only_needs_material(self):
        """A subclass providing evaluate_material gets terminal handling for free."""

        class ConstantEvaluator(Evaluator):
            def evaluate_material(self, position):
                return 7.0

        evaluator = ConstantEvaluator()

        assert evaluator.evaluate(initial_position()) == 7.0
        assert evaluator.evaluate(position_from_fen("A:H8:A")) == -INFINITY
        assert repr(evaluator) == "ConstantEvaluator()"

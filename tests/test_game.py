"""
Unit Tests for Game Module

Tests for the settings object and the game controller, focusing on:
    - Settings defaults, validation and textual options
    - Per-piece move queries
    - Committing human and AI moves
    - Undo and restart
"""

import dataclasses

import pytest

from checkers_engine.board import (
    Piece,
    Player,
    Position,
    initial_position,
    position_from_fen,
    successors,
)
from checkers_engine.evaluation import INFINITY, MaterialEvaluator
from checkers_engine.game import Game, Settings


def notations(moves):
    return [move.notation() for move in moves]


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self):
        settings = Settings()

        assert settings.ai_depth == 5
        assert settings.force_takes is True
        assert settings.first_move is Player.HUMAN

    @pytest.mark.parametrize("depth", [0, 13, -1, True, "5", 2.5])
    def test_invalid_depth_rejected(self, depth):
        with pytest.raises(ValueError):
            Settings(ai_depth=depth)

    def test_invalid_first_move_rejected(self):
        with pytest.raises(ValueError):
            Settings(first_move="ai")

    def test_settings_are_frozen(self):
        settings = Settings()
        with pytest.raises(dataclasses.FrozenInstanceError):
            settings.ai_depth = 7

    def test_with_option_returns_copy(self):
        settings = Settings()

        changed = settings.with_option("AI_DEPTH", "7")

        assert changed.ai_depth == 7
        assert settings.ai_depth == 5

    @pytest.mark.parametrize("value,expected", [
        ("off", False), ("false", False), ("0", False),
        ("on", True), ("TRUE", True), ("yes", True),
    ])
    def test_force_takes_option(self, value, expected):
        assert Settings().with_option("force_takes", value).force_takes is expected

    def test_first_move_option(self):
        assert Settings().with_option("FIRST_MOVE", "AI").first_move is Player.AI
        assert Settings().with_option("FIRST_MOVE", Player.HUMAN).first_move is Player.HUMAN

    @pytest.mark.parametrize("name,value", [
        ("AI_DEPTH", "abc"),
        ("AI_DEPTH", "20"),
        ("FORCE_TAKES", "maybe"),
        ("FIRST_MOVE", "nobody"),
        ("SPEED", "fast"),
    ])
    def test_invalid_options_rejected(self, name, value):
        with pytest.raises(ValueError):
            Settings().with_option(name, value)

    def test_as_options(self):
        settings = Settings(ai_depth=3, force_takes=False, first_move=Player.AI)

        assert settings.as_options() == {
            "AI_DEPTH": "3",
            "FORCE_TAKES": "off",
            "FIRST_MOVE": "ai",
        }


class TestGame:
    """Tests for the Game controller."""

    @pytest.fixture
    def game(self):
        """Create a game with a shallow AI."""
        return Game(Settings(ai_depth=2))

    def test_new_game(self, game):
        assert game.position == initial_position()
        assert game.turn is Player.HUMAN
        assert not game.is_over
        assert game.winner is None
        assert not game.can_undo
        assert game.last_search is None
        assert isinstance(game.evaluator, MaterialEvaluator)

    def test_default_settings(self):
        assert Game().settings == Settings()

    def test_custom_evaluator(self):
        evaluator = MaterialEvaluator(king_value=3)

        assert Game(evaluator=evaluator).evaluator is evaluator

    def test_valid_moves_from(self, game):
        assert notations(game.valid_moves_from(9)) == ["9-14", "9-13"]
        assert game.valid_moves_from(1) == [], "Back-rank man is blocked"
        assert game.valid_moves_from(20) == [], "Not the mover's piece"
        assert game.valid_moves_from(15) == [], "Empty square"

    def test_player_move(self, game):
        move = game.valid_moves_from(9)[0]

        game.player_move(move)

        assert game.position == move.position
        assert game.turn is Player.AI
        assert game.can_undo

    def test_illegal_move_rejected(self, game):
        foreign_move = successors(initial_position(Player.AI))[0]

        with pytest.raises(ValueError):
            game.player_move(foreign_move)

        assert game.position == initial_position()
        assert not game.can_undo

    def test_ai_move_waits_for_its_turn(self, game):
        assert game.ai_move() is None
        assert game.position == initial_position()

    def test_ai_move(self, game):
        game.player_move(game.valid_moves_from(9)[0])

        move = game.ai_move()

        assert move is not None
        assert move.from_square >= 20
        assert game.turn is Player.HUMAN
        assert game.position == move.position
        assert game.last_search.depth == 2
        assert game.last_search.nodes > 0
        assert len(game.history) == 2

    def test_undo_restores_positions(self, game):
        game.player_move(game.valid_moves_from(9)[0])
        after_human = game.position
        game.ai_move()

        assert game.undo() == after_human
        assert game.turn is Player.AI
        assert game.undo() == initial_position()
        assert not game.can_undo

    def test_undo_without_history(self, game):
        with pytest.raises(ValueError):
            game.undo()

    def test_restart(self, game):
        game.player_move(game.valid_moves_from(9)[0])

        game.restart(Settings(first_move=Player.AI, ai_depth=1))

        assert game.position == initial_position(Player.AI)
        assert game.turn is Player.AI
        assert game.settings.ai_depth == 1
        assert not game.can_undo

    def test_restart_keeps_settings(self, game):
        game.restart()

        assert game.settings == Settings(ai_depth=2)

    def test_ai_moves_first(self):
        game = Game(Settings(ai_depth=1, first_move=Player.AI))

        move = game.ai_move()

        assert move.notation() == "20-16"
        assert game.turn is Player.HUMAN

    def test_chain_origin_limits_pieces(self, game):
        human_man, ai_man = Piece(Player.HUMAN), Piece(Player.AI)
        game.set_position(Position.from_layout(
            {8: human_man, 13: human_man, 17: ai_man}, Player.HUMAN, chain_origin=13
        ))

        assert game.valid_moves_from(8) == []
        assert notations(game.valid_moves_from(13)) == ["13x22"]

    def test_force_takes_setting(self):
        game = Game(Settings(force_takes=False))
        game.set_position(position_from_fen("H:H8,13:A17"))

        assert notations(game.legal_moves()) == ["8-12", "13x22", "13-16"]

    def test_set_position_clears_history(self, game):
        game.player_move(game.valid_moves_from(9)[0])

        game.set_position(position_from_fen("A:H17:A22"))

        assert not game.can_undo

    def test_ai_wins(self, game):
        game.set_position(position_from_fen("A:H17:A22"))

        move = game.ai_move()

        assert move.notation() == "22x13"
        assert game.is_over
        assert game.winner is Player.AI
        assert game.last_search.score == INFINITY
        assert game.ai_move() is None

    def test_game_over_positions(self, game):
        game.set_position(position_from_fen("H:H0:A4,5,9"))
        assert game.is_over
        assert game.winner is Player.AI
        assert game.legal_moves() == []

        game.set_position(position_from_fen("A:H8:A"))
        assert game.is_over
        assert game.winner is Player.HUMAN
        assert game.ai_move() is None

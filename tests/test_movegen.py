"""
Unit Tests for Move Generation

Tests for legal move generation, focusing on:
    - Step moves and their deterministic order
    - Forced captures and the FORCE_TAKES switch
    - Multi-jump chains collapsed into a single successor
    - Promotion ending a chain
    - Terminal detection
    - Invariants along played-out games, perft counts and symmetry
"""

import random

import pytest

from checkers_engine.board import (
    Piece,
    Player,
    Position,
    Rank,
    has_legal_move,
    initial_position,
    is_terminal,
    position_from_fen,
    successors,
    winner,
)
from checkers_engine.board.geometry import SQUARE_ROWS, is_promotion_row
from checkers_engine.utils.testing import PERFT_RESULTS, perft, perft_divide

HUMAN_MAN = Piece(Player.HUMAN)
HUMAN_KING = Piece(Player.HUMAN, Rank.KING)
AI_MAN = Piece(Player.AI)
AI_KING = Piece(Player.AI, Rank.KING)


def notations(moves):
    return [move.notation() for move in moves]


class TestScenarios:
    """Reference positions with known successor sets."""

    def test_opening_has_seven_moves(self):
        """Only the four front-row men can move, seven moves in total."""
        moves = successors(initial_position())

        assert len(moves) == 7
        assert not any(move.is_capture for move in moves)
        assert notations(moves) == [
            "8-13", "8-12", "9-14", "9-13", "10-15", "10-14", "11-15",
        ]

    def test_opening_successors_flip_side(self):
        for move in successors(initial_position()):
            assert move.position.side_to_move is Player.AI
            assert move.position.chain_origin is None

    def test_single_forced_capture(self):
        position = position_from_fen("H:H13:A17")

        moves = successors(position)

        assert len(moves) == 1
        move = moves[0]
        assert move.is_capture
        assert (move.from_square, move.to_square) == (13, 22)
        assert move.captured == (17,)
        assert move.position.piece_at(17) is None
        assert move.position.piece_at(13) is None
        assert move.position.piece_at(22) == HUMAN_MAN
        assert move.position.side_to_move is Player.AI

    def test_multi_jump(self):
        """Both jumps form one successor; the man is crowned on row 0."""
        position = position_from_fen("H:H13:A17,26")

        moves = successors(position)

        assert len(moves) == 1
        move = moves[0]
        assert move.notation() == "13x22x31"
        assert move.path == (22, 31)
        assert move.captured == (17, 26)
        assert move.position.piece_at(31) == HUMAN_KING
        assert move.position.count_pieces(Player.AI) == 0
        assert move.position.side_to_move is Player.AI
        assert move.position.chain_origin is None

    def test_promotion_ends_chain(self):
        """The crowning jump 21x30 stops even though a king could go on over 26."""
        position = position_from_fen("H:H21:A25,26")

        moves = successors(position)

        assert notations(moves) == ["21x30"]
        successor = moves[0].position
        assert successor.piece_at(30) == HUMAN_KING
        assert successor.piece_at(26) == AI_MAN
        assert successor.side_to_move is Player.AI

        # The continuation really exists for a king already on 30
        king_position = Position.from_layout({30: HUMAN_KING, 26: AI_MAN})
        assert notations(successors(king_position)) == ["30x23"]

    def test_king_mobility(self):
        position = position_from_fen("A:H:AK14")

        moves = successors(position)

        assert notations(moves) == ["14-18", "14-17", "14-10", "14-9"]

    def test_blocked_man_is_terminal(self):
        position = position_from_fen("H:H0:A4,5,9")

        assert successors(position) == []
        assert is_terminal(position)
        assert position.is_terminal
        assert winner(position) is Player.AI
        assert position.winner is Player.AI

    def test_no_pieces_is_terminal(self):
        position = position_from_fen("A:H8:A")

        assert is_terminal(position)
        assert winner(position) is Player.HUMAN

    def test_ongoing_game_has_no_winner(self):
        assert winner(initial_position()) is None
        assert not initial_position().is_terminal


class TestMoveRules:
    """Tests for direction, capture and promotion rules."""

    def test_man_cannot_capture_backwards(self):
        position = position_from_fen("H:H13:A9")

        assert notations(successors(position)) == ["13-17", "13-16"]

    def test_ai_man_moves_towards_row_seven(self):
        position = position_from_fen("A:H0:A17")

        assert notations(successors(position)) == ["17-14", "17-13"]

    def test_ai_man_crowned_by_step(self):
        position = position_from_fen("A:H0:A7")

        moves = successors(position)

        assert notations(moves) == ["7-3", "7-2"]
        for move in moves:
            assert move.position.piece_at(move.to_square) == AI_KING

    def test_king_captures_backwards(self):
        position = Position.from_layout({13: HUMAN_KING, 9: AI_MAN})

        assert notations(successors(position)) == ["13x6"]

    def test_king_chains_follow_direction_order(self):
        position = Position.from_layout({14: HUMAN_KING, 18: AI_MAN, 17: AI_MAN})

        assert notations(successors(position)) == ["14x23", "14x21"]

    def test_branching_chain_yields_each_ending(self):
        """Two different second jumps give two successors."""
        position = Position.from_layout(
            {5: HUMAN_KING, 9: AI_MAN, 18: AI_MAN, 17: AI_MAN}
        )

        moves = successors(position)

        assert notations(moves) == ["5x14x23", "5x14x21"]
        for move in moves:
            assert move.position.count_pieces(Player.AI) == 1

    def test_captured_piece_cannot_be_jumped_twice(self):
        """A king circling back finds the square it emptied, not a piece."""
        position = Position.from_layout(
            {14: HUMAN_KING, 18: AI_MAN, 26: AI_MAN, 25: AI_MAN, 17: AI_MAN}
        )

        for move in successors(position):
            assert len(set(move.captured)) == len(move.captured)
            assert move.position.count_pieces(Player.AI) == 4 - len(move.captured)


class TestForcedCapture:
    """Tests for the forced-capture rule."""

    def test_capture_forced_across_pieces(self):
        """The man on 8 may not step while 13 can capture."""
        position = position_from_fen("H:H8,13:A17")

        assert notations(successors(position)) == ["13x22"]

    def test_force_takes_off_allows_steps(self):
        position = position_from_fen("H:H8,13:A17")

        moves = successors(position, force_takes=False)

        assert notations(moves) == ["8-12", "13x22", "13-16"]

    def test_forced_capture_law(self):
        """If any successor is a capture, every successor is."""
        rng = random.Random(3)
        position = initial_position()

        for _ in range(80):
            moves = successors(position)
            if not moves:
                break
            if any(move.is_capture for move in moves):
                assert all(move.is_capture for move in moves)
            position = rng.choice(moves).position

    def test_chain_origin_restricts_sources(self):
        position = Position.from_layout(
            {8: HUMAN_MAN, 13: HUMAN_MAN, 17: AI_MAN}, Player.HUMAN, chain_origin=13
        )

        assert notations(successors(position)) == ["13x22"]
        assert notations(successors(position, force_takes=False)) == ["13x22"]

    def test_chain_origin_without_capture_has_no_moves(self):
        position = Position.from_layout(
            {8: HUMAN_MAN, 13: HUMAN_MAN}, Player.HUMAN, chain_origin=13
        )

        assert successors(position) == []
        assert not has_legal_move(position)


class TestInvariants:
    """Properties that hold along any game."""

    @pytest.mark.parametrize("seed", [1, 2, 3, 4, 5])
    def test_random_playout(self, seed):
        rng = random.Random(seed)
        position = initial_position()

        for _ in range(150):
            moves = successors(position)

            assert bool(moves) == has_legal_move(position)
            assert (not moves) == is_terminal(position)
            if not moves:
                break

            move = rng.choice(moves)
            successor = move.position

            for player in Player:
                assert successor.count_pieces(player) <= position.count_pieces(player)

            for square, piece in enumerate(successor.squares):
                if piece is not None and not piece.is_king:
                    assert not is_promotion_row(
                        SQUARE_ROWS[square], piece.owner is Player.AI
                    ), f"Uncrowned man on square {square}"

            assert len(successor.squares) == 32
            assert successor.chain_origin is None
            assert successor.side_to_move is position.side_to_move.opponent

            position = successor

    @pytest.mark.parametrize("fen", [
        "H:H13:A17,26",
        "H:H8,13:A17",
        "A:H10,17,18:A22,30",
        "A:H0:A7,28",
        "H:HK14:A18,17,9",
    ])
    def test_symmetry(self, fen):
        """Swapping the players mirrors the successor set."""
        position = position_from_fen(fen)

        expected = {move.position.mirrored() for move in successors(position)}
        actual = {move.position for move in successors(position.mirrored())}

        assert actual == expected


class TestPerft:
    """Leaf counts from the opening position."""

    @pytest.mark.parametrize("depth,expected", sorted(PERFT_RESULTS.items()))
    def test_perft(self, depth, expected):
        assert perft(initial_position(), depth) == expected

    def test_perft_depth_zero(self):
        assert perft(initial_position(), 0) == 1

    def test_divide_sums_to_perft(self):
        counts = perft_divide(initial_position(), 3)

        assert list(counts) == [
            "8-13", "8-12", "9-14", "9-13", "10-15", "10-14", "11-15",
        ]
        assert sum(counts.values()) == PERFT_RESULTS[3]

    def test_divide_depth_one(self):
        assert set(perft_divide(initial_position(), 1).values()) == {1}

    def test_divide_rejects_depth_zero(self):
        with pytest.raises(ValueError):
            perft_divide(initial_position(), 0)

"""
Game Controller

Thin facade over the engine core used by front-ends. It owns the current
position and a history stack of the positions before every committed
half-move.

Operations:
    - valid_moves_from: Legal moves of the piece on one square
    - player_move: Commit one of those moves
    - ai_move: Let the search pick and commit the AI's move
    - undo: Take back the last half-move, whichever side played it
    - restart: Start over from the opening layout

The controller never sleeps or schedules anything; pacing of the AI's
moves is left to the caller.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from checkers_engine.board.movegen import Move, successors
from checkers_engine.board.position import Player, Position, initial_position
from checkers_engine.evaluation.base import Evaluator
from checkers_engine.evaluation.material import MaterialEvaluator
from checkers_engine.game.settings import Settings
from checkers_engine.search.minimax import find_best_move

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchInfo:
    """Statistics of the AI's last search."""
    depth: int
    score: float
    nodes: int


class Game:
    """
    A single game between the human and the AI.

    Attributes:
        settings: Settings read at game start
        evaluator: Evaluator used by the AI's search
        position: Current position
        history: Positions preceding each committed half-move, oldest first
        last_search: SearchInfo of the AI's most recent move, if any
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        evaluator: Optional[Evaluator] = None,
    ):
        """
        Start a new game from the opening layout.

        Args:
            settings: Game settings (default: Settings())
            evaluator: Evaluator for the AI (default: MaterialEvaluator)
        """
        self.settings = settings if settings else Settings()
        self.evaluator = evaluator if evaluator else MaterialEvaluator()
        self.restart()

    def restart(self, settings: Optional[Settings] = None) -> None:
        """
        Reset to the opening layout, optionally with new settings.
        """
        if settings is not None:
            self.settings = settings

        self.position: Position = initial_position(self.settings.first_move)
        self.history: List[Position] = []
        self.last_search: Optional[SearchInfo] = None
        logger.info(f"New game: {self.settings}")

    def set_position(self, position: Position) -> None:
        """
        Continue play from an arbitrary position; the history is cleared.
        """
        self.position = position
        self.history = []
        self.last_search = None
        logger.info(f"Position set: {position.side_to_move.value} to move")

    @property
    def turn(self) -> Player:
        return self.position.side_to_move

    @property
    def is_over(self) -> bool:
        return self.position.is_terminal

    @property
    def winner(self) -> Optional[Player]:
        return self.position.winner

    @property
    def can_undo(self) -> bool:
        return bool(self.history)

    def legal_moves(self) -> List[Move]:
        """All legal moves in the current position."""
        return successors(self.position, self.settings.force_takes)

    def valid_moves_from(self, square: int) -> List[Move]:
        """
        Legal moves of the piece on one square.

        Args:
            square: Square index (0-31)

        Returns:
            Moves starting on square; empty if the square holds no piece of
            the side to move, or if a multi-jump must continue from another
            square
        """
        chain_origin = self.position.chain_origin
        if chain_origin is not None and chain_origin != square:
            return []
        return [move for move in self.legal_moves() if move.from_square == square]

    def _commit(self, move: Move) -> None:
        self.history.append(self.position)
        self.position = move.position

        logger.info(f"{self.history[-1].side_to_move.value} played {move}")
        if self.position.is_terminal:
            logger.info(f"Game over: {self.position.winner.value} wins")

    def player_move(self, move: Move) -> None:
        """
        Commit a move chosen by the caller.

        Args:
            move: One of the current legal moves

        Raises:
            ValueError: If move is not legal in the current position
        """
        if move not in self.legal_moves():
            raise ValueError(f"Illegal move: {move}")
        self._commit(move)

    def ai_move(self) -> Optional[Move]:
        """
        Let the AI search and play its move.

        Returns:
            The move played, or None if the game is over or it is not the
            AI's turn
        """
        if self.turn is not Player.AI or self.is_over:
            return None

        move, score, nodes = find_best_move(
            self.position,
            self.settings.ai_depth,
            self.evaluator,
            self.settings.force_takes,
        )
        self.last_search = SearchInfo(self.settings.ai_depth, score, nodes)
        logger.debug(f"AI search: {self.last_search}")

        self._commit(move)
        return move

    def undo(self) -> Position:
        """
        Take back the last committed half-move.

        Returns:
            The restored position

        Raises:
            ValueError: If there is nothing to undo
        """
        if not self.history:
            raise ValueError("Nothing to undo")

        self.position = self.history.pop()
        logger.info(f"Undo: {self.position.side_to_move.value} to move")
        return self.position

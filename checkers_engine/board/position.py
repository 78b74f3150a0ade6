"""
Position Model

Immutable snapshot of a checkers position: what stands on each of the 32
playable squares, whose turn it is, and whether a multi-jump is in progress.

Positions are never mutated. The move generator builds successor positions
from a predecessor and the game controller swaps one for another, so any
position can be shared freely between the controller, the search and
callers holding on to history.

Key Components:
    - Player: HUMAN or AI
    - Rank: MAN or KING
    - Piece: (owner, rank) pair
    - Position: 32-square layout + side to move + chain origin
    - initial_position: Standard opening layout
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, Iterator, Optional, Tuple

from checkers_engine.board.geometry import (
    NUM_SQUARES,
    SQUARE_ROWS,
    coordinates_to_square,
    is_promotion_row,
    mirror_square,
)

MAX_PIECES_PER_PLAYER = 12


class Player(Enum):
    """The two sides of the game."""
    HUMAN = "human"
    AI = "ai"

    @property
    def opponent(self) -> "Player":
        return Player.AI if self is Player.HUMAN else Player.HUMAN


class Rank(Enum):
    MAN = "man"
    KING = "king"


@dataclass(frozen=True)
class Piece:
    """
    A single checker.

    Attributes:
        owner: Player the piece belongs to
        rank: MAN (moves forward only) or KING (moves in all four diagonals)
    """
    owner: Player
    rank: Rank = Rank.MAN

    @property
    def is_king(self) -> bool:
        return self.rank is Rank.KING

    def crowned(self) -> "Piece":
        """Return the KING version of this piece."""
        return Piece(self.owner, Rank.KING)

    def swapped(self) -> "Piece":
        """Same rank, other owner."""
        return Piece(self.owner.opponent, self.rank)

    def symbol(self) -> str:
        """
        One-character symbol: h/H for human man/king, a/A for AI man/king.
        """
        letter = "h" if self.owner is Player.HUMAN else "a"
        return letter.upper() if self.is_king else letter


@dataclass(frozen=True)
class Position:
    """
    Immutable checkers position.

    Attributes:
        squares: 32-tuple, squares[i] is the Piece on square i or None
        side_to_move: Player whose turn it is
        chain_origin: Square from which the side to move must keep capturing,
            or None when no multi-jump is in progress

    The constructor performs no validation so that the move generator can
    build successors cheaply; use Position.from_layout() for positions coming
    from outside the engine.
    """
    squares: Tuple[Optional[Piece], ...]
    side_to_move: Player = Player.HUMAN
    chain_origin: Optional[int] = None

    @classmethod
    def from_layout(
        cls,
        pieces: Dict[int, Piece],
        side_to_move: Player = Player.HUMAN,
        chain_origin: Optional[int] = None,
    ) -> "Position":
        """
        Build a validated position from a {square: piece} mapping.

        Args:
            pieces: Occupied squares
            side_to_move: Player to move
            chain_origin: Square of a multi-jump in progress, if any

        Returns:
            Position

        Raises:
            ValueError: If a square is out of range, a player has more than
                12 pieces, a man stands on its promotion row, or the chain
                origin does not hold a piece of the side to move
        """
        squares = [None] * NUM_SQUARES
        for square, piece in pieces.items():
            if not 0 <= square < NUM_SQUARES:
                raise ValueError(f"Square index out of range: {square}")
            if not piece.is_king and is_promotion_row(
                SQUARE_ROWS[square], piece.owner is Player.AI
            ):
                raise ValueError(
                    f"Man on square {square} stands on its promotion row"
                )
            squares[square] = piece

        for player in Player:
            count = sum(1 for p in squares if p is not None and p.owner is player)
            if count > MAX_PIECES_PER_PLAYER:
                raise ValueError(
                    f"{player.value} has {count} pieces, at most "
                    f"{MAX_PIECES_PER_PLAYER} allowed"
                )

        if chain_origin is not None:
            if not 0 <= chain_origin < NUM_SQUARES:
                raise ValueError(f"Chain origin out of range: {chain_origin}")
            origin_piece = squares[chain_origin]
            if origin_piece is None or origin_piece.owner is not side_to_move:
                raise ValueError(
                    f"Chain origin {chain_origin} does not hold a piece of "
                    f"the side to move"
                )

        return cls(tuple(squares), side_to_move, chain_origin)

    def piece_at(self, square: int) -> Optional[Piece]:
        """
        Get the piece on a square.

        Raises:
            ValueError: If the square is outside 0-31
        """
        if not 0 <= square < NUM_SQUARES:
            raise ValueError(f"Square index out of range: {square}")
        return self.squares[square]

    def pieces(self, owner: Player) -> Iterator[Tuple[int, Piece]]:
        """Yield (square, piece) for every piece of owner, ascending squares."""
        for square, piece in enumerate(self.squares):
            if piece is not None and piece.owner is owner:
                yield square, piece

    def count_pieces(self, owner: Player, rank: Optional[Rank] = None) -> int:
        """
        Count pieces of one player, optionally restricted to one rank.
        """
        return sum(
            1
            for piece in self.squares
            if piece is not None
            and piece.owner is owner
            and (rank is None or piece.rank is rank)
        )

    @property
    def is_terminal(self) -> bool:
        """True when the side to move has no legal move."""
        from checkers_engine.board.movegen import is_terminal
        return is_terminal(self)

    @property
    def winner(self) -> Optional[Player]:
        """Winning player of a terminal position, None while play continues."""
        from checkers_engine.board.movegen import winner
        return winner(self)

    def mirrored(self) -> "Position":
        """
        Swap the two players.

        Every piece changes owner and the board is rotated 180 degrees so
        that each side keeps its forward direction. The side to move flips.
        """
        squares = tuple(
            None if piece is None else piece.swapped()
            for piece in reversed(self.squares)
        )
        chain_origin = (
            None if self.chain_origin is None else mirror_square(self.chain_origin)
        )
        return replace(
            self,
            squares=squares,
            side_to_move=self.side_to_move.opponent,
            chain_origin=chain_origin,
        )

    def __str__(self) -> str:
        """
        Plain text diagram, row 0 (AI home) on top.

        '.' is an empty playable square, '-' a light square.
        """
        lines = []
        for row in range(8):
            cells = []
            for col in range(8):
                square = coordinates_to_square(row, col)
                if square is None:
                    cells.append("-")
                elif self.squares[square] is None:
                    cells.append(".")
                else:
                    cells.append(self.squares[square].symbol())
            lines.append(" ".join(cells))
        lines.append(f"{self.side_to_move.value} to move")
        if self.chain_origin is not None:
            lines.append(f"capturing from {self.chain_origin}")
        return "\n".join(lines)


def initial_position(first_move: Player = Player.HUMAN) -> Position:
    """
    Standard opening layout.

    Human men fill squares 0-11 (rows 5-7), AI men fill squares 20-31
    (rows 0-2); the middle two rows are empty.

    Args:
        first_move: Player who moves first

    Returns:
        Opening Position
    """
    squares = (
        [Piece(Player.HUMAN)] * MAX_PIECES_PER_PLAYER
        + [None] * (NUM_SQUARES - 2 * MAX_PIECES_PER_PLAYER)
        + [Piece(Player.AI)] * MAX_PIECES_PER_PLAYER
    )
    return Position(tuple(squares), first_move)

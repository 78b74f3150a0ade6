"""
Legal Move Generation

Enumerates the legal successors of a position under English draughts rules:

    - Men step and capture diagonally forward only, kings in all directions
    - Forced capture: when any capture exists, only captures may be played
    - Multi-jump: a capturing piece keeps jumping while it can; the whole
      chain is one move and yields one successor position
    - Promotion: a man reaching the far row is crowned and its move ends there

Every move is returned together with the complete successor position, so
the search never mutates or undoes anything.

Emission Order (deterministic):
    1. Source squares ascending (only the chain origin during a multi-jump)
    2. Per source, captures before steps
    3. Directions NE, NW, SE, SW; chains are explored depth-first
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from checkers_engine.board.geometry import (
    DIRECTIONS,
    JUMPS,
    NEIGHBORS,
    NORTH,
    SOUTH,
    SQUARE_ROWS,
    is_promotion_row,
)
from checkers_engine.board.position import Piece, Player, Position

Squares = Tuple[Optional[Piece], ...]


@dataclass(frozen=True)
class Move:
    """
    A legal move and the position it produces.

    Attributes:
        from_square: Square the moving piece starts on
        to_square: Square the moving piece ends on
        position: Successor position (side to move already flipped)
        is_capture: True if the move jumps at least one piece
        path: Every square the piece lands on, ending with to_square
        captured: Squares of the pieces removed, in jump order
    """
    from_square: int
    to_square: int
    position: Position
    is_capture: bool = False
    path: Tuple[int, ...] = ()
    captured: Tuple[int, ...] = ()

    def notation(self) -> str:
        """
        Text form of the move: "9-13" for a step, "13x22x31" for a capture
        chain listing every landing square.
        """
        separator = "x" if self.is_capture else "-"
        return separator.join(str(square) for square in (self.from_square,) + self.path)

    def __str__(self) -> str:
        return self.notation()


def _directions_for(piece: Piece) -> Tuple[int, ...]:
    if piece.is_king:
        return DIRECTIONS
    # AI men advance towards row 7, human men towards row 0
    return SOUTH if piece.owner is Player.AI else NORTH


def _land(piece: Piece, square: int) -> Tuple[Piece, bool]:
    """Piece as it stands after landing on square, and whether it was crowned."""
    if not piece.is_king and is_promotion_row(
        SQUARE_ROWS[square], piece.owner is Player.AI
    ):
        return piece.crowned(), True
    return piece, False


def _jumps(squares: Squares, square: int, piece: Piece) -> List[Tuple[int, int]]:
    """
    Single captures available to piece standing on square.

    Returns:
        List of (captured square, landing square)
    """
    opponent = piece.owner.opponent
    jumps = []
    for direction in _directions_for(piece):
        landing = JUMPS[square][direction]
        if landing is None or squares[landing] is not None:
            continue
        over = NEIGHBORS[square][direction]
        victim = squares[over]
        if victim is not None and victim.owner is opponent:
            jumps.append((over, landing))
    return jumps


def _capture_chains(
    squares: Squares,
    square: int,
    piece: Piece,
    path: Tuple[int, ...] = (),
    captured: Tuple[int, ...] = (),
) -> List[Tuple[Tuple[int, ...], Tuple[int, ...], Squares]]:
    """
    Complete capture chains for the piece on square.

    Captured pieces leave the board as soon as they are jumped. A jump that
    crowns the piece ends the chain.

    Returns:
        List of (landing path, captured squares, resulting squares)
    """
    chains = []
    for over, landing in _jumps(squares, square, piece):
        landed, crowned = _land(piece, landing)

        board = list(squares)
        board[square] = None
        board[over] = None
        board[landing] = landed
        board = tuple(board)

        new_path = path + (landing,)
        new_captured = captured + (over,)

        continuations = [] if crowned else _capture_chains(
            board, landing, landed, new_path, new_captured
        )
        if continuations:
            chains.extend(continuations)
        else:
            chains.append((new_path, new_captured, board))
    return chains


def _capture_moves(position: Position, square: int, piece: Piece) -> List[Move]:
    next_side = position.side_to_move.opponent
    return [
        Move(
            from_square=square,
            to_square=path[-1],
            position=Position(board, next_side, None),
            is_capture=True,
            path=path,
            captured=captured,
        )
        for path, captured, board in _capture_chains(position.squares, square, piece)
    ]


def _step_moves(position: Position, square: int, piece: Piece) -> List[Move]:
    squares = position.squares
    next_side = position.side_to_move.opponent
    moves = []
    for direction in _directions_for(piece):
        target = NEIGHBORS[square][direction]
        if target is None or squares[target] is not None:
            continue

        board = list(squares)
        board[square] = None
        board[target] = _land(piece, target)[0]

        moves.append(
            Move(
                from_square=square,
                to_square=target,
                position=Position(tuple(board), next_side, None),
                path=(target,),
            )
        )
    return moves


def successors(position: Position, force_takes: bool = True) -> List[Move]:
    """
    Generate every legal move of the side to move.

    Args:
        position: Position to expand
        force_takes: If True, captures are mandatory whenever one exists

    Returns:
        Moves in deterministic order; empty when the position is terminal

    Notes:
        While a multi-jump is in progress (chain_origin set) only captures
        by the piece on the chain origin are legal, whatever force_takes says.
    """
    side = position.side_to_move

    if position.chain_origin is not None:
        piece = position.squares[position.chain_origin]
        if piece is None or piece.owner is not side:
            return []
        return _capture_moves(position, position.chain_origin, piece)

    captures = []
    moves = []
    for square, piece in position.pieces(side):
        piece_captures = _capture_moves(position, square, piece)
        captures.extend(piece_captures)
        moves.extend(piece_captures)
        moves.extend(_step_moves(position, square, piece))

    if force_takes and captures:
        return captures
    return moves


def has_legal_move(position: Position) -> bool:
    """
    Check whether the side to move can move at all.

    Cheaper than successors(): stops at the first step or jump found and
    never builds successor positions. The answer does not depend on the
    forced-capture setting.
    """
    squares = position.squares
    side = position.side_to_move

    if position.chain_origin is not None:
        piece = squares[position.chain_origin]
        if piece is None or piece.owner is not side:
            return False
        return bool(_jumps(squares, position.chain_origin, piece))

    for square, piece in position.pieces(side):
        for direction in _directions_for(piece):
            target = NEIGHBORS[square][direction]
            if target is not None and squares[target] is None:
                return True
        if _jumps(squares, square, piece):
            return True
    return False


def is_terminal(position: Position) -> bool:
    """A position is terminal when the side to move has no legal move."""
    return not has_legal_move(position)


def winner(position: Position) -> Optional[Player]:
    """
    Winner of the game at this position.

    Returns:
        The opponent of the side to move if it cannot move, otherwise None.
        There is no draw rule, so a terminal position always has a winner.
    """
    if is_terminal(position):
        return position.side_to_move.opponent
    return None

"""
Position Encodings

This module converts positions to and from two external forms.

FEN-style String:
    <side>:H<squares>:A<squares>[:C<square>]

    - side: "H" (human to move) or "A" (AI to move)
    - H / A fields: comma-separated 0-based square indices of each player's
      pieces, a "K" prefix marks a king
    - optional C field: chain origin of a multi-jump in progress

    Example: "H:H8,9,K13:A20,21"  (human men on 8 and 9, human king on 13,
    AI men on 20 and 21, human to move)

4-Channel Tensor (piece positions only):
    0: Human men        2: AI men
    1: Human kings      3: AI kings

    Each channel is an 8*8 binary mask where 1 indicates piece presence.

Board Orientation:
    - Row 0 = AI's back rank
    - Row 7 = Human's back rank
"""

import numpy as np
from typing import Dict, List

from checkers_engine.board.geometry import (
    BOARD_SIZE,
    NUM_SQUARES,
    coordinates_to_square,
    square_to_coordinates,
)
from checkers_engine.board.position import Piece, Player, Position, Rank

NUM_CHANNELS = 4

# (owner, rank) to channel index mapping
PIECE_TO_CHANNEL = {
    (Player.HUMAN, Rank.MAN): 0,
    (Player.HUMAN, Rank.KING): 1,
    (Player.AI, Rank.MAN): 2,
    (Player.AI, Rank.KING): 3,
}

SIDE_TO_LETTER = {Player.HUMAN: "H", Player.AI: "A"}
LETTER_TO_SIDE = {letter: side for side, letter in SIDE_TO_LETTER.items()}


def position_to_tensor(position: Position) -> np.ndarray:
    """
    Convert a position to a 4-channel tensor representation.

    Args:
        position: Position to encode

    Returns:
        numpy array of shape (4, 8, 8) with dtype float32
    """
    tensor = np.zeros((NUM_CHANNELS, BOARD_SIZE, BOARD_SIZE), dtype=np.float32)

    for square, piece in enumerate(position.squares):
        if piece is not None:
            channel = PIECE_TO_CHANNEL[(piece.owner, piece.rank)]
            row, col = square_to_coordinates(square)
            tensor[channel, row, col] = 1.0

    return tensor


def tensor_to_position(
    tensor: np.ndarray, side_to_move: Player = Player.HUMAN
) -> Position:
    """
    Convert a 4-channel tensor back to a Position.

    This is the inverse of position_to_tensor(). The tensor carries no side
    to move, so the caller supplies it.

    Args:
        tensor: numpy array of shape (4, 8, 8)
        side_to_move: Player to move in the decoded position

    Returns:
        Position

    Raises:
        ValueError: If the tensor has an invalid shape, marks a light square,
            or puts several pieces on one square
    """
    if tensor.shape != (NUM_CHANNELS, BOARD_SIZE, BOARD_SIZE):
        raise ValueError(
            f"Invalid tensor shape: {tensor.shape}. "
            f"Expected ({NUM_CHANNELS}, {BOARD_SIZE}, {BOARD_SIZE})"
        )

    channel_to_piece = {v: Piece(*k) for k, v in PIECE_TO_CHANNEL.items()}
    pieces: Dict[int, Piece] = {}

    for channel in range(NUM_CHANNELS):
        for row, col in np.argwhere(tensor[channel] > 0.5):
            square = coordinates_to_square(int(row), int(col))
            if square is None:
                raise ValueError(f"Piece on light square ({row}, {col})")
            if square in pieces:
                raise ValueError(f"Multiple pieces on square {square}")
            pieces[square] = channel_to_piece[channel]

    return Position.from_layout(pieces, side_to_move)


def _format_squares(position: Position, owner: Player) -> str:
    return ",".join(
        f"K{square}" if piece.is_king else str(square)
        for square, piece in position.pieces(owner)
    )


def position_to_fen(position: Position) -> str:
    """
    Serialize a position to its FEN-style string.

    Args:
        position: Position to serialize

    Returns:
        String such as "H:H8,9,K13:A20,21"
    """
    fields = [
        SIDE_TO_LETTER[position.side_to_move],
        "H" + _format_squares(position, Player.HUMAN),
        "A" + _format_squares(position, Player.AI),
    ]
    if position.chain_origin is not None:
        fields.append(f"C{position.chain_origin}")
    return ":".join(fields)


def _parse_squares(field: str, owner: Player, pieces: Dict[int, Piece]) -> None:
    for token in field.split(","):
        token = token.strip()
        if not token:
            continue

        rank = Rank.MAN
        if token[0] in "Kk":
            rank = Rank.KING
            token = token[1:]

        try:
            square = int(token)
        except ValueError:
            raise ValueError(f"Invalid square in FEN: {token!r}") from None

        if not 0 <= square < NUM_SQUARES:
            raise ValueError(f"Square index out of range in FEN: {square}")
        if square in pieces:
            raise ValueError(f"Square {square} listed twice in FEN")
        pieces[square] = Piece(owner, rank)


def position_from_fen(fen: str) -> Position:
    """
    Parse a FEN-style string.

    Args:
        fen: String in the format documented at module level

    Returns:
        Validated Position

    Raises:
        ValueError: If the string is malformed or describes an impossible
            position (see Position.from_layout)
    """
    fields: List[str] = [field.strip() for field in fen.strip().split(":")]
    if len(fields) not in (3, 4):
        raise ValueError(f"Invalid FEN: {fen!r}")

    side_field, human_field, ai_field = fields[:3]
    if side_field.upper() not in LETTER_TO_SIDE:
        raise ValueError(f"Invalid side to move in FEN: {side_field!r}")
    if not human_field.upper().startswith("H") or not ai_field.upper().startswith("A"):
        raise ValueError(f"Invalid piece fields in FEN: {fen!r}")

    pieces: Dict[int, Piece] = {}
    _parse_squares(human_field[1:], Player.HUMAN, pieces)
    _parse_squares(ai_field[1:], Player.AI, pieces)

    chain_origin = None
    if len(fields) == 4:
        chain_field = fields[3]
        if not chain_field.upper().startswith("C"):
            raise ValueError(f"Invalid chain origin field in FEN: {chain_field!r}")
        try:
            chain_origin = int(chain_field[1:])
        except ValueError:
            raise ValueError(f"Invalid chain origin in FEN: {chain_field!r}") from None

    return Position.from_layout(
        pieces, LETTER_TO_SIDE[side_field.upper()], chain_origin
    )

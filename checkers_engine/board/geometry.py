"""
Board Geometry

Fixed mapping between the 32 playable (dark) squares and the 8*8 grid,
plus precomputed diagonal neighbor and jump tables.

Square Numbering:
    - Squares 0-31, four per row, rows kept contiguous
    - Numbering starts in the human's home row: square s is on row 7 - s // 4
    - Row 0 = AI's back rank, row 7 = human's back rank
    - A square (row, col) is playable when row + col is even

      col:  0  1  2  3  4  5  6  7
    row 0:  28    29    30    31       <- AI home
    row 1:     24    25    26    27
    row 2:  20    21    22    23
    row 3:     16    17    18    19
    row 4:  12    13    14    15
    row 5:      8     9    10    11
    row 6:   4     5     6     7
    row 7:      0     1     2     3    <- human home

Directions:
    NE = (-1, +1), NW = (-1, -1), SE = (+1, +1), SW = (+1, -1)
    "North" points towards row 0, the way human men advance.
"""

from typing import List, Optional, Tuple

NUM_SQUARES = 32
BOARD_SIZE = 8

# Fixed iteration order used everywhere moves are generated
NE, NW, SE, SW = 0, 1, 2, 3
DIRECTIONS = (NE, NW, SE, SW)
DIRECTION_NAMES = ("NE", "NW", "SE", "SW")
DIRECTION_DELTAS = {
    NE: (-1, 1),
    NW: (-1, -1),
    SE: (1, 1),
    SW: (1, -1),
}

NORTH = (NE, NW)
SOUTH = (SE, SW)


def square_to_coordinates(square: int) -> Tuple[int, int]:
    """
    Convert a square index to (row, column) grid coordinates.

    Args:
        square: Square index (0-31)

    Returns:
        Tuple of (row, col), row 0 being the AI's back rank

    Raises:
        ValueError: If the square is outside 0-31
    """
    if not 0 <= square < NUM_SQUARES:
        raise ValueError(f"Square index out of range: {square}")

    rank = square // 4
    row = 7 - rank
    col = 2 * (square % 4) + (1 if rank % 2 == 0 else 0)
    return row, col


def coordinates_to_square(row: int, col: int) -> Optional[int]:
    """
    Convert (row, column) coordinates to a square index.

    Args:
        row: Row index (0-7)
        col: Column index (0-7)

    Returns:
        Square index (0-31), or None if the coordinates are off the board
        or fall on a light square
    """
    if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
        return None
    if (row + col) % 2 != 0:
        return None

    rank = 7 - row
    return rank * 4 + col // 2


def is_promotion_row(row: int, ai_owned: bool) -> bool:
    """AI men crown on row 7, human men on row 0."""
    return row == (BOARD_SIZE - 1 if ai_owned else 0)


def _build_tables() -> Tuple[List[Tuple[Optional[int], ...]], List[Tuple[Optional[int], ...]]]:
    neighbors = []
    jumps = []
    for square in range(NUM_SQUARES):
        row, col = square_to_coordinates(square)
        step_row = []
        jump_row = []
        for direction in DIRECTIONS:
            d_row, d_col = DIRECTION_DELTAS[direction]
            step_row.append(coordinates_to_square(row + d_row, col + d_col))
            jump_row.append(coordinates_to_square(row + 2 * d_row, col + 2 * d_col))
        neighbors.append(tuple(step_row))
        jumps.append(tuple(jump_row))
    return neighbors, jumps


# NEIGHBORS[sq][direction] -> adjacent square one diagonal step away (or None)
# JUMPS[sq][direction]     -> landing square two steps away (or None)
NEIGHBORS, JUMPS = _build_tables()

# Rows for each square, precomputed for promotion checks
SQUARE_ROWS = tuple(square_to_coordinates(sq)[0] for sq in range(NUM_SQUARES))


def mirror_square(square: int) -> int:
    """
    Square reached by rotating the board 180 degrees.

    The rotation maps the human's side onto the AI's side, so it is the
    geometric half of swapping the two players.
    """
    return NUM_SQUARES - 1 - square

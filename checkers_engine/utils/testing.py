"""
Checkers Engine Testing and Benchmarking

This module provides move generation checks and a small tactical test
suite for evaluating engine performance.

Test Suites:
    1. Perft: counts leaf positions of the full game tree from a position
       - Verifies the move generator against published counts
       - Opening position: 7, 49, 302, 1469 at depths 1-4

    2. Tactics: hand-built positions with a known best move
       - Choosing the longer capture chain
       - Crowning a man

Evaluation Metrics:
    - Correct Moves: Number of positions where engine found best move
    - Time per Position: Average thinking time
    - Nodes Searched: Total nodes visited

References:
    - Perft: https://www.chessprogramming.org/Perft
"""

import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from tqdm import tqdm

from checkers_engine.board.movegen import successors
from checkers_engine.board.position import Position, initial_position
from checkers_engine.board.representation import position_from_fen
from checkers_engine.evaluation.base import Evaluator
from checkers_engine.search.minimax import find_best_move

logger = logging.getLogger(__name__)

# Leaf counts from the opening position with forced captures
PERFT_RESULTS = {
    1: 7,
    2: 49,
    3: 302,
    4: 1469,
}


def perft(position: Position, depth: int, force_takes: bool = True) -> int:
    """
    Count the leaf positions of the game tree below position.

    A multi-jump chain counts as a single move.

    Args:
        position: Root position
        depth: Number of plies to expand
        force_takes: Whether captures are mandatory

    Returns:
        Number of positions reached after exactly depth plies
    """
    if depth == 0:
        return 1

    moves = successors(position, force_takes)
    if depth == 1:
        return len(moves)

    return sum(perft(move.position, depth - 1, force_takes) for move in moves)


def perft_divide(
    position: Position,
    depth: int,
    force_takes: bool = True,
    progress: bool = False,
) -> Dict[str, int]:
    """
    Split a perft count by root move, for locating move generator bugs.

    Args:
        position: Root position
        depth: Number of plies to expand (at least 1)
        force_takes: Whether captures are mandatory
        progress: Show a progress bar over the root moves

    Returns:
        Dictionary {move notation: leaf count below that move}, in
        generator order
    """
    if depth < 1:
        raise ValueError(f"Divide needs a depth of at least 1, got {depth}")

    counts = {}
    moves = successors(position, force_takes)
    for move in tqdm(moves, desc=f"perft {depth}", disable=not progress):
        counts[move.notation()] = perft(move.position, depth - 1, force_takes)
    return counts


@dataclass
class TestPosition:
    """
    A test position with expected best move(s).

    Attributes:
        fen: Position in FEN-style notation
        best_moves: List of acceptable best moves (move notation)
        description: Human-readable description of the position
        id: Position identifier (e.g., "TAC.01")
    """
    __test__ = False  # Not a pytest test class

    fen: str
    best_moves: List[str]
    description: str = ""
    id: str = ""


@dataclass
class TestResult:
    """
    Result of testing a single position.

    Attributes:
        position: The test position
        found_move: Move the engine found (move notation)
        score: Evaluation score for the move
        correct: Whether the engine found a best move
        time_taken: Time spent searching (seconds)
        nodes_searched: Number of nodes visited
        depth: Search depth used
    """
    __test__ = False

    position: TestPosition
    found_move: str
    score: float
    correct: bool
    time_taken: float
    nodes_searched: int = 0
    depth: int = 0


# ============================================================================
# Tactical Test Suite
# ============================================================================

TACTICAL_POSITIONS = [
    TestPosition(
        id="TAC.01",
        fen="A:H10,17,18:A22,30",
        best_moves=["22x15x6"],
        description="AI prefers the double jump over the single jump 22x13",
    ),
    TestPosition(
        id="TAC.02",
        fen="A:H0:A7,28",
        best_moves=["7-3", "7-2"],
        description="AI crowns the man on 7",
    ),
]


def evaluate_position(
    position: TestPosition,
    depth: int,
    evaluator: Optional[Evaluator] = None,
    force_takes: bool = True,
    verbose: bool = False,
) -> TestResult:
    """
    Evaluate a single test position.

    Args:
        position: Test position to evaluate
        depth: Search depth
        evaluator: Position evaluator (default: MaterialEvaluator)
        force_takes: Whether captures are mandatory
        verbose: If True, print detailed output

    Returns:
        TestResult with engine's move and whether it was correct
    """
    if verbose:
        print(f"\nTesting {position.id}: {position.description}")
        print(f"FEN: {position.fen}")
        print(f"Expected moves: {position.best_moves}")

    start_time = time.time()

    try:
        board = position_from_fen(position.fen)
        best_move, score, nodes = find_best_move(
            board, depth, evaluator, force_takes, verbose=False
        )
    except ValueError as e:
        logger.error(f"Error evaluating position {position.id}: {e}")
        return TestResult(
            position=position,
            found_move="",
            score=0.0,
            correct=False,
            time_taken=time.time() - start_time,
            depth=depth,
        )

    time_taken = time.time() - start_time
    found_move = best_move.notation()
    correct = found_move in position.best_moves

    if verbose:
        print(f"Engine found: {found_move} (score: {score:.2f})")
        print(f"Nodes searched: {nodes:,}")
        print(f"Time: {time_taken:.2f}s")
        print(f"Result: {'CORRECT' if correct else 'WRONG'}")

    return TestResult(
        position=position,
        found_move=found_move,
        score=score,
        correct=correct,
        time_taken=time_taken,
        nodes_searched=nodes,
        depth=depth,
    )


def run_tactics(
    evaluator: Optional[Evaluator] = None,
    depth: int = 5,
    verbose: bool = True,
) -> Dict[str, Any]:
    """
    Run the tactical test suite.

    Args:
        evaluator: Position evaluator (default: MaterialEvaluator)
        depth: Search depth (default: 5)
        verbose: If True, print detailed results

    Returns:
        Dictionary with test results:
            - score: Number of correct positions
            - total: Total number of positions
            - percentage: Success percentage
            - results: List of TestResult objects
            - avg_time: Average time per position
            - total_time: Time for the whole suite
    """
    if verbose:
        print("=" * 70)
        print("TACTICAL TEST SUITE")
        print("=" * 70)

    results = []
    correct_count = 0
    total_time = 0.0

    for position in TACTICAL_POSITIONS:
        result = evaluate_position(position, depth, evaluator, verbose=verbose)
        results.append(result)

        if result.correct:
            correct_count += 1

        total_time += result.time_taken

    total = len(TACTICAL_POSITIONS)
    avg_time = total_time / total if total else 0
    percentage = (correct_count / total * 100) if total else 0

    if verbose:
        print("\n" + "=" * 70)
        print("SUMMARY")
        print("=" * 70)
        print(f"Score: {correct_count}/{total} ({percentage:.1f}%)")
        print(f"Average time: {avg_time:.2f}s")
        print(f"Total time: {total_time:.2f}s")

    return {
        'score': correct_count,
        'total': total,
        'percentage': percentage,
        'results': results,
        'avg_time': avg_time,
        'total_time': total_time,
    }


def run_perft(max_depth: int = 4, verbose: bool = True) -> Dict[int, int]:
    """
    Run perft from the opening position and compare with known counts.

    Args:
        max_depth: Deepest perft to run
        verbose: If True, print one line per depth

    Returns:
        Dictionary {depth: leaf count}
    """
    root = initial_position()
    counts = {}

    for depth in range(1, max_depth + 1):
        start_time = time.time()
        counts[depth] = perft(root, depth)
        elapsed = time.time() - start_time

        expected = PERFT_RESULTS.get(depth)
        if expected is not None and counts[depth] != expected:
            logger.warning(f"Perft {depth}: got {counts[depth]}, expected {expected}")

        if verbose:
            status = "" if expected is None else (" OK" if counts[depth] == expected else " MISMATCH")
            print(f"perft({depth}) = {counts[depth]:,} ({elapsed:.2f}s){status}")

    return counts

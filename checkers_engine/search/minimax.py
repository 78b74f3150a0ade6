"""
Minimax Search with Alpha-Beta Pruning

This module implements the search algorithm that drives the AI.
Minimax explores the game tree to find the best move, and alpha-beta
pruning dramatically reduces the number of nodes evaluated.

Key Concepts:
    - Minimax: Recursive algorithm that assumes optimal play by both sides
    - Alpha-Beta: Optimization that prunes branches that can't affect result
    - Plies: depth counts half-moves; a multi-jump chain is a single ply
      because the move generator returns it as one successor

Scores are always from the AI's point of view, so the AI maximizes and the
human minimizes. Moves are searched in move generator order and ties at the
root go to the earliest move, which keeps the search fully deterministic.

Algorithm Complexity:
    - Minimax: O(b^d) where b=branching factor (~8), d=depth
    - Alpha-Beta: O(b^(d/2)) with perfect move ordering

References:
    - Minimax: https://www.chessprogramming.org/Minimax
    - Alpha-Beta: https://www.chessprogramming.org/Alpha-Beta
"""

import logging
from typing import List, Optional, Tuple

from checkers_engine.board.movegen import Move, successors
from checkers_engine.board.position import Player, Position
from checkers_engine.evaluation.base import Evaluator, INFINITY
from checkers_engine.evaluation.material import MaterialEvaluator

MIN_DEPTH = 1
MAX_DEPTH = 12  # Maximum search depth

logger = logging.getLogger(__name__)


def minimax(
    position: Position,
    depth: int,
    alpha: float,
    beta: float,
    maximizing_player: bool,
    evaluator: Evaluator,
    force_takes: bool = True,
    nodes_searched: Optional[List[int]] = None,
) -> float:
    """
    Minimax search with alpha-beta pruning.

    This is the core search function. It recursively explores the game tree,
    assuming both players play optimally, and returns the evaluation of the
    best line found.

    Args:
        position: Current position
        depth: Remaining search depth in plies (decrements each recursive call)
        alpha: Alpha value for pruning (best score for maximizer)
        beta: Beta value for pruning (best score for minimizer)
        maximizing_player: True if the AI is to move
        evaluator: Position evaluation function
        force_takes: Whether captures are mandatory
        nodes_searched: Optional mutable list [count] to track positions visited

    Returns:
        float: Evaluation of the position from the AI's perspective

    Algorithm:
        1. Check if depth = 0 (leaf node) → evaluate position
        2. Generate all legal successors
        3. No successors → terminal, evaluator returns ±inf
        4. For each successor:
            a. Recursively search (depth - 1)
            b. Update alpha/beta
            c. Prune if alpha >= beta
        5. Return best score found
    """
    if nodes_searched is not None:
        nodes_searched[0] += 1

    # Base case: Reached leaf node (depth = 0)
    if depth == 0:
        return evaluator.evaluate(position)

    moves = successors(position, force_takes)
    if not moves:
        return evaluator.evaluate(position)

    if maximizing_player:
        # AI to move (wants highest score)
        max_eval = -INFINITY
        for move in moves:
            eval_score = minimax(
                move.position,
                depth - 1,
                alpha,
                beta,
                False,  # Switch to minimizing
                evaluator,
                force_takes,
                nodes_searched,
            )

            max_eval = max(max_eval, eval_score)
            alpha = max(alpha, eval_score)

            # Beta cutoff: Minimizing player won't allow this branch
            if beta <= alpha:
                break

        return max_eval

    else:
        # Human to move (wants lowest score)
        min_eval = INFINITY
        for move in moves:
            eval_score = minimax(
                move.position,
                depth - 1,
                alpha,
                beta,
                True,  # Switch to maximizing
                evaluator,
                force_takes,
                nodes_searched,
            )

            min_eval = min(min_eval, eval_score)
            beta = min(beta, eval_score)

            # Alpha cutoff: Maximizing player won't allow this branch
            if beta <= alpha:
                break

        return min_eval


def find_best_move(
    position: Position,
    depth: int,
    evaluator: Optional[Evaluator] = None,
    force_takes: bool = True,
    verbose: bool = False,
) -> Tuple[Move, float, int]:
    """
    Find the best move in the current position.

    Args:
        position: Current position
        depth: Search depth in plies, 1-12 (higher = stronger but slower)
        evaluator: Position evaluation function (default: MaterialEvaluator)
        force_takes: Whether captures are mandatory
        verbose: If True, print search statistics

    Returns:
        Tuple of (best_move, evaluation, nodes)
            - best_move: The best move found (earliest in generator order on ties)
            - evaluation: Minimax value of the best move
            - nodes: Number of positions visited

    Raises:
        ValueError: If depth is out of range or no legal moves are available
    """
    if not MIN_DEPTH <= depth <= MAX_DEPTH:
        raise ValueError(
            f"Search depth must be between {MIN_DEPTH} and {MAX_DEPTH}, got {depth}"
        )

    moves = successors(position, force_takes)
    if not moves:
        raise ValueError("No legal moves available")

    if evaluator is None:
        evaluator = MaterialEvaluator()

    maximizing = position.side_to_move is Player.AI

    best_move = None
    best_score = -INFINITY if maximizing else INFINITY

    nodes = [0]
    for move in moves:
        # The window narrows to the best score so far; a strictly better
        # move still comes back with its exact value
        if maximizing:
            score = minimax(
                move.position,
                depth - 1,
                best_score,
                INFINITY,
                False,
                evaluator,
                force_takes,
                nodes_searched=nodes,
            )
        else:
            score = minimax(
                move.position,
                depth - 1,
                -INFINITY,
                best_score,
                True,
                evaluator,
                force_takes,
                nodes_searched=nodes,
            )

        logger.debug(f"Move: {move}, Score: {score}")

        if best_move is None:
            best_move, best_score = move, score
        elif maximizing and score > best_score:
            best_move, best_score = move, score
        elif not maximizing and score < best_score:
            best_move, best_score = move, score

        if verbose:
            print(f"Move: {move}, Score: {score:.2f}")

    logger.debug(
        f"Search complete: depth={depth}, best_move={best_move}, "
        f"score={best_score}, nodes={nodes[0]}"
    )

    if verbose:
        print(f"\nNodes searched: {nodes[0]}")
        print(f"Best move: {best_move}, Score: {best_score:.2f}")

    return best_move, best_score, nodes[0]


def choose_move(
    position: Position,
    depth: int,
    evaluator: Optional[Evaluator] = None,
    force_takes: bool = True,
) -> Move:
    """
    Pick the move to play: the best move of find_best_move() without statistics.
    """
    best_move, _, _ = find_best_move(position, depth, evaluator, force_takes)
    return best_move

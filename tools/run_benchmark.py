#!/usr/bin/env python3
"""
Checkers Benchmark Runner

Checks move generation with perft from the opening position, then runs
the tactical test suite at multiple depths to establish baseline
performance metrics for the engine.

Usage:
    python tools/run_benchmark.py [--depths 1,3,5] [--perft-depth 4] [--divide] [--verbose]
"""

import sys
import argparse
import logging
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from checkers_engine.evaluation.material import MaterialEvaluator
from checkers_engine.board.position import initial_position
from checkers_engine.utils.testing import perft_divide, run_perft, run_tactics
import time


def setup_logging(verbose: bool = False):
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def format_time(seconds: float) -> str:
    """Format time"""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        minutes = int(seconds // 60)
        secs = seconds % 60
        return f"{minutes}m {secs:.0f}s"


def run_benchmark(
    depths: list[int],
    perft_depth: int = 4,
    divide: bool = False,
    verbose: bool = False,
):
    """
    Run perft and the tactical suite at multiple depths.

    Args:
        depths: List of search depths to test
        perft_depth: Deepest perft to run (0 skips perft)
        divide: Also split the deepest perft count by root move
        verbose: If True, print detailed results for each position
    """
    evaluator = MaterialEvaluator()

    print("=" * 80)
    print("TACTICAL BENCHMARK - Checkers Engine")
    print("=" * 80)
    print(f"Evaluator: {evaluator}")
    print(f"Search: Minimax with Alpha-Beta Pruning")
    print(f"Depths: {depths}")
    print("=" * 80)
    print()

    if perft_depth > 0:
        print("PERFT (opening position)")
        run_perft(max_depth=perft_depth, verbose=True)
        print()

    if divide and perft_depth > 0:
        print(f"PERFT DIVIDE (depth {perft_depth})")
        counts = perft_divide(initial_position(), perft_depth, progress=True)
        for notation, count in counts.items():
            print(f"  {notation:<10} {count:>10,}")
        print(f"  {'total':<10} {sum(counts.values()):>10,}")
        print()

    all_results = []

    for depth in depths:
        print(f"\n{'=' * 80}")
        print(f"DEPTH {depth}")
        print("=" * 80)

        start_time = time.time()
        result = run_tactics(evaluator=evaluator, depth=depth, verbose=verbose)
        total_time = time.time() - start_time

        total_nodes = sum(r.nodes_searched for r in result['results'])
        nodes_per_sec = total_nodes / total_time if total_time > 0 else 0

        all_results.append({
            'depth': depth,
            'score': result['score'],
            'total': result['total'],
            'percentage': result['percentage'],
            'avg_time': result['avg_time'],
            'total_time': total_time,
            'total_nodes': total_nodes,
            'nodes_per_sec': nodes_per_sec,
            'results': result['results']
        })

        print(f"\nResults at depth {depth}:")
        print(f"  Correct: {result['score']}/{result['total']} ({result['percentage']:.1f}%)")
        print(f"  Total time: {format_time(total_time)}")
        print(f"  Avg time per position: {format_time(result['avg_time'])}")
        print(f"  Total nodes: {total_nodes:,}")
        print(f"  Nodes/sec: {nodes_per_sec:,.0f}")

        failed = [r for r in result['results'] if not r.correct]
        if failed and verbose:
            print(f"\n  Failed positions:")
            for r in failed:
                print(f"    {r.position.id}: Expected {r.position.best_moves}, got {r.found_move}")

    print("\n" + "=" * 80)
    print("SUMMARY TABLE")
    print("=" * 80)
    print(f"{'Depth':<8} {'Correct':<12} {'%':<8} {'Avg Time':<12} {'Nodes/sec':<15}")
    print("-" * 80)

    for r in all_results:
        print(f"{r['depth']:<8} {r['score']}/{r['total']:<8} {r['percentage']:<7.1f}% {format_time(r['avg_time']):<12} {r['nodes_per_sec']:>12,.0f}")

    print("=" * 80)
    print("Benchmark complete!")
    print("=" * 80)

    return all_results


def main():
    parser = argparse.ArgumentParser(
        description="Run perft and the tactical benchmark at multiple depths"
    )
    parser.add_argument(
        "--depths",
        type=str,
        default="1,3,5",
        help="Comma-separated list of depths to test (default: 1,3,5)"
    )
    parser.add_argument(
        "--perft-depth",
        type=int,
        default=4,
        help="Deepest perft to run, 0 to skip (default: 4)"
    )
    parser.add_argument(
        "--divide",
        action="store_true",
        help="Split the deepest perft count by root move"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print detailed results for each position"
    )

    args = parser.parse_args()
    setup_logging(verbose=args.verbose)

    try:
        depths = [int(d.strip()) for d in args.depths.split(",")]
    except ValueError:
        print("Error: depths must be comma-separated integers")
        sys.exit(1)

    try:
        run_benchmark(
            depths,
            perft_depth=args.perft_depth,
            divide=args.divide,
            verbose=args.verbose,
        )
    except KeyboardInterrupt:
        print("\n\nBenchmark interrupted by user")
        sys.exit(1)


if __name__ == "__main__":
    main()

"""
Water Jug Solver - Command line entry point

Solves one puzzle with the selected search algorithm and prints the
moves, a hint, or the recorded search tree.

Example:
    python main.py --capacities 5 3 --goal 4 0
    python main.py -c 5 3 -i 0 0 -g 4 0 -a "A*" --tree
    python main.py -c 7 5 3 -g 2 2 3 --hint
    python main.py -c 5 3 -g 4 0 --tree-image debug/tree.png
"""

import sys
import json
import logging
import argparse
from pathlib import Path

# Allow running from a source checkout without installing
sys.path.insert(0, str(Path(__file__).parent / "src"))

from jugsolver import (
    get_hint,
    get_strategy_names,
    solve,
    validate_puzzle,
    PuzzleConfigError,
)
from jugsolver.render import format_tree_text, save_tree_image
from jugsolver.settings import SETTINGS_FILE, load_settings, save_settings


logger = logging.getLogger(__name__)


def configure_logging(debug: bool) -> None:
    """Console logging; DEBUG shows per-pass and per-search detail."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=[logging.StreamHandler()],
    )


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Water Jug Solver - state-space search over FILL/EMPTY/POUR moves"
    )
    parser.add_argument(
        "--capacities", "-c",
        type=int, nargs="+", required=True,
        help="Jug capacities, e.g. 5 3"
    )
    parser.add_argument(
        "--initial", "-i",
        type=int, nargs="+",
        help="Initial fill levels (default: all empty)"
    )
    parser.add_argument(
        "--goal", "-g",
        type=int, nargs="+", required=True,
        help="Goal fill levels"
    )
    parser.add_argument(
        "--algorithm", "-a",
        choices=get_strategy_names(),
        help="Search algorithm (default: from settings)"
    )
    parser.add_argument(
        "--hint",
        action="store_true",
        help="Only print the suggested next move"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the full result (path, moves, tree, analytics) as JSON"
    )
    parser.add_argument(
        "--tree",
        action="store_true",
        help="Print the recorded search tree"
    )
    parser.add_argument(
        "--tree-image",
        metavar="PATH",
        help="Save the recorded search tree as a PNG image"
    )
    parser.add_argument(
        "--max-tree-nodes",
        type=int,
        help="Cap on recorded tree nodes (default: from settings)"
    )
    parser.add_argument(
        "--config",
        default=str(SETTINGS_FILE),
        help=f"Settings file (default: {SETTINGS_FILE})"
    )
    parser.add_argument(
        "--save",
        action="store_true",
        help="Remember the chosen algorithm in the settings file"
    )
    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        help="Enable debug logging"
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """
    Run the solver from the command line.

    Returns:
        0 on success, 1 if no solution exists, 2 on invalid input
    """
    args = parse_args(argv)
    settings = load_settings(Path(args.config))
    configure_logging(args.debug or settings.get("debug_enabled", False))

    algorithm = args.algorithm or settings["algorithm"]
    if algorithm not in get_strategy_names():
        logger.error(
            f"Unknown algorithm in {args.config}: {algorithm}. "
            f"Available: {', '.join(get_strategy_names())}"
        )
        return 2

    if args.max_tree_nodes is not None:
        max_tree_nodes = args.max_tree_nodes
    else:
        max_tree_nodes = settings["max_tree_nodes"]
    if max_tree_nodes < 0:
        logger.error(f"Tree node cap must not be negative: {max_tree_nodes}")
        return 2

    capacities = args.capacities
    initial = args.initial if args.initial is not None else [0] * len(capacities)
    goal = args.goal

    try:
        validate_puzzle(capacities, initial, goal)
    except PuzzleConfigError as e:
        logger.error(f"Invalid puzzle: {e}")
        return 2

    if args.save and algorithm != settings["algorithm"]:
        settings["algorithm"] = algorithm
        save_settings(settings, Path(args.config))

    if args.hint:
        hint = get_hint(initial, goal, capacities, algorithm)
        print(hint.message)
        return 0 if hint.is_reachable else 1

    result = solve(initial, goal, capacities, algorithm, max_tree_nodes=max_tree_nodes)
    if result is None:
        print(f"No solution from {initial} to {goal} with capacities {capacities} ({algorithm})")
        return 1

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print(f"{algorithm}: {result.move_count} moves")
        print(f"  0. {result.path[0]}")
        for i, move in enumerate(result.moves):
            print(f"  {i + 1}. {move.description:<24} -> {result.get_state_after_move(i)}")

        analytics = result.analytics
        print(
            f"Nodes expanded: {analytics.nodes_expanded}, frontier: {analytics.frontier_size}, "
            f"max depth: {analytics.max_depth}, time: {analytics.time_taken_ms:.2f}ms"
        )

    if args.tree:
        print(f"\nSearch tree ({len(result.tree)} nodes):")
        for line in format_tree_text(result.tree):
            print(line)

    if args.tree_image:
        path = save_tree_image(result.tree, args.tree_image, title=f"{algorithm} {initial} -> {goal}")
        logger.info(f"Tree image saved: {path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())

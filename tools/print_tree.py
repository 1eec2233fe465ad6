"""
Dump the recorded search tree of one puzzle for manual verification.

Prints the solution followed by every recorded node with its parent,
depth and g/h/f costs, so the tree can be checked by hand or diffed
between algorithms.

Usage:
    python tools/print_tree.py
    python tools/print_tree.py --algorithm UCS --capacities 5 3 --initial 5 0 --goal 4 0
    python tools/print_tree.py --json
"""

import sys
import json
import argparse
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from jugsolver import get_strategy_names, solve
from jugsolver.render import format_tree_text

# Larger than the UI cap so small puzzles are captured whole
DUMP_TREE_NODES = 1000


def main():
    parser = argparse.ArgumentParser(description="Dump a recorded search tree")
    parser.add_argument("--algorithm", "-a", default="A*", choices=get_strategy_names())
    parser.add_argument("--capacities", "-c", type=int, nargs="+", default=[5, 3])
    parser.add_argument("--initial", "-i", type=int, nargs="+", default=[5, 0])
    parser.add_argument("--goal", "-g", type=int, nargs="+", default=[4, 0])
    parser.add_argument("--json", action="store_true", help="Dump the full result as JSON")
    args = parser.parse_args()

    result = solve(args.initial, args.goal, args.capacities, args.algorithm,
                   max_tree_nodes=DUMP_TREE_NODES)
    if result is None:
        print("No solution")
        return 1

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
        return 0

    print(f"{args.algorithm}: {' -> '.join(str(s) for s in result.path)}")
    print(f"Moves: {', '.join(str(m) for m in result.moves)}")
    print(f"Tree nodes: {len(result.tree)} "
          f"(on path: {sum(1 for n in result.tree if n.is_path)})")
    print()
    for line in format_tree_text(result.tree):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())

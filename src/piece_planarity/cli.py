"""
Command line entry point.

Usage:
    piece-planarity graph.txt
    piece-planarity graph.txt --dot graph.dot --max-depth 50

Reads an edge-list file (one ``u v`` pair per line) and prints ``planar`` or
``nonplanar``.
"""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from .export import to_dot
from .io import read_edge_list
from .planarity import check_planarity
from .validation import PlanarityError, ValidationError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="piece-planarity",
        description="Test whether an undirected graph given as an edge list is planar",
    )
    parser.add_argument("file", help="Edge-list file, one 'u v' pair per line")
    parser.add_argument(
        "--dot",
        help="Write the graph as DOT with the separating cycle highlighted",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=None,
        help="Maximum piece nesting depth (default: unlimited)",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        graph = read_edge_list(args.file)
        result = check_planarity(graph, max_depth=args.max_depth)
    except FileNotFoundError:
        print(f"Filename: {args.file} not found", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"I/O error reading {args.file}: {exc}", file=sys.stderr)
        return 1
    except (PlanarityError, ValidationError) as exc:
        print(str(exc), file=sys.stderr)
        return 1

    print("planar" if result.is_planar else "nonplanar")

    if args.dot:
        try:
            with open(args.dot, "w") as f:
                f.write(to_dot(graph, highlight=result.cycle))
                f.write("\n")
        except OSError as exc:
            print(f"I/O error writing {args.dot}: {exc}", file=sys.stderr)
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())

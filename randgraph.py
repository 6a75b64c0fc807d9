#!/usr/bin/env python3
"""Generate a random weighted graph in the format main.py reads.

Usage examples:
  python randgraph.py 10 20 9
  python randgraph.py 1000 5000 100 --seed 7 -o graphs/g1000.txt
  python randgraph.py 40 --connected --seed 42

The uniform generator may produce loops, parallel edges and several components.
"""
import argparse
import sys

from graph_utils import format_graph, generate_connected_graph, generate_graph


def main(argv=None):
    p = argparse.ArgumentParser(description="Generate a random weighted graph")
    p.add_argument("order", type=int, help="Vertex count")
    p.add_argument("size", type=int, nargs="?", default=None,
                   help="Edge count (with --connected: extra edges beyond the tree)")
    p.add_argument("max_weight", type=int, nargs="?", default=100, help="Maximum edge weight (minimum is 1)")
    p.add_argument("--seed", type=int, default=None, help="Random seed")
    p.add_argument("--connected", action="store_true", help="Start from a random spanning tree (NetworkX)")
    p.add_argument("-o", "--outfile", default=None, help="Write here instead of stdout")
    args = p.parse_args(argv)

    try:
        if args.connected:
            graph = generate_connected_graph(args.order, args.size, args.max_weight,
                                             seed=args.seed if args.seed is not None else 42)
        else:
            if args.size is None:
                p.error("size is required unless --connected is given")
            graph = generate_graph(args.order, args.size, args.max_weight, seed=args.seed)
    except ValueError as e:
        print(f"[randgraph] ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    if args.outfile:
        with open(args.outfile, 'w') as f:
            f.write(format_graph(graph))
        print(f"[randgraph] Generated graph: {graph.order} vertices, {len(graph.edges)} edges -> {args.outfile}",
              file=sys.stderr)
    else:
        sys.stdout.write(format_graph(graph))


if __name__ == '__main__':
    main()

#!/usr/bin/env python3
"""Minimum spanning *tree* weight from a single start vertex (for testing).

Unlike the forest computation in msf.py, this only explores the component
containing the start vertex. Vertices it can't reach contribute nothing and
are not reported.
"""
import argparse
import sys

from graph_utils import load_graph
from msf import Graph
from prim_heap import PrimHeap


def prim_mst_weight(graph: Graph, start: int = 0) -> int:
    if not 0 <= start < graph.order:
        raise ValueError(f"start vertex out of range: {start} not in [0, {graph.order})")

    # neighbours as (vertex, weight), both directions as the graph is undirected
    adj = [[] for _ in range(graph.order)]
    for edge in graph.edges:
        adj[edge.u].append((edge.v, edge.weight))
        adj[edge.v].append((edge.u, edge.weight))

    total = 0
    processed = [False] * graph.order
    heap = PrimHeap()

    heap.push_or_decrease(start, 0)
    while heap:
        vertex, cost = heap.pop_min()
        total += cost
        processed[vertex] = True

        for dest, weight in adj[vertex]:
            if not processed[dest]:
                heap.push_or_decrease(dest, weight)

    return total


def main(argv=None):
    p = argparse.ArgumentParser(description="Print the MST weight of the component containing a start vertex")
    p.add_argument("graph_file", nargs="?", default="-", help="Graph file ('-' for stdin)")
    p.add_argument("--start", type=int, default=0, help="Start vertex")
    args = p.parse_args(argv)

    try:
        graph = load_graph(args.graph_file)
        print(prim_mst_weight(graph, args.start))
    except (OSError, ValueError) as e:
        print(f"[mst-weight] ERROR: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()

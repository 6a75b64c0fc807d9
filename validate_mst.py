#!/usr/bin/env python3
"""Validate MSFs: compute the optimal forest with NetworkX and compare with ours."""
import argparse
import sys

import networkx as nx

from dsu import DSU
from graph_utils import load_graph, to_networkx
from msf import EdgeSelection, Graph


def networkx_msf_weight(graph: Graph) -> int:
    """Weight of a minimum spanning forest, as computed by NetworkX."""
    forest = nx.minimum_spanning_tree(to_networkx(graph), algorithm='kruskal')
    return sum(data['weight'] for _, _, data in forest.edges(data=True))


def is_forest(selection: EdgeSelection) -> bool:
    ds = DSU(selection.order)
    return all(ds.union(edge.u, edge.v) for edge in selection.selected_edges())


def verify_selection(graph: Graph, selection: EdgeSelection):
    """Check a selection against NetworkX as ground truth."""
    optimal_weight = networkx_msf_weight(graph)
    components = nx.number_connected_components(to_networkx(graph)) if graph.order else 0
    expected_edges = graph.order - components

    acyclic = is_forest(selection)
    spanning = len(selection) == expected_edges
    optimal = selection.weight == optimal_weight

    return {
        'name': selection.name,
        'optimal_weight': optimal_weight,
        'weight': selection.weight,
        'num_edges': len(selection),
        'expected_edges': expected_edges,
        'components': components,
        'acyclic': acyclic,
        'spanning': spanning,
        'optimal': optimal,
        'valid': acyclic and spanning and optimal,
    }


def print_verification(result, file=None) -> None:
    status = '✅ OPTIMAL' if result['valid'] else '❌ INVALID'
    print(f"[validate] {result['name']}: weight={result['weight']} "
          f"(optimal {result['optimal_weight']}) edges={result['num_edges']}/{result['expected_edges']} "
          f"acyclic={result['acyclic']} -> {status}", file=file)


def main(argv=None):
    p = argparse.ArgumentParser(description="Validate Kruskal and Prim forests against NetworkX")
    p.add_argument("graph_file", nargs="?", default="-", help="Graph file ('-' for stdin)")
    args = p.parse_args(argv)

    try:
        graph = load_graph(args.graph_file)
    except (OSError, ValueError) as e:
        print(f"[validate] ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"[validate] Graph: {args.graph_file} order={graph.order} edges={len(graph.edges)}")
    results = [verify_selection(graph, graph.kruskal_msf()),
               verify_selection(graph, graph.prim_msf())]
    for result in results:
        print_verification(result)

    if not all(r['valid'] for r in results):
        sys.exit(2)


if __name__ == '__main__':
    main()

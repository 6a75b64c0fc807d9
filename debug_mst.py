#!/usr/bin/env python3
"""Debug MSF differences by tracing Kruskal's and Prim's execution step by step."""

import sys

from graph_utils import load_graph
from msf import compare_selections


def print_sorted_edges(graph) -> None:
    print("Edges sorted by (weight, input position):")
    for rank, i in enumerate(sorted(range(len(graph.edges)), key=graph.edge_key), 1):
        edge = graph.edges[i]
        print(f"  {rank:2d}. #{i} ({edge.u}, {edge.v}) = {edge.weight}")


def print_selection(selection) -> None:
    print(f"{selection.name}: {len(selection)} edges, weight {selection.weight}")
    for step, i in enumerate(selection.added, 1):
        edge = selection.edges[i]
        print(f"  {step:2d}. #{i} ({edge.u}, {edge.v}) = {edge.weight}")


def main():
    if len(sys.argv) != 2:
        print("Usage: python debug_mst.py <graph_file>")
        sys.exit(1)

    try:
        graph = load_graph(sys.argv[1])
    except (OSError, ValueError) as e:
        print(f"[debug] ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"Graph: {graph.order} vertices, {len(graph.edges)} edges, {graph.num_components()} components")
    print_sorted_edges(graph)

    print("\n" + "="*60)
    print("=== KRUSKAL'S ALGORITHM ===")
    kruskal = graph.kruskal_msf(trace=print)
    print_selection(kruskal)

    print("\n" + "="*60)
    print("=== PRIM'S ALGORITHM (PER COMPONENT) ===")
    prim = graph.prim_msf(trace=print)
    print_selection(prim)

    comparison = compare_selections(kruskal, prim)
    print("\n" + "="*60)
    print("SUMMARY:")
    print(f"Kruskal MSF weight: {comparison.kruskal_weight}")
    print(f"Prim MSF weight:    {comparison.prim_weight}")
    print(f"Weights match: {comparison.same_weight}")
    print(f"Same edges:    {comparison.same_edges}")

    if not comparison.same_weight:
        print("ERROR: Kruskal and Prim produce different weights!")
        sys.exit(2)
    if not comparison.same_edges:
        only_kruskal = [i for i in kruskal.selected_indices() if not prim.mask[i]]
        only_prim = [i for i in prim.selected_indices() if not kruskal.mask[i]]
        print(f"Edges only in Kruskal's forest: {only_kruskal}")
        print(f"Edges only in Prim's forest:    {only_prim}")
        print("(tied weights allow different forests of equal weight)")
    else:
        print("✓ Both algorithms chose the same forest")


if __name__ == "__main__":
    main()

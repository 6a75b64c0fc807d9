#!/usr/bin/env python3
"""
Benchmark Runner for MSF Algorithm Performance Analysis

Times Kruskal's and Prim's algorithms on random graphs of growing size,
checks that both agree on the forest weight, and saves:
1. benchmark_results.json (raw timings)
2. timing_chart.png (Time vs Number of Vertices)
"""

import json
import os
import sys

from graph_utils import generate_graph
from metrics import Metrics
from visualization import save_timing_chart

# Configuration
NODES_TESTS = [100, 500, 1000, 5000, 10000, 50000]  # Sizes to test for Time vs N
EDGE_FACTOR = 4                                    # Edges per vertex
MAX_WEIGHT = 1000
REPEATS = 3
RESULTS_DIR = "benchmark_results"
RESULTS_FILE = "benchmark_results.json"
SEED = 42                                          # Fixed seed for reproducibility


def run_experiment(order, seed=SEED, repeats=REPEATS):
    """Time both algorithms on one random graph; return averaged timings."""
    graph = generate_graph(order, order * EDGE_FACTOR, MAX_WEIGHT, seed=seed)
    metrics = Metrics()
    for _ in range(repeats):
        kruskal = metrics.timed('kruskal', graph.kruskal_msf)
        prim = metrics.timed('prim', graph.prim_msf)
        if kruskal.weight != prim.weight:
            raise RuntimeError(f"weights disagree at order {order}: {kruskal.weight} != {prim.weight}")

    phases = metrics.summary()['phases']
    return {
        'order': order,
        'size': len(graph.edges),
        'weight': kruskal.weight,
        'same_edges': kruskal.same_selection(prim),
        'kruskal_time': phases['kruskal'] / repeats,
        'prim_time': phases['prim'] / repeats,
    }


def main():
    os.makedirs(RESULTS_DIR, exist_ok=True)
    results = []
    for order in NODES_TESTS:
        print(f"[benchmark] Running N={order}, M={order * EDGE_FACTOR}...", flush=True)
        try:
            res = run_experiment(order)
        except RuntimeError as e:
            print(f"[benchmark] FAILED: {e}", file=sys.stderr)
            sys.exit(1)
        print(f"[benchmark]   kruskal {res['kruskal_time']:.4f}s, prim {res['prim_time']:.4f}s, "
              f"weight {res['weight']}, same edges {res['same_edges']}")
        results.append(res)

    with open(os.path.join(RESULTS_DIR, RESULTS_FILE), 'w') as f:
        json.dump(results, f, indent=2)

    try:
        chart = save_timing_chart([r['order'] for r in results],
                                  [r['kruskal_time'] for r in results],
                                  [r['prim_time'] for r in results],
                                  os.path.join(RESULTS_DIR, 'timing_chart.png'))
        print(f"[benchmark] Chart saved: {chart}")
    except Exception as e:
        print(f"[benchmark] Warning: Could not save chart: {e}")


if __name__ == "__main__":
    main()

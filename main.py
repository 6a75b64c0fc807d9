#!/usr/bin/env python3
"""Main orchestrator: read a graph, run Kruskal and Prim, compare, and render the forests."""
import argparse
import os
import sys
import time

from graph_utils import load_graph
from metrics import Metrics
from msf import compare_selections
from validate_mst import print_verification, verify_selection
from visualization import (build_gif, save_animation, save_comparison_png, save_dot,
                           save_selection_png, write_dot)


def report_comparison(comparison, num_components: int, order: int) -> None:
    print("=" * 60, file=sys.stderr)
    print("🌲 MSF COMPARISON: Kruskal vs Prim", file=sys.stderr)
    print("=" * 60, file=sys.stderr)
    print(f"Kruskal weight: {comparison.kruskal_weight}", file=sys.stderr)
    print(f"Prim weight:    {comparison.prim_weight}", file=sys.stderr)
    print(f"Components:     {num_components} (forest has {order - num_components} edges)", file=sys.stderr)
    print(f"Weights match:  {'✅ YES' if comparison.same_weight else '❌ NO'}", file=sys.stderr)
    if comparison.same_edges:
        print("Edge sets:      ✅ identical", file=sys.stderr)
    else:
        # legitimate when some weights tie
        print("Edge sets:      ⚠️  selections differ (total weight is what must match)", file=sys.stderr)


def render_outputs(selections, out_dir: str, animate: bool) -> None:
    """Write DOT files and pictures. Failures here are reported but not fatal."""
    os.makedirs(out_dir, exist_ok=True)
    for tag, selection in selections.items():
        dot_path = save_dot(selection, os.path.join(out_dir, f'msf_{tag}.dot'))
        print(f"📁 {selection.name}: {dot_path}", file=sys.stderr)

    try:
        for tag, selection in selections.items():
            png = save_selection_png(selection, os.path.join(out_dir, f'msf_{tag}.png'))
            print(f"🖼️  {selection.name}: {png}", file=sys.stderr)
        if len(selections) == 2:
            png = save_comparison_png(selections['kruskal'], selections['prim'],
                                      os.path.join(out_dir, 'comparison.png'))
            print(f"📊 Comparison: {png}", file=sys.stderr)

        if animate:
            for tag, selection in selections.items():
                frames = save_animation(selection, os.path.join(out_dir, f'frames_{tag}'), max_frames=60)
                gif = build_gif(frames, os.path.join(out_dir, f'msf_{tag}.gif'))
                print(f"🎥 {selection.name}: {gif}", file=sys.stderr)
    except Exception as e:
        print(f"[msf] Warning: Could not save visualization: {e}", file=sys.stderr)


def main(argv=None):
    p = argparse.ArgumentParser(description="Minimum spanning forest: Kruskal vs Prim")
    p.add_argument("graph_file", nargs="?", default="-", help="Graph file ('-' for stdin)")
    p.add_argument("--draw", choices=["kruskal", "prim", "both", "none"], default="kruskal",
                   help="Which forest to print as DOT on stdout")
    p.add_argument("--out-dir", default=None,
                   help="Write DOT files and PNG pictures here (default: results/<timestamp> with --render)")
    p.add_argument("--render", action="store_true", help="Save DOT files and pictures")
    p.add_argument("--animate", action="store_true", help="Also save growth animations (implies --render)")
    p.add_argument("--verify", action="store_true", help="Check both forests against NetworkX")
    p.add_argument("--timing", action="store_true", help="Report how long each algorithm took")
    p.add_argument("--trace", action="store_true", help="Print every algorithm step to stderr")
    args = p.parse_args(argv)

    try:
        graph = load_graph(args.graph_file)
    except (OSError, ValueError) as e:
        print(f"[msf] ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    trace = (lambda line: print(line, file=sys.stderr)) if args.trace else None

    metrics = Metrics()
    metrics.start()
    kruskal = metrics.timed('kruskal', graph.kruskal_msf, trace=trace)
    prim = metrics.timed('prim', graph.prim_msf, trace=trace)
    metrics.stop()

    comparison = compare_selections(kruskal, prim)
    report_comparison(comparison, graph.num_components(), graph.order)

    if args.timing:
        for name, seconds in metrics.summary()['phases'].items():
            print(f"[msf] {name}: {seconds:.6f} seconds", file=sys.stderr)

    if args.verify:
        for selection in (kruskal, prim):
            print_verification(verify_selection(graph, selection), file=sys.stderr)

    if args.draw in ("kruskal", "both"):
        write_dot(kruskal, sys.stdout)
    if args.draw in ("prim", "both"):
        write_dot(prim, sys.stdout)

    if args.render or args.animate or args.out_dir:
        out_dir = args.out_dir or os.path.join('results', time.strftime('%Y%m%d-%H%M%S'))
        render_outputs({'kruskal': kruskal, 'prim': prim}, out_dir, args.animate)

    if not comparison.same_weight:
        sys.exit(2)


if __name__ == "__main__":
    main()

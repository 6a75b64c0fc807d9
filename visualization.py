"""DOT output and Matplotlib pictures/animations of minimum spanning forests."""
import io
import math
import os
from typing import List, TextIO, Tuple

import matplotlib.pyplot as plt
import imageio.v2 as imageio

from msf import EdgeSelection

KEEP_COLOR = 'red'
DISCARD_COLOR = 'gray'


def write_dot(selection: EdgeSelection, out: TextIO, indent: int = 4,
              keep_color: str = KEEP_COLOR, discard_color: str = DISCARD_COLOR) -> None:
    """Emit a selection as a Graphviz ``graph`` block.

    Vertices are listed in ascending order, then every edge in input order,
    colored by whether the selection keeps it and labeled with its weight.
    """
    margin = " " * indent
    out.write(f'graph "{selection.title}" {{\n')

    for vertex in range(selection.order):
        out.write(f'{margin}{vertex} [shape="circle"]\n')
    out.write("\n")

    for edge, selected in zip(selection.edges, selection.mask):
        color = keep_color if selected else discard_color
        out.write(f'{margin}{edge.u} -- {edge.v} [color="{color}" label="{edge.weight}"]\n')

    out.write("}\n")


def to_dot(selection: EdgeSelection, **kwargs) -> str:
    buf = io.StringIO()
    write_dot(selection, buf, **kwargs)
    return buf.getvalue()


def save_dot(selection: EdgeSelection, path: str, **kwargs) -> str:
    with open(path, 'w') as f:
        write_dot(selection, f, **kwargs)
    return path


def circle_layout(order: int) -> List[Tuple[float, float]]:
    """Place vertices evenly on the unit circle."""
    if order == 0:
        return []
    angles = [2*math.pi*i/order for i in range(order)]
    return [(math.cos(a), math.sin(a)) for a in angles]


def _draw_selection(ax, selection: EdgeSelection, coords, upto: int = None, title: str = None):
    """Draw all edges faint and the selected ones (optionally only the first ``upto`` accepted) bold."""
    ax.clear()
    ax.set_title(title or selection.title, fontsize=11, fontweight='bold')
    ax.set_axis_off()

    kept = selection.added if upto is None else selection.added[:upto]
    newest = kept[-1] if (upto is not None and kept) else None

    for edge in selection.edges:
        x1, y1 = coords[edge.u]; x2, y2 = coords[edge.v]
        ax.plot([x1, x2], [y1, y2], color='lightgray', linewidth=0.6, zorder=1)

    for i in kept:
        edge = selection.edges[i]
        x1, y1 = coords[edge.u]; x2, y2 = coords[edge.v]
        if i == newest:
            ax.plot([x1, x2], [y1, y2], color='#ffc107', linewidth=3.0, zorder=3)
        else:
            ax.plot([x1, x2], [y1, y2], color=KEEP_COLOR, linewidth=1.8, zorder=2)
        if selection.order <= 50:
            ax.text((x1+x2)/2, (y1+y2)/2, str(edge.weight), fontsize=7, ha='center', va='center',
                    bbox=dict(boxstyle='round,pad=0.2', facecolor='yellow', alpha=0.7), zorder=4)

    if coords:
        xs = [c[0] for c in coords]; ys = [c[1] for c in coords]
        ax.scatter(xs, ys, s=80, c='lightblue', edgecolors='darkblue', zorder=5)
        if selection.order <= 50:
            for v, (x, y) in enumerate(coords):
                ax.text(x, y, str(v), fontsize=7, ha='center', va='center', zorder=6)


def save_selection_png(selection: EdgeSelection, path: str) -> str:
    """Save a picture of a single selection."""
    coords = circle_layout(selection.order)
    fig, ax = plt.subplots(figsize=(7, 7))
    _draw_selection(ax, selection, coords)
    fig.savefig(path, dpi=150, bbox_inches='tight', facecolor='white')
    plt.close(fig)
    return path


def save_comparison_png(kruskal: EdgeSelection, prim: EdgeSelection, path: str) -> str:
    """Save Kruskal's and Prim's forests side by side, marking edges chosen by only one."""
    coords = circle_layout(kruskal.order)
    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(16, 8))
    _draw_selection(ax1, kruskal, coords)
    _draw_selection(ax2, prim, coords)

    differing = [i for i, (a, b) in enumerate(zip(kruskal.mask, prim.mask)) if a != b]
    for ax in (ax1, ax2):
        for i in differing:
            edge = kruskal.edges[i]
            x1, y1 = coords[edge.u]; x2, y2 = coords[edge.v]
            ax.plot([x1, x2], [y1, y2], color='purple', linewidth=1.0, linestyle='--', zorder=2)

    same = 'identical edge sets' if not differing else f'{len(differing)} edges differ'
    plt.suptitle(f'Kruskal vs Prim: {same}', fontsize=14, fontweight='bold')
    plt.tight_layout()
    fig.savefig(path, dpi=150, bbox_inches='tight', facecolor='white')
    plt.close(fig)
    return path


def save_animation(selection: EdgeSelection, out_dir: str, max_frames: int = None) -> List[str]:
    """Render one frame per accepted edge, in the order the algorithm accepted them."""
    os.makedirs(out_dir, exist_ok=True)
    coords = circle_layout(selection.order)
    fig, ax = plt.subplots(figsize=(6, 6))

    total = len(selection.added)
    steps = list(range(1, total + 1))
    # sample evenly if there are too many steps, always keeping the last
    if max_frames and max_frames > 0 and total > max_frames:
        step = total / max_frames
        steps = sorted({max(1, round((k + 1) * step)) for k in range(max_frames)})

    frame_paths = []
    _draw_selection(ax, selection, coords, upto=0, title=f"{selection.name} (start)")
    initial = os.path.join(out_dir, "frame_000.png")
    fig.savefig(initial, dpi=120)
    frame_paths.append(initial)

    for n in steps:
        _draw_selection(ax, selection, coords, upto=n, title=f"{selection.name} (edge {n}/{total})")
        frame_path = os.path.join(out_dir, f"frame_{n:03d}.png")
        fig.savefig(frame_path, dpi=120)
        frame_paths.append(frame_path)

    plt.close(fig)
    return frame_paths


def build_gif(frame_paths: List[str], gif_path: str, duration: float = 0.6):
    """Build a GIF from saved frame image paths."""
    images = [imageio.imread(p) for p in frame_paths]
    if images:
        # Use fps (frames per second) for reliable timing: fps = 1/duration
        fps = 1.0 / duration if duration > 0 else 1.0
        imageio.mimsave(gif_path, images, fps=fps, loop=0)
    return gif_path


def save_timing_chart(sizes: List[int], kruskal_times: List[float], prim_times: List[float], path: str):
    """Save a time-vs-size chart for both algorithms."""
    fig, ax = plt.subplots(figsize=(6, 4))
    ax.plot(sizes, kruskal_times, marker='o', color='#1f77b4', label='Kruskal')
    ax.plot(sizes, prim_times, marker='s', color='#d62728', label='Prim')
    ax.set_xlabel('Vertices')
    ax.set_ylabel('Time (s)')
    ax.set_title('MSF computation time')
    ax.legend()
    fig.tight_layout()
    fig.savefig(path, dpi=150)
    plt.close(fig)
    return path

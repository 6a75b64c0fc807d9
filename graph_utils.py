"""Graph loading, saving, generation and networkx conversion helpers."""
import random
import sys
from typing import Iterable, TextIO

import networkx as nx

from msf import Graph


class GraphFormatError(ValueError):
    """Raised when a graph description can't be parsed."""


def parse_graph(lines: Iterable[str]) -> Graph:
    """Parse a graph from lines of text.

    Expected format:
    First token: order (vertex count)
    Remaining tokens: u v weight triples, one edge each, in input order.
    A blank or absent remainder ends the edge list.
    """
    tokens = []
    for lineno, line in enumerate(lines, 1):
        for token in line.split():
            tokens.append((lineno, token))

    if not tokens:
        raise GraphFormatError("missing vertex count")

    def to_int(lineno, token):
        try:
            return int(token)
        except ValueError:
            raise GraphFormatError(f"line {lineno}: expected an integer, got {token!r}") from None

    order = to_int(*tokens[0])
    if order < 0:
        raise GraphFormatError(f"line {tokens[0][0]}: negative vertex count {order}")

    rest = tokens[1:]
    if len(rest) % 3 != 0:
        raise GraphFormatError(f"line {rest[-1][0]}: incomplete edge (need u v weight)")

    graph = Graph(order)
    for k in range(0, len(rest), 3):
        u, v, w = (to_int(*t) for t in rest[k:k + 3])
        graph.add_edge(u, v, w)
    return graph


def read_graph(fh: TextIO) -> Graph:
    return parse_graph(fh)


def load_graph(path: str) -> Graph:
    """Load graph from a file, or from standard input if path is '-'."""
    if path == '-':
        return read_graph(sys.stdin)
    with open(path, 'r') as fh:
        return read_graph(fh)


def format_graph(graph: Graph) -> str:
    lines = [str(graph.order)]
    for edge in graph.edges:
        lines.append(f"{edge.u} {edge.v} {edge.weight}")
    return "\n".join(lines) + "\n"


def save_graph_file(graph: Graph, filename: str):
    """Save graph to file."""
    with open(filename, 'w') as f:
        f.write(format_graph(graph))


def generate_graph(order: int, size: int, max_weight: int, seed: int = None) -> Graph:
    """Generate a uniformly random graph.

    Endpoints are drawn from [0, order), weights from [1, max_weight].
    The graph may contain loops and parallel edges, and may be disconnected.
    """
    if order <= 0 and size > 0:
        raise ValueError("can't place edges in a graph with no vertices")
    if max_weight < 1:
        raise ValueError("max_weight must be at least 1")
    rng = random.Random(seed)
    graph = Graph(order)
    for _ in range(size):
        graph.add_edge(rng.randrange(order), rng.randrange(order), rng.randint(1, max_weight))
    return graph


def generate_connected_graph(order: int, extra_edges: int = None, max_weight: int = 100,
                             seed: int = 42) -> Graph:
    """Generate a connected random weighted graph with NetworkX.

    Args:
        order: Number of vertices
        extra_edges: Number of extra edges beyond the spanning tree (default: order//2)
        max_weight: Weights are drawn from [1, max_weight]
        seed: Random seed for reproducibility
    """
    rng = random.Random(seed)
    # Start with a random tree to ensure connectivity
    if order > 0:
        G = nx.random_labeled_tree(order, seed=seed)
    else:
        G = nx.empty_graph(0)
    # Add some extra random edges to increase density
    if extra_edges is None:
        extra_edges = max(0, order // 2)
    nodes = list(G.nodes())
    for _ in range(extra_edges):
        if not nodes:
            break
        u = rng.choice(nodes)
        v = rng.choice(nodes)
        if u == v or G.has_edge(u, v):
            continue
        G.add_edge(u, v)

    graph = Graph(order)
    for (u, v) in sorted(G.edges()):
        graph.add_edge(int(u), int(v), rng.randint(1, max_weight))
    return graph


def to_networkx(graph: Graph) -> nx.MultiGraph:
    """Build a NetworkX multigraph; each edge is keyed by its input position."""
    G = nx.MultiGraph()
    G.add_nodes_from(range(graph.order))
    for edge in graph.edges:
        G.add_edge(edge.u, edge.v, key=edge.index, weight=edge.weight)
    return G

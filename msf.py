"""Minimum spanning forests of weighted undirected graphs: Kruskal vs Prim.

Both algorithms break weight ties the same way: the edge given earlier in the
input wins. Edges are thus totally ordered by (weight, position), which makes
the forest unique and the two selections identical. Their total weights are
equal in any case.
"""
from collections.abc import Sequence
from functools import cached_property
from typing import Callable, Iterable, List, NamedTuple, Optional, Tuple

from dsu import DSU
from prim_heap import PrimHeap

Trace = Optional[Callable[[str], None]]


class Edge(NamedTuple):
    u: int
    v: int
    weight: int
    index: int

    def other(self, vertex: int) -> int:
        return self.u if self.v == vertex else self.v


class EdgesView(Sequence):
    """Read-only view of a graph's edge list, shared by its selections."""

    def __init__(self, edges: List[Edge]):
        self._edges = edges

    def __len__(self) -> int:
        return len(self._edges)

    def __getitem__(self, index):
        return self._edges[index]

    def __repr__(self):
        return f'EdgesView({self._edges!r})'


class Graph:
    """A weighted undirected multigraph on vertices 0..order-1."""

    def __init__(self, order: int):
        if order < 0:
            raise ValueError("graph can't have negatively many vertices")
        self.order = order
        self._edges: List[Edge] = []
        self.edges = EdgesView(self._edges)

    @classmethod
    def from_edges(cls, order: int, triples: Iterable[Tuple[int, int, int]]) -> 'Graph':
        graph = cls(order)
        for (u, v, w) in triples:
            graph.add_edge(u, v, w)
        return graph

    def __repr__(self):
        return f'Graph(order={self.order}, size={len(self._edges)})'

    def add_edge(self, u: int, v: int, weight: int) -> Edge:
        # both checks come first so a rejected edge leaves the graph untouched
        if not 0 <= u < self.order:
            raise ValueError(f"vertex u out of range: {u} not in [0, {self.order})")
        if not 0 <= v < self.order:
            raise ValueError(f"vertex v out of range: {v} not in [0, {self.order})")
        edge = Edge(u, v, weight, len(self._edges))
        self._edges.append(edge)
        return edge

    def adjacency(self) -> List[List[int]]:
        """Incident edge indices per vertex. A loop is listed once."""
        adj: List[List[int]] = [[] for _ in range(self.order)]
        for edge in self._edges:
            adj[edge.u].append(edge.index)
            if edge.v != edge.u:
                adj[edge.v].append(edge.index)
        return adj

    def edge_key(self, i: int) -> Tuple[int, int]:
        edge = self._edges[i]
        return (edge.weight, edge.index)

    def compare_edges(self, i: int, j: int) -> int:
        """Three-way comparison of edges by weight, then by input position."""
        a = self.edge_key(i)
        b = self.edge_key(j)
        return (a > b) - (a < b)

    def num_components(self) -> int:
        """Connected components, isolated vertices included."""
        dsu = DSU(self.order)
        for edge in self._edges:
            dsu.union(edge.u, edge.v)
        return dsu.num_components()

    # --- Kruskal ---

    def kruskal_msf(self, trace: Trace = None) -> 'EdgeSelection':
        keeps = [False] * len(self._edges)
        added: List[int] = []
        sets = DSU(self.order)

        for i in sorted(range(len(self._edges)), key=self.edge_key):
            edge = self._edges[i]
            keeps[i] = sets.union(edge.u, edge.v)
            if keeps[i]:
                added.append(i)
            if trace is not None:
                verdict = 'keep' if keeps[i] else 'discard (cycle)'
                trace(f"[kruskal] edge #{i} {edge.u} -- {edge.v} w={edge.weight}: {verdict}")

        return EdgeSelection(self.order, self.edges, keeps, "MSF (Kruskal)", added)

    # --- Prim, once per component ---

    def prim_msf(self, trace: Trace = None) -> 'EdgeSelection':
        adj = self.adjacency()
        visited = [False] * self.order
        keeps = [False] * len(self._edges)
        added: List[int] = []
        heap: PrimHeap[int, int] = PrimHeap(compare=self.compare_edges, trace=trace)

        for start in range(self.order):
            if visited[start]:
                continue
            assert heap.is_empty(), "heap must be empty when a new tree is started"
            if trace is not None:
                trace(f"[prim] new tree rooted at {start}")

            visited[start] = True
            vertex = start
            while True:
                for i in adj[vertex]:
                    dest = self._edges[i].other(vertex)
                    if not visited[dest]:
                        heap.push_or_decrease(dest, i)
                if not heap:
                    break
                vertex, i = heap.pop_min()
                visited[vertex] = True
                keeps[i] = True
                added.append(i)
                if trace is not None:
                    edge = self._edges[i]
                    trace(f"[prim] absorb {vertex} via edge #{i} {edge.u} -- {edge.v} w={edge.weight}")

        return EdgeSelection(self.order, self.edges, keeps, "MSF (Prim)", added)


class EdgeSelection:
    """A subset of a graph's edges, given as one bit per edge."""

    def __init__(self, order: int, edges: EdgesView, mask: Iterable[bool],
                 name: str = "(untitled)", added: Iterable[int] = ()):
        self.order = order
        self.edges = edges
        self.mask = tuple(bool(bit) for bit in mask)
        self.name = name
        # selected edge indices, in the order the algorithm accepted them
        self.added = tuple(added)
        if len(self.mask) != len(self.edges):
            raise ValueError("mask length must equal the number of edges")

    def __len__(self) -> int:
        return sum(self.mask)

    def __repr__(self):
        return f'EdgeSelection({self.name!r}, selected={len(self)}/{len(self.mask)})'

    @cached_property
    def weight(self) -> int:
        return sum(edge.weight for edge, selected in zip(self.edges, self.mask) if selected)

    def compute_weight(self) -> int:
        return self.weight

    @property
    def title(self) -> str:
        return f"{self.name}, total weight {self.weight}"

    def selected_indices(self) -> List[int]:
        return [i for i, selected in enumerate(self.mask) if selected]

    def selected_edges(self) -> List[Edge]:
        return [self.edges[i] for i in self.selected_indices()]

    def same_selection(self, other: 'EdgeSelection') -> bool:
        if self.order != other.order or self.edges is not other.edges:
            raise ValueError("selections are over different graphs")
        return self.mask == other.mask


class Comparison(NamedTuple):
    same_edges: bool
    same_weight: bool
    kruskal_weight: int
    prim_weight: int


def compare_selections(kruskal: EdgeSelection, prim: EdgeSelection) -> Comparison:
    return Comparison(
        same_edges=kruskal.same_selection(prim),
        same_weight=kruskal.weight == prim.weight,
        kruskal_weight=kruskal.weight,
        prim_weight=prim.weight,
    )

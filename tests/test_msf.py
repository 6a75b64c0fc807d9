import random

import pytest

from graph_utils import generate_graph
from msf import Edge, EdgeSelection, Graph, compare_selections


def both(graph):
    return graph.kruskal_msf(), graph.prim_msf()


def test_path_with_heavy_chord():
    graph = Graph.from_edges(4, [(0, 1, 1), (1, 2, 2), (2, 3, 3), (0, 3, 10)])
    for selection in both(graph):
        assert selection.mask == (True, True, True, False)
        assert selection.compute_weight() == 6


def test_empty_graph():
    graph = Graph(0)
    for selection in both(graph):
        assert selection.mask == ()
        assert selection.weight == 0
        assert len(selection) == 0
    assert graph.num_components() == 0


def test_disconnected_graph_with_isolated_vertices():
    graph = Graph.from_edges(6, [(0, 1, 5), (1, 2, 3)])
    assert graph.num_components() == 4
    for selection in both(graph):
        assert len(selection) == 2
        assert selection.weight == 8


def test_parallel_edges_earlier_wins():
    graph = Graph.from_edges(2, [(0, 1, 4), (0, 1, 4)])
    kruskal, prim = both(graph)
    assert kruskal.mask == (True, False)
    assert prim.mask == (True, False)
    assert kruskal.same_selection(prim)


def test_tie_break_prefers_earlier_edge_across_vertices():
    # both spanning trees weigh 2; the earlier of the tied edges is kept
    graph = Graph.from_edges(3, [(0, 1, 1), (1, 2, 1), (0, 2, 1)])
    kruskal, prim = both(graph)
    assert kruskal.mask == (True, True, False)
    assert prim.mask == (True, True, False)


def test_loops_are_never_selected():
    graph = Graph.from_edges(2, [(0, 0, 0), (1, 1, -5), (0, 1, 3)])
    for selection in both(graph):
        assert selection.mask == (False, False, True)
    assert graph.adjacency() == [[0, 2], [1, 2]]


def test_labels():
    kruskal, prim = both(Graph.from_edges(2, [(0, 1, 1)]))
    assert kruskal.name == "MSF (Kruskal)"
    assert prim.name == "MSF (Prim)"
    assert kruskal.title == "MSF (Kruskal), total weight 1"


def test_added_records_acceptance_order():
    graph = Graph.from_edges(4, [(0, 1, 9), (1, 2, 1), (2, 3, 5), (0, 3, 2)])
    kruskal, prim = both(graph)
    assert kruskal.added == (1, 3, 2)
    # prim starts at vertex 0: 0-3 (2), 3-2 (5), 2-1 (1)
    assert prim.added == (3, 2, 1)
    assert sorted(kruskal.added) == kruskal.selected_indices()


def test_add_edge_out_of_range_leaves_graph_untouched():
    graph = Graph(3)
    graph.add_edge(0, 1, 1)
    with pytest.raises(ValueError, match="vertex u"):
        graph.add_edge(3, 0, 1)
    with pytest.raises(ValueError, match="vertex v"):
        graph.add_edge(0, -1, 1)
    assert len(graph.edges) == 1


def test_add_edge_assigns_input_position():
    graph = Graph(3)
    assert graph.add_edge(0, 1, 7) == Edge(0, 1, 7, 0)
    assert graph.add_edge(2, 1, 3) == Edge(2, 1, 3, 1)


def test_negative_order_rejected():
    with pytest.raises(ValueError):
        Graph(-1)


def test_compare_edges_uses_weight_then_position():
    graph = Graph.from_edges(2, [(0, 1, 5), (0, 1, 3), (0, 1, 5)])
    assert graph.compare_edges(1, 0) < 0
    assert graph.compare_edges(0, 2) < 0
    assert graph.compare_edges(2, 0) > 0
    assert graph.compare_edges(0, 0) == 0


def test_edges_view_is_read_only_and_shared():
    graph = Graph.from_edges(2, [(0, 1, 1)])
    kruskal, prim = both(graph)
    assert kruskal.edges is graph.edges is prim.edges
    with pytest.raises(TypeError):
        graph.edges[0] = Edge(1, 0, 2, 0)


def test_same_selection_rejects_other_graph():
    g1 = Graph.from_edges(2, [(0, 1, 1)])
    g2 = Graph.from_edges(2, [(0, 1, 1)])
    with pytest.raises(ValueError, match="different graphs"):
        g1.kruskal_msf().same_selection(g2.kruskal_msf())


def test_same_selection_rejects_other_order():
    graph = Graph.from_edges(2, [(0, 1, 1)])
    other = EdgeSelection(3, graph.edges, [True])
    with pytest.raises(ValueError):
        graph.kruskal_msf().same_selection(other)


def test_mask_length_must_match():
    graph = Graph.from_edges(2, [(0, 1, 1)])
    with pytest.raises(ValueError):
        EdgeSelection(2, graph.edges, [True, False])


def test_weight_is_cached():
    graph = Graph.from_edges(2, [(0, 1, 4)])
    selection = graph.kruskal_msf()
    assert selection.weight == 4
    assert 'weight' in selection.__dict__


def test_tied_bridges_resolved_the_same_way():
    # 0-1 and 2-3 are cheap; the two bridges tie at weight 5
    graph = Graph.from_edges(4, [(0, 1, 1), (2, 3, 1), (1, 2, 5), (0, 3, 5)])
    kruskal, prim = both(graph)
    comparison = compare_selections(kruskal, prim)
    assert comparison.same_weight
    assert comparison.same_edges
    assert comparison.kruskal_weight == comparison.prim_weight == 7
    assert kruskal.mask == (True, True, True, False)


def test_compare_selections_flags_differing_masks():
    graph = Graph.from_edges(3, [(0, 1, 1), (1, 2, 1), (0, 2, 1)])
    kruskal = graph.kruskal_msf()
    other = EdgeSelection(3, graph.edges, [True, False, True], "other")
    comparison = compare_selections(kruskal, other)
    assert comparison.same_weight
    assert not comparison.same_edges


@pytest.mark.parametrize("seed", range(20))
def test_random_graphs_agree_on_weight_and_size(seed):
    graph = generate_graph(30, 60, 10, seed=seed)
    kruskal, prim = both(graph)
    assert kruskal.weight == prim.weight
    # (weight, position) orders all edges strictly, so the forest is unique
    assert kruskal.same_selection(prim)
    expected = graph.order - graph.num_components()
    assert len(kruskal) == expected
    assert len(prim) == expected


@pytest.mark.parametrize("seed", range(10))
def test_distinct_weights_give_identical_selections(seed):
    rng = random.Random(seed)
    order = 25
    weights = rng.sample(range(1, 10000), 70)
    graph = Graph(order)
    for w in weights:
        graph.add_edge(rng.randrange(order), rng.randrange(order), w)
    kruskal, prim = both(graph)
    assert kruskal.same_selection(prim)


def test_trace_hook_is_optional_and_called():
    graph = Graph.from_edges(3, [(0, 1, 1), (1, 2, 2), (0, 2, 3)])
    lines = []
    assert graph.kruskal_msf(trace=lines.append).mask == graph.kruskal_msf().mask
    assert any(line.startswith('[kruskal]') for line in lines)
    lines.clear()
    assert graph.prim_msf(trace=lines.append).mask == graph.prim_msf().mask
    assert any(line.startswith('[prim]') for line in lines)

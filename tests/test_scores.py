import math

from temporalpairs.graph import TemporalEdge, TemporalGraph
from temporalpairs.scores import (
    ShortestBetweennessData,
    VertexAppearance,
    compute_probs_and_scores,
    compute_score,
    compute_sigmas_temporal,
)


def _graph(num_nodes, triples):
    return TemporalGraph.from_edges(num_nodes, [TemporalEdge(*t) for t in triples])


def _diamond():
    return _graph(4, [(0, 1, 1), (0, 2, 1), (1, 3, 2), (2, 3, 2)])


def test_reset_seeds_source():
    data = ShortestBetweennessData(3)
    data.stack.append(VertexAppearance(2, 4))
    data.reset(1)
    assert data.dists == {VertexAppearance(1, 0): 0}
    assert data.sigmas == {VertexAppearance(1, 0): 1.0}
    assert data.total_sigmas[1] == 1.0
    assert data.total_dists == [-1, 0, -1]
    assert data.stack == []


def test_path_through_one_node():
    graph = _graph(3, [(0, 1, 1), (1, 2, 2)])
    assert compute_score(graph, 0, 2) == 1.0


def test_diamond_counts_both_paths():
    graph = _diamond()
    data = ShortestBetweennessData(graph.num_nodes)
    data.reset(0)
    assert compute_sigmas_temporal(graph, True, 0, 3, data)
    assert data.total_sigmas[3] == 2.0
    assert compute_score(graph, 0, 3) == 1.0


def test_time_order_must_be_respected():
    graph = _graph(3, [(1, 2, 1), (0, 1, 2)])
    data = ShortestBetweennessData(graph.num_nodes)
    data.reset(0)
    assert not compute_sigmas_temporal(graph, True, 0, 2, data)
    assert compute_score(graph, 0, 2) == 0.0


def test_direct_edge_has_no_intermediates():
    graph = _graph(2, [(0, 1, 1)])
    assert compute_score(graph, 0, 1) == 0.0


def test_time_zero_edges_need_non_strict_search():
    graph = _graph(2, [(0, 1, 0)])
    strict = ShortestBetweennessData(2)
    strict.reset(0)
    assert not compute_sigmas_temporal(graph, True, 0, 1, strict)
    loose = ShortestBetweennessData(2)
    loose.reset(0)
    assert compute_sigmas_temporal(graph, False, 0, 1, loose)
    assert loose.total_dists[1] == loose.dists[VertexAppearance(1, 0)]


def test_stack_holds_each_discovered_appearance_once():
    graph = _diamond()
    data = ShortestBetweennessData(graph.num_nodes)
    data.reset(0)
    compute_sigmas_temporal(graph, True, 0, 3, data)
    assert len(data.stack) == len(set(data.stack))
    assert set(data.stack) == set(data.dists) - {VertexAppearance(0, 0)}


def test_probs_cover_all_pairs_and_sum_to_one():
    graph = _graph(4, [(0, 1, 1), (1, 2, 2), (2, 3, 3), (0, 2, 1)])
    scores, probs = compute_probs_and_scores(graph)
    n = graph.num_nodes
    assert len(scores) == n * (n - 1)
    assert set(scores) == set(probs)
    assert all((s, s) not in scores for s in range(n))
    assert math.isclose(sum(probs.values()), 1.0)
    total = sum(scores.values())
    for pair, score in scores.items():
        assert math.isclose(probs[pair], score / total)


def test_probs_all_zero_without_intermediates():
    graph = _graph(2, [(0, 1, 1), (1, 0, 2)])
    scores, probs = compute_probs_and_scores(graph)
    assert all(v == 0.0 for v in scores.values())
    assert all(v == 0.0 for v in probs.values())
"""Shortest temporal path counting and pair scores."""

from __future__ import annotations

import bisect
from collections import defaultdict, deque
from dataclasses import dataclass, field

from temporalpairs.graph import TemporalGraph


@dataclass(frozen=True)
class VertexAppearance:
    """A node at a given time step."""

    v: int
    time: int


@dataclass
class ShortestBetweennessData:
    """Per-source state of a shortest temporal path search.

    Appearances missing from ``dists`` are unreached.
    """

    num_nodes: int
    dists: dict[VertexAppearance, int] = field(default_factory=dict, init=False)
    sigmas: dict[VertexAppearance, float] = field(default_factory=dict, init=False)
    preds: dict[VertexAppearance, set[VertexAppearance]] = field(
        default_factory=dict, init=False
    )
    total_sigmas: list[float] = field(default_factory=list, init=False)
    total_dists: list[int] = field(default_factory=list, init=False)
    foremost_times: list[int] = field(default_factory=list, init=False)
    stack: list[VertexAppearance] = field(default_factory=list, init=False)

    def __post_init__(self) -> None:
        self._clear()

    def _clear(self) -> None:
        self.dists.clear()
        self.sigmas.clear()
        self.preds.clear()
        self.total_sigmas = [0.0] * self.num_nodes
        self.total_dists = [-1] * self.num_nodes
        self.foremost_times = [-1] * self.num_nodes
        self.stack.clear()

    def reset(self, source: int) -> None:
        """Clear all state and start a search from ``source`` at time 0."""
        self._clear()
        start = VertexAppearance(source, 0)
        self.dists[start] = 0
        self.sigmas[start] = 1.0
        self.total_sigmas[source] = 1.0
        self.total_dists[source] = 0


def compute_sigmas_temporal(
    graph: TemporalGraph,
    strict: bool,
    source: int,
    target: int,
    data: ShortestBetweennessData,
) -> bool:
    """Count shortest temporal paths from ``source`` until ``target`` is settled.

    ``data`` must have been reset for ``source``. Returns whether the target
    was reached.
    """
    queue = deque([VertexAppearance(source, 0)])
    mindist_to_target = -1

    while queue:
        cur = queue.popleft()
        cur_dist = data.dists[cur]
        if not (
            mindist_to_target == -1
            or (mindist_to_target > 0 and cur_dist < mindist_to_target)
        ):
            continue

        timeline = graph.adj[cur.v]
        min_next_time = cur.time + (1 if strict else 0)
        start = bisect.bisect_left(timeline, min_next_time, key=lambda a: a.timestep)
        cur_sigma = data.sigmas[cur]
        next_dist = cur_dist + 1

        for appearance in timeline[start:]:
            t = appearance.timestep
            for w in appearance.neighbours:
                wa = VertexAppearance(w, t)
                if wa not in data.dists:
                    data.dists[wa] = next_dist
                    if data.total_dists[w] < 0:
                        data.total_dists[w] = next_dist
                        if w == target:
                            mindist_to_target = next_dist
                    if w != target and (
                        mindist_to_target < 0
                        or (mindist_to_target > 0 and next_dist < mindist_to_target)
                    ):
                        queue.append(wa)
                    data.stack.append(wa)
                if data.dists[wa] == next_dist:
                    data.sigmas[wa] = data.sigmas.get(wa, 0.0) + cur_sigma
                    data.preds.setdefault(wa, set()).add(cur)
                    if data.total_dists[w] == next_dist:
                        data.total_sigmas[w] += cur_sigma

    return mindist_to_target > 0


def compute_score(graph: TemporalGraph, source: int, target: int) -> float:
    """Expected number of intermediate appearances on a shortest temporal path."""
    data = ShortestBetweennessData(graph.num_nodes)
    data.reset(source)

    reached = compute_sigmas_temporal(graph, True, source, target, data)
    sigma_st = data.total_sigmas[target]
    if not reached or sigma_st == 0.0:
        return 0.0

    goal = data.total_dists[target]
    ends = [va for va, d in data.dists.items() if va.v == target and d == goal]

    visited = set(ends)
    pending = list(ends)
    while pending:
        cur = pending.pop()
        for pred in data.preds.get(cur, ()):
            if pred not in visited:
                visited.add(pred)
                pending.append(pred)

    succs: defaultdict[VertexAppearance, list[VertexAppearance]] = defaultdict(list)
    for va in visited:
        for pred in data.preds.get(va, ()):
            succs[pred].append(va)

    beta = dict.fromkeys(ends, 1.0)
    for va in sorted(visited, key=lambda a: data.dists[a], reverse=True):
        beta[va] = beta.get(va, 0.0) + sum(beta[w] for w in succs.get(va, ()))

    return sum(
        data.sigmas[va] * beta[va] / sigma_st
        for va in visited
        if va.v not in (source, target)
    )


def compute_probs_and_scores(
    graph: TemporalGraph,
) -> tuple[dict[tuple[int, int], float], dict[tuple[int, int], float]]:
    """Score every ordered pair of distinct nodes and normalise the scores.

    Returns ``(scores, probs)``. When every score is zero, all probabilities
    are zero.
    """
    scores = {
        (s, z): compute_score(graph, s, z)
        for s in range(graph.num_nodes)
        for z in range(graph.num_nodes)
        if s != z
    }
    total = sum(scores.values())
    if total == 0:
        probs = dict.fromkeys(scores, 0.0)
    else:
        probs = {pair: score / total for pair, score in scores.items()}
    return scores, probs
"""Temporal graphs: timelines of time-stamped out-neighbourhoods per node."""

from __future__ import annotations

import bisect
import re
from dataclasses import dataclass, field
from os import PathLike
from typing import Iterable

_LEADING_INT = re.compile(r"[+-]?\d+")


@dataclass(frozen=True)
class TemporalEdge:
    """A directed edge that exists at a single time step."""

    source: int
    target: int
    time: int


@dataclass
class AppearanceNeighbourhood:
    """The neighbours a node reaches at one time step."""

    timestep: int
    neighbours: list[int] = field(default_factory=list)
    next_index: int = -1


@dataclass
class TemporalGraph:
    """A temporal graph stored as one sorted timeline per node."""

    num_nodes: int = 0
    num_edges: int = 0
    max_timestep: int = 0
    adj: list[list[AppearanceNeighbourhood]] = field(default_factory=list)

    @classmethod
    def from_edges(cls, num_nodes: int, edges: Iterable[TemporalEdge]) -> "TemporalGraph":
        """Build a graph on ``num_nodes`` nodes from the given edges."""
        edges = list(edges)
        graph = cls(num_nodes=num_nodes, num_edges=len(edges))
        graph.adj = [[] for _ in range(num_nodes)]

        for edge in edges:
            for node in (edge.source, edge.target):
                if not 0 <= node < num_nodes:
                    raise ValueError(f"node {node} is outside 0..{num_nodes - 1}")
            graph.max_timestep = max(graph.max_timestep, edge.time)

            timeline = graph.adj[edge.source]
            pos = bisect.bisect_left(timeline, edge.time, key=lambda a: a.timestep)
            if pos == len(timeline) or timeline[pos].timestep != edge.time:
                timeline.insert(pos, AppearanceNeighbourhood(edge.time, [edge.target]))
            else:
                timeline[pos].neighbours.append(edge.target)

        for timeline in graph.adj:
            for pos, appearance in enumerate(timeline):
                appearance.next_index = pos + 1 if pos + 1 < len(timeline) else -1
        return graph

    def clear(self) -> None:
        """Drop all nodes and edges."""
        self.adj.clear()
        self.num_nodes = 0
        self.num_edges = 0
        self.max_timestep = 0


def build_temporal_graph(num_nodes: int, edges: Iterable[TemporalEdge]) -> TemporalGraph:
    """Build a temporal graph from edges over nodes ``0..num_nodes-1``."""
    return TemporalGraph.from_edges(num_nodes, edges)


def read_temporal_graph(path: str | PathLike, directed: bool = True) -> TemporalGraph:
    """Read a graph from lines of ``source target time``.

    Node labels are numbered in order of first appearance. Lines that do not
    start with two labels and an integer time are skipped, as are self-loops.
    """
    node_ids: dict[str, int] = {}
    edges: list[TemporalEdge] = []

    with open(path, encoding="utf-8") as handle:
        for line in handle:
            parts = line.split()
            if len(parts) < 3:
                continue
            match = _LEADING_INT.match(parts[2])
            if match is None:
                continue
            source_label, target_label = parts[0], parts[1]
            time = int(match.group())

            source = node_ids.setdefault(source_label, len(node_ids))
            target = node_ids.setdefault(target_label, len(node_ids))
            if source == target:
                continue

            edges.append(TemporalEdge(source, target, time))
            if not directed:
                edges.append(TemporalEdge(target, source, time))

    edges.sort(key=lambda e: (e.time, e.source, e.target))
    return TemporalGraph.from_edges(len(node_ids), edges)
# temporalpairs

`temporalpairs` reads a temporal graph from an edge list. For every ordered
pair of distinct nodes `(s, z)` it computes a score from the shortest strictly
time-respecting paths from `s` to `z`. A path starts at `s` at time 0, and each
edge on it must have a later time than the one before. The score adds up, for
each vertex appearance (a node at a time step) on these paths that is not at
`s` or `z`, the fraction of shortest paths that pass through it. The scores are
normalised into a probability distribution, and node pairs are then drawn at
random from it.

## Input format

The input is a plain text file with one edge per line:

```
<source> <target> <time>
```

Node labels may be any whitespace-free strings. They are numbered from 0 in the
order they first appear. The time must start with an integer. Lines with fewer
than three fields or without an integer time are skipped, and so are
self-loops.

## Command line

```
temporalpairs -filename edges.txt -num_samples 10 -seed 42
```

The command reads the file as a directed graph. It prints the node count, the
edge count and the largest time step. Then it prints one
`Sampled pair: (s, z)` line for each sample and ends with
`Graph processing completed.`

The command needs at least six arguments. With fewer it prints a usage line.
Any option other than `-filename`, `-num_samples` and `-seed` stops the
command. So do a missing value, a non-integer count or seed, and a file that
cannot be read. It also stops when samples are asked for but no pair has a
positive score. In each of these cases the exit status is 1.

## Library use

```python
from temporalpairs.graph import read_temporal_graph
from temporalpairs.scores import compute_probs_and_scores, compute_score
from temporalpairs.cli import sample_pairs

graph = read_temporal_graph("edges.txt", directed=True)
scores, probs = compute_probs_and_scores(graph)
print(compute_score(graph, 0, 1))
for s, z in sample_pairs(probs, num_samples=5, seed=1):
    print(s, z)
```

- `read_temporal_graph(path, directed=True)` returns a `TemporalGraph`. With
  `directed=False`, every edge is also added in the reverse direction.
- `TemporalGraph.from_edges(num_nodes, edges)` and
  `build_temporal_graph(num_nodes, edges)` build a graph from `TemporalEdge`
  values. They raise `ValueError` for a node outside `0..num_nodes-1`.
- `compute_sigmas_temporal(graph, strict, source, target, data)` counts
  shortest temporal paths into a `ShortestBetweennessData` that has been
  `reset(source)`.
- `compute_probs_and_scores(graph)` returns `(scores, probs)`, keyed by
  `(s, z)`. If every score is zero, every probability is zero.
- `sample_pairs(probs, num_samples, seed)` draws pairs in proportion to their
  weights with a seeded `random.Random`. It returns an empty list when
  `num_samples` is not positive.

## Running the tests

```
pip install -e .[test]
pytest
```
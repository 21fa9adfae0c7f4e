"""Command line: score node pairs of a temporal graph and sample from them."""

from __future__ import annotations

import random
import sys
from dataclasses import dataclass
from typing import Mapping, Sequence

from temporalpairs.graph import read_temporal_graph
from temporalpairs.scores import compute_probs_and_scores

PROG = "temporalpairs"
USAGE = f"Usage: {PROG} -filename <filename> -num_samples <num_samples> -seed <seed>"


class UsageError(ValueError):
    """Raised for malformed command-line arguments."""


@dataclass
class Parameters:
    """Settings taken from the command line."""

    filename: str = ""
    num_samples: int = 0
    seed: int = 0


def _int_option(name: str, text: str) -> int:
    try:
        return int(text)
    except ValueError:
        raise UsageError(f"option {name} needs an integer, got {text!r}") from None


def parse_command_line(argv: Sequence[str]) -> Parameters:
    """Parse ``-filename``, ``-num_samples`` and ``-seed`` options."""
    params = Parameters()
    args = iter(argv)
    for option in args:
        if option not in ("-filename", "-num_samples", "-seed"):
            raise UsageError("Unknown options")
        value = next(args, None)
        if value is None:
            raise UsageError(f"option {option} needs a value")
        if option == "-filename":
            params.filename = value
        elif option == "-num_samples":
            params.num_samples = _int_option(option, value)
        else:
            params.seed = _int_option(option, value)
    return params


def sample_pairs(
    probs: Mapping[tuple[int, int], float], num_samples: int, seed: int
) -> list[tuple[int, int]]:
    """Draw ``num_samples`` pairs with probability proportional to their weight."""
    if num_samples <= 0:
        return []
    keys = list(probs)
    weights = [probs[key] for key in keys]
    if not keys or sum(weights) <= 0:
        raise ValueError("no pair has a positive probability")
    rng = random.Random(seed)
    return rng.choices(keys, weights=weights, k=num_samples)


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 6:
        print(USAGE, file=sys.stderr)
        return 1

    try:
        params = parse_command_line(args)
    except UsageError as exc:
        print(exc, file=sys.stderr)
        return 1

    try:
        graph = read_temporal_graph(params.filename, directed=True)
    except OSError as exc:
        print(f"cannot read {params.filename}: {exc}", file=sys.stderr)
        return 1

    print(f"Number of nodes: {graph.num_nodes}")
    print(f"Number of edges: {graph.num_edges}")
    print(f"Max timestep: {graph.max_timestep}")

    _, probs = compute_probs_and_scores(graph)
    try:
        pairs = sample_pairs(probs, params.num_samples, params.seed)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1

    for s, z in pairs:
        print(f"Sampled pair: ({s}, {z})")

    graph.clear()
    print("Graph processing completed.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
"""Shortest temporal path scores for node pairs of a temporal graph, and sampling by score."""

__version__ = "0.1.0"
__all__ = ["graph", "scores", "cli"]
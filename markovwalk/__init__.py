"""Markov chains with weighted random walks, plus snakes-and-ladders and tweet generators."""

__version__ = "0.1.0"
__all__ = ["chain", "snakes", "tweets"]
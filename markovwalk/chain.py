"""A Markov chain over arbitrary data, with weighted random walks."""

from __future__ import annotations

import random
from collections.abc import Callable, Hashable, Iterator
from dataclasses import dataclass, field
from typing import Any

_Predicate = Callable[[Any], bool]
_Key = Callable[[Any], Hashable]


@dataclass(eq=False)
class MarkovNode:
    """A state of the chain and the counted transitions out of it."""

    data: Any
    frequencies: dict[MarkovNode, int] = field(default_factory=dict)

    def add_successor(self, other: MarkovNode) -> None:
        """Count one more transition from this node to ``other``."""
        self.frequencies[other] = self.frequencies.get(other, 0) + 1

    def next_random(self, rng: random.Random | None = None) -> MarkovNode | None:
        """Pick a successor with probability proportional to its count."""
        total = sum(self.frequencies.values())
        if total == 0:
            return None
        pick = (rng or random).randrange(total)
        cumulative = 0
        for node, frequency in self.frequencies.items():
            cumulative += frequency
            if cumulative > pick:
                return node
        return None


class MarkovChain:
    """An ordered collection of unique states and their transitions.

    ``is_last`` tells whether a state is terminal; ``key`` maps a state to
    the value used to decide whether two states are the same.  Without
    ``is_last`` no state is terminal; without ``key`` states are compared
    by their own value.
    """

    def __init__(self, is_last: _Predicate | None = None, key: _Key | None = None):
        self._is_last = is_last
        self._key = key
        self._nodes: list[MarkovNode] = []
        self._index: dict[Hashable, MarkovNode] = {}

    def is_last(self, data: Any) -> bool:
        """Tell whether ``data`` is a terminal state."""
        return self._is_last is not None and bool(self._is_last(data))

    def key(self, data: Any) -> Hashable:
        """Return the value that identifies ``data`` in the chain."""
        return data if self._key is None else self._key(data)

    def get_node(self, data: Any) -> MarkovNode | None:
        """Return the node holding ``data``, or None if there is none."""
        return self._index.get(self.key(data))

    def add(self, data: Any) -> MarkovNode:
        """Return the node holding ``data``, appending a new one if needed."""
        key = self.key(data)
        node = self._index.get(key)
        if node is None:
            node = MarkovNode(data)
            self._index[key] = node
            self._nodes.append(node)
        return node

    def first_random_node(self, rng: random.Random | None = None) -> MarkovNode | None:
        """Return a uniformly chosen non-terminal node, or None if empty.

        Raises ValueError when every node is terminal.
        """
        if not self._nodes:
            return None
        if all(self.is_last(node.data) for node in self._nodes):
            raise ValueError("every node in the chain is terminal")
        rng = rng or random
        while True:
            node = self._nodes[rng.randrange(len(self._nodes))]
            if not self.is_last(node.data):
                return node

    def random_sequence(
        self,
        first_node: MarkovNode | None,
        max_length: int,
        rng: random.Random | None = None,
    ) -> list[Any]:
        """Walk from ``first_node`` and return the visited data.

        The walk stops at a terminal state, at a state with no successors,
        or once ``max_length`` states were visited.  A start node without
        successors yields an empty walk.
        """
        if first_node is None or not first_node.frequencies:
            return []
        sequence: list[Any] = []
        current: MarkovNode | None = first_node
        while current is not None and len(sequence) < max_length:
            sequence.append(current.data)
            if self.is_last(current.data):
                break
            current = current.next_random(rng)
        return sequence

    def is_truncated(self, sequence: list[Any], max_length: int) -> bool:
        """Tell whether a walk was cut short by ``max_length``."""
        if not sequence or len(sequence) != max_length:
            return False
        last = sequence[-1]
        if self.is_last(last):
            return False
        node = self.get_node(last)
        return node is not None and bool(node.frequencies)

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[MarkovNode]:
        return iter(self._nodes)
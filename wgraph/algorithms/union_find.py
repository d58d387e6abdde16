"""Disjoint-set forest with path compression and union by rank."""

from __future__ import annotations

from typing import Dict, Hashable, Iterable


class DisjointSet:
    """Track which component each element belongs to.

    ``find`` and ``union`` run in amortized near-constant time.
    """

    def __init__(self, elements: Iterable[Hashable] = ()) -> None:
        self._parent: Dict[Hashable, Hashable] = {}
        self._rank: Dict[Hashable, int] = {}
        for element in elements:
            self.add(element)

    def __contains__(self, element: object) -> bool:
        return element in self._parent

    def add(self, element: Hashable) -> None:
        """Register ``element`` as a singleton set if it is new."""
        if element not in self._parent:
            self._parent[element] = element
            self._rank[element] = 0

    def find(self, element: Hashable) -> Hashable:
        """Return the representative of the set holding ``element``.

        Raises:
            KeyError: If ``element`` was never added.
        """
        root = element
        while self._parent[root] != root:
            root = self._parent[root]
        # Path compression
        while self._parent[element] != root:
            self._parent[element], element = root, self._parent[element]
        return root

    def union(self, a: Hashable, b: Hashable) -> bool:
        """Merge the sets holding ``a`` and ``b``.

        Returns:
            True if two sets were merged, False if they were already one.
        """
        root_a, root_b = self.find(a), self.find(b)
        if root_a == root_b:
            return False
        if self._rank[root_a] < self._rank[root_b]:
            root_a, root_b = root_b, root_a
        self._parent[root_b] = root_a
        if self._rank[root_a] == self._rank[root_b]:
            self._rank[root_a] += 1
        return True

    def connected(self, a: Hashable, b: Hashable) -> bool:
        return self.find(a) == self.find(b)

"""
union_find.py — Disjoint-Set Forest
====================================
Index-based union-find used by Kruskal.  Node ids are mapped to dense
indices 0 … n-1 once; `parent` and `rank` are plain lists.

  • find   – iterative, with full path compression
  • union  – union by rank; returns False when already joined
  • groups – the current partition, in node order
"""

from typing import Dict, Iterable, List


class UnionFind:

    def __init__(self, items: Iterable[int]):
        self.items:  List[int]      = list(items)
        self._index: Dict[int, int] = {item: i for i, item in enumerate(self.items)}
        self.parent: List[int]      = list(range(len(self.items)))
        self.rank:   List[int]      = [0] * len(self.items)

    def _find_index(self, i: int) -> int:
        root = i
        while self.parent[root] != root:
            root = self.parent[root]
        # path compression
        while self.parent[i] != root:
            self.parent[i], i = root, self.parent[i]
        return root

    def find(self, item: int) -> int:
        """Representative item of `item`'s set."""
        return self.items[self._find_index(self._index[item])]

    def connected(self, a: int, b: int) -> bool:
        return self._find_index(self._index[a]) == self._find_index(self._index[b])

    def union(self, a: int, b: int) -> bool:
        ra = self._find_index(self._index[a])
        rb = self._find_index(self._index[b])
        if ra == rb:
            return False
        if self.rank[ra] < self.rank[rb]:
            self.parent[ra] = rb
        elif self.rank[ra] > self.rank[rb]:
            self.parent[rb] = ra
        else:
            self.parent[rb] = ra
            self.rank[ra] += 1
        return True

    def groups(self) -> List[List[int]]:
        """Sets as lists of items, ordered by each set's first item."""
        by_root: Dict[int, List[int]] = {}
        for i, item in enumerate(self.items):
            by_root.setdefault(self._find_index(i), []).append(item)
        return list(by_root.values())

    def __len__(self) -> int:
        return len(self.items)

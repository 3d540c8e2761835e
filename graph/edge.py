"""
edge.py — Graph Edge
====================
Connects two nodes by id, with an optional weight.

Design decisions:
  - `source` and `target` are node ids, NOT Node references, so edges
    stay serialisable and free of circular references.
  - Direction is a GRAPH-level flag.  An edge never knows whether it is
    directed; `Graph.neighbours` decides which way it may be followed.
  - `weight` may be None.  Algorithms that need a cost read `edge.cost`,
    which treats a missing weight as 1.
"""

from typing import Optional, Tuple, Union

Number = Union[int, float]


class Edge:
    """
    Attributes:
        source : ID of the tail node.
        target : ID of the head node.
        weight : Numeric cost or None.  Can be negative for Bellman-Ford demos.
    """

    __slots__ = ("source", "target", "weight")

    def __init__(self, source: int, target: int, weight: Optional[Number] = None):
        self.source: int              = int(source)
        self.target: int              = int(target)
        self.weight: Optional[Number] = weight

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    @property
    def cost(self) -> Number:
        """Weight used by algorithms; a missing weight counts as 1."""
        return 1 if self.weight is None else self.weight

    @property
    def endpoints(self) -> Tuple[int, int]:
        return (self.source, self.target)

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        data = {"source": self.source, "target": self.target}
        if self.weight is not None:
            data["weight"] = self.weight
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Edge":
        return cls(
            source=data["source"],
            target=data["target"],
            weight=data.get("weight"),
        )

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Edge({self.source} - {self.target}, w={self.weight})"

    def __eq__(self, other) -> bool:
        return (
            isinstance(other, Edge)
            and self.source == other.source
            and self.target == other.target
            and self.weight == other.weight
        )

    def __hash__(self) -> int:
        return hash((self.source, self.target, self.weight))

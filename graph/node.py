"""
node.py — Graph Node
====================
A vertex of the tutor graph.

Design decisions:
  - `id` is an integer and is the only identity.  `label` is display text
    and defaults to the stringified id.
  - Nodes are never mutated once the Graph is built; runners keep their
    own per-run state (visited sets, distances, …) instead of writing
    onto the node the way an editor would.
  - `x` / `y` are carried through for callers that lay the graph out.
    The engine never reads them.
"""

from typing import Optional


class Node:
    """
    Attributes:
        id    : Unique integer identifier.
        label : Human-readable name used in descriptions and aux payloads.
        x, y  : Optional layout coordinates (pass-through only).
    """

    __slots__ = ("id", "label", "x", "y")

    def __init__(
        self,
        node_id: int,
        label: Optional[str] = None,
        x: Optional[float] = None,
        y: Optional[float] = None,
    ):
        self.id:    int             = int(node_id)
        self.label: str             = str(label) if label not in (None, "") else str(self.id)
        self.x:     Optional[float] = x
        self.y:     Optional[float] = y

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        data = {"id": self.id, "label": self.label}
        if self.x is not None and self.y is not None:
            data["x"] = self.x
            data["y"] = self.y
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Node":
        return cls(
            node_id=data["id"],
            label=data.get("label"),
            x=data.get("x"),
            y=data.get("y"),
        )

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Node(id={self.id}, label={self.label})"

    def __eq__(self, other) -> bool:
        return isinstance(other, Node) and self.id == other.id and self.label == other.label

    def __hash__(self) -> int:
        return hash((self.id, self.label))

# point.py
from dataclasses import dataclass

from calcDist import euclidean

@dataclass(frozen=True, eq=False)
class Node:
    """Represents a city with id and planar coordinates."""
    id: int
    x: float
    y: float

    def distance(self, other: "Node") -> float:
        return euclidean(self.x, self.y, other.x, other.y)

    def to_tuple(self):
        return (self.x, self.y)

    # same city iff same id, coordinates are not part of identity
    def __eq__(self, other):
        if not isinstance(other, Node):
            return NotImplemented
        return self.id == other.id

    def __hash__(self):
        return hash(self.id)

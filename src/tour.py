# tour.py
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from point import Node

@dataclass(frozen=True)
class Tour:
    """
    Closed tour produced by the nearest-neighbor builder.

    path[0] and path[-1] are the start city. weights[i] is the distance
    travelled from path[i-1] to path[i], so weights[0] is always 0.
    """
    path: List[Node]
    weights: List[float]
    total_distance: float

def tour_edges(tour: Tour) -> Iterator[Tuple[Node, Node, float]]:
    for i in range(1, len(tour.path)):
        yield tour.path[i - 1], tour.path[i], tour.weights[i]

def _fmt(value: float, precision: Optional[int]) -> str:
    if precision is None:
        return f"{value:g}"
    return f"{value:.{precision}f}"

def format_tour(tour: Tour, precision: Optional[int] = None) -> List[str]:
    """
    Render a tour as text lines.

    Args:
        tour: Tour to render
        precision: Decimal places for weights; None prints the shortest form

    Returns:
        One "EDGE a -> b | WEIGHT : w" line per edge, then the total line
    """
    lines = [
        f"EDGE {u.id} -> {v.id} | WEIGHT : {_fmt(w, precision)}"
        for u, v, w in tour_edges(tour)
    ]
    lines.append(f"TOTAL DISTANCE: {_fmt(tour.total_distance, precision)}")
    return lines

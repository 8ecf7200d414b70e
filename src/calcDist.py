# calcDist.py
import math
from typing import Tuple

def euclidean(x1: float, y1: float, x2: float, y2: float) -> float:
    """Straight-line distance between two points in the plane."""
    return math.hypot(x2 - x1, y2 - y1)

def calcDist(p1: Tuple[float,float], p2: Tuple[float,float]) -> float:
    """Wrapper: p1,p2 are (x, y) tuples."""
    return euclidean(p1[0], p1[1], p2[0], p2[1])

import math

import pytest

from calcDist import calcDist, euclidean
from point import Node

def test_distance_345_triangle():
    assert Node(1, 0, 0).distance(Node(2, 3, 4)) == 5.0

def test_distance_to_self_is_zero():
    a = Node(7, 2.5, -1.25)
    assert a.distance(a) == 0.0

def test_distance_is_symmetric_and_real_valued():
    a, b = Node(1, 0, 0), Node(2, 1, 1)
    assert a.distance(b) == b.distance(a)
    assert math.isclose(a.distance(b), math.sqrt(2))

def test_calc_dist_matches_euclidean():
    assert calcDist((1.0, 2.0), (4.0, 6.0)) == euclidean(1.0, 2.0, 4.0, 6.0) == 5.0

def test_identity_is_by_id_only():
    assert Node(3, 0, 0) == Node(3, 99, 99)
    assert Node(3, 0, 0) != Node(4, 0, 0)
    assert len({Node(3, 0, 0), Node(3, 1, 1)}) == 1

def test_node_is_immutable():
    n = Node(1, 0, 0)
    with pytest.raises(AttributeError):
        n.x = 5
    assert n.to_tuple() == (0, 0)

def test_distance_does_not_overflow_for_large_coordinates():
    assert Node(1, 0, 0).distance(Node(2, 3e200, 4e200)) == pytest.approx(5e200)

# nearest_neighbor.py
from typing import Iterable, Set

from calcDist import calcDist
from point import Node
from tour import Tour

class TourError(Exception):
    """Precondition failure while building a tour."""

class EmptyCitiesError(TourError, ValueError):
    pass

class DuplicateCityError(TourError, ValueError):
    pass

class UnknownStartCityError(TourError, LookupError):
    pass

def resolve_start_city(cities: Iterable[Node], start_id: int) -> Node:
    """Return the city whose id is start_id. Raises UnknownStartCityError if absent."""
    cities = list(cities)
    if not cities:
        raise EmptyCitiesError("City collection is empty.")
    for city in cities:
        if city.id == start_id:
            return city
    raise UnknownStartCityError(f"No city with id {start_id}.")

def nearest_city_by_coord(cities: Iterable[Node], x: float, y: float) -> Node:
    best = None
    best_d = None
    for city in cities:
        d = calcDist((x, y), city.to_tuple())
        if best is None or d < best_d:
            best_d = d
            best = city
    if best is None:
        raise EmptyCitiesError("City collection is empty.")
    return best

def nearest_neighbor_tour(cities: Iterable[Node], start_id: int) -> Tour:
    """
    Greedy tour: from the current city always move to the closest city not yet
    visited, then return to the start. O(n^2).

    Ties go to the first candidate in iteration order of `cities`, so the
    result is deterministic for a fixed ordering.
    """
    cities = list(cities)
    start = resolve_start_city(cities, start_id)

    seen: Set[int] = set()
    for city in cities:
        if city.id in seen:
            raise DuplicateCityError(f"Duplicate city id {city.id}.")
        seen.add(city.id)

    path = [start]
    weights = [0.0]
    total = 0.0

    visited = {start.id}
    current = start

    while len(visited) < len(cities):
        next_city = None
        min_dist = None
        for city in cities:
            if city.id in visited:
                continue
            d = current.distance(city)
            if next_city is None or d < min_dist:
                min_dist = d
                next_city = city

        path.append(next_city)
        weights.append(min_dist)
        total += min_dist
        visited.add(next_city.id)
        current = next_city

    back = current.distance(start)
    path.append(start)
    weights.append(back)
    total += back

    return Tour(path=path, weights=weights, total_distance=total)

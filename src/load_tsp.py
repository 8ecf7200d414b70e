"""
Read and write TSPLIB .tsp files with a NODE_COORD_SECTION.

Usage:
    from load_tsp import load_cities
    cities = load_cities("data/sample10.tsp")
"""

import math
import random
from typing import Dict, Iterable, List, Optional, Tuple

import config
from point import Node

class TSPFileError(RuntimeError):
    """The city source could not be turned into a city collection."""

class TSPFileUnreadable(TSPFileError):
    pass

class TSPFileMalformed(TSPFileError):
    pass

def _parse_header(line: str) -> Optional[Tuple[str, str]]:
    if ':' not in line:
        return None
    key, value = line.split(':', 1)
    return key.strip().upper(), value.strip()

def _parse_row(line: str, lineno: int, filename: str) -> Node:
    parts = line.split()
    if len(parts) < 3:
        raise TSPFileMalformed(f"{filename}:{lineno}: expected 'id x y', got '{line}'")
    try:
        nid = int(parts[0])
        x = float(parts[1])
        y = float(parts[2])
    except ValueError as e:
        raise TSPFileMalformed(f"{filename}:{lineno}: {e}") from e
    if nid < 0 or not (math.isfinite(x) and math.isfinite(y)):
        raise TSPFileMalformed(f"{filename}:{lineno}: invalid city '{line}'")
    return Node(id=nid, x=x, y=y)

def read_tsp_file(filename: str) -> Tuple[Dict[str, str], List[Node]]:
    """
    Parse a TSPLIB file into header metadata and a list of cities.

    Raises:
        TSPFileUnreadable: If the file cannot be opened or decoded
        TSPFileMalformed: If the coordinate section is missing or invalid
    """
    try:
        with open(filename, 'r', encoding='utf-8') as f:
            lines = [line.replace('\xa0', ' ').strip() for line in f]
    except (OSError, UnicodeDecodeError) as e:
        raise TSPFileUnreadable(f"Could not read file: {filename} ({e})") from e

    metadata: Dict[str, str] = {}
    cities: List[Node] = []
    seen = set()
    in_coords = False

    for lineno, line in enumerate(lines, start=1):
        if not line:
            continue
        if line.upper() == 'EOF':
            break
        if not in_coords:
            if line.upper().startswith('NODE_COORD_SECTION'):
                in_coords = True
                continue
            header = _parse_header(line)
            if header:
                metadata[header[0]] = header[1]
            continue

        city = _parse_row(line, lineno, filename)
        if city.id in seen:
            raise TSPFileMalformed(f"{filename}:{lineno}: duplicate city id {city.id}")
        seen.add(city.id)
        cities.append(city)

    if not in_coords:
        raise TSPFileMalformed(f"{filename}: no NODE_COORD_SECTION found")
    if not cities:
        raise TSPFileMalformed(f"{filename}: no cities in NODE_COORD_SECTION")

    weight_type = metadata.get('EDGE_WEIGHT_TYPE')
    if weight_type and weight_type.upper() not in config.SUPPORTED_EDGE_WEIGHT_TYPES:
        print(f"⚠ WARNING: EDGE_WEIGHT_TYPE {weight_type} treated as EUC_2D")

    dimension = metadata.get('DIMENSION')
    if dimension and dimension.isdigit() and int(dimension) != len(cities):
        print(f"⚠ WARNING: DIMENSION is {dimension} but {len(cities)} cities were read")

    if config.VERBOSE:
        print(f"Loaded {len(cities)} cities from {filename}")

    return metadata, cities

def load_cities(filename: str) -> List[Node]:
    _, cities = read_tsp_file(filename)
    return cities

def write_tsp_file(filename: str, cities: Iterable[Node], name: str = "cities") -> str:
    cities = list(cities)
    with open(filename, 'w', encoding='utf-8') as f:
        f.write(f"NAME : {name}\n")
        f.write("TYPE : TSP\n")
        f.write(f"DIMENSION : {len(cities)}\n")
        f.write("EDGE_WEIGHT_TYPE : EUC_2D\n")
        f.write("NODE_COORD_SECTION\n")
        for c in cities:
            f.write(f"{c.id} {c.x!r} {c.y!r}\n")
        f.write("EOF\n")
    return filename

def random_cities(n: int = config.RANDOM_SETTINGS['n_cities'],
                  seed: Optional[int] = config.RANDOM_SETTINGS['seed'],
                  width: float = config.RANDOM_SETTINGS['width'],
                  height: float = config.RANDOM_SETTINGS['height']) -> List[Node]:
    """Uniform random instance with ids 1..n."""
    if n < 1:
        raise ValueError("n must be at least 1")
    rng = random.Random(seed)
    return [Node(id=i, x=rng.uniform(0, width), y=rng.uniform(0, height))
            for i in range(1, n + 1)]

if __name__ == "__main__":
    import sys

    path = sys.argv[1] if len(sys.argv) > 1 else config.SAMPLE_TSP_FILE
    meta, loaded = read_tsp_file(path)
    print("=" * 60)
    for k, v in meta.items():
        print(f"  {k}: {v}")
    print(f"  cities: {len(loaded)}")
    print("=" * 60)

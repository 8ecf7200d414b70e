import pytest

import config
from load_tsp import (
    TSPFileError,
    TSPFileMalformed,
    TSPFileUnreadable,
    load_cities,
    random_cities,
    read_tsp_file,
    write_tsp_file,
)
from nearest_neighbor import nearest_neighbor_tour
from point import Node

BERLIN_HEAD = """NAME : berlin5
TYPE : TSP
COMMENT : first rows of berlin52
DIMENSION : 5
EDGE_WEIGHT_TYPE : EUC_2D
NODE_COORD_SECTION
1 565.0 575.0
2 25.0 185.0
3 345.0 750.0
4 945.0 685.0
5 845.0 655.0
EOF
"""

def test_reads_metadata_and_cities(tsp_file):
    meta, cities = read_tsp_file(tsp_file(BERLIN_HEAD))
    assert meta["NAME"] == "berlin5"
    assert meta["DIMENSION"] == "5"
    assert [c.id for c in cities] == [1, 2, 3, 4, 5]
    assert (cities[1].x, cities[1].y) == (25.0, 185.0)

def test_stops_at_eof_marker(tsp_file):
    cities = load_cities(tsp_file(BERLIN_HEAD + "garbage that is never read\n"))
    assert len(cities) == 5

def test_missing_eof_marker_reads_to_end(tsp_file):
    cities = load_cities(tsp_file("NODE_COORD_SECTION\n1 0 0\n2 1e2 -3.5\n"))
    assert cities[1].x == 100.0
    assert cities[1].y == -3.5

def test_missing_file_is_unreadable(tmp_path):
    with pytest.raises(TSPFileUnreadable):
        load_cities(str(tmp_path / "nope.tsp"))

def test_no_coord_section_is_malformed(tsp_file):
    with pytest.raises(TSPFileMalformed):
        load_cities(tsp_file("NAME : x\nDIMENSION : 2\n"))

@pytest.mark.parametrize("row", ["1 2", "a 1 2", "1 x 2", "-1 0 0", "1 nan 0"])
def test_bad_rows_are_malformed(tsp_file, row):
    with pytest.raises(TSPFileMalformed):
        load_cities(tsp_file(f"NODE_COORD_SECTION\n{row}\nEOF\n"))

def test_duplicate_ids_are_malformed(tsp_file):
    with pytest.raises(TSPFileMalformed):
        load_cities(tsp_file("NODE_COORD_SECTION\n1 0 0\n1 5 5\nEOF\n"))

def test_empty_section_is_malformed(tsp_file):
    with pytest.raises(TSPFileMalformed):
        load_cities(tsp_file("NODE_COORD_SECTION\nEOF\n"))

def test_failure_kinds_are_distinct():
    assert issubclass(TSPFileUnreadable, TSPFileError)
    assert issubclass(TSPFileMalformed, TSPFileError)
    assert not issubclass(TSPFileUnreadable, TSPFileMalformed)

def test_dimension_mismatch_warns(tsp_file, capsys):
    cities = load_cities(tsp_file("DIMENSION : 3\nNODE_COORD_SECTION\n1 0 0\nEOF\n"))
    assert len(cities) == 1
    assert "DIMENSION is 3" in capsys.readouterr().out

def test_write_then_read(tmp_path):
    cities = [Node(1, 0.1, 0.2), Node(2, 3.0, 4.0), Node(5, -7.25, 1e-3)]
    path = write_tsp_file(str(tmp_path / "out.tsp"), cities, name="out")
    meta, loaded = read_tsp_file(path)
    assert meta["NAME"] == "out"
    assert [(c.id, c.x, c.y) for c in loaded] == [(c.id, c.x, c.y) for c in cities]

def test_random_cities_are_seeded():
    a = random_cities(20, seed=3)
    b = random_cities(20, seed=3)
    assert [c.id for c in a] == list(range(1, 21))
    assert [(c.x, c.y) for c in a] == [(c.x, c.y) for c in b]
    assert all(0 <= c.x <= 1000 and 0 <= c.y <= 1000 for c in a)

def test_random_cities_rejects_zero():
    with pytest.raises(ValueError):
        random_cities(0)

def test_sample_file_builds_a_tour():
    cities = load_cities(config.SAMPLE_TSP_FILE)
    tour = nearest_neighbor_tour(cities, config.DEFAULT_START_ID)
    assert len(tour.path) == len(cities) + 1

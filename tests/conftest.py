import matplotlib

matplotlib.use("Agg")

import pytest

from point import Node

@pytest.fixture
def line_cities():
    return [Node(1, 0, 0), Node(2, 1, 0), Node(3, 10, 0), Node(4, 2, 0)]

@pytest.fixture
def tsp_file(tmp_path):
    def _write(body: str, name: str = "cities.tsp"):
        path = tmp_path / name
        path.write_text(body, encoding="utf-8")
        return str(path)
    return _write

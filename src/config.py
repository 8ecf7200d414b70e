import os
from typing import Dict

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

DATA_DIR = os.path.join(BASE_DIR, 'data')

SAMPLE_TSP_FILE = os.path.join(DATA_DIR, 'sample10.tsp')


# TSPLIB ids start at 1
DEFAULT_START_ID = 1

SUPPORTED_EDGE_WEIGHT_TYPES = ('EUC_2D',)

RANDOM_SETTINGS = {
    'n_cities': 50,
    'seed': 42,
    'width': 1000.0,
    'height': 1000.0,
}

BENCHMARK_SETTINGS = {
    'repeats': 30,
}


VISUALIZATION_SETTINGS = {
    'dpi': 150,
    'figsize': (8, 8),
    'node_size': 25,
    'node_color': 'blue',
    'start_node_size': 80,
    'start_node_color': 'green',
    'edge_color': 'red',
    'edge_width': 1.5,
    'show_labels': True,
    'label_font_size': 7,
    'bgcolor': 'white',
}

# Output file names
DEFAULT_TOUR_FILENAME = "tour.png"



STREAMLIT_CONFIG = {
    'page_title': "Nearest Neighbor Tour",
    'page_icon': "🧭",
    'layout': "wide",
}

UI_TEXT: Dict[str, str] = {
    'app_title': "NN Tour",
    'tagline': "Traveling salesperson tours | Nearest-neighbor heuristic",
}


def get_output_path(filename: str) -> str:
    """
    Get full path for output file in data directory.

    Args:
        filename: Name of the output file

    Returns:
        Full path to the output file
    """
    os.makedirs(DATA_DIR, exist_ok=True)
    return os.path.join(DATA_DIR, filename)


# Enable debug mode (can be overridden by environment variable)
DEBUG = os.getenv('DEBUG', 'False').lower() in ('true', '1', 'yes')

# Verbose logging
VERBOSE = os.getenv('VERBOSE', 'False').lower() in ('true', '1', 'yes')


__version__ = "1.0.0"
__project__ = "Nearest Neighbor TSP Tour"

# run_tour.py
"""
Run example:
python run_tour.py --file data/sample10.tsp --start 1
Or:
python run_tour.py --random 200 --seed 7 --start "500,500" --save_png tour.png
"""

import argparse
import os
import sys
import traceback
from typing import List, Optional, Tuple

import config
from load_tsp import TSPFileError, load_cities, random_cities
from nearest_neighbor import TourError, nearest_city_by_coord, nearest_neighbor_tour
from point import Node
from tour import format_tour

def parse_xy(s: str) -> Optional[Tuple[float, float]]:
    """Parse x,y string. Returns (x, y) or None."""
    s = s.strip()
    if ',' in s:
        parts = s.split(',')
        if len(parts) != 2:
            return None
        try:
            return float(parts[0].strip()), float(parts[1].strip())
        except ValueError:
            return None
    return None

def parse_start(start_str: str, cities: List[Node]) -> int:
    """
    Resolve the --start argument to a city id.

    Args:
        start_str: Either a city id or "x,y"
        cities: Loaded cities, used for the coordinate lookup

    Returns:
        City id to start the tour from
    """
    coord = parse_xy(start_str)
    if coord is not None:
        city = nearest_city_by_coord(cities, coord[0], coord[1])
        print(f"✓ Start coordinates {coord[0]:g}, {coord[1]:g} -> city {city.id}")
        return city.id
    try:
        return int(start_str.strip())
    except ValueError:
        raise TourError(f"Invalid start '{start_str}': expected a city id or 'x,y'") from None

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Build a traveling salesperson tour with the nearest-neighbor heuristic',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # TSPLIB file, start at city 1
  python run_tour.py --file data/sample10.tsp --start 1

  # Start at the city closest to a point
  python run_tour.py --file data/sample10.tsp --start "20,40"

  # Random instance, save the plot
  python run_tour.py --random 100 --seed 3 --save_png tour.png
        """
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument('--file', type=str, help='TSPLIB .tsp file with NODE_COORD_SECTION')
    source.add_argument('--random', type=int, metavar='N', help='Generate N random cities')
    parser.add_argument('--seed', type=int, default=config.RANDOM_SETTINGS['seed'])
    parser.add_argument('--start', type=str, default=str(config.DEFAULT_START_ID),
                        help='Start city: id or "x,y" (nearest city)')
    parser.add_argument('--precision', type=int, default=None,
                        help='Decimal places for printed weights')
    parser.add_argument('--save_png', type=str, default=None)
    parser.add_argument('--no_plot', action='store_true', help='Skip the plot')
    return parser

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    print("=" * 60)
    print("Nearest Neighbor Tour")
    print("=" * 60)

    try:
        print(f"\n[LOADING CITIES]")
        if args.file:
            cities = load_cities(args.file)
            print(f"✓ Loaded {len(cities)} cities from {args.file}")
        else:
            cities = random_cities(args.random, seed=args.seed)
            print(f"✓ Generated {len(cities)} random cities (seed={args.seed})")

        print(f"\n[BUILDING TOUR]")
        start_id = parse_start(args.start, cities)
        tour = nearest_neighbor_tour(cities, start_id)
    except (TSPFileError, TourError, ValueError) as e:
        print(f"✗ {e}")
        if config.DEBUG:
            traceback.print_exc()
        return 1

    print(f"✓ Tour built from city {start_id}")
    print(f"  Cities: {len(cities)}")
    print()
    for line in format_tour(tour, args.precision):
        print(line)

    if not args.no_plot:
        from visualize_tour import plot_tour

        print(f"\n[VISUALIZATION]")
        save_png = args.save_png or config.get_output_path(config.DEFAULT_TOUR_FILENAME)
        os.makedirs(os.path.dirname(os.path.abspath(save_png)), exist_ok=True)
        plot_tour(cities, tour, filepath=save_png)
        print(f"✓ Saved visualization to: {save_png}")

    print("\n" + "=" * 60)
    print("Done!")
    print("=" * 60)
    return 0

if __name__ == "__main__":
    sys.exit(main())

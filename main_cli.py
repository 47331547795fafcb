#!/usr/bin/env python3
import argparse
import logging
import sys
import os

# Add the parent directory to the path so we can import the package
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from hkbus_stops.service import BusDataService
from hkbus_stops.loader import DatasetLoader
from hkbus_stops.names import localized_name
from hkbus_stops.config import Config


def setup_logging(debug=False):
    """Configure logging based on debug flag."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def parse_operators(value):
    """Comma separated operator codes; an empty string disables the filter."""
    if value is None:
        return None
    return tuple(op.strip().lower() for op in value.split(',') if op.strip())


def load_service(dataset_path=None, refresh=False):
    loader = DatasetLoader(path=dataset_path)
    service = BusDataService(loader)
    if service.load(use_cache=not refresh) is None:
        print("❌ Failed to load bus data")
        return None
    return service


def describe_route(route):
    orig = localized_name(route.orig)
    dest = localized_name(route.dest)
    return f"{route.route} ({'/'.join(route.companies).upper()}) {orig} ➔ {dest}"


def show_stops_near(service, lat, lng, radius, max_results, min_results, operators):
    stops = service.find_stops_near(lat, lng, radius, max_results, min_results, operators)
    if not stops:
        print(f"❌ No stops found near ({lat}, {lng})")
        return
    print(f"✅ Found {len(stops)} stops near ({lat}, {lng}):")
    for i, stop in enumerate(stops):
        print(f"  {i+1}. {localized_name(stop.name)} (ID: {stop.stop_id}) 🌐 {stop.lat}, {stop.lng}")


def show_nearest_stop(service, lat, lng, radius, operators):
    stop = service.find_nearest_stop(lat, lng, radius, operators)
    if not stop:
        print(f"❌ No stop within {radius}m of ({lat}, {lng})")
        return
    print(f"✅ Nearest stop: {localized_name(stop.name)} (ID: {stop.stop_id})")
    routes = service.get_routes_by_stop(stop.stop_id, operators)
    for route in routes:
        print(f"  🚌 {describe_route(route)}")


def show_routes_by_stop(service, stop_id, operators):
    routes = service.get_routes_by_stop(stop_id, operators)
    if not routes:
        print(f"❌ No routes found for stop {stop_id}")
        return
    print(f"✅ {len(routes)} routes serve stop {stop_id}:")
    for route in routes:
        print(f"  🚌 {describe_route(route)}  [{route.route_id}]")


def show_stops_by_route(service, route_id, operators):
    stops_by_company = service.get_stops_by_route(route_id, operators)
    if not stops_by_company:
        print(f"❌ No stops found for route {route_id}")
        return
    for company, stops in stops_by_company.items():
        print(f"🚌 {company.upper()}: {len(stops)} stops")
        for i, stop in enumerate(stops):
            name = localized_name(stop.name) or "(unknown stop)"
            print(f"  {i+1}. {name} (ID: {stop.stop_id})")


def show_search(service, query):
    route_ids = service.search_routes(query)
    if not route_ids:
        print(f"❌ No routes match '{query}'")
        return
    print(f"✅ {len(route_ids)} routes match '{query}':")
    for route_id in route_ids:
        print(f"  🚌 {describe_route(service.get_route(route_id))}  [{route_id}]")


def main():
    parser = argparse.ArgumentParser(
        description="HK Bus Stops CLI - Query stops and routes from the hkbus dataset",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Stops around Tsim Sha Tsui Star Ferry
  ./main_cli.py near 22.2936 114.1689 --radius 150

  # Nearest stop and the routes serving it
  ./main_cli.py nearest 22.2936 114.1689 --radius 40

  # Route lookups
  ./main_cli.py routes 18492910339410B1
  ./main_cli.py stops "1+1+CHUK YUEN ESTATE+STAR FERRY"
  ./main_cli.py search "star ferry"
        """
    )

    parser.add_argument('--debug', action='store_true', help='Enable debug logging')
    parser.add_argument('--refresh', action='store_true', help='Ignore the cached dataset and fetch it again')
    parser.add_argument('--dataset', type=str, help='Read the dataset from a local JSON file')
    parser.add_argument('--operators', type=str,
                        help='Comma separated operator codes (e.g. "kmb,ctb"); empty string for all')

    subparsers = parser.add_subparsers(dest='command', help='Sub-command help')

    near_parser = subparsers.add_parser('near', help='Stops near a position')
    near_parser.add_argument('lat', type=float)
    near_parser.add_argument('lng', type=float)
    near_parser.add_argument('--radius', type=float, default=100, help='Search radius in metres')
    near_parser.add_argument('--max', type=int, default=10, dest='max_results')
    near_parser.add_argument('--min', type=int, default=2, dest='min_results')

    nearest_parser = subparsers.add_parser('nearest', help='Nearest stop to a position')
    nearest_parser.add_argument('lat', type=float)
    nearest_parser.add_argument('lng', type=float)
    nearest_parser.add_argument('--radius', type=float, default=float('inf'), help='Maximum distance in metres')

    routes_parser = subparsers.add_parser('routes', help='Routes serving a stop')
    routes_parser.add_argument('stop_id', type=str)

    stops_parser = subparsers.add_parser('stops', help='Stops of a route')
    stops_parser.add_argument('route_id', type=str)

    search_parser = subparsers.add_parser('search', help='Find routes by number or stop name')
    search_parser.add_argument('query', type=str)

    args = parser.parse_args()
    setup_logging(args.debug or Config.DEBUG)

    if not args.command:
        parser.print_help()
        return

    service = load_service(args.dataset, args.refresh)
    if service is None:
        sys.exit(1)

    operators = parse_operators(args.operators)
    if args.command == 'near':
        show_stops_near(service, args.lat, args.lng, args.radius, args.max_results, args.min_results, operators)
    elif args.command == 'nearest':
        show_nearest_stop(service, args.lat, args.lng, args.radius, operators)
    elif args.command == 'routes':
        show_routes_by_stop(service, args.stop_id, operators)
    elif args.command == 'stops':
        show_stops_by_route(service, args.route_id, operators)
    elif args.command == 'search':
        show_search(service, args.query)


if __name__ == "__main__":
    main()

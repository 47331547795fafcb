import logging
from types import MappingProxyType


class DatasetIndex:
    """
    A dataset together with the lookup structures derived from it.
    Built once by build_index() and never mutated afterwards.
    """

    def __init__(self, dataset, stops, stop_to_routes, stop_to_operators):
        self.dataset = dataset
        self.stops = stops
        self.stop_to_routes = stop_to_routes
        self.stop_to_operators = stop_to_operators

    def operators_for(self, stop_id):
        return self.stop_to_operators.get(stop_id)

    def routes_for(self, stop_id):
        return self.stop_to_routes.get(stop_id, ())


def build_index(dataset):
    """
    Derive the flattened stop array and the stop->routes / stop->operators
    reverse indices from `dataset`.

    Each route is visited once. Within a route, the first company listing a
    stop adds the route id to stop->routes; every company is recorded in
    stop->operators.
    """
    stops = tuple(dataset.stops.values())

    # Pass 1: grow plain containers
    routes_by_stop = {}
    operators_by_stop = {}
    for route_id, route in dataset.routes.items():
        if not route.stops:
            logging.debug(f"Route {route_id} has no stop data, skipping")
            continue
        seen = set()
        for company, stop_ids in route.stops.items():
            for stop_id in stop_ids:
                operators_by_stop.setdefault(stop_id, set()).add(company)
                if stop_id in seen:
                    continue
                seen.add(stop_id)
                routes_by_stop.setdefault(stop_id, []).append(route_id)

    # Pass 2: freeze
    stop_to_routes = MappingProxyType({stop_id: tuple(ids) for stop_id, ids in routes_by_stop.items()})
    stop_to_operators = MappingProxyType({stop_id: frozenset(ops) for stop_id, ops in operators_by_stop.items()})
    logging.info("Indexed %d stops served by %d routes", len(stop_to_routes), len(dataset.routes))
    return DatasetIndex(dataset, stops, stop_to_routes, stop_to_operators)

import logging

from .config import Config
from .names import normalize_text
from .stop import Stop


def get_routes_by_stop(index, stop_id, operators=None):
    """
    Return the Routes passing through `stop_id`.

    With `operators` set, a route is kept only if one of those companies
    lists the stop in its own stop sequence.
    """
    if index is None:
        return []
    if operators is None:
        operators = Config.DEFAULT_OPERATORS

    routes = []
    for route_id in index.routes_for(stop_id):
        route = index.dataset.routes.get(route_id)
        if route is None:
            continue
        if operators and not route.serves(stop_id, operators):
            continue
        routes.append(route)
    return routes


def get_stops_by_route(index, route_id, operators=None):
    """
    Return the stops of `route_id` keyed by company code, in visiting order.
    Stop ids missing from the stop table are returned as id-only Stops.
    """
    if index is None:
        return {}
    route = index.dataset.routes.get(route_id)
    if route is None or not route.stops:
        return {}
    if operators is None:
        operators = Config.DEFAULT_OPERATORS

    stop_table = index.dataset.stops
    result = {}
    for company, stop_ids in route.stops.items():
        if operators and company not in operators:
            continue
        stops = []
        for stop_id in stop_ids:
            stop = stop_table.get(stop_id)
            if stop is None:
                logging.debug(f"Route {route_id} references unknown stop {stop_id}")
                stop = Stop(stop_id)
            stops.append(stop)
        result[company] = stops
    return result


def search_routes(index, query):
    """
    Free-text route lookup, ignoring case and diacritics.

    Routes whose number equals the query come first, in route table order,
    followed by the routes serving any stop whose name (in any language)
    contains the query, in stop order. Each route id appears once.
    """
    needle = normalize_text(query)
    if index is None or not needle:
        return []

    matches = []
    seen = set()

    def add(route_id):
        if route_id not in seen:
            seen.add(route_id)
            matches.append(route_id)

    for route_id, route in index.dataset.routes.items():
        if normalize_text(route.route) == needle:
            add(route_id)

    for stop in index.stops:
        if any(needle in normalize_text(name) for name in stop.name.values()):
            for route_id in index.routes_for(stop.stop_id):
                add(route_id)
    return matches

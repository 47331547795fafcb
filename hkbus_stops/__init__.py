"""
HK Bus Stops

This module loads the static hkbus dataset (stops, routes and per-company
stop sequences) and answers proximity and route queries against it.

Example:
    from hkbus_stops import BusDataService

    service = BusDataService()
    if service.load():
        stops = service.find_stops_near(22.2968, 114.1694, radius=100)
        nearest = service.find_nearest_stop(22.2968, 114.1694, radius=40)
        routes = service.get_routes_by_stop(nearest.stop_id)
"""

from .service import BusDataService
from .dataset import Dataset
from .loader import DatasetLoader, DatasetLoadError
from .names import localized_name
from .route import Route
from .stop import Stop

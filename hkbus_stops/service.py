import logging
import math

from .index import build_index
from .loader import DatasetLoader, DatasetLoadError
from . import relational, spatial


class BusDataService:
    """
    Holds the currently loaded dataset and answers stop/route queries against it.

    The dataset and its indices live in one DatasetIndex snapshot. load() builds
    a complete new snapshot before replacing the old one, and every query reads
    the snapshot once, so a reload is never observed half-done.
    """

    def __init__(self, loader=None):
        self.loader = loader or DatasetLoader()
        self._index = None

    @property
    def index(self):
        return self._index

    @property
    def data(self):
        """The loaded Dataset, or None before the first successful load."""
        index = self._index
        return index.dataset if index is not None else None

    def load(self, use_cache=True):
        """
        Load the dataset and rebuild the indices.
        Returns the Dataset, or None if loading failed (previous data is kept).
        """
        try:
            dataset = self.loader.load(use_cache=use_cache)
        except DatasetLoadError as e:
            logging.error("Error loading HKBus data: %s", e)
            return None
        self._index = build_index(dataset)
        return dataset

    def find_stops_near(self, lat, lng, radius=100, max_results=10, min_results=2, operators=None):
        return spatial.find_stops_near(self._index, lat, lng, radius, max_results, min_results, operators)

    def find_nearest_stop(self, lat, lng, radius=math.inf, operators=None):
        return spatial.find_nearest_stop(self._index, lat, lng, radius, operators)

    def get_routes_by_stop(self, stop_id, operators=None):
        return relational.get_routes_by_stop(self._index, stop_id, operators)

    def get_stops_by_route(self, route_id, operators=None):
        return relational.get_stops_by_route(self._index, route_id, operators)

    def search_routes(self, query):
        return relational.search_routes(self._index, query)

    def get_stop(self, stop_id):
        data = self.data
        return data.stops.get(stop_id) if data is not None else None

    def get_route(self, route_id):
        data = self.data
        return data.routes.get(route_id) if data is not None else None

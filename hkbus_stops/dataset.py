import json
import logging

from .route import Route
from .stop import Stop


class Dataset:
    """
    One loaded copy of the hkbus dataset: `stopList` and `routeList` parsed into
    Stop and Route objects, in payload order. Other top-level keys are kept as-is.
    """

    def __init__(self, stops=None, routes=None, extra=None):
        self.stops = dict(stops or {})
        self.routes = dict(routes or {})
        self.extra = dict(extra or {})

    @classmethod
    def from_payload(cls, payload):
        """
        Parse a decoded JSON payload. Raises ValueError if it is not a dataset.
        """
        if not isinstance(payload, dict):
            raise ValueError(f"Dataset payload must be an object, got {type(payload).__name__}")
        stop_list = payload.get('stopList')
        route_list = payload.get('routeList')
        if not isinstance(stop_list, dict) or not isinstance(route_list, dict):
            raise ValueError("Dataset payload is missing 'stopList' or 'routeList'")

        stops = {str(stop_id): Stop.from_record(str(stop_id), record) for stop_id, record in stop_list.items()}
        routes = {str(route_id): Route.from_record(str(route_id), record) for route_id, record in route_list.items()}
        extra = {key: value for key, value in payload.items() if key not in ('stopList', 'routeList')}
        logging.info("Parsed dataset with %d stops and %d routes", len(stops), len(routes))
        return cls(stops, routes, extra)

    @classmethod
    def from_json(cls, text):
        try:
            payload = json.loads(text)
        except (TypeError, ValueError) as e:
            raise ValueError(f"Dataset is not valid JSON: {e}") from e
        return cls.from_payload(payload)

    def to_payload(self):
        payload = dict(self.extra)
        payload['stopList'] = {stop_id: stop.to_dict() for stop_id, stop in self.stops.items()}
        payload['routeList'] = {route_id: route.to_dict() for route_id, route in self.routes.items()}
        return payload

    def __repr__(self):
        return f"Dataset({len(self.stops)} stops, {len(self.routes)} routes)"

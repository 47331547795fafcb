import logging

# Keys of a `routeList` entry that Route models explicitly
_KNOWN_KEYS = ("route", "co", "orig", "dest", "serviceType", "bound", "stops")


class Route:
    def __init__(self, route_id, route="", companies=(), orig=None, dest=None,
                 service_type=None, bound=None, stops=None, extra=None):
        self.route_id = route_id
        self.route = route
        self.companies = tuple(companies)
        self.orig = dict(orig) if orig else {}
        self.dest = dict(dest) if dest else {}
        self.service_type = service_type
        self.bound = dict(bound) if bound else {}
        # company code -> ordered stop ids
        self.stops = {company: tuple(stop_ids) for company, stop_ids in (stops or {}).items()}
        self.extra = dict(extra) if extra else {}

    @classmethod
    def from_record(cls, route_id, record):
        """Build a Route from a `routeList` entry, keeping unknown fields in `extra`."""
        if not isinstance(record, dict):
            logging.debug(f"Route {route_id} is not a mapping, skipping its fields")
            return cls(route_id)
        stops = {}
        raw_stops = record.get('stops')
        if isinstance(raw_stops, dict):
            for company, stop_ids in raw_stops.items():
                if isinstance(stop_ids, list):
                    stops[company] = [str(stop_id) for stop_id in stop_ids]
                else:
                    logging.debug(f"Route {route_id} has malformed stop list for {company}")
        companies = record.get('co')
        if not isinstance(companies, list):
            if companies is not None:
                logging.debug(f"Route {route_id} has malformed company list")
            companies = ()
        return cls(
            route_id,
            route=str(record.get('route', '')),
            companies=[str(company) for company in companies],
            orig=record.get('orig') if isinstance(record.get('orig'), dict) else None,
            dest=record.get('dest') if isinstance(record.get('dest'), dict) else None,
            service_type=record.get('serviceType'),
            bound=record.get('bound') if isinstance(record.get('bound'), dict) else None,
            stops=stops,
            extra={key: value for key, value in record.items() if key not in _KNOWN_KEYS},
        )

    def serves(self, stop_id, operators=None):
        """True when any of `operators` (or any company, if none given) lists the stop."""
        for company, stop_ids in self.stops.items():
            if operators and company not in operators:
                continue
            if stop_id in stop_ids:
                return True
        return False

    def to_dict(self):
        record = dict(self.extra)
        record.update({
            "route": self.route,
            "co": list(self.companies),
            "orig": dict(self.orig),
            "dest": dict(self.dest),
            "bound": dict(self.bound),
            "stops": {company: list(stop_ids) for company, stop_ids in self.stops.items()},
        })
        if self.service_type is not None:
            record["serviceType"] = self.service_type
        return record

    def __repr__(self):
        return f"Route({self.route_id}, {self.route}, {'/'.join(self.companies)})"

import logging
import math


class Stop:
    """
    A single bus stop. Position is None when the record has no usable location.
    """

    def __init__(self, stop_id, name=None, lat=None, lng=None):
        self.stop_id = stop_id
        self.name = dict(name) if name else {}
        self.lat = lat
        self.lng = lng

    @classmethod
    def from_record(cls, stop_id, record):
        """Build a Stop from a `stopList` entry: {"location": {"lat", "lng"}, "name": {...}}."""
        if not isinstance(record, dict):
            logging.debug(f"Stop {stop_id} is not a mapping, keeping id only")
            return cls(stop_id)
        lat = lng = None
        location = record.get('location')
        if isinstance(location, dict):
            try:
                lat = float(location['lat'])
                lng = float(location['lng'])
            except (KeyError, TypeError, ValueError):
                lat = lng = None
            if lat is not None and not (math.isfinite(lat) and math.isfinite(lng)):
                lat = lng = None
        if lat is None:
            logging.debug(f"Stop {stop_id} has no usable location")
        name = record.get('name')
        return cls(stop_id, name if isinstance(name, dict) else None, lat, lng)

    @property
    def has_location(self):
        return self.lat is not None and self.lng is not None

    def to_dict(self):
        record = {"name": dict(self.name)}
        if self.has_location:
            record["location"] = {"lat": self.lat, "lng": self.lng}
        return record

    def __eq__(self, other):
        if not isinstance(other, Stop):
            return NotImplemented
        return (self.stop_id, self.name, self.lat, self.lng) == (other.stop_id, other.name, other.lat, other.lng)

    def __hash__(self):
        return hash(self.stop_id)

    def __repr__(self):
        return f"Stop({self.stop_id}, {self.name}, {self.lat}, {self.lng})"

import copy

import pytest

from hkbus_stops.dataset import Dataset
from hkbus_stops.index import build_index

CENTER = (22.3, 114.1)

# Distances from CENTER: A ~11m, B ~51m, C ~111m, D ~204m, E ~10m. F has no location.
SAMPLE_PAYLOAD = {
    "holidays": ["20250101"],
    "stopList": {
        "A": {"location": {"lat": 22.3001, "lng": 114.1}, "name": {"en": "Star Ferry", "zh": "天星碼頭"}},
        "B": {"location": {"lat": 22.3, "lng": 114.1005}, "name": {"en": "Café Road"}},
        "C": {"location": {"lat": 22.299, "lng": 114.1}, "name": {"en": "Nathan Road", "zh": "彌敦道"}},
        "D": {"location": {"lat": 22.3, "lng": 114.102}, "name": {"en": "Ferry Point"}},
        "E": {"location": {"lat": 22.3, "lng": 114.0999}, "name": {"en": "Canton Road", "zh": "廣東道"}},
        "F": {"name": {"en": "Nowhere"}},
    },
    "routeList": {
        "1+1+STAR FERRY+CHUK YUEN": {
            "route": "1", "co": ["kmb"], "serviceType": "1",
            "orig": {"en": "STAR FERRY"}, "dest": {"en": "CHUK YUEN"},
            "bound": {"kmb": "O"}, "fares": ["6.4"],
            "stops": {"kmb": ["A", "C", "D", "E", "F"]},
        },
        "2+1+CAFE+CANTON": {
            "route": "2", "co": ["ctb"], "serviceType": "1",
            "orig": {"en": "CAFE"}, "dest": {"en": "CANTON"},
            "stops": {"ctb": ["B", "E", "Z"]},
        },
        "3+1+FERRY+POINT": {
            "route": "3", "co": ["nlb"],
            "orig": {"en": "FERRY"}, "dest": {"en": "POINT"},
            "stops": {"nlb": ["D"]},
        },
        "101+1+KENNEDY TOWN+KWUN TONG": {
            "route": "101", "co": ["kmb", "ctb"],
            "orig": {"en": "KENNEDY TOWN"}, "dest": {"en": "KWUN TONG"},
            "stops": {"kmb": ["A"], "ctb": ["A", "E"]},
        },
        "N9+1+NIGHT+ONLY": {
            "route": "N9", "co": ["kmb"],
            "orig": {"en": "NIGHT"}, "dest": {"en": "ONLY"},
        },
    },
}

R1 = "1+1+STAR FERRY+CHUK YUEN"
R2 = "2+1+CAFE+CANTON"
R3 = "3+1+FERRY+POINT"
R4 = "101+1+KENNEDY TOWN+KWUN TONG"
R5 = "N9+1+NIGHT+ONLY"


@pytest.fixture
def sample_payload():
    return copy.deepcopy(SAMPLE_PAYLOAD)


@pytest.fixture
def dataset(sample_payload):
    return Dataset.from_payload(sample_payload)


@pytest.fixture
def index(dataset):
    return build_index(dataset)


def ids(stops):
    return [stop.stop_id for stop in stops]

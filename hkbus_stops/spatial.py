"""
Proximity queries over the flattened stop array.

Distances use a planar approximation calibrated for Hong Kong (~22.3N):
degrees are scaled to metres with fixed per-degree constants. It is only
meaningful over a few kilometres.
"""

import logging
import math

from .config import Config

METERS_PER_DEG_LAT = 111000.0
METERS_PER_DEG_LNG = 102000.0  # cos(22.3) adjustment


def planar_distance_sq(lat1, lng1, lat2, lng2):
    """Squared planar distance in square metres between two positions."""
    d_lat = (lat2 - lat1) * METERS_PER_DEG_LAT
    d_lng = (lng2 - lng1) * METERS_PER_DEG_LNG
    return d_lat * d_lat + d_lng * d_lng


def _default_operators(operators):
    return Config.DEFAULT_OPERATORS if operators is None else operators


def _operator_match(index, stop_id, operators):
    """A stop passes the filter only if its operator set intersects `operators`."""
    if not operators:
        return True
    stop_ops = index.operators_for(stop_id)
    if not stop_ops:
        return False
    return any(op in stop_ops for op in operators)


def _count_within(candidates, limit_sq):
    count = 0
    for dist_sq, _ in candidates:
        if dist_sq > limit_sq:
            break
        count += 1
    return count


def find_stops_near(index, lat, lng, radius=100, max_results=10, min_results=2, operators=None):
    """
    Return stops within `radius` metres of (lat, lng), closest first.

    If fewer than `min_results` stops are found the search widens to 2x the
    radius, then falls back to everything within 4x the radius. The fallback
    may still return fewer than `min_results` stops. At most `max_results`
    stops are returned.
    """
    if index is None or not index.stops:
        return []
    operators = _default_operators(operators)

    max_radius = radius * 4
    lat_diff = max_radius / METERS_PER_DEG_LAT
    lng_diff = max_radius / METERS_PER_DEG_LNG
    max_radius_sq = max_radius * max_radius

    candidates = []
    for stop in index.stops:
        if not stop.has_location:
            continue
        if not _operator_match(index, stop.stop_id, operators):
            continue

        # Box check before the exact distance
        if abs(stop.lat - lat) > lat_diff:
            continue
        if abs(stop.lng - lng) > lng_diff:
            continue

        dist_sq = planar_distance_sq(lat, lng, stop.lat, stop.lng)
        if dist_sq <= max_radius_sq:
            candidates.append((dist_sq, stop))

    # sort() is stable, ties keep stop array order
    candidates.sort(key=lambda item: item[0])

    for factor in (1, 2):
        limit = radius * factor
        end_index = _count_within(candidates, limit * limit)
        if end_index >= min_results:
            logging.debug(f"Found {end_index} stops within {limit}m of ({lat}, {lng})")
            return [stop for _, stop in candidates[:min(end_index, max_results)]]

    logging.debug(f"Falling back to {max_radius}m around ({lat}, {lng}): {len(candidates)} stops")
    return [stop for _, stop in candidates[:max_results]]


def find_nearest_stop(index, lat, lng, radius=math.inf, operators=None):
    """
    Return the single closest stop within `radius` metres, or None.
    """
    if index is None or not index.stops:
        return None
    operators = _default_operators(operators)

    nearest = None
    min_dist_sq = radius * radius
    lat_diff = radius / METERS_PER_DEG_LAT
    lng_diff = radius / METERS_PER_DEG_LNG

    for stop in index.stops:
        if not stop.has_location:
            continue
        if abs(stop.lat - lat) > lat_diff:
            continue
        if abs(stop.lng - lng) > lng_diff:
            continue
        if not _operator_match(index, stop.stop_id, operators):
            continue

        dist_sq = planar_distance_sq(lat, lng, stop.lat, stop.lng)
        if dist_sq < min_dist_sq:
            min_dist_sq = dist_sq
            nearest = stop
    return nearest

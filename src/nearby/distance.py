from math import asin, cos, radians, sin, sqrt

from src.location.coordinates import Coordinates
from src.nearcare_client.types import ProfessionalRecord

EARTH_RADIUS_KM = 6371.0


def haversine_km(origin: Coordinates, target: Coordinates) -> float:
    """Great-circle distance between two points in kilometres."""
    lat1, lon1, lat2, lon2 = map(radians, [origin.latitude, origin.longitude, target.latitude, target.longitude])

    dlat = lat2 - lat1
    dlon = lon2 - lon1
    a = sin(dlat / 2) ** 2 + cos(lat1) * cos(lat2) * sin(dlon / 2) ** 2
    return 2 * asin(sqrt(a)) * EARTH_RADIUS_KM


def record_coordinates(record: ProfessionalRecord) -> Coordinates | None:
    # GeoJSON points are [longitude, latitude]
    location = record.get("location")
    if not location:
        return None
    try:
        longitude, latitude = location["coordinates"][:2]
        return Coordinates(float(latitude), float(longitude))
    except (KeyError, TypeError, ValueError):
        return None


def distance_to(origin: Coordinates, record: ProfessionalRecord) -> float | None:
    target = record_coordinates(record)
    if target is None:
        return None
    return haversine_km(origin, target)

from typing import Literal, TypedDict


class GeoPoint(TypedDict):
    type: Literal["Point"]
    coordinates: list[float]


class ProfessionalRecord(TypedDict, total=False):
    _id: str
    name: str
    specialization: str
    phone: str
    rating: float
    vehicleNumber: str
    location: GeoPoint


class NearbyResponse(TypedDict):
    data: list[ProfessionalRecord] | None

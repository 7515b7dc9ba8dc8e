import asyncio
import logging
from typing import NamedTuple, TypedDict

from src.location.coordinates import Coordinates
from src.nearcare_client.client import NearcareClient
from src.nearcare_client.exceptions import AggregateFetchFailed
from src.nearcare_client.types import NearbyResponse, ProfessionalRecord
from src.nearby.categories import Category

logger = logging.getLogger(__name__)

DEFAULT_RADIUS_KM = 15


class TaggedProfessional(NamedTuple):
    record: ProfessionalRecord
    category: Category


class NearbyResults(TypedDict):
    doctors: list[TaggedProfessional]
    nurses: list[TaggedProfessional]
    ambulances: list[TaggedProfessional]


def tag_records(response: NearbyResponse, category: Category) -> list[TaggedProfessional]:
    return [TaggedProfessional(record, category) for record in response.get("data") or []]


async def fetch_nearby(
    client: NearcareClient, coordinates: Coordinates, radius_km: float = DEFAULT_RADIUS_KM
) -> NearbyResults:
    latitude, longitude = coordinates.latitude, coordinates.longitude
    logger.info("Fetching professionals within %s km of %s, %s", radius_km, latitude, longitude)

    try:
        doctor_response, nurse_response, ambulance_response = await asyncio.gather(
            client.get_nearby_professionals("doctor", latitude, longitude, radius_km),
            client.get_nearby_professionals("nurse", latitude, longitude, radius_km),
            client.get_nearby_ambulances(latitude, longitude, radius_km),
        )
    except Exception as err:
        logger.error("Error fetching professionals: %s", err)
        raise AggregateFetchFailed("Failed to load nearby professionals") from err

    results = NearbyResults(
        doctors=tag_records(doctor_response, Category.DOCTOR),
        nurses=tag_records(nurse_response, Category.NURSE),
        ambulances=tag_records(ambulance_response, Category.AMBULANCE),
    )
    logger.info(
        "Found %s doctors, %s nurses, %s ambulances",
        len(results["doctors"]),
        len(results["nurses"]),
        len(results["ambulances"]),
    )
    return results

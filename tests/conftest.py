import asyncio
from typing import Any

import pytest

from src.location.coordinates import Coordinates
from src.nearcare_client.client import NearcareClient
from src.nearcare_client.exceptions import DirectoryError
from src.nearcare_client.types import NearbyResponse, ProfessionalRecord

DOCTORS: list[ProfessionalRecord] = [
    {"_id": "d1", "name": "Dr. Anna Nowak", "specialization": "Cardiology"},
    {"_id": "d2", "name": "Dr. Piotr Kowalski", "specialization": "Dermatology"},
]
NURSES: list[ProfessionalRecord] = [{"_id": "n1", "name": "Maria Wisniewska"}]


class FakeDirectoryClient(NearcareClient):
    def __init__(self, responses: dict[str, Any]) -> None:
        super().__init__()
        self.responses = responses
        self.calls: list[tuple[str, float, float, float]] = []
        self.gates: dict[str, asyncio.Event] = {}
        self.failures: dict[str, Exception] = {}

    async def _respond(self, lookup: str, latitude: float, longitude: float, radius_km: float) -> NearbyResponse:
        self.calls.append((lookup, latitude, longitude, radius_km))
        gate = self.gates.get(lookup)
        if gate is not None:
            await gate.wait()
        if lookup in self.failures:
            raise self.failures[lookup]
        return {"data": self.responses.get(lookup)}

    async def get_nearby_professionals(
        self, professional_type: str, latitude: float, longitude: float, radius_km: float
    ) -> NearbyResponse:
        return await self._respond(professional_type, latitude, longitude, radius_km)

    async def get_nearby_ambulances(self, latitude: float, longitude: float, radius_km: float) -> NearbyResponse:
        return await self._respond("ambulance", latitude, longitude, radius_km)


@pytest.fixture
def coordinates() -> Coordinates:
    return Coordinates(12.34, 56.78)


@pytest.fixture
def directory() -> FakeDirectoryClient:
    return FakeDirectoryClient({"doctor": DOCTORS, "nurse": NURSES, "ambulance": []})


@pytest.fixture
def failing_directory() -> FakeDirectoryClient:
    client = FakeDirectoryClient({"doctor": DOCTORS, "nurse": NURSES, "ambulance": []})
    client.failures["nurse"] = DirectoryError("Directory lookup failed with status 500", status_code=500)
    return client

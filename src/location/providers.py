import logging
from typing import Protocol

import httpx
from httpx import AsyncBaseTransport, AsyncClient

from src.location.coordinates import Coordinates
from src.nearcare_client.api_urls import IP_LOCATION_URL
from src.nearcare_client.exceptions import LocationUnavailable

logger = logging.getLogger(__name__)


class PositionProvider(Protocol):
    async def get_current_position(self, high_accuracy: bool = True) -> Coordinates: ...


class StaticPositionProvider:
    def __init__(self, latitude: float, longitude: float) -> None:
        self.coordinates = Coordinates(latitude, longitude)

    async def get_current_position(self, high_accuracy: bool = True) -> Coordinates:
        return self.coordinates


class IpPositionProvider:
    """Single-shot fix from an IP geolocation endpoint.

    IP based positions are city-level at best, so `high_accuracy` cannot be honoured
    and is only logged.
    """

    def __init__(
        self, url: str = IP_LOCATION_URL, timeout: float = 5.0, transport: AsyncBaseTransport | None = None
    ) -> None:
        self.url = url
        self.timeout = timeout
        self.transport = transport

    async def get_current_position(self, high_accuracy: bool = True) -> Coordinates:
        if high_accuracy:
            logger.info("High accuracy requested, IP geolocation is approximate")

        async with AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                response = await client.get(self.url)
                response.raise_for_status()
                payload = response.json()
            except (httpx.HTTPError, ValueError) as err:
                raise LocationUnavailable(f"Positioning service failed: {err}") from err

        if not isinstance(payload, dict) or payload.get("status", "success") != "success":
            raise LocationUnavailable("Positioning service could not produce a fix")

        try:
            return Coordinates(float(payload["lat"]), float(payload["lon"]))
        except (KeyError, TypeError, ValueError) as err:
            raise LocationUnavailable("Positioning service returned no coordinates") from err

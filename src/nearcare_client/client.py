import logging
from typing import Any, Literal, cast

import httpx
from httpx import AsyncClient, AsyncBaseTransport, Headers, QueryParams

from src.nearcare_client.api_urls import (
    BOOKING_PATH,
    DEFAULT_API_URL,
    NEARBY_AMBULANCES_PATH,
    NEARBY_PROFESSIONALS_PATH,
)
from src.nearcare_client.exceptions import DirectoryError
from src.nearcare_client.types import NearbyResponse

logger = logging.getLogger(__name__)

ProfessionalType = Literal["doctor", "nurse"]

DEFAULT_TIMEOUT = 10.0


class NearcareClient:
    def __init__(
        self,
        base_url: str = DEFAULT_API_URL,
        token: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        transport: AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.timeout = timeout
        self.transport = transport

    @property
    def headers(self) -> Headers:
        headers = Headers({"Accept": "application/json"})
        if self.token:
            headers["Authorization"] = "Bearer " + self.token
        return headers

    async def get_nearby_professionals(
        self, professional_type: ProfessionalType, latitude: float, longitude: float, radius_km: float
    ) -> NearbyResponse:
        params = QueryParams(
            {
                "type": professional_type,
                "latitude": latitude,
                "longitude": longitude,
                "radius": radius_km,
            }
        )
        return await self._get_nearby(NEARBY_PROFESSIONALS_PATH, params)

    async def get_nearby_ambulances(self, latitude: float, longitude: float, radius_km: float) -> NearbyResponse:
        params = QueryParams({"latitude": latitude, "longitude": longitude, "radius": radius_km})
        return await self._get_nearby(NEARBY_AMBULANCES_PATH, params)

    def booking_path(self, professional_id: str) -> str:
        return BOOKING_PATH + "?" + str(QueryParams({"professionalId": professional_id}))

    async def _get_nearby(self, path: str, params: QueryParams) -> NearbyResponse:
        logger.info("Querying %s with %s", path, params)

        async with AsyncClient(
            base_url=self.base_url, headers=self.headers, timeout=self.timeout, transport=self.transport
        ) as client:
            try:
                response = await client.get(path, params=params)
                response.raise_for_status()
            except httpx.HTTPStatusError as err:
                raise DirectoryError(
                    f"Directory lookup {path} failed with status {err.response.status_code}",
                    status_code=err.response.status_code,
                ) from err
            except httpx.HTTPError as err:
                raise DirectoryError(f"Directory lookup {path} failed: {err}") from err

        try:
            response_json = response.json()
        except ValueError as err:
            raise DirectoryError(f"Directory lookup {path} returned invalid JSON") from err
        if not isinstance(response_json, dict):
            raise DirectoryError(f"Directory lookup {path} returned unexpected payload")

        response_json = cast(dict[str, Any], response_json)
        data = response_json.get("data")
        if data is not None and not (isinstance(data, list) and all(isinstance(record, dict) for record in data)):
            raise DirectoryError(f"Directory lookup {path} returned malformed records")

        return cast(NearbyResponse, {"data": data})

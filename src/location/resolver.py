import logging
from typing import Awaitable, Callable

from src.location.coordinates import Coordinates
from src.location.providers import PositionProvider
from src.nearcare_client.exceptions import LocationUnavailable, PermissionDenied

logger = logging.getLogger(__name__)

PermissionRequest = Callable[[], Awaitable[bool]]


class LocationResolver:
    def __init__(self, provider: PositionProvider, request_permission: PermissionRequest) -> None:
        self.provider = provider
        self.request_permission = request_permission

    async def resolve(self) -> Coordinates:
        granted = await self.request_permission()
        if not granted:
            logger.warning("Location permission was declined")
            raise PermissionDenied("Location permission is required")

        try:
            coordinates = await self.provider.get_current_position(high_accuracy=True)
        except LocationUnavailable:
            logger.warning("Positioning service could not produce a fix")
            raise
        except (OSError, ValueError) as err:
            logger.warning("Positioning service failed: %s", err)
            raise LocationUnavailable(str(err)) from err

        logger.info("Resolved location %s, %s", coordinates.latitude, coordinates.longitude)
        return coordinates

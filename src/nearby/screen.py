import logging
from dataclasses import dataclass
from typing import Awaitable, Callable

from src.location.coordinates import Coordinates
from src.location.resolver import LocationResolver
from src.nearcare_client.client import NearcareClient
from src.nearcare_client.exceptions import AggregateFetchFailed, LocationError
from src.nearby.aggregator import DEFAULT_RADIUS_KM, TaggedProfessional, fetch_nearby
from src.nearby.categories import FilterSelection
from src.nearby.state import (
    FetchFailed,
    FetchStarted,
    FetchSucceeded,
    FilterChanged,
    LoadingFinished,
    LocationResolved,
    ScreenState,
    ScreenStore,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BookingRequested:
    professional_id: str


Notifier = Callable[[str, str], Awaitable[None]]
BookingHandler = Callable[[BookingRequested], None]


class NearbyScreen:
    def __init__(
        self,
        resolver: LocationResolver,
        client: NearcareClient,
        notify: Notifier,
        on_booking: BookingHandler,
        store: ScreenStore | None = None,
    ) -> None:
        self.resolver = resolver
        self.client = client
        self.notify = notify
        self.on_booking = on_booking
        self.store = store if store is not None else ScreenStore()

    @property
    def state(self) -> ScreenState:
        return self.store.state

    async def initialize(self) -> None:
        try:
            coordinates = await self.resolver.resolve()
        except LocationError as err:
            logger.warning("Location error: %s", err)
            self.store.dispatch(LoadingFinished())
            await self.notify(err.title, err.notice)
            return

        self.store.dispatch(LocationResolved(coordinates))
        await self.fetch_nearby_professionals(coordinates)

    async def fetch_nearby_professionals(self, coordinates: Coordinates) -> None:
        self.store.dispatch(FetchStarted())
        try:
            results = await fetch_nearby(self.client, coordinates, DEFAULT_RADIUS_KM)
        except AggregateFetchFailed as err:
            self.store.dispatch(FetchFailed(err))
            await self.notify(err.title, err.notice)
            return

        self.store.dispatch(FetchSucceeded(results))

    def change_filter(self, selected_filter: FilterSelection) -> list[TaggedProfessional]:
        return self.store.dispatch(FilterChanged(selected_filter)).visible

    def book(self, professional: TaggedProfessional) -> None:
        professional_id = professional.record.get("_id")
        if not professional_id:
            raise ValueError("Professional record has no identifier")
        logger.info("Booking requested for %s %s", professional.category, professional_id)
        self.on_booking(BookingRequested(professional_id))

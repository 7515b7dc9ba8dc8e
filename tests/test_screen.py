from src.location.coordinates import Coordinates
from src.location.providers import StaticPositionProvider
from src.location.resolver import LocationResolver
from src.nearcare_client.exceptions import LocationUnavailable
from src.nearby.categories import Category, FilterSelection
from src.nearby.screen import BookingRequested, NearbyScreen
from src.nearby.state import ScreenState


class FailingProvider:
    async def get_current_position(self, high_accuracy: bool = True) -> Coordinates:
        raise LocationUnavailable("location services disabled")


class ScreenHarness:
    def __init__(self, directory, provider=None, granted: bool = True) -> None:
        self.notices: list[tuple[str, str]] = []
        self.bookings: list[BookingRequested] = []
        self.states: list[ScreenState] = []
        self.directory = directory

        async def request_permission() -> bool:
            return granted

        async def notify(title: str, message: str) -> None:
            self.notices.append((title, message))

        resolver = LocationResolver(provider or StaticPositionProvider(12.34, 56.78), request_permission)
        self.screen = NearbyScreen(resolver, directory, notify, self.bookings.append)
        self.screen.store.subscribe(self.states.append)


class TestNearbyScreen:
    async def test_example_scenario(self, directory) -> None:
        harness = ScreenHarness(directory)

        await harness.screen.initialize()

        state = harness.screen.state
        assert state.location == Coordinates(12.34, 56.78)
        assert state.loading is False
        assert [(professional.record["_id"], professional.category) for professional in state.visible] == [
            ("d1", Category.DOCTOR),
            ("d2", Category.DOCTOR),
            ("n1", Category.NURSE),
        ]
        assert harness.screen.change_filter(FilterSelection.AMBULANCES) == []
        assert harness.notices == []

    async def test_filter_change_does_not_refetch(self, directory) -> None:
        harness = ScreenHarness(directory)
        await harness.screen.initialize()

        harness.screen.change_filter(FilterSelection.DOCTORS)
        harness.screen.change_filter(FilterSelection.ALL)

        assert len(directory.calls) == 3

    async def test_permission_denied_attempts_no_lookups(self, directory) -> None:
        harness = ScreenHarness(directory, granted=False)

        await harness.screen.initialize()

        assert directory.calls == []
        assert harness.notices == [("Permission Denied", "Location permission is required")]
        assert harness.screen.state.loading is False
        assert harness.screen.state.location is None

    async def test_location_unavailable_attempts_no_lookups(self, directory) -> None:
        harness = ScreenHarness(directory, provider=FailingProvider())

        await harness.screen.initialize()

        assert directory.calls == []
        assert harness.notices == [("Error", "Could not get your location")]
        assert harness.screen.state.loading is False

    async def test_fetch_failure_exposes_no_partial_data(self, failing_directory) -> None:
        harness = ScreenHarness(failing_directory)

        await harness.screen.initialize()

        state = harness.screen.state
        assert state.visible == []
        assert state.loading is False
        assert harness.notices == [("Error", "Failed to load nearby professionals")]
        assert all(not seen.doctors and not seen.nurses for seen in harness.states)

    async def test_results_are_published_in_one_update(self, directory) -> None:
        harness = ScreenHarness(directory)

        await harness.screen.initialize()

        partial = [
            seen for seen in harness.states if bool(seen.doctors) != bool(seen.nurses)
        ]
        assert partial == []
        assert harness.states[-1].loading is False

    async def test_book_emits_booking_request(self, directory) -> None:
        harness = ScreenHarness(directory)
        await harness.screen.initialize()

        harness.screen.book(harness.screen.state.visible[2])

        assert harness.bookings == [BookingRequested("n1")]

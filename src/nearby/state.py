import logging
from dataclasses import dataclass, field, replace
from typing import Callable

from src.location.coordinates import Coordinates
from src.nearby.aggregator import NearbyResults, TaggedProfessional
from src.nearby.categories import FilterSelection
from src.nearby.view_filter import count_by_filter, select

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScreenState:
    location: Coordinates | None = None
    doctors: tuple[TaggedProfessional, ...] = ()
    nurses: tuple[TaggedProfessional, ...] = ()
    ambulances: tuple[TaggedProfessional, ...] = ()
    loading: bool = True
    selected_filter: FilterSelection = FilterSelection.ALL

    @property
    def visible(self) -> list[TaggedProfessional]:
        return select(self.doctors, self.nurses, self.ambulances, self.selected_filter)

    @property
    def counts(self) -> dict[FilterSelection, int]:
        return count_by_filter(self.doctors, self.nurses, self.ambulances)


@dataclass(frozen=True)
class LocationResolved:
    location: Coordinates


@dataclass(frozen=True)
class FetchStarted:
    pass


@dataclass(frozen=True)
class FetchSucceeded:
    results: NearbyResults


@dataclass(frozen=True)
class FetchFailed:
    error: Exception


@dataclass(frozen=True)
class FilterChanged:
    selected_filter: FilterSelection


@dataclass(frozen=True)
class LoadingFinished:
    pass


Message = LocationResolved | FetchStarted | FetchSucceeded | FetchFailed | FilterChanged | LoadingFinished


def reduce(state: ScreenState, message: Message) -> ScreenState:
    match message:
        case LocationResolved(location=location):
            return replace(state, location=location)
        case FetchStarted():
            return replace(state, loading=True)
        case FetchSucceeded(results=results):
            return replace(
                state,
                doctors=tuple(results["doctors"]),
                nurses=tuple(results["nurses"]),
                ambulances=tuple(results["ambulances"]),
                loading=False,
            )
        case FetchFailed():
            return replace(state, doctors=(), nurses=(), ambulances=(), loading=False)
        case FilterChanged(selected_filter=selected_filter):
            return replace(state, selected_filter=FilterSelection(selected_filter))
        case LoadingFinished():
            return replace(state, loading=False)
    raise TypeError(f"Unknown message: {message!r}")


Subscriber = Callable[[ScreenState], None]


@dataclass
class ScreenStore:
    state: ScreenState = field(default_factory=ScreenState)
    subscribers: list[Subscriber] = field(default_factory=list)

    def subscribe(self, subscriber: Subscriber) -> Callable[[], None]:
        self.subscribers.append(subscriber)

        def unsubscribe() -> None:
            if subscriber in self.subscribers:
                self.subscribers.remove(subscriber)

        return unsubscribe

    def dispatch(self, message: Message) -> ScreenState:
        logger.debug("Dispatching %s", type(message).__name__)
        self.state = reduce(self.state, message)
        for subscriber in list(self.subscribers):
            subscriber(self.state)
        return self.state

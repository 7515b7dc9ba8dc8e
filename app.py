import logging
import os

import asyncclick as click
from dotenv import load_dotenv
from pick import pick

from src.location.coordinates import Coordinates
from src.location.providers import IpPositionProvider, PositionProvider, StaticPositionProvider
from src.location.resolver import LocationResolver
from src.nearcare_client.api_urls import DEFAULT_API_URL
from src.nearcare_client.client import DEFAULT_TIMEOUT, NearcareClient
from src.nearby.aggregator import DEFAULT_RADIUS_KM, TaggedProfessional
from src.nearby.categories import CATEGORY_DISPLAY, FilterSelection, accent_rgb, filter_label, role_label
from src.nearby.distance import distance_to
from src.nearby.screen import BookingHandler, BookingRequested, NearbyScreen
from src.nearby.state import ScreenState

load_dotenv()

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=os.getenv("NEARCARE_LOG_LEVEL", "WARNING"),
)
logger = logging.getLogger(__name__)


def env_float(name: str) -> float | None:
    value = os.getenv(name)
    if not value:
        return None
    try:
        return float(value)
    except ValueError as err:
        raise click.BadParameter(f"{value!r} is not a valid number", param_hint=name) from err


def format_professional(professional: TaggedProfessional, origin: Coordinates | None) -> str:
    record, category = professional
    line = f"[{CATEGORY_DISPLAY[category].label}] {record.get('name', 'Unknown')}"

    label = role_label(record, category)
    if label:
        line += f" - {label}"

    rating = record.get("rating")
    if rating is not None:
        line += f" | ★ {rating}"

    distance = distance_to(origin, record) if origin else None
    if distance is not None:
        line += f" | {distance:.1f} km away"
    else:
        line += " | distance unknown"

    return line


def print_filter_counts(state: ScreenState) -> None:
    badges = []
    for selection, count in state.counts.items():
        badge = f"{filter_label(selection)} ({count})"
        if selection == state.selected_filter:
            badge = click.style(badge, bold=True, underline=True)
        badges.append(badge)
    click.echo("  ".join(badges))


async def show_notice(title: str, message: str) -> None:
    click.secho(f"{title}: {message}", fg="red", err=True)


def open_booking(client: NearcareClient) -> BookingHandler:
    def handler(event: BookingRequested) -> None:
        click.secho(f"Opening booking: {client.booking_path(event.professional_id)}", fg="green")

    return handler


@click.group()
def cli() -> None:
    pass


@cli.command()
@click.option(
    "--api-url",
    help="Nearcare API base URL",
    type=str,
    default=lambda: os.getenv("NEARCARE_API_URL", DEFAULT_API_URL),
    show_default="Value from .env or " + DEFAULT_API_URL,
)
@click.option(
    "--token",
    help="Nearcare API token",
    type=str,
    default=lambda: os.getenv("NEARCARE_API_TOKEN"),
    show_default="Value from .env or none",
)
@click.option(
    "--latitude",
    "-lat",
    help="Latitude of your position",
    type=float,
    default=lambda: env_float("NEARCARE_LATITUDE"),
    show_default="Value from .env or IP geolocation",
)
@click.option(
    "--longitude",
    "-lon",
    help="Longitude of your position",
    type=float,
    default=lambda: env_float("NEARCARE_LONGITUDE"),
    show_default="Value from .env or IP geolocation",
)
@click.option(
    "--filter",
    "-f",
    "selected_filter",
    help="Which professionals to show",
    type=click.Choice([selection.value for selection in FilterSelection]),
    default=FilterSelection.ALL.value,
    show_default=True,
)
@click.option("--yes", "-y", is_flag=True, help="Allow location access without asking")
@click.option("--book", "-b", is_flag=True, help="Pick a professional to book after listing")
async def nearby(
    api_url: str,
    token: str | None,
    latitude: float | None,
    longitude: float | None,
    selected_filter: str,
    yes: bool,
    book: bool,
) -> None:
    if (latitude is None) != (longitude is None):
        raise click.UsageError("Provide both --latitude and --longitude or neither")

    provider: PositionProvider
    if latitude is not None and longitude is not None:
        try:
            provider = StaticPositionProvider(latitude, longitude)
        except ValueError as err:
            raise click.BadParameter(str(err)) from err
    else:
        provider = IpPositionProvider()

    async def request_permission() -> bool:
        if yes:
            return True
        return bool(click.confirm("Allow Nearcare to use your location?", default=True))

    timeout = env_float("NEARCARE_HTTP_TIMEOUT") or DEFAULT_TIMEOUT
    client = NearcareClient(api_url, token=token, timeout=timeout)
    screen = NearbyScreen(LocationResolver(provider, request_permission), client, show_notice, open_booking(client))

    click.echo("Finding professionals near you...")
    await screen.initialize()

    state = screen.state
    if state.location is None:
        return

    click.secho(f"Showing services within {DEFAULT_RADIUS_KM} km radius", fg="blue")
    screen.change_filter(FilterSelection(selected_filter))
    state = screen.state
    print_filter_counts(state)

    professionals = state.visible
    if not professionals:
        click.secho("No professionals found nearby", fg="yellow")
        return

    for professional in professionals:
        click.secho("-----------------------", fg="yellow")
        click.secho(format_professional(professional, state.location), fg=accent_rgb(professional.category))

    if not book:
        return

    options = [format_professional(professional, state.location) for professional in professionals]
    _, index = pick(options, "Select a professional to book")
    screen.book(professionals[int(index)])


if __name__ == "__main__":
    cli()

"""Main entry point for the nearby places application."""

import asyncio
import logging
import sys
from typing import Any

import aiohttp
from pydantic import ValidationError

from nearby_places.adapters.config import AppConfig
from nearby_places.adapters.google_maps import (
    GoogleDirectionsRepository,
    GoogleMapsHttpClient,
    GooglePlacesSearchRepository,
    GoogleReverseGeocoder,
)
from nearby_places.adapters.location import ConfiguredLocationSource
from nearby_places.adapters.location.configured_location_source import PermissionPrompt
from nearby_places.adapters.navigation import BrowserNavigationLauncher
from nearby_places.application.services import (
    LocationService,
    PlaceSearchService,
    RouteService,
)
from nearby_places.application.session import NearbyPlacesSession
from nearby_places.application.state import Store
from nearby_places.cli import console_permission_prompt, execute_command, setup_argparse

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool = False) -> None:
    """Configure root logging to stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def create_session(
    config: AppConfig,
    http_session: aiohttp.ClientSession,
    prompt: PermissionPrompt | None = None,
) -> NearbyPlacesSession:
    """Wire adapters and services into a session."""
    timeout = config.request_timeout_seconds
    http_client = GoogleMapsHttpClient(
        http_session,
        api_key=config.google_maps_api_key,
        timeout_seconds=timeout,
        language=config.language,
    )
    store = Store()

    location_service = LocationService(
        ConfiguredLocationSource(
            config.device_coordinate(), permission=config.location_permission, prompt=prompt
        ),
        GoogleReverseGeocoder(http_client),
        on_change=NearbyPlacesSession.create_location_listener(store),
        timeout_seconds=timeout,
    )
    search_service = PlaceSearchService(
        GooglePlacesSearchRepository(
            http_client,
            radius_meters=config.search_radius_meters,
            qualifier=config.search_qualifier,
        ),
        timeout_seconds=timeout,
    )
    route_service = RouteService(
        GoogleDirectionsRepository(http_client),
        BrowserNavigationLauncher(),
        timeout_seconds=timeout,
    )
    return NearbyPlacesSession(store, location_service, search_service, route_service)


def load_config(args: Any) -> AppConfig:
    """Build configuration from environment, TOML file and command-line overrides."""
    overrides: dict[str, Any] = {}
    if args.config:
        overrides["config_file"] = args.config
    if args.lat is not None:
        overrides["latitude"] = args.lat
    if args.lng is not None:
        overrides["longitude"] = args.lng
    if args.allow_location:
        overrides["location_permission"] = "granted"
    return AppConfig(**overrides)


async def main(argv: list[str] | None = None) -> None:
    """Main application entry point."""
    parser = setup_argparse()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    configure_logging(args.verbose)

    try:
        config = load_config(args)
    except (ValidationError, ValueError, FileNotFoundError) as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        sys.exit(1)

    if not config.google_maps_api_key:
        print("Error: GOOGLE_MAPS_API_KEY is not set", file=sys.stderr)
        sys.exit(1)

    async with aiohttp.ClientSession() as http_session:
        session = create_session(config, http_session, prompt=console_permission_prompt)
        try:
            await execute_command(session, args)
        except KeyboardInterrupt:
            print("\nInterrupted by user", file=sys.stderr)
            sys.exit(1)


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    asyncio.run(main())


if __name__ == "__main__":
    cli_main()

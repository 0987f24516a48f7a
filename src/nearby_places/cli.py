"""Command-line presentation of the nearby places workflow."""

import argparse
import asyncio
import json
import sys
from typing import Any

from nearby_places.application.session import NearbyPlacesSession
from nearby_places.application.state import AppState, PreviewState, RouteEstimate
from nearby_places.domain.models.place import Place

INTERACTIVE_HELP = """Commands:
  <text>        search for places near you
  p <n>         preview the route to result n
  n <n>         navigate to result n in the maps app
  r             refresh your location
  q             quit
"""


async def console_permission_prompt() -> bool:
    """Ask on the console whether the location may be used."""
    answer = await asyncio.to_thread(input, "Allow nearby-places to use your location? [y/N] ")
    return answer.strip().lower() in ("y", "yes")


def _place_to_dict(place: Place, estimate: RouteEstimate | None = None) -> dict[str, Any]:
    """Convert a place (and its inline estimate) to JSON-friendly output."""
    result: dict[str, Any] = {
        "id": place.id,
        "name": place.name,
        "address": place.address,
        "latitude": place.coordinate.latitude,
        "longitude": place.coordinate.longitude,
    }
    if estimate is not None:
        result["distance"] = estimate.distance_text
        result["eta"] = estimate.eta_text
        if estimate.error:
            result["route_error"] = estimate.error.reason
    return result


def _preview_to_dict(preview: PreviewState) -> dict[str, Any]:
    """Convert a route preview to JSON-friendly output."""
    viewport = preview.viewport
    result = _place_to_dict(preview.place, preview.route)
    result["viewport"] = {
        "center": {
            "latitude": viewport.center.latitude,
            "longitude": viewport.center.longitude,
        },
        "latitude_span": viewport.latitude_span,
        "longitude_span": viewport.longitude_span,
    }
    return result


def _print_location(state: AppState) -> None:
    """Print the current location line."""
    location = state.location
    if location.coordinate is None:
        print(f"📍 {location.display_name}")
        return
    print(
        f"📍 {location.display_name} "
        f"({location.coordinate.latitude:.5f}, {location.coordinate.longitude:.5f})"
    )


def _print_places(state: AppState) -> None:
    """Print the current search results with their inline estimates."""
    search = state.search
    if search.error:
        print(f"Search failed: {search.error.reason}", file=sys.stderr)
    if not search.places:
        print(f"No places found for '{search.query}'")
        return

    print(f"\nFound {len(search.places)} place(s):\n")
    for index, place in enumerate(search.places, start=1):
        estimate = state.route_estimates.get(place.id, RouteEstimate())
        print(f"  {index}. {place.name}")
        print(f"     {place.address}")
        print(f"     {estimate.distance_text} · {estimate.eta_text}")
        print()


def _print_preview(preview: PreviewState) -> None:
    """Print a route preview summary."""
    viewport = preview.viewport
    print(f"\nRoute preview: {preview.place.name}")
    print(f"  {preview.place.address}")
    print(f"  Distance: {preview.route.distance_text}")
    print(f"  Time:     {preview.route.eta_text}")
    if preview.route.error:
        print(f"  ({preview.route.error.reason})")
    print(
        f"  Map: center {viewport.center.latitude:.5f}, {viewport.center.longitude:.5f} "
        f"span {viewport.latitude_span:.4f} x {viewport.longitude_span:.4f}"
    )


async def _require_location(session: NearbyPlacesSession) -> bool:
    """Resolve the location; print the reason and return False if unavailable."""
    state = await session.start()
    if state.location.coordinate is None:
        print(f"Error: {state.location.display_name}", file=sys.stderr)
        return False
    return True


async def _search_and_pick(session: NearbyPlacesSession, query: str, pick: int) -> Place | None:
    """Search for the query and return result number `pick` (1-based)."""
    search = await session.search(query)
    if search.error:
        print(f"Error: search failed: {search.error.reason}", file=sys.stderr)
        return None
    if not search.places:
        print(f"No places found for '{query}'", file=sys.stderr)
        return None
    if not 1 <= pick <= len(search.places):
        print(f"Error: pick must be between 1 and {len(search.places)}", file=sys.stderr)
        return None
    return search.places[pick - 1]


async def _handle_locate_command(session: NearbyPlacesSession, output_json: bool) -> None:
    """Handle the locate command."""
    state = await session.start()
    location = state.location

    if output_json:
        coordinate = location.coordinate
        print(
            json.dumps(
                {
                    "status": location.phase.value,
                    "name": location.display_name,
                    "latitude": coordinate.latitude if coordinate else None,
                    "longitude": coordinate.longitude if coordinate else None,
                },
                indent=2,
                ensure_ascii=False,
            )
        )
        return

    _print_location(state)
    if location.coordinate is None:
        sys.exit(1)


async def _handle_search_command(
    session: NearbyPlacesSession, query: str, output_json: bool, with_estimates: bool
) -> None:
    """Handle the search command."""
    if not await _require_location(session):
        sys.exit(1)

    search = await session.search(query)
    if with_estimates:
        await session.estimate_routes(search.places)
    state = session.state

    if output_json:
        places = [
            _place_to_dict(
                place, state.route_estimates.get(place.id) if with_estimates else None
            )
            for place in state.search.places
        ]
        print(json.dumps(places, indent=2, ensure_ascii=False))
        return

    _print_location(state)
    _print_places(state)
    if state.search.error or not state.search.places:
        sys.exit(1)


async def _handle_preview_command(
    session: NearbyPlacesSession, query: str, pick: int, output_json: bool
) -> None:
    """Handle the preview command."""
    if not await _require_location(session):
        sys.exit(1)

    place = await _search_and_pick(session, query, pick)
    if place is None:
        sys.exit(1)

    preview = await session.open_preview(place)
    if preview is None:
        sys.exit(1)

    if output_json:
        print(json.dumps(_preview_to_dict(preview), indent=2, ensure_ascii=False))
        return
    _print_preview(preview)


async def _handle_navigate_command(session: NearbyPlacesSession, query: str, pick: int) -> None:
    """Handle the navigate command."""
    if not await _require_location(session):
        sys.exit(1)

    place = await _search_and_pick(session, query, pick)
    if place is None:
        sys.exit(1)

    if not session.navigate(place):
        sys.exit(1)
    print(f"Opened navigation to {place.name}")


def _parse_index(argument: str, state: AppState) -> Place | None:
    """Resolve a 1-based result number typed in interactive mode."""
    try:
        index = int(argument)
    except ValueError:
        print(f"Not a result number: {argument}")
        return None
    if not 1 <= index <= len(state.search.places):
        print(f"No result number {index}")
        return None
    return state.search.places[index - 1]


async def _handle_interactive_line(session: NearbyPlacesSession, line: str) -> bool:
    """Handle one line of interactive input. Returns False to quit."""
    command, _, argument = line.partition(" ")

    if command in ("q", "quit", "exit"):
        return False
    if command in ("?", "help"):
        print(INTERACTIVE_HELP)
    elif command == "r":
        _print_location(await session.refresh_location())
    elif command in ("p", "n") and argument:
        place = _parse_index(argument.strip(), session.state)
        if place is None:
            return True
        if command == "p":
            preview = await session.open_preview(place)
            if preview is not None:
                _print_preview(preview)
        elif session.navigate(place):
            print(f"Opened navigation to {place.name}")
    else:
        search = await session.search(line)
        await session.estimate_routes(search.places)
        _print_places(session.state)
    return True


async def _handle_interactive_command(session: NearbyPlacesSession) -> None:
    """Handle the interactive command."""
    _print_location(await session.start())
    print(INTERACTIVE_HELP)

    while True:
        try:
            line = (await asyncio.to_thread(input, "search> ")).strip()
        except EOFError:
            break
        if line and not await _handle_interactive_line(session, line):
            break


def setup_argparse() -> argparse.ArgumentParser:
    """Set up and configure argument parser."""
    parser = argparse.ArgumentParser(
        description="Find nearby places, preview driving routes and start navigation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Show where you are
  nearby-places --lat 48.137 --lng 11.575 locate

  # Search with inline distance/time estimates
  nearby-places search "coffee"

  # Preview the route to the second result
  nearby-places preview "pharmacy" --pick 2

  # Open navigation to the first result in the maps app
  nearby-places navigate "gas station"

  # Search, preview and navigate interactively
  nearby-places interactive

Requires GOOGLE_MAPS_API_KEY (Places, Directions and Geocoding APIs enabled).
        """,
    )
    parser.add_argument("--config", help="Path to TOML configuration file")
    parser.add_argument("--lat", type=float, help="Latitude of your location")
    parser.add_argument("--lng", type=float, help="Longitude of your location")
    parser.add_argument(
        "--allow-location",
        action="store_true",
        help="Grant location permission without asking",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    locate_parser = subparsers.add_parser("locate", help="Show the current location")
    locate_parser.add_argument("--json", action="store_true", help="Output as JSON")

    search_parser = subparsers.add_parser("search", help="Search for nearby places")
    search_parser.add_argument("query", help="What to look for")
    search_parser.add_argument("--json", action="store_true", help="Output as JSON")
    search_parser.add_argument(
        "--no-estimates",
        action="store_true",
        help="Don't compute distance/time for each result",
    )

    preview_parser = subparsers.add_parser("preview", help="Preview the route to a result")
    preview_parser.add_argument("query", help="What to look for")
    preview_parser.add_argument("--pick", type=int, default=1, help="Result number (default 1)")
    preview_parser.add_argument("--json", action="store_true", help="Output as JSON")

    navigate_parser = subparsers.add_parser(
        "navigate", help="Open navigation to a result in the maps app"
    )
    navigate_parser.add_argument("query", help="What to look for")
    navigate_parser.add_argument("--pick", type=int, default=1, help="Result number (default 1)")

    subparsers.add_parser("interactive", help="Search, preview and navigate interactively")

    return parser


async def execute_command(session: NearbyPlacesSession, args: argparse.Namespace) -> None:
    """Execute the appropriate command based on args."""
    if args.command == "locate":
        await _handle_locate_command(session, args.json)
    elif args.command == "search":
        await _handle_search_command(session, args.query, args.json, not args.no_estimates)
    elif args.command == "preview":
        await _handle_preview_command(session, args.query, args.pick, args.json)
    elif args.command == "navigate":
        await _handle_navigate_command(session, args.query, args.pick)
    elif args.command == "interactive":
        await _handle_interactive_command(session)
    else:
        setup_argparse().print_help()
        sys.exit(1)

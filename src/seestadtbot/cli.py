"""Command line interface for asking Seestadt.bot questions."""

import argparse
import asyncio
import json
import logging
import sys
from dataclasses import asdict

import aiohttp

from seestadtbot.adapters.config import AppConfig
from seestadtbot.adapters.opening_hours import create_opening_hours
from seestadtbot.adapters.stadtkatalog_api import StadtKatalogShopDirectory
from seestadtbot.adapters.wienerlinien_api import WienerLinienTransitMonitor
from seestadtbot.application.services import SeestadtAssistant, ShopTextGenerator
from seestadtbot.domain.models import ER_SUCCESS_MATCH, DualResponse, Slot, SlotResolution
from seestadtbot.domain.registry import Registry

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def build_assistant(config: AppConfig, session: aiohttp.ClientSession) -> SeestadtAssistant:
    """Wire the adapters into the assistant."""
    transit_monitor = WienerLinienTransitMonitor(
        session=session,
        monitor_url=config.wienerlinien_monitor_url,
        elevator_url=config.wienerlinien_elevator_url,
        timeout_seconds=config.wienerlinien_timeout,
    )
    shop_directory = StadtKatalogShopDirectory(
        session=session,
        api_url=config.stadtkatalog_api_url,
        timeout_seconds=config.stadtkatalog_timeout,
        geofence=config.stadtkatalog_geofence,
        blacklist=config.stadtkatalog_blacklist,
        vague_terms=config.stadtkatalog_vague_terms,
    )
    return SeestadtAssistant(
        registry=Registry(),
        transit_monitor=transit_monitor,
        shop_directory=shop_directory,
        shop_text_generator=ShopTextGenerator(create_opening_hours, config.timezone),
    )


def _spoken_slot(name: str, value: str | None) -> Slot | None:
    return Slot.spoken(name, value) if value else None


def _shop_slot(query: str | None, entry_id: str | None) -> Slot | None:
    if entry_id:
        return Slot(
            name="shopName",
            value=query,
            resolutions=(SlotResolution(status_code=ER_SUCCESS_MATCH, value_ids=(entry_id,)),),
        )
    return _spoken_slot("shopName", query)


async def answer(args: argparse.Namespace, assistant: SeestadtAssistant) -> DualResponse:
    """Dispatch a parsed command to the assistant."""
    if args.command == "departures":
        return await assistant.station_departures(
            _spoken_slot("stopName", args.station), _spoken_slot("vehicleType", args.vehicle)
        )
    if args.command == "elevators":
        return await assistant.elevator_status(_spoken_slot("stopName", args.station))
    if args.command == "hours":
        return await assistant.opening_hours(_shop_slot(args.shop, args.entry_id))
    if args.command == "shop":
        return await assistant.shop_information(_shop_slot(args.shop, args.entry_id))
    raise ValueError(f"Unknown command: {args.command}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Seestadt.bot - public transit and shops in Aspern Seestadt",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Next departures at Seestadt
  seestadtbot departures Seestadt

  # Next buses, station as recognized by speech
  seestadtbot departures "hannah arendt platz" --vehicle bus

  # Elevator status at Aspern Nord
  seestadtbot elevators "aspern nord"

  # Opening hours of a shop as JSON
  seestadtbot hours "Bäckerei" --json
        """,
    )
    parser.add_argument("--config", help="Path to TOML configuration file")

    output = argparse.ArgumentParser(add_help=False)
    output.add_argument("--json", action="store_true", help="Output as JSON")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    departures_parser = subparsers.add_parser(
        "departures", help="Announce next departures", parents=[output]
    )
    departures_parser.add_argument("station", nargs="?", help="Spoken station name")
    departures_parser.add_argument("--vehicle", help="Spoken vehicle type (Bus, U-Bahn, ...)")

    elevators_parser = subparsers.add_parser(
        "elevators", help="Report elevator outages", parents=[output]
    )
    elevators_parser.add_argument("station", nargs="?", help="Spoken station name")

    for command, help_text in (
        ("hours", "Tell opening hours of a shop"),
        ("shop", "Describe a shop"),
    ):
        shop_parser = subparsers.add_parser(command, help=help_text, parents=[output])
        shop_parser.add_argument("shop", nargs="?", help="Spoken shop name")
        shop_parser.add_argument("--entry-id", help="StadtKatalog entry id")

    return parser


def print_response(response: DualResponse, as_json: bool) -> None:
    if as_json:
        print(json.dumps(asdict(response), indent=2, ensure_ascii=False))
        return

    print(response.text)
    print()
    print(f"[{response.card.title}]")
    print(response.card.content)


async def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    config = AppConfig(config_file=args.config) if args.config else AppConfig()
    configure_logging(config.log_level)

    try:
        config.load_toml()
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    try:
        async with aiohttp.ClientSession() as session:
            response = await answer(args, build_assistant(config, session))
        print_response(response, args.json)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(1)


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    asyncio.run(main())


if __name__ == "__main__":
    cli_main()

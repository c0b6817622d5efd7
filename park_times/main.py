"""CLI entry point for park-times."""

import argparse
import json
import logging
import sys

from park_times.errors import ParkTimesError
from park_times.http import ContentAPIClient, FetchError
from park_times.output import to_json_data, write_schedule, write_wait_times
from park_times.registry import ParkRegistry
from park_times.service import ParkService

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )
    # Quiet noisy libraries
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("requests").setLevel(logging.WARNING)


def load_registry() -> ParkRegistry:
    """Load parks.yaml from the configured location."""
    return ParkRegistry.from_yaml()


def _service_for(slug: str):
    """Build a ParkService for a registered park, or None if unknown."""
    park = load_registry().get(slug)
    if park is None:
        logger.error(f"Unknown park '{slug}'")
        return None
    return ParkService(park.to_config())


def _print_json(data) -> None:
    json.dump(to_json_data(data), sys.stdout, indent=2)
    sys.stdout.write("\n")


def wait_times_command(args) -> int:
    """Fetch wait times for one park."""
    setup_logging(args.verbose)

    service = _service_for(args.park)
    if service is None:
        return 1

    try:
        rides = service.fetch_wait_times(args.include_entertainment)
    except (FetchError, ParkTimesError) as e:
        logger.error(f"{args.park}: {e}")
        return 1

    if args.write:
        write_wait_times(args.park, rides)
    else:
        _print_json(rides)
    return 0


def schedule_command(args) -> int:
    """Fetch opening hours for one park."""
    setup_logging(args.verbose)

    service = _service_for(args.park)
    if service is None:
        return 1

    try:
        schedule = service.fetch_schedule()
    except (FetchError, ParkTimesError) as e:
        logger.error(f"{args.park}: {e}")
        return 1

    if args.write:
        write_schedule(args.park, schedule)
    else:
        _print_json(schedule)
    return 0


def update_command(args) -> int:
    """Fetch and write wait times and schedules for every enabled park."""
    setup_logging(args.verbose)

    logger.info("Starting park-times update...")

    parks = load_registry().enabled()
    if not parks:
        logger.error("No enabled parks found in registry")
        return 1

    # One client shares rate limiting across parks
    client = ContentAPIClient()
    failures = 0

    for park in parks:
        logger.info(f"Processing {park.slug}...")
        service = ParkService(park.to_config(), client)

        try:
            write_wait_times(park.slug, service.fetch_wait_times())
        except (FetchError, ParkTimesError) as e:
            logger.warning(f"  {park.slug}: wait times failed - {e}")
            failures += 1

        try:
            write_schedule(park.slug, service.fetch_schedule())
        except (FetchError, ParkTimesError) as e:
            logger.warning(f"  {park.slug}: schedule failed - {e}")
            failures += 1

    logger.info(f"Update complete: {len(parks)} parks, {failures} failures")
    return 0


def main():
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="park-times",
        description="Theme park wait times and opening hours"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Wait times command
    wait_parser = subparsers.add_parser(
        "wait-times",
        help="Show current ride wait times for a park"
    )
    wait_parser.add_argument("park", help="Park slug from parks.yaml")
    wait_parser.add_argument(
        "--include-entertainment",
        action="store_true",
        help="Accepted for compatibility (attractions only are reported)"
    )
    wait_parser.add_argument(
        "--write",
        action="store_true",
        help="Write JSON under the output directory instead of stdout"
    )
    wait_parser.set_defaults(func=wait_times_command)

    # Schedule command
    schedule_parser = subparsers.add_parser(
        "schedule",
        help="Show opening hours for a park"
    )
    schedule_parser.add_argument("park", help="Park slug from parks.yaml")
    schedule_parser.add_argument(
        "--write",
        action="store_true",
        help="Write JSON under the output directory instead of stdout"
    )
    schedule_parser.set_defaults(func=schedule_command)

    # Update command
    update_parser = subparsers.add_parser(
        "update",
        help="Fetch and write data for all enabled parks"
    )
    update_parser.set_defaults(func=update_command)

    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return 1

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())

"""Command-line entry point for train search."""

import argparse
import logging
import sys

from pydantic import ValidationError

from train_search.adapters.config import AppConfig, QueryLoader
from train_search.adapters.formatters import TrainFormatter
from train_search.adapters.json_data import JsonTrainRepository
from train_search.application.services import TrainSearchService
from train_search.domain.errors import TrainSearchError

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find the best trains between two stations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Use data.json and config.json from the current directory
  train-search

  # Three cheapest trains from station 1902 to station 1929
  train-search --departure 1902 --arrival 1929 --criterion price

  # Earliest arrivals, as a table, with a TOML query file
  train-search --config-file query.toml --criterion arrival-time --format table
        """,
    )
    parser.add_argument("--data-file", help="JSON file with train records")
    parser.add_argument("--config-file", help="Query file (.json or .toml)")
    parser.add_argument("--departure", help="Departure station id")
    parser.add_argument("--arrival", help="Arrival station id")
    parser.add_argument(
        "--criterion", help="Sort criterion: price, arrival-time or departure-time"
    )
    parser.add_argument("--format", choices=["json", "table"], help="Output format")
    parser.add_argument("--log-level", help="Logging level (e.g. DEBUG, INFO)")
    return parser


def _load_config(args: argparse.Namespace) -> AppConfig:
    overrides = {
        "data_file": args.data_file,
        "config_file": args.config_file,
        "output_format": args.format,
        "log_level": args.log_level,
    }
    return AppConfig(**{key: value for key, value in overrides.items() if value is not None})


def main(argv: list[str] | None = None) -> int:
    """Run one search and print the result. Returns the process exit code."""
    args = _build_parser().parse_args(argv)

    try:
        config = _load_config(args)
    except ValidationError as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )

    try:
        query = QueryLoader.load(
            config,
            departure_station=args.departure,
            arrival_station=args.arrival,
            criterion=args.criterion,
        )
    except (OSError, ValueError) as e:
        logger.error(f"Invalid query configuration: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    service = TrainSearchService(
        JsonTrainRepository(config.data_file),
        filter_before_sort=config.filter_before_sort,
    )

    try:
        trains = service.find_trains(query)
    except TrainSearchError as e:
        logger.error(f"Search failed: {e.details.model_dump(mode='json')}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(TrainFormatter.format(trains, config.output_format))
    return 0


def cli_main() -> None:
    """Synchronous entry point for the console script."""
    sys.exit(main())


if __name__ == "__main__":
    cli_main()

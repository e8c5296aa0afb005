"""Rendering of search results for terminal output."""

import json
from collections.abc import Sequence

from train_search.domain import time_codec
from train_search.domain.models import Train


class TrainFormatter:
    """Formats trains as indented JSON or as a plain table."""

    @staticmethod
    def format_json(trains: Sequence[Train]) -> str:
        """Render trains as a JSON array of wire records.

        Times are written as ``HH:MM:SS`` strings, never as timestamps.
        """
        return json.dumps([train.to_record() for train in trains], indent=1)

    @staticmethod
    def format_table(trains: Sequence[Train]) -> str:
        """Render trains as one aligned line each."""
        if not trains:
            return "No trains found."

        header = f"{'TRAIN':>8}  {'FROM':>6}  {'TO':>6}  {'DEPARTS':>8}  {'ARRIVES':>8}  {'PRICE':>10}"
        lines = [header]
        for train in trains:
            lines.append(
                f"{train.train_id:>8}  {train.departure_station_id:>6}  "
                f"{train.arrival_station_id:>6}  "
                f"{time_codec.encode(train.departure_time):>8}  "
                f"{time_codec.encode(train.arrival_time):>8}  {train.price:>10.2f}"
            )
        return "\n".join(lines)

    @staticmethod
    def format(trains: Sequence[Train], output_format: str) -> str:
        """Render trains in the given output format ('json' or 'table')."""
        if output_format == "table":
            return TrainFormatter.format_table(trains)
        return TrainFormatter.format_json(trains)

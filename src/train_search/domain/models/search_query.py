"""Search query domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SearchQuery:
    """A user's search request, exactly as entered.

    Station identifiers and the criterion are kept as raw strings; they are
    validated by the search pipeline, not on construction.
    """

    departure_station: str
    arrival_station: str
    criterion: str

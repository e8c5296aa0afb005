"""Sort criterion domain model."""

from enum import StrEnum

from train_search.domain.errors import UnsupportedCriterionError


class SortCriterion(StrEnum):
    """Field used to order trains before filtering."""

    PRICE = "price"  # cheapest first
    ARRIVAL_TIME = "arrival-time"  # earliest arrival first
    DEPARTURE_TIME = "departure-time"  # earliest departure first

    @classmethod
    def parse(cls, token: str) -> "SortCriterion":
        """Look up a criterion by its exact token.

        Raises:
            UnsupportedCriterionError: If ``token`` is not a recognized criterion.
        """
        try:
            return cls(token)
        except ValueError:
            supported = ", ".join(member.value for member in cls)
            raise UnsupportedCriterionError(
                f"unsupported criteria {token!r}, expected one of: {supported}",
                value=str(token),
            ) from None

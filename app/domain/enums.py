"""Domain enumerations for the Mela application.

Enums represent fixed sets of domain values (stall categories, catalog load states).
"""

from enum import Enum


class StallCategory(str, Enum):
    """Stall category shown in the catalog filter."""

    FOOD = "food"
    ACCESSORIES = "accessories"
    GAMES = "games"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid category values as strings.

        Returns:
            List of enum value strings (e.g. for validation or serialization).
        """
        return [category.value for category in cls]


# Wildcard accepted by the catalog filter in addition to StallCategory values.
ALL_CATEGORIES = "all"


class CatalogStatus(str, Enum):
    """Load state of a catalog view.

    idle -> loading -> (ready | error); a view never leaves ready or error.
    """

    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"

"""Ordered star collection consumed by star-map builders."""

import bisect
import logging
from typing import Iterable, Iterator, Optional, Tuple

import numpy as np

from ..catalog.stars import equatorial_locations
from ..errors import InvalidArgumentError
from ..models.star import Star

logger = logging.getLogger(__name__)


class StarChart:
    """Stars kept in rendering order, greatest (brightest) first.

    Behaves like a sorted set: a star whose magnitude and position match one
    already in the chart is dropped, whatever its entry_id.
    """

    def __init__(
        self, stars: Iterable[Star] = (), max_magnitude: Optional[float] = None
    ):
        """Initialize chart.

        Args:
            stars: Initial stars to add
            max_magnitude: Faintest magnitude to keep (None keeps every star)
        """
        self.max_magnitude = max_magnitude
        # ascending; iteration walks it backwards
        self._stars: list[Star] = []

        for star in stars:
            self.add(star)

    @classmethod
    def from_rows(
        cls,
        rows: Iterable[Tuple[int, float, float, float]],
        max_magnitude: Optional[float] = None,
    ) -> "StarChart":
        """Build a chart from (entry_id, ra, dec, magnitude) rows in radians."""
        return cls(
            (Star(entry_id, ra, dec, mag) for entry_id, ra, dec, mag in rows),
            max_magnitude=max_magnitude,
        )

    def add(self, star: Star) -> bool:
        """Insert a star at its rendering position.

        Args:
            star: Star to insert

        Returns:
            True if inserted, False if skipped as too faint or a duplicate
        """
        if star is None:
            raise InvalidArgumentError("Cannot add None to a star chart")
        if not isinstance(star, Star):
            raise InvalidArgumentError(
                f"Expected a Star, got {type(star).__name__}",
                suggestions=["Construct Star values from catalog rows before adding"],
            )

        too_faint = (
            self.max_magnitude is not None
            and star.apparent_magnitude > self.max_magnitude
        )
        if too_faint:
            logger.debug(
                "Skipping star %d: magnitude %.2f fainter than %.2f",
                star.entry_id,
                star.apparent_magnitude,
                self.max_magnitude,
            )
            return False

        index = bisect.bisect_left(self._stars, star)
        if index < len(self._stars) and self._stars[index] == star:
            logger.debug(
                "Dropping star %d: same magnitude and position as star %d",
                star.entry_id,
                self._stars[index].entry_id,
            )
            return False

        self._stars.insert(index, star)
        return True

    def __len__(self) -> int:
        return len(self._stars)

    def __iter__(self) -> Iterator[Star]:
        return reversed(self._stars)

    def __contains__(self, star: object) -> bool:
        if not isinstance(star, Star):
            return False
        index = bisect.bisect_left(self._stars, star)
        return index < len(self._stars) and self._stars[index] == star

    def brightest(self, count: int) -> list[Star]:
        """Return up to count stars, greatest first."""
        if count < 0:
            raise InvalidArgumentError(f"count must be non-negative, got {count}")
        return list(self)[:count]

    def project(self, sidereal_time: float) -> Iterator[Tuple[Star, np.ndarray]]:
        """Yield (star, unit vector) pairs in rendering order."""
        for star in self:
            yield star, star.equatorial_location(sidereal_time)

    def locations(self, sidereal_time: float) -> np.ndarray:
        """Unit vectors for every star, shape (N, 3), in rendering order."""
        return equatorial_locations(list(self), sidereal_time)

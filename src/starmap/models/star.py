"""Star catalog entry with equatorial projection and rendering order."""

import math
import numbers
from dataclasses import dataclass
from functools import total_ordering

import numpy as np

from ..constants import HALF_PI, TWO_PI, UNIT_VECTOR_TOLERANCE
from ..errors import NullOperandError, out_of_range

RADIAN_HINT = ["Angles are in radians; convert catalog hours/degrees first"]


@total_ordering
@dataclass(frozen=True, eq=False)
class Star:
    """A single star from a star catalog.

    Stars order by rendering priority: the brightest star is the greatest,
    ties go to the smaller right ascension, then the smaller declination.
    ``entry_id`` is carried for back-reference only and takes no part in
    ordering, equality or hashing.

    Attributes:
        entry_id: Id number in the catalog (>= 1)
        right_ascension: Radians east of the vernal equinox (>= 0, < 2π)
        declination: Radians north of the celestial equator (>= -π/2, <= π/2)
        apparent_magnitude: Apparent brightness (inverted logarithmic scale)
    """

    entry_id: int
    right_ascension: float
    declination: float
    apparent_magnitude: float

    def __post_init__(self):
        if isinstance(self.entry_id, bool) or not isinstance(
            self.entry_id, numbers.Integral
        ):
            raise out_of_range("entry_id", self.entry_id, "integers >= 1")
        if self.entry_id < 1:
            raise out_of_range("entry_id", self.entry_id, "integers >= 1")
        object.__setattr__(self, "entry_id", int(self.entry_id))

        for name in ("right_ascension", "declination", "apparent_magnitude"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise out_of_range(name, value, "real numbers")
            object.__setattr__(self, name, float(value))

        # ranges are checked on the stored floats, after any rounding
        if not (0.0 <= self.right_ascension < TWO_PI):
            raise out_of_range(
                "right_ascension", self.right_ascension, "[0, 2π)", RADIAN_HINT
            )
        if not (-HALF_PI <= self.declination <= HALF_PI):
            raise out_of_range(
                "declination", self.declination, "[-π/2, π/2]", RADIAN_HINT
            )

    @property
    def relative_brightness(self) -> float:
        """Flux relative to a magnitude 0 star: 10^(-0.4 * magnitude).

        Scalar form of catalog.stars.apparent_magnitude_to_brightness, which
        handles whole magnitude arrays.
        """
        return 10.0 ** (-0.4 * self.apparent_magnitude)

    def equatorial_location(self, sidereal_time: float) -> np.ndarray:
        """Project the star onto the unit sphere in equatorial coordinates.

        The frame is right-handed:

        - +X points to the juncture of the meridian with the celestial equator
        - +Y points to the east horizon (also on the celestial equator)
        - +Z points to the celestial north pole

        Args:
            sidereal_time: Radians since sidereal midnight (>= 0, < 2π)

        Returns:
            New unit vector with shape (3,)

        Raises:
            InvalidArgumentError: If sidereal_time is outside [0, 2π)
        """
        if not (0.0 <= sidereal_time < TWO_PI):
            raise out_of_range("sidereal_time", sidereal_time, "[0, 2π)", RADIAN_HINT)

        hour_angle = sidereal_time - self.right_ascension

        cos_dec = math.cos(self.declination)
        x = cos_dec * math.cos(hour_angle)
        y = -cos_dec * math.sin(hour_angle)
        z = math.sin(self.declination)
        result = np.array([x, y, z], dtype=np.float64)

        assert abs(np.linalg.norm(result) - 1.0) <= UNIT_VECTOR_TOLERANCE, result
        return result

    def compare_to(self, other: object) -> int:
        """Compare rendering priority with another star.

        Args:
            other: The other star

        Returns:
            1 if this star ranks greater, -1 if it ranks less, 0 if the stars
            have identical content or are not comparable

        Raises:
            NullOperandError: If other is None
        """
        if other is None:
            raise NullOperandError()
        if not isinstance(other, Star):
            return 0

        if self.apparent_magnitude < other.apparent_magnitude:
            return 1
        elif self.apparent_magnitude > other.apparent_magnitude:
            return -1
        if self.right_ascension < other.right_ascension:
            return 1
        elif self.right_ascension > other.right_ascension:
            return -1
        if self.declination < other.declination:
            return 1
        elif self.declination > other.declination:
            return -1
        return 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Star):
            return False
        return self.compare_to(other) == 0

    def __lt__(self, other: object) -> bool:
        if other is None:
            raise NullOperandError()
        if not isinstance(other, Star):
            return NotImplemented
        return self.compare_to(other) < 0

    def __hash__(self) -> int:
        return hash((self.apparent_magnitude, self.right_ascension, self.declination))

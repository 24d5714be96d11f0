"""Bright star table, catalog unit conversions and batch projection."""

from typing import Sequence, Union

import numpy as np

from ..constants import DEFAULT_MAX_MAGNITUDE, HOURS_PER_CIRCLE, TWO_PI
from ..errors import out_of_range
from ..models.star import RADIAN_HINT, Star

ArrayOrFloat = Union[float, np.ndarray]

# Brightest stars (HR number, RA in hours, Dec in degrees, V magnitude)
# Positions are J2000, HR numbers from the Yale Bright Star Catalogue
BRIGHT_STARS = np.array(
    [
        (2491, 6.7525, -16.7161, -1.46),  # Sirius
        (2326, 6.3992, -52.6957, -0.72),  # Canopus
        (5340, 14.2610, 19.1825, -0.04),  # Arcturus
        (5459, 14.6600, -60.8340, -0.01),  # Rigil Kentaurus
        (7001, 18.6156, 38.7837, 0.03),  # Vega
        (1708, 5.2782, 45.9980, 0.08),  # Capella
        (1713, 5.2423, -8.2017, 0.12),  # Rigel
        (2943, 7.6550, 5.2250, 0.38),  # Procyon
        (472, 1.6286, -57.2367, 0.46),  # Achernar
        (2061, 5.9195, 7.4069, 0.50),  # Betelgeuse
        (5267, 14.0637, -60.3730, 0.61),  # Hadar
        (7557, 19.8464, 8.8683, 0.77),  # Altair
        (4730, 12.4433, -63.0990, 0.77),  # Acrux
        (1457, 4.5987, 16.5093, 0.85),  # Aldebaran
        (6134, 16.4901, -26.4320, 0.96),  # Antares
        (5056, 13.4199, -11.1613, 0.98),  # Spica
        (2990, 7.7553, 28.0262, 1.14),  # Pollux
        (8728, 22.9608, -29.6222, 1.16),  # Fomalhaut
        (7924, 20.6905, 45.2803, 1.25),  # Deneb
        (3982, 10.1395, 11.9672, 1.35),  # Regulus
    ],
    dtype=np.float64,
)


def ra_hours_to_radians(ra_hours: ArrayOrFloat) -> ArrayOrFloat:
    """Convert right ascension from hours to radians.

    Args:
        ra_hours: Right ascension in hours (0-24)

    Returns:
        Right ascension in radians (0-2π)
    """
    return ra_hours * (TWO_PI / HOURS_PER_CIRCLE)


def dec_deg_to_radians(dec_deg: ArrayOrFloat) -> ArrayOrFloat:
    """Convert declination from degrees to radians.

    Args:
        dec_deg: Declination in degrees (-90 to +90)

    Returns:
        Declination in radians (-π/2 to π/2)
    """
    return np.radians(dec_deg)


def apparent_magnitude_to_brightness(magnitude: ArrayOrFloat) -> ArrayOrFloat:
    """Convert apparent magnitude to relative brightness.

    Brightness follows: B = 10^(-0.4 * magnitude)
    Lower magnitude = brighter star (e.g., magnitude -1.5 is very bright)

    Args:
        magnitude: Apparent V magnitude

    Returns:
        Relative brightness (higher = brighter)
    """
    return 10.0 ** (-0.4 * magnitude)


def make_star(
    entry_id: int, ra_hours: float, dec_deg: float, magnitude: float
) -> Star:
    """Build a Star from a catalog row expressed in hours and degrees."""
    return Star(
        entry_id=entry_id,
        right_ascension=float(ra_hours_to_radians(ra_hours)),
        declination=float(dec_deg_to_radians(dec_deg)),
        apparent_magnitude=magnitude,
    )


def get_bright_stars(max_magnitude: float = DEFAULT_MAX_MAGNITUDE) -> list[Star]:
    """Get bright stars from the built-in table.

    Args:
        max_magnitude: Maximum visual magnitude (lower = brighter)

    Returns:
        Stars no fainter than max_magnitude, brightest first
    """
    mask = BRIGHT_STARS[:, 3] <= max_magnitude
    stars = [make_star(int(row[0]), *row[1:]) for row in BRIGHT_STARS[mask]]
    return sorted(stars, reverse=True)


def equatorial_locations(stars: Sequence[Star], sidereal_time: float) -> np.ndarray:
    """Project many stars at once onto the equatorial unit sphere.

    Uses the same frame as Star.equatorial_location.

    Args:
        stars: Stars to project
        sidereal_time: Radians since sidereal midnight (>= 0, < 2π)

    Returns:
        Array of unit vectors with shape (N, 3), one row per star in input order
    """
    if not (0.0 <= sidereal_time < TWO_PI):
        raise out_of_range("sidereal_time", sidereal_time, "[0, 2π)", RADIAN_HINT)

    ra = np.array([star.right_ascension for star in stars], dtype=np.float64)
    dec = np.array([star.declination for star in stars], dtype=np.float64)

    hour_angle = sidereal_time - ra
    cos_dec = np.cos(dec)

    x = cos_dec * np.cos(hour_angle)
    y = -cos_dec * np.sin(hour_angle)
    z = np.sin(dec)

    return np.stack([x, y, z], axis=1).reshape(-1, 3)

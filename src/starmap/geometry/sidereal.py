import logging
from datetime import datetime, timezone

from skyfield.api import load

from ..constants import HOURS_PER_CIRCLE, TWO_PI
from ..errors import TimeParseError, out_of_range

logger = logging.getLogger(__name__)


def _parse_iso_utc(utc_time: str):
    """
    Parse ISO-8601 UTC timestamp and return components for skyfield.

    Args:
        utc_time: ISO-8601 UTC timestamp (e.g., "2026-01-20T12:00:00Z")

    Returns:
        Tuple of (year, month, day, hour, minute, second)

    Raises:
        TimeParseError: If utc_time cannot be parsed
    """
    text = utc_time
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"

    try:
        dt = datetime.fromisoformat(text)
    except ValueError:
        raise TimeParseError(utc_time)

    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc)

    second = dt.second + dt.microsecond / 1e6
    return (dt.year, dt.month, dt.day, dt.hour, dt.minute, second)


def local_sidereal_time(utc_time: str, longitude_deg: float = 0.0) -> float:
    """
    Local mean sidereal time for an observer, in radians.

    Greenwich mean sidereal time comes from skyfield's builtin timescale;
    the observer's east longitude is added on top.

    Args:
        utc_time: ISO-8601 UTC timestamp
        longitude_deg: Observer longitude in degrees, positive east (-180 to 180)

    Returns:
        Sidereal time in radians (>= 0, < 2π), ready for Star.equatorial_location

    Raises:
        TimeParseError: If utc_time cannot be parsed
        InvalidArgumentError: If longitude_deg is outside [-180, 180]
    """
    if not (-180.0 <= longitude_deg <= 180.0):
        raise out_of_range("longitude_deg", longitude_deg, "[-180, 180]")

    ts = load.timescale()
    t = ts.utc(*_parse_iso_utc(utc_time))

    lst_hours = (float(t.gmst) + longitude_deg / 15.0) % HOURS_PER_CIRCLE
    lst = lst_hours * (TWO_PI / HOURS_PER_CIRCLE)
    if lst >= TWO_PI:
        lst = 0.0

    logger.debug(
        "Sidereal time at %s, longitude %.4f: %.6f rad", utc_time, longitude_deg, lst
    )
    return lst

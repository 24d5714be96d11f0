from .stars import (
    BRIGHT_STARS,
    apparent_magnitude_to_brightness,
    dec_deg_to_radians,
    equatorial_locations,
    get_bright_stars,
    make_star,
    ra_hours_to_radians,
)

__all__ = [
    "BRIGHT_STARS",
    "apparent_magnitude_to_brightness",
    "dec_deg_to_radians",
    "equatorial_locations",
    "get_bright_stars",
    "make_star",
    "ra_hours_to_radians",
]

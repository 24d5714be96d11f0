"""Angular constants and numeric tolerances shared across starmap."""

import math

TWO_PI: float = 2.0 * math.pi
HALF_PI: float = 0.5 * math.pi

# Allowed deviation of a projected vector's length from 1 (double precision)
UNIT_VECTOR_TOLERANCE: float = 1e-12

# Faintest V magnitude kept by default when filtering the bright-star table
DEFAULT_MAX_MAGNITUDE: float = 2.0

HOURS_PER_CIRCLE: float = 24.0

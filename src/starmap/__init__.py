"""Catalog star values and ordering for sky-map builders."""

from .errors import InvalidArgumentError, NullOperandError, StarmapError
from .models import Star

__version__ = "0.1.0"

__all__ = [
    "Star",
    "StarmapError",
    "InvalidArgumentError",
    "NullOperandError",
    "__version__",
]

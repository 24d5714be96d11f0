from .star import Star

__all__ = [
    "Star",
]

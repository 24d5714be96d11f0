from .builder import StarChart

__all__ = ["StarChart"]

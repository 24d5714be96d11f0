from .sidereal import local_sidereal_time

__all__ = ["local_sidereal_time"]

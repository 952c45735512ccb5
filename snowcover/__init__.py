"""Unit conversions, environmental physics and timestep records for snowcover modelling."""

__version__ = "0.1.0"
__all__ = ["units", "envphys", "timestep"]
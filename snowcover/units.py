"""Units of measurement and simple conversions between them."""

from __future__ import annotations

import math
from enum import IntEnum

FREEZE = 2.7316e2
"""Triple point of water at standard pressure (K)."""

DEGS_IN_CIRCLE = 3.6e2
"""Degrees in a full circle."""


class Units(IntEnum):
    """Identifiers for units of measurement."""

    NONE = 0
    PERCENT = 1
    CELSIUS = 2
    KELVIN = 3
    FARENHEIT = 4
    METERS = 5
    KILOMETERS = 6
    KILOGRAMS = 7
    PASCALS = 8
    METERS_PER_SECOND = 9
    KILOGRAMS_PER_SQUARE_METER = 10
    KILOGRAMS_PER_CUBIC_METER = 11
    WATTS_PER_SQUARE_METER = 12
    JOULES_PER_SQUARE_METER = 13


_MAX_UNITS_ID = max(Units)


def valid_units_id(units_id: int) -> bool:
    """Return True if ``units_id`` names a known unit."""
    return 0 <= units_id <= _MAX_UNITS_ID


def c_to_k(c: float) -> float:
    """Convert Celsius to Kelvin."""
    return c + FREEZE


def k_to_c(k: float) -> float:
    """Convert Kelvin to Celsius."""
    return k - FREEZE


def kg_to_g(kg: float) -> float:
    """Convert kilograms to grams."""
    return kg * 1000.0


def g_to_kg(g: float) -> float:
    """Convert grams to kilograms."""
    return g * 0.001


def j_to_cal(j: float) -> float:
    """Convert Joules to calories."""
    return j * 0.238846


def cal_to_j(c: float) -> float:
    """Convert calories to Joules."""
    return c * 4.186798188


def wave_number(x: float) -> int:
    """Convert a wavelength (um) to a wave number (1/cm), rounded."""
    return int(10000.0 / x + 0.5)


def wavelength(nu: float) -> float:
    """Convert a wave number (1/cm) to a wavelength (um)."""
    return 10000.0 / nu


def deg_to_rad(d: float) -> float:
    """Convert degrees to radians."""
    return d * (math.pi / 180.0)


def rad_to_deg(r: float) -> float:
    """Convert radians to degrees."""
    return r * (180.0 / math.pi)


def min_to_deg(m: float) -> float:
    """Convert arc minutes to degrees."""
    return m / 60.0


def sec_to_deg(s: float) -> float:
    """Convert arc seconds to degrees."""
    return s / 3600.0


def bit(i: int) -> int:
    """Return 2 raised to the ``i``'th power, the mask for bit ``i``."""
    if i < 0:
        raise ValueError(f"bit index must be non-negative, got {i}")
    return 1 << i


def mask(n: int) -> int:
    """Return a mask of the lower ``n`` bits."""
    if n < 1:
        raise ValueError(f"mask width must be at least 1, got {n}")
    return (1 << n) - 1
"""Environmental physics constants and relations, plus radiation constants."""

from __future__ import annotations

import math

from snowcover.units import FREEZE, cal_to_j, g_to_kg

# Molecular weight of air (kg / kmole).
MOL_AIR = 28.9644
# Molecular weight of water vapor (kg / kmole).
MOL_H2O = 18.0153
# Gas constant (J / kmole / deg).
RGAS = 8.31432e3
BOIL = 3.7315e2
# Specific heat of air at constant pressure (J / kg / deg).
CP_AIR = 1.005e3
# Specific heat of water at 0C (J / (kg K)).
CP_W0 = 4217.7
# Density of water at 0C (kg/m^3).
RHO_W0 = 999.87
# Density of ice, no air (kg/m^3).
RHO_ICE = 917.0
# Thermal conductivities of sandy soil (J/(m sec K)).
KT_WETSAND = 2.2
KT_DRYSAND = 0.3
KT_MOISTSAND = 1.65
# Standard sea level pressure (Pa).
SEA_LEVEL = 1.013246e5
# Standard sea level air temperature (K).
STD_AIRTMP = 2.88e2
# Standard lapse rates (K/m and K/km).
STD_LAPSE_M = -0.0065
STD_LAPSE = -6.5
# Gravitational acceleration at reference latitude (m/s^2).
GRAVITY = 9.80665
# Dry adiabatic lapse rate (deg / m).
DALR = GRAVITY / CP_AIR
# Earth equivalent spherical radius (km).
EARTH_RADIUS = 6.37122e3
# Velocity of light (m/s).
LIGHT_SPEED = 2.99722458e8
VON_KARMAN = 0.41

# Stefan-Boltzmann constant (W / m^2 / deg^4).
STEF_BOLTZ = 5.67032e-8
# Planck radiation constants.
H_PLANCK = 6.626176e-34
PLANCK_1ST = 3.741832e-16
PLANCK_2ND = 1.438786e-2
K_BOLTZ = 1.380662e-23
# Methods for computing two-stream gamma values.
DELTA_EDDINGTON = 0
MEADOR_WEAVER = 1

_MOL_RATIO = MOL_H2O / MOL_AIR
_POT_EXPONENT = RGAS / (MOL_AIR * CP_AIR)

__all__ = [
    "FREEZE",
    "gas_density",
    "eq_state",
    "virtual_temp",
    "inv_virtual_temp",
    "potential_temp",
    "inv_potential_temp",
    "cp_ice",
    "cp_water",
    "hystat",
    "inv_hystat",
    "spec_hum",
    "inv_spec_hum",
    "mix_ratio",
    "inv_mix_ratio",
    "ah_to_vp",
    "vp_to_ah",
    "lh_vap",
    "lh_fus",
    "lh_sub",
    "diffusion_coef",
    "evap_flux",
    "dry_static_energy",
    "inv_dry_static_energy",
    "moist_static_energy",
    "inv_moist_static_energy",
]


def gas_density(p: float, m: float, t: float) -> float:
    """Density of a gas (kg/m^3) from pressure (Pa), molecular weight and temperature (K)."""
    return p * m / (RGAS * t)


def eq_state(rho: float, m: float, t: float) -> float:
    """Pressure (Pa) of a gas from density, molecular weight and temperature (K)."""
    return rho * RGAS * t / m


def virtual_temp(t: float, e: float, p: float) -> float:
    """Virtual temperature (K) from temperature, vapor pressure and pressure."""
    return t / (1.0 - (1.0 - _MOL_RATIO) * (e / p))


def inv_virtual_temp(tv: float, e: float, p: float) -> float:
    """Temperature (K) from virtual temperature, vapor pressure and pressure."""
    return tv * (1.0 - (1.0 - _MOL_RATIO) * (e / p))


def potential_temp(t: float, p: float) -> float:
    """Potential temperature (K) from temperature (K) and pressure (Pa)."""
    return t * math.pow(1.0e5 / p, _POT_EXPONENT)


def inv_potential_temp(theta: float, p: float) -> float:
    """Temperature (K) from potential temperature (K) and pressure (Pa)."""
    return theta / math.pow(1.0e5 / p, _POT_EXPONENT)


def cp_ice(t: float) -> float:
    """Specific heat of ice (J/(kg K)) at temperature ``t`` (K)."""
    return cal_to_j(0.024928 + 0.00176 * t) / g_to_kg(1)


def cp_water(t: float) -> float:
    """Specific heat of water (J/(kg K)) at temperature ``t`` (K)."""
    return CP_W0 - 2.55 * (t - FREEZE)


def hystat(pb: float, tb: float, lapse: float, h: float, g: float, m: float) -> float:
    """Pressure at the top of a layer with linear temperature variation.

    ``lapse`` is in deg/km and ``h`` in km.
    """
    if lapse == 0.0:
        factor = math.exp(-g * m * h * 1.0e3 / (RGAS * tb))
    else:
        factor = math.pow(tb / (tb + lapse * h), g * m / (RGAS * lapse * 1.0e-3))
    return pb * factor


def inv_hystat(
    pb: float, tb: float, hb: float, p: float, t: float, g: float, m: float
) -> float:
    """Geopotential altitude (km) of a level from base and level pressure and temperature."""
    if tb == t:
        term = -t
    else:
        term = (t - tb) / math.log(tb / t)
    return hb + 1.0e-3 * math.log(p / pb) * (RGAS / (g * m)) * term


def spec_hum(e: float, p: float) -> float:
    """Specific humidity from vapor pressure and pressure (same units)."""
    return e * MOL_H2O / (MOL_AIR * p + e * (MOL_H2O - MOL_AIR))


def inv_spec_hum(q: float, p: float) -> float:
    """Vapor pressure from specific humidity and pressure."""
    return -MOL_AIR * p * q / ((MOL_H2O - MOL_AIR) * q - MOL_H2O)


def mix_ratio(e: float, p: float) -> float:
    """Mixing ratio from vapor pressure and pressure (same units)."""
    return _MOL_RATIO * e / (p - e)


def inv_mix_ratio(w: float, p: float) -> float:
    """Vapor pressure from mixing ratio and pressure."""
    return w * p / (w + _MOL_RATIO)


def ah_to_vp(ah: float, ta: float) -> float:
    """Vapor pressure from absolute humidity and air temperature (K)."""
    return ah * (RGAS / MOL_H2O) * ta


def vp_to_ah(e: float, ta: float) -> float:
    """Absolute humidity from vapor pressure (Pa) and air temperature (K)."""
    return e * (MOL_H2O / (RGAS * ta))


def lh_vap(t: float) -> float:
    """Latent heat of vaporization (J/kg) at temperature ``t`` (K)."""
    return 2.5e6 - 2.95573e3 * (t - FREEZE)


def lh_fus(t: float) -> float:
    """Latent heat of fusion (J/kg) at temperature ``t`` (K)."""
    return 3.336e5 + 1.6667e2 * (FREEZE - t)


def lh_sub(t: float) -> float:
    """Latent heat of sublimation (J/kg) at temperature ``t`` (K)."""
    return lh_vap(t) + lh_fus(t)


def diffusion_coef(pa: float, ts: float) -> float:
    """Effective diffusion coefficient (m^2/s) for a saturated porous layer."""
    return (0.65 * (SEA_LEVEL / pa) * math.pow(ts / FREEZE, 14.0)) * (0.01 * 0.01)


def evap_flux(air_density: float, k: float, q_dif: float, z_dif: float) -> float:
    """Water vapor flux (kg/(m^2 s)) between two layers; ``q_dif`` sets the sign."""
    return air_density * k * (q_dif / z_dif)


def dry_static_energy(t: float, z: float) -> float:
    """Dry static energy (J/kg) from air temperature (K) and elevation (m)."""
    return CP_AIR * t + GRAVITY * z


def inv_dry_static_energy(dse: float, z: float) -> float:
    """Inverse of the dry static energy relation, as the library defines it."""
    return dse - (GRAVITY * z) / CP_AIR


def moist_static_energy(z: float, t: float, w: float) -> float:
    """Moist static energy (J/kg) from elevation, temperature and mixing ratio."""
    return dry_static_energy(t, z) + lh_vap(t) * w


def inv_moist_static_energy(z: float, t: float, mse: float) -> float:
    """Mixing ratio from elevation, temperature and moist static energy."""
    return (mse - dry_static_energy(t, z)) / lh_vap(t)
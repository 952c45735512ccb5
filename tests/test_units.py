import math

import pytest

from snowcover import units
from snowcover.units import (
    FREEZE,
    Units,
    bit,
    c_to_k,
    cal_to_j,
    deg_to_rad,
    g_to_kg,
    j_to_cal,
    k_to_c,
    kg_to_g,
    mask,
    min_to_deg,
    rad_to_deg,
    sec_to_deg,
    valid_units_id,
    wave_number,
    wavelength,
)


def test_freezing_point_in_kelvin():
    assert c_to_k(0.0) == pytest.approx(2.7316e2)
    assert FREEZE == pytest.approx(273.16)


@pytest.mark.parametrize("temp", [-75.0, -10.5, 0.0, 12.25, 40.0])
def test_celsius_kelvin_round_trip(temp):
    assert k_to_c(c_to_k(temp)) == pytest.approx(temp)


@pytest.mark.parametrize("mass", [0.0, 0.25, 1.5, 1234.0])
def test_kilogram_gram_round_trip(mass):
    assert g_to_kg(kg_to_g(mass)) == pytest.approx(mass)
    assert kg_to_g(mass) >= mass


@pytest.mark.parametrize("energy", [1.0, 100.0, 4186.8])
def test_joule_calorie_round_trip(energy):
    assert cal_to_j(j_to_cal(energy)) == pytest.approx(energy, rel=1e-5)
    assert j_to_cal(energy) < energy


@pytest.mark.parametrize("wl", [1.0, 2.0, 4.0, 10.0, 0.5])
def test_wave_number_wavelength_round_trip(wl):
    assert wavelength(wave_number(wl)) == pytest.approx(wl)


def test_wave_number_rounds_to_int():
    assert wave_number(3.0) == 3333
    assert isinstance(wave_number(3.0), int)


@pytest.mark.parametrize("deg", [0.0, 45.0, 90.0, 180.0, 270.0])
def test_degree_radian_round_trip(deg):
    assert rad_to_deg(deg_to_rad(deg)) == pytest.approx(deg)


def test_half_circle_is_pi():
    assert deg_to_rad(units.DEGS_IN_CIRCLE / 2) == pytest.approx(math.pi)


def test_arc_conversions_agree():
    assert min_to_deg(60.0) == pytest.approx(sec_to_deg(3600.0))
    assert min_to_deg(30.0) * 60.0 == pytest.approx(30.0)


@pytest.mark.parametrize("i", range(0, 16))
def test_bit_is_power_of_two(i):
    assert bit(i) == 2**i


@pytest.mark.parametrize("n", range(1, 33))
def test_mask_covers_lower_bits(n):
    assert mask(n) == bit(n) - 1
    assert mask(n).bit_length() == n


def test_bit_rejects_negative():
    with pytest.raises(ValueError):
        bit(-1)


def test_mask_rejects_zero_width():
    with pytest.raises(ValueError):
        mask(0)


def test_valid_units_ids():
    assert all(valid_units_id(u) for u in Units)
    assert valid_units_id(Units.JOULES_PER_SQUARE_METER)
    assert not valid_units_id(max(Units) + 1)
    assert not valid_units_id(-1)
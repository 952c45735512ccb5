import pytest

from snowcover.timestep import (
    InputRecord,
    OutputFlag,
    PrecipRecord,
    TimestepInfo,
    TimestepLevel,
    in_data_timestep,
    time_average,
)


def test_levels_follow_source_order():
    levels = [TimestepLevel(value) for value in range(4)]
    assert [int(level) for level in levels] == [0, 1, 2, 3]
    assert TimestepLevel(0).next is TimestepLevel.NORMAL
    assert TimestepLevel(2).next is TimestepLevel.SMALL


def test_small_level_cannot_be_divided():
    with pytest.raises(ValueError):
        TimestepLevel(3).next


def test_output_flags_values():
    assert OutputFlag(0x1) is OutputFlag.WHOLE
    assert OutputFlag(0x2) is OutputFlag.DIVIDED
    both = OutputFlag(0x3)
    assert OutputFlag.DIVIDED in both
    assert OutputFlag.WHOLE in both


def test_timestep_info_validates():
    with pytest.raises(ValueError):
        TimestepInfo(TimestepLevel.NORMAL, 0.0)
    with pytest.raises(ValueError):
        TimestepInfo(TimestepLevel.NORMAL, 60.0, intervals=0)
    info = TimestepInfo(2, 900.0, intervals=4, threshold=10.0, output=1)
    assert info.level is TimestepLevel.MEDIUM
    assert info.output is OutputFlag.WHOLE


def test_input_divided_then_advanced_recovers_total():
    deltas = InputRecord(s_n=40.0, i_lw=12.0, t_a=-2.0, e_a=8.0, u=1.0, t_g=0.4, ro=0.2)
    start = InputRecord(s_n=100.0, i_lw=250.0, t_a=-5.0, e_a=300.0, u=2.0, t_g=1.0, ro=0.0)
    small = deltas.divided(4, include_runoff=True)
    current = start
    for _ in range(4):
        current = current.advanced(small, include_runoff=True)
    expected = start.advanced(deltas, include_runoff=True)
    for name in ("s_n", "i_lw", "t_a", "e_a", "u", "t_g", "ro"):
        assert getattr(current, name) == pytest.approx(getattr(expected, name))


def test_runoff_ignored_without_runoff_data():
    deltas = InputRecord(s_n=8.0, ro=5.0)
    small = deltas.divided(2, include_runoff=False)
    assert small.ro == 0.0
    assert small.s_n == 4.0
    start = InputRecord(ro=1.5)
    assert start.advanced(deltas, include_runoff=False).ro == 1.5
    assert start.advanced(deltas, include_runoff=True).ro == 6.5


def test_input_divided_rejects_zero_intervals():
    with pytest.raises(ValueError):
        InputRecord().divided(0, include_runoff=True)


def test_precip_divided_sums_back():
    precip = PrecipRecord(m_pp=9.0, m_rain=3.0, m_snow=6.0, z_snow=0.06)
    part = precip.divided(3)
    assert part.m_pp * 3 == pytest.approx(precip.m_pp)
    assert part.m_rain + part.m_snow == pytest.approx(part.m_pp)
    assert part.z_snow * 3 == pytest.approx(precip.z_snow)
    with pytest.raises(ValueError):
        precip.divided(0)


def test_in_data_timestep_bounds():
    assert in_data_timestep(3600.0, 3600.0, 3600.0)
    assert in_data_timestep(7199.0, 3600.0, 3600.0)
    assert not in_data_timestep(7200.0, 3600.0, 3600.0)
    assert not in_data_timestep(3599.0, 3600.0, 3600.0)


def test_time_average_weights():
    assert time_average(10.0, 60.0, 10.0, 30.0) == pytest.approx(10.0)
    assert time_average(0.0, 60.0, 6.0, 60.0) == pytest.approx(3.0)
    assert time_average(5.0, 0.0, 7.0, 60.0) == pytest.approx(7.0)
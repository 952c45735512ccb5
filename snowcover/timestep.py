"""Timestep levels, climate input records and the bookkeeping between them."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import IntEnum, IntFlag

# Default maximum liquid h2o content as volume ratio V_water/(V_snow - V_ice).
DEFAULT_MAX_H2O_VOL = 0.01
# Default maximum active (surface) layer depth (m).
DEFAULT_MAX_Z_S_0 = 0.25
# Default depth of soil temperature measurement (m).
DEFAULT_Z_G = 0.5
# Minimum valid snow temperature (C); also used when there is no snow.
MIN_SNOW_TEMP = -75
# Default medium and small run timesteps (minutes).
DEFAULT_MEDIUM_TSTEP = 15
DEFAULT_SMALL_TSTEP = 1
# Default layer-mass thresholds for the run timesteps (kg/m^2).
DEFAULT_NORMAL_THRESHOLD = 60.0
DEFAULT_MEDIUM_THRESHOLD = 10.0
DEFAULT_SMALL_THRESHOLD = 1.0


class TimestepLevel(IntEnum):
    """Level of a timestep, from the data timestep down to the smallest."""

    DATA = 0
    NORMAL = 1
    MEDIUM = 2
    SMALL = 3

    @property
    def next(self) -> TimestepLevel:
        """The next finer level."""
        if self is TimestepLevel.SMALL:
            raise ValueError("the small timestep cannot be divided further")
        return TimestepLevel(self + 1)


class OutputFlag(IntFlag):
    """When output is produced for a timestep."""

    NONE = 0
    WHOLE = 0x1
    DIVIDED = 0x2


@dataclass
class TimestepInfo:
    """Settings for one timestep level.

    ``intervals`` is how many of these timesteps fit in the previous level's
    timestep and ``threshold`` the layer mass below which this level is used;
    neither applies to the data timestep.
    """

    level: TimestepLevel
    time_step: float
    intervals: int = 1
    threshold: float = 0.0
    output: OutputFlag = OutputFlag.NONE

    def __post_init__(self) -> None:
        self.level = TimestepLevel(self.level)
        self.output = OutputFlag(self.output)
        if self.time_step <= 0.0:
            raise ValueError(f"time step must be positive, got {self.time_step}")
        if self.intervals < 1:
            raise ValueError(f"intervals must be at least 1, got {self.intervals}")


@dataclass(frozen=True)
class InputRecord:
    """Climate input values, or their changes over a timestep."""

    s_n: float = 0.0
    """Net solar radiation (W/m^2)."""
    i_lw: float = 0.0
    """Incoming longwave (thermal) radiation (W/m^2)."""
    t_a: float = 0.0
    """Air temperature (C)."""
    e_a: float = 0.0
    """Vapor pressure (Pa)."""
    u: float = 0.0
    """Wind speed (m/s)."""
    t_g: float = 0.0
    """Soil temperature at depth z_g (C)."""
    ro: float = 0.0
    """Measured runoff (m/s)."""

    def divided(self, intervals: int, include_runoff: bool) -> InputRecord:
        """Share these deltas out over ``intervals`` smaller timesteps.

        Runoff is divided only when ``include_runoff`` is true; otherwise the
        result carries no runoff change.
        """
        if intervals < 1:
            raise ValueError(f"intervals must be at least 1, got {intervals}")
        return InputRecord(
            s_n=self.s_n / intervals,
            i_lw=self.i_lw / intervals,
            t_a=self.t_a / intervals,
            e_a=self.e_a / intervals,
            u=self.u / intervals,
            t_g=self.t_g / intervals,
            ro=self.ro / intervals if include_runoff else 0.0,
        )

    def advanced(self, deltas: InputRecord, include_runoff: bool) -> InputRecord:
        """Return these inputs moved on by one timestep's ``deltas``."""
        return InputRecord(
            s_n=self.s_n + deltas.s_n,
            i_lw=self.i_lw + deltas.i_lw,
            t_a=self.t_a + deltas.t_a,
            e_a=self.e_a + deltas.e_a,
            u=self.u + deltas.u,
            t_g=self.t_g + deltas.t_g,
            ro=self.ro + deltas.ro if include_runoff else self.ro,
        )


@dataclass(frozen=True)
class PrecipRecord:
    """Precipitation over a timestep."""

    m_pp: float = 0.0
    """Total precipitation mass (kg/m^2)."""
    m_rain: float = 0.0
    """Mass of rain in the precipitation (kg/m^2)."""
    m_snow: float = 0.0
    """Mass of snow in the precipitation (kg/m^2)."""
    z_snow: float = 0.0
    """Depth of snow in the precipitation (m)."""

    def divided(self, intervals: int) -> PrecipRecord:
        """Share this precipitation out over ``intervals`` smaller timesteps."""
        if intervals < 1:
            raise ValueError(f"intervals must be at least 1, got {intervals}")
        return replace(
            self,
            m_pp=self.m_pp / intervals,
            m_rain=self.m_rain / intervals,
            m_snow=self.m_snow / intervals,
            z_snow=self.z_snow / intervals,
        )


def in_data_timestep(time: float, current_time: float, data_time_step: float) -> bool:
    """Return True if ``time`` falls within the current data timestep."""
    return current_time <= time < current_time + data_time_step


def time_average(
    avg: float, total_time: float, value: float, time_incr: float
) -> float:
    """Update a time-weighted average with ``value`` held over ``time_incr``."""
    return (avg * total_time + value * time_incr) / (total_time + time_incr)
# snowcover

Pure-Python building blocks for point snowcover modelling: unit
identifiers and conversions, environmental physics relations and
constants, and the bookkeeping for nested model timesteps and the
climate and precipitation inputs that are shared out across them.

No third-party dependencies are needed.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

### `snowcover.units`

- `Units`: an `IntEnum` of unit identifiers (`NONE`, `PERCENT`,
  `CELSIUS`, `KELVIN`, ..., `JOULES_PER_SQUARE_METER`), and
  `valid_units_id(units_id)` to check an integer against them.
- Conversions: `c_to_k`, `k_to_c`, `kg_to_g`, `g_to_kg`, `j_to_cal`,
  `cal_to_j`, `wave_number` (wavelength in um to a rounded wave number
  in 1/cm), `wavelength`, `deg_to_rad`, `rad_to_deg`, `min_to_deg`,
  `sec_to_deg`.
- Bit helpers: `bit(i)` returns `1 << i` and `mask(n)` a mask of the
  lower `n` bits; both raise `ValueError` for out-of-range arguments.
- Constants `FREEZE` (273.16 K) and `DEGS_IN_CIRCLE`.

### `snowcover.envphys`

Physical constants (`MOL_AIR`, `MOL_H2O`, `RGAS`, `CP_AIR`, `RHO_ICE`,
`SEA_LEVEL`, `GRAVITY`, `STEF_BOLTZ`, `VON_KARMAN` and others) and
relations:

- gas law: `gas_density`, `eq_state`
- temperatures: `virtual_temp`, `inv_virtual_temp`, `potential_temp`,
  `inv_potential_temp`
- specific heats: `cp_ice`, `cp_water`
- hydrostatics: `hystat`, `inv_hystat`
- humidity: `spec_hum`, `inv_spec_hum`, `mix_ratio`, `inv_mix_ratio`,
  `ah_to_vp`, `vp_to_ah`
- latent heats: `lh_vap`, `lh_fus`, `lh_sub`
- vapour transfer: `diffusion_coef`, `evap_flux`
- static energy: `dry_static_energy`, `inv_dry_static_energy`,
  `moist_static_energy`, `inv_moist_static_energy`

### `snowcover.timestep`

- `TimestepLevel`: `DATA`, `NORMAL`, `MEDIUM`, `SMALL`; the `next`
  property gives the next finer level and raises `ValueError` on
  `SMALL`.
- `OutputFlag`: `NONE`, `WHOLE`, `DIVIDED`.
- `TimestepInfo`: a level's time step, intervals, mass threshold and
  output flags; a non-positive time step or fewer than one interval
  raises `ValueError`.
- `InputRecord`: frozen record of net solar and incoming longwave
  radiation, air temperature, vapour pressure, wind speed, soil
  temperature and runoff. `divided(intervals, include_runoff)` shares
  deltas out over smaller timesteps; `advanced(deltas, include_runoff)`
  moves inputs on by one timestep.
- `PrecipRecord`: frozen record of total, rain and snow mass and snow
  depth, with `divided(intervals)`.
- `in_data_timestep(time, current_time, data_time_step)` and
  `time_average(avg, total_time, value, time_incr)`.
- Model defaults such as `DEFAULT_MAX_Z_S_0`, `DEFAULT_MAX_H2O_VOL`,
  `MIN_SNOW_TEMP` and the default timestep thresholds.

## Example

```python
from snowcover.envphys import lh_fus, spec_hum
from snowcover.timestep import InputRecord, time_average
from snowcover.units import c_to_k

t = c_to_k(-5.0)
print(lh_fus(t))                   # latent heat of fusion (J/kg)
print(spec_hum(400.0, 80000.0))    # specific humidity

deltas = InputRecord(s_n=40.0, t_a=2.0).divided(4, include_runoff=False)
inputs = InputRecord(s_n=100.0, t_a=-3.0).advanced(deltas, include_runoff=False)
print(inputs.s_n, inputs.t_a)      # 110.0 -2.5

print(time_average(10.0, 3600.0, 20.0, 900.0))
```

Temperatures are in kelvin unless a name says otherwise; masses are
specific masses in kg/m^2, depths in metres and times in seconds.

## What this package does not do

It does not run a snowcover model. There is no snowpack state, no
energy or mass balance for a timestep, no melt, compaction or runoff
calculation, and no command, file input or output. The modules supply
the conversions, physical relations and timestep records such a model
is built from.
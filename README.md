# cornrow

Building blocks for a software DSP audio service and its remote control:
equalizer filter types, biquad coefficient computation, the compact
four-bytes-per-filter BLE payload format, magnitude and phase responses, the
state models behind an equalizer remote, and the service's configuration and
filter storage. Pure Python, no dependencies beyond the standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `cornrow.types`: `FilterType`, `Filter`, `Preset`, `BiQuad`, `IoInterface`,
  `Caps`, `IoInterfaceType`, `CtrlInterfaceType`, `SampleFormat`, the set
  `VALID_SAMPLE_RATES` (44100, 48000), and the Renard tables `FREQUENCY_TABLE`
  (16 Hz to 23.6 kHz) and `Q_TABLE` (0.1 to 50). `IoInterface` packs into one
  byte with `to_byte()` / `IoInterface.from_byte()` and orders by that byte.
- `cornrow.biquad`: `compute_biquad(rate, filter)` returns the normalised
  `BiQuad` of a peak, low pass, high pass, low shelf, high shelf or all-pass
  filter; any other type raises `UnsupportedFilterError`.
- `cornrow.ble`: `CharacteristicType`, the service and characteristic UUID
  constants, `filters_to_ble` / `filters_from_ble` (type, frequency index,
  gain in half-dB steps, Q index per filter), `interfaces_to_ble` /
  `interfaces_from_ble`, and the single-value helpers `freq_to_index`,
  `freq_from_index`, `gain_to_ble`, `gain_from_ble`, `q_to_index`,
  `q_from_index`. `filters_from_ble` returns an empty list when the payload
  length is not a multiple of four.
- `cornrow.plot`: `Plot` computes magnitude (dB) and phase (radians) curves of
  a filter at 44.1 kHz over a list of frequencies, including loudness and
  crossover/subwoofer filters built from several sections.
- `cornrow.appconfig`: `AppConfig` with `ConfigType.LOW`, `MID` or `HIGH`
  ranges and steps for frequency, gain and Q; `plot_frequencies()` gives the
  displayed frequency grid.
- `cornrow.bodeplot`: `BodePlotModel` keeps one `Plot` per filter band.
- `cornrow.filtermodel`: `FilterModel` holds the parametric, loudness,
  crossover and subwoofer bands, the selected band, slider and step editing
  with readouts; `snap()` maps a slider position onto the step grid. Changes
  go to listeners added with `add_filter_listener` and, encoded, to a service
  object with a `set_property(key, value)` method; `on_property_changed`
  takes over groups sent back.
- `cornrow.iomodel`: `IoModel` lists inputs and outputs, tracks the active
  ones and sends the selection to a service; `interface_name()` gives display
  names.
- `cornrow.presetmodel`: `PresetModel` keeps preset names and the active one.
- `cornrow.busyindicator`: `BusyIndicatorModel`, a ring of points jittered by
  normal noise, reproducible with `seed`.
- `cornrow.charts`: curve data for charts: `magnitude_sum`,
  `magnitude_area` (closed polygon down to `AREA_FLOOR`), `phase_sum`,
  `sine_table` and `soft_clip_curves`.
- `cornrow.daemonconfig`: `DaemonConfig` reads a TOML file (default
  `/etc/cornrowd.conf`) with optional `bluetooth_source`, `airplay_source`
  and `tcp_sink` sections into a `PipelineConfig`.
- `cornrow.persistence`: `Persistence` stores filters as JSON (default
  `/var/lib/cornrowd/audio.conf`).
- `cornrow.configmanager`: `ConfigManager` loads stored filters into an
  `AudioConf` implementation, publishes them to a service, applies groups
  written remotely and writes them back; `split_filters()` separates PEQ and
  auxiliary filters.

## Example

```python
from cornrow.types import Filter, FilterType
from cornrow.biquad import compute_biquad
from cornrow.ble import filters_to_ble, filters_from_ble

peak = Filter(FilterType.PEAK, 1000.0, -3.0, 0.707)
coefficients = compute_biquad(44100, peak)

payload = filters_to_ble([peak])       # 4 bytes
restored = filters_from_ble(payload)   # Q snapped to the table: 0.71
```

## What this package does not do

It contains no audio processing pipeline, no Bluetooth or network transport,
no drawing of charts and no command to start a service. The models and
`ConfigManager` talk to any object with a `set_property(key, value)` method
and to an `AudioConf` implementation you provide; the charts module only
computes the curve data to be drawn.
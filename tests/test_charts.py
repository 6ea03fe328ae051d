import math

import pytest

from cornrow.appconfig import AppConfig
from cornrow.charts import (
    AREA_FLOOR,
    magnitude_area,
    magnitude_sum,
    phase_sum,
    sine_table,
    soft_clip_curves,
)
from cornrow.plot import Plot
from cornrow.types import Filter, FilterType


@pytest.fixture
def freqs():
    return AppConfig().plot_frequencies()


def _plot(freqs, filter):
    plot = Plot(freqs)
    plot.set_filter(filter)
    return plot


def test_magnitude_sum_without_plots_is_flat(freqs):
    assert magnitude_sum([], len(freqs)) == [0.0] * len(freqs)


def test_magnitude_sum_of_one_plot_is_its_curve(freqs):
    plot = _plot(freqs, Filter(FilterType.PEAK, 1000.0, 6.0, 1.0))
    assert magnitude_sum([plot], len(freqs)) == pytest.approx(plot.mag_sum())


def test_magnitude_sum_adds_plots(freqs):
    a = _plot(freqs, Filter(FilterType.PEAK, 1000.0, 6.0, 1.0))
    b = _plot(freqs, Filter(FilterType.LOW_SHELF, 100.0, -3.0, 0.7))
    total = magnitude_sum([a, b], len(freqs))
    for got, x, y in zip(total, a.mag_sum(), b.mag_sum()):
        assert got == pytest.approx(x + y)


def test_invalid_plot_contributes_nothing(freqs):
    off = _plot(freqs, Filter(FilterType.INVALID))
    peak = _plot(freqs, Filter(FilterType.PEAK, 500.0, 3.0, 2.0))
    assert magnitude_sum([off, peak], len(freqs)) == pytest.approx(peak.mag_sum())


def test_plot_longer_than_chart_is_rejected(freqs):
    plot = _plot(freqs, Filter(FilterType.PEAK, 1000.0, 6.0, 1.0))
    with pytest.raises(ValueError):
        magnitude_sum([plot], len(freqs) - 1)


def test_negative_point_count_is_rejected():
    with pytest.raises(ValueError):
        magnitude_sum([], -1)


def test_magnitude_area_shape(freqs):
    plot = _plot(freqs, Filter(FilterType.PEAK, 1000.0, 6.0, 1.0))
    n = len(freqs)
    area = magnitude_area([plot], n)
    curve = plot.mag_sum()
    assert len(area) == n + 5
    assert [p[0] for p in area[:n]] == [float(i) for i in range(n)]
    assert [p[1] for p in area[:n]] == pytest.approx(curve)
    assert area[n] == (float(n), pytest.approx(curve[-1]))
    assert area[n + 1] == (float(n), AREA_FLOOR)
    assert area[n + 2] == (-1.0, AREA_FLOOR)
    assert area[n + 3] == (-1.0, pytest.approx(curve[0]))
    assert area[-1] == area[0]


def test_magnitude_area_floor_is_minus_thirty():
    assert magnitude_area([], 1)[2] == (1.0, -30.0)


def test_magnitude_area_needs_points():
    with pytest.raises(ValueError):
        magnitude_area([], 0)


def test_phase_sum_of_one_plot_is_its_curve(freqs):
    plot = _plot(freqs, Filter(FilterType.HIGH_PASS, 200.0, 0.0, 0.707))
    assert phase_sum([plot], len(freqs)) == pytest.approx(plot.phase_sum())


def test_phase_sum_adds_plots(freqs):
    a = _plot(freqs, Filter(FilterType.LOW_PASS, 2000.0, 0.0, 0.707))
    b = _plot(freqs, Filter(FilterType.ALL_PASS, 300.0, 0.0, 1.0))
    total = phase_sum([a, b], len(freqs))
    for got, x, y in zip(total, a.phase_sum(), b.phase_sum()):
        assert got == pytest.approx(x + y)


def test_sine_table_properties():
    table = sine_table()
    assert len(table) == 360
    assert table[0] == 0.0
    assert table[90] == pytest.approx(-1.0)
    assert table[270] == pytest.approx(1.0)
    for i in range(180):
        assert table[i] == pytest.approx(-table[i + 180], abs=1e-12)


def test_sine_table_rejects_negative_size():
    with pytest.raises(ValueError):
        sine_table(-1)


def test_soft_clip_without_clipping_is_identity():
    inputs, clipped = soft_clip_curves(1.5, 0.0)
    assert clipped == pytest.approx(inputs)
    assert inputs == pytest.approx([s * 1.5 for s in sine_table()])


def test_soft_clip_reduces_magnitude():
    inputs, clipped = soft_clip_curves(1.0, 1.0)
    for x, y in zip(inputs, clipped):
        assert abs(y) <= abs(x) + 1e-12
        assert math.copysign(1.0, y) == math.copysign(1.0, x) or x == 0.0


def test_soft_clip_respects_size():
    inputs, clipped = soft_clip_curves(1.0, 0.5, 10)
    assert len(inputs) == 10
    assert len(clipped) == 10
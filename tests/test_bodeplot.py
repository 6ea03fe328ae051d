import pytest

from cornrow.appconfig import AppConfig, ConfigType
from cornrow.bodeplot import BodePlotModel
from cornrow.types import FREQUENCY_TABLE, FilterType


@pytest.fixture
def config():
    return AppConfig(ConfigType.LOW)


def test_new_model_has_no_plots(config):
    assert BodePlotModel(config).plots() == []


def test_setting_later_band_creates_earlier_plots(config):
    model = BodePlotModel(config)
    model.set_filter(2, FilterType.PEAK, 144, 3.0, 1.0)
    plots = model.plots()
    assert len(plots) == 3
    assert plots[0].mags() == []
    assert plots[1].mags() == []
    assert len(plots[2].mags()) == 1


def test_setting_same_band_twice_does_not_grow(config):
    model = BodePlotModel(config)
    model.set_filter(1, FilterType.PEAK, 144, 3.0, 1.0)
    model.set_filter(1, FilterType.INVALID, 144, 0.0, 1.0)
    assert len(model.plots()) == 2
    assert model.plots()[1].mags() == []


def test_peak_uses_full_table_frequency(config):
    model = BodePlotModel(config)
    model.set_filter(0, FilterType.PEAK, config.freq_default, 6.0, 1.0)
    freqs = config.plot_frequencies()
    point = freqs.index(FREQUENCY_TABLE[config.freq_default])
    assert model.plots()[0].mags()[0][point] == pytest.approx(6.0, abs=1e-9)


def test_curves_sample_plot_frequencies(config):
    model = BodePlotModel(config)
    model.set_filter(0, FilterType.CROSSOVER_LR2, 100, 0.0, 0.707)
    plot = model.plots()[0]
    assert len(plot.mags()) == 2
    assert all(len(curve) == len(config.plot_frequencies()) for curve in plot.mags())


def test_frequency_index_out_of_range_raises(config):
    model = BodePlotModel(config)
    with pytest.raises(IndexError):
        model.set_filter(0, FilterType.PEAK, len(FREQUENCY_TABLE), 0.0, 1.0)


def test_negative_band_raises(config):
    model = BodePlotModel(config)
    with pytest.raises(IndexError):
        model.set_filter(-1, FilterType.PEAK, 144, 0.0, 1.0)


def test_unknown_filter_type_raises(config):
    model = BodePlotModel(config)
    with pytest.raises(ValueError):
        model.set_filter(0, 99, 144, 0.0, 1.0)
import math

import pytest

from cornrow.busyindicator import BusyIndicatorModel


def distances(model):
    cx, cy = model.center
    return [math.hypot(x - cx, y - cy) for x, y in zip(model.x_coords(), model.y_coords())]


def test_default_point_count():
    model = BusyIndicatorModel(seed=1)
    assert len(model.x_coords()) == 7
    assert len(model.y_coords()) == 7


def test_same_seed_gives_same_points():
    a = BusyIndicatorModel(seed=42)
    b = BusyIndicatorModel(seed=42)
    assert a.x_coords() == b.x_coords()
    assert a.y_coords() == b.y_coords()


def test_randomize_changes_points():
    model = BusyIndicatorModel(seed=3)
    before = model.x_coords()
    model.randomize()
    after = model.x_coords()
    assert len(after) == len(before)
    assert after != before


def test_zero_deviation_puts_points_on_circle():
    model = BusyIndicatorModel(center=(10, 20), radius=5.0, num_points=4, seed=0)
    model.set_rho_deviation(0.0)
    model.set_theta_deviation(0.0)
    model.randomize()
    assert distances(model) == pytest.approx([5.0] * 4)


def test_zero_deviation_first_point_lower_left():
    model = BusyIndicatorModel(center=(0, 0), radius=1.0, num_points=8, seed=0)
    model.set_rho_deviation(0.0)
    model.set_theta_deviation(0.0)
    model.randomize()
    x0, y0 = model.x_coords()[0], model.y_coords()[0]
    assert x0 == pytest.approx(y0)
    assert x0 < 0


def test_coords_are_copies():
    model = BusyIndicatorModel(seed=5)
    first = model.x_coords()[0]
    xs = model.x_coords()
    xs[0] = 1e9
    assert model.x_coords()[0] == first


def test_negative_deviation_raises():
    model = BusyIndicatorModel(seed=5)
    with pytest.raises(ValueError):
        model.set_rho_deviation(-0.1)
    with pytest.raises(ValueError):
        model.set_theta_deviation(-0.1)


def test_zero_points_raises():
    with pytest.raises(ValueError):
        BusyIndicatorModel(num_points=0)
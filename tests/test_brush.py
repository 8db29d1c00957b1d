import numpy as np
import pytest

from stable_fluids import Fluid, Params
from stable_fluids.brush import brush_offsets, splat


def test_offsets_cover_disc():
    offsets = list(brush_offsets(2))
    assert len(offsets) == 13
    assert all(i * i + j * j <= 4 for i, j, _ in offsets)
    weights = {(i, j): w for i, j, w in offsets}
    assert weights[(0, 0)] == 1.0
    assert weights[(2, 0)] == 0.0
    assert weights[(1, 1)] == pytest.approx(1.0 - np.sqrt(2.0) / 2.0)


def test_radius_below_one_uses_radius_one():
    assert len(list(brush_offsets(0))) == 5


def test_splat_injects_weighted_dye_and_flat_force():
    fluid = Fluid(Params(n=16))
    splat(fluid, 8, 8, 3, dye=10.0, force=(0.5, -1.0))
    total = sum(w for _, _, w in brush_offsets(3)) * 10.0
    assert fluid.density.sum() == pytest.approx(total, rel=1e-5)
    assert fluid.density[8, 8] == pytest.approx(10.0)
    assert fluid.velocity_x[8, 8] == pytest.approx(0.5)
    assert fluid.velocity_y[9, 8] == pytest.approx(-1.0)
    assert not fluid.temperature.any()


def test_splat_heat():
    fluid = Fluid(Params(n=16))
    splat(fluid, 8, 8, 2, dye=10.0, heat=True)
    assert fluid.temperature[8, 8] == pytest.approx(8.0)
    assert fluid.temperature.sum() == pytest.approx(0.8 * fluid.density.sum(), rel=1e-5)

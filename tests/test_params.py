import numpy as np
import pytest

from stable_fluids.params import PRESETS, Params, SliderSettings, StepConfig, apply_preset


def test_defaults_validate():
    config = StepConfig()
    assert config.validate() is config
    Params()


@pytest.mark.parametrize("kwargs", [
    {"buoyancy": -0.1},
    {"cooling": 0.0},
    {"damping": 1.5},
    {"fade": -1.0},
    {"vorticity": -2.0},
    {"iterations": 0},
    {"iterations": 2.0},
    {"burn_rate": -1.0},
])
def test_out_of_range_step_config_rejected(kwargs):
    with pytest.raises(ValueError):
        StepConfig(**kwargs).validate()


def test_slider_mapping():
    config = StepConfig.from_sliders(SliderSettings(), iterations=6)
    assert config.damping == pytest.approx(0.99)
    assert config.fade == pytest.approx(0.995)
    assert config.cooling == pytest.approx(0.99)
    assert config.vorticity == pytest.approx(10.0)
    assert config.iterations == 6
    config.validate()


def test_slider_extremes():
    heavy = SliderSettings(velocity_damping=1.0, density_fade=1.0, cooling_rate=1.0,
                           vorticity_strength=1.0)
    config = StepConfig.from_sliders(heavy)
    assert config.damping == pytest.approx(0.9)
    assert config.fade == pytest.approx(0.9)
    assert config.vorticity == pytest.approx(50.0)

    none = StepConfig.from_sliders(SliderSettings(velocity_damping=0.0, density_fade=0.0))
    assert none.damping == 1.0 and none.fade == 1.0


def test_physical_conversions():
    s = SliderSettings()
    assert s.physical_viscosity() == pytest.approx(5e-7)
    assert s.physical_dye() == pytest.approx(830.0)
    assert s.physical_force() == pytest.approx(0.44)


def test_apply_preset_returns_copy():
    base = SliderSettings(brush_radius=7)
    fire = apply_preset(base, "fire")
    assert fire.buoyancy == pytest.approx(0.15)
    assert fire.vorticity_strength == pytest.approx(0.8)
    assert fire.brush_radius == 7
    assert base.buoyancy == 0.0


def test_every_preset_maps_to_a_valid_config():
    for name in PRESETS:
        StepConfig.from_sliders(apply_preset(SliderSettings(), name)).validate()


def test_unknown_preset():
    with pytest.raises(ValueError, match="unknown preset"):
        apply_preset(SliderSettings(), "lava")


def test_numpy_integers_accepted():
    assert Params(n=np.int64(16)).n == 16
    StepConfig(iterations=np.int32(4)).validate()

"""
Solver configuration.

Params is fixed at construction (except viscosity/diffusion, which the Fluid
lets callers change between steps). StepConfig carries the per-frame knobs.
SliderSettings and PRESETS describe the 0-1 control surface a UI exposes and
how it maps onto physical values.
"""

import numbers
from dataclasses import dataclass, fields, replace

from .grid import Grid


def lerp(t, a, b):
    return a + t * (b - a)


@dataclass
class Params:
    n: int = 128              # interior cells per side
    dt: float = 0.1           # fixed timestep
    diffusion: float = 0.0    # scalar diffusion rate
    viscosity: float = 5e-7   # velocity diffusion rate

    def __post_init__(self):
        Grid(self.n)  # validates resolution
        if not self.dt > 0.0:
            raise ValueError(f"dt must be positive, got {self.dt}")
        if self.diffusion < 0.0:
            raise ValueError(f"diffusion must be >= 0, got {self.diffusion}")
        if self.viscosity < 0.0:
            raise ValueError(f"viscosity must be >= 0, got {self.viscosity}")


@dataclass
class StepConfig:
    buoyancy: float = 0.0     # upward acceleration per unit temperature
    cooling: float = 0.99     # temperature multiplier per frame
    damping: float = 0.99     # velocity multiplier per frame
    fade: float = 0.995       # density multiplier per frame
    vorticity: float = 10.0   # confinement strength
    iterations: int = 8       # relaxation sweeps per linear solve
    burn_rate: float = 0.0    # density subtracted before fading

    def validate(self):
        if self.buoyancy < 0.0:
            raise ValueError(f"buoyancy must be >= 0, got {self.buoyancy}")
        for name in ("cooling", "damping", "fade"):
            value = getattr(self, name)
            if not 0.0 < value <= 1.0:
                raise ValueError(f"{name} must be in (0, 1], got {value}")
        if self.vorticity < 0.0:
            raise ValueError(f"vorticity must be >= 0, got {self.vorticity}")
        if isinstance(self.iterations, bool) or not isinstance(self.iterations, numbers.Integral) \
                or self.iterations < 1:
            raise ValueError(f"iterations must be a positive int, got {self.iterations!r}")
        if self.burn_rate < 0.0:
            raise ValueError(f"burn_rate must be >= 0, got {self.burn_rate}")
        return self

    @classmethod
    def from_sliders(cls, settings, iterations=8, burn_rate=0.0):
        # 0 on a decay slider means "no loss" (1.0), 1 means heavy loss (0.9)
        return cls(
            buoyancy=settings.buoyancy,
            cooling=lerp(settings.cooling_rate, 1.0, 0.9),
            damping=lerp(settings.velocity_damping, 1.0, 0.9),
            fade=lerp(settings.density_fade, 1.0, 0.9),
            vorticity=lerp(settings.vorticity_strength, 0.0, 50.0),
            iterations=iterations,
            burn_rate=burn_rate,
        )


@dataclass
class SliderSettings:
    viscosity: float = 0.1
    diffusion: float = 0.0
    dye_amount: float = 0.4
    mouse_force: float = 0.2
    buoyancy: float = 0.0
    cooling_rate: float = 0.1
    vorticity_strength: float = 0.2
    velocity_damping: float = 0.1
    density_fade: float = 0.05
    brush_radius: int = 3

    def physical_viscosity(self):
        return lerp(self.viscosity, 0.0, 0.000005)

    def physical_dye(self):
        return lerp(self.dye_amount, 50.0, 2000.0)

    def physical_force(self):
        return lerp(self.mouse_force, 0.05, 2.0)


PRESETS = {
    "fluid": {"buoyancy": 0.0, "cooling_rate": 0.1, "vorticity_strength": 0.1,
              "density_fade": 0.05, "velocity_damping": 0.1},
    "fire": {"buoyancy": 0.15, "cooling_rate": 0.4, "vorticity_strength": 0.8,
             "density_fade": 0.1, "velocity_damping": 0.15},
    "smoke": {"buoyancy": 0.04, "cooling_rate": 0.2, "vorticity_strength": 0.3,
              "density_fade": 0.08, "velocity_damping": 0.2},
    "thick": {"viscosity": 0.5, "density_fade": 0.02, "mouse_force": 0.1,
              "velocity_damping": 0.3},
}


def apply_preset(settings, name):
    """Return a copy of settings with the named preset's values applied."""
    try:
        preset = PRESETS[name]
    except KeyError:
        raise ValueError(f"unknown preset {name!r}, expected one of {sorted(PRESETS)}") from None
    known = {f.name for f in fields(settings)}
    return replace(settings, **{k: v for k, v in preset.items() if k in known})

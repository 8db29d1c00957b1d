"""
Real-time 2D incompressible fluid solver (Stam's "Stable Fluids").

Density, temperature and velocity live on an N x N grid with a one-cell halo
and are advanced by diffusion, semi-Lagrangian advection, pressure
projection, buoyancy, vorticity confinement and decay.
"""

from .boundary import BoundaryKind, set_boundary
from .fluid import Fluid, Stage
from .grid import Grid
from .log import enable as enable_logging
from .params import PRESETS, Params, SliderSettings, StepConfig, apply_preset

__version__ = "0.1.0"

__all__ = [
    'BoundaryKind',
    'Fluid',
    'Grid',
    'PRESETS',
    'Params',
    'SliderSettings',
    'Stage',
    'StepConfig',
    'apply_preset',
    'enable_logging',
    'set_boundary',
]

import logging
import time
from enum import Enum

from .boundary import BoundaryKind
from .fields import FluidFields
from .forces import apply_buoyancy, apply_decay, vorticity_confinement
from .grid import Grid
from .params import Params, StepConfig
from .solver import advect, diffuse, project

log = logging.getLogger(__name__)


class Stage(Enum):
    IDLE = "idle"
    FORCES_APPLIED = "forces_applied"
    VELOCITY_DIFFUSED = "velocity_diffused"
    VELOCITY_PROJECTED = "velocity_projected"
    VELOCITY_ADVECTED = "velocity_advected"
    VELOCITY_PROJECTED_FINAL = "velocity_projected_final"
    SCALARS_DIFFUSED = "scalars_diffused"
    SCALARS_ADVECTED = "scalars_advected"
    DECAYED = "decayed"


def _readonly(a):
    v = a.view()
    v.flags.writeable = False
    return v


class Fluid:
    """
    Incompressible 'Stable Fluids' solver for density, temperature and
    velocity on an N x N grid with a one-cell halo.

    Callers inject sources between steps through add_density, add_temperature
    and add_velocity, then call step() once per frame. The exposed buffers are
    read-only views and must not be held across a step.

    on_stage, if given, is called with each Stage as the step reaches it.
    """
    def __init__(self, params=None, on_stage=None):
        self.on_stage = on_stage
        self.params = params if params is not None else Params()
        self.grid = Grid(self.params.n)
        self.dt = self.params.dt
        self.diffusion = self.params.diffusion
        self.viscosity = self.params.viscosity

        self.fields = FluidFields(self.grid)
        self.frame = 0
        self.stage = Stage.IDLE
        log.debug("fluid created: n=%d dt=%g diffusion=%g viscosity=%g",
                  self.grid.n, self.dt, self.diffusion, self.viscosity)

    def _enter(self, stage):
        self.stage = stage
        if self.on_stage is not None:
            self.on_stage(stage)

    @property
    def n(self):
        return self.grid.n

    def index(self, x, y):
        return self.grid.index(x, y)

    # ---- Read-only state ----
    @property
    def density(self):
        return _readonly(self.fields.density)

    @property
    def temperature(self):
        return _readonly(self.fields.temperature)

    @property
    def velocity_x(self):
        return _readonly(self.fields.vx)

    @property
    def velocity_y(self):
        return _readonly(self.fields.vy)

    # ---- External sources ----
    def add_density(self, x, y, amount):
        x, y = self.grid.clamp(x, y)
        self.fields.density[y, x] += amount

    def add_temperature(self, x, y, amount):
        x, y = self.grid.clamp(x, y)
        self.fields.temperature[y, x] += amount

    def add_velocity(self, x, y, dx, dy):
        x, y = self.grid.clamp(x, y)
        self.fields.vx[y, x] += dx
        self.fields.vy[y, x] += dy

    # ---- Steps ----
    def vel_step(self, config):
        f = self.fields
        dt = self.dt
        iters = config.iterations

        apply_buoyancy(f.vy, f.temperature, config.buoyancy)
        vorticity_confinement(f.vx, f.vy, f.curl, config.vorticity, dt)
        self._enter(Stage.FORCES_APPLIED)

        f.vx0[:, :] = f.vx
        f.vy0[:, :] = f.vy
        diffuse(BoundaryKind.VELOCITY_X, f.vx, f.vx0, self.viscosity, dt, iters)
        diffuse(BoundaryKind.VELOCITY_Y, f.vy, f.vy0, self.viscosity, dt, iters)
        self._enter(Stage.VELOCITY_DIFFUSED)

        project(f.vx, f.vy, f.pressure, f.divergence, iters)
        self._enter(Stage.VELOCITY_PROJECTED)

        # Both components trace through the same pre-advection velocity
        f.vx0[:, :] = f.vx
        f.vy0[:, :] = f.vy
        advect(BoundaryKind.VELOCITY_X, f.vx, f.vx0, f.vx0, f.vy0, dt)
        advect(BoundaryKind.VELOCITY_Y, f.vy, f.vy0, f.vx0, f.vy0, dt)
        self._enter(Stage.VELOCITY_ADVECTED)

        project(f.vx, f.vy, f.pressure, f.divergence, iters)
        self._enter(Stage.VELOCITY_PROJECTED_FINAL)

    def scalar_step(self, config):
        f = self.fields
        dt = self.dt
        iters = config.iterations
        scalars = ((f.density, f.density0), (f.temperature, f.temperature0))

        for x, x0 in scalars:
            x0[:, :] = x
            diffuse(BoundaryKind.SCALAR, x, x0, self.diffusion, dt, iters)
        self._enter(Stage.SCALARS_DIFFUSED)

        for x, x0 in scalars:
            x0[:, :] = x
            advect(BoundaryKind.SCALAR, x, x0, f.vx, f.vy, dt)
        self._enter(Stage.SCALARS_ADVECTED)

    def step(self, config=None):
        config = config if config is not None else StepConfig()
        start = time.perf_counter()

        self.vel_step(config)
        self.scalar_step(config)
        apply_decay(self.fields, config)
        self._enter(Stage.DECAYED)

        self.frame += 1
        self._enter(Stage.IDLE)
        log.debug("frame %d stepped in %.2f ms", self.frame,
                  (time.perf_counter() - start) * 1000.0)

    def reset(self):
        self.fields.reset()
        self.frame = 0
        self.stage = Stage.IDLE
        log.debug("fluid reset")

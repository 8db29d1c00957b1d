import numpy as np

from .boundary import BoundaryKind, set_boundary
from .solver import EPSILON


# ---- Buoyancy (heat rises; up is -y) ----
def apply_buoyancy(vy, temperature, coefficient):
    if coefficient <= 0.0:
        return
    vy -= temperature * coefficient
    set_boundary(BoundaryKind.VELOCITY_Y, vy)


# ---- Vorticity confinement ----
def compute_curl(vx, vy, out):
    # w = dvy/dx - dvx/dy
    out[1:-1, 1:-1] = 0.5 * (
        (vy[1:-1, 2:] - vy[1:-1, 0:-2]) -
        (vx[2:, 1:-1] - vx[0:-2, 1:-1])
    )
    set_boundary(BoundaryKind.SCALAR, out)


def vorticity_confinement(vx, vy, curl, strength, dt):
    """
    Push velocity along N x w, where N is the normalised gradient of |w|.

    curl is filled before velocity is touched and only read afterwards.
    """
    if strength <= 0.0:
        return
    compute_curl(vx, vy, curl)

    absw = np.abs(curl)
    gx = 0.5 * (absw[1:-1, 2:] - absw[1:-1, 0:-2])
    gy = 0.5 * (absw[2:, 1:-1] - absw[0:-2, 1:-1])
    mag = np.sqrt(gx * gx + gy * gy) + EPSILON

    w = curl[1:-1, 1:-1] * (strength * dt)
    vx[1:-1, 1:-1] += (gy / mag) * w
    vy[1:-1, 1:-1] -= (gx / mag) * w

    set_boundary(BoundaryKind.VELOCITY_X, vx)
    set_boundary(BoundaryKind.VELOCITY_Y, vy)


# ---- Decay ----
def apply_decay(fields, config):
    fields.vx *= config.damping
    fields.vy *= config.damping

    if config.burn_rate > 0.0:
        # Combustion-style depletion before the multiplicative fade
        np.subtract(fields.density, config.burn_rate, out=fields.density)
        np.maximum(fields.density, 0.0, out=fields.density)
    fields.density *= config.fade

    if config.buoyancy <= 0.0:
        fields.temperature.fill(0.0)
    else:
        fields.temperature *= config.cooling

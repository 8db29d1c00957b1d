import numpy as np


def total_density(fluid):
    return float(fluid.density[fluid.grid.interior].sum(dtype=np.float64))


def kinetic_energy(fluid):
    inner = fluid.grid.interior
    vx = fluid.velocity_x[inner].astype(np.float64)
    vy = fluid.velocity_y[inner].astype(np.float64)
    return float(0.5 * np.sum(vx * vx + vy * vy))


def velocity_divergence(vx, vy):
    """Central-difference divergence on the interior, with grid spacing 1/N."""
    n = vx.shape[0] - 2
    return 0.5 * n * (
        (vx[1:-1, 2:] - vx[1:-1, 0:-2]).astype(np.float64) +
        (vy[2:, 1:-1] - vy[0:-2, 1:-1]).astype(np.float64)
    )


def max_divergence(fluid):
    return float(np.abs(velocity_divergence(fluid.velocity_x, fluid.velocity_y)).max())


def is_finite(fluid):
    return all(bool(np.isfinite(buf).all()) for _, buf in fluid.fields)


def summary(fluid):
    return {
        "frame": fluid.frame,
        "density": total_density(fluid),
        "max_temperature": float(fluid.temperature.max()),
        "energy": kinetic_energy(fluid),
        "divergence": max_divergence(fluid),
        "finite": is_finite(fluid),
    }

"""
Stable Fluids kernels (Stam 1999) on padded (N+2, N+2) numpy buffers.

Every kernel writes its target in place and re-applies the boundary policy
before returning, so the next stage always reads a consistent halo.
"""

from functools import lru_cache

import numpy as np

from .boundary import BoundaryKind, set_boundary

# Floor for relaxation denominators and gradient normalisation.
EPSILON = 1e-6


@lru_cache(maxsize=8)
def _wavefronts(n):
    """
    Interior cells grouped by anti-diagonal x + y = d, for d = 2 .. 2n.

    In a row-major sweep a cell reads its left and upper neighbours already
    updated and its right and lower neighbours not yet updated, so every
    cell of one diagonal depends only on the diagonal before it.
    """
    fronts = []
    for d in range(2, 2 * n + 1):
        ys = np.arange(max(1, d - n), min(n, d - 1) + 1)
        xs = d - ys
        ys.flags.writeable = False
        xs.flags.writeable = False
        fronts.append((ys, xs))
    return tuple(fronts)


@lru_cache(maxsize=8)
def _cell_centres(n):
    J, I = np.mgrid[1:n + 1, 1:n + 1].astype(np.float64)
    I.flags.writeable = False
    J.flags.writeable = False
    return I, J


# ---- Linear solve ----
def lin_solve(kind, x, x0, a, c, iterations):
    """
    Gauss-Seidel relaxation of x = (x0 + a * sum4(x)) / c on the interior.

    Each sweep visits cells in row-major order. It is evaluated one
    anti-diagonal at a time, which gives the same values as the plain
    row-by-row loop with one vectorised update per diagonal.
    """
    inv_c = 1.0 / max(c, EPSILON)
    n = x.shape[0] - 2
    fronts = _wavefronts(n)
    for _ in range(iterations):
        for ys, xs in fronts:
            x[ys, xs] = (
                x0[ys, xs] + a * (
                    x[ys, xs - 1] + x[ys, xs + 1] +
                    x[ys - 1, xs] + x[ys + 1, xs]
                )
            ) * inv_c
        set_boundary(kind, x)


def diffuse(kind, x, x0, rate, dt, iterations):
    n = x.shape[0] - 2
    a = dt * rate * n * n
    lin_solve(kind, x, x0, a, 1 + 4 * a, iterations)


# ---- Semi-Lagrangian advection ----
def bilinear(field, x, y):
    """
    Sample field (indexed [y, x]) at fractional positions x, y.

    Positions must already lie in [0.5, N + 0.5]; the floor and the integer
    cast are explicit so that x = k + 0.5 reads cells k and k + 1 with equal
    weight.
    """
    i0 = np.floor(x).astype(np.intp)
    j0 = np.floor(y).astype(np.intp)
    i1 = i0 + 1
    j1 = j0 + 1

    s1 = x - i0
    s0 = 1.0 - s1
    t1 = y - j0
    t0 = 1.0 - t1

    return (
        t0 * (s0 * field[j0, i0] + s1 * field[j0, i1]) +
        t1 * (s0 * field[j1, i0] + s1 * field[j1, i1])
    )


def advect(kind, d, d0, vx, vy, dt):
    n = d.shape[0] - 2
    dt0 = dt * n
    I, J = _cell_centres(n)

    # Backtrace
    x = I - dt0 * vx[1:-1, 1:-1]
    y = J - dt0 * vy[1:-1, 1:-1]

    # Clamp so all four bilinear neighbours exist
    np.clip(x, 0.5, n + 0.5, out=x)
    np.clip(y, 0.5, n + 0.5, out=y)

    d[1:-1, 1:-1] = bilinear(d0, x, y)
    set_boundary(kind, d)


# ---- Projection ----
def divergence(vx, vy, out):
    """Store -0.5/N times the central-difference divergence in out."""
    n = vx.shape[0] - 2
    out[1:-1, 1:-1] = -0.5 * (
        vx[1:-1, 2:] - vx[1:-1, 0:-2] +
        vy[2:, 1:-1] - vy[0:-2, 1:-1]
    ) / n


def project(vx, vy, p, div, iterations):
    n = vx.shape[0] - 2
    divergence(vx, vy, div)
    p.fill(0.0)
    set_boundary(BoundaryKind.SCALAR, div)
    set_boundary(BoundaryKind.SCALAR, p)

    lin_solve(BoundaryKind.SCALAR, p, div, 1.0, 4.0, iterations)

    # Subtract pressure gradient
    vx[1:-1, 1:-1] -= 0.5 * n * (p[1:-1, 2:] - p[1:-1, 0:-2])
    vy[1:-1, 1:-1] -= 0.5 * n * (p[2:, 1:-1] - p[0:-2, 1:-1])
    set_boundary(BoundaryKind.VELOCITY_X, vx)
    set_boundary(BoundaryKind.VELOCITY_Y, vy)

import math


def brush_offsets(radius):
    """Yield (i, j, weight) for a disc of the given radius, weight 1 at the centre falling to 0 at the rim."""
    r = max(1, int(radius))
    for i in range(-r, r + 1):
        for j in range(-r, r + 1):
            if i * i + j * j <= r * r:
                yield i, j, 1.0 - math.sqrt(i * i + j * j) / r


def splat(fluid, x, y, radius, dye=0.0, force=(0.0, 0.0), heat=False):
    """Inject dye, velocity and optionally heat around grid cell (x, y)."""
    dx, dy = force
    for i, j, weight in brush_offsets(radius):
        amount = dye * weight
        fluid.add_density(x + i, y + j, amount)
        fluid.add_velocity(x + i, y + j, dx, dy)
        if heat:
            fluid.add_temperature(x + i, y + j, amount * 0.8)

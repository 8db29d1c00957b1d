from enum import IntEnum


class BoundaryKind(IntEnum):
    SCALAR = 0
    VELOCITY_X = 1
    VELOCITY_Y = 2


def set_boundary(kind, x):
    """
    Fill the halo ring of x from its interior neighbours.

    Scalars copy (insulated walls). The velocity component normal to a wall
    is negated there, so nothing flows through it. Corners average their two
    neighbouring halo cells.
    """
    # Left / right walls (columns)
    if kind == BoundaryKind.VELOCITY_X:
        x[1:-1, 0] = -x[1:-1, 1]
        x[1:-1, -1] = -x[1:-1, -2]
    else:
        x[1:-1, 0] = x[1:-1, 1]
        x[1:-1, -1] = x[1:-1, -2]

    # Top / bottom walls (rows)
    if kind == BoundaryKind.VELOCITY_Y:
        x[0, 1:-1] = -x[1, 1:-1]
        x[-1, 1:-1] = -x[-2, 1:-1]
    else:
        x[0, 1:-1] = x[1, 1:-1]
        x[-1, 1:-1] = x[-2, 1:-1]

    # Corners
    x[0, 0] = 0.5 * (x[0, 1] + x[1, 0])
    x[0, -1] = 0.5 * (x[0, -2] + x[1, -1])
    x[-1, 0] = 0.5 * (x[-1, 1] + x[-2, 0])
    x[-1, -1] = 0.5 * (x[-1, -2] + x[-2, -1])

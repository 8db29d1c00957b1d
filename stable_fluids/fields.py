import logging

import numpy as np

log = logging.getLogger(__name__)

# Buffers owned by FluidFields, in allocation order.
BUFFERS = (
    "vx", "vy", "vx0", "vy0",
    "density", "density0",
    "temperature", "temperature0",
    "pressure", "divergence", "curl",
)


class FluidFields:
    """
    Every numeric buffer of the solver. The *0 buffers are the read-source
    copies used while the live buffer is written; pressure/divergence are
    projection scratch and curl is the vorticity snapshot.
    """
    def __init__(self, grid, dtype=np.float32):
        self.grid = grid
        self.dtype = dtype
        for name in BUFFERS:
            setattr(self, name, np.zeros(grid.shape, dtype=dtype))
        log.debug("allocated %d buffers of shape %s", len(BUFFERS), grid.shape)

    def reset(self):
        for name in BUFFERS:
            getattr(self, name).fill(0.0)

    def __iter__(self):
        for name in BUFFERS:
            yield name, getattr(self, name)

import numbers
from dataclasses import dataclass


def clamp(x, lo, hi):
    return lo if x < lo else hi if x > hi else x


@dataclass(frozen=True)
class Grid:
    """
    N x N interior plus a one-cell halo ring. Buffers have shape (N+2, N+2)
    and are indexed field[y, x], so index(x, y) is the offset into
    field.ravel().
    """
    n: int

    def __post_init__(self):
        if isinstance(self.n, bool) or not isinstance(self.n, numbers.Integral):
            raise ValueError(f"grid resolution must be an int, got {self.n!r}")
        if self.n <= 0:
            raise ValueError(f"grid resolution must be positive, got {self.n}")
        object.__setattr__(self, "n", int(self.n))

    @property
    def size(self):
        return self.n + 2

    @property
    def shape(self):
        return (self.size, self.size)

    @property
    def interior(self):
        return (slice(1, self.n + 1), slice(1, self.n + 1))

    def clamp(self, x, y):
        hi = self.n + 1
        return clamp(int(x), 0, hi), clamp(int(y), 0, hi)

    def index(self, x, y):
        x, y = self.clamp(x, y)
        return x + self.size * y

import numpy as np
import pytest

from stable_fluids.grid import Grid, clamp


def test_out_of_range_coordinates_clamp_to_nearest_cell():
    g = Grid(4)
    for x in range(-3, 9):
        for y in range(-3, 9):
            assert g.index(x, y) == g.index(clamp(x, 0, 5), clamp(y, 0, 5))
    assert g.index(-100, -100) == 0
    assert g.index(100, 100) == 6 * 6 - 1


def test_in_range_indices_are_unique_and_dense():
    g = Grid(4)
    offsets = [g.index(x, y) for y in range(6) for x in range(6)]
    assert offsets == list(range(36))


def test_index_addresses_row_major_buffer():
    g = Grid(3)
    field = np.arange(25).reshape(g.shape)
    assert field.ravel()[g.index(2, 4)] == field[4, 2]
    assert field.ravel()[g.index(7, -1)] == field[0, 4]


@pytest.mark.parametrize("n", [0, -1, 2.5, True])
def test_bad_resolution_fails_fast(n):
    with pytest.raises(ValueError):
        Grid(n)


def test_shape_and_interior():
    g = Grid(5)
    assert g.shape == (7, 7)
    a = np.zeros(g.shape)
    assert a[g.interior].shape == (5, 5)


def test_numpy_integer_resolution_accepted():
    g = Grid(np.int64(8))
    assert type(g.n) is int
    assert g.shape == (10, 10)
    assert g.index(np.int32(3), np.int64(2)) == 3 + 10 * 2

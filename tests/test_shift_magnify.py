import numpy as np
import pytest

from esrrf.shift_magnify import cubic, interpolate, shift_magnify


def test_cubic_centre_is_one():
    assert cubic(0.0) == pytest.approx(1.0)


@pytest.mark.parametrize("v", [1.0, 2.0, 3.5, -2.0, 10.0])
def test_cubic_vanishes_at_and_beyond_integers(v):
    assert cubic(v) == pytest.approx(0.0)


@pytest.mark.parametrize("v", [0.2, 0.75, 1.3, 1.9])
def test_cubic_is_symmetric(v):
    assert cubic(-v) == pytest.approx(cubic(v))


@pytest.mark.parametrize("t", [0.1, 0.37, 0.5, 0.83])
def test_cubic_partition_of_unity(t):
    assert sum(cubic(t + k) for k in range(-3, 4)) == pytest.approx(1.0)


@pytest.mark.parametrize("r,c", [(-0.1, 1.0), (1.0, -0.1), (6.0, 1.0), (1.0, 5.0)])
def test_interpolate_outside_image_is_zero(r, c):
    image = np.ones((6, 5))
    assert interpolate(image, r, c) == 0.0


def test_interpolate_reproduces_linear_ramp():
    image = np.tile(np.arange(10.0)[:, None], (1, 8))
    r = 4.3
    assert interpolate(image, r, 3.0) == pytest.approx(r - 0.5)


def test_shift_magnify_shape():
    image = np.zeros((5, 4))
    out = shift_magnify(image, 0.0, 0.0, 2.5, 2.5)
    assert out.shape == (int(5 * 2.5), int(4 * 2.5))


def test_shift_magnify_matches_pointwise_interpolation():
    rng = np.random.default_rng(1)
    image = rng.random((6, 7))
    mag = 3.0
    shift = 0.25
    out = shift_magnify(image, shift, shift, mag, mag)
    for i in range(out.shape[0]):
        for j in range(out.shape[1]):
            expected = interpolate(image, i / mag - shift, j / mag - shift)
            assert out[i, j] == pytest.approx(expected, abs=1e-12)


def test_constant_image_stays_constant_inside():
    image = np.full((8, 8), 0.7)
    out = shift_magnify(image, 0.0, 0.0, 2.0, 2.0)
    assert np.allclose(out[4:-4, 4:-4], 0.7)


def test_large_shift_gives_zeros():
    image = np.ones((4, 4))
    out = shift_magnify(image, 100.0, 0.0, 2.0, 2.0)
    assert out.shape == (8, 8)
    assert float(np.abs(out).max()) == 0.0


def test_rejects_non_2d_input():
    with pytest.raises(ValueError):
        shift_magnify(np.zeros(5), 0.0, 0.0, 2.0, 2.0)


def test_rejects_non_positive_magnification():
    with pytest.raises(ValueError):
        shift_magnify(np.zeros((3, 3)), 0.0, 0.0, 0.0, 2.0)
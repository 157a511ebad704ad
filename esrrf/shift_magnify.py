"""Bicubic shifting and magnification of single images."""

import math

import numpy as np

_A = 0.5


def cubic(v):
    """Return the bicubic interpolation kernel evaluated at ``v``."""
    v = abs(v)
    if v < 1:
        return v * v * (v * (-_A + 2) + (_A - 3)) + 1
    if v < 2:
        return -_A * v * v * v + 5 * _A * v * v - 8 * _A * v + 4 * _A
    return 0.0


def _cubic_array(v):
    v = np.abs(v)
    inner = v * v * (v * (-_A + 2) + (_A - 3)) + 1
    outer = -_A * v**3 + 5 * _A * v * v - 8 * _A * v + 4 * _A
    return np.where(v < 1, inner, np.where(v < 2, outer, 0.0))


def _as_image(image):
    arr = np.asarray(image, dtype=np.float64)
    if arr.ndim != 2:
        raise ValueError(f"expected a 2-D image, got {arr.ndim} dimensions")
    return arr


def interpolate(image, r, c):
    """Sample ``image`` at the continuous position (r, c); pixel centres sit at +0.5.

    Positions outside the image give 0.
    """
    img = _as_image(image)
    rows, cols = img.shape
    if r < 0 or r >= rows or c < 0 or c >= cols:
        return 0.0

    r_int = math.floor(r - 0.5)
    c_int = math.floor(c - 0.5)
    row_neighbours = [n for n in range(r_int - 1, r_int + 3) if 0 <= n < rows]
    col_neighbours = [n for n in range(c_int - 1, c_int + 3) if 0 <= n < cols]

    return float(
        sum(
            cubic(c - (cn + 0.5))
            * sum(img[rn, cn] * cubic(r - (rn + 0.5)) for rn in row_neighbours)
            for cn in col_neighbours
        )
    )


def _axis_weights(n_out, n_in, magnification, shift):
    coords = np.arange(n_out) / magnification - shift
    centres = np.arange(n_in) + 0.5
    weights = _cubic_array(coords[:, None] - centres[None, :])
    weights[(coords < 0) | (coords >= n_in)] = 0.0
    return weights


def shift_magnify(image, shift_row, shift_col, magnification_row, magnification_col):
    """Return ``image`` shifted and magnified by bicubic interpolation.

    The output has ``int(rows * magnification_row)`` rows and
    ``int(cols * magnification_col)`` columns.
    """
    img = _as_image(image)
    if magnification_row <= 0 or magnification_col <= 0:
        raise ValueError("magnification must be positive")
    rows, cols = img.shape
    rows_m = int(rows * magnification_row)
    cols_m = int(cols * magnification_col)

    # The kernel vanishes beyond two pixels, so dense weight matrices give
    # exactly the four-neighbour sums along each axis.
    row_weights = _axis_weights(rows_m, rows, magnification_row, shift_row)
    col_weights = _axis_weights(cols_m, cols, magnification_col, shift_col)
    return row_weights @ img @ col_weights.T
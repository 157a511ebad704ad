"""Roberts cross gradients."""

import numpy as np


def roberts_cross_gradients(image):
    """Return the (column, row) Roberts cross gradients of a 2-D image.

    The first row and column reuse their own pixels as the missing neighbours.
    """
    img = np.asarray(image, dtype=np.float64)
    if img.ndim != 2:
        raise ValueError(f"expected a 2-D image, got {img.ndim} dimensions")
    if img.size == 0:
        return img.copy(), img.copy()

    up = np.vstack([img[:1], img[:-1]])
    left = np.hstack([img[:, :1], img[:, :-1]])
    up_left = np.hstack([up[:, :1], up[:, :-1]])

    gradient_col = up - left + img - up_left
    gradient_row = -up + left + img - up_left
    return gradient_col, gradient_row
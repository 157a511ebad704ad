"""Spatial eSRRF step: one frame to one RGC map."""

from .gradients import roberts_cross_gradients
from .rgc import radial_gradient_convergence
from .shift_magnify import shift_magnify


def spatial(image, shift, magnification, radius, sensitivity, do_intensity_weighting):
    """Return the RGC map of one frame, magnified by ``magnification``."""
    magnified = shift_magnify(image, shift, shift, magnification, magnification)
    gradient_col, gradient_row = roberts_cross_gradients(image)
    gradient_col_interp = shift_magnify(
        gradient_col, shift, shift, magnification * 2, magnification * 2
    )
    gradient_row_interp = shift_magnify(
        gradient_row, shift, shift, magnification * 2, magnification * 2
    )
    return radial_gradient_convergence(
        gradient_col_interp,
        gradient_row_interp,
        magnified,
        int(magnification),
        radius,
        sensitivity,
        do_intensity_weighting,
    )
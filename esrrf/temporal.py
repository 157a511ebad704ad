"""Temporal reduction of a stack of RGC maps."""

from enum import IntEnum

import numpy as np


class TemporalType(IntEnum):
    """How a stack of frames is reduced to one image."""

    AVERAGE = 0
    VARIANCE = 1
    AUTO_CORRELATION = 2


def _as_stack(stack, min_frames):
    arr = np.asarray(stack, dtype=np.float64)
    if arr.ndim != 3:
        raise ValueError(f"expected a (frames, rows, cols) stack, got {arr.ndim} dimensions")
    if arr.shape[0] < min_frames:
        raise ValueError(f"need at least {min_frames} frame(s), got {arr.shape[0]}")
    return arr


def average(stack):
    """Return the per-pixel mean over frames."""
    return _as_stack(stack, 1).mean(axis=0)


def variance(stack):
    """Return the per-pixel population variance over frames."""
    arr = _as_stack(stack, 1)
    centred = arr - arr.mean(axis=0)
    return (centred * centred).mean(axis=0)


def temporal_auto_correlation(stack):
    """Return the per-pixel auto-covariance at lag one."""
    arr = _as_stack(stack, 2)
    centred = arr - arr.mean(axis=0)
    return (centred[:-1] * centred[1:]).mean(axis=0)


def temporal(stack, kind=TemporalType.AVERAGE):
    """Reduce ``stack``; kinds other than average and variance use auto-correlation."""
    if kind == TemporalType.AVERAGE:
        return average(stack)
    if kind == TemporalType.VARIANCE:
        return variance(stack)
    return temporal_auto_correlation(stack)
"""Reading and writing grayscale TIFF stacks."""

import numpy as np
from PIL import Image, ImageSequence

_MAX_16BIT = 65535.0
_SIXTEEN_BIT_MODES = frozenset({"I;16", "I;16L", "I;16B", "I;16N"})


def _as_frames(frames):
    arr = np.asarray(frames, dtype=np.float64)
    if arr.ndim == 2:
        arr = arr[None]
    if arr.ndim != 3:
        raise ValueError(
            f"expected a 2-D image or a (frames, rows, cols) stack, got {arr.ndim} dimensions"
        )
    if arr.shape[0] == 0:
        raise ValueError("no frames to save")
    return arr


def _write_pages(path, pages):
    first, *rest = pages
    first.save(path, format="TIFF", save_all=True, append_images=rest)


def load_tiff_stack(path):
    """Load every page of a 16-bit TIFF as a (frames, rows, cols) array in [0, 1]."""
    frames = []
    with Image.open(path) as img:
        for page in ImageSequence.Iterator(img):
            if page.mode not in _SIXTEEN_BIT_MODES:
                raise ValueError(f"expected a 16-bit grayscale TIFF, got mode {page.mode!r}")
            data = np.array(page).astype(np.float64) / _MAX_16BIT
            if frames and data.shape != frames[0].shape:
                raise ValueError(
                    f"frame {len(frames)} is {data.shape}, first frame is {frames[0].shape}"
                )
            frames.append(data)
    if not frames:
        raise ValueError(f"{path} holds no frames")
    return np.stack(frames)


def load_tiff_image(path):
    """Load the first page of a 16-bit TIFF as a 2-D array in [0, 1]."""
    with Image.open(path) as img:
        if img.mode not in _SIXTEEN_BIT_MODES:
            raise ValueError(f"expected a 16-bit grayscale TIFF, got mode {img.mode!r}")
        return np.array(img).astype(np.float64) / _MAX_16BIT


def save_tiff16(path, frames, rescale_negatives=False):
    """Save one image or a stack as a multi-page 16-bit TIFF.

    Values in [0, 1] map to the full 16-bit range and are clamped outside it.
    With ``rescale_negatives``, a stack holding any negative value is first
    mapped from [-1, 1] to [0, 1].
    """
    arr = _as_frames(frames)
    if rescale_negatives and (arr < 0).any():
        arr = (arr + 1.0) / 2.0
    scaled = np.floor(np.clip(arr * _MAX_16BIT, 0.0, _MAX_16BIT)).astype(np.uint16)
    _write_pages(path, [Image.fromarray(frame) for frame in scaled])


def save_tiff_float32(path, frames):
    """Save one image or a stack as a multi-page 32-bit floating-point TIFF."""
    arr = _as_frames(frames).astype(np.float32)
    _write_pages(path, [Image.fromarray(np.ascontiguousarray(frame)) for frame in arr])
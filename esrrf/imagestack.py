"""A growable stack of equally sized images."""

import numpy as np

from .tiffio import save_tiff16, save_tiff_float32


class ImageStack:
    """Holds copies of (rows, cols) images in push order."""

    def __init__(self, rows, cols):
        if rows <= 0 or cols <= 0:
            raise ValueError("rows and cols must be positive")
        self.rows = rows
        self.cols = cols
        self._images = []

    def push(self, image):
        """Store a copy of ``image`` on top of the stack."""
        arr = np.array(image, dtype=np.float64)
        if arr.size != self.rows * self.cols:
            raise ValueError(
                f"image has {arr.size} pixels, stack expects {self.rows}x{self.cols}"
            )
        self._images.append(arr.reshape(self.rows, self.cols))

    def pop(self):
        """Remove and return the image on top of the stack."""
        if not self._images:
            raise IndexError("pop from an empty image stack")
        return self._images.pop()

    def __len__(self):
        return len(self._images)

    def __iter__(self):
        return iter(self._images)

    def _frames(self):
        if not self._images:
            raise ValueError("image stack is empty, nothing to save")
        return np.stack(self._images)

    def save_float32(self, path):
        """Save all images as a multi-page 32-bit floating-point TIFF."""
        save_tiff_float32(path, self._frames())

    def save_16bit(self, path):
        """Save all images as a multi-page 16-bit TIFF."""
        save_tiff16(path, self._frames(), rescale_negatives=False)
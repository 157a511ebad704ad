"""Image similarity metrics for comparing reconstructions with references."""

import math
from dataclasses import dataclass

import numpy as np

from .tiffio import load_tiff_image, load_tiff_stack

_C1 = 0.0001
_C2 = 0.0009
_EPSILON = 1e-10
_MAX_PIXEL_VALUE = 1.0


@dataclass(frozen=True)
class ComparisonResult:
    """All similarity metrics between two images."""

    mse: float
    ssim: float
    psnr: float
    mae: float
    maxae: float
    pcc: float

    def __str__(self):
        return "\n".join(
            [
                f"  - MSE:  {self.mse:.6f}",
                f"  - SSIM: {self.ssim:.6f}",
                f"  - PSNR: {self.psnr:.2f} dB",
                f"  - MAE:  {self.mae:.6f}",
                f"  - MaxAE: {self.maxae:.6f}",
                f"  - PCC:  {self.pcc:.6f}",
            ]
        )


def _pair(image1, image2):
    a = np.asarray(image1, dtype=np.float64)
    b = np.asarray(image2, dtype=np.float64)
    if a.shape != b.shape:
        raise ValueError(f"image shapes differ: {a.shape} and {b.shape}")
    if a.size == 0:
        raise ValueError("cannot compare empty images")
    return a.ravel(), b.ravel()


def mse(image1, image2):
    """Return the mean squared error."""
    a, b = _pair(image1, image2)
    diff = a - b
    return float(np.mean(diff * diff))


def ssim(image1, image2):
    """Return the global structural similarity index."""
    a, b = _pair(image1, image2)
    mean1 = a.mean()
    mean2 = b.mean()
    d1 = a - mean1
    d2 = b - mean2
    var1 = np.mean(d1 * d1)
    var2 = np.mean(d2 * d2)
    covar = np.mean(d1 * d2)
    numerator = (2 * mean1 * mean2 + _C1) * (2 * covar + _C2)
    denominator = (mean1 * mean1 + mean2 * mean2 + _C1) * (var1 + var2 + _C2)
    return float(numerator / denominator)


def psnr(image1, image2):
    """Return the peak signal-to-noise ratio in dB for images in [0, 1]."""
    error = mse(image1, image2)
    if error == 0:
        return math.inf
    return 10.0 * math.log10(_MAX_PIXEL_VALUE * _MAX_PIXEL_VALUE / error)


def mae(image1, image2):
    """Return the mean absolute error."""
    a, b = _pair(image1, image2)
    return float(np.mean(np.abs(a - b)))


def maxae(image1, image2):
    """Return the largest absolute error."""
    a, b = _pair(image1, image2)
    return float(np.max(np.abs(a - b)))


def pcc(image1, image2):
    """Return the Pearson correlation coefficient."""
    a, b = _pair(image1, image2)
    d1 = a - a.mean()
    d2 = b - b.mean()
    sum1 = np.sum(d1 * d1)
    sum2 = np.sum(d2 * d2)
    sum_xy = np.sum(d1 * d2)
    return float(sum_xy / (math.sqrt(sum1) * math.sqrt(sum2) + _EPSILON))


def compare_images(image1, image2):
    """Return every metric between two equally shaped images."""
    _pair(image1, image2)
    return ComparisonResult(
        mse=mse(image1, image2),
        ssim=ssim(image1, image2),
        psnr=psnr(image1, image2),
        mae=mae(image1, image2),
        maxae=maxae(image1, image2),
        pcc=pcc(image1, image2),
    )


def compare_tiff_images(generated_path, ground_truth_path):
    """Compare the first pages of two 16-bit TIFF files."""
    generated = load_tiff_image(generated_path)
    truth = load_tiff_image(ground_truth_path)
    if generated.shape != truth.shape:
        raise ValueError("image dimensions do not match")
    return compare_images(generated, truth)


def compare_tiff_image_stacks(generated_path, ground_truth_path):
    """Compare two 16-bit TIFF stacks page by page; return one result per frame."""
    generated = load_tiff_stack(generated_path)
    truth = load_tiff_stack(ground_truth_path)
    if generated.shape != truth.shape:
        raise ValueError("image dimensions do not match")
    return [compare_images(g, t) for g, t in zip(generated, truth)]
import math

import numpy as np
import pytest

from esrrf.metrics import (
    ComparisonResult,
    compare_images,
    compare_tiff_image_stacks,
    compare_tiff_images,
    mae,
    maxae,
    mse,
    pcc,
    psnr,
    ssim,
)
from esrrf.tiffio import save_tiff16


@pytest.fixture
def ramp():
    return np.linspace(0.1, 0.9, 20).reshape(4, 5)


def test_identical_images_are_perfect(ramp):
    result = compare_images(ramp, ramp)
    assert result.mse == 0
    assert result.mae == 0
    assert result.maxae == 0
    assert math.isinf(result.psnr)
    assert result.ssim == pytest.approx(1.0)
    assert result.pcc == pytest.approx(1.0)


def test_constant_offset(ramp):
    delta = 0.1
    shifted = ramp + delta
    assert mse(ramp, shifted) == pytest.approx(delta * delta)
    assert mae(ramp, shifted) == pytest.approx(delta)
    assert maxae(ramp, shifted) == pytest.approx(delta)
    assert pcc(ramp, shifted) == pytest.approx(1.0)


def test_full_scale_error_gives_zero_psnr():
    assert psnr(np.zeros(4), np.ones(4)) == pytest.approx(0.0)


def test_psnr_matches_mse(ramp):
    other = ramp[::-1]
    assert psnr(ramp, other) == pytest.approx(10 * math.log10(1 / mse(ramp, other)))


def test_negated_image_is_anticorrelated(ramp):
    assert pcc(ramp, -ramp) == pytest.approx(-1.0)


def test_metrics_are_symmetric(ramp):
    rng = np.random.default_rng(3)
    other = rng.random(ramp.shape)
    for metric in (mse, ssim, psnr, mae, maxae, pcc):
        assert metric(ramp, other) == pytest.approx(metric(other, ramp))


def test_maxae_bounds_mae(ramp):
    other = np.random.default_rng(5).random(ramp.shape)
    assert mae(ramp, other) <= maxae(ramp, other)


def test_ssim_below_one_for_different_images(ramp):
    other = np.random.default_rng(7).random(ramp.shape)
    assert ssim(ramp, other) < 1.0


def test_constant_images_pcc_is_zero():
    assert pcc(np.full(6, 0.5), np.full(6, 0.2)) == pytest.approx(0.0)


def test_shape_mismatch_raises():
    with pytest.raises(ValueError):
        mse(np.zeros((2, 2)), np.zeros((2, 3)))


def test_empty_images_raise():
    with pytest.raises(ValueError):
        compare_images(np.zeros(0), np.zeros(0))


def test_result_text():
    result = ComparisonResult(mse=0.0, ssim=1.0, psnr=math.inf, mae=0.0, maxae=0.0, pcc=1.0)
    text = str(result)
    assert "  - MSE:  0.000000" in text
    assert "  - PSNR: inf dB" in text
    assert len(text.splitlines()) == 6


def test_compare_tiff_images_same_file(tmp_path, ramp):
    path = tmp_path / "a.tif"
    save_tiff16(path, ramp)
    result = compare_tiff_images(path, path)
    assert result.mse == 0
    assert math.isinf(result.psnr)


def test_compare_tiff_images_dimension_mismatch(tmp_path):
    a = tmp_path / "a.tif"
    b = tmp_path / "b.tif"
    save_tiff16(a, np.zeros((3, 4)))
    save_tiff16(b, np.zeros((4, 3)))
    with pytest.raises(ValueError):
        compare_tiff_images(a, b)


def test_compare_tiff_image_stacks_per_frame(tmp_path):
    frames = np.stack([np.full((3, 3), 0.25), np.full((3, 3), 0.5)])
    other = frames.copy()
    other[1] = 0.75
    a = tmp_path / "a.tif"
    b = tmp_path / "b.tif"
    save_tiff16(a, frames)
    save_tiff16(b, other)
    results = compare_tiff_image_stacks(a, b)
    assert len(results) == 2
    assert results[0].mse == 0
    assert results[1].maxae == pytest.approx(0.25, abs=1e-4)


def test_compare_tiff_image_stacks_frame_count_mismatch(tmp_path):
    a = tmp_path / "a.tif"
    b = tmp_path / "b.tif"
    save_tiff16(a, np.zeros((2, 3, 3)))
    save_tiff16(b, np.zeros((3, 3, 3)))
    with pytest.raises(ValueError):
        compare_tiff_image_stacks(a, b)
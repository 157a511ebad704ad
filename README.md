# esrrf

This package reconstructs super-resolved images from fluorescence microscopy
time series by radial gradient convergence (eSRRF). It takes a multi-page
16-bit grayscale TIFF and writes one super-resolved 16-bit TIFF.

## How it works

The input is read as a `(frames, rows, cols)` stack and normalised to `[0, 1]`.
Each frame goes through three steps in `esrrf.spatial.spatial`:

1. `esrrf.shift_magnify.shift_magnify` magnifies the frame with bicubic interpolation.
2. `esrrf.gradients.roberts_cross_gradients` computes the Roberts-cross gradients.
   These are magnified at twice the factor.
3. `esrrf.rgc.radial_gradient_convergence` computes the radial gradient
   convergence map. The map can be weighted by the magnified intensity. A
   border of twice the magnification is left at zero.

`esrrf.temporal.temporal` then combines the per-frame maps over time.
`TemporalType` selects how:

- `AVERAGE` takes the mean.
- `VARIANCE` takes the population variance.
- `AUTO_CORRELATION` takes the lag-1 auto-covariance. It needs at least two frames.

## Installation

```
pip install .
```

## Command line

```
esrrf input.tif output.tif [ground_truth.tif]
```

The command reconstructs `input.tif` and writes the result to `output.tif` as
a single-page 16-bit TIFF. If the result holds negative values, which the
auto-correlation can give, it is first mapped from `[-1, 1]` to `[0, 1]`.

If you give a ground-truth TIFF, the output is compared with it. The command
prints MSE, SSIM, PSNR, MAE, MaxAE and PCC.

| Option | Default | Meaning |
|---|---|---|
| `--shift` | 0.0 | shift applied before magnification |
| `--magnification` | 5.0 | magnification factor |
| `--radius` | 2.0 | radius of the convergence kernel |
| `--sensitivity` | 1.0 | exponent applied to the convergence map when above 1 |
| `--no-intensity-weighting` | weighting on | do not multiply the map by the magnified image |
| `--temporal` | 0 | 0: average, 1: variance, 2: auto-correlation |

The command returns exit status 1 in two cases: when a file cannot be read or
written, and when an input is not a 16-bit grayscale TIFF.

## Library use

```python
from esrrf.tiffio import load_tiff_stack, save_tiff16
from esrrf.spatial import spatial
from esrrf.temporal import temporal, TemporalType
from esrrf.metrics import compare_images

stack = load_tiff_stack("input.tif")          # (frames, rows, cols), floats in [0, 1]
maps = [spatial(frame, 0.0, 5, 2.0, 1.0, True) for frame in stack]
sr = temporal(maps, TemporalType.AVERAGE)
save_tiff16("output.tif", [sr], True)

print(compare_images(sr, sr))
```

`esrrf.cli.process_tiff` runs the whole pipeline and returns the reconstructed image:

```python
from esrrf.cli import process_tiff

sr = process_tiff("input.tif", "output.tif", 0.0, 5, 2.0, 1.0, True, 0)
```

Other modules:

- `esrrf.tiffio` reads and writes TIFF files:
  - `load_tiff_stack` and `load_tiff_image` read 16-bit TIFFs.
  - `save_tiff16` writes multi-page 16-bit TIFFs.
  - `save_tiff_float32` writes multi-page 32-bit float TIFFs.
- `esrrf.imagestack.ImageStack` collects equally sized frames. It has
  `push`, `pop`, `len()` and iteration. `save_16bit` and `save_float32`
  write the frames out.
- `esrrf.metrics` holds the similarity metrics `mse`, `ssim`, `psnr`, `mae`,
  `maxae` and `pcc`. It also has these comparison functions:
  - `compare_images` returns a `ComparisonResult`.
  - `compare_tiff_images` compares the first pages of two TIFF files.
  - `compare_tiff_image_stacks` compares two stacks page by page.

## What it does not do

- Everything runs on the CPU with NumPy. There is no GPU processing and no
  timing or benchmarking of the reconstruction.
- Input TIFFs must be 16-bit grayscale. Other sample formats are rejected.
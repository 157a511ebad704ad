"""Radial gradient convergence."""

import math

import numpy as np

_GX_GY_MAGNIFICATION = 2.0


def calculate_dw(distance, tss):
    """Return the distance weight of a sample at ``distance``."""
    return (distance * math.exp(-distance * distance / tss)) ** 4


def calculate_dk(gx, gy, dx, dy, distance):
    """Return how closely the gradient (gx, gy) points along the line through (dx, dy)."""
    norm = math.hypot(gx, gy)
    cross = abs(gy * dx - gx * dy)
    dk = cross / norm if norm != 0 else math.nan
    if math.isnan(dk):
        dk = distance
    return 1 - dk / distance


def _apply_sensitivity(rgc, sensitivity):
    if rgc >= 0 and sensitivity > 1:
        return rgc**sensitivity
    if rgc < 0:
        return 0.0
    return rgc


def calculate_rgc(x_m, y_m, gradient_col_interp, gradient_row_interp, cols_m, rows_m,
                  magnification, gx_gy_magnification, fwhm, tso, tss, sensitivity):
    """Return the radial gradient convergence at magnified pixel (x_m, y_m)."""
    gx_flat = np.ravel(gradient_col_interp)
    gy_flat = np.ravel(gradient_row_interp)
    g = gx_gy_magnification
    xc = (x_m + 0.5) / magnification
    yc = (y_m + 0.5) / magnification

    offsets = range(-int(g * fwhm), int(g * fwhm + 1))
    rgc = 0.0
    weight_sum = 0.0
    for j in offsets:
        vy = (int(g * yc) + j) / g
        if not 0 < vy <= rows_m - 1:
            continue
        for i in offsets:
            vx = (int(g * xc) + i) / g
            if not 0 < vx <= cols_m - 1:
                continue
            dx = vx - xc
            dy = vy - yc
            distance = math.hypot(dx, dy)
            if distance == 0 or not distance <= tso:
                continue
            index = int(vy * magnification * g * cols_m * g) + int(vx * magnification * g)
            gx = float(gx_flat[index])
            gy = float(gy_flat[index])
            weight = calculate_dw(distance, tss)
            weight_sum += weight
            if gx * dx + gy * dy < 0:
                rgc += calculate_dk(gx, gy, dx, dy, distance) * weight

    if weight_sum != 0:
        rgc /= weight_sum
    return _apply_sensitivity(rgc, sensitivity)


def radial_gradient_convergence(gradient_col_interp, gradient_row_interp, image_interp,
                                magnification, radius, sensitivity, do_intensity_weighting):
    """Return the RGC map with the shape of ``image_interp``.

    A border of twice the magnification is left at zero.
    """
    image = np.asarray(image_interp, dtype=np.float64)
    if image.ndim != 2:
        raise ValueError(f"expected a 2-D image, got {image.ndim} dimensions")
    gx_flat = np.ravel(np.asarray(gradient_col_interp, dtype=np.float64))
    gy_flat = np.ravel(np.asarray(gradient_row_interp, dtype=np.float64))
    if gx_flat.size != gy_flat.size:
        raise ValueError("gradient images differ in size")
    mag = int(magnification)
    if mag < 1:
        raise ValueError("magnification must be at least 1")

    rows_m, cols_m = image.shape
    sigma = radius / 2.355
    fwhm = radius
    tss = 2 * sigma * sigma
    tso = 2 * sigma + 1
    g = _GX_GY_MAGNIFICATION

    rgc_map = np.zeros((rows_m, cols_m))
    border = 2 * mag
    r_idx = np.arange(border, rows_m - border)
    c_idx = np.arange(border, cols_m - border)
    if r_idx.size == 0 or c_idx.size == 0:
        return rgc_map

    yc = (r_idx + 0.5) / mag
    xc = (c_idx + 0.5) / mag
    base_y = np.trunc(g * yc)
    base_x = np.trunc(g * xc)
    rgc = np.zeros((r_idx.size, c_idx.size))
    weight_sum = np.zeros_like(rgc)
    offsets = range(-int(g * fwhm), int(g * fwhm + 1))

    with np.errstate(divide="ignore", invalid="ignore"):
        for j in offsets:
            vy = (base_y + j) / g
            row_ok = (vy > 0) & (vy <= rows_m - 1)
            if not row_ok.any():
                continue
            dy = (vy - yc)[:, None]
            row_index = np.trunc(vy * mag * g * cols_m * g)[:, None]
            for i in offsets:
                vx = (base_x + i) / g
                col_ok = (vx > 0) & (vx <= cols_m - 1)
                dx = (vx - xc)[None, :]
                distance = np.sqrt(dx * dx + dy * dy)
                mask = row_ok[:, None] & col_ok[None, :] & (distance != 0) & (distance <= tso)
                if not mask.any():
                    continue
                index = (row_index + np.trunc(vx * mag * g)[None, :]).astype(np.int64)
                index = np.where(mask, index, 0)
                if index.max() >= gx_flat.size:
                    raise IndexError("gradient sample falls outside the gradient image")
                gx = gx_flat[index]
                gy = gy_flat[index]
                weight = (distance * np.exp(-distance * distance / tss)) ** 4
                weight_sum += np.where(mask, weight, 0.0)
                line_distance = np.abs(gy * dx - gx * dy) / np.hypot(gx, gy)
                line_distance = np.where(np.isnan(line_distance), distance, line_distance)
                dk = 1 - line_distance / distance
                converging = mask & (gx * dx + gy * dy < 0)
                rgc += np.where(converging, dk * weight, 0.0)

        nonzero = weight_sum != 0
        rgc = np.where(nonzero, rgc / np.where(nonzero, weight_sum, 1.0), rgc)
        if sensitivity > 1:
            rgc = np.where(rgc >= 0, np.abs(rgc) ** sensitivity, rgc)
    rgc = np.where(rgc < 0, 0.0, rgc)

    if do_intensity_weighting:
        rgc = rgc * image[np.ix_(r_idx, c_idx)]
    rgc_map[np.ix_(r_idx, c_idx)] = rgc
    return rgc_map
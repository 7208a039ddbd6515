"""Turning a scanned page into a clean black-and-white image."""

from __future__ import annotations

from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image
from scipy import ndimage

CROP = 25
BLUR_SIZE = 5
BLOCK_SIZE = 13
THRESHOLD_OFFSET = 6
MORPH_SIZE = 5
WHITE = 255

_SMALL_KERNELS = {
    1: [1.0],
    3: [0.25, 0.5, 0.25],
    5: [0.0625, 0.25, 0.375, 0.25, 0.0625],
    7: [0.03125, 0.109375, 0.21875, 0.28125, 0.21875, 0.109375, 0.03125],
}


def _gaussian_kernel(size: int) -> np.ndarray:
    """Kernel with the sigma derived from its size, as image libraries do."""
    if size in _SMALL_KERNELS:
        return np.array(_SMALL_KERNELS[size])
    sigma = 0.3 * ((size - 1) * 0.5 - 1) + 0.8
    x = np.arange(size) - (size - 1) / 2
    kernel = np.exp(-(x * x) / (2 * sigma * sigma))
    return kernel / kernel.sum()


def _blur(image: np.ndarray, size: int, mode: str) -> np.ndarray:
    kernel = _gaussian_kernel(size)
    out = ndimage.correlate1d(image.astype(np.float64), kernel, axis=0, mode=mode)
    out = ndimage.correlate1d(out, kernel, axis=1, mode=mode)
    return np.clip(np.rint(out), 0, 255).astype(np.uint8)


def _to_gray(image: np.ndarray) -> np.ndarray:
    if image.ndim == 2:
        return image.astype(np.uint8)
    rgb = image[..., :3].astype(np.float64)
    gray = rgb @ np.array([0.299, 0.587, 0.114])
    return np.clip(np.rint(gray), 0, 255).astype(np.uint8)


def binarize(image: np.ndarray) -> np.ndarray:
    """Binarize a page given as a grey or RGB(A) array.

    The page is cropped by 25 pixels at the top and left, smoothed, run
    through a local Gaussian threshold and cleaned with an erosion followed
    by a dilation. The result is a 2-D ``uint8`` array of 0 and 255.
    """
    image = np.asarray(image)
    if image.ndim not in (2, 3):
        raise ValueError("expected a 2-D grey or 3-D colour image")
    rows, cols = image.shape[:2]
    if rows <= CROP or cols <= CROP:
        raise ValueError(f"image of {cols}x{rows} is too small to crop")
    gray = _to_gray(image[CROP:, CROP:])
    smooth = _blur(gray, BLUR_SIZE, "mirror")
    local_mean = _blur(smooth, BLOCK_SIZE, "nearest")
    binary = np.where(
        smooth.astype(np.int32) > local_mean.astype(np.int32) - THRESHOLD_OFFSET, WHITE, 0
    ).astype(np.uint8)
    eroded = ndimage.minimum_filter(binary, size=MORPH_SIZE, mode="nearest")
    return ndimage.maximum_filter(eroded, size=MORPH_SIZE, mode="nearest")


def load_binary_image(path: Union[str, Path]) -> np.ndarray:
    """Read an image file and binarize it."""
    with Image.open(path) as img:
        rgb = np.asarray(img.convert("RGB"))
    return binarize(rgb)
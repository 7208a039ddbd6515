"""Flood fill of a black blob to find its bounding box."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Tuple

import numpy as np

BLACK = 0
FILLED = 1


@dataclass(frozen=True)
class Boundary:
    """Bounding box of a connected black region, with its pixel area."""

    top: int
    left: int
    bottom: int
    right: int
    area: int

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def height(self) -> int:
        return self.bottom - self.top

    @property
    def center(self) -> Tuple[int, int]:
        return ((self.left + self.right) // 2, (self.top + self.bottom) // 2)

    @property
    def box(self) -> Tuple[int, int, int, int]:
        """The box as (top, left, bottom, right)."""
        return (self.top, self.left, self.bottom, self.right)


def _is_black(image: np.ndarray, x: int, y: int) -> bool:
    height, width = image.shape[:2]
    return 0 <= x < width and 0 <= y < height and image[y, x] == BLACK


def find_boundary(image: np.ndarray, x: int, y: int) -> Boundary:
    """Fill the 4-connected black region at (x, y) and return its box.

    Every pixel of the region is overwritten in place with ``FILLED``.
    The area counts the seed once more than the filled pixels.
    """
    if not _is_black(image, x, y):
        raise ValueError(f"no black pixel at ({x}, {y})")
    top = bottom = y
    left = right = x
    area = 1
    image[y, x] = FILLED
    queue = deque([(x, y)])
    while queue:
        area += 1
        px, py = queue.popleft()
        top = min(top, py)
        left = min(left, px)
        bottom = max(bottom, py)
        right = max(right, px)
        for nx, ny in ((px - 1, py), (px + 1, py), (px, py - 1), (px, py + 1)):
            if _is_black(image, nx, ny):
                image[ny, nx] = FILLED
                queue.append((nx, ny))
    return Boundary(top, left, bottom, right, area)
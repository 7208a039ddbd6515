"""Locating, sizing and classifying single Braille dots."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np

from .boundary import BLACK, find_boundary
from .databundle import DataBundle

log = logging.getLogger(__name__)

MARK_GRAY = 128
Point = Tuple[int, int]


@dataclass
class ScaleSettings:
    """Geometry of the Braille page in pixels."""

    dot_distance: Point = (28, 32)
    char_distance: Point = (76, 126)
    min_dot_width: int = 5
    max_dot_width: int = 27
    dot_search_error: Point = (10, 10)
    char_search_error: Point = (1, 1)
    debug: bool = False
    finding_char: bool = False


class DotProcessor:
    """Finds black blobs and decides whether they are usable dots."""

    def __init__(self, settings: ScaleSettings) -> None:
        self.settings = settings

    def mark_dot_by_point(self, image: np.ndarray, point: Point, mark: bool) -> DataBundle:
        """Classify the blob containing the black pixel at ``point``.

        The caller's image is never modified. The returned image is a copy,
        outlined in debug mode, or with the blob filled for a very large one.
        """
        x, y = point
        height, width = image.shape[:2]
        if not (0 <= x < width and 0 <= y < height) or image[y, x] != BLACK:
            raise ValueError(f"no black pixel at ({x}, {y})")
        s = self.settings
        original = image.copy()
        filled = image.copy()
        bounds = find_boundary(filled, x, y)
        w, h = bounds.width, bounds.height
        cx, cy = bounds.center

        if w > 2 * s.max_dot_width or h > 2 * s.max_dot_width:
            mark = False
        if w < s.min_dot_width and h < s.min_dot_width:
            mark = False
        if s.debug and mark:
            self.mark_by_boundaries(original, MARK_GRAY, bounds.box)
        log.debug("dot size %s, min/max %s", (w, h), (s.min_dot_width, s.max_dot_width))

        bundle = DataBundle(image=original, dot_center=(cx, cy))
        if w < s.min_dot_width and h < s.min_dot_width:
            bundle.dot_center = point
            bundle.is_valid_dot = False
            bundle.should_identify = False
            log.debug("very small dot at %s", point)
        elif bounds.area < 30 or (w < s.min_dot_width * 1.5 and h < s.min_dot_width * 1.5):
            bundle.should_identify = False
            log.debug("medium dot at %s", point)
        elif w > 2 * s.max_dot_width or h > 2 * s.max_dot_width:
            bundle.should_identify = False
            bundle.is_very_large = True
            bundle.image = filled
            bundle.dot_center = point
            log.debug("very large dot at %s", point)
        elif w > s.max_dot_width or h > s.max_dot_width:
            bundle.is_large_dot = True
            bundle.should_identify = False
            log.debug("large dot at %s", point)
            wide = w > s.max_dot_width
            tall = h > s.max_dot_width
            if wide and not tall:
                bundle.dot_center = (x, cy)
            elif tall and not wide:
                bundle.dot_center = (cx, y)
            else:
                bundle.dot_center = point
        bundle.top, bundle.left, bundle.bottom, bundle.right = bounds.box
        return bundle

    def _probe_points(self, point: Point):
        err = self.settings.dot_search_error[0]
        if self.settings.finding_char:
            err //= 2
        x, y = point
        yield point
        for i in range(3, err + 1, 2):
            yield (x - i, y)
            yield (x - i, y + i)
            yield (x, y + i)
            yield (x + i, y + i)
            yield (x + i, y)
            yield (x + i, y - i)
            yield (x, y - i)
            yield (x - i, y - i)

    def search_for_black_dot(self, image: np.ndarray, point: Point, mark: bool) -> DataBundle:
        """Look around ``point`` for a dot of at least the minimum size.

        Returns the first valid dot found; otherwise a bundle marked invalid
        whose centre is ``point``.
        """
        height, width = image.shape[:2]
        bundle = DataBundle(image=image.copy())
        for px, py in self._probe_points(point):
            if not (0 <= px < width and 0 <= py < height):
                continue
            if bundle.image[py, px] == BLACK:
                bundle = self.mark_dot_by_point(bundle.image, (px, py), mark)
                if bundle.is_valid_dot:
                    return bundle
            elif self.settings.debug and mark:
                bundle.image[py, px] = MARK_GRAY
        bundle.is_valid_dot = False
        bundle.dot_center = point
        log.debug("no dot found near %s", point)
        return bundle

    def mark_by_boundaries(self, image: np.ndarray, color: int, bounds: Sequence[int]) -> None:
        """Draw a rectangle two pixels outside ``(top, left, bottom, right)``.

        Black pixels are left alone; the image is changed in place.
        """
        top, left, bottom, right = bounds
        rows, cols = image.shape[:2]
        top = top - 2 if top > 1 else 1
        left = left - 2 if left > 1 else 1
        bottom = bottom + 2 if bottom < rows - 2 else rows - 1
        right = right + 2 if right < cols - 2 else cols - 1

        def paint(x: int, y: int) -> None:
            if 0 <= x < cols and 0 <= y < rows and image[y, x] != BLACK:
                image[y, x] = color

        for x in range(left, right + 1):
            paint(x, top)
            paint(x, bottom)
        for y in range(top, bottom + 1):
            paint(left, y)
            paint(right, y)
"""Finding a reference cell on a page and reading a whole line of cells."""

from __future__ import annotations

import logging
from typing import List, Tuple

import numpy as np

from .boundary import BLACK, find_boundary
from .chars import CharReader
from .databundle import DataBundle
from .dots import MARK_GRAY, DotProcessor, ScaleSettings

log = logging.getLogger(__name__)

Point = Tuple[int, int]

ROW_STEP = 5
COLUMN_STEP = 3
SKIP_AFTER_DOT = 20
SPACE = "space"


def _is_black(image: np.ndarray, x: int, y: int) -> bool:
    height, width = image.shape[:2]
    return 0 <= x < width and 0 <= y < height and image[y, x] == BLACK


class LineIdentifier:
    """Scans a page for a well-formed cell that can anchor a line."""

    def __init__(self, settings: ScaleSettings) -> None:
        self.settings = settings
        self.dots = DotProcessor(settings)
        self.chars = CharReader(settings)

    def next_char(self, image: np.ndarray, start: Point) -> DataBundle:
        """Find the next reference cell at or below ``start``.

        The scan runs row by row. A cell is accepted when its dot is a clean,
        normal-sized dot, the cell read around it holds dots in both columns,
        and the row through the dot holds further dots. If nothing is found
        the bundle is marked invalid and carries the scanned image.
        The caller's image is never modified.
        """
        image = image.copy()
        height, width = image.shape[:2]
        start_x, start_y = start
        bundle = DataBundle()
        for y in range(start_y, height, ROW_STEP):
            x = start_x
            while x < width:
                if _is_black(image, x, y):
                    log.debug("black pixel at %s", (x, y))
                    bundle, image = self._extract_char(image, (x, y))
                    if bundle.is_valid_dot:
                        bounds = find_boundary(image, x, y)
                        if self._has_enough_dots(image, (bounds.top + bounds.bottom) // 2):
                            log.debug("reference cell found at %s", (x, y))
                            return bundle
                        log.debug("row through %s has too few dots", (x, y))
                        break
                    x += SKIP_AFTER_DOT
                x += COLUMN_STEP
        bundle.is_valid_dot = False
        bundle.image = image
        return bundle

    def _extract_char(self, image: np.ndarray, pixel: Point) -> Tuple[DataBundle, np.ndarray]:
        """Try to read a cell around the dot at ``pixel``.

        Returns the bundle and the image to carry on scanning with; a very
        large blob comes back filled so that it is not found again.
        """
        bundle = self.dots.mark_dot_by_point(image, pixel, False)
        if bundle.is_very_large or bundle.is_large_dot or not bundle.should_identify:
            log.debug("unusable dot at %s", pixel)
            if bundle.is_very_large:
                image = bundle.image
            bundle.is_valid_dot = False
            return bundle, image

        bundle = self._find_center(image, bundle.dot_center)
        if not bundle.is_valid_char() or not bundle.should_identify:
            log.debug("cell near %s has %d dots", pixel, bundle.dot_count)
            bundle.is_valid_dot = False
            return bundle, image

        if self.settings.debug:
            hdist, vdist = self.settings.dot_distance
            cx, cy = bundle.char_center
            top, bottom = cy - vdist, cy + vdist
            left, right = cx - hdist // 2, cx + hdist // 2
            self.dots.mark_by_boundaries(image, MARK_GRAY, (top, left, bottom, right))
            self.dots.mark_by_boundaries(
                image, MARK_GRAY, (top - 3, left - 3, bottom + 3, right + 3)
            )
        bundle.image = image.copy()
        return bundle, image

    def _find_center(self, image: np.ndarray, dot: Point) -> DataBundle:
        """Read the cell assuming ``dot`` is its upper-left, then upper-right dot."""
        hdist, vdist = self.settings.dot_distance
        x, y = dot
        as_left = self.chars.read_from_center(image, (x + hdist // 2, y + vdist))
        as_right = self.chars.read_from_center(image, (x - hdist // 2, y + vdist))
        return as_left if as_left.dot_count > as_right.dot_count else as_right

    def _has_enough_dots(self, image: np.ndarray, row: int) -> bool:
        """True when at least two more dots cross the band around ``row``."""
        width = image.shape[1]
        count = 0
        x = 0
        while x < width:
            if any(_is_black(image, x, r) for r in (row - 3, row, row + 3)):
                count += 1
                if count == 2:
                    return True
                x += SKIP_AFTER_DOT
            x += COLUMN_STEP
        return False


class LineReader:
    """Reads every cell on a line, left and right of a known cell."""

    def __init__(self, settings: ScaleSettings) -> None:
        self.settings = settings
        self.chars = CharReader(settings)

    def read_line(self, image: np.ndarray, center: Point) -> DataBundle:
        """Read the line through the cell centred at ``center``.

        The bundle's ``char_list`` holds the cells' dot patterns from left to
        right, with ``"space"`` where one or more empty cells separate two
        cells. Empty cells at either end of the line are dropped.
        """
        step = self.settings.char_distance[0]
        if step <= 0:
            raise ValueError("horizontal character distance must be positive")
        right = self._read_part(image, center, step)
        cx, cy = center
        left = self._read_part(right.image, (cx - step, cy), -step)
        left.char_list.extend(right.char_list)
        return left

    def _read_part(self, image: np.ndarray, center: Point, step: int) -> DataBundle:
        width = image.shape[1]
        cells: List[str] = []
        gap = False
        bundle = DataBundle(image=image, char_center=center)

        def inside(x: int) -> bool:
            return x < width if step > 0 else x > 0

        while inside(bundle.char_center[0]):
            bundle = self.chars.read_from_center(bundle.image, bundle.char_center)
            if bundle.dot_count:
                if gap:
                    cells.append(SPACE)
                    gap = False
                cells.append(bundle.bin_char)
            else:
                gap = True
            cx, cy = bundle.char_center
            bundle.char_center = (cx + step, cy)
        if step < 0:
            cells.reverse()
        bundle.char_list = cells
        return bundle
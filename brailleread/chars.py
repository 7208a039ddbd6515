"""Reading a six-dot Braille cell from a binary image."""

from __future__ import annotations

import logging
from typing import Tuple

import numpy as np

from .databundle import DataBundle
from .dots import DotProcessor, ScaleSettings

log = logging.getLogger(__name__)

Point = Tuple[int, int]


def _trunc_div(a: int, b: int) -> int:
    return int(a / b)


class CharReader:
    """Reads Braille cells given a point inside or at the corner of one."""

    def __init__(self, settings: ScaleSettings) -> None:
        self.settings = settings
        self.dots = DotProcessor(settings)

    def read_from_center(self, image: np.ndarray, center: Point) -> DataBundle:
        """Read the cell whose centre is roughly ``center``.

        Probes the six dot positions in turn and anchors the cell on the
        first trustworthy dot found.
        """
        hdist, vdist = self.settings.dot_distance
        half = _trunc_div(hdist, 2)
        cx, cy = center
        # probe position and the offset from the dot found to the cell's upper-left dot
        probes = (
            ((cx - half, cy - vdist), (0, 0)),
            ((cx + half, cy - vdist), (-hdist, 0)),
            ((cx - half, cy), (0, -vdist)),
            ((cx + half, cy), (-hdist, -vdist)),
            ((cx - half, cy + vdist), (0, -2 * vdist)),
        )
        current = image
        for probe, (dx, dy) in probes:
            found = self.dots.search_for_black_dot(current, probe, False)
            current = found.image
            if found.is_valid_dot and not found.is_very_large:
                fx, fy = found.dot_center
                return self.read_from_left(current, (fx + dx, fy + dy))
        found = self.dots.search_for_black_dot(current, (cx + half, cy + vdist), False)
        fx, fy = found.dot_center
        return self.read_from_left(found.image, (fx - hdist, fy - 2 * vdist))

    def read_from_left(self, image: np.ndarray, point: Point) -> DataBundle:
        """Read the cell whose upper-left dot position is ``point``.

        Dots are read down the left column, then down the right column.
        """
        hdist, vdist = self.settings.dot_distance
        px, py = point
        positions = [(px, py + row * vdist) for row in range(3)]
        positions += [(px + hdist, py + row * vdist) for row in range(3)]
        bits = []
        supporting = 0
        total_x = total_y = 0
        for position in positions:
            found = self.dots.search_for_black_dot(image, position, self.settings.debug)
            if found.should_identify:
                supporting += 1
            bits.append("1" if found.is_valid_dot else "0")
            image = found.image
            total_x += found.dot_center[0]
            total_y += found.dot_center[1]
        bin_char = "".join(bits)
        log.debug("cell at %s reads %s, %d supporting dots", point, bin_char, supporting)
        return DataBundle(
            image=image,
            bin_char=bin_char,
            dot_count=bin_char.count("1"),
            char_center=(_trunc_div(total_x, 6), _trunc_div(total_y, 6)),
            should_identify=supporting > 1,
        )
"""Converting a binarized Braille page into rows of dot patterns."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np

from .dots import ScaleSettings
from .lines import LineIdentifier, LineReader

log = logging.getLogger(__name__)

MAX_LINES = 27
LINE_START_MARGIN = 5


def convert_image(
    image: np.ndarray,
    settings: Optional[ScaleSettings] = None,
    max_lines: int = MAX_LINES,
) -> Tuple[List[List[str]], np.ndarray]:
    """Read up to ``max_lines`` lines of Braille cells from a binary page.

    Returns the lines found, each a list of six-dot patterns with
    ``"space"`` between separated cells, and the image as left after
    reading. Lines that yield no cells are skipped. Reading stops at the
    first scan that finds no reference cell. The input is not modified.
    """
    if max_lines < 0:
        raise ValueError("max_lines must not be negative")
    current = np.asarray(image)
    if current.ndim != 2:
        raise ValueError("expected a 2-D binary image")
    settings = settings or ScaleSettings()
    identifier = LineIdentifier(settings)
    reader = LineReader(settings)
    advance = settings.char_distance[1] - settings.dot_distance[1] - LINE_START_MARGIN

    lines: List[List[str]] = []
    start_x, _ = start = (0, 0)
    for number in range(1, max_lines + 1):
        found = identifier.next_char(current, start)
        start = (start_x, found.char_center[1] + advance)
        if not found.is_valid_dot:
            log.debug("no reference cell for line %d", number)
            current = found.image
            break
        line = reader.read_line(found.image, found.char_center)
        if line.char_list:
            lines.append(list(line.char_list))
        current = line.image
    return lines, current.copy()


def format_binary(lines: Iterable[Sequence[str]]) -> str:
    """Write lines of cells as text: each cell followed by a space, one line per row."""
    return "".join("".join(f"{cell} " for cell in line) + "\n" for line in lines)
"""The record passed between the dot, character and line readers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

import numpy as np

Point = Tuple[int, int]


@dataclass(eq=False)
class DataBundle:
    """Result of probing an image for a dot or a Braille cell.

    ``is_valid_dot`` defaults to ``True`` when an image is given and to
    ``False`` otherwise.
    """

    image: Optional[np.ndarray] = None
    bin_char: str = ""
    char_center: Point = (0, 0)
    dot_center: Point = (0, 0)
    is_valid_dot: Optional[bool] = None
    is_large_dot: bool = False
    should_identify: bool = True
    is_very_large: bool = False
    top: int = 0
    left: int = 0
    bottom: int = 0
    right: int = 0
    dot_count: int = 0
    char_list: list = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.is_valid_dot is None:
            self.is_valid_dot = self.image is not None

    def count_ones(self, start: int, end: int) -> int:
        """Count raised dots in ``bin_char`` between two inclusive positions."""
        return self.bin_char[start:end + 1].count("1")

    def is_valid_char(self) -> bool:
        """A cell is trusted when both of its columns hold at least one dot."""
        return bool(self.count_ones(0, 2) and self.count_ones(3, 5))
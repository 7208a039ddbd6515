"""English Braille letters and digits keyed by six-dot patterns.

A pattern lists dots 1, 2, 3 (left column, top to bottom) then dots 4, 5, 6.
"""

from __future__ import annotations

from typing import Dict, Optional

ENGLISH_NUMBERS: Dict[str, str] = {
    "010110": "0", "100000": "1",
    "110000": "2", "100100": "3",
    "100110": "4", "100010": "5",
    "110100": "6", "110110": "7",
    "110010": "8", "010100": "9",
}

ENGLISH_ALPHABET: Dict[str, str] = {
    "100000": "a", "110000": "b", "100100": "c", "100110": "d", "100010": "e",
    "110100": "f", "110110": "g", "110010": "h", "010100": "i", "010110": "j",
    "101000": "k", "111000": "l", "101100": "m", "101110": "n", "101010": "o",
    "111100": "p", "111110": "q", "111010": "r", "011100": "s", "011110": "t",
    "101001": "u", "111001": "v", "010111": "w", "101101": "x", "101111": "y",
    "101011": "z",
}


def letter_for(cell: str) -> Optional[str]:
    """The letter for a dot pattern, or ``None`` if it is not a letter."""
    return ENGLISH_ALPHABET.get(cell)


def digit_for(cell: str) -> Optional[str]:
    """The digit for a dot pattern, or ``None`` if it is not a digit."""
    return ENGLISH_NUMBERS.get(cell)
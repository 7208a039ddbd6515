"""Read embossed Braille pages from scanned images into six-dot cell patterns."""

__version__ = "0.1.0"
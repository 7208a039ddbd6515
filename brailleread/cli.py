"""Command line entry point: convert Braille page images to dot-pattern text."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

from .converter import MAX_LINES, convert_image, format_binary
from .dots import ScaleSettings
from .preprocess import load_binary_image

PathLike = Union[str, Path]


@dataclass
class ConversionResult:
    """The outcome of converting one page image."""

    source: Path
    name: str
    lines: List[List[str]]
    binary_text: str


def result_name(path: PathLike) -> str:
    """Name of the text file for an image: its base name up to the first dot, plus ``.txt``."""
    return Path(path).name.split(".", 1)[0] + ".txt"


def convert_files(
    paths: Iterable[PathLike], settings: Optional[ScaleSettings] = None
) -> List[ConversionResult]:
    """Binarize and read each image in turn, in the order given."""
    settings = settings or ScaleSettings()
    results = []
    for path in paths:
        source = Path(path)
        lines, _ = convert_image(load_binary_image(source), settings, MAX_LINES)
        results.append(
            ConversionResult(
                source=source,
                name=result_name(source),
                lines=lines,
                binary_text=format_binary(lines),
            )
        )
    return results


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="brailleread",
        description="Read Braille cells from scanned page images.",
    )
    parser.add_argument("images", nargs="+", type=Path, help="page images to convert")
    parser.add_argument(
        "-o",
        "--output-dir",
        type=Path,
        default=Path("."),
        help="directory for the .txt results (default: current directory)",
    )
    parser.add_argument(
        "--debug", action="store_true", help="outline the dots and cells that were read"
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Convert the images named on the command line and write one text file each."""
    args = _parse_args(argv)
    settings = ScaleSettings(debug=args.debug)
    try:
        results = convert_files(args.images, settings)
    except (OSError, ValueError) as exc:
        print(f"brailleread: {exc}", file=sys.stderr)
        return 1
    if not args.output_dir.is_dir():
        print(f"brailleread: no such directory: {args.output_dir}", file=sys.stderr)
        return 1
    for result in results:
        target = args.output_dir / result.name
        target.write_text(result.binary_text, encoding="utf-8")
        print(target)
    return 0


if __name__ == "__main__":
    sys.exit(main())
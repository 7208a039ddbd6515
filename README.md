# brailleread

`brailleread` reads scanned pages of embossed Braille. It turns a photo or
scan into a black-and-white image, finds the Braille lines and reads each
cell as a six-character dot pattern such as `100000`. The pattern gives
dots 1, 2, 3 (left column, top to bottom) and then dots 4, 5, 6.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Command line

```
brailleread page1.png page2.jpg
brailleread -o results page1.png
brailleread --debug page1.png
```

Each image is binarized and read. The result is a `.txt` file named after
the image's base name up to its first dot, so `page1.png` gives `page1.txt`.
The file goes in the current directory, or in the directory given with
`-o` / `--output-dir`, and its path is printed. The file holds one Braille
line per text line. Each cell pattern is followed by a space, and the word
`space` marks a gap of one or more empty cells between two cells.

`--debug` turns on outlining of the dots and cells that were read on the
working image. It does not change the text output.

If an image cannot be read, or the output directory does not exist, the
command prints an error and exits with status 1. It then writes no files.

## Library use

```python
from brailleread.preprocess import load_binary_image
from brailleread.dots import ScaleSettings
from brailleread.converter import convert_image, format_binary
from brailleread.english import letter_for, digit_for

image = load_binary_image("page1.png")
lines, final_image = convert_image(image, ScaleSettings(), 27)
print(format_binary(lines))

print(letter_for("100000"))   # "a"
print(digit_for("110000"))    # "2"
```

`convert_image` returns the lines it found, each a list of cell patterns,
together with the image as it stands after reading. It does not modify its
input. Reading stops at the first scan that finds no reference cell, or
after `max_lines` lines (27 by default).

The modules are:

- `brailleread.preprocess`: `binarize` turns a grey or colour array into a
  0/255 image. It crops 25 pixels from the top and left, smooths the image,
  applies a local Gaussian threshold, then erodes and dilates the result.
  `load_binary_image` reads a file and binarizes it.
- `brailleread.boundary`: `find_boundary` flood-fills a black blob and
  returns its `Boundary` (box, area, width, height, centre).
- `brailleread.dots`: `ScaleSettings` holds the page geometry. `DotProcessor`
  finds dots near a point and sorts them by size into very small, medium,
  large and very large.
- `brailleread.databundle`: `DataBundle` is the record that the readers pass
  between them.
- `brailleread.chars`: `CharReader` reads one six-dot cell, either from its
  approximate centre or from its upper-left dot position.
- `brailleread.lines`: `LineIdentifier.next_char` finds the next reference
  cell on the page. `LineReader.read_line` reads a whole line to the left
  and right of that cell.
- `brailleread.converter`: `convert_image` reads a page. `format_binary`
  writes lines of cells as text.
- `brailleread.english`: `letter_for` and `digit_for` give the English
  letter or digit for a pattern, or `None`.
- `brailleread.calibration`: helpers that work out geometry from
  measurements.
- `brailleread.cli`: the `brailleread` command. It also has `convert_files`
  and `result_name` for use in code.

## Calibration

Dot sizes and spacing depend on the scan resolution. The `ScaleSettings`
defaults are:

| field | default |
|---|---|
| `dot_distance` | `(28, 32)` |
| `char_distance` | `(76, 126)` |
| `min_dot_width` | `5` |
| `max_dot_width` | `27` |
| `dot_search_error` | `(10, 10)` |

`brailleread.calibration` can derive these values from measurements:

- `average_and_spread(values)` returns the truncated integer average of the
  measured distances and half their range.
- `point_distance(a, b)` returns the horizontal and vertical distance
  between two points.
- `derive_dot_settings(min_widths, max_widths, dot_distance, dot_spread)`
  builds a `ScaleSettings`. Its minimum dot width is half the narrowest
  measured dot, but at least 5. Its maximum is 1.2 times the widest. Its
  search error is the spread, but at least 5 each way. The cell distance
  keeps its default.

## What it does not do

The package stops at dot patterns. It does not turn whole pages into
readable text; only the single-cell letter and digit lookups in
`brailleread.english` are provided. It has no graphical interface. It does
not export PDF or print, and it has no interactive calibration tool. You
measure the geometry yourself and pass it in through `ScaleSettings`.
import numpy as np
import pytest

from brailleread.converter import convert_image, format_binary
from brailleread.dots import ScaleSettings

DOT_DX = 28
DOT_DY = 32
CELL_DX = 76


def _draw_cell(image, x0, y0, pattern):
    columns = [(x0 + dx, y0 + row * DOT_DY) for dx in (0, DOT_DX) for row in range(3)]
    for bit, (x, y) in zip(pattern, columns):
        if bit == "1":
            image[y - 4:y + 5, x - 4:x + 5] = 0


def _page(rows):
    image = np.full((260, 300), 255, dtype=np.uint8)
    for y0, patterns in rows:
        for index, pattern in enumerate(patterns):
            _draw_cell(image, 40 + index * CELL_DX, y0, pattern)
    return image


def _settings():
    return ScaleSettings(char_distance=(76, 100))


def test_reads_single_line():
    image = _page([(30, ["100100", "100100"])])
    lines, _ = convert_image(image, _settings())
    assert lines == [["100100", "100100"]]


def test_reads_two_lines_in_order():
    image = _page([(30, ["100100", "100100"]), (160, ["100110", "100110"])])
    lines, _ = convert_image(image, _settings())
    assert lines == [["100100", "100100"], ["100110", "100110"]]


def test_max_lines_limits_output():
    image = _page([(30, ["100100", "100100"]), (160, ["100110", "100110"])])
    lines, _ = convert_image(image, _settings(), max_lines=1)
    assert lines == [["100100", "100100"]]


def test_zero_lines_reads_nothing():
    image = _page([(30, ["100100", "100100"])])
    lines, result = convert_image(image, _settings(), max_lines=0)
    assert lines == []
    assert np.array_equal(result, image)


def test_blank_page_gives_no_lines():
    image = np.full((200, 200), 255, dtype=np.uint8)
    lines, result = convert_image(image, _settings())
    assert lines == []
    assert result.shape == image.shape


def test_input_image_is_not_modified():
    image = _page([(30, ["100100", "100100"])])
    original = image.copy()
    convert_image(image, _settings())
    assert np.array_equal(image, original)


def test_negative_max_lines_rejected():
    with pytest.raises(ValueError):
        convert_image(np.full((50, 50), 255, dtype=np.uint8), _settings(), max_lines=-1)


def test_colour_image_rejected():
    with pytest.raises(ValueError):
        convert_image(np.full((50, 50, 3), 255, dtype=np.uint8), _settings())


def test_format_binary_layout():
    text = format_binary([["100000", "space", "110000"]])
    assert text == "100000 space 110000 \n"


def test_format_binary_empty():
    assert format_binary([]) == ""


def test_format_binary_round_trip():
    lines = [["100100", "100110"], ["010100", "space", "101000"]]
    text = format_binary(lines)
    parsed = [row.split() for row in text.split("\n")[:-1]]
    assert parsed == lines
    assert text.count("\n") == len(lines)


def test_converted_page_formats_to_text():
    image = _page([(30, ["100100", "100100"])])
    lines, _ = convert_image(image, _settings())
    assert format_binary(lines) == "100100 100100 \n"
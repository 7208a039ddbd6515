import numpy as np
import pytest

from brailleread.dots import ScaleSettings
from brailleread.lines import LineIdentifier, LineReader

WHITE = 255
TOP = 50


def _page(width, height, dots):
    image = np.full((height, width), WHITE, dtype=np.uint8)
    for x, y in dots:
        image[y - 4:y + 5, x - 4:x + 5] = 0
    return image


def _cell(left, pattern, settings):
    hdist, vdist = settings.dot_distance
    positions = [(left, TOP + r * vdist) for r in range(3)]
    positions += [(left + hdist, TOP + r * vdist) for r in range(3)]
    return [pos for pos, bit in zip(positions, pattern) if bit == "1"]


@pytest.fixture
def settings():
    return ScaleSettings()


@pytest.fixture
def line_page(settings):
    step = settings.char_distance[0]
    dots = []
    dots += _cell(50, "100000", settings)
    dots += _cell(50 + step, "110000", settings)
    dots += _cell(50 + 3 * step, "100100", settings)
    return _page(340, 200, dots)


def test_next_char_finds_reference_cell(settings):
    step = settings.char_distance[0]
    dots = _cell(50, "111111", settings) + _cell(50 + step, "100000", settings)
    image = _page(300, 200, dots)
    bundle = LineIdentifier(settings).next_char(image, (0, 0))
    hdist, vdist = settings.dot_distance
    assert bundle.is_valid_dot
    assert bundle.bin_char == "111111"
    assert bundle.char_center == (50 + hdist // 2, TOP + vdist)


def test_next_char_leaves_input_untouched(settings):
    step = settings.char_distance[0]
    dots = _cell(50, "111111", settings) + _cell(50 + step, "100000", settings)
    image = _page(300, 200, dots)
    before = image.copy()
    LineIdentifier(settings).next_char(image, (0, 0))
    assert np.array_equal(image, before)


def test_next_char_on_blank_page_is_invalid(settings):
    image = _page(200, 150, [])
    bundle = LineIdentifier(settings).next_char(image, (0, 0))
    assert bundle.is_valid_dot is False
    assert np.array_equal(bundle.image, image)


def test_lone_cell_is_not_a_reference(settings):
    image = _page(300, 200, _cell(50, "111111", settings))
    bundle = LineIdentifier(settings).next_char(image, (0, 0))
    assert bundle.is_valid_dot is False


def test_start_below_all_dots_finds_nothing(settings):
    step = settings.char_distance[0]
    dots = _cell(50, "111111", settings) + _cell(50 + step, "100000", settings)
    image = _page(300, 200, dots)
    bundle = LineIdentifier(settings).next_char(image, (0, 150))
    assert bundle.is_valid_dot is False


def test_read_line_from_first_cell(settings, line_page):
    hdist, vdist = settings.dot_distance
    center = (50 + hdist // 2, TOP + vdist)
    bundle = LineReader(settings).read_line(line_page, center)
    assert bundle.char_list == ["100000", "110000", "space", "100100"]


def test_read_line_from_last_cell_gives_same_order(settings, line_page):
    hdist, vdist = settings.dot_distance
    step = settings.char_distance[0]
    first = LineReader(settings).read_line(line_page, (50 + hdist // 2, TOP + vdist))
    last = LineReader(settings).read_line(line_page, (50 + 3 * step + hdist // 2, TOP + vdist))
    assert last.char_list == first.char_list


def test_read_line_blank_page_has_no_cells(settings):
    image = _page(340, 200, [])
    bundle = LineReader(settings).read_line(image, (64, 82))
    assert bundle.char_list == []


def test_read_line_rejects_non_positive_step():
    settings = ScaleSettings(char_distance=(0, 126))
    image = _page(100, 100, [])
    with pytest.raises(ValueError):
        LineReader(settings).read_line(image, (10, 10))
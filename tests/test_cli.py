import numpy as np
import pytest
from PIL import Image

from brailleread.cli import convert_files, main, result_name
from brailleread.dots import ScaleSettings


def _blank_page(path, size=120):
    Image.fromarray(np.full((size, size, 3), 255, dtype=np.uint8)).save(path)
    return path


@pytest.mark.parametrize(
    "path, expected",
    [
        ("page.png", "page.txt"),
        ("scans/page.png", "page.txt"),
        ("archive.tar.jpg", "archive.txt"),
        ("noext", "noext.txt"),
    ],
)
def test_result_name(path, expected):
    assert result_name(path) == expected


def test_convert_blank_page_has_no_lines(tmp_path):
    page = _blank_page(tmp_path / "blank.png")
    results = convert_files([page], ScaleSettings())
    assert len(results) == 1
    assert results[0].name == "blank.txt"
    assert results[0].lines == []
    assert results[0].binary_text == ""


def test_convert_files_keeps_order(tmp_path):
    first = _blank_page(tmp_path / "b.png")
    second = _blank_page(tmp_path / "a.png")
    results = convert_files([first, second], None)
    assert [r.name for r in results] == ["b.txt", "a.txt"]
    assert [r.source for r in results] == [first, second]


def test_convert_files_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        convert_files([tmp_path / "missing.png"], ScaleSettings())


def test_convert_files_too_small_image(tmp_path):
    page = _blank_page(tmp_path / "tiny.png", size=10)
    with pytest.raises(ValueError):
        convert_files([page], ScaleSettings())


def test_main_writes_result_file(tmp_path, capsys):
    page = _blank_page(tmp_path / "page.png")
    out = tmp_path / "out"
    out.mkdir()
    assert main([str(page), "-o", str(out)]) == 0
    written = out / "page.txt"
    assert written.read_text(encoding="utf-8") == ""
    assert str(written) in capsys.readouterr().out


def test_main_reports_missing_input(tmp_path, capsys):
    assert main([str(tmp_path / "missing.png"), "-o", str(tmp_path)]) == 1
    assert "brailleread:" in capsys.readouterr().err


def test_main_reports_missing_output_dir(tmp_path, capsys):
    page = _blank_page(tmp_path / "page.png")
    assert main([str(page), "-o", str(tmp_path / "nowhere")]) == 1
    assert "no such directory" in capsys.readouterr().err
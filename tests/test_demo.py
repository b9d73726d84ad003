from unittest.mock import patch

import pytest
from PIL import Image

from imgloader.demo import main


@pytest.fixture
def folder(tmp_path):
    images = tmp_path / "images"
    images.mkdir()
    Image.frombytes("RGBA", (4, 3), bytes((i * 7) % 250 for i in range(48))).save(
        images / "truck.png"
    )
    Image.frombytes("RGB", (5, 4), bytes((i * 3) % 250 for i in range(60))).save(
        images / "lena.jpg"
    )
    return images


@pytest.fixture
def out(tmp_path):
    target = tmp_path / "out"
    target.mkdir()
    return target


def test_demo_writes_images(folder, out):
    assert main([str(folder), "--output-dir", str(out), "--no-window", "--no-viewer"]) == 0
    expected = {"pixels1.jpg": ((4, 3), "L"), "pixels2.jpg": ((5, 4), "L"), "pixels3.jpg": ((4, 3), "RGB")}
    for name, (size, mode) in expected.items():
        with Image.open(out / name) as img:
            assert (img.size, img.mode) == (size, mode)


def test_demo_prints_ascii_and_listing(folder, out, capsys):
    assert main([str(folder), "--output-dir", str(out), "--no-window", "--no-viewer"]) == 0
    lines = capsys.readouterr().out.split("\n")[:-1]
    assert len(lines) == 8
    assert all(len(line) == 8 for line in lines[:6])
    assert sorted(lines[6:]) == [f"{folder}/lena.jpg", f"{folder}/truck.png"]


def test_demo_shows_windows_and_runs_viewer(folder, out):
    with patch.object(Image.Image, "show", autospec=True) as show, patch(
        "imgloader.data_loader.subprocess.run"
    ) as run:
        run.return_value.returncode = 0
        assert main([str(folder), "--output-dir", str(out), "--viewer", "view"]) == 0
    assert show.call_count == 3
    assert [c.args[0] for c in run.call_args_list] == [
        ["view", str(out / "pixels1.jpg")],
        ["view", str(out / "pixels2.jpg")],
        ["view", str(out / "pixels3.jpg")],
    ]


def test_demo_missing_folder(tmp_path, capsys):
    assert main([str(tmp_path / "absent"), "--no-window", "--no-viewer"]) == 1
    assert "truck.png" in capsys.readouterr().err
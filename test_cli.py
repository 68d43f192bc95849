import os

import pytest
from PIL import Image

from exif_pattern_rename import __version__
from exif_pattern_rename.cli import main

DATETIME_TAG = 0x0132


def save_jpeg(path, timestamp=None):
    image = Image.new("RGB", (4, 4))
    if timestamp is None:
        image.save(path, "JPEG")
        return
    exif = Image.Exif()
    exif[DATETIME_TAG] = timestamp
    image.save(path, "JPEG", exif=exif)


@pytest.fixture
def photos(tmp_path):
    save_jpeg(tmp_path / "IMG_0002.jpg", "2016:03:04 10:00:00")
    save_jpeg(tmp_path / "IMG_0001.jpg", "2016:03:04 08:00:00")
    (tmp_path / "notes.txt").write_text("skip me")
    return tmp_path


def test_cli_dry_run(photos, capsys):
    assert main(["--workdir", str(photos), "--dry-run"]) == 0

    out = capsys.readouterr().out
    assert "Mode: DRY RUN" in out
    assert f"{photos / 'IMG_0001.jpg'} => {photos / '20160304_000001.jpg'}" in out
    assert f"{photos / 'IMG_0002.jpg'} => {photos / '20160304_000002.jpg'}" in out
    assert sorted(os.listdir(photos)) == ["IMG_0001.jpg", "IMG_0002.jpg", "notes.txt"]


def test_cli_renames(photos):
    pattern = "{DateTime.Year}{DateTime.Month}_{File.IndexByCaptureDate}.{File.Extension}"
    assert main(["--workdir", str(photos), "--output", pattern]) == 0
    assert sorted(os.listdir(photos)) == ["201603_000001.jpg", "201603_000002.jpg", "notes.txt"]


def test_cli_missing_capture_time_fails(photos, capsys):
    save_jpeg(photos / "IMG_0000.jpg")
    assert main(["--workdir", str(photos), "--dry-run"]) == 1
    assert "=>" not in capsys.readouterr().out


def test_cli_missing_capture_time_allowed(photos, capsys):
    save_jpeg(photos / "IMG_0000.jpg")
    assert main(["--workdir", str(photos), "--dry-run", "--allow-missing-capture-time",
                 "--output", "{File.IndexByCaptureDate}_{File.Name}"]) == 0

    out = capsys.readouterr().out
    assert f"{photos / 'IMG_0000.jpg'} => {photos / '000000_IMG_0000.jpg'}" in out
    assert f"{photos / 'IMG_0002.jpg'} => {photos / '000002_IMG_0002.jpg'}" in out


def test_cli_missing_directory(tmp_path):
    assert main(["--workdir", str(tmp_path / "nope")]) == 1


def test_cli_invalid_filter(photos, capsys):
    assert main(["--workdir", str(photos), "--filter", "*.jpg", "--dry-run"]) == 1

    out = capsys.readouterr().out
    assert "Mode: DRY RUN" not in out
    assert sorted(os.listdir(photos)) == ["IMG_0001.jpg", "IMG_0002.jpg", "notes.txt"]


def test_cli_version(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--version"])
    assert excinfo.value.code == 0
    assert __version__ in capsys.readouterr().out

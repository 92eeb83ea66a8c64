import logging

from fbx4vrm_reporter.infrastructure.imaging.screenshot_loader import load_screenshot, png_dimensions


def test_load_screenshot_reads_bytes(tmp_path, png_bytes):
    path = tmp_path / "front.png"
    path.write_bytes(png_bytes)

    assert load_screenshot(path) == png_bytes


def test_load_screenshot_missing_file_returns_empty(tmp_path, caplog):
    caplog.set_level(logging.WARNING, logger="fbx4vrm_reporter")

    assert load_screenshot(tmp_path / "missing.png") == b""
    assert "Could not load screenshot" in caplog.text


def test_png_dimensions(png_bytes):
    assert png_dimensions(png_bytes) == (4, 3)


def test_png_dimensions_unknown_format():
    assert png_dimensions(b"\xff\xd8\xff\xe0 not a png at all....") == (0, 0)
    assert png_dimensions(b"") == (0, 0)

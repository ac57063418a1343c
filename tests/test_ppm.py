import pytest

from fotones.ppm import (
    PPMFormatError,
    PPMImage,
    final_file_name,
    max_rgb_value,
    output_path,
    paint_scene_ppm,
    read_ppm,
    write_ppm,
)


def _write(tmp_path, text, name="image.ppm"):
    path = tmp_path / name
    path.write_text(text)
    return path


def test_read_scales_by_max_and_resolution(tmp_path):
    path = _write(tmp_path, "P3\n#MAX=2\n# comment\n2 1\n4\n0 1 2 3 4 2\n")
    image = read_ppm(path)
    assert (image.width, image.height) == (2, 1)
    assert image.max_value == 2.0
    assert image.resolution == 4.0
    assert image.values == [0.0, 0.5, 1.0, 1.5, 2.0, 1.0]


def test_read_without_max_uses_one(tmp_path):
    path = _write(tmp_path, "P3\n1 1\n10\n10 5 0\n")
    image = read_ppm(path)
    assert image.max_value == 1.0
    assert image.values == [1.0, 0.5, 0.0]


def test_read_accepts_trailing_whitespace_after_magic(tmp_path):
    path = _write(tmp_path, "P3  \r\n1 1\n1\n1 1 1\n")
    assert read_ppm(path).values == [1.0, 1.0, 1.0]


def test_read_rejects_other_formats(tmp_path):
    path = _write(tmp_path, "P6\n1 1\n255\n")
    with pytest.raises(PPMFormatError):
        read_ppm(path)


def test_read_rejects_zero_resolution(tmp_path):
    path = _write(tmp_path, "P3\n1 1\n0\n1 1 1\n")
    with pytest.raises(PPMFormatError):
        read_ppm(path)


def test_read_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_ppm(tmp_path / "missing.ppm")


def test_final_file_name():
    assert final_file_name("ppms/forest/path.ppm") == "path.ppm"
    assert final_file_name("path.ppm") == "path.ppm"


def test_output_path():
    assert output_path("ppms/forest.ppm", "1_Clamping") == "ppms/forest_1_Clamping.ppm"
    assert output_path("noext", "0_Ninguna") == "noext_0_Ninguna.ppm"


def test_write_then_read_round_trip(tmp_path):
    values = [0.0, 0.5, 1.0, 1.5, 2.0, 1.0, 0.5, 0.5, 0.5, 2.0, 0.0, 1.0]
    image = PPMImage(2, 2, values, max_value=2.0, resolution=4.0)
    source = str(tmp_path / "scene.ppm")
    written = write_ppm(source, image, "0_Ninguna")
    assert written == output_path(source, "0_Ninguna")
    back = read_ppm(written)
    assert (back.width, back.height) == (2, 2)
    assert back.max_value == image.max_value
    assert back.resolution == image.resolution
    assert back.values == values


def test_write_header_names_source_file(tmp_path):
    image = PPMImage(1, 1, [1.0, 1.0, 1.0], max_value=1.0, resolution=255.0)
    written = write_ppm(str(tmp_path / "scene.ppm"), image, "x")
    lines = open(written).read().splitlines()
    assert lines[0] == "P3"
    assert lines[2] == "# scene.ppm"
    assert lines[3] == "1 1"
    assert lines[4] == "255"


def test_write_rejects_wrong_size(tmp_path):
    image = PPMImage(2, 2, [1.0, 1.0, 1.0])
    with pytest.raises(ValueError):
        write_ppm(str(tmp_path / "scene.ppm"), image, "x")


def test_max_rgb_value():
    pixels = [[(1.0, 2.0, 3.0), (0.5, 7.0, 0.0)], [(4.0, 4.0, 4.0), (0.0, 0.0, 0.0)]]
    assert max_rgb_value(pixels) == 7.0
    assert max_rgb_value([]) == 0.0


def test_paint_scene_round_trip(tmp_path):
    pixels = [[(0.0, 0.5, 1.0), (1.0, 0.25, 0.0)]]
    path = tmp_path / "scene.ppm"
    paint_scene_ppm(path, pixels)
    image = read_ppm(path)
    assert (image.width, image.height) == (2, 1)
    assert image.resolution == 1_000_000
    assert image.values == [c for pixel in pixels[0] for c in pixel]


def test_paint_scene_black_image(tmp_path):
    path = tmp_path / "black.ppm"
    paint_scene_ppm(path, [[(0.0, 0.0, 0.0), (0.0, 0.0, 0.0)]])
    lines = path.read_text().splitlines()
    assert lines[0] == "P3"
    assert lines[2] == "2 1"
    assert lines[4] == "0 0 0  0 0 0  "
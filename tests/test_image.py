import pytest

from pyraycast.colour import GREY, RED, RGB
from pyraycast.image import Image


def _parse(ppm: str):
    lines = ppm.split("\n", 3)
    magic = lines[0]
    width, height = map(int, lines[1].split())
    maximum = int(lines[2])
    values = [int(tok) for tok in lines[3].split()]
    return magic, width, height, maximum, values


def test_default_background_is_grey():
    image = Image(3, 2)
    assert image[0, 0] == GREY.as_ints()
    assert image[2, 1] == GREY.as_ints()


def test_custom_background():
    image = Image(2, 2, background=RED)
    assert image[1, 1] == (255, 0, 0)


def test_put_pixel_sets_value():
    image = Image(4, 4)
    image.put_pixel(1, 2, RED)
    assert image[1, 2] == (255, 0, 0)
    assert image[2, 1] == GREY.as_ints()


def test_put_pixel_truncates_channels():
    image = Image(2, 2)
    image.put_pixel(0, 0, RGB(10.9, 0.2, 254.99))
    assert image[0, 0] == (10, 0, 254)


@pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (4, 0), (0, 3)])
def test_put_pixel_out_of_bounds(x, y):
    image = Image(4, 3)
    with pytest.raises(IndexError):
        image.put_pixel(x, y, RED)


def test_invalid_dimensions():
    with pytest.raises(ValueError):
        Image(0, 5)


def test_ppm_header_and_size():
    image = Image(3, 2)
    magic, width, height, maximum, values = _parse(image.to_ppm())
    assert magic == "P3"
    assert (width, height) == (3, 2)
    assert maximum == 255
    assert len(values) == 3 * 2 * 3


def test_ppm_rows_are_flipped():
    image = Image(2, 2)
    image.put_pixel(0, 0, RED)
    _, _, _, _, values = _parse(image.to_ppm())
    pixels = [tuple(values[i:i + 3]) for i in range(0, len(values), 3)]
    # Bottom-left pixel is written first in the last row.
    assert pixels[2] == (255, 0, 0)
    assert pixels[0] == GREY.as_ints()


def test_write_ppm_round_trip(tmp_path):
    image = Image(2, 3)
    image.put_pixel(1, 1, RED)
    path = tmp_path / "out.ppm"
    image.write_ppm(path)
    assert path.read_text(encoding="ascii") == image.to_ppm()


def test_write_ppm_missing_directory(tmp_path):
    image = Image(1, 1)
    with pytest.raises(OSError):
        image.write_ppm(tmp_path / "missing" / "out.ppm")
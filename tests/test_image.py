import pytest

from strawcore.image import Image, ImageError


def _gradient(width, height, channels):
    image = Image(width, height, channels)
    for y in range(height):
        for x in range(width):
            image.write(x, y, tuple((x * 20 + y * 7 + c * 50) % 256 for c in range(channels)))
    return image


def test_default_fill_is_zero():
    image = Image(2, 3, 3)
    assert image.size == (2, 3)
    assert image.read(1, 2) == (0, 0, 0)
    assert image.to_bytes() == bytes(2 * 3 * 3)


def test_fill_value():
    image = Image(2, 2, 4, (1, 2, 3, 4))
    assert all(image.read(x, y) == (1, 2, 3, 4) for x in range(2) for y in range(2))


def test_write_then_read():
    image = Image(4, 3, 3)
    image.write(2, 1, (10, 20, 30))
    assert image.read(2, 1) == (10, 20, 30)
    assert image.read(1, 2) == (0, 0, 0)


def test_single_channel_accepts_int():
    image = Image(2, 2, 1)
    image.write(0, 1, 200)
    assert image.read(0, 1) == (200,)


def test_bad_pixels_rejected():
    image = Image(2, 2, 3)
    with pytest.raises(ValueError):
        image.write(0, 0, (1, 2))
    with pytest.raises(ValueError):
        image.write(0, 0, (1, 2, 300))
    with pytest.raises(IndexError):
        image.read(2, 0)
    with pytest.raises(IndexError):
        image.write(0, -1, (1, 2, 3))


def test_bytes_round_trip():
    image = _gradient(5, 4, 4)
    copy = Image.from_bytes(5, 4, 4, image.to_bytes())
    assert copy == image


def test_from_bytes_wrong_length():
    with pytest.raises(ImageError):
        Image.from_bytes(2, 2, 3, bytes(11))


def test_row_major_layout():
    image = Image.from_bytes(2, 1, 1, bytes([7, 9]))
    assert image.read(0, 0) == (7,)
    assert image.read(1, 0) == (9,)


@pytest.mark.parametrize("channels", [1, 3, 4])
def test_png_round_trip(tmp_path, channels):
    image = _gradient(6, 5, channels)
    path = tmp_path / "picture.png"
    image.save(path)
    assert Image.from_file(path, channels) == image


def test_bmp_round_trip(tmp_path):
    image = _gradient(6, 5, 3)
    path = tmp_path / "picture.bmp"
    image.save(path)
    assert Image.from_file(path, 3) == image


def test_jpg_keeps_size(tmp_path):
    image = _gradient(8, 6, 4)
    path = tmp_path / "picture.jpg"
    image.save(path, quality=90)
    loaded = Image.from_file(path, 3)
    assert loaded.size == image.size
    assert loaded.channels == 3


def test_unsupported_extension(tmp_path):
    with pytest.raises(ImageError):
        Image(2, 2, 3).save(tmp_path / "picture.gif")


def test_missing_file(tmp_path):
    with pytest.raises(ImageError):
        Image.from_file(tmp_path / "absent.png")


def test_blit_at_offset():
    canvas = Image(5, 5, 3)
    stamp = _gradient(2, 3, 3)
    canvas.blit(stamp, (2, 1))
    for y in range(3):
        for x in range(2):
            assert canvas.read(x + 2, y + 1) == stamp.read(x, y)
    assert canvas.read(0, 0) == (0, 0, 0)
    assert canvas.read(4, 4) == (0, 0, 0)


def test_blit_out_of_bounds():
    canvas = Image(3, 3, 3)
    with pytest.raises(IndexError):
        canvas.blit(Image(2, 2, 3), (2, 0))


def test_blit_channel_mismatch():
    with pytest.raises(ValueError):
        Image(3, 3, 3).blit(Image(1, 1, 4))
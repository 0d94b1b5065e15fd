import numpy as np
import pytest
from PIL import Image

from pixmatrix.buffer import lock_for_read, lock_for_write, new_image, pack_image, unpack_image
from pixmatrix.errors import NullInputError


def test_new_image_is_transparent_black_rgba() -> None:
    img = new_image(3, 2)
    assert img.mode == "RGBA"
    assert img.size == (3, 2)
    assert np.asarray(img).sum() == 0


def test_new_image_rejects_negative_size() -> None:
    with pytest.raises(ValueError):
        new_image(-1, 2)


def test_pack_image_writes_bgra_bytes() -> None:
    img = Image.new("RGBA", (1, 1), (30, 20, 10, 200))
    assert pack_image(img).tolist() == [10, 20, 30, 200]


def test_pack_image_converts_rgb_to_opaque() -> None:
    img = Image.new("RGB", (2, 1), (1, 2, 3))
    assert pack_image(img).tolist() == [3, 2, 1, 255, 3, 2, 1, 255]


def test_unpack_image_checks_buffer_length() -> None:
    with pytest.raises(ValueError):
        unpack_image(np.zeros(7, dtype=np.uint8), 1, 2)


def test_read_view_is_read_only_copy() -> None:
    img = Image.new("RGBA", (2, 2), (5, 6, 7, 8))
    with lock_for_read(img) as view:
        assert view.width == 2 and view.height == 2
        assert view.data.size == 16
        assert not view.data.flags.writeable
        with pytest.raises(ValueError):
            view.data[0] = 1
    assert img.getpixel((0, 0)) == (5, 6, 7, 8)


def test_read_view_rejects_none() -> None:
    with pytest.raises(NullInputError):
        with lock_for_read(None):
            pass


def test_write_view_commits_on_exit() -> None:
    with lock_for_write(2, 1) as view:
        assert view.image is None
        view.data[:] = [10, 20, 30, 255, 40, 50, 60, 0]

    assert view.image is not None
    assert view.image.size == (2, 1)
    assert view.image.getpixel((0, 0)) == (30, 20, 10, 255)
    assert view.image.getpixel((1, 0)) == (60, 50, 40, 0)
    assert not view.data.flags.writeable


def test_write_view_discards_buffer_on_error() -> None:
    captured = {}
    with pytest.raises(RuntimeError):
        with lock_for_write(1, 1) as view:
            captured["view"] = view
            view.data[:] = 255
            raise RuntimeError("boom")

    assert captured["view"].image is None


def test_as_pixels_uses_x_major_traversal() -> None:
    with lock_for_write(3, 2) as view:
        view.data[2::4] = np.arange(6, dtype=np.uint8)
        pixels = view.as_pixels()
        for x in range(3):
            for y in range(2):
                assert pixels[x, y, 2] == x * 2 + y

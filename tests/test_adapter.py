import numpy as np
import pytest
from PIL import Image

from pixmatrix.adapter import BitmapAdapter
from pixmatrix.config import ConversionConfig
from pixmatrix.errors import NullInputError


def test_adapter_copies_initial_image() -> None:
    src = Image.new("RGBA", (2, 1), (30, 20, 10, 255))
    adapter = BitmapAdapter(src)
    src.putpixel((0, 0), (0, 0, 0, 0))

    assert adapter.image is not src
    assert adapter.to_matrix("red").tolist() == [[30], [30]]


def test_adapter_from_numpy_requires_format() -> None:
    arr = np.zeros((1, 2, 4), dtype=np.uint8)
    with pytest.raises(ValueError):
        BitmapAdapter(arr)

    arr[..., 0] = 40
    adapter = BitmapAdapter(arr, input_format="bgra_u8_hwc")
    assert adapter.to_matrix("blue").tolist() == [[40], [40]]


def test_adapter_from_size_starts_empty() -> None:
    adapter = BitmapAdapter.from_size(3, 2)
    assert adapter.image.size == (3, 2)
    assert adapter.to_matrix("alpha").tolist() == [[0, 0], [0, 0], [0, 0]]


def test_adapter_from_matrix_replaces_image() -> None:
    adapter = BitmapAdapter.from_size(1, 1)
    m = np.array([[1, 2], [3, 4], [5, 6]])
    out = adapter.from_matrix(m, m, m)

    assert adapter.image is out
    assert out.size == (3, 2)
    assert adapter.to_matrix("green").tolist() == m.tolist()


def test_adapter_without_image() -> None:
    adapter = BitmapAdapter()
    assert adapter.image is None
    assert adapter.grayscale() is None

    with pytest.raises(NullInputError):
        adapter.to_matrix("red")
    with pytest.raises(NullInputError):
        adapter.from_matrix(np.zeros((1, 1)))


def test_adapter_grayscale_and_static_variant() -> None:
    img = Image.new("RGBA", (1, 1), (100, 150, 200, 9))
    adapter = BitmapAdapter(img)
    assert adapter.grayscale().getpixel((0, 0)) == (141, 141, 141, 9)
    assert BitmapAdapter.grayscale_of(img).getpixel((0, 0)) == (141, 141, 141, 9)
    assert BitmapAdapter.grayscale_of(None) is None


def test_adapter_forwards_config() -> None:
    adapter = BitmapAdapter.from_size(1, 1, config=ConversionConfig(default_alpha=3))
    adapter.from_matrix(np.zeros((1, 1)))
    assert adapter.to_matrix("alpha").tolist() == [[3]]


def test_adapter_image_setter_checks_type() -> None:
    adapter = BitmapAdapter()
    with pytest.raises(TypeError):
        adapter.image = np.zeros((1, 1, 4), dtype=np.uint8)
    adapter.image = Image.new("RGBA", (1, 1))
    assert "1x1" in repr(adapter)
    adapter.image = None
    assert repr(adapter) == "BitmapAdapter(image=None)"

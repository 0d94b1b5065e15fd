import numpy as np
import pytest
from PIL import Image

from pixmatrix.errors import NullInputError
from pixmatrix.inputs import ImageFormat, as_image, parse_image_format


def test_parse_image_format() -> None:
    assert parse_image_format("BGRA_U8_HWC") is ImageFormat.BGRA_U8_HWC
    assert parse_image_format(ImageFormat.GRAY_U8_HW) is ImageFormat.GRAY_U8_HW
    with pytest.raises(ValueError):
        parse_image_format("rgb_f32_chw")


def test_as_image_bgr_to_rgba() -> None:
    bgr = np.zeros((2, 3, 3), dtype=np.uint8)
    bgr[..., 0] = 255  # blue
    img = as_image(bgr, input_format="bgr_u8_hwc")
    assert img.mode == "RGBA"
    assert img.size == (3, 2)
    assert img.getpixel((0, 0)) == (0, 0, 255, 255)


def test_as_image_bgra_and_rgba() -> None:
    px = np.array([[[1, 2, 3, 4]]], dtype=np.uint8)
    assert as_image(px, input_format="bgra_u8_hwc").getpixel((0, 0)) == (3, 2, 1, 4)
    assert as_image(px, input_format="rgba_u8_hwc").getpixel((0, 0)) == (1, 2, 3, 4)


def test_as_image_gray() -> None:
    gray = np.full((1, 2), 90, dtype=np.uint8)
    assert as_image(gray, input_format="gray_u8_hw").getpixel((1, 0)) == (90, 90, 90, 255)


def test_as_image_validates_arrays() -> None:
    with pytest.raises(ValueError):
        as_image(np.zeros((2, 2, 3), dtype=np.float32), input_format="rgb_u8_hwc")
    with pytest.raises(ValueError):
        as_image(np.zeros((2, 2, 4), dtype=np.uint8), input_format="rgb_u8_hwc")
    with pytest.raises(ValueError):
        as_image(np.zeros((2, 2), dtype=np.uint8))


def test_as_image_copies_pil_images() -> None:
    src = Image.new("RGBA", (1, 1), (1, 2, 3, 4))
    out = as_image(src)
    assert out is not src
    assert out.getpixel((0, 0)) == (1, 2, 3, 4)

    converted = as_image(Image.new("L", (1, 1), 50))
    assert converted.mode == "RGBA"
    assert converted.getpixel((0, 0)) == (50, 50, 50, 255)


def test_as_image_rejects_none_and_other_types() -> None:
    with pytest.raises(NullInputError):
        as_image(None)
    with pytest.raises(TypeError):
        as_image([[1, 2]])

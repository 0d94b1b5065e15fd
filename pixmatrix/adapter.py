"""Stateful convenience wrapper around the conversion functions.

:class:`BitmapAdapter` holds one image and exposes the extraction,
composition and grayscale operations as methods on it. The free functions
in :mod:`pixmatrix.extract`, :mod:`pixmatrix.composer` and
:mod:`pixmatrix.grayscale` do the actual work and never touch adapter state.
"""

from __future__ import annotations

from typing import Any, Optional

import numpy as np
from PIL import Image

from pixmatrix.buffer import new_image
from pixmatrix.channels import Channel
from pixmatrix.composer import compose
from pixmatrix.config import ConversionConfig
from pixmatrix.errors import NullInputError
from pixmatrix.extract import extract_channel
from pixmatrix.grayscale import to_grayscale
from pixmatrix.inputs import ImageFormat, as_image


class BitmapAdapter:
    """Work with one image as a set of 2D integer channel matrices.

    Parameters
    ----------
    image:
        Initial image: a Pillow image (copied) or a numpy array together with
        ``input_format``. ``None`` starts the adapter without an image.
    input_format:
        Layout of ``image`` when it is a numpy array.
    config:
        Options forwarded to every operation.

    Examples
    --------
    >>> adapter = BitmapAdapter.from_size(2, 1)
    >>> red = adapter.to_matrix("red")
    >>> image = adapter.from_matrix(red, red, red)
    """

    def __init__(
        self,
        image: Any = None,
        *,
        input_format: str | ImageFormat | None = None,
        config: ConversionConfig | None = None,
    ) -> None:
        self._image: Optional[Image.Image] = None
        self.config = config
        if image is not None:
            self.image = as_image(image, input_format=input_format)

    @classmethod
    def from_size(
        cls, width: int, height: int, *, config: ConversionConfig | None = None
    ) -> "BitmapAdapter":
        """Create an adapter holding an empty (transparent black) image."""

        adapter = cls(config=config)
        adapter.image = new_image(width, height)
        return adapter

    @property
    def image(self) -> Optional[Image.Image]:
        return self._image

    @image.setter
    def image(self, value: Optional[Image.Image]) -> None:
        if value is not None and not isinstance(value, Image.Image):
            raise TypeError(f"image must be a PIL.Image.Image or None, got {type(value)}")
        self._image = value

    def to_matrix(self, channel: str | Channel) -> np.ndarray:
        """Extract ``channel`` of the held image; ``NullInputError`` if there is none."""

        return extract_channel(self._image, channel, config=self.config)

    def from_matrix(self, *matrices: Any) -> Image.Image:
        """Replace the held image with one composed from 1, 3 or 4 matrices.

        The adapter must already hold an image, even though it is replaced
        entirely.
        """

        if self._image is None:
            raise NullInputError("Image cannot be None")
        self._image = compose(*matrices, config=self.config)
        return self._image

    def grayscale(self) -> Optional[Image.Image]:
        """Grayscale copy of the held image, or ``None`` when there is none."""

        return to_grayscale(self._image, config=self.config)

    @staticmethod
    def grayscale_of(
        image: Optional[Image.Image], *, config: ConversionConfig | None = None
    ) -> Optional[Image.Image]:
        return to_grayscale(image, config=config)

    def __repr__(self) -> str:
        if self._image is None:
            return "BitmapAdapter(image=None)"
        w, h = self._image.size
        return f"BitmapAdapter(image={w}x{h} {self._image.mode})"

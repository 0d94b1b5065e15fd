"""
Example usage of pixmatrix channel matrices.

This example demonstrates:
1. Extracting channels from an image
2. Editing a channel as a plain numpy matrix
3. Composing the channels back into an image
4. Grayscale conversion
"""

import os
import sys

import numpy as np
from PIL import Image

# Add parent directory to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from pixmatrix import BitmapAdapter, compose_argb, extract_channels, to_grayscale
from pixmatrix.channels import Channel


def create_sample_image(width=64, height=48):
    """Create a horizontal gradient with a translucent square."""
    hwc = np.zeros((height, width, 4), dtype=np.uint8)
    hwc[..., 0] = np.linspace(0, 255, width, dtype=np.uint8)[None, :]
    hwc[..., 1] = 128
    hwc[..., 2] = 255 - hwc[..., 0]
    hwc[..., 3] = 255
    hwc[10:30, 10:30, 3] = 96
    return Image.fromarray(hwc)


def example_edit_channel():
    print("\n" + "="*60)
    print("Example 1: Brighten the red channel")
    print("="*60)

    image = create_sample_image()
    channels = extract_channels(image)
    for channel, matrix in channels.items():
        print(f"{channel.value:>5}: shape={matrix.shape} min={matrix.min()} max={matrix.max()}")

    # Values above 255 are clamped when composing.
    red = channels[Channel.RED] + 80
    out = compose_argb(channels[Channel.ALPHA], red, channels[Channel.GREEN], channels[Channel.BLUE])
    print(f"Composed image: size={out.size} mode={out.mode}")
    return out


def example_adapter():
    print("\n" + "="*60)
    print("Example 2: Stateful adapter")
    print("="*60)

    adapter = BitmapAdapter(create_sample_image())
    gray = adapter.to_matrix("green")
    adapter.from_matrix(255 - gray)
    print(f"Inverted green as gray image: {adapter!r}")

    print(f"Grayscale pixel: {to_grayscale(create_sample_image()).getpixel((0, 0))}")


if __name__ == "__main__":
    example_edit_channel()
    example_adapter()

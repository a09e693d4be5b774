"""Gradient rasterization with Pillow.

A frame is cut from an "extended canvas" twice the output width that holds the
full horizontal gradient. Sliding the crop window right by `progress * width`
pixels makes the gradient appear to scroll.
"""
import math

from PIL import Image, ImageDraw

from gradient_loop.colors import RGB


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def interpolate_color(color1: RGB, color2: RGB, ratio: float) -> RGB:
    """Linear per-channel blend; ratio 0 gives color1, ratio 1 gives color2.

    Channels are rounded half-up, which is half-away-from-zero for the
    non-negative values produced here.
    """
    ratio = max(0.0, min(1.0, ratio))
    return tuple(
        max(0, min(255, _round_half_up((1.0 - ratio) * a + ratio * b)))
        for a, b in zip(color1, color2)
    )


def render_extended(color1: RGB, color2: RGB, width: int, height: int) -> Image.Image:
    """Render the gradient across a canvas of 2*width columns."""
    extended_width = width * 2
    img = Image.new("RGB", (extended_width, height))
    if extended_width == 0 or height == 0:
        return img

    draw = ImageDraw.Draw(img)
    for x in range(extended_width):
        color = interpolate_color(color1, color2, x / extended_width)
        # every row is identical, so fill the whole column at once
        draw.rectangle((x, 0, x, height - 1), fill=color)
    return img


def crop_window(canvas: Image.Image, width: int, height: int, progress: float) -> Image.Image:
    """Cut a width x height window starting at floor(progress * width)."""
    if width == 0 or height == 0:
        return Image.new("RGB", (width, height))
    progress = max(0.0, min(1.0, progress))
    offset = min(int(math.floor(progress * width)), canvas.width - width)
    return canvas.crop((offset, 0, offset + width, height))


def render_frame(color1: RGB, color2: RGB, width: int, height: int, progress: float) -> Image.Image:
    canvas = render_extended(color1, color2, width, height)
    return crop_window(canvas, width, height, progress)

"""Load, save and display grayscale and RGB images held as nested lists of ints.

Grayscale images are lists of rows of intensities; RGB images are lists of
rows of ``(r, g, b)`` tuples. Width and height follow from the nesting.
"""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path
from typing import IO, Iterable, Sequence, Union

from PIL import Image

# Luminance formula: Y = 0.2126 R + 0.7152 G + 0.0722 B
R_FACTOR = 0.2126
G_FACTOR = 0.7152
B_FACTOR = 0.0722

SHADES = " .-+#@"
DEFAULT_VIEWER = "./third-party/catimg/bin/catimg"
WINDOW_TITLE = "Loaded Image"

PathLike = Union[str, "os.PathLike[str]"]
GrayPixels = list[list[int]]
RGBPixel = tuple[int, int, int]
RGBPixels = list[list[RGBPixel]]

_CHANNELS = {"L": 1, "LA": 2, "RGB": 3, "RGBA": 4}
_GRAY_MODES = {"1", "I", "I;16", "I;16B", "I;16L", "I;16N", "F"}


def _require_file(filename: PathLike) -> Path:
    path = Path(filename)
    if not path.exists():
        raise FileNotFoundError(f"no such file: {os.fspath(filename)}")
    return path


def _normalise(img: Image.Image) -> Image.Image:
    """Bring an image into one of the L, LA, RGB or RGBA modes."""
    mode = img.mode
    if mode in _CHANNELS:
        return img.copy()
    if mode == "P":
        return img.convert("RGBA" if "transparency" in img.info else "RGB")
    if mode == "PA":
        return img.convert("RGBA")
    if mode in _GRAY_MODES:
        return img.convert("L")
    return img.convert("RGB")


def _open(filename: PathLike) -> Image.Image:
    path = _require_file(filename)
    with Image.open(path) as img:
        img.load()
        return _normalise(img)


def _pixel_values(img: Image.Image) -> list:
    data = img.tobytes()
    channels = _CHANNELS[img.mode]
    if channels == 1:
        return list(data)
    return list(zip(*[iter(data)] * channels))


def _rows(values: list, width: int) -> list[list]:
    return [values[start:start + width] for start in range(0, len(values), width)]


def _luminance(pixel: Sequence[int]) -> int:
    r, g, b = pixel[0], pixel[1], pixel[2]
    return int(R_FACTOR * r + G_FACTOR * g + B_FACTOR * b)


def load_gray(filename: PathLike) -> GrayPixels:
    """Load an image as grayscale, converting colour images by luminance."""
    img = _open(filename)
    channels = _CHANNELS[img.mode]
    values = _pixel_values(img)
    if channels == 1:
        gray = values
    elif channels in (3, 4):
        gray = [_luminance(pixel) for pixel in values]
    else:
        raise ValueError(f"cannot convert a {channels}-channel image to grayscale")
    return _rows(gray, img.width)


def load_rgb(filename: PathLike) -> RGBPixels:
    """Load an image with at least three channels as RGB; alpha is dropped."""
    img = _open(filename)
    channels = _CHANNELS[img.mode]
    if channels < 3:
        raise ValueError(f"image has {channels} channel(s); RGB needs at least 3")
    values = [pixel[:3] for pixel in _pixel_values(img)]
    return _rows(values, img.width)


def _dimensions(pixels: Sequence[Sequence]) -> tuple[int, int]:
    if not pixels or not pixels[0]:
        raise ValueError("image must have a positive width and height")
    width = len(pixels[0])
    if any(len(row) != width for row in pixels):
        raise ValueError("all rows must have the same length")
    return width, len(pixels)


def _rgb_channels(pixel: Iterable[int]) -> tuple[int, ...]:
    channels = tuple(pixel)[:3]
    if len(channels) != 3:
        raise ValueError("every RGB pixel needs three channels")
    return channels


def _gray_image(pixels: Sequence[Sequence[int]]) -> Image.Image:
    size = _dimensions(pixels)
    data = bytes(value & 0xFF for row in pixels for value in row)
    return Image.frombytes("L", size, data)


def _rgb_image(pixels: Sequence[Sequence[Sequence[int]]]) -> Image.Image:
    size = _dimensions(pixels)
    data = bytes(
        channel & 0xFF
        for row in pixels
        for pixel in row
        for channel in _rgb_channels(pixel)
    )
    return Image.frombytes("RGB", size, data)


def dump_gray(pixels: Sequence[Sequence[int]], filename: PathLike) -> None:
    """Save grayscale pixels; the format follows the file extension."""
    _gray_image(pixels).save(filename)


def dump_rgb(pixels: Sequence[Sequence[Sequence[int]]], filename: PathLike) -> None:
    """Save RGB pixels; the format follows the file extension."""
    _rgb_image(pixels).save(filename)


def display_gray_x_server(pixels: Sequence[Sequence[int]]) -> None:
    """Show grayscale pixels in a window."""
    _gray_image(pixels).show(title=WINDOW_TITLE)


def display_rgb_x_server(pixels: Sequence[Sequence[Sequence[int]]]) -> None:
    """Show RGB pixels in a window."""
    _rgb_image(pixels).show(title=WINDOW_TITLE)


def _shade(intensity: int) -> str:
    if not 0 <= intensity <= 255:
        raise ValueError(f"intensity {intensity} is outside 0..255")
    # Full intensity lands one past the last shade, on a NUL character.
    return (SHADES + "\0")[intensity * len(SHADES) // 255] * 2


def gray_ascii(pixels: Sequence[Sequence[int]]) -> str:
    """Render grayscale pixels as ASCII art, two characters per pixel."""
    _dimensions(pixels)
    return "".join(
        "".join(_shade(value) for value in row) + "\n" for row in pixels
    )


def rgb_ascii(pixels: Sequence[Sequence[Sequence[int]]]) -> str:
    """Render RGB pixels as ASCII art using the mean of the three channels."""
    _dimensions(pixels)
    return "".join(
        "".join(_shade(sum(_rgb_channels(pixel)) // 3) for pixel in row) + "\n"
        for row in pixels
    )


def display_gray_ascii(pixels: Sequence[Sequence[int]], stream: IO[str] | None = None) -> None:
    """Write grayscale ASCII art to ``stream`` (standard output by default)."""
    (sys.stdout if stream is None else stream).write(gray_ascii(pixels))


def display_rgb_ascii(
    pixels: Sequence[Sequence[Sequence[int]]], stream: IO[str] | None = None
) -> None:
    """Write RGB ASCII art to ``stream`` (standard output by default)."""
    (sys.stdout if stream is None else stream).write(rgb_ascii(pixels))


def _run_viewer(filename: PathLike, viewer: str) -> int:
    _require_file(filename)
    return subprocess.run([viewer, os.fspath(filename)], check=False).returncode


def display_gray_cmd(filename: PathLike, viewer: str = DEFAULT_VIEWER) -> int:
    """Show an image file with a terminal viewer; returns its exit status."""
    return _run_viewer(filename, viewer)


def display_rgb_cmd(filename: PathLike, viewer: str = DEFAULT_VIEWER) -> int:
    """Show an image file with a terminal viewer; returns its exit status."""
    return _run_viewer(filename, viewer)


def list_directory(directory: PathLike) -> list[str]:
    """Return the paths of all entries in ``directory``."""
    base = os.fspath(directory)
    return [f"{base}/{name}" for name in os.listdir(base)]
"""Reading and writing plain (P3) PPM images."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from itertools import islice
from typing import NamedTuple, TextIO

import numpy as np


class PpmHeader(NamedTuple):
    """Dimensions and maximum sample value of a PPM image."""

    width: int
    height: int
    maxval: int


@dataclass(eq=False)
class PpmImage:
    """An RGB image held as an integer array of shape (height, width, 3)."""

    pixels: np.ndarray
    maxval: int = 255

    def __post_init__(self) -> None:
        pixels = np.asarray(self.pixels, dtype=int)
        if (
            pixels.ndim != 3
            or pixels.shape[2] != 3
            or pixels.shape[0] == 0
            or pixels.shape[1] == 0
        ):
            raise ValueError("pixels must have shape (height, width, 3)")
        if self.maxval <= 0:
            raise ValueError("maxval must be positive")
        self.pixels = pixels

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        return self.pixels.shape[0]

    def channel(self, index: int) -> np.ndarray:
        """One colour channel scaled to [0, 1] by ``maxval``."""
        if index not in (0, 1, 2):
            raise ValueError(f"channel must be 0, 1 or 2, not {index}")
        return self.pixels[:, :, index] / float(self.maxval)


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split("#", 1)[0].split()


def _parse_header(tokens: Iterator[str]) -> PpmHeader:
    magic = next(tokens, None)
    if magic != "P3":
        raise ValueError("invalid PPM format (expected P3)")
    values = list(islice(tokens, 3))
    if len(values) < 3:
        raise ValueError("truncated PPM header")
    try:
        width, height, maxval = (int(v) for v in values)
    except ValueError as exc:
        raise ValueError("invalid PPM header") from exc
    if width <= 0 or height <= 0 or maxval <= 0:
        raise ValueError("invalid PPM header")
    return PpmHeader(width, height, maxval)


def read_ppm_header(stream: TextIO) -> PpmHeader:
    """Read the header of a P3 image, skipping comments.

    The stream is consumed through the end of the line holding ``maxval``.
    """
    return _parse_header(_tokens(stream))


def read_ppm(stream: TextIO) -> PpmImage:
    """Read a whole P3 image."""
    tokens = _tokens(stream)
    header = _parse_header(tokens)
    count = header.width * header.height * 3
    values = list(islice(tokens, count))
    if len(values) < count:
        raise ValueError("error reading PPM pixel: unexpected end of data")
    try:
        samples = [int(v) for v in values]
    except ValueError as exc:
        raise ValueError("error reading PPM pixel") from exc
    pixels = np.array(samples, dtype=int).reshape(header.height, header.width, 3)
    return PpmImage(pixels, header.maxval)


def write_ppm(out: TextIO, image: PpmImage) -> None:
    """Write ``image`` as a P3 file, one image row per line."""
    out.write(f"P3\n{image.width} {image.height}\n{image.maxval}\n")
    for row in image.pixels:
        out.write("".join(f"{r} {g} {b} " for r, g, b in row) + "\n")
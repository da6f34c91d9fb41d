"""Dense real matrices with FFT-based 2D convolution."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TextIO

import numpy as np


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _take(tokens: Iterator[str], count: int, what: str) -> list[str]:
    taken = []
    for token in tokens:
        taken.append(token)
        if len(taken) == count:
            return taken
    if len(taken) == count:
        return taken
    raise ValueError(f"unexpected end of input while reading {what}")


def _check_dims(rows: int, cols: int) -> None:
    if rows <= 0 or cols <= 0:
        raise ValueError("invalid matrix dimensions")


def _check_channel(channel: int) -> None:
    if channel not in (0, 1, 2):
        raise ValueError(f"channel must be 0, 1 or 2, not {channel}")


class Matrix:
    """A two-dimensional matrix of floats."""

    def __init__(self, data) -> None:
        arr = np.array(data, dtype=float)
        if arr.ndim != 2 or arr.size == 0:
            raise ValueError("invalid matrix dimensions")
        self.data = arr

    @classmethod
    def zeros(cls, rows: int, cols: int) -> Matrix:
        """A rows x cols matrix filled with zeros."""
        _check_dims(rows, cols)
        return cls(np.zeros((rows, cols)))

    @classmethod
    def read(cls, stream: TextIO) -> Matrix:
        """Read 'rows cols' followed by the elements in row order."""
        tokens = _tokens(stream)
        try:
            rows, cols = (int(t) for t in _take(tokens, 2, "matrix dimensions"))
        except ValueError as exc:
            raise ValueError("invalid matrix dimensions") from exc
        _check_dims(rows, cols)
        try:
            values = [float(t) for t in _take(tokens, rows * cols, "matrix elements")]
        except ValueError as exc:
            raise ValueError("error reading matrix elements") from exc
        return cls(np.array(values).reshape(rows, cols))

    @classmethod
    def from_ppm_channel(
        cls, stream: TextIO, rows: int, cols: int, channel: int, maxval: int
    ) -> Matrix:
        """Read rows x cols RGB pixels and keep one channel, normalised to [0, 1]."""
        _check_dims(rows, cols)
        _check_channel(channel)
        try:
            values = [int(t) for t in _take(_tokens(stream), rows * cols * 3, "PPM pixels")]
        except ValueError as exc:
            raise ValueError("error reading PPM pixel") from exc
        pixels = np.array(values, dtype=float).reshape(rows, cols, 3)
        return cls(pixels[:, :, channel] / float(maxval))

    @property
    def rows(self) -> int:
        return self.data.shape[0]

    @property
    def cols(self) -> int:
        return self.data.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return self.rows, self.cols

    def _check_index(self, index: tuple[int, int]) -> tuple[int, int]:
        i, j = index
        if not (0 <= i < self.rows and 0 <= j < self.cols):
            raise IndexError("matrix index out of range")
        return i, j

    def __getitem__(self, index: tuple[int, int]) -> float:
        return float(self.data[self._check_index(index)])

    def __setitem__(self, index: tuple[int, int], value: float) -> None:
        self.data[self._check_index(index)] = value

    def __str__(self) -> str:
        return "".join(
            "".join(f"{v:g} " for v in row) + "\n" for row in self.data
        )

    def convolve2d(self, kernel: Matrix) -> Matrix:
        """Full 2D convolution, computed with zero-padded power-of-two FFTs."""
        out_rows = self.rows + kernel.rows - 1
        out_cols = self.cols + kernel.cols - 1
        fft_shape = (1 << (out_rows - 1).bit_length(), 1 << (out_cols - 1).bit_length())
        spectrum = np.fft.fft2(self.data, s=fft_shape) * np.fft.fft2(kernel.data, s=fft_shape)
        result = np.fft.ifft2(spectrum).real[:out_rows, :out_cols]
        return Matrix(result)

    def save_as_ppm_channel(self, out: TextIO, maxval: int, channel: int) -> None:
        """Write the matrix as PPM pixels with the value in one channel only."""
        _check_channel(channel)
        scaled = self.data * maxval
        rounded = np.sign(scaled) * np.floor(np.abs(scaled) + 0.5)
        clamped = np.clip(rounded, 0, maxval).astype(int)
        templates = ("{} 0 0 ", "0 {} 0 ", "0 0 {} ")
        template = templates[channel]
        for row in clamped:
            out.write("".join(template.format(int(v)) for v in row) + "\n")
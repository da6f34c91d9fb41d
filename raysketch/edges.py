"""Sobel edge detection on PPM images."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

import numpy as np

from raysketch.matrix import Matrix
from raysketch.ppm import PpmImage, read_ppm, write_ppm

SOBEL_V = Matrix([[-1, -2, -1], [0, 0, 0], [1, 2, 1]])
SOBEL_H = Matrix([[-1, 0, 1], [-2, 0, 2], [-1, 0, 1]])

DEFAULT_EDGE_THRESHOLD = 0.25


def detect_edges(matrix: Matrix) -> Matrix:
    """Gradient magnitude of the full Sobel convolutions of ``matrix``."""
    grad_v = matrix.convolve2d(SOBEL_V)
    grad_h = matrix.convolve2d(SOBEL_H)
    return Matrix(np.hypot(grad_h.data, grad_v.data))


def edge_image(image: PpmImage, edge_threshold: float = DEFAULT_EDGE_THRESHOLD) -> PpmImage:
    """Per-channel edge map: ``maxval`` where the gradient exceeds the threshold, else 0."""
    magnitudes = np.stack(
        [
            detect_edges(Matrix(image.channel(c))).data[: image.height, : image.width]
            for c in range(3)
        ],
        axis=-1,
    )
    return PpmImage(np.where(magnitudes > edge_threshold, image.maxval, 0), image.maxval)


def main(argv: Sequence[str] | None = None) -> int:
    """Detect edges in a P3 image and write them as a new P3 image."""
    parser = argparse.ArgumentParser(description="Detect edges in a plain PPM image.")
    parser.add_argument("input", nargs="?", help="input image (standard input if omitted)")
    parser.add_argument("output", nargs="?", default="output.ppm", help="output image")
    args = parser.parse_args(argv)

    try:
        if args.input:
            with open(args.input, encoding="utf-8") as src:
                image = read_ppm(src)
        else:
            image = read_ppm(sys.stdin)
        edges = edge_image(image)
        with open(args.output, "w", encoding="utf-8") as dst:
            write_ppm(dst, edges)
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"Image saved to {args.output}")
    return 0